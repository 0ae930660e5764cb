"""Step canônico: export.manifest (v1).

Último Step da run: projeta a configuração resolvida, o container
solicitado no orçamento, o `java.home` resolvido e a alocação mínima do
cluster no `config.json` da raiz do staging. Só é alcançado quando todos
os Steps mandatory anteriores tiveram sucesso, garantindo que nenhum
manifest parcial seja escrito.
"""

from __future__ import annotations

from dataclasses import dataclass

from llap_packager.core.config import keys
from llap_packager.core.pipeline.context import PackagingContext
from llap_packager.core.pipeline.step import Step
from llap_packager.core.pipeline.types import StepKind, StepPolicy, StepResult, StepStatus
from llap_packager.core.traceability.manifest import JAVA_HOME, build_manifest, save_manifest


@dataclass
class ManifestExportStep(Step):
    id: str = "export.manifest"
    kind: StepKind = StepKind.EXPORT
    policy: StepPolicy = StepPolicy.MANDATORY

    def run(self, ctx: PackagingContext) -> StepResult:
        effective = ctx.resolved.effective
        manifest = build_manifest(
            ctx.resolved,
            java_home=ctx.get_artifact(JAVA_HOME),
            min_allocation_mb=effective.get_int(keys.MIN_ALLOCATION_MB),
            min_allocation_vcores=effective.get_int(keys.MIN_ALLOCATION_VCORES),
            container_mb=ctx.budget.container_mb,
        )
        path = ctx.staging.manifest_path
        save_manifest(manifest, path, ctx.env.fs)
        ctx.set_artifact("manifest", manifest)

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"manifest written to {path.name}",
            artifacts={keys.MANIFEST_FILE: str(path)},
            payload={"manifest": manifest.to_dict()},
        )
