"""Step canônico: preflight.configs (v1).

Responsabilidades:
- garantir que todo arquivo de configuração obrigatório do cluster é
  localizável pelo lookup de recursos do ambiente
- registrar quais arquivos opcionais estão presentes (ausência é tolerada)
- publicar o mapa nome → caminho como artifact `configs.required` /
  `configs.optional`

Limites explícitos (v1):
- NÃO copia arquivos (isso é de `config.required` / `config.optional`)
- NÃO lê conteúdo dos arquivos
"""

from __future__ import annotations

from dataclasses import dataclass

from llap_packager.core.config import keys
from llap_packager.core.config.resources import locate_optional, locate_required
from llap_packager.core.pipeline.context import PackagingContext
from llap_packager.core.pipeline.step import Step
from llap_packager.core.pipeline.types import StepKind, StepPolicy, StepResult, StepStatus


@dataclass
class PreflightConfigsStep(Step):
    """Verifica a presença dos arquivos de configuração do cluster."""

    id: str = "preflight.configs"
    kind: StepKind = StepKind.PREFLIGHT
    policy: StepPolicy = StepPolicy.MANDATORY

    def run(self, ctx: PackagingContext) -> StepResult:
        resources = ctx.env.resources

        # MissingConfigResource propaga: o Engine aborta a run
        required = locate_required(resources, keys.DAEMON_CONFIGS)
        optional = locate_optional(resources, keys.OPTIONAL_CONFIGS)
        missing_optional = [n for n in keys.OPTIONAL_CONFIGS if n not in optional]

        ctx.set_artifact("configs.required", required)
        ctx.set_artifact("configs.optional", optional)

        ctx.log(
            step_id=self.id,
            level="INFO",
            message="config resources located",
            required=sorted(required),
            optional=sorted(optional),
            missing_optional=missing_optional,
        )

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"{len(required)} required config files located",
            metrics={
                "required": len(required),
                "optional": len(optional),
                "missing_optional": len(missing_optional),
            },
            artifacts={name: str(path) for name, path in {**required, **optional}.items()},
        )
