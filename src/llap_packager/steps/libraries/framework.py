"""Step canônico: library.framework (v1).

Obtém o bundle de bibliotecas do framework de execução (`tez.lib.uris`)
para dentro do diretório lib, extraindo-o no lugar. É o primeiro Step a
escrever no staging: cria o diretório lib.
"""

from __future__ import annotations

import tarfile
from dataclasses import dataclass
from typing import List

from llap_packager.core.config import keys
from llap_packager.core.exceptions import LibraryStagingError
from llap_packager.core.pipeline.context import PackagingContext
from llap_packager.core.pipeline.step import Step
from llap_packager.core.pipeline.types import StepKind, StepPolicy, StepResult, StepStatus


def _split_uris(raw: str) -> List[str]:
    return [u.strip() for u in raw.split(",") if u.strip()]


@dataclass
class FrameworkLibrariesStep(Step):
    id: str = "library.framework"
    kind: StepKind = StepKind.LIBRARY
    policy: StepPolicy = StepPolicy.MANDATORY

    def run(self, ctx: PackagingContext) -> StepResult:
        raw = ctx.resolved.effective.get(keys.FRAMEWORK_LIB_URIS) or ""
        uris = _split_uris(raw)
        if not uris:
            raise LibraryStagingError(
                f"Missing {keys.FRAMEWORK_LIB_URIS} in the cluster configuration",
                details={"key": keys.FRAMEWORK_LIB_URIS},
                hint="Defina tez.lib.uris em tez-site.xml apontando para o archive do framework.",
            )

        lib_dir = ctx.staging.lib_dir
        ctx.env.fs.mkdirs(lib_dir)

        extracted = []
        for uri in uris:
            try:
                extracted.extend(ctx.env.framework.fetch(uri, lib_dir))
            except (OSError, ValueError, tarfile.TarError) as e:
                raise LibraryStagingError(
                    f"Unable to fetch framework libraries from {uri}: {e}",
                    details={"uri": uri},
                ) from e
            ctx.log(step_id=self.id, level="DEBUG", message="framework bundle extracted", uri=uri)

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"{len(extracted)} framework libraries extracted",
            metrics={"files": len(extracted), "uris": len(uris)},
            artifacts={"files": [p.name for p in extracted]},
        )
