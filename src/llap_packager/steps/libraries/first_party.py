"""Step canônico: library.first_party (v1).

Copia para o diretório lib as quatro bibliotecas próprias sempre
necessárias ao daemon. Qualquer biblioteca não resolvida aborta a run.
"""

from __future__ import annotations

from dataclasses import dataclass

from llap_packager.core.config import keys
from llap_packager.core.pipeline.context import PackagingContext
from llap_packager.core.pipeline.step import Step
from llap_packager.core.pipeline.types import StepKind, StepPolicy, StepResult, StepStatus

from ._staging import short_name, stage_library


@dataclass
class FirstPartyLibrariesStep(Step):
    id: str = "library.first_party"
    kind: StepKind = StepKind.LIBRARY
    policy: StepPolicy = StepPolicy.MANDATORY

    def run(self, ctx: PackagingContext) -> StepResult:
        staged = {}
        for library_id in keys.FIRST_PARTY_LIBRARIES:
            staged[short_name(library_id)] = stage_library(ctx, library_id).name

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"{len(staged)} first-party libraries staged",
            metrics={"files": len(staged)},
            artifacts=staged,
        )
