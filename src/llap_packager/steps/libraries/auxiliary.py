"""Steps canônicos de bibliotecas auxiliares (v1).

- library.aux.<Nome>              → uma biblioteca auxiliar default (optional)
- library.storage_integration     → integração de storage, só quando pedida
                                    (mandatory, inclui dependências transitivas)
- library.user_aux                → caminhos informados pelo operador,
                                    separados por vírgula; entradas vazias
                                    são ignoradas
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from llap_packager.core.config import keys
from llap_packager.core.exceptions import LibraryStagingError, StorageIntegrationStagingError
from llap_packager.core.pipeline.context import PackagingContext
from llap_packager.core.pipeline.step import Step
from llap_packager.core.pipeline.types import StepKind, StepPolicy, StepResult, StepStatus

from ._staging import copy_into_lib, short_name, stage_library

STORAGE_INTEGRATION_HINT = "Instale a integração de storage ou execute novamente com --no-auxhbase."


@dataclass
class DefaultAuxLibraryStep(Step):
    """Staging best-effort de uma biblioteca auxiliar default."""

    library_id: str = keys.DEFAULT_AUX_LIBRARIES[0]
    id: str = ""
    kind: StepKind = StepKind.LIBRARY
    policy: StepPolicy = StepPolicy.OPTIONAL

    def __post_init__(self) -> None:
        if not self.id:
            self.id = f"library.aux.{short_name(self.library_id)}"

    def run(self, ctx: PackagingContext) -> StepResult:
        staged = stage_library(ctx, self.library_id)
        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"auxiliary library staged: {staged.name}",
            metrics={"files": 1},
            artifacts={short_name(self.library_id): staged.name},
        )


@dataclass
class StorageIntegrationStep(Step):
    """Staging da biblioteca de integração de storage e suas dependências."""

    id: str = "library.storage_integration"
    kind: StepKind = StepKind.LIBRARY
    policy: StepPolicy = StepPolicy.MANDATORY
    library_id: str = keys.STORAGE_INTEGRATION_LIBRARY

    def run(self, ctx: PackagingContext) -> StepResult:
        try:
            staged = [stage_library(ctx, self.library_id, error_cls=StorageIntegrationStagingError)]
            for dep in ctx.env.artifacts.dependencies(self.library_id):
                # entradas vazias da lista de dependências são ignoradas
                if not str(dep).strip():
                    continue
                staged.append(copy_into_lib(ctx, dep, error_cls=StorageIntegrationStagingError))
        except StorageIntegrationStagingError as e:
            raise StorageIntegrationStagingError(
                f"Failed to stage storage integration library: {e.message}",
                details=e.details,
                hint=STORAGE_INTEGRATION_HINT,
            ) from e

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"storage integration staged ({len(staged) - 1} dependencies)",
            metrics={"files": len(staged)},
            artifacts={"files": [p.name for p in staged]},
        )


def split_aux_jars(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [entry.strip() for entry in raw.split(",") if entry.strip()]


@dataclass
class UserAuxLibrariesStep(Step):
    """Copia verbatim os caminhos auxiliares informados pelo operador."""

    id: str = "library.user_aux"
    kind: StepKind = StepKind.LIBRARY
    policy: StepPolicy = StepPolicy.MANDATORY

    def run(self, ctx: PackagingContext) -> StepResult:
        raw = ctx.options.aux_jars
        entries = split_aux_jars(raw)
        if not entries:
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.SKIPPED,
                summary="no auxiliary jars requested",
            )

        staged = []
        for entry in entries:
            staged.append(copy_into_lib(ctx, entry, error_cls=LibraryStagingError).name)

        empty = len(raw.split(",")) - len(entries) if raw else 0
        if empty:
            ctx.log(step_id=self.id, level="DEBUG", message="empty aux jar entries skipped", count=empty)

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"{len(staged)} auxiliary jars staged",
            metrics={"files": len(staged), "empty_entries": empty},
            artifacts={"files": staged},
        )
