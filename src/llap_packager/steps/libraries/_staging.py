"""Helpers compartilhados pelos Steps de staging de bibliotecas."""

from __future__ import annotations

from pathlib import Path
from typing import Type

from llap_packager.core.exceptions import LibraryStagingError
from llap_packager.core.pipeline.context import PackagingContext


def copy_into_lib(
    ctx: PackagingContext,
    source: str,
    *,
    error_cls: Type[LibraryStagingError] = LibraryStagingError,
) -> Path:
    lib_dir = ctx.staging.lib_dir
    try:
        return ctx.env.fs.copy_file(source, lib_dir)
    except (OSError, ValueError) as e:
        raise error_cls(
            f"Unable to copy {source} into {lib_dir}: {e}",
            details={"source": source, "lib_dir": str(lib_dir)},
        ) from e


def stage_library(
    ctx: PackagingContext,
    library_id: str,
    *,
    error_cls: Type[LibraryStagingError] = LibraryStagingError,
) -> Path:
    """Resolve o artefato de `library_id` e copia para o diretório lib."""
    artifact = ctx.env.artifacts.resolve(library_id)
    if artifact is None:
        raise error_cls(
            f"Unable to resolve packaging artifact for {library_id}",
            details={"library": library_id},
        )
    return copy_into_lib(ctx, artifact, error_cls=error_cls)


def short_name(library_id: str) -> str:
    return library_id.rsplit(".", 1)[-1]
