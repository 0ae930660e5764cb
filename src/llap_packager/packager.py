# src/llap_packager/packager.py
"""
Package Assembler — monta o staging directory de uma instância do daemon.

O assembly é uma lista ordenada de Steps, cada um marcado como
mandatory ou optional, executada pelo Engine:

    preflight.configs          (mandatory)
    environment.logging        (mandatory)
    environment.home           (mandatory; scripts ausentes → warning)
    library.framework          (mandatory)
    library.first_party        (mandatory)
    library.aux.<Nome>         (optional, um por biblioteca default)
    library.storage_integration (mandatory, só quando solicitado)
    library.user_aux           (mandatory; entradas vazias ignoradas)
    java.home                  (mandatory)
    config.required            (mandatory)
    config.optional            (optional)
    config.daemon_site         (mandatory)
    config.logging             (mandatory)
    export.manifest            (mandatory)

Checagens sem efeito colateral vêm antes de qualquer escrita no staging.
A primeira falha mandatory é re-levantada na fronteira de `assemble`.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from llap_packager.core.budget.budget import ResourceBudget
from llap_packager.core.config import keys
from llap_packager.core.config.resolver import Diagnostic, ResolvedConfiguration
from llap_packager.core.engine.engine import Engine, RunResult
from llap_packager.core.pipeline.context import PackagingContext
from llap_packager.core.pipeline.registry import StepRegistry
from llap_packager.core.staging import StagingDirectory
from llap_packager.core.traceability.manifest import DaemonManifest
from llap_packager.environment.collaborators import Collaborators
from llap_packager.options import PackageOptions
from llap_packager.steps.configs.stage import (
    DaemonSiteStep,
    LoggingConfigCopyStep,
    OptionalConfigsStep,
    RequiredConfigsStep,
)
from llap_packager.steps.environment.checks import InstallRootStep, LoggingConfigStep
from llap_packager.steps.export.manifest import ManifestExportStep
from llap_packager.steps.java.home import JavaHomeStep
from llap_packager.steps.libraries.auxiliary import (
    DefaultAuxLibraryStep,
    StorageIntegrationStep,
    UserAuxLibrariesStep,
)
from llap_packager.steps.libraries.first_party import FirstPartyLibrariesStep
from llap_packager.steps.libraries.framework import FrameworkLibrariesStep
from llap_packager.steps.preflight.configs import PreflightConfigsStep


@dataclass(frozen=True)
class PackagingReport:
    """Resultado de um assembly bem-sucedido."""

    staging: StagingDirectory
    run: RunResult
    manifest: DaemonManifest
    diagnostics: Tuple[Diagnostic, ...] = ()
    events: List[Dict[str, Any]] = field(default_factory=list, compare=False, repr=False)

    def warnings(self) -> List[str]:
        return self.run.warnings() + [d.message for d in self.diagnostics]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "directory": str(self.staging.root),
            "steps": {sid: r.status.value for sid, r in self.run.steps.items()},
            "manifest": self.manifest.to_dict(),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "warnings": self.warnings(),
        }


def build_steps(options: PackageOptions) -> StepRegistry:
    """Monta o registro ordenado de Steps para as opções recebidas."""
    registry = StepRegistry()
    registry.add(PreflightConfigsStep())
    registry.add(LoggingConfigStep())
    registry.add(InstallRootStep())
    registry.add(FrameworkLibrariesStep())
    registry.add(FirstPartyLibrariesStep())
    for library_id in keys.DEFAULT_AUX_LIBRARIES:
        registry.add(DefaultAuxLibraryStep(library_id=library_id))
    if options.include_hbase:
        registry.add(StorageIntegrationStep())
    registry.add(UserAuxLibrariesStep())
    registry.add(JavaHomeStep())
    registry.add(RequiredConfigsStep())
    registry.add(OptionalConfigsStep())
    registry.add(DaemonSiteStep())
    registry.add(LoggingConfigCopyStep())
    registry.add(ManifestExportStep())
    return registry


def assemble(
    resolved: ResolvedConfiguration,
    budget: ResourceBudget,
    options: PackageOptions,
    *,
    env: Collaborators,
    run_id: Optional[str] = None,
) -> PackagingReport:
    """
    Executa o assembly e retorna o relatório da run.

    Raises:
        PackagerException: Na primeira falha de um Step mandatory.
    """
    staging = StagingDirectory.at(options.directory)
    ctx = PackagingContext(
        run_id=run_id or uuid.uuid4().hex,
        created_at=datetime.now(timezone.utc),
        resolved=resolved,
        budget=budget,
        options=options,
        staging=staging,
        env=env,
        meta={
            "config_hash": resolved.fingerprint(),
            "options": options.to_dict(),
            "budget": budget.to_dict(),
        },
    )

    result = Engine(steps=build_steps(options).list(), ctx=ctx).run()
    result.raise_for_failure()

    return PackagingReport(
        staging=staging,
        run=result,
        manifest=ctx.get_artifact("manifest"),
        diagnostics=resolved.diagnostics,
        events=list(ctx.events),
    )
