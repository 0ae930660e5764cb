"""Steps canônicos de sanidade do ambiente (v1).

- environment.logging → o recurso de logging do daemon deve ser localizável
- environment.home    → a raiz de instalação deve existir localmente;
                        o diretório de scripts é opcional (warning)

Ambos são mandatory: executam antes de qualquer staging destrutivo.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from llap_packager.core.config import keys
from llap_packager.core.errors import logging_config_missing
from llap_packager.core.exceptions import InstallRootNotFound, MissingLoggingConfig
from llap_packager.core.pipeline.context import PackagingContext
from llap_packager.core.pipeline.step import Step
from llap_packager.core.pipeline.types import StepKind, StepPolicy, StepResult, StepStatus


@dataclass
class LoggingConfigStep(Step):
    """Localiza `llap-daemon-log4j2.properties` e publica `configs.logging`."""

    id: str = "environment.logging"
    kind: StepKind = StepKind.ENVIRONMENT
    policy: StepPolicy = StepPolicy.MANDATORY

    def run(self, ctx: PackagingContext) -> StepResult:
        resources = ctx.env.resources
        path = resources.find(keys.LOGGING_CONFIG)
        if path is None:
            payload = logging_config_missing(
                resource=keys.LOGGING_CONFIG,
                searched=resources.searched(),
            )
            raise MissingLoggingConfig(payload.message, details=payload.details, hint=payload.hint)

        ctx.set_artifact("configs.logging", path)
        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary="logging config located",
            artifacts={keys.LOGGING_CONFIG: str(path)},
        )


@dataclass
class InstallRootStep(Step):
    """Verifica a raiz de instalação e o subdiretório de scripts."""

    id: str = "environment.home"
    kind: StepKind = StepKind.ENVIRONMENT
    policy: StepPolicy = StepPolicy.MANDATORY

    def run(self, ctx: PackagingContext) -> StepResult:
        home = ctx.options.home
        fs = ctx.env.fs

        if not home or not fs.exists(home):
            raise InstallRootNotFound(
                f"Install root does not exist: {home}",
                details={"home": home},
                hint="Informe --home ou defina HIVE_HOME apontando para a instalação local.",
            )

        scripts = Path(home).joinpath(*keys.SCRIPTS_SUBDIR)
        warnings = []
        if not fs.exists(scripts):
            message = f"Scripts directory not found: {scripts}"
            ctx.add_warning(step_id=self.id, message=message)
            warnings.append(message)

        ctx.set_artifact("install.home", Path(home))
        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary="install root verified",
            warnings=warnings,
            artifacts={"home": str(home), "scripts": str(scripts)},
            payload={"scripts_present": not warnings},
        )
