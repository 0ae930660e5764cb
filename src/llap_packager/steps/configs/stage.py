"""Steps canônicos de staging do diretório conf (v1).

- config.required    → copia os arquivos obrigatórios do cluster (mandatory)
- config.optional    → copia os opcionais presentes (optional, best-effort)
- config.daemon_site → grava a configuração resolvida em llap-daemon-site.xml
- config.logging     → copia o arquivo de logging do daemon

Os caminhos vêm dos artifacts publicados pelos Steps de preflight/ambiente.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from llap_packager.core.config import keys
from llap_packager.core.config.site_xml import write_site_xml
from llap_packager.core.exceptions import ConfigStagingError
from llap_packager.core.pipeline.context import PackagingContext
from llap_packager.core.pipeline.step import Step
from llap_packager.core.pipeline.types import StepKind, StepPolicy, StepResult, StepStatus


def _copy_all(ctx: PackagingContext, files: Dict[str, Path]) -> Dict[str, str]:
    conf_dir = ctx.staging.conf_dir
    ctx.env.fs.mkdirs(conf_dir)
    copied: Dict[str, str] = {}
    for name, path in files.items():
        try:
            copied[name] = str(ctx.env.fs.copy_file(path, conf_dir))
        except OSError as e:
            raise ConfigStagingError(
                f"Unable to copy {name} into {conf_dir}: {e}",
                details={"resource": name, "source": str(path)},
            ) from e
    return copied


@dataclass
class RequiredConfigsStep(Step):
    id: str = "config.required"
    kind: StepKind = StepKind.CONFIG
    policy: StepPolicy = StepPolicy.MANDATORY

    def run(self, ctx: PackagingContext) -> StepResult:
        copied = _copy_all(ctx, ctx.get_artifact("configs.required"))
        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"{len(copied)} config files staged",
            metrics={"files": len(copied)},
            artifacts=copied,
        )


@dataclass
class OptionalConfigsStep(Step):
    id: str = "config.optional"
    kind: StepKind = StepKind.CONFIG
    policy: StepPolicy = StepPolicy.OPTIONAL

    def run(self, ctx: PackagingContext) -> StepResult:
        files = ctx.get_artifact("configs.optional") if ctx.has_artifact("configs.optional") else {}
        if not files:
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.SKIPPED,
                summary="no optional config files present",
            )

        copied = _copy_all(ctx, files)
        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"{len(copied)} optional config files staged",
            metrics={"files": len(copied)},
            artifacts=copied,
        )


@dataclass
class DaemonSiteStep(Step):
    """Grava a ResolvedConfiguration (com provenance) no site file do daemon."""

    id: str = "config.daemon_site"
    kind: StepKind = StepKind.CONFIG
    policy: StepPolicy = StepPolicy.MANDATORY

    def run(self, ctx: PackagingContext) -> StepResult:
        resolved = ctx.resolved
        target = ctx.staging.conf_dir / keys.DAEMON_SITE
        try:
            with ctx.env.fs.open_write(target) as stream:
                write_site_xml(stream, resolved.values, resolved.provenance)
        except OSError as e:
            raise ConfigStagingError(
                f"Unable to write {keys.DAEMON_SITE}: {e}",
                details={"target": str(target)},
            ) from e

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"{keys.DAEMON_SITE} written with {len(resolved.values)} keys",
            metrics={"keys": len(resolved.values)},
            artifacts={keys.DAEMON_SITE: str(target)},
            payload={"fingerprint": resolved.fingerprint()},
        )


@dataclass
class LoggingConfigCopyStep(Step):
    id: str = "config.logging"
    kind: StepKind = StepKind.CONFIG
    policy: StepPolicy = StepPolicy.MANDATORY

    def run(self, ctx: PackagingContext) -> StepResult:
        copied = _copy_all(ctx, {keys.LOGGING_CONFIG: ctx.get_artifact("configs.logging")})
        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary="logging config staged",
            metrics={"files": 1},
            artifacts=copied,
        )
