# tests/steps/test_config_export_steps.py
"""
Testes dos Steps de staging do diretório conf e de export do manifest.

Os testes asseguram que:
- arquivos obrigatórios e opcionais presentes são copiados para conf/
- o site file do daemon contém exatamente a configuração resolvida,
  com provenance
- o arquivo de logging é copiado
- o manifest é escrito na raiz do staging com o java.home resolvido
"""

import json
import xml.etree.ElementTree as ET

from llap_packager.core.budget.budget import ResourceBudget
from llap_packager.core.config import keys
from llap_packager.core.config.configuration import Configuration
from llap_packager.core.config.resolver import ResolvedConfiguration
from llap_packager.core.pipeline.types import StepStatus
from llap_packager.steps.configs.stage import (
    DaemonSiteStep,
    LoggingConfigCopyStep,
    OptionalConfigsStep,
    RequiredConfigsStep,
)
from llap_packager.steps.environment.checks import LoggingConfigStep
from llap_packager.steps.export.manifest import ManifestExportStep
from llap_packager.steps.preflight.configs import PreflightConfigsStep
from tests._helpers import write_site


def _prepared(ctx):
    PreflightConfigsStep().run(ctx)
    LoggingConfigStep().run(ctx)
    return ctx


def test_required_configs_are_copied(make_ctx):
    ctx = _prepared(make_ctx())
    result = RequiredConfigsStep().run(ctx)

    assert result.metrics == {"files": 5}
    assert sorted(p.name for p in ctx.staging.conf_dir.iterdir()) == sorted(keys.DAEMON_CONFIGS)


def test_optional_configs_skipped_when_absent(make_ctx):
    ctx = _prepared(make_ctx())
    assert OptionalConfigsStep().run(ctx).status == StepStatus.SKIPPED


def test_optional_configs_copied_when_present(make_ctx, conf_dir):
    write_site(conf_dir / "ssl-server.xml", {"ssl.server.keystore.location": "/ks"})
    ctx = _prepared(make_ctx())

    result = OptionalConfigsStep().run(ctx)

    assert result.status == StepStatus.SUCCESS
    assert (ctx.staging.conf_dir / "ssl-server.xml").exists()


def test_daemon_site_holds_resolved_configuration(make_ctx):
    resolved = ResolvedConfiguration(
        values={keys.NUM_EXECUTORS: "4", keys.CONTAINER_MB: "200"},
        provenance={keys.NUM_EXECUTORS: "command-line direct", keys.CONTAINER_MB: "command-line direct"},
    )
    ctx = make_ctx(resolved=resolved)

    result = DaemonSiteStep().run(ctx)

    root = ET.parse(ctx.staging.conf_dir / keys.DAEMON_SITE).getroot()
    props = {p.findtext("name"): (p.findtext("value"), p.findtext("source")) for p in root.iter("property")}
    assert props == {
        keys.CONTAINER_MB: ("200", "command-line direct"),
        keys.NUM_EXECUTORS: ("4", "command-line direct"),
    }
    assert result.payload["fingerprint"] == resolved.fingerprint()


def test_logging_config_is_copied(make_ctx):
    ctx = _prepared(make_ctx())
    LoggingConfigCopyStep().run(ctx)
    assert (ctx.staging.conf_dir / keys.LOGGING_CONFIG).read_text(encoding="utf-8") == "status = WARN\n"


def test_manifest_export_uses_cluster_minima_and_java_home(make_ctx):
    effective = Configuration().with_values(
        {keys.MIN_ALLOCATION_MB: "64", keys.MIN_ALLOCATION_VCORES: "1"},
        source="yarn-site.xml",
    )
    ctx = make_ctx(resolved=ResolvedConfiguration(values={keys.NUM_EXECUTORS: "4"}, effective=effective))
    ctx.set_artifact("java.home", "/opt/java")

    ManifestExportStep().run(ctx)

    data = json.loads(ctx.staging.manifest_path.read_text(encoding="utf-8"))
    assert data["java.home"] == "/opt/java"
    assert data[keys.MIN_ALLOCATION_MB] == 64
    assert data[keys.MIN_ALLOCATION_VCORES] == 1
    assert data[keys.NUM_EXECUTORS] == 4
    assert data[keys.CONTAINER_MB] == -1


def test_manifest_export_reports_requested_container(make_ctx):
    resolved = ResolvedConfiguration(values={keys.CONTAINER_MB: "4096"})
    ctx = make_ctx(resolved=resolved, budget=ResourceBudget(container_bytes=200 * 1024 * 1024))
    ctx.set_artifact("java.home", "/opt/java")

    ManifestExportStep().run(ctx)

    data = json.loads(ctx.staging.manifest_path.read_text(encoding="utf-8"))
    assert data[keys.CONTAINER_MB] == 200
