# tests/e2e/test_package_e2e.py
"""
Testes de ponta a ponta do packager (driver.run / driver.main).

Cenários cobertos:
- run completo: container=200 MiB, cache=50 MiB, heap=100 MiB, executors=4,
  mínimo do cluster=64 MiB, allocator on-heap → manifest completo
- cache maior que o container → abort antes de qualquer escrita
- lista auxiliar com entrada vazia ("a.jar,,b.jar")
- biblioteca auxiliar default ausente → warning, run continua
- integração de storage solicitada e ausente → abort, sem manifest
- profile + --hiveconf + opções: precedência e diagnostics
- códigos de saída 0 / 1 / 3

Princípios:
- usar APENAS APIs públicas (driver, options, collaborators)
- todo I/O em tmp_path; Java resolvido de forma estática
"""

import json
import xml.etree.ElementTree as ET

import pytest

from llap_packager.core.config import keys
from llap_packager.core.config.resolver import ACCEPTED_WITH_PREFIX, DROPPED
from llap_packager.core.exceptions import (
    ContainerBelowMinimum,
    ResourceBudgetViolation,
    StorageIntegrationStagingError,
)
from llap_packager.core.pipeline.types import StepStatus
from llap_packager.core.traceability.manifest import load_manifest
from llap_packager.driver import EXIT_FAILURE, EXIT_OK, EXIT_UNEXPECTED, main, run
from tests._helpers import DEFAULT_AUX_JARS, FIRST_PARTY_JARS, MIB


def _site_values(out):
    root = ET.parse(out / "conf" / keys.DAEMON_SITE).getroot()
    return {p.findtext("name"): p.findtext("value") for p in root.iter("property")}


@pytest.fixture
def sized_options(make_options):
    def _make(**kwargs):
        params = {"size": 200 * MIB, "cache": 50 * MIB, "xmx": 100 * MIB, "executors": 4}
        params.update(kwargs)
        return make_options(**params)

    return _make


def test_full_run_produces_complete_package(make_conf_dir, env, sized_options, tmp_path):
    make_conf_dir(overrides={"hive-site.xml": {keys.ALLOCATOR_DIRECT: "false"}})

    report = run(sized_options(), env)
    out = tmp_path / "out"

    assert report.run.ok
    assert report.staging.root == out

    libs = sorted(p.name for p in (out / "lib").iterdir())
    expected_libs = sorted(
        ["tez-api.jar", "tez-common.jar"] + list(FIRST_PARTY_JARS.values()) + list(DEFAULT_AUX_JARS.values())
    )
    assert libs == expected_libs

    confs = sorted(p.name for p in (out / "conf").iterdir())
    assert confs == sorted(list(keys.DAEMON_CONFIGS) + [keys.DAEMON_SITE, keys.LOGGING_CONFIG])

    assert _site_values(out) == {
        keys.CONTAINER_MB: "200",
        keys.CACHE_SIZE: str(50 * MIB),
        keys.MEMORY_PER_INSTANCE_MB: "100",
        keys.NUM_EXECUTORS: "4",
    }

    manifest = json.loads((out / "config.json").read_text(encoding="utf-8"))
    assert manifest == {
        "java.home": "/opt/java",
        keys.CONTAINER_MB: 200,
        keys.CACHE_SIZE: 50 * MIB,
        keys.ALLOCATOR_DIRECT: False,
        keys.MEMORY_PER_INSTANCE_MB: 100,
        keys.VCPUS_PER_INSTANCE: -1,
        keys.NUM_EXECUTORS: 4,
        keys.MIN_ALLOCATION_MB: 64,
        keys.MIN_ALLOCATION_VCORES: 1,
    }
    assert load_manifest(out / "config.json") == report.manifest

    summary = report.to_dict()
    assert summary["directory"] == str(out)
    assert summary["steps"]["export.manifest"] == "success"
    assert summary["steps"]["config.optional"] == "skipped"
    assert summary["manifest"] == manifest


def test_container_from_properties_only_is_not_reported_in_manifest(env, make_options, tmp_path):
    report = run(make_options(properties={keys.CONTAINER_MB: "4096"}), env)
    out = tmp_path / "out"

    manifest = json.loads((out / "config.json").read_text(encoding="utf-8"))
    assert manifest[keys.CONTAINER_MB] == -1
    assert report.manifest.container_mb == -1
    assert _site_values(out)[keys.CONTAINER_MB] == "4096"


def test_cache_above_container_aborts_before_staging(env, sized_options, tmp_path):
    with pytest.raises(ResourceBudgetViolation) as exc:
        run(sized_options(cache=250 * MIB), env)

    assert str(250 * MIB) in str(exc.value)
    out = tmp_path / "out"
    assert not (out / "lib").exists()
    assert not (out / "conf").exists()
    assert not (out / "config.json").exists()


def test_unrecognized_allocator_flag_keeps_off_heap_rule(make_conf_dir, env, sized_options):
    make_conf_dir(overrides={"hive-site.xml": {keys.ALLOCATOR_DIRECT: "yes"}})

    with pytest.raises(ResourceBudgetViolation) as exc:
        run(sized_options(cache=120 * MIB, xmx=100 * MIB), env)

    assert "Working memory + cache" in str(exc.value)


def test_container_below_cluster_minimum_aborts(env, make_options, tmp_path):
    with pytest.raises(ContainerBelowMinimum) as exc:
        run(make_options(size=32 * MIB), env)

    assert "64" in str(exc.value)
    assert not (tmp_path / "out").exists()


def test_aux_jars_with_empty_entry(env, make_options, tmp_path):
    a = tmp_path / "a.jar"
    b = tmp_path / "b.jar"
    a.write_bytes(b"a")
    b.write_bytes(b"b")

    report = run(make_options(aux_jars=f"{a},,{b}"), env)

    libs = {p.name for p in (tmp_path / "out" / "lib").iterdir()}
    assert {"a.jar", "b.jar"} <= libs
    assert report.run.steps["library.user_aux"].metrics["files"] == 2


def test_missing_default_aux_library_is_not_fatal(make_env, make_options, artifact_map, tmp_path):
    artifacts = {k: v for k, v in artifact_map["artifacts"].items() if k not in DEFAULT_AUX_JARS}

    report = run(make_options(), make_env(artifacts=artifacts))

    step = report.run.steps["library.aux.JsonSerDe"]
    assert step.status == StepStatus.FAILED
    assert any("JsonSerDe" in w for w in report.warnings())
    assert (tmp_path / "out" / "config.json").exists()


def test_requested_storage_integration_failure_aborts(make_env, make_options, artifact_map, tmp_path):
    artifacts = {k: v for k, v in artifact_map["artifacts"].items() if not k.endswith("HBaseSerDe")}

    with pytest.raises(StorageIntegrationStagingError):
        run(make_options(include_hbase=True), make_env(artifacts=artifacts))

    assert not (tmp_path / "out" / "config.json").exists()


def test_storage_integration_staged_when_requested(env, make_options, tmp_path):
    report = run(make_options(include_hbase=True), env)

    libs = {p.name for p in (tmp_path / "out" / "lib").iterdir()}
    assert {"hive-hbase-handler.jar", "hbase-client.jar", "hbase-common.jar"} <= libs
    assert report.run.steps["library.storage_integration"].status == StepStatus.SUCCESS


def test_profile_properties_and_options_precedence(env, make_options, tmp_path):
    profiles = tmp_path / "profiles.yaml"
    profiles.write_text(
        "small:\n"
        "  hive.llap.daemon.num.executors: 2\n"
        "  hive.llap.io.enabled: true\n"
        "  mapreduce.job.queuename: etl\n",
        encoding="utf-8",
    )
    options = make_options(
        profile="small",
        profiles_file=str(profiles),
        properties={"llap.custom.flag": "on", "hive.llap.io.enabled": "false"},
        executors=6,
        name="llap0",
    )

    report = run(options, env)
    site = _site_values(tmp_path / "out")

    assert site[keys.NUM_EXECUTORS] == "6"
    assert site["hive.llap.io.enabled"] == "false"
    assert site["llap.custom.flag"] == "on"
    assert site[keys.SERVICE_HOSTS] == "@llap0"
    assert "mapreduce.job.queuename" not in site

    actions = {d.key: d.action for d in report.diagnostics}
    assert actions == {"llap.custom.flag": ACCEPTED_WITH_PREFIX, "mapreduce.job.queuename": DROPPED}


def test_main_exit_codes(env, sized_options, make_env, capsys):
    assert main(sized_options(), env) == EXIT_OK
    assert "Package staged at" in capsys.readouterr().out

    assert main(sized_options(cache=250 * MIB), env) == EXIT_FAILURE
    assert "Cache has to be smaller" in capsys.readouterr().err

    class BrokenResolver:
        def resolve(self, library_id):
            raise RuntimeError("resolver exploded")

        def dependencies(self, library_id):
            return []

    broken = make_env()
    broken.artifacts = BrokenResolver()
    assert main(sized_options(), broken) == EXIT_UNEXPECTED
    assert "resolver exploded" in capsys.readouterr().err
