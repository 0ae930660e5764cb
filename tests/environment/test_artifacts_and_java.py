# tests/environment/test_artifacts_and_java.py
"""Testes do MappingArtifactResolver e da descoberta de Java."""

import os

import pytest

from llap_packager.core.config.errors import InvalidConfigRootTypeError
from llap_packager.environment.artifacts import ArtifactResolver, MappingArtifactResolver
from llap_packager.environment.java import JavaProbe, ProcessJavaProbe, StaticJavaProbe


def test_mapping_resolver_from_yaml(tmp_path):
    doc = tmp_path / "artifacts.yaml"
    doc.write_text(
        "artifacts:\n"
        "  org.apache.hadoop.hive.hbase.HBaseSerDe: /opt/hive/lib/hive-hbase-handler.jar\n"
        "dependencies:\n"
        "  org.apache.hadoop.hive.hbase.HBaseSerDe:\n"
        "    - /opt/hbase/lib/hbase-client.jar\n",
        encoding="utf-8",
    )
    resolver = MappingArtifactResolver.from_file(doc)

    assert isinstance(resolver, ArtifactResolver)
    assert resolver.resolve("org.apache.hadoop.hive.hbase.HBaseSerDe") == "/opt/hive/lib/hive-hbase-handler.jar"
    assert resolver.dependencies("org.apache.hadoop.hive.hbase.HBaseSerDe") == ["/opt/hbase/lib/hbase-client.jar"]
    assert resolver.resolve("unknown.Class") is None
    assert resolver.dependencies("unknown.Class") == []


def test_mapping_resolver_rejects_non_list_dependencies(tmp_path):
    doc = tmp_path / "artifacts.json"
    doc.write_text('{"dependencies": {"x": "a.jar"}}', encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        MappingArtifactResolver.from_file(doc)


def test_process_probe_reads_java_home_from_environ():
    probe = ProcessJavaProbe(environ={"JAVA_HOME": "/opt/jdk", "PATH": ""})
    assert isinstance(probe, JavaProbe)
    assert probe.env_java_home() == "/opt/jdk"
    assert probe.runtime_java_home() is None


def test_process_probe_finds_runtime_on_path(tmp_path):
    java = tmp_path / "jdk" / "bin" / "java"
    java.parent.mkdir(parents=True)
    java.write_text("#!/bin/sh\n", encoding="utf-8")
    java.chmod(0o755)

    probe = ProcessJavaProbe(environ={"PATH": str(java.parent) + os.pathsep})
    assert probe.env_java_home() is None
    assert probe.runtime_java_home() == str((tmp_path / "jdk").resolve())


def test_static_probe():
    probe = StaticJavaProbe(env_home="/a", runtime_home="/b")
    assert (probe.env_java_home(), probe.runtime_java_home()) == ("/a", "/b")
