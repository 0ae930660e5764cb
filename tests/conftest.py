# tests/conftest.py
"""
Fixtures compartilhados para testes do LLAP Packager.

Este módulo define fixtures reutilizáveis que fornecem:
- diretórios de configuração do cluster materializados em `tmp_path`
- bundle do framework (.tar.gz) e artefatos de bibliotecas falsos
- colaboradores locais determinísticos (filesystem, resolver, java probe)
- contexto de execução controlado (PackagingContext)
- Steps dummy para testes estruturais do Engine

Decisões arquiteturais:
    - Todo I/O acontece dentro de `tmp_path` (isolado por teste)
    - A descoberta de Java é estática (sem depender do PATH do host)
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture depende de variáveis de ambiente
    - Nenhuma fixture executa pipeline real
    - Todas as fixtures são seguras para execução em paralelo
"""

import tarfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional

import pytest

from tests._helpers import DEFAULT_AUX_JARS, FIRST_PARTY_JARS, HBASE_ID, write_site


@pytest.fixture
def framework_tarball(tmp_path) -> Path:
    """
    Bundle do framework com estrutura de diretórios aninhada.

    Conteúdo:
        tez/tez-api.jar
        tez/lib/tez-common.jar
    """
    src = tmp_path / "tez-src"
    (src / "tez" / "lib").mkdir(parents=True)
    (src / "tez" / "tez-api.jar").write_bytes(b"api")
    (src / "tez" / "lib" / "tez-common.jar").write_bytes(b"common")

    archive = tmp_path / "remote" / "tez.tar.gz"
    archive.parent.mkdir(parents=True)
    with tarfile.open(archive, "w:gz") as tar:
        tar.add(src / "tez", arcname="tez")
    return archive


@pytest.fixture
def make_conf_dir(tmp_path, framework_tarball):
    """
    Factory de diretório de configuração do cluster.

    Por padrão cria os cinco arquivos obrigatórios, o arquivo de logging
    do daemon, `tez.lib.uris` apontando para o bundle de teste e o mínimo
    de alocação do cluster (64 MB / 1 vcore).

    Args (da factory):
        overrides: arquivo → propriedades extras (mescladas às padrão)
        skip: nomes de arquivos que NÃO devem ser criados
    """

    def _make(
        overrides: Optional[Dict[str, Dict[str, str]]] = None,
        skip: tuple = (),
        name: str = "conf",
    ) -> Path:
        conf = tmp_path / name
        conf.mkdir(parents=True, exist_ok=True)
        files: Dict[str, Dict[str, str]] = {
            "core-site.xml": {"fs.defaultFS": "file:///"},
            "hdfs-site.xml": {},
            "yarn-site.xml": {
                "yarn.scheduler.minimum-allocation-mb": "64",
                "yarn.scheduler.minimum-allocation-vcores": "1",
            },
            "tez-site.xml": {"tez.lib.uris": str(framework_tarball)},
            "hive-site.xml": {"hive.execution.engine": "tez"},
        }
        for fname, props in (overrides or {}).items():
            files.setdefault(fname, {}).update(props)
        for fname, props in files.items():
            if fname not in skip:
                write_site(conf / fname, props)
        if "llap-daemon-log4j2.properties" not in skip:
            (conf / "llap-daemon-log4j2.properties").write_text("status = WARN\n", encoding="utf-8")
        return conf

    return _make


@pytest.fixture
def conf_dir(make_conf_dir) -> Path:
    return make_conf_dir()


@pytest.fixture
def install_home(tmp_path) -> Path:
    home = tmp_path / "hive"
    (home / "scripts" / "llap" / "bin").mkdir(parents=True)
    return home


@pytest.fixture
def artifact_map(tmp_path) -> Dict[str, object]:
    """Cria jars falsos e devolve o documento de mapeamento de artefatos."""
    jars = tmp_path / "jars"
    jars.mkdir()
    artifacts: Dict[str, str] = {}
    for library_id, fname in {**FIRST_PARTY_JARS, **DEFAULT_AUX_JARS}.items():
        (jars / fname).write_bytes(fname.encode("utf-8"))
        artifacts[library_id] = str(jars / fname)

    hbase = jars / "hive-hbase-handler.jar"
    hbase.write_bytes(b"hbase")
    artifacts[HBASE_ID] = str(hbase)
    deps = []
    for fname in ("hbase-client.jar", "hbase-common.jar"):
        (jars / fname).write_bytes(fname.encode("utf-8"))
        deps.append(str(jars / fname))

    return {"artifacts": artifacts, "dependencies": {HBASE_ID: deps}}


@pytest.fixture
def make_env(conf_dir, artifact_map):
    """Factory de Collaborators locais com Java estático."""
    from llap_packager.core.config.resources import ConfigurationResources
    from llap_packager.environment.artifacts import MappingArtifactResolver
    from llap_packager.environment.collaborators import Collaborators
    from llap_packager.environment.filesystem import LocalFileSystem
    from llap_packager.environment.framework import TarballFrameworkFetcher
    from llap_packager.environment.java import StaticJavaProbe

    def _make(
        *,
        conf_dirs=None,
        artifacts: Optional[Dict[str, str]] = None,
        dependencies: Optional[Dict[str, list]] = None,
        java=None,
    ):
        fs = LocalFileSystem()
        return Collaborators(
            fs=fs,
            resources=ConfigurationResources.from_dirs(conf_dirs or [conf_dir]),
            artifacts=MappingArtifactResolver(
                artifacts=artifact_map["artifacts"] if artifacts is None else artifacts,
                dependency_map=artifact_map["dependencies"] if dependencies is None else dependencies,
            ),
            framework=TarballFrameworkFetcher(fs=fs),
            java=java or StaticJavaProbe(env_home="/opt/java"),
        )

    return _make


@pytest.fixture
def env(make_env):
    return make_env()


@pytest.fixture
def make_options(tmp_path, conf_dir, install_home):
    """Factory de PackageOptions com staging em `tmp_path/out`."""
    from llap_packager.options import PackageOptions

    def _make(**kwargs):
        params = {
            "directory": str(tmp_path / "out"),
            "conf_dirs": (str(conf_dir),),
            "home": str(install_home),
        }
        params.update(kwargs)
        return PackageOptions(**params)

    return _make


@pytest.fixture
def make_ctx(make_options, env):
    """
    Factory de PackagingContext determinístico.

    `run_id` e `created_at` são fixos; a configuração resolvida é vazia
    salvo quando informada explicitamente.
    """
    from llap_packager.core.budget.budget import ResourceBudget
    from llap_packager.core.config.configuration import Configuration
    from llap_packager.core.config.resolver import ResolvedConfiguration
    from llap_packager.core.pipeline.context import PackagingContext
    from llap_packager.core.staging import StagingDirectory

    def _make(*, options=None, resolved=None, budget=None, collaborators=None, effective=None):
        options = options or make_options()
        if resolved is None:
            resolved = ResolvedConfiguration(
                effective=Configuration().with_values(effective or {}, source="test"),
            )
        return PackagingContext(
            run_id="run-test-001",
            created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
            resolved=resolved,
            budget=budget or ResourceBudget(),
            options=options,
            staging=StagingDirectory.at(options.directory),
            env=collaborators or env,
            meta={"source": "pytest"},
        )

    return _make


@pytest.fixture
def DummyStep():
    """
    Fixture factory que fornece uma implementação mínima e duck-typed de um Step.

    O Step retornado registra um artifact `<id>.ok` e pode ser configurado
    para falhar (levantando a exceção informada) e com política própria.
    """
    from llap_packager.core.pipeline.types import StepKind, StepPolicy, StepResult, StepStatus

    class _DummyStep:
        def __init__(self, step_id="dummy", policy=StepPolicy.MANDATORY, error=None, kind=StepKind.PREFLIGHT):
            self.id = step_id
            self.kind = kind
            self.policy = policy
            self.error = error
            self.calls = 0

        def run(self, ctx):
            self.calls += 1
            if self.error is not None:
                raise self.error
            ctx.set_artifact(f"{self.id}.ok", True)
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.SUCCESS,
                summary="dummy ok",
                artifacts={"ok": f"{self.id}.ok"},
            )

    return _DummyStep
