# src/llap_packager/core/config/keys.py
"""
Catálogo canônico de chaves e nomes de recursos do daemon LLAP.

Este módulo concentra, em um único lugar, os nomes literais de variáveis
de configuração, arquivos de configuração do cluster e identificadores
de bibliotecas usados pelo pipeline de empacotamento.

Invariantes:
    - Os valores são strings literais estáveis (aparecem no manifest)
    - A ordem de `DAEMON_CONFIGS` é a ordem de carregamento
    - `KNOWN_DAEMON_KEYS` é a allow-list usada no merge de server properties
"""

from __future__ import annotations

from typing import FrozenSet, Tuple


# ---------------------------------------------------------------------------
# Variáveis de configuração do daemon
# ---------------------------------------------------------------------------

CONTAINER_MB = "hive.llap.daemon.yarn.container.mb"
CACHE_SIZE = "hive.llap.io.memory.size"
ALLOCATOR_DIRECT = "hive.llap.io.allocator.direct"
MEMORY_PER_INSTANCE_MB = "hive.llap.daemon.memory.per.instance.mb"
VCPUS_PER_INSTANCE = "hive.llap.daemon.vcpus.per.instance"
NUM_EXECUTORS = "hive.llap.daemon.num.executors"
SERVICE_HOSTS = "hive.llap.daemon.service.hosts"

# Lidas apenas para o staging / manifest (não são chaves do daemon).
FRAMEWORK_LIB_URIS = "tez.lib.uris"
MIN_ALLOCATION_MB = "yarn.scheduler.minimum-allocation-mb"
MIN_ALLOCATION_VCORES = "yarn.scheduler.minimum-allocation-vcores"

# Default do allocator quando ausente da configuração.
ALLOCATOR_DIRECT_DEFAULT = True

# Prefixos aceitos (com warning) mesmo fora da allow-list.
PREFIX_LLAP = "llap."
PREFIX_HIVE_LLAP = "hive.llap."
RECOGNIZED_PREFIXES: Tuple[str, ...] = (PREFIX_LLAP, PREFIX_HIVE_LLAP)

KNOWN_DAEMON_KEYS: FrozenSet[str] = frozenset(
    {
        CONTAINER_MB,
        CACHE_SIZE,
        ALLOCATOR_DIRECT,
        MEMORY_PER_INSTANCE_MB,
        VCPUS_PER_INSTANCE,
        NUM_EXECUTORS,
        SERVICE_HOSTS,
        "hive.llap.io.enabled",
        "hive.llap.io.cache.orc.alloc.min",
        "hive.llap.io.cache.orc.alloc.max",
        "hive.llap.io.cache.orc.arena.count",
        "hive.llap.io.use.lrfu",
        "hive.llap.io.lrfu.lambda",
        "hive.llap.io.threadpool.size",
        "hive.llap.daemon.work.dirs",
        "hive.llap.daemon.yarn.shuffle.port",
        "hive.llap.daemon.shuffle.dir.watcher.enabled",
        "hive.llap.daemon.rpc.num.handlers",
        "hive.llap.daemon.rpc.port",
        "hive.llap.daemon.web.port",
        "hive.llap.daemon.web.ssl",
        "hive.llap.daemon.am.liveness.heartbeat.interval.ms",
        "hive.llap.daemon.am.liveness.connection.timeout.ms",
        "hive.llap.daemon.am.liveness.connection.sleep.between.retries.ms",
        "hive.llap.daemon.task.scheduler.wait.queue.size",
        "hive.llap.daemon.wait.queue.comparator.class.name",
        "hive.llap.daemon.task.scheduler.enable.preemption",
        "hive.llap.daemon.communicator.num.threads",
        "hive.llap.daemon.allow.permanent.fns",
        "hive.llap.daemon.download.permanent.fns",
        "hive.llap.daemon.service.refresh.interval.sec",
        "hive.llap.daemon.acl",
        "hive.llap.daemon.keytab.file",
        "hive.llap.daemon.service.principal",
        "hive.llap.daemon.xmx.headroom",
        "hive.llap.daemon.logger",
        "hive.llap.daemon.task.preemption.metrics.intervals",
        "hive.llap.file.cleanup.delay.seconds",
        "hive.llap.management.rpc.port",
        "hive.llap.management.acl",
        "hive.llap.auto.allow.uber",
        "hive.llap.object.cache.enabled",
        "hive.llap.zk.sm.connectionString",
        "hive.llap.zk.registry.namespace",
    }
)


# ---------------------------------------------------------------------------
# Recursos de configuração
# ---------------------------------------------------------------------------

# Em ordem específica de carregamento (arquivos posteriores sobrescrevem).
DAEMON_CONFIGS: Tuple[str, ...] = (
    "core-site.xml",
    "hdfs-site.xml",
    "yarn-site.xml",
    "tez-site.xml",
    "hive-site.xml",
)
OPTIONAL_CONFIGS: Tuple[str, ...] = ("ssl-server.xml",)

DAEMON_SITE = "llap-daemon-site.xml"
LOGGING_CONFIG = "llap-daemon-log4j2.properties"
MANIFEST_FILE = "config.json"

SCRIPTS_SUBDIR: Tuple[str, ...] = ("scripts", "llap", "bin")
FRAMEWORK_ARCHIVE = "tez.tar.gz"


# ---------------------------------------------------------------------------
# Bibliotecas (identificadores resolvidos pelo ArtifactResolver)
# ---------------------------------------------------------------------------

# llap-common, llap-tez, llap-server, hive-exec
FIRST_PARTY_LIBRARIES: Tuple[str, ...] = (
    "org.apache.hadoop.hive.llap.daemon.rpc.LlapDaemonProtocolProtos",
    "org.apache.hadoop.hive.llap.tezplugins.LlapTezUtils",
    "org.apache.hadoop.hive.llap.io.api.impl.LlapInputFormat",
    "org.apache.hadoop.hive.ql.io.HiveInputFormat",
)
DEFAULT_AUX_LIBRARIES: Tuple[str, ...] = ("org.apache.hive.hcatalog.data.JsonSerDe",)
STORAGE_INTEGRATION_LIBRARY = "org.apache.hadoop.hive.hbase.HBaseSerDe"


def is_known_daemon_key(key: str) -> bool:
    return key in KNOWN_DAEMON_KEYS


def has_recognized_prefix(key: str) -> bool:
    return key.startswith(RECOGNIZED_PREFIXES)
