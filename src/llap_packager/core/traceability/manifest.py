# src/llap_packager/core/traceability/manifest.py
"""
Manifest do daemon — `config.json` na raiz do staging directory.

Este módulo define a estrutura e as operações canônicas do Manifest,
a ÚNICA interface estruturada lida pelo tooling de launch downstream.

O Manifest consolida, de forma plana (chave → escalar):
    - `java.home` resolvido
    - tamanho do container (MB), cache, flag do allocator off-heap
    - memória por instância, vcores, executors
    - alocação mínima do cluster (MB e vcores)

Princípios fundamentais:
    - Nenhum campo documentado é omitido
    - Valores numéricos não definidos são representados como -1
    - O Manifest é escrito uma única vez, ao final de uma run bem-sucedida
    - O Manifest é serializável e reconstruível (round-trip)

Decisões arquiteturais:
    - O formato de persistência é JSON determinístico (chaves ordenadas)
    - As chaves são os nomes literais das variáveis de configuração
    - O tamanho do container é o valor solicitado no orçamento da run
      (-1 quando não solicitado), nunca o lido de arquivos ou propriedades;
      os demais campos consultam o site file e, na ausência, a configuração
      efetiva da run

Limites explícitos:
    - Não executa pipeline
    - Não valida semântica dos valores (isso é do validador)
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from llap_packager.core.config import keys
from llap_packager.core.config.resolver import ResolvedConfiguration
from llap_packager.core.config.sizes import parse_size

if TYPE_CHECKING:  # pragma: no cover
    from llap_packager.environment.filesystem import FileSystem

JAVA_HOME = "java.home"
UNSET = -1

MANIFEST_FIELDS: Tuple[str, ...] = (
    JAVA_HOME,
    keys.CONTAINER_MB,
    keys.CACHE_SIZE,
    keys.ALLOCATOR_DIRECT,
    keys.MEMORY_PER_INSTANCE_MB,
    keys.VCPUS_PER_INSTANCE,
    keys.NUM_EXECUTORS,
    keys.MIN_ALLOCATION_MB,
    keys.MIN_ALLOCATION_VCORES,
)


@dataclass(frozen=True)
class DaemonManifest:
    """
    Manifest v1 — valores resolvidos consumidos pelo launch downstream.

    Invariantes:
        - Todos os campos estão sempre presentes
        - Campos numéricos usam -1 quando não definidos
    """

    java_home: str
    container_mb: int = UNSET
    cache_bytes: int = UNSET
    allocator_direct: bool = keys.ALLOCATOR_DIRECT_DEFAULT
    memory_per_instance_mb: int = UNSET
    vcpus_per_instance: int = UNSET
    executors: int = UNSET
    min_allocation_mb: int = UNSET
    min_allocation_vcores: int = UNSET

    def to_dict(self) -> Dict[str, Any]:
        return {
            JAVA_HOME: self.java_home,
            keys.CONTAINER_MB: self.container_mb,
            keys.CACHE_SIZE: self.cache_bytes,
            keys.ALLOCATOR_DIRECT: self.allocator_direct,
            keys.MEMORY_PER_INSTANCE_MB: self.memory_per_instance_mb,
            keys.VCPUS_PER_INSTANCE: self.vcpus_per_instance,
            keys.NUM_EXECUTORS: self.executors,
            keys.MIN_ALLOCATION_MB: self.min_allocation_mb,
            keys.MIN_ALLOCATION_VCORES: self.min_allocation_vcores,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DaemonManifest":
        """
        Reconstrói um Manifest a partir de sua representação em dicionário.

        Raises:
            KeyError: Se algum campo documentado estiver ausente.
        """
        missing = [k for k in MANIFEST_FIELDS if k not in data]
        if missing:
            raise KeyError(f"Manifest incompleto, campos ausentes: {missing}")

        return cls(
            java_home=str(data[JAVA_HOME]),
            container_mb=int(data[keys.CONTAINER_MB]),
            cache_bytes=int(data[keys.CACHE_SIZE]),
            allocator_direct=bool(data[keys.ALLOCATOR_DIRECT]),
            memory_per_instance_mb=int(data[keys.MEMORY_PER_INSTANCE_MB]),
            vcpus_per_instance=int(data[keys.VCPUS_PER_INSTANCE]),
            executors=int(data[keys.NUM_EXECUTORS]),
            min_allocation_mb=int(data[keys.MIN_ALLOCATION_MB]),
            min_allocation_vcores=int(data[keys.MIN_ALLOCATION_VCORES]),
        )


def _lookup(resolved: ResolvedConfiguration, key: str) -> Optional[str]:
    value = resolved.get(key)
    if value is None:
        value = resolved.effective.get(key)
    if value is None or not str(value).strip():
        return None
    return str(value).strip()


def _flag(raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    return {"true": True, "false": False}.get(raw.lower(), default)


def _int_field(resolved: ResolvedConfiguration, key: str) -> int:
    raw = _lookup(resolved, key)
    return UNSET if raw is None else int(raw)


def build_manifest(
    resolved: ResolvedConfiguration,
    *,
    java_home: str,
    min_allocation_mb: int,
    min_allocation_vcores: int,
    container_mb: int = UNSET,
) -> DaemonManifest:
    """
    Projeta a configuração resolvida + fatos do ambiente no Manifest.

    Args:
        resolved (ResolvedConfiguration): Configuração autoritativa do daemon.
        java_home (str): Instalação Java resolvida.
        min_allocation_mb (int): Mínimo de memória do cluster (-1 se desconhecido).
        min_allocation_vcores (int): Mínimo de vcores do cluster (-1 se desconhecido).
        container_mb (int): Container solicitado em MB (-1 se não solicitado).

    Returns:
        DaemonManifest: Manifest com todos os campos documentados.
    """
    cache_raw = _lookup(resolved, keys.CACHE_SIZE)
    direct_raw = _lookup(resolved, keys.ALLOCATOR_DIRECT)

    return DaemonManifest(
        java_home=java_home,
        container_mb=container_mb,
        cache_bytes=UNSET if cache_raw is None else parse_size(cache_raw),
        allocator_direct=_flag(direct_raw, keys.ALLOCATOR_DIRECT_DEFAULT),
        memory_per_instance_mb=_int_field(resolved, keys.MEMORY_PER_INSTANCE_MB),
        vcpus_per_instance=_int_field(resolved, keys.VCPUS_PER_INSTANCE),
        executors=_int_field(resolved, keys.NUM_EXECUTORS),
        min_allocation_mb=min_allocation_mb,
        min_allocation_vcores=min_allocation_vcores,
    )


def render_manifest(manifest: DaemonManifest) -> str:
    return json.dumps(manifest.to_dict(), indent=2, sort_keys=True, ensure_ascii=False)


def save_manifest(manifest: DaemonManifest, path: Path, fs: "FileSystem") -> None:
    """Persiste o Manifest como JSON determinístico (write-once)."""
    with fs.open_write(path) as stream:
        stream.write(render_manifest(manifest).encode("utf-8"))


def load_manifest(path: Path) -> DaemonManifest:
    """Restaura um Manifest previamente persistido."""
    return DaemonManifest.from_dict(json.loads(Path(path).read_text(encoding="utf-8")))
