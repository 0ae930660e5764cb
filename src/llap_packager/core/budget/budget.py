# src/llap_packager/core/budget/budget.py
"""
ResourceBudget — fatos derivados de dimensionamento de uma instância.

O orçamento não é persistido como entidade própria: ele é validado e
depois projetado em entradas da configuração (container em MB, heap em
MB, cache em bytes, número de executors).

Convenção de "não definido":
    - Todo valor numérico usa o sentinela `UNSET` (-1)
    - Regras de validação com algum operando `UNSET` são puladas
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from llap_packager.core.config import keys
from llap_packager.core.config.configuration import Configuration
from llap_packager.core.config.sizes import bytes_to_mb
from llap_packager.core.config.sources import Layer

UNSET = -1


def is_set(value: int) -> bool:
    return value != UNSET


@dataclass(frozen=True)
class ResourceBudget:
    container_bytes: int = UNSET
    cache_bytes: int = UNSET
    heap_bytes: int = UNSET
    executors: int = UNSET
    allocator_direct: bool = keys.ALLOCATOR_DIRECT_DEFAULT

    @property
    def container_mb(self) -> int:
        return bytes_to_mb(self.container_bytes)

    @property
    def heap_mb(self) -> int:
        return bytes_to_mb(self.heap_bytes)

    def to_dict(self) -> Dict[str, object]:
        return {
            "container_bytes": self.container_bytes,
            "cache_bytes": self.cache_bytes,
            "heap_bytes": self.heap_bytes,
            "executors": self.executors,
            "allocator_direct": self.allocator_direct,
        }


def direct_overrides_for(
    budget: ResourceBudget,
    *,
    instance_name: Optional[str] = None,
) -> Dict[str, str]:
    """
    Deriva as chaves da camada direct-override a partir das opções.

    Apenas valores definidos produzem chaves; a ordem de inserção é
    irrelevante (a resolução ordena por chave).
    """
    direct: Dict[str, str] = {}

    if instance_name:
        # caveat: registry de serviço apenas; não altera o que o AM lê
        direct[keys.SERVICE_HOSTS] = "@" + instance_name

    if is_set(budget.container_bytes):
        direct[keys.CONTAINER_MB] = str(budget.container_mb)

    if is_set(budget.executors):
        direct[keys.NUM_EXECUTORS] = str(budget.executors)

    if is_set(budget.cache_bytes):
        direct[keys.CACHE_SIZE] = str(budget.cache_bytes)

    if is_set(budget.heap_bytes):
        direct[keys.MEMORY_PER_INSTANCE_MB] = str(budget.heap_mb)

    return direct


def apply_direct_overrides(conf: Configuration, direct: Dict[str, str]) -> Configuration:
    """Escreve a camada direct-override na configuração base (nova instância)."""
    return conf.with_values(direct, source=Layer.DIRECT_OVERRIDE.label)
