# src/llap_packager/core/config/sources.py
"""
Modelo de fontes de configuração (ConfigurationSource) e sua precedência.

Três camadas existem por run:

    BASE              < PROFILE_OVERRIDE          < DIRECT_OVERRIDE
    (arquivos do        (profile nomeado +           (valores derivados de
     cluster)            --hiveconf)                  --size/--cache/--executors...)

Invariantes:
    - A precedência é fixa por `Layer` (rank), nunca pela ordem de inserção
    - Em colisão, a camada de maior rank vence (valor e rótulo de origem)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Iterable, List, Mapping


class Layer(IntEnum):
    BASE = 0
    PROFILE_OVERRIDE = 1
    DIRECT_OVERRIDE = 2

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Layer.BASE: "cluster configuration",
    Layer.PROFILE_OVERRIDE: "command-line profile",
    Layer.DIRECT_OVERRIDE: "command-line direct",
}


@dataclass(frozen=True)
class ConfigurationSource:
    """Camada ordenada de pares chave → string com rank de precedência declarado."""

    layer: Layer
    properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "properties",
            MappingProxyType({str(k): str(v) for k, v in self.properties.items()}),
        )

    @property
    def rank(self) -> int:
        return int(self.layer)

    @property
    def label(self) -> str:
        return self.layer.label

    @classmethod
    def base(cls, properties: Mapping[str, str]) -> "ConfigurationSource":
        return cls(Layer.BASE, properties)

    @classmethod
    def profile_override(cls, properties: Mapping[str, str]) -> "ConfigurationSource":
        return cls(Layer.PROFILE_OVERRIDE, properties)

    @classmethod
    def direct_override(cls, properties: Mapping[str, str]) -> "ConfigurationSource":
        return cls(Layer.DIRECT_OVERRIDE, properties)


def by_precedence(sources: Iterable[ConfigurationSource]) -> List[ConfigurationSource]:
    """Ordena camadas da menor para a maior precedência (sort estável)."""
    return sorted(sources, key=lambda s: s.rank)
