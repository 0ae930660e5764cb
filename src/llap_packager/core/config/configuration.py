# src/llap_packager/core/config/configuration.py
"""
Configuração de trabalho imutável do LLAP Packager.

Este módulo define `Configuration`, o mapa chave → valor (string) que
representa a configuração *base* de uma run: arquivos do cluster já
carregados, server properties aceitas e valores derivados do orçamento
de recursos.

Política de mutação (v1):
    - Instâncias são imutáveis (frozen)
    - Toda "escrita" retorna uma NOVA instância (`with_values`)
    - Cada valor carrega a sua origem (provenance) para diagnóstico

Princípios fundamentais:
    - Cada estágio recebe a configuração, e devolve a configuração atualizada
    - Nenhum estado global é mantido
    - Leituras tipadas são explícitas (`get_int`, `get_bool`)

Invariantes:
    - Chaves e valores são sempre strings
    - `sources` possui exatamente as mesmas chaves que `values`
    - O input nunca é mutado por `with_values`

Limites explícitos:
    - Não carrega arquivos (ver loader)
    - Não aplica allow-list (ver resolver)
    - Não valida orçamento de recursos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

_BOOLEANS = {"true": True, "false": False}


def _freeze(data: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(data))


@dataclass(frozen=True)
class Configuration:
    """
    Valor imutável de configuração (chave → string, com provenance).

    Campos:
        - values: mapa chave → valor
        - sources: mapa chave → rótulo de origem (arquivo, "server-properties", ...)
    """

    values: Mapping[str, str] = field(default_factory=dict)
    sources: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", _freeze(self.values))
        object.__setattr__(self, "sources", _freeze(self.sources))

    # -----------------------------
    # Leitura
    # -----------------------------
    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.values.get(key, default)

    def source_of(self, key: str) -> Optional[str]:
        return self.sources.get(key)

    def get_int(self, key: str, default: int = -1) -> int:
        raw = self.values.get(key)
        if raw is None or not str(raw).strip():
            return default
        return int(str(raw).strip())

    def get_bool(self, key: str, default: bool = False) -> bool:
        raw = self.values.get(key)
        if raw is None or not str(raw).strip():
            return default
        # "true" / "false" sem distinção de caixa; qualquer outro valor usa o default
        return _BOOLEANS.get(str(raw).strip().lower(), default)

    def as_dict(self) -> Dict[str, str]:
        return dict(self.values)

    # -----------------------------
    # Escrita (retorna nova instância)
    # -----------------------------
    def with_values(self, updates: Mapping[str, str], *, source: str) -> "Configuration":
        values = dict(self.values)
        sources = dict(self.sources)
        for key, value in updates.items():
            values[str(key)] = str(value)
            sources[str(key)] = source
        return Configuration(values=values, sources=sources)

