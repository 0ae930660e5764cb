# src/llap_packager/core/config/resolver.py
"""
Resolução da configuração autoritativa do daemon.

Este módulo implementa as duas operações que transformam a configuração
base de uma run na configuração que será gravada em `llap-daemon-site.xml`:

1. `merge_server_properties`: aplica um mapa plano de propriedades
   (profile nomeado + --hiveconf) sobre a configuração base:
       - chave na allow-list do daemon        → aceita
       - fora da allow-list, prefixo reconhecido → aceita com warning
       - caso contrário                       → descartada com warning

2. `resolve`: parte de uma configuração VAZIA e, para cada chave das
   camadas de override (profile < direct), copia o valor que a chave
   possui na configuração base naquele momento.

Decisão registrada (filtro de chaves):
    As camadas de override selecionam QUAIS chaves da base são
    externalizadas; o valor gravado é sempre o da base. Como as
    propriedades e os valores derivados de opções são escritos na base
    antes da resolução, o resultado observável coincide com o valor do
    override de maior precedência. O comportamento é preservado como está.

Princípios fundamentais:
    - Nenhuma das operações levanta erro por chave desconhecida
    - Chaves descartadas/rebaixadas viram `Diagnostic` observáveis
    - Inputs nunca são mutados; cada operação retorna um valor novo

Invariantes:
    - Chaves sem allow-list e sem prefixo reconhecido nunca aparecem no resultado
    - A mesma entrada sempre produz o mesmo mapa resolvido
    - Em colisão entre camadas, a de maior rank vence valor e provenance
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from . import keys
from .configuration import Configuration
from .hashing import compute_config_hash
from .sources import ConfigurationSource, Layer, by_precedence


ACCEPTED_WITH_PREFIX = "accepted-with-prefix"
DROPPED = "dropped"


@dataclass(frozen=True)
class Diagnostic:
    """Registro observável de uma chave rebaixada ou descartada."""

    key: str
    action: str
    message: str
    source: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "key": self.key,
            "action": self.action,
            "message": self.message,
            "source": self.source,
        }


@dataclass(frozen=True)
class ServerPropertiesMerge:
    configuration: Configuration
    diagnostics: Tuple[Diagnostic, ...] = ()


def is_daemon_key(key: str) -> bool:
    return keys.is_known_daemon_key(key) or keys.has_recognized_prefix(key)


def merge_server_properties(
    base: Configuration,
    properties: Mapping[str, str],
    *,
    source: str = Layer.PROFILE_OVERRIDE.label,
) -> ServerPropertiesMerge:
    """
    Escreve server properties na configuração base, respeitando a allow-list.

    Args:
        base (Configuration): Configuração base atual.
        properties (Mapping[str, str]): Propriedades planas (profile + --hiveconf).
        source (str): Rótulo de origem gravado para as chaves aceitas.

    Returns:
        ServerPropertiesMerge: Nova configuração base + diagnostics.
    """
    accepted: Dict[str, str] = {}
    diagnostics: List[Diagnostic] = []

    for key in sorted(properties):
        value = properties[key]
        if keys.is_known_daemon_key(key):
            accepted[key] = value
        elif keys.has_recognized_prefix(key):
            accepted[key] = value
            diagnostics.append(
                Diagnostic(
                    key=key,
                    action=ACCEPTED_WITH_PREFIX,
                    message=f"Adding key [{key}] even though it is not in the set of known llap-server keys",
                    source=source,
                )
            )
        else:
            diagnostics.append(
                Diagnostic(
                    key=key,
                    action=DROPPED,
                    message=f"Ignoring unknown llap server parameter: [{key}]",
                    source=source,
                )
            )

    return ServerPropertiesMerge(
        configuration=base.with_values(accepted, source=source),
        diagnostics=tuple(diagnostics),
    )


@dataclass(frozen=True)
class ResolvedConfiguration:
    """
    Configuração autoritativa do daemon, imutável após a resolução.

    Campos:
        - values: chave → valor gravado no site file do daemon
        - provenance: chave → rótulo da camada vencedora
        - effective: snapshot da configuração base no momento da resolução
        - diagnostics: chaves descartadas/rebaixadas durante merge e resolução
    """

    values: Mapping[str, str] = field(default_factory=dict)
    provenance: Mapping[str, str] = field(default_factory=dict)
    effective: Configuration = field(default_factory=Configuration)
    diagnostics: Tuple[Diagnostic, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        object.__setattr__(self, "provenance", MappingProxyType(dict(self.provenance)))

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.values.get(key, default)

    def as_dict(self) -> Dict[str, str]:
        return dict(self.values)

    def fingerprint(self) -> str:
        return compute_config_hash(self.as_dict())


def resolve_sources(
    base: Configuration,
    sources: Iterable[ConfigurationSource],
    *,
    diagnostics: Iterable[Diagnostic] = (),
) -> ResolvedConfiguration:
    """
    Resolve camadas de override contra a configuração base.

    Camadas `BASE` não selecionam chaves e são ignoradas aqui; as demais
    são aplicadas em ordem de precedência (rank), nunca de inserção.
    """
    values: Dict[str, str] = {}
    provenance: Dict[str, str] = {}
    collected: List[Diagnostic] = list(diagnostics)
    seen = {d.key for d in collected}

    for layer in by_precedence(sources):
        if layer.layer is Layer.BASE:
            continue
        for key in sorted(layer.properties):
            if not is_daemon_key(key):
                if key not in seen:
                    collected.append(
                        Diagnostic(
                            key=key,
                            action=DROPPED,
                            message=f"Ignoring unknown llap server parameter: [{key}]",
                            source=layer.label,
                        )
                    )
                    seen.add(key)
                continue
            value = base.get(key)
            if value is not None:
                values[key] = value
                provenance[key] = layer.label

    return ResolvedConfiguration(
        values=values,
        provenance=provenance,
        effective=base,
        diagnostics=tuple(collected),
    )


def resolve(
    base: Configuration,
    profile_overrides: Mapping[str, str],
    direct_overrides: Mapping[str, str],
    *,
    diagnostics: Iterable[Diagnostic] = (),
) -> ResolvedConfiguration:
    """Atalho para `resolve_sources` com as camadas profile e direct."""
    return resolve_sources(
        base,
        [
            ConfigurationSource.profile_override(profile_overrides),
            ConfigurationSource.direct_override(direct_overrides),
        ],
        diagnostics=diagnostics,
    )
