# src/llap_packager/core/config/resources.py
"""
Lookup de recursos de configuração do ambiente host.

`ConfigurationResources` representa o "classpath de configuração":
uma lista ordenada de diretórios onde arquivos como `hive-site.xml`
ou `llap-daemon-log4j2.properties` são procurados.

Política de lookup (v1):
    - Diretórios são consultados na ordem declarada
    - O primeiro diretório que contém o arquivo vence
    - Diretórios inexistentes são ignorados silenciosamente

Limites explícitos:
    - Não lê o conteúdo dos arquivos
    - Não decide se a ausência é fatal (responsabilidade do chamador)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from llap_packager.core.errors import config_resource_missing
from llap_packager.core.exceptions import MissingConfigResource


@dataclass(frozen=True)
class ConfigurationResources:
    """Lista ordenada de diretórios de configuração."""

    search_path: Tuple[Path, ...] = field(default_factory=tuple)

    @classmethod
    def from_dirs(cls, dirs: Iterable[str | Path]) -> "ConfigurationResources":
        return cls(search_path=tuple(Path(d) for d in dirs))

    def find(self, name: str) -> Optional[Path]:
        for directory in self.search_path:
            candidate = directory / name
            if candidate.is_file():
                return candidate
        return None

    def searched(self) -> List[str]:
        return [str(d) for d in self.search_path]


def locate_required(resources: ConfigurationResources, names: Sequence[str]) -> Dict[str, Path]:
    """
    Localiza todos os recursos obrigatórios, na ordem declarada.

    Raises:
        MissingConfigResource: no primeiro recurso ausente (mensagem nomeia o arquivo).
    """
    found: Dict[str, Path] = {}
    for name in names:
        path = resources.find(name)
        if path is None:
            payload = config_resource_missing(resource=name, searched=resources.searched())
            raise MissingConfigResource(payload.message, details=payload.details, hint=payload.hint)
        found[name] = path
    return found


def locate_optional(resources: ConfigurationResources, names: Sequence[str]) -> Dict[str, Path]:
    """Localiza recursos opcionais; ausentes são simplesmente omitidos."""
    found: Dict[str, Path] = {}
    for name in names:
        path = resources.find(name)
        if path is not None:
            found[name] = path
    return found
