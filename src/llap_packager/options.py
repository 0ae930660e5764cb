# src/llap_packager/options.py
"""
Opções de uma invocação do packager (forma exigida pelo core).

A camada de CLI é responsável por produzir esta estrutura; o core nunca
lê argv nem variáveis de ambiente diretamente. Tamanhos já chegam em
bytes e `-1` significa "não definido".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

UNSET = -1


@dataclass(frozen=True)
class PackageOptions:
    directory: str
    name: Optional[str] = None
    size: int = UNSET
    cache: int = UNSET
    xmx: int = UNSET
    executors: int = UNSET
    java_home: Optional[str] = None
    aux_jars: Optional[str] = None
    include_hbase: bool = False
    properties: Mapping[str, str] = field(default_factory=dict)
    profile: Optional[str] = None
    profiles_file: Optional[str] = None
    conf_dirs: Tuple[str, ...] = ()
    artifacts_file: Optional[str] = None
    home: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))
        object.__setattr__(self, "conf_dirs", tuple(self.conf_dirs))

    def to_dict(self) -> Dict[str, object]:
        return {
            "directory": self.directory,
            "name": self.name,
            "size": self.size,
            "cache": self.cache,
            "xmx": self.xmx,
            "executors": self.executors,
            "java_home": self.java_home,
            "aux_jars": self.aux_jars,
            "include_hbase": self.include_hbase,
            "properties": dict(self.properties),
            "profile": self.profile,
            "profiles_file": self.profiles_file,
            "conf_dirs": list(self.conf_dirs),
            "artifacts_file": self.artifacts_file,
            "home": self.home,
        }
