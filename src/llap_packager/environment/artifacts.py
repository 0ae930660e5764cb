# src/llap_packager/environment/artifacts.py
"""
Resolução de artefatos de empacotamento (jar) por identificador de biblioteca.

Um identificador é tipicamente o nome de uma classe representativa
(ex.: `org.apache.hive.hcatalog.data.JsonSerDe`); o resolver devolve o
caminho do artefato que a contém, ou `None` quando não há artefato.

`MappingArtifactResolver` é a implementação local, alimentada por um
documento YAML/JSON:

    artifacts:
      org.apache.hive.hcatalog.data.JsonSerDe: /opt/hive/lib/hive-hcatalog-core.jar
    dependencies:
      org.apache.hadoop.hive.hbase.HBaseSerDe:
        - /opt/hbase/lib/hbase-client.jar
        - /opt/hbase/lib/hbase-common.jar
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional, Protocol, Sequence, runtime_checkable

from llap_packager.core.config.errors import InvalidConfigRootTypeError
from llap_packager.core.config.loader import load_document


@runtime_checkable
class ArtifactResolver(Protocol):
    def resolve(self, library_id: str) -> Optional[str]: ...

    def dependencies(self, library_id: str) -> List[str]: ...


@dataclass(frozen=True)
class MappingArtifactResolver:
    artifacts: Mapping[str, str] = field(default_factory=dict)
    dependency_map: Mapping[str, Sequence[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "artifacts", MappingProxyType(dict(self.artifacts)))
        object.__setattr__(
            self,
            "dependency_map",
            MappingProxyType({k: tuple(v) for k, v in self.dependency_map.items()}),
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "MappingArtifactResolver":
        doc = load_document(path)
        artifacts = doc.get("artifacts") or {}
        dependencies = doc.get("dependencies") or {}
        if not isinstance(artifacts, dict) or not isinstance(dependencies, dict):
            raise InvalidConfigRootTypeError(
                f"'artifacts' e 'dependencies' devem ser dicts em {Path(path).name}"
            )
        for library_id, deps in dependencies.items():
            if not isinstance(deps, list):
                raise InvalidConfigRootTypeError(
                    f"Dependências de '{library_id}' devem ser lista, recebido: {type(deps).__name__}"
                )
        return cls(
            artifacts={str(k): str(v) for k, v in artifacts.items()},
            dependency_map={str(k): [str(p) for p in v] for k, v in dependencies.items()},
        )

    def resolve(self, library_id: str) -> Optional[str]:
        return self.artifacts.get(library_id)

    def dependencies(self, library_id: str) -> List[str]:
        return list(self.dependency_map.get(library_id, ()))
