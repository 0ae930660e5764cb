# src/llap_packager/environment/collaborators.py
"""
Conjunto de colaboradores externos de uma run de empacotamento.

O assembly só conversa com o mundo exterior através destes objetos;
a fábrica `local_collaborators` monta as implementações locais padrão.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from llap_packager.core.config.resources import ConfigurationResources

from .artifacts import ArtifactResolver, MappingArtifactResolver
from .filesystem import FileSystem, LocalFileSystem
from .framework import FrameworkFetcher, TarballFrameworkFetcher
from .java import JavaProbe, ProcessJavaProbe


@dataclass
class Collaborators:
    fs: FileSystem
    resources: ConfigurationResources
    artifacts: ArtifactResolver
    framework: FrameworkFetcher
    java: JavaProbe = field(default_factory=ProcessJavaProbe)


def local_collaborators(
    *,
    conf_dirs: Iterable[str],
    artifacts_file: Optional[str] = None,
    java: Optional[JavaProbe] = None,
) -> Collaborators:
    fs = LocalFileSystem()
    artifacts = (
        MappingArtifactResolver.from_file(artifacts_file)
        if artifacts_file
        else MappingArtifactResolver()
    )
    return Collaborators(
        fs=fs,
        resources=ConfigurationResources.from_dirs(conf_dirs),
        artifacts=artifacts,
        framework=TarballFrameworkFetcher(fs=fs),
        java=java or ProcessJavaProbe(),
    )
