# src/llap_packager/environment/framework.py
"""
Obtenção das bibliotecas do framework de execução (bundle Tez).

`TarballFrameworkFetcher` copia o archive apontado por `tez.lib.uris`
para o diretório lib, extrai o conteúdo de forma achatada (apenas
arquivos regulares, sem a estrutura de diretórios do archive) e remove
o archive ao final.
"""

from __future__ import annotations

import tarfile
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import List, Protocol, runtime_checkable

from llap_packager.core.config import keys

from .filesystem import FileSystem


@runtime_checkable
class FrameworkFetcher(Protocol):
    def fetch(self, uri: str, lib_dir: Path) -> List[Path]: ...


@dataclass
class TarballFrameworkFetcher:
    fs: FileSystem

    def fetch(self, uri: str, lib_dir: Path) -> List[Path]:
        archive = lib_dir / keys.FRAMEWORK_ARCHIVE
        self.fs.mkdirs(lib_dir)
        self.fs.copy_to(uri, archive)
        try:
            return self._untar_flat(archive, lib_dir)
        finally:
            self.fs.delete(archive)

    def _untar_flat(self, archive: Path, lib_dir: Path) -> List[Path]:
        extracted: List[Path] = []
        with tarfile.open(archive, "r:*") as tar:
            for member in tar.getmembers():
                if not member.isfile():
                    continue
                name = PurePosixPath(member.name).name
                if not name:
                    continue
                source = tar.extractfile(member)
                if source is None:
                    continue
                target = lib_dir / name
                with source, self.fs.open_write(target) as out:
                    out.write(source.read())
                extracted.append(target)
        return extracted
