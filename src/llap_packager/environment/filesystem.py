# src/llap_packager/environment/filesystem.py
"""
Capability de filesystem usada pelo assembly.

O pipeline nunca chama `shutil`/`os` diretamente: toda operação de disco
passa por um `FileSystem`, o que permite trocar a implementação (ex.: um
cliente de filesystem distribuído) e observar as operações em testes.

Operações (todas síncronas e bloqueantes):
    - exists, mkdirs, delete, list_dir
    - copy_file (para dentro de um diretório, mantendo o nome)
    - copy_to (para um caminho de destino explícito)
    - open_write (stream binário)

`LocalFileSystem` entende caminhos locais e URIs `file://`.
"""

from __future__ import annotations

import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import IO, ContextManager, Iterator, List, Protocol, Union, runtime_checkable
from urllib.parse import unquote, urlparse

PathLike = Union[str, Path]


@runtime_checkable
class FileSystem(Protocol):
    def exists(self, path: PathLike) -> bool: ...

    def mkdirs(self, path: PathLike) -> None: ...

    def copy_file(self, src: PathLike, dest_dir: PathLike) -> Path: ...

    def copy_to(self, src: PathLike, dest: PathLike) -> Path: ...

    def delete(self, path: PathLike) -> None: ...

    def list_dir(self, path: PathLike) -> List[Path]: ...

    def open_write(self, path: PathLike) -> ContextManager[IO[bytes]]: ...


def to_local_path(path: PathLike) -> Path:
    """Converte caminho local ou URI `file://` em Path."""
    if isinstance(path, Path):
        return path
    parsed = urlparse(path)
    if parsed.scheme == "file":
        return Path(unquote(parsed.path))
    if parsed.scheme and len(parsed.scheme) > 1:
        raise ValueError(f"Esquema não suportado pelo filesystem local: {parsed.scheme}://")
    return Path(path)


class LocalFileSystem:
    """Implementação local (pathlib/shutil) da capability de filesystem."""

    def exists(self, path: PathLike) -> bool:
        return to_local_path(path).exists()

    def mkdirs(self, path: PathLike) -> None:
        to_local_path(path).mkdir(parents=True, exist_ok=True)

    def copy_file(self, src: PathLike, dest_dir: PathLike) -> Path:
        source = to_local_path(src)
        target = to_local_path(dest_dir) / source.name
        return self.copy_to(source, target)

    def copy_to(self, src: PathLike, dest: PathLike) -> Path:
        source = to_local_path(src)
        target = to_local_path(dest)
        if not source.is_file():
            raise FileNotFoundError(f"Arquivo de origem não encontrado: {source}")
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
        return target

    def delete(self, path: PathLike) -> None:
        p = to_local_path(path)
        if p.is_dir():
            shutil.rmtree(p)
        elif p.exists():
            p.unlink()

    def list_dir(self, path: PathLike) -> List[Path]:
        p = to_local_path(path)
        if not p.is_dir():
            return []
        return sorted(p.iterdir())

    @contextmanager
    def open_write(self, path: PathLike) -> Iterator[IO[bytes]]:
        p = to_local_path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("wb") as stream:
            yield stream
