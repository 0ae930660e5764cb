# src/llap_packager/core/staging.py
"""
StagingDirectory — layout fixo do pacote produzido por uma run.

    <root>/lib/*          artefatos de empacotamento (plano, sem subdiretórios)
    <root>/conf/*         arquivos de configuração copiados + site file do daemon
    <root>/config.json    manifest para o tooling de launch

O diretório é criado a cada run e nunca é removido por este pacote:
o ciclo de vida após o assembly pertence ao orquestrador.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from llap_packager.core.config import keys


@dataclass(frozen=True)
class StagingDirectory:
    root: Path

    @classmethod
    def at(cls, path: str | Path) -> "StagingDirectory":
        return cls(root=Path(path))

    @property
    def lib_dir(self) -> Path:
        return self.root / "lib"

    @property
    def conf_dir(self) -> Path:
        return self.root / "conf"

    @property
    def manifest_path(self) -> Path:
        return self.root / keys.MANIFEST_FILE
