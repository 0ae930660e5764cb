# src/llap_packager/environment/java.py
"""Descoberta da instalação Java do ambiente (JAVA_HOME e runtime no PATH)."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class JavaProbe(Protocol):
    def env_java_home(self) -> Optional[str]: ...

    def runtime_java_home(self) -> Optional[str]: ...


@dataclass(frozen=True)
class ProcessJavaProbe:
    environ: Mapping[str, str] = field(default_factory=lambda: dict(os.environ))

    def env_java_home(self) -> Optional[str]:
        value = self.environ.get("JAVA_HOME")
        return value or None

    def runtime_java_home(self) -> Optional[str]:
        # <home>/bin/java
        java = shutil.which("java", path=self.environ.get("PATH"))
        if java is None:
            return None
        return str(Path(java).resolve().parent.parent)


@dataclass(frozen=True)
class StaticJavaProbe:
    env_home: Optional[str] = None
    runtime_home: Optional[str] = None

    def env_java_home(self) -> Optional[str]:
        return self.env_home

    def runtime_java_home(self) -> Optional[str]:
        return self.runtime_home
