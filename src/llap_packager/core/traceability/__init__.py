# src/llap_packager/core/traceability/__init__.py
"""
Pacote de rastreabilidade do LLAP Packager — Manifest do daemon.

API pública exposta:
    - DaemonManifest  → estrutura canônica do Manifest
    - build_manifest  → projeção da configuração resolvida no Manifest
    - save_manifest   → persistência do Manifest em JSON
    - load_manifest   → restauração determinística do Manifest

Invariantes:
    - Todos os campos documentados estão sempre presentes
    - A estrutura é serializável e reprodutível
"""

from .manifest import (
    MANIFEST_FIELDS,
    DaemonManifest,
    build_manifest,
    load_manifest,
    save_manifest,
)

__all__ = [
    "MANIFEST_FIELDS",
    "DaemonManifest",
    "build_manifest",
    "load_manifest",
    "save_manifest",
]
