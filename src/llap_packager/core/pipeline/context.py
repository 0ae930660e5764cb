# src/llap_packager/core/pipeline/context.py
"""
Contexto de execução compartilhado do pipeline de empacotamento.

Este módulo define o `PackagingContext`, a estrutura canônica passada a
todos os Steps durante o assembly de um pacote.

O PackagingContext atua como o único meio permitido de:
    - acesso à configuração resolvida e ao orçamento validado (somente leitura)
    - acesso aos colaboradores externos (filesystem, resolver de artefatos, ...)
    - troca indireta de informações entre Steps (artifact store)
    - registro de logs estruturados de execução
    - coleta de warnings não fatais associados a Steps

Princípios fundamentais:
    - Isolamento por execução (cada run possui seu próprio contexto)
    - Comunicação explícita e rastreável
    - Ausência de estado global compartilhado

Invariantes:
    - `resolved` e `budget` são imutáveis; Steps nunca os alteram
    - Logs sempre incluem `run_id` e `step_id`
    - Warnings são agrupados por `step_id`

Limites explícitos:
    - Não executa Steps
    - Não persiste dados automaticamente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, List

from llap_packager.core.budget.budget import ResourceBudget
from llap_packager.core.config.resolver import ResolvedConfiguration
from llap_packager.core.staging import StagingDirectory

if TYPE_CHECKING:  # pragma: no cover
    from llap_packager.environment.collaborators import Collaborators
    from llap_packager.options import PackageOptions


@dataclass
class PackagingContext:
    """
    Contexto de execução de uma run de empacotamento.

    Campos canônicos:
    - run_id: identificador único da execução
    - created_at: timestamp UTC de criação do contexto
    - resolved: configuração autoritativa do daemon
    - budget: orçamento de recursos já validado
    - options: opções recebidas da camada de CLI
    - staging: layout do diretório de saída
    - env: colaboradores externos (filesystem, artefatos, framework, java)
    - meta: metadados livres da execução
    - events: log estruturado de eventos
    - warnings: warnings por step_id
    """

    run_id: str
    created_at: datetime
    resolved: ResolvedConfiguration
    budget: ResourceBudget
    options: "PackageOptions"
    staging: StagingDirectory
    env: "Collaborators"
    meta: Dict[str, Any] = field(default_factory=dict)

    _artifacts: Dict[str, Any] = field(default_factory=dict, init=False, repr=False)
    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Artifact store
    # -----------------------------
    def set_artifact(self, key: str, value: Any) -> None:
        self._artifacts[key] = value

    def has_artifact(self, key: str) -> bool:
        return key in self._artifacts

    def get_artifact(self, key: str) -> Any:
        if key not in self._artifacts:
            raise KeyError(key)
        return self._artifacts[key]

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "step_id": step_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, step_id: str, message: str) -> None:
        if step_id not in self.warnings:
            self.warnings[step_id] = []
        self.warnings[step_id].append(message)
        self.log(step_id=step_id, level="WARN", message=message)
