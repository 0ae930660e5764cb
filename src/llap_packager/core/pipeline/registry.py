# src/llap_packager/core/pipeline/registry.py
"""
Registro estrutural de Steps do pipeline.

O `StepRegistry` registra Steps e valida a integridade estrutural do
pipeline antes de qualquer execução:
    - cada Step possui um identificador válido
    - não existem identificadores duplicados
    - a ordem de declaração é preservada e é a ordem de execução

Limites explícitos:
    - Não executa pipeline
    - Não interage com o PackagingContext
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from .step import Step


class DuplicateStepIdError(ValueError):
    """
    Exceção levantada quando ocorre duplicidade de identificador de Step.

    Decisões arquiteturais:
        - Identificadores de Step devem ser únicos no pipeline
        - A duplicidade é tratada como erro fatal de montagem do pipeline
    """


@dataclass
class StepRegistry:
    """
    Registro canônico de Steps para validação estrutural pré-execução.

    Invariantes:
        - Cada `step.id` é único no registry
        - A lista de Steps reflete exatamente a ordem de registro
    """

    _steps: Dict[str, Step] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, step: Step) -> None:
        step_id = getattr(step, "id", None)
        if not isinstance(step_id, str) or not step_id.strip():
            raise ValueError("step.id must be a non-empty string")
        if step_id in self._steps:
            raise DuplicateStepIdError(f"Duplicate step id: {step_id}")

        self._steps[step_id] = step
        self._order.append(step_id)

    def get(self, step_id: str) -> Step:
        return self._steps[step_id]

    def list(self) -> List[Step]:
        return [self._steps[sid] for sid in self._order]

    def ids(self) -> List[str]:
        return list(self._order)
