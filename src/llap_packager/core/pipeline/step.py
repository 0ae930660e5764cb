# src/llap_packager/core/pipeline/step.py
"""
Contrato canônico de Step do pipeline de empacotamento.

Um Step é a menor unidade executável do pipeline e representa um
estágio atômico do assembly (preflight, staging de uma biblioteca,
escrita de um arquivo de configuração, emissão do manifest).

Princípios fundamentais:
    - Steps não conhecem o Engine
    - Steps não controlam ordem de execução (a ordem é a do registro)
    - Comunicação entre Steps é mediada pelo PackagingContext
    - Conformidade é garantida por duck typing (@runtime_checkable)

Invariantes:
    - Cada Step possui um `id` único
    - Cada Step declara explicitamente sua política (mandatory/optional)
    - O método `run` é chamado no máximo uma vez por execução
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .context import PackagingContext
from .types import StepKind, StepPolicy, StepResult


@runtime_checkable
class Step(Protocol):
    """
    Contrato canônico de um Step.

    Atributos obrigatórios:
        - id: identificador único e estável do Step
        - kind: classificação semântica do Step (`StepKind`)
        - policy: `StepPolicy.MANDATORY` ou `StepPolicy.OPTIONAL`

    Limites explícitos:
        - Não define lógica de retry
        - Não decide se a sua falha é fatal (isso é do Engine, via `policy`)
    """

    id: str
    kind: StepKind
    policy: StepPolicy

    def run(self, ctx: PackagingContext) -> StepResult:
        """Executa a etapa uma única vez usando exclusivamente o contexto."""
        ...
