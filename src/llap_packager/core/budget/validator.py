# src/llap_packager/core/budget/validator.py
"""
Validador do orçamento de recursos de uma instância do daemon.

Regras (cada uma só se aplica quando seus operandos foram definidos):

    1. cache < container
    2. heap < container
    3. allocator off-heap: heap + cache < container
    4. container (em MB) >= alocação mínima reportada pelo cluster

Decisões arquiteturais:
    - A validação ocorre antes de qualquer escrita no staging
    - Violações são erros de uso (mensagem inclui os valores ofensores)
    - A primeira regra violada interrompe a run

Limites explícitos:
    - Não escreve configuração
    - Não consulta o cluster (o mínimo é recebido pronto)
"""

from __future__ import annotations

from llap_packager.core.errors import container_below_minimum, resource_budget_violation
from llap_packager.core.exceptions import ContainerBelowMinimum, ResourceBudgetViolation

from .budget import ResourceBudget, is_set


def _violation(budget: ResourceBudget, message: str) -> ResourceBudgetViolation:
    payload = resource_budget_violation(
        message=message,
        container_bytes=budget.container_bytes,
        cache_bytes=budget.cache_bytes,
        heap_bytes=budget.heap_bytes,
    )
    return ResourceBudgetViolation(payload.message, details=payload.details, hint=payload.hint)


def validate_budget(budget: ResourceBudget, *, min_allocation_mb: int) -> None:
    """
    Verifica a consistência interna do orçamento e o mínimo do cluster.

    Args:
        budget (ResourceBudget): Orçamento solicitado.
        min_allocation_mb (int): `yarn.scheduler.minimum-allocation-mb` (-1 = desconhecido).

    Raises:
        ResourceBudgetViolation: Se cache/heap forem incompatíveis com o container.
        ContainerBelowMinimum: Se o container for menor que o mínimo do cluster.
    """
    size = budget.container_bytes
    if not is_set(size):
        return

    cache = budget.cache_bytes
    heap = budget.heap_bytes

    if is_set(cache) and not cache < size:
        raise _violation(
            budget,
            f"Cache has to be smaller than the container sizing (cache={cache}, container={size})",
        )

    if is_set(heap) and not heap < size:
        raise _violation(
            budget,
            f"Working memory has to be smaller than the container sizing (xmx={heap}, container={size})",
        )

    if budget.allocator_direct and is_set(heap) and is_set(cache) and not heap + cache < size:
        raise _violation(
            budget,
            "Working memory + cache has to be smaller than the container sizing "
            f"(xmx={heap}, cache={cache}, container={size})",
        )

    container_mb = budget.container_mb
    if container_mb < min_allocation_mb:
        payload = container_below_minimum(
            container_mb=container_mb,
            min_allocation_mb=min_allocation_mb,
        )
        raise ContainerBelowMinimum(payload.message, details=payload.details, hint=payload.hint)
