# tests/core/budget/test_validator.py
"""
Testes do validador do orçamento de recursos.

Os testes asseguram que:
- cache >= container e heap >= container abortam com os valores na mensagem
- com allocator off-heap, heap + cache >= container aborta mesmo quando
  cada valor individualmente é menor que o container
- container abaixo do mínimo do cluster aborta citando o mínimo
- valores não definidos (-1) pulam a regra correspondente

Limites explícitos:
    - Não valida a projeção do orçamento na configuração
"""

import pytest

try:
    from llap_packager.core.budget.budget import UNSET, ResourceBudget
    from llap_packager.core.budget.validator import validate_budget
    from llap_packager.core.exceptions import ContainerBelowMinimum, ResourceBudgetViolation
except Exception as e:  # noqa: BLE001
    validate_budget = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None

MIB = 1024 * 1024


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing budget validator. Implement:\n"
            "- src/llap_packager/core/budget/validator.py (validate_budget)\n"
            f"Import error: {_IMPORT_ERR}"
        )


@pytest.mark.parametrize(
    "container, cache, heap",
    [
        (100, 100, UNSET),
        (100, 150, UNSET),
        (100, UNSET, 100),
        (100, UNSET, 101),
        (100, 10, 100),
    ],
)
def test_cache_or_heap_not_below_container_is_rejected(container, cache, heap):
    _require_imports()
    budget = ResourceBudget(container_bytes=container, cache_bytes=cache, heap_bytes=heap, allocator_direct=False)

    with pytest.raises(ResourceBudgetViolation) as exc:
        validate_budget(budget, min_allocation_mb=UNSET)

    assert f"container={container}" in str(exc.value)
    assert exc.value.details["container_bytes"] == container


def test_off_heap_sum_must_fit_in_container():
    """container=100, heap=60, cache=60 falha com allocator off-heap."""
    _require_imports()
    budget = ResourceBudget(container_bytes=100, cache_bytes=60, heap_bytes=60, allocator_direct=True)

    with pytest.raises(ResourceBudgetViolation) as exc:
        validate_budget(budget, min_allocation_mb=UNSET)

    message = str(exc.value)
    assert "xmx=60" in message and "cache=60" in message


def test_off_heap_sum_within_container_passes():
    _require_imports()
    budget = ResourceBudget(container_bytes=100, cache_bytes=40, heap_bytes=40, allocator_direct=True)
    validate_budget(budget, min_allocation_mb=UNSET)


def test_on_heap_allocator_skips_sum_rule():
    _require_imports()
    budget = ResourceBudget(container_bytes=100, cache_bytes=60, heap_bytes=60, allocator_direct=False)
    validate_budget(budget, min_allocation_mb=UNSET)


def test_container_below_cluster_minimum_is_rejected():
    _require_imports()
    budget = ResourceBudget(container_bytes=32 * MIB)

    with pytest.raises(ContainerBelowMinimum) as exc:
        validate_budget(budget, min_allocation_mb=64)

    assert "64" in str(exc.value)
    assert exc.value.details == {"container_mb": 32, "min_allocation_mb": 64}


def test_container_equal_to_minimum_passes():
    _require_imports()
    validate_budget(ResourceBudget(container_bytes=64 * MIB), min_allocation_mb=64)


def test_below_minimum_is_a_budget_violation():
    _require_imports()
    assert issubclass(ContainerBelowMinimum, ResourceBudgetViolation)


def test_unset_container_skips_every_rule():
    _require_imports()
    budget = ResourceBudget(cache_bytes=10 * 1024 * MIB, heap_bytes=10 * 1024 * MIB)
    validate_budget(budget, min_allocation_mb=1024)
