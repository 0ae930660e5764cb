# src/llap_packager/core/config/sizes.py
"""
Parsing canônico de tamanhos em bytes.

Aceita inteiros puros (bytes) ou sufixos binários, sem diferenciar
maiúsculas de minúsculas, com `b` opcional:

    "1024"  -> 1024
    "512m"  -> 536870912
    "4Gb"   -> 4294967296

Valores negativos são preservados (ex.: "-1" é o sentinela de "não definido").
"""

from __future__ import annotations

import re
from typing import Dict, Union

MIB = 1024 * 1024

_UNITS: Dict[str, int] = {
    "": 1,
    "b": 1,
    "k": 1024,
    "kb": 1024,
    "m": MIB,
    "mb": MIB,
    "g": 1024 * MIB,
    "gb": 1024 * MIB,
    "t": 1024 * 1024 * MIB,
    "tb": 1024 * 1024 * MIB,
}

_SIZE_RE = re.compile(r"^\s*(-?\d+)\s*([a-zA-Z]*)\s*$")


def parse_size(value: Union[str, int]) -> int:
    """
    Converte um tamanho textual para bytes.

    Raises:
        ValueError: Se o valor não for um inteiro com sufixo conhecido.
    """
    if isinstance(value, int):
        return value

    match = _SIZE_RE.match(str(value))
    if match is None:
        raise ValueError(f"Tamanho inválido: {value!r}")

    number, unit = match.groups()
    factor = _UNITS.get(unit.lower())
    if factor is None:
        raise ValueError(f"Unidade de tamanho desconhecida em {value!r}")

    amount = int(number)
    if amount < 0:
        return amount
    return amount * factor


def bytes_to_mb(value: int) -> int:
    """Converte bytes para MB (granularidade de alocação do cluster); -1 é preservado."""
    if value < 0:
        return value
    return value // MIB
