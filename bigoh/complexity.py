"""Theoretical growth functions for the six mystery algorithms.

Growth values are only meaningful as a ratio between two sizes of the same
algorithm; they are never wall-clock units.
"""

from __future__ import annotations

import math
from typing import Callable, Dict

INVALID = -1

ALGORITHM_IDS = (1, 2, 3, 4, 5, 6)

# algorithm id -> (exponent of n)
_EXPONENTS: Dict[int, int] = {
    1: 1,
    2: 3,
    3: 2,
    4: 2,
    5: 5,
    6: 4,
}

GROWTH_FUNCTIONS: Dict[int, Callable[[float], float]] = {
    alg_id: (lambda n, k=k: float(n) ** k) for alg_id, k in _EXPONENTS.items()
}


def is_valid_algorithm(algorithm_id: int) -> bool:
    return algorithm_id in GROWTH_FUNCTIONS


def growth(algorithm_id: int, n: float) -> float:
    """Return the theoretical relative cost of ``algorithm_id`` at size ``n``.

    Returns ``INVALID`` (-1) for ``n <= 0`` or an unknown algorithm id, and
    ``math.inf`` when the value exceeds the float range.
    """
    if n <= 0:
        return INVALID
    func = GROWTH_FUNCTIONS.get(algorithm_id)
    if func is None:
        return INVALID
    try:
        return func(n)
    except OverflowError:
        return math.inf


def growth_label(algorithm_id: int) -> str | None:
    """Human readable class, e.g. ``O(n^2)``; ``None`` for unknown ids."""
    k = _EXPONENTS.get(algorithm_id)
    if k is None:
        return None
    return "O(n)" if k == 1 else f"O(n^{k})"
