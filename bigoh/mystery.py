"""Reference "mystery" algorithms addressed by integer id.

Every algorithm takes an input size and a random generator and returns an
integer. Their costs follow the classes listed in ``bigoh.complexity`` so the
estimator has something real to characterise.
"""

from __future__ import annotations

import itertools
import random
from typing import Callable, Dict

AlgorithmFn = Callable[[int, random.Random], int]

_MAX_VALUE = 1000


def _values(n: int, rng: random.Random) -> list[int]:
    return [rng.randint(0, _MAX_VALUE) for _ in range(n)]


def alg1(n: int, rng: random.Random) -> int:
    """Linear: sum of ``n`` random values."""
    return sum(_values(n, rng))


def alg2(n: int, rng: random.Random) -> int:
    """Cubic: count triples where the first two values outweigh the third."""
    a = _values(n, rng)
    count = 0
    for i in range(n):
        for j in range(n):
            s = a[i] + a[j]
            for k in range(n):
                if s > a[k]:
                    count += 1
    return count


def alg3(n: int, rng: random.Random) -> int:
    """Quadratic: naive inversion count."""
    a = _values(n, rng)
    inversions = 0
    for i in range(n):
        for j in range(i + 1, n):
            if a[i] > a[j]:
                inversions += 1
    return inversions


def alg4(n: int, rng: random.Random) -> int:
    """Quadratic: insertion sort, returns the number of shifts."""
    a = _values(n, rng)
    shifts = 0
    for i in range(1, n):
        key = a[i]
        j = i - 1
        while j >= 0 and a[j] > key:
            a[j + 1] = a[j]
            j -= 1
            shifts += 1
        a[j + 1] = key
    return shifts


def alg5(n: int, rng: random.Random) -> int:
    """Quintic: parity count over all 5-tuples of indices."""
    a = _values(n, rng)
    count = 0
    for idx in itertools.product(range(n), repeat=5):
        if sum(a[i] for i in idx) % 2 == 0:
            count += 1
    return count


def alg6(n: int, rng: random.Random) -> int:
    """Quartic: count 4-tuples whose first pair outweighs the second."""
    a = _values(n, rng)
    count = 0
    for i, j, k, m in itertools.product(range(n), repeat=4):
        if a[i] + a[j] > a[k] + a[m]:
            count += 1
    return count


REGISTRY: Dict[int, AlgorithmFn] = {
    1: alg1,
    2: alg2,
    3: alg3,
    4: alg4,
    5: alg5,
    6: alg6,
}
