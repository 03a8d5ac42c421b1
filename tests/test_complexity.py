import math

import pytest

from bigoh.complexity import ALGORITHM_IDS, INVALID, growth, growth_label, is_valid_algorithm


@pytest.mark.parametrize(
    "alg, expected",
    [(1, 7.0), (2, 343.0), (3, 49.0), (4, 49.0), (5, 16807.0), (6, 2401.0)],
)
def test_growth_table(alg: int, expected: float):
    assert growth(alg, 7) == expected


@pytest.mark.parametrize("alg", ALGORITHM_IDS)
def test_growth_positive_and_strictly_increasing(alg: int):
    sizes = [0.5, 1, 2, 3, 10, 100]
    values = [growth(alg, n) for n in sizes]
    assert all(v > 0 for v in values)
    assert all(a < b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("alg", [0, 7, -1, 99])
def test_unknown_algorithm_is_invalid(alg: int):
    assert growth(alg, 50) == INVALID
    assert not is_valid_algorithm(alg)


@pytest.mark.parametrize("n", [0, -5, -0.1])
def test_non_positive_size_is_invalid(n: float):
    for alg in ALGORITHM_IDS:
        assert growth(alg, n) == INVALID


def test_invalid_id_and_invalid_size_independent():
    assert growth(99, 50) == -1
    assert growth(3, -5) == -1
    assert growth(3, 5) == 25.0


def test_growth_label():
    assert growth_label(1) == "O(n)"
    assert growth_label(3) == "O(n^2)"
    assert growth_label(5) == "O(n^5)"
    assert growth_label(42) is None


@pytest.mark.parametrize("alg, n", [(5, 1e70), (2, 10**120), (6, 1e300), (1, 10**400)])
def test_growth_overflow_is_infinite(alg: int, n: float):
    value = growth(alg, n)
    assert value == math.inf
    assert value > 0
