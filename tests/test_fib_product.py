import random

import pytest

from olysolve.fib_product import run, solve


def test_single_coefficient():
    assert solve(1, 1000, [7]) == 7


def test_two_coefficients():
    assert solve(2, 100, [1, 1]) == 1


def test_zero_coefficients_give_zero():
    assert solve(5, 998244353, [0] * 5) == 0


@pytest.mark.parametrize("seed", range(5))
def test_linear_in_coefficients(seed):
    rng = random.Random(seed)
    k, mod = rng.randint(1, 30), rng.randint(2, 10**9)
    a = [rng.randrange(mod) for _ in range(k)]
    b = [rng.randrange(mod) for _ in range(k)]
    combined = [(x + y) % mod for x, y in zip(a, b)]
    assert solve(k, mod, combined) == (solve(k, mod, a) + solve(k, mod, b)) % mod


@pytest.mark.parametrize("seed", range(5))
def test_reduces_consistently_across_moduli(seed):
    rng = random.Random(100 + seed)
    k = rng.randint(1, 25)
    m1, m2 = rng.randint(2, 5000), rng.randint(2, 5000)
    coefficients = [rng.randrange(m1 * m2) for _ in range(k)]
    big = solve(k, m1 * m2, coefficients)
    assert 0 <= big < m1 * m2
    assert big % m1 == solve(k, m1, [c % m1 for c in coefficients])


def test_run_format():
    assert run("2\n1 1000\n7\n1 1000\n0\n") == "7\n0\n"


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        solve(3, 7, [1, 2])