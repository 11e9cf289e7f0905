import random

import pytest

from olysolve.insider import run, solve


def test_single_triple_puts_middle_between():
    assert solve(3, [(1, 2, 3)]) == [1, 2, 3]


def test_no_triples_keeps_natural_order():
    assert solve(5, []) == list(range(1, 6))


@pytest.mark.parametrize("seed", range(20))
def test_result_is_permutation(seed):
    rng = random.Random(seed)
    n = rng.randint(3, 12)
    perm = list(range(1, n + 1))
    rng.shuffle(perm)
    triples = []
    for _ in range(rng.randint(0, 10)):
        i, j, k = sorted(rng.sample(range(n), 3))
        ends = [perm[i], perm[k]]
        rng.shuffle(ends)
        triples.append((ends[0], perm[j], ends[1]))
        # middle always comes later in perm than one end, so an order exists
    try:
        result = solve(n, triples)
    except ValueError:
        pytest.fail("elimination order should exist")
    assert sorted(result) == list(range(1, n + 1))


def test_cyclic_triples_rejected():
    with pytest.raises(ValueError):
        solve(2, [(2, 1, 2), (1, 2, 1)])


def test_out_of_range_rejected():
    with pytest.raises(ValueError):
        solve(2, [(1, 2, 3)])


def test_run_format():
    assert run("3 1\n1 2 3\n") == " ".join(map(str, solve(3, [(1, 2, 3)]))) + "\n"