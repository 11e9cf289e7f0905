import itertools
import random

import pytest

from olysolve.gomory_hu import run, solve
from olysolve.maxflow import MaxFlow


def _pairwise_cut_sum(n, edges):
    base = MaxFlow(n)
    for u, v in edges:
        base.add_bidirectional_edge(u - 1, v - 1, 1, 1)
    return sum(base.copy().dinic(s, t) for s, t in itertools.combinations(range(n), 2))


def test_triangle():
    assert solve(3, [(1, 2), (2, 3), (1, 3)], random.Random(1)) == 6


def test_single_vertex():
    assert solve(1, [], random.Random(0)) == 0


def test_no_edges():
    assert solve(4, [], random.Random(0)) == 0


@pytest.mark.parametrize("seed", range(6))
def test_matches_pairwise_cuts(seed):
    gen = random.Random(seed)
    n = gen.randint(2, 7)
    edges = [(gen.randint(1, n), gen.randint(1, n)) for _ in range(gen.randint(0, 12))]
    assert solve(n, edges, random.Random(seed + 100)) == _pairwise_cut_sum(n, edges)


def test_result_independent_of_seed():
    edges = [(1, 2), (2, 3), (3, 4), (4, 1), (1, 3), (4, 5)]
    results = {solve(5, edges, random.Random(seed)) for seed in range(5)}
    assert len(results) == 1


def test_run_format():
    assert run("3 3\n1 2\n2 3\n1 3\n") == "6\n"


def test_bad_edge_rejected():
    with pytest.raises(ValueError):
        solve(2, [(1, 3)], random.Random(0))