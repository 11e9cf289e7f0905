import random

import pytest

from olysolve.mst_queries import LinkCutTree, PersistentSegmentTree, run, solve


def _kruskal(n, edges, lo, hi):
    parent = list(range(n + 1))

    def find(x):
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    total = 0
    for w, u, v in sorted((w, u, v) for u, v, w in edges if lo <= w <= hi):
        ru, rv = find(u), find(v)
        if ru != rv:
            parent[ru] = rv
            total += w
    return total


@pytest.mark.parametrize("seed", range(8))
def test_matches_kruskal(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 7)
    edges = [
        (rng.randint(1, n), rng.randint(1, n), rng.randint(1, 20))
        for _ in range(rng.randint(1, 14))
    ]
    plain = []
    for _ in range(25):
        l = rng.randint(0, 22)
        plain.append((l, rng.randint(l - 3, 22)))
    expected = [_kruskal(n, edges, l, r) for l, r in plain]
    encoded, prev = [], 0
    for (l, r), e in zip(plain, expected):
        encoded.append((l + prev, r + prev))
        prev = e
    assert solve(n, edges, encoded) == expected


def test_run_decodes_with_previous_answer():
    assert run("1\n2 1\n1 2 5\n2\n1 10\n6 15\n") == "5\n5\n"


def test_no_edges_gives_zero():
    assert solve(3, [], [(1, 10)]) == [0]


def test_link_cut_connectivity():
    lct = LinkCutTree(5)
    lct.link(0, 1)
    lct.link(1, 2)
    assert lct.connected(0, 2)
    assert not lct.connected(0, 3)
    lct.cut(1, 2)
    assert not lct.connected(0, 2)
    assert lct.connected(0, 1)


def test_link_cut_path_max():
    lct = LinkCutTree(4)
    for u, value in enumerate([3, 9, 1, 4]):
        lct.set_value(u, value)
    lct.link(0, 1)
    lct.link(1, 2)
    lct.link(2, 3)
    assert lct.path_max(2, 3) == 4
    assert lct.path_max(0, 3) == 9
    lct.set_value(1, 0)
    assert lct.path_max(0, 3) == 4


def test_link_cut_errors():
    lct = LinkCutTree(3)
    lct.link(0, 1)
    lct.link(1, 2)
    with pytest.raises(ValueError):
        lct.link(0, 2)
    with pytest.raises(ValueError):
        lct.cut(0, 2)
    lct.cut(0, 1)
    with pytest.raises(ValueError):
        lct.path_max(0, 2)
    with pytest.raises(IndexError):
        lct.connected(0, 3)


def test_persistent_tree_keeps_versions():
    tree = PersistentSegmentTree(6)
    r1 = tree.change(0, 3, 5)
    r2 = tree.change(r1, 1, 2)
    r3 = tree.change(r2, 3, 0)
    assert tree.prefix_sum(r2, 3) == 7
    assert tree.prefix_sum(r1, 3) == 5
    assert tree.prefix_sum(r2, 2) == 2
    assert tree.prefix_sum(r3, 6) == 2
    assert tree.prefix_sum(0, 6) == 0


def test_persistent_tree_range_errors():
    tree = PersistentSegmentTree(4)
    with pytest.raises(IndexError):
        tree.change(0, 5, 1)
    with pytest.raises(IndexError):
        tree.prefix_sum(0, 5)