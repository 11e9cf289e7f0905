import random

import pytest

from olysolve.grid_paths_mod import P, run, solve


def _table(n, a, b, c, left, top):
    grid = [[0] * (n + 1) for _ in range(n + 1)]
    for j in range(1, n + 1):
        grid[1][j] = left[j - 1]
    for i in range(1, n + 1):
        grid[i][1] = top[i - 1]
    for i in range(2, n + 1):
        for j in range(2, n + 1):
            grid[i][j] = (a * grid[i - 1][j] + b * grid[i][j - 1] + c) % P
    return grid[n][n]


@pytest.mark.parametrize("seed", range(8))
def test_matches_table(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 7)
    a, b, c = (rng.randint(0, 50) for _ in range(3))
    left = [rng.randint(0, 100) for _ in range(n)]
    top = [rng.randint(0, 100) for _ in range(n)]
    assert solve(n, a, b, c, left, top) == _table(n, a, b, c, left, top)


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        solve(3, 1, 1, 1, [1, 2], [1, 2, 3])


def test_run():
    args = (4, 3, 5, 2, [7, 1, 4, 2], [7, 9, 3, 6])
    assert run("4 3 5 2\n7 1 4 2\n7 9 3 6\n") == f"{_table(*args)}\n"