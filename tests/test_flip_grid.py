import random

import pytest

from olysolve.flip_grid import run, solve


def _identity(h, w):
    return [[i * w + j + 1 for j in range(w)] for i in range(h)]


def _apply(grid, moves):
    g = [list(row) for row in grid]
    for kind, index in moves:
        if kind == "R":
            g[index - 1].reverse()
        else:
            column = [row[index - 1] for row in g]
            for row, v in zip(g, reversed(column)):
                row[index - 1] = v
    return g


def test_identity_needs_no_moves():
    assert solve(_identity(3, 4)) == []
    assert run("1\n2 2\n1 2\n3 4\n") == "POSSIBLE 0\n"


@pytest.mark.parametrize("h,w", [(2, 2), (3, 3), (4, 6), (5, 4), (1, 3), (6, 5)])
@pytest.mark.parametrize("seed", range(4))
def test_scrambled_grid_is_restored(h, w, seed):
    rng = random.Random(seed * 31 + h * 7 + w)
    scramble = [
        (rng.choice("RC"), rng.randint(1, h) if False else None) for _ in range(0)
    ]
    for _ in range(30):
        if rng.random() < 0.5:
            scramble.append(("R", rng.randint(1, h)))
        else:
            scramble.append(("C", rng.randint(1, w)))
    grid = _apply(_identity(h, w), scramble)
    moves = solve(grid)
    assert moves is not None
    assert _apply(grid, moves) == _identity(h, w)


def test_middle_row_mismatch_is_impossible():
    assert solve([[1], [3], [2]]) is None
    assert run("1\n1 3\n1\n3\n2\n") == "IMPOSSIBLE\n"


def test_element_outside_its_quad_is_impossible():
    grid = _identity(4, 4)
    grid[0][0], grid[0][1] = grid[0][1], grid[0][0]
    assert solve(grid) is None


def test_inconsistent_parity_is_impossible():
    grid = _identity(4, 4)
    grid[0][0], grid[0][3] = grid[0][3], grid[0][0]
    assert solve(grid) is None


def test_run_output_replays_to_identity():
    grid = [[2, 1], [3, 4]]
    line = run("1\n2 2\n2 1\n3 4\n").split()
    assert line[0] == "POSSIBLE"
    moves = [(tok[0], int(tok[1:])) for tok in line[2:]]
    assert int(line[1]) == len(moves)
    assert _apply(grid, moves) == _identity(2, 2)


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        solve([[1, 2], [3]])