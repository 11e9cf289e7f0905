import pytest

from olysolve.lattice_polygon import run, solve

SQUARE = [(0, 0), (2, 0), (2, 2), (0, 2)]


def test_odd_area_gives_zero():
    assert solve([(0, 0), (1, 0), (0, 1)]) == 0


def test_unit_square_has_no_integral_diagonal():
    assert solve([(0, 0), (1, 0), (1, 1), (0, 1)]) == 0


def test_even_square_both_diagonals():
    assert solve(SQUARE) == 2


@pytest.mark.parametrize("triangle", [[(0, 0), (2, 0), (0, 2)], [(0, 0), (4, 2), (1, 5)]])
def test_triangles_have_no_diagonals(triangle):
    assert solve(triangle) == 0


POLYGONS = [
    SQUARE,
    [(0, 0), (3, 0), (4, 2), (2, 5), (-1, 3)],
    [(0, 0), (4, 0), (4, 4), (2, 1), (0, 4)],
    [(1, 1), (5, 2), (6, 6), (3, 7), (0, 5), (-1, 3)],
]


@pytest.mark.parametrize("poly", POLYGONS)
def test_even_translation_invariant(poly):
    moved = [(x + 2, y - 4) for x, y in poly]
    assert solve(moved) == solve(poly)


@pytest.mark.parametrize("poly", POLYGONS)
def test_orientation_and_start_invariant(poly):
    assert solve(poly[::-1]) == solve(poly)
    assert solve(poly[1:] + poly[:1]) == solve(poly)


@pytest.mark.parametrize("poly", POLYGONS)
def test_bounded_by_diagonal_count(poly):
    n = len(poly)
    assert 0 <= solve(poly) <= n * (n - 3) // 2


def test_run_matches_solve():
    assert run("4\n0 0\n2 0\n2 2\n0 2\n") == f"{solve(SQUARE)}\n"


def test_empty_polygon_rejected():
    with pytest.raises(ValueError):
        solve([])