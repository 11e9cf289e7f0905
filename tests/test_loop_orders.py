from math import factorial, gcd

import pytest

from olysolve.loop_orders import run, solve


def loop(depth, var, lo, hi):
    return " " * (4 * depth) + f"for {var} in range({lo}, {hi}):"


def test_independent_loops_are_always_ordered():
    lines = [loop(0, "a", 1, "n"), loop(1, "b", 1, "n")]
    assert solve(lines) == (2, 1, 1)


def test_dependency_halves_the_orders():
    lines = [loop(0, "a", 1, "n"), loop(1, "b", "a", "n")]
    assert solve(lines) == (2, 1, 2)


def test_cycle_collapses_into_one_group():
    lines = [loop(0, "a", 1, "n"), loop(1, "b", "a", "a")]
    assert solve(lines)[0] == 1


@pytest.mark.parametrize(
    "lines",
    [
        [loop(0, "a", 1, "n"), loop(1, "b", "a", "n"), loop(2, "c", "b", "n")],
        [loop(0, "x", 1, "n"), loop(1, "y", 1, "x"), loop(2, "z", "x", "y")],
        [loop(0, "a", 1, "n"), loop(1, "b", 1, "n"), loop(2, "c", "a", "n"), loop(3, "d", 1, "b")],
    ],
)
def test_result_is_a_reduced_probability(lines):
    groups, p, q = solve(lines)
    assert 1 <= groups <= len(lines)
    assert gcd(p, q) == 1
    assert 0 < p <= q
    assert factorial(groups) % q == 0


def test_run_matches_solve():
    lines = [loop(0, "a", 1, "n"), loop(1, "b", "a", "n"), loop(2, "c", 1, "a")]
    text = "4\n" + "\n".join(lines) + "\nlag\n"
    groups, p, q = solve(lines)
    assert run(text) == f"{groups} {p}/{q}\n"


def test_no_loops():
    assert run("1\nlag\n") == "0 1/1\n"


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        solve(["for a in"])


def test_missing_lines_raise():
    with pytest.raises(ValueError):
        run("3\n" + loop(0, "a", 1, "n") + "\n")