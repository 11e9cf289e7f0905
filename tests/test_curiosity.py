import pytest

from olysolve.curiosity import run, solve


def test_repeated_letter():
    assert solve("aaa", "bbb") == ("a", "b")


def test_empty_lines():
    assert solve("", "") == ("", "")


def test_run_identical_lines():
    assert run("abc\nabc\n") == "s/a/a/g\n"


@pytest.mark.parametrize(
    "s, t",
    [
        ("abcabc", "xbcxbc"),
        ("hello world", "hello there"),
        ("banana", "bXXa"),
        ("banana", "bonono"),
        ("aaaa", "b"),
        ("abc", "abcd"),
        ("mississippi", "missiSSippi"),
    ],
)
def test_substitution_reproduces_target(s, t):
    pattern, replacement = solve(s, t)
    assert pattern
    assert s.replace(pattern, replacement) == t


@pytest.mark.parametrize(
    "s, a, b",
    [
        ("banana", "an", "X"),
        ("banana", "a", "o"),
        ("abababab", "ab", "c"),
        ("the cat sat", "at", "og"),
    ],
)
def test_result_no_longer_than_known_substitution(s, a, b):
    t = s.replace(a, b)
    pattern, replacement = solve(s, t)
    assert s.replace(pattern, replacement) == t
    assert len(pattern) + len(replacement) <= len(a) + len(b)


def test_run_uses_solve():
    pattern, replacement = solve("banana", "bonono")
    assert run("banana\nbonono\n") == f"s/{pattern}/{replacement}/g\n"