"""Integrate the product of two height profiles given as polylines."""

from bisect import bisect_left


def _profile(points, disc):
    size = len(disc)
    acc = [[0.0, 0.0] for _ in range(size + 1)]
    pos = [bisect_left(disc, h) for _, h in points]
    for (x0, h0), (x1, h1), p0, p1 in zip(points, points[1:], pos, pos[1:]):
        if h1 == h0:
            acc[p1][0] += x1 - x0
        else:
            k = (x1 - x0) / (h1 - h0)
            acc[p1][1] -= k
            acc[p1][0] += k * h1
            acc[p0][1] += k
            acc[p0][0] -= k * h0
    for i in range(size - 1, 0, -1):
        acc[i][0] += acc[i + 1][0]
        acc[i][1] += acc[i + 1][1]
    return acc


def _evaluate(coeffs, x):
    total = 0.0
    for c in reversed(coeffs):
        total = total * x + c
    return total


def solve(first, second):
    """first and second are (x, height) polylines.

    Returns the integral over height of the product of their widths, or
    None when the two profiles do not reach the same maximum height.
    """
    if not first or not second:
        raise ValueError("both profiles need points")
    heights = [h for _, h in first] + [h for _, h in second]
    if min(heights) < 0:
        raise ValueError("heights must be non-negative")
    if max(h for _, h in first) != max(h for _, h in second):
        return None
    disc = [0, *sorted(heights)]
    s = _profile(first, disc)
    t = _profile(second, disc)
    total = 0.0
    for i in range(len(disc) - 1, 0, -1):
        u = [0.0] * 3
        for j in range(2):
            for k in range(2):
                u[j + k] += s[i][j] * t[i][k]
        integral = [0.0, u[0] / 1, u[1] / 2, u[2] / 3]
        total += _evaluate(integral, disc[i]) - _evaluate(integral, disc[i - 1])
    return total


def run(text):
    """Parse the whitespace-separated input and return the output text."""
    it = iter(map(int, text.split()))
    n = next(it)
    first = [(next(it), next(it)) for _ in range(n)]
    m = next(it)
    second = [(next(it), next(it)) for _ in range(m)]
    result = solve(first, second)
    if result is None:
        return "Invalid plan\n"
    return f"{result:.10f}\n"