"""Count small circles on a grid touched by query segments."""

import math

GRID = 510
EPS = 1e-6
_AROUND = (
    (-2, 0), (-1, -1), (-1, 0), (-1, 1), (0, -2), (0, -1), (0, 0),
    (0, 1), (0, 2), (1, -1), (1, 0), (1, 1), (2, 0),
)


def _tdiv(a, b):
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _dist(x1, y1, x2, y2):
    return math.sqrt((x1 - x2) ** 2 + (y1 - y2) ** 2) * 10.0 - EPS


def _count(radii, x1, y1, x2, y2):
    seen = set()
    total = 0

    def work(x, y, ax, ay, bx, by):
        nonlocal total
        if not (0 <= x < GRID and 0 <= y < GRID) or not radii.get((x, y)) or (x, y) in seen:
            return
        seen.add((x, y))
        dx, dy = bx - ax, by - ay
        xd, yd = x - ax, y - ay
        dot = xd * dx + yd * dy
        if dot < 0:
            dis = _dist(x, y, ax, ay)
        elif dot > dx * dx + dy * dy:
            dis = _dist(x, y, bx, by)
        else:
            dis = abs((xd * dy - dx * yd) / math.sqrt(dx * dx + dy * dy)) * 10.0
        if radii[(x, y)] >= dis:
            total += 1

    def around(x, y):
        for ox, oy in _AROUND:
            work(x + ox, y + oy, x1, y1, x2, y2)

    if x1 != x2:
        if x1 > x2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        for i in range(x1 - 2, x2 + 3):
            around(i, _tdiv((i - x1) * (y2 - y1), x2 - x1) + y1)
    if y1 != y2:
        if y1 > y2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        for i in range(y1 - 2, y2 + 3):
            around(_tdiv((i - y1) * (x2 - x1), y2 - y1) + x1, i)
    return total


def solve(circles, queries):
    """circles are (x, y, r) with r the digits after "0."; queries (x1, y1, x2, y2)."""
    radii = {}
    for x, y, r in circles:
        radii[(x, y)] = r
    return [_count(radii, *q) for q in queries]


def run(text):
    """Parse the input (radii written as 0.d) and return the output text."""
    tokens = iter(text.split())
    n = int(next(tokens))
    circles = []
    for _ in range(n):
        x, y, r = int(next(tokens)), int(next(tokens)), next(tokens)
        if not r.startswith("0."):
            raise ValueError(f"bad radius: {r!r}")
        circles.append((x, y, int(r[2:])))
    q = int(next(tokens))
    queries = [tuple(int(next(tokens)) for _ in range(4)) for _ in range(q)]
    return "".join(f"{v}\n" for v in solve(circles, queries))