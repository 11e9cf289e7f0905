"""Minimum total cost to clear weighted intervals, interval DP."""

from bisect import bisect_left


def solve(items):
    """items are (a, b, d) intervals with cost d; return the minimum total."""
    n = len(items)
    if n == 0:
        return 0
    coords = sorted([a for a, _, _ in items] + [b for _, b, _ in items])
    a = [bisect_left(coords, x) for x, _, _ in items]
    b = [bisect_left(coords, y) for _, y, _ in items]
    size = 2 * n
    segs = [[(0, 0)] * size for _ in range(size)]
    for i, (_, _, d) in enumerate(items):
        segs[a[i]][b[i]] = max(segs[a[i]][b[i]], (d, i))
    for length in range(1, size):
        for i in range(size - length):
            j = i + length
            segs[i][j] = max(segs[i][j], segs[i + 1][j], segs[i][j - 1])

    memo = {}

    def value(l, r):
        return 0 if l > r else memo[(l, r)]

    stack = [(0, size - 1)]
    while stack:
        l, r = stack[-1]
        if (l, r) in memo:
            stack.pop()
            continue
        d, idx = segs[l][r]
        if d == 0:
            memo[(l, r)] = 0
            stack.pop()
            continue
        splits = range(a[idx], b[idx] + 1)
        missing = [
            part
            for i in splits
            for part in ((l, i - 1), (i + 1, r))
            if part[0] <= part[1] and part not in memo
        ]
        if missing:
            stack.extend(missing)
            continue
        memo[(l, r)] = d + min(value(l, i - 1) + value(i + 1, r) for i in splits)
        stack.pop()
    return memo[(0, size - 1)]


def run(text):
    """Parse the multi-case input and return the output text."""
    it = iter(map(int, text.split()))
    out = []
    for _ in range(next(it)):
        n = next(it)
        items = [(next(it), next(it), next(it)) for _ in range(n)]
        out.append(f"{solve(items)}\n")
    return "".join(out)