"""Count diagonals of a lattice polygon that cut it into integer-area parts."""


def solve(points):
    """points are the polygon's vertices in order; returns the diagonal count."""
    if not points:
        raise ValueError("polygon needs vertices")
    n = len(points)
    xs = [x & 1 for x, _ in points]
    ys = [y & 1 for _, y in points]
    xs.insert(0, xs[-1])
    ys.insert(0, ys[-1])
    parity = 0
    for i in range(1, n + 1):
        parity ^= (xs[i - 1] & ys[i]) ^ (xs[i] & ys[i - 1])
    if parity:
        return 0
    cross = [[(i & (j >> 1) & 1) ^ (j & (i >> 1) & 1) for j in range(4)] for i in range(4)]
    codes = [(x << 1) | y for x, y in zip(xs, ys)]
    counts = [[0, 0] for _ in range(4)]
    total = 0
    for prev, cur in zip(codes, codes[1:]):
        if cross[prev][cur]:
            counts = [[odd, even] for even, odd in counts]
        total += sum(counts[j][cross[j][cur]] for j in range(4))
        counts[cur][0] += 1
    return total - n


def run(text):
    """Parse the whitespace-separated input and return the output text."""
    it = iter(map(int, text.split()))
    n = next(it)
    points = [(next(it), next(it)) for _ in range(n)]
    return f"{solve(points)}\n"