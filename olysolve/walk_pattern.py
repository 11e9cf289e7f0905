"""Find a contiguous stretch of a grid walk whose visited cells match a pattern."""

BASE0 = 11451419
BASE1 = 19198101
MOD = 998244353
_STEPS = {"u": (-1, 0), "d": (1, 0), "l": (0, -1), "r": (0, 1)}


def _powers(base, length, offset):
    values = [pow(base, -offset, MOD)]
    for _ in range(length - 1):
        values.append(values[-1] * base % MOD)
    return values


def solve(path, pattern):
    """path is a string of u/d/l/r moves, pattern a list of rows with 'X' cells.

    Returns the 1-based ``(start, end)`` of the first matching stretch of
    moves, or None when no stretch visits exactly the pattern's shape.
    """
    l = len(path)
    rows = len(pattern)
    cols = max(map(len, pattern), default=0)
    cells = [(i, j) for i, row in enumerate(pattern) for j, ch in enumerate(row) if ch == "X"]
    count = len(cells)
    top = min((i for i, _ in cells), default=rows)
    left = min((j for _, j in cells), default=cols)
    target = sum(pow(BASE0, i - top, MOD) * pow(BASE1, j - left, MOD) for i, j in cells) % MOD

    size = 2 * l + 1
    pw = _powers(BASE0, size, l)
    qw = _powers(BASE1, size, l)

    positions = [(0, 0)]
    for ch in path:
        dx, dy = _STEPS.get(ch, (0, 0))
        x, y = positions[-1]
        positions.append((x + dx, y + dy))

    px = [0] * size
    py = [0] * size
    mx = my = 2 * l
    window = {}
    begin = 0
    digest = 0
    for end, (x, y) in enumerate(positions):
        window[(x, y)] = window.get((x, y), 0) + 1
        if window[(x, y)] == 1:
            px[x + l] += 1
            mx = min(mx, x + l)
            py[y + l] += 1
            my = min(my, y + l)
            digest = (digest + pw[x + l] * qw[y + l]) % MOD
        while len(window) > count:
            ox, oy = positions[begin]
            begin += 1
            window[(ox, oy)] -= 1
            if not window[(ox, oy)]:
                del window[(ox, oy)]
                px[ox + l] -= 1
                if not px[mx]:
                    mx += 1
                py[oy + l] -= 1
                if not py[my]:
                    my += 1
                digest = (digest - pw[ox + l] * qw[oy + l]) % MOD
        current = digest * pw[2 * l - mx] % MOD * qw[2 * l - my] % MOD
        if current == target:
            return begin + 1, end
    return None


def run(text):
    """Parse the input and return the output text."""
    lines = text.split("\n")
    l = int(lines[0])
    path = lines[1].rstrip("\r") if len(lines) > 1 else ""
    if len(path) < l:
        raise ValueError("path shorter than its declared length")
    tokens = iter("\n".join(lines[2:]).split())
    n, m = int(next(tokens)), int(next(tokens))
    rows = [next(tokens) for _ in range(n)]
    if any(len(row) < m for row in rows):
        raise ValueError("pattern row shorter than its declared width")
    result = solve(path[:l], [row[:m] for row in rows])
    if result is None:
        return "NO\n"
    return f"YES\n{result[0]} {result[1]}\n"