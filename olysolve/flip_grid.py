"""Sort a numbered grid using row and column reversals."""

_RC = "RC"
_CR = "CR"


def _odd(perm):
    seen = set()
    cycles = 0
    for start in range(4):
        if start in seen:
            continue
        cycles += 1
        x = start
        while x not in seen:
            seen.add(x)
            x = perm[x]
    return cycles % 2 == 1


def _plan(perm, i, j, i1, j1):
    table = {
        (0, 1, 2, 3): (),
        (3, 2, 1, 0): ((_CR, j, i), (_RC, i, j1)),
        (1, 2, 0, 3): ((_CR, j, i),),
        (2, 0, 1, 3): ((_RC, i, j),),
        (1, 3, 2, 0): ((_RC, i, j1),),
        (3, 0, 2, 1): ((_CR, j1, i),),
        (2, 1, 3, 0): ((_CR, j, i1),),
        (3, 1, 0, 2): ((_RC, i1, j),),
        (0, 2, 3, 1): ((_RC, i1, j1),),
        (0, 3, 1, 2): ((_CR, j1, i1),),
        (1, 0, 3, 2): ((_RC, i, j), (_CR, j1, i1)),
        (2, 3, 0, 1): ((_CR, j, i), (_RC, i1, j1)),
    }
    moves = []
    for kind, first, second in table.get(perm, ()):
        a, b = kind
        moves.extend([(a, first + 1), (b, second + 1)] * 2)
    return moves


def solve(grid):
    """Return a list of ('R' | 'C', 1-based index) moves, or None if impossible."""
    h = len(grid)
    if h == 0:
        raise ValueError("grid is empty")
    w = len(grid[0])
    if any(len(row) != w for row in grid):
        raise ValueError("grid rows differ in length")
    a = [[v - 1 for v in row] for row in grid]
    moves = []

    def flip_row(i):
        a[i].reverse()
        moves.append(("R", i + 1))

    def flip_col(j):
        column = [row[j] for row in a]
        for row, v in zip(a, reversed(column)):
            row[j] = v
        moves.append(("C", j + 1))

    if h % 2:
        mid = h // 2
        goal = list(range(mid * w, mid * w + w))
        if a[mid] != goal:
            flip_row(mid)
        if a[mid] != goal:
            return None
    if w % 2:
        mid = w // 2
        goal = [i * w + mid for i in range(h)]
        if [row[mid] for row in a] != goal:
            flip_col(mid)
        if [row[mid] for row in a] != goal:
            return None

    def quad(i, j):
        cells = ((i, j), (i, w - 1 - j), (h - 1 - i, j), (h - 1 - i, w - 1 - j))
        slot = {x * w + y: k for k, (x, y) in enumerate(cells)}
        return tuple(slot.get(a[x][y], -1) for x, y in cells)

    hh, hw = h // 2, w // 2
    sgn = []
    for i in range(hh):
        line = []
        for j in range(hw):
            perm = quad(i, j)
            if -1 in perm:
                return None
            line.append(_odd(perm))
        sgn.append(line)

    if hh and hw:
        c = list(sgn[0])
        r = [False] + [sgn[i][0] ^ c[0] for i in range(1, hh)]
    else:
        c = [False] * hw
        r = [False] * hh
    for i in range(hh):
        for j in range(hw):
            if sgn[i][j] != (r[i] ^ c[j]):
                return None
    for i, flag in enumerate(r):
        if flag:
            flip_row(i)
    for j, flag in enumerate(c):
        if flag:
            flip_col(j)

    for i in range(hh):
        for j in range(hw):
            moves.extend(_plan(quad(i, j), i, j, h - 1 - i, w - 1 - j))
    return moves


def run(text):
    """Parse the multi-case input and return the output text."""
    it = iter(map(int, text.split()))
    out = []
    for _ in range(next(it)):
        w, h = next(it), next(it)
        grid = [[next(it) for _ in range(w)] for _ in range(h)]
        moves = solve(grid)
        if moves is None:
            out.append("IMPOSSIBLE\n")
        else:
            parts = "".join(f" {kind}{index}" for kind, index in moves)
            out.append(f"POSSIBLE {len(moves)}{parts}\n")
    return "".join(out)