"""Closed form for the number of times a loop program reaches its 'lag' lines."""

from itertools import accumulate

MASK = (1 << 64) - 1
POINTS = 10
_UNSET = -999
_LETTERS = 26


def _per(values):
    """Values of sum_{i<n} f(i) at n = 0..POINTS-1, from the values of f."""
    return [0, *(v & MASK for v in accumulate(values[:-1]))]


def _mul(a, b):
    return [(x * y) & MASK for x, y in zip(a, b)]


def _char(line, i):
    return line[i] if i < len(line) else ""


def _var(ch, line):
    index = ord(ch) - ord("a") + 1 if len(ch) == 1 else 0
    if not 1 <= index <= _LETTERS:
        raise ValueError(f"bad loop variable in {line!r}")
    return index


def solve(lines):
    """lines are the program; returns the Newton-form formula in n."""
    parent = [_UNSET] * (_LETTERS + 1)
    children = [[] for _ in range(_LETTERS + 1)]
    stack = []
    total = [0] * POINTS

    def count(x):
        ret = [1] * POINTS
        if x <= 0:
            kids = [i for i in range(1, _LETTERS + 1) if parent[i] == x]
        else:
            kids = children[x]
        for i in kids:
            ret = _mul(ret, _per(count(i)))
        return ret

    for line in lines:
        indent = 0
        while _char(line, indent * 4) == " ":
            indent += 1
        while len(stack) > indent:
            x = stack.pop()
            if parent[x] > 0:
                children[parent[x]].pop()
            parent[x] = _UNSET
        base = indent * 4
        if _char(line, base) == "f":
            x = _var(_char(line, base + 4), line)
            to = _char(line, base + 15)
            if to != "" and to in "0123456789":
                y = -int(to)
            elif to == "n":
                y = 0
            else:
                y = _var(to, line)
            stack.append(x)
            parent[x] = y
            if y > 0:
                children[y].append(x)
        else:
            ad = count(0)
            for i in range(1, POINTS):
                scalar = count(-i)[i]
                ad = [(v * scalar) & MASK for v in ad]
            total = [(a + b) & MASK for a, b in zip(total, ad)]

    comb = [[0] * POINTS for _ in range(POINTS)]
    for i in range(POINTS):
        comb[i][0] = 1
        for j in range(1, i + 1):
            comb[i][j] = (comb[i - 1][j] - comb[i - 1][j - 1]) & MASK
    for i in range(POINTS - 1, -1, -1):
        for j in range(i):
            total[i] = (total[i] + total[j] * comb[i][i - j]) & MASK

    k = POINTS - 1
    while k >= 0 and not total[k]:
        k -= 1
    if k < 0:
        raise ValueError("program never reaches a lag line")
    parts = []
    fac = 1
    for i in range(k + 1):
        if i:
            fac *= i
        parts.append(f"{total[i]} / {fac}")
        if i < k:
            parts.append(" + " + ("n" if i == 0 else f"(n - {i})") + " * (")
    return "".join(parts) + ")" * k


def run(text):
    """Parse the program text and return the output text."""
    return solve(text.splitlines()) + "\n"