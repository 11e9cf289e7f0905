"""Group loop variables into strongly connected classes and count valid orders."""

from math import factorial, gcd

_ALPHABET = 26


def _letter(ch, line):
    index = ord(ch) - ord("a")
    if not 0 <= index < _ALPHABET:
        raise ValueError(f"bad loop variable in {line!r}")
    return index


def _graph(lines):
    used = [False] * _ALPHABET
    graph = [[] for _ in range(_ALPHABET)]
    for depth, line in enumerate(lines):
        base = 4 * depth
        if len(line) <= base + 18:
            raise ValueError(f"malformed loop line: {line!r}")
        var = _letter(line[base + 4], line)
        src, dst = line[base + 15], line[base + 18]
        used[var] = True
        if src != "1":
            graph[_letter(src, line)].append(var)
        if dst != "n":
            graph[var].append(_letter(dst, line))
    return used, graph


def _components(used, graph):
    dfn = [-1] * _ALPHABET
    low = [0] * _ALPHABET
    label = [0] * _ALPHABET
    on_stack = [False] * _ALPHABET
    stack = []
    counter = 0
    labels = 0

    def visit(u):
        nonlocal counter, labels
        dfn[u] = low[u] = counter
        counter += 1
        on_stack[u] = True
        stack.append(u)
        for v in graph[u]:
            if dfn[v] == -1:
                visit(v)
            if on_stack[v]:
                low[u] = min(low[u], low[v])
        if low[u] == dfn[u]:
            while True:
                w = stack.pop()
                label[w] = labels
                on_stack[w] = False
                if w == u:
                    break
            labels += 1

    for i in range(_ALPHABET):
        if used[i] and dfn[i] == -1:
            visit(i)
    return labels, label


def solve(lines):
    """lines are the nested loop headers, line i indented by 4*i spaces.

    Returns ``(groups, p, q)``: the number of strongly connected groups and
    the reduced fraction of group orders that respect every dependency.
    """
    used, graph = _graph(lines)
    labels, label = _components(used, graph)
    condensed = [0] * labels
    for i in range(_ALPHABET):
        for j in graph[i]:
            if label[i] != label[j]:
                condensed[label[i]] |= 1 << label[j]

    full = 1 << labels
    dp = [0] * full
    dp[0] = 1
    for s in range(1, full):
        total = 0
        rest = s
        while rest:
            low = rest & -rest
            i = low.bit_length() - 1
            if not condensed[i] & s:
                total += dp[s ^ low]
            rest ^= low
        dp[s] = total
    p = dp[full - 1]
    q = factorial(labels)
    g = gcd(p, q)
    return labels, p // g, q // g


def run(text):
    """Parse the line-based input and return the output text."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty input")
    n = int(lines[0])
    loops = lines[1:n]
    if len(loops) != n - 1:
        raise ValueError("not enough loop lines")
    groups, p, q = solve(loops)
    return f"{groups} {p}/{q}\n"