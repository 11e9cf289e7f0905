"""Track active vertices in a rooted tree: busy branches and spare leaves."""

import re

from sortedcontainers import SortedList


def solve(n, parents, events):
    """parents[i] is the parent of vertex i + 2; events are ('+' | '-', v) pairs.

    Returns one ``(branches, spare)`` pair per event.
    """
    if len(parents) != n - 1:
        raise ValueError("expected n - 1 parents")
    children = [[] for _ in range(n + 1)]
    for v, p in enumerate(parents, 2):
        if not 1 <= p <= n:
            raise ValueError(f"parent {p} out of range")
        children[p].append(v)

    dfn = [0] * (n + 1)
    rev = [0] * (n + 1)
    dep = [0] * (n + 1)
    pot = [0] * (n + 1)
    order = []
    stack = [1]
    while stack:
        u = stack.pop()
        if u != 1 and not pot[u]:
            pot[u] = u
        order.append(u)
        dfn[u] = len(order)
        rev[len(order)] = u
        for v in reversed(children[u]):
            dep[v] = dep[u] + 1
            pot[v] = pot[u]
            stack.append(v)
    if len(order) != n:
        raise ValueError("parents do not form a tree rooted at 1")

    count = [0] * (n + 1)
    leaves = [0] * (n + 1)
    heavy = [0] * (n + 1)
    for u in reversed(order):
        count[u] = 1 + sum(count[v] for v in children[u])
        leaves[u] = (0 if children[u] else 1) + sum(leaves[v] for v in children[u])
        for v in children[u]:
            if leaves[v] > leaves[heavy[u]]:
                heavy[u] = v
    dfnr = [dfn[u] + count[u] - 1 for u in range(n + 1)]

    top = [0] * (n + 1)
    prt = [0] * (n + 1)
    for u in order:
        if not top[u]:
            top[u] = u
        for v in children[u]:
            prt[v] = u
            if v == heavy[u]:
                top[v] = top[u]

    def lca(u, v):
        x, y = top[u], top[v]
        while x != y:
            if dep[x] > dep[y]:
                x, y = y, x
                u, v = v, u
            v = prt[y]
            y = top[v]
        return u if dep[u] < dep[v] else v

    active = SortedList()
    busy = [0] * (n + 1)
    branches = spare = 0

    def apply(u, sign):
        nonlocal branches, spare
        if busy[u]:
            branches += sign
            first = active[active.bisect_left(dfn[u])]
            last = active[active.bisect_right(dfnr[u]) - 1]
            spare += sign * leaves[lca(rev[first], rev[last])]

    result = []
    for kind, v in events:
        if kind not in ("+", "-"):
            raise ValueError(f"unknown event {kind!r}")
        if not 2 <= v <= n:
            raise ValueError(f"vertex {v} out of range")
        branch = pot[v]
        apply(branch, -1)
        if kind == "+":
            spare -= 1
            busy[branch] += 1
            active.add(dfn[v])
        else:
            spare += 1
            busy[branch] -= 1
            active.discard(dfn[v])
        apply(branch, 1)
        result.append((branches, spare))
    return result


def run(text):
    """Parse the input and return the output text."""
    tokens = text.split()
    n, q = int(tokens[0]), int(tokens[1])
    parents = [int(t) for t in tokens[2 : n + 1]]
    rest = " ".join(tokens[n + 1 :])
    events = [(c, int(v)) for c, v in re.findall(r"([+-])\s*(\d+)", rest)][:q]
    if len(events) != q:
        raise ValueError("not enough events")
    return "".join(f"{a} {b}\n" for a, b in solve(n, parents, events))