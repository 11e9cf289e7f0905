"""Sum of minimum cuts over all vertex pairs of an undirected graph."""

import random

from olysolve.maxflow import MaxFlow


def solve(n, edges, rng=None):
    """edges are 1-based (u, v) pairs of unit-capacity undirected edges."""
    if n < 1:
        raise ValueError("graph needs at least one vertex")
    rng = rng or random.Random()
    base = MaxFlow(n)
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) out of range")
        base.add_bidirectional_edge(u - 1, v - 1, 1, 1)

    tree = []
    pending = [list(range(n))]
    while pending:
        group = pending.pop()
        if len(group) == 1:
            continue
        si = rng.randrange(len(group))
        ti = si
        while ti == si:
            ti = rng.randrange(len(group))
        s, t = group[si], group[ti]
        flow = base.copy()
        cut = flow.dinic(s, t)
        level = flow.level
        pending.append([u for u in group if level[u] == -1])
        pending.append([u for u in group if level[u] != -1])
        tree.append((cut, s, t))

    tree.sort(reverse=True)
    parent = list(range(n))
    size = [1] * n

    def find(x):
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    total = 0
    for w, u, v in tree:
        x, y = find(u), find(v)
        total += w * size[x] * size[y]
        size[x] += size[y]
        parent[y] = x
    return total


def run(text):
    """Parse the whitespace-separated input and return the output text."""
    it = iter(map(int, text.split()))
    n, m = next(it), next(it)
    edges = [(next(it), next(it)) for _ in range(m)]
    return f"{solve(n, edges, random.Random())}\n"