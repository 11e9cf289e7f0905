"""Component statistics of the subgraph of edges at or above a threshold."""

from bisect import bisect_right


def solve(n, edges, queries):
    """edges are (a, b, p); return an (x, y) pair for each threshold query."""
    order = sorted(((p, a, b) for a, b, p in edges), reverse=True)
    parent, size, d2, deg = {}, {}, {}, {}
    curx = curv = 0

    def find(x):
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def mention(x):
        nonlocal curv
        if x not in parent:
            parent[x] = x
            size[x] = 1
            d2[x] = 0
            deg[x] = 0
            curv += 1

    def contribute(x, sgn):
        nonlocal curx
        curx += d2[x] * sgn
        if d2[x] == size[x]:
            curx -= sgn

    def bump(v, root):
        before = deg[v]
        deg[v] += 1
        if before == 2:
            d2[root] -= 1
        elif deg[v] == 2:
            d2[root] += 1

    keys, xs, ys = [], [0], [0]
    for i, (p, a, b) in enumerate(order, 1):
        keys.append(p)
        mention(a)
        mention(b)
        fa, fb = find(a), find(b)
        contribute(fa, -1)
        if fa != fb:
            contribute(fb, -1)
        bump(a, fa)
        bump(b, fb)
        if fa != fb:
            parent[fa] = fb
            size[fb] += size[fa]
            d2[fb] += d2[fa]
        contribute(fb, 1)
        xs.append(curv - curx)
        ys.append(i - curx)

    negated = [-k for k in keys]
    result = []
    for t in queries:
        idx = bisect_right(negated, -t)
        result.append((xs[idx], ys[idx]))
    return result


def run(text):
    """Parse the whitespace-separated input and return the output text."""
    it = iter(map(int, text.split()))
    n, m = next(it), next(it)
    edges = [(next(it), next(it), next(it)) for _ in range(m)]
    q = next(it)
    queries = [next(it) for _ in range(q)]
    return "".join(f"{x} {y}\n" for x, y in solve(n, edges, queries))