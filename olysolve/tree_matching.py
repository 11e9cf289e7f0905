"""Extra edges usable on a tree, via general-graph maximum matching."""

from collections import deque


def max_matching(graph):
    """Maximum matching of an undirected graph given as adjacency lists.

    Returns ``(size, can)`` where ``can[i]`` is 1 when some maximum matching
    leaves vertex i unmatched.
    """
    g = [list(adj) for adj in graph]
    g.append([])
    n = len(g)
    match = [-1] * n

    def augment(root):
        color = [-1] * n
        prt = [-1] * n
        f = list(range(n))
        vis = [0] * n
        queue = deque([root])
        color[root] = 0
        stamp = 0

        def find(x):
            top = x
            while f[top] != top:
                top = f[top]
            while f[x] != top:
                f[x], x = top, f[x]
            return top

        def unite(x, y):
            f[find(x)] = find(y)

        def lca(x, y):
            nonlocal stamp
            stamp += 1
            x, y = find(x), find(y)
            while True:
                if x != -1:
                    if vis[x] == stamp:
                        return x
                    vis[x] = stamp
                    x = find(prt[match[x]]) if match[x] != -1 else -1
                x, y = y, x

        def blossom(x, y, base):
            while find(x) != base:
                prt[x] = y
                mx = match[x]
                if color[mx] == 1:
                    queue.append(mx)
                    color[mx] = 0
                if find(x) == x:
                    unite(x, base)
                if find(mx) == mx:
                    unite(mx, base)
                y = mx
                x = prt[y]

        while queue:
            x = queue.popleft()
            for y in g[x]:
                if color[y] == -1:
                    color[y] = 1
                    prt[y] = x
                    if match[y] == -1:
                        while x != -1:
                            last = match[x]
                            match[x] = y
                            match[y] = x
                            if last == -1:
                                break
                            y = last
                            x = prt[y]
                        return
                    queue.append(match[y])
                    color[match[y]] = 0
                elif color[y] == 0 and find(x) != find(y):
                    base = lca(x, y)
                    blossom(x, y, base)
                    blossom(y, x, base)

    for i in range(n):
        if match[i] == -1:
            augment(i)

    saved = list(match)
    unmatched = saved.count(-1)
    can = [0] * (n - 1)
    extra = n - 1
    for i in range(n - 1):
        g[i].append(extra)
        g[extra].append(i)
        augment(extra)
        if match.count(-1) < unmatched:
            can[i] = 1
        g[i].pop()
        g[extra].pop()
        match[:] = saved
    return (n - unmatched) // 2, can


def solve(n, tree_edges, extra_edges):
    """tree_edges and extra_edges are 1-based pairs; returns the answer count."""
    adj = [[] for _ in range(n)]
    for u, v in tree_edges:
        adj[u - 1].append(v - 1)
        adj[v - 1].append(u - 1)
    extra = set()
    for u, v in extra_edges:
        extra.add((u - 1, v - 1))
        extra.add((v - 1, u - 1))

    parent = [-1] * n
    visited = [False] * n
    visited[0] = True
    order, stack = [], [0]
    while stack:
        u = stack.pop()
        order.append(u)
        for v in adj[u]:
            if not visited[v]:
                visited[v] = True
                parent[v] = u
                stack.append(v)

    total = 0
    results = {}
    for u in reversed(order):
        can = [u]
        groups = []
        for v in adj[u]:
            if parent[v] != u:
                continue
            sub = results.pop(v)
            if any((u, x) in extra for x in sub):
                total += 1
            else:
                groups.append(sub)
        if groups:
            k = len(groups)
            g1 = [[] for _ in range(k)]
            for i in range(1, k):
                for j in range(i):
                    if any((x, y) in extra for x in groups[i] for y in groups[j]):
                        g1[i].append(j)
                        g1[j].append(i)
            size, ok = max_matching(g1)
            total += size
            for group, flag in zip(groups, ok):
                if flag:
                    can.extend(group)
        results[u] = can
    return total


def run(text):
    """Parse the multi-case input and return the output text."""
    it = iter(map(int, text.split()))
    out = []
    for _ in range(next(it)):
        n = next(it)
        tree_edges = [(next(it), next(it)) for _ in range(n - 1)]
        m = next(it)
        extra_edges = [(next(it), next(it)) for _ in range(m)]
        out.append(f"{solve(n, tree_edges, extra_edges)}\n")
    return "".join(out)