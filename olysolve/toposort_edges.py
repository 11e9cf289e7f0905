"""Topological order pushed towards lexicographically largest by adding edges."""

import heapq


def solve(n, edges, k):
    """edges are 1-based (u, v) arcs; at most k edges may be added.

    Returns ``(order, added)`` where added lists the new (u, v) arcs.
    """
    graph = [[] for _ in range(n + 1)]
    indeg = [0] * (n + 1)
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) out of range")
        graph[u].append(v)
        indeg[v] += 1
    ready = [i for i in range(1, n + 1) if indeg[i] == 0]
    held = []
    order = []
    added = []
    for _ in range(n):
        while k and len(ready) > 1:
            heapq.heappush(held, -heapq.heappop(ready))
            k -= 1
        if k and len(ready) == 1 and held and ready[0] < -held[0]:
            k -= 1
            heapq.heappush(held, -ready.pop())
        if ready:
            u = heapq.heappop(ready)
        else:
            if not held:
                raise ValueError("graph has a cycle")
            u = -heapq.heappop(held)
            added.append((order[-1] if order else 0, u))
        order.append(u)
        for v in graph[u]:
            indeg[v] -= 1
            if indeg[v] == 0:
                heapq.heappush(ready, v)
    return order, added


def run(text):
    """Parse the whitespace-separated input and return the output text."""
    it = iter(map(int, text.split()))
    n, m, k = next(it), next(it), next(it)
    edges = [(next(it), next(it)) for _ in range(m)]
    order, added = solve(n, edges, k)
    lines = [" ".join(map(str, order)), str(len(added))]
    lines.extend(f"{u} {v}" for u, v in added)
    return "\n".join(lines) + "\n"