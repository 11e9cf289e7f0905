"""Dinic maximum flow on an adjacency list of residual arcs."""

from collections import deque

INFINITY = 1 << 62


class MaxFlow:
    """Flow network with integer capacities.

    Each arc is a mutable list ``[target, reverse_index, residual_capacity]``.
    After :meth:`dinic` returns, ``level`` holds the BFS levels of the last
    residual graph: vertices with level ``-1`` are on the sink side of a
    minimum cut.
    """

    def __init__(self, n):
        self.graph = [[] for _ in range(n)]
        self.level = []

    def _reader(self, v, index):
        arc = self.graph[v][index]
        return lambda: arc[2]

    def add_edge(self, u, v, w):
        """Add an arc u->v of capacity w.

        Returns a callable giving the flow pushed through the arc so far,
        or None for a self-loop, which is ignored.
        """
        return self.add_bidirectional_edge(u, v, w, 0)

    def add_bidirectional_edge(self, u, v, w, rw):
        """Add an arc u->v of capacity w whose reverse arc has capacity rw."""
        if u == v:
            return None
        ru, rv = len(self.graph[u]), len(self.graph[v])
        self.graph[u].append([v, rv, w])
        self.graph[v].append([u, ru, rw])
        return self._reader(v, rv)

    def copy(self):
        """Return an independent network with the same residual capacities."""
        other = MaxFlow(0)
        other.graph = [[list(arc) for arc in adj] for adj in self.graph]
        other.level = list(self.level)
        return other

    def _levels(self, s):
        level = [-1] * len(self.graph)
        level[s] = 0
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for v, _, cap in self.graph[u]:
                if cap and level[v] == -1:
                    level[v] = level[u] + 1
                    queue.append(v)
        return level

    def _blocking_flow(self, s, t):
        graph, level = self.graph, self.level
        ptr = [len(adj) for adj in graph]
        nodes, arcs = [s], []
        pushed = 0
        while True:
            u = nodes[-1]
            if u == t:
                flow = min(arc[2] for arc in arcs)
                for arc in arcs:
                    arc[2] -= flow
                    graph[arc[0]][arc[1]][2] += flow
                pushed += flow
                nodes, arcs = [s], []
                continue
            adj = graph[u]
            while ptr[u]:
                arc = adj[ptr[u] - 1]
                if arc[2] > 0 and level[arc[0]] == level[u] + 1:
                    break
                ptr[u] -= 1
            else:
                if u == s:
                    return pushed
                nodes.pop()
                arcs.pop()
                ptr[nodes[-1]] -= 1
                continue
            nodes.append(arc[0])
            arcs.append(arc)

    def dinic(self, s, t):
        """Push the maximum flow from s to t and return its value."""
        if s == t:
            raise ValueError("source and sink must differ")
        total = 0
        while True:
            self.level = self._levels(s)
            if self.level[t] == -1:
                return total
            total += self._blocking_flow(s, t)