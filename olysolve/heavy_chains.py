"""Group chains by shared prefix or suffix using a minimum vertex cover."""

from olysolve.maxflow import INFINITY, MaxFlow


def solve(k, chains):
    """Cover all chains with as few k-prefix / k-suffix classes as possible.

    Returns ``(size, groups)`` where groups lists the 1-based chain indices
    assigned to each class of the cover, prefix classes first.
    """
    if k < 0:
        raise ValueError("k must be non-negative")
    prefixes, suffixes = {}, {}
    xs, ys = [], []
    for chain in chains:
        if len(chain) < k:
            raise ValueError(f"chain {chain!r} is shorter than {k}")
        xs.append(prefixes.setdefault(chain[:k], len(prefixes)))
        ys.append(suffixes.setdefault(chain[len(chain) - k :], len(suffixes)))

    cp, cs = len(prefixes), len(suffixes)
    source, sink = 0, cp + cs + 1
    flow = MaxFlow(cp + cs + 2)
    for i in range(cp):
        flow.add_edge(source, 1 + i, 1)
    for j in range(cs):
        flow.add_edge(1 + cp + j, sink, 1)
    for x, y in zip(xs, ys):
        flow.add_edge(1 + x, 1 + cp + y, INFINITY)
    size = flow.dinic(source, sink)

    level = flow.level
    prefix_in_cover = [level[1 + i] == -1 for i in range(cp)]
    by_prefix = [[] for _ in range(cp)]
    by_suffix = [[] for _ in range(cs)]
    for index, (x, y) in enumerate(zip(xs, ys), 1):
        if prefix_in_cover[x]:
            by_prefix[x].append(index)
        else:
            by_suffix[y].append(index)
    groups = [g for g in by_prefix if g] + [g for g in by_suffix if g]
    return size, groups


def run(text):
    """Parse the whitespace-separated input and return the output text."""
    tokens = text.split()
    n, k = int(tokens[0]), int(tokens[1])
    chains = tokens[2 : 2 + n]
    if len(chains) != n:
        raise ValueError("not enough chains")
    size, groups = solve(k, chains)
    lines = [str(size)]
    lines.extend(f"{len(g)} {' '.join(map(str, g))}" for g in groups)
    return "\n".join(lines) + "\n"