"""Arrange vertices on a line so that many triples have their middle inside."""

from collections import deque


def solve(n, triples):
    """triples are 1-based (a, b, c); returns the arrangement left to right."""
    incident = [[] for _ in range(n + 1)]
    need = [0] * (n + 1)
    for j, (a, b, c) in enumerate(triples):
        if not all(1 <= v <= n for v in (a, b, c)):
            raise ValueError(f"triple {(a, b, c)} out of range")
        incident[a].append(j)
        incident[c].append(j)
        need[b] += 1

    queue = deque(i for i in range(1, n + 1) if not need[i])
    used = [False] * len(triples)
    order = []
    while queue:
        x = queue.popleft()
        order.append(x)
        for y in incident[x]:
            if not used[y]:
                used[y] = True
                b = triples[y][1]
                need[b] -= 1
                if not need[b]:
                    queue.append(b)
    if len(order) != n:
        raise ValueError("triples admit no elimination order")

    pos = [0] * (n + 1)
    line = deque()
    left = right = n
    for i in reversed(order):
        lc = rc = 0
        for j in incident[i]:
            a, b, c = triples[j]
            other = c if a == i else a
            if pos[b] < pos[other]:
                lc += 1
            else:
                rc += 1
        if lc >= rc:
            left -= 1
            pos[i] = left
            line.appendleft(i)
        else:
            pos[i] = right
            right += 1
            line.append(i)
    return list(line)


def run(text):
    """Parse the whitespace-separated input and return the output text."""
    it = iter(map(int, text.split()))
    n, m = next(it), next(it)
    triples = [(next(it), next(it), next(it)) for _ in range(m)]
    return " ".join(map(str, solve(n, triples))) + "\n"