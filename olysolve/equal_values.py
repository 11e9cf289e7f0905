"""Fewest distinct values after a given number of replacement operations."""

from collections import Counter
from itertools import accumulate


def solve(values):
    """Return n + 1 counts: the distinct values left after 0..n operations."""
    if not values:
        raise ValueError("values must not be empty")
    if min(values) < 0:
        raise ValueError("values must be non-negative")
    n = len(values)
    counts = Counter(values)
    top = max(values)
    positive = sorted(x for x in counts if x >= 1)
    with_multiple = sorted(
        counts[x]
        for x in positive
        if any(y in counts for y in range(2 * x, top + 1, x))
    )
    everything = sorted(counts[x] for x in positive)

    def curve(groups):
        deltas = [0] * (n + 1)
        deltas[0] = len(counts)
        for pre in accumulate(groups):
            deltas[pre] -= 1
        return list(accumulate(deltas))

    first, second = curve(with_multiple), curve(everything)
    return [min(x, y + 1) for x, y in zip(first, second)]


def run(text):
    """Parse the whitespace-separated input and return the output text."""
    it = iter(map(int, text.split()))
    n = next(it)
    values = [next(it) for _ in range(n)]
    return " ".join(map(str, solve(values))) + "\n"