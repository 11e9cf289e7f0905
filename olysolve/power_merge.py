"""Place power-of-two tiles left or right so that they merge into one."""

L = 13
K = (1 << L) + 5
_FULL = (1 << K) - 1


def _masks():
    masks = []
    for i in range(L + 1):
        bits = 0
        for j in range(0, K, 1 << i):
            bits |= 1 << j
        masks.append(bits)
    return masks


_MASK = _masks()


def _bits(value):
    while value:
        low = value & -value
        yield low.bit_length() - 1
        value ^= low


def _ctz(x):
    return (x & -x).bit_length() - 1


def _msb(x):
    return x.bit_length() - 1


def solve(values):
    """Return a string of 'l'/'r' placements, or None when impossible."""
    n = len(values)
    total = sum(values)
    if total <= 0 or total & (total - 1):
        return None
    a = [0, *values]
    f = [0] * (n + 1)
    g = [0] * (n + 1)
    h = [1] + [0] * n
    acc = 0
    for i in range(1, n + 1):
        t = _ctz(a[i])
        prev = h[i - 1]
        mask = _MASK[t]
        f[i] = (((prev & mask) << a[i]) | (prev & (mask << (acc % a[i])))) & _FULL
        acc += a[i]
        gi = 0
        for j in _bits(f[i]):
            if j > acc:
                break
            if j == 0 or j == acc or j.bit_length() != (acc - j).bit_length():
                gi |= 1 << j
            else:
                gi |= 1 << (j + (1 << _msb(j)))
        g[i] = gi & _FULL
        hi = 0
        for j in _bits(g[i]):
            if j > acc:
                break
            hi |= 1 << j
            q = _msb(max(j, acc - j))
            if (j >> q) & 1:
                hi |= 1 << (j - (1 << q))
            if ((acc - j) >> q) & 1:
                hi |= 1 << (j + (1 << q))
        h[i] = hi & _FULL

    if not (g[n] >> acc) & 1 and not g[n] & 1:
        return None
    j = 0 if g[n] & 1 else acc
    moves = []
    for i in range(n, 0, -1):
        if not (g[i] >> j) & 1:
            j ^= 1 << _msb(max(j, acc - j))
        if not (f[i] >> j) & 1:
            j -= 1 << (_msb(j) - 1)
        acc -= a[i]
        if j >= a[i] and j % a[i] == 0 and (h[i - 1] >> (j - a[i])) & 1:
            j -= a[i]
            moves.append("l")
        else:
            moves.append("r")
    return "".join(reversed(moves))


def run(text):
    """Parse the multi-case input and return the output text."""
    it = iter(map(int, text.split()))
    out = []
    for _ in range(next(it)):
        n = next(it)
        values = [next(it) for _ in range(n)]
        answer = solve(values)
        out.append(f"{'no' if answer is None else answer}\n")
    return "".join(out)