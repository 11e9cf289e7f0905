"""Corner value of a linear grid recurrence modulo 1000003."""

P = 1000003


def solve(n, a, b, c, left, top):
    """left and top hold the n boundary values of the first row and column."""
    if len(left) != n or len(top) != n:
        raise ValueError("boundary lists must have length n")
    a, b = b, a
    l = [0, *left]
    t = [0, *top]
    fac = [1] * (2 * n + 1)
    for i in range(1, 2 * n + 1):
        fac[i] = fac[i - 1] * i % P
    ifac = [0] * (n + 1)
    ifac[n] = pow(fac[n], P - 2, P)
    for i in range(n, 0, -1):
        ifac[i - 1] = ifac[i] * i % P
    aw = [1] * (n + 1)
    bw = [1] * (n + 1)
    for i in range(1, n + 1):
        aw[i] = aw[i - 1] * a % P
        bw[i] = bw[i - 1] * b % P

    def comb(x, y):
        return fac[x] * ifac[y] % P * ifac[x - y] % P

    ans = 0
    for i in range(2, n + 1):
        ans = (ans + l[i] * aw[n - i] % P * bw[n - 1] % P * comb(2 * n - i - 2, n - 2)) % P
    for i in range(2, n + 1):
        ans = (ans + t[i] * bw[n - i] % P * aw[n - 1] % P * comb(2 * n - i - 2, n - 2)) % P
    total, tot = 0, 1
    m = n - 2
    for _ in range(m + 1):
        total = (total + tot) % P
        tot = tot * (a + b) % P
    for i in range(m + 1, 2 * m + 1):
        weight = (aw[m + 1] * bw[i - m - 1] + bw[m + 1] * aw[i - m - 1]) % P
        tot = (tot + weight * (P - comb(i - 1, m))) % P
        total = (total + tot) % P
        tot = tot * (a + b) % P
    return (ans + total * c) % P


def run(text):
    """Parse the whitespace-separated input and return the output text."""
    it = iter(map(int, text.split()))
    n, a, b, c = next(it), next(it), next(it), next(it)
    left = [next(it) for _ in range(n)]
    top = [next(it) for _ in range(n)]
    return f"{solve(n, a, b, c, left, top)}\n"