"""Fold coefficients against the polynomial whose roots are Fibonacci numbers."""


def solve(k, mod, coefficients):
    """coefficients lists the k values in input order; returns the residue."""
    if len(coefficients) != k:
        raise ValueError("expected exactly k coefficients")
    if mod < 1:
        raise ValueError("modulus must be positive")
    fib = [1, 1] + [0] * max(0, k - 1)
    for i in range(2, k + 1):
        fib[i] = (fib[i - 1] + fib[i - 2]) % mod
    prod = [1] + [0] * k
    for i in range(1, k + 1):
        step = mod - fib[i] % mod
        for j in range(i, 0, -1):
            prod[j] = (prod[j] + prod[j - 1] * step) % mod
    total = 0
    for x, p in zip(coefficients, reversed(prod[1:])):
        total = (total + x * p) % mod
    return -total % mod


def run(text):
    """Parse the multi-case input and return the output text."""
    it = iter(map(int, text.split()))
    out = []
    for _ in range(next(it)):
        k, mod = next(it), next(it)
        coefficients = [next(it) for _ in range(k)]
        out.append(f"{solve(k, mod, coefficients)}\n")
    return "".join(out)