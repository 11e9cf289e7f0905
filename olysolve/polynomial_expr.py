"""Evaluate an expression over truncated polynomials in X modulo 10^9.

The expression is read from right to left without operator precedence.
``N`` is the number of points, ``X`` the variable, ``?/e`` the sum of
``e`` over all points and ``?:e`` the square of ``e``.
"""

from dataclasses import dataclass, field

MOD = 1_000_000_000
K = 11
_DIGITS = "0123456789"


def _zero():
    return [0] * K


def _scalar(v):
    p = _zero()
    p[0] = v % MOD
    return p


def _variable():
    p = _zero()
    p[1] = 1
    return p


def _neg(p):
    return [(-x) % MOD for x in p]


def _add(a, b):
    return [(x + y) % MOD for x, y in zip(a, b)]


def _mul(a, b):
    return [sum(a[j] * b[i - j] for j in range(i + 1)) % MOD for i in range(K)]


@dataclass
class _Frame:
    value: list = field(default_factory=_zero)
    op: str = ""


def solve(xs, expression):
    """Return the constant term of the expression evaluated at the points xs."""
    n = len(xs)
    points = [x % MOD for x in xs]
    powers = [1] * n
    sums = []
    for _ in range(K):
        sums.append(sum(powers) % MOD)
        powers = [p * x % MOD for p, x in zip(powers, points)]

    def fold(p):
        return sum(c * s for c, s in zip(p, sums)) % MOD

    stack = [_Frame()]

    def apply(val):
        top = stack[-1]
        if top.op == "":
            top.value = val
        elif top.op == "+":
            top.value = _add(top.value, val)
        elif top.op == "-":
            top.value = _add(_neg(top.value), val)
        elif top.op == "*":
            top.value = _mul(top.value, val)
        top.op = ""

    def hold_neg():
        top = stack[-1]
        if top.op == "-":
            top.value = _neg(top.value)
            top.op = ""

    def close():
        hold_neg()
        frame = stack.pop()
        if not stack:
            raise ValueError("unbalanced parentheses")
        apply(frame.value)

    text = "(" + expression + ")"
    i = len(text) - 1
    while i >= 1:
        ch = text[i]
        if ch == ")":
            stack.append(_Frame())
        elif ch == "(":
            close()
        elif ch == "N":
            apply(_scalar(n))
        elif ch == "X":
            apply(_variable())
        elif ch in _DIGITS:
            start = i
            while text[start - 1] in _DIGITS:
                start -= 1
            apply(_scalar(int(text[start : i + 1])))
            i = start
        elif ch in "+-*":
            hold_neg()
            stack[-1].op = ch
        elif ch == "/":
            hold_neg()
            stack[-1].value = _scalar(fold(stack[-1].value))
            i -= 1
        elif ch == ":":
            hold_neg()
            stack[-1].value = _mul(stack[-1].value, stack[-1].value)
            i -= 1
        i -= 1
    close()
    if len(stack) != 1:
        raise ValueError("unbalanced parentheses")
    return stack[0].value[0]


def run(text):
    """Parse the whitespace-separated input and return the output text."""
    tokens = text.split()
    n = int(tokens[0])
    xs = [int(t) for t in tokens[1 : 1 + n]]
    if len(xs) != n or len(tokens) < n + 2:
        raise ValueError("incomplete input")
    return f"{solve(xs, tokens[n + 1])}\n"