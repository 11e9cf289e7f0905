"""Count cooking schedules for a sequence of kebab orders modulo 1e9+7."""

MOD = 1_000_000_007
ROWS = 110
COLS = 255


def solve(t, orders):
    """orders are (q, x) pairs; t is the cooldown between cooks."""
    dp = [[0] * COLS for _ in range(ROWS)]
    ans = 1
    p = 0

    def flush(q):
        for row in dp:
            total = sum(row) % MOD
            row[:] = [0] * COLS
            row[q] = total

    for q, x in orders:
        if q < 0 or not 0 <= q - x < COLS:
            raise ValueError(f"order ({q}, {x}) out of range")
        flush(q - x)
        for _ in range(q):
            nxt = dp[(p + 1) % ROWS]
            nxt[:] = dp[p]
            src = dp[(p - t) % ROWS]
            for i in range(1, COLS):
                v = src[i]
                if v:
                    nxt[i - 1] = (nxt[i - 1] + v) % MOD
                    ans = (ans + v) % MOD
            p = (p + 1) % ROWS
            if q > x:
                dp[p][q - x - 1] = (dp[p][q - x - 1] + 1) % MOD
                ans = (ans + 1) % MOD
    return ans


def run(text):
    """Parse the whitespace-separated input and return the output text."""
    it = iter(map(int, text.split()))
    n, t = next(it), next(it)
    orders = [(next(it), next(it)) for _ in range(n)]
    return f"{solve(t, orders)}\n"