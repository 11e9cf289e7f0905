"""Shortest global substitution s/A/B/g turning one line into another."""

BASE = 114514
MOD = 998244353


def _prefix_hashes(text):
    hashes = [0]
    for ch in text:
        hashes.append((hashes[-1] * BASE + ord(ch)) % MOD)
    return hashes


def solve(s, t):
    """Return ``(pattern, replacement)`` with s.replace(pattern, replacement) == t."""
    n, m = len(s), len(t)
    sh, th = _prefix_hashes(s), _prefix_hashes(t)
    power = [1]
    for _ in range(max(n, m)):
        power.append(power[-1] * BASE % MOD)

    def part(h, lo, hi):
        return (h[hi] - power[hi - lo] * h[lo]) % MOD

    best = None
    for length in range(1, n + 1):
        nxt = [-1] * (n + 1)
        cover = [False] * (n + 1)
        exist, last = {}, {}
        for i in range(n - length, -1, -1):
            if i + 2 * length <= n:
                exist[part(sh, i + length, i + 2 * length)] = i + length
            val = part(sh, i, i + length)
            if val in exist:
                nxt[i] = exist[val]
            if val in last:
                cover[last[val]] = True
            last[val] = i
        for i in range(n - length + 1):
            if cover[i]:
                continue
            chain = []
            x = i
            while x != -1:
                chain.append(x)
                x = nxt[x]
            cnt = len(chain)
            rest = n - cnt * length
            if m < rest or (m - rest) % cnt:
                continue
            lem = (m - rest) // cnt
            val = part(th, i, i + lem)
            cur = prev = 0
            for x in chain:
                cur = (cur * power[x - prev] + part(sh, prev, x)) % MOD
                cur = (cur * power[lem] + val) % MOD
                prev = x + length
            cur = (cur * power[n - prev] + part(sh, prev, n)) % MOD
            if cur == th[m]:
                candidate = (length + lem, i, length, lem)
                if best is None or candidate < best:
                    best = candidate
    if best is None:
        return "", ""
    _, i, length, lem = best
    return s[i : i + length], t[i : i + lem]


def run(text):
    """Parse the two input lines and return the substitution command."""
    lines = text.split("\n")
    s = lines[0].rstrip("\r")
    t = lines[1].rstrip("\r") if len(lines) > 1 else ""
    pattern, replacement = solve(s, t)
    return f"s/{pattern}/{replacement}/g\n"