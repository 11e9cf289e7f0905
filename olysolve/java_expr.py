"""Emit a straight-line program that builds a constant from unknown inputs."""


def solve(c):
    """Return the program lines whose final line names a variable equal to c."""
    if c < 0:
        raise ValueError("constant must be non-negative")
    if c == 0:
        return ["? / ? / ?"]
    lines = ["a = ? max ?"]
    pol = ord("b")
    for _ in range(10):
        prev = chr(pol - 1)
        lines.append(f"{chr(pol)} = {prev} max {prev}")
        pol += 1
    prev = chr(pol - 1)
    lines.append(f"{chr(pol)} = {prev} / {prev}")
    one = chr(pol)
    pol += 1

    def obtain(x):
        nonlocal pol
        if x == 1:
            return one
        half = obtain(x // 2)
        name = chr(pol)
        pol += 1
        line = f"{name} = {half} + {half}"
        if x & 1:
            line += f" + {one}"
        lines.append(line)
        return name

    lines.append(obtain(c))
    return lines


def run(text):
    """Parse the constant and return the program text."""
    return "\n".join(solve(int(text.split()[0]))) + "\n"