"""Minimum spanning forest weight of the edges whose weights fall in a range."""

from bisect import bisect_left, bisect_right


class LinkCutTree:
    """Dynamic forest on vertices 0..size-1 with path-maximum queries."""

    def __init__(self, size):
        n = size + 1
        self._size = size
        self._ch = [[0, 0] for _ in range(n)]
        self._fa = [0] * n
        self._rev = [False] * n
        self._val = [0] * n
        self._mx = [0] * n

    def _node(self, u):
        if not 0 <= u < self._size:
            raise IndexError(f"vertex {u} out of range")
        return u + 1

    def _pull(self, x):
        left, right = self._ch[x]
        best = self._val[x]
        if left and self._mx[left] > best:
            best = self._mx[left]
        if right and self._mx[right] > best:
            best = self._mx[right]
        self._mx[x] = best

    def _push(self, x):
        if self._rev[x]:
            c = self._ch[x]
            c[0], c[1] = c[1], c[0]
            for y in c:
                if y:
                    self._rev[y] = not self._rev[y]
            self._rev[x] = False

    def _is_root(self, x):
        f = self._fa[x]
        return f == 0 or (self._ch[f][0] != x and self._ch[f][1] != x)

    def _rotate(self, x):
        ch, fa = self._ch, self._fa
        y = fa[x]
        z = fa[y]
        k = 1 if ch[y][1] == x else 0
        w = ch[x][k ^ 1]
        if not self._is_root(y):
            ch[z][1 if ch[z][1] == y else 0] = x
        fa[x] = z
        ch[y][k] = w
        if w:
            fa[w] = y
        ch[x][k ^ 1] = y
        fa[y] = x
        self._pull(y)
        self._pull(x)

    def _splay(self, x):
        ch, fa = self._ch, self._fa
        stack = [x]
        y = x
        while not self._is_root(y):
            y = fa[y]
            stack.append(y)
        for y in reversed(stack):
            self._push(y)
        while not self._is_root(x):
            y = fa[x]
            if not self._is_root(y):
                z = fa[y]
                same = (ch[y][0] == x) == (ch[z][0] == y)
                self._rotate(y if same else x)
            self._rotate(x)

    def _access(self, x):
        last, y = 0, x
        while y:
            self._splay(y)
            self._ch[y][1] = last
            self._pull(y)
            last, y = y, self._fa[y]

    def _make_root(self, x):
        self._access(x)
        self._splay(x)
        self._rev[x] = not self._rev[x]

    def _find_root(self, x):
        self._access(x)
        self._splay(x)
        while True:
            self._push(x)
            if not self._ch[x][0]:
                break
            x = self._ch[x][0]
        self._splay(x)
        return x

    def set_value(self, u, value):
        """Set the value carried by vertex u."""
        x = self._node(u)
        self._access(x)
        self._splay(x)
        self._val[x] = value
        self._pull(x)

    def link(self, u, v):
        """Join two trees by the edge u-v."""
        x, y = self._node(u), self._node(v)
        if self._find_root(x) == self._find_root(y):
            raise ValueError(f"vertices {u} and {v} are already connected")
        self._make_root(x)
        self._fa[x] = y

    def cut(self, u, v):
        """Remove the tree edge u-v."""
        x, y = self._node(u), self._node(v)
        self._make_root(x)
        if self._find_root(y) != x or self._fa[y] != x:
            raise ValueError(f"no edge between {u} and {v}")
        self._push(y)
        if self._ch[y][0]:
            raise ValueError(f"no edge between {u} and {v}")
        self._ch[x][1] = 0
        self._fa[y] = 0
        self._pull(x)

    def path_max(self, u, v):
        """Largest vertex value on the path from u to v."""
        x, y = self._node(u), self._node(v)
        self._make_root(x)
        if self._find_root(y) != x:
            raise ValueError(f"vertices {u} and {v} are not connected")
        return self._mx[x]

    def connected(self, u, v):
        """Whether u and v lie in the same tree."""
        return self._find_root(self._node(u)) == self._find_root(self._node(v))


class PersistentSegmentTree:
    """Point-assign, prefix-sum tree over positions 1..size; root 0 is all zeros."""

    def __init__(self, size):
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._ls = [0]
        self._rs = [0]
        self._sum = [0]

    def _new(self, left, right, total):
        self._ls.append(left)
        self._rs.append(right)
        self._sum.append(total)
        return len(self._sum) - 1

    def change(self, root, k, x):
        """Return a new root equal to ``root`` with position k set to x."""
        if not 1 <= k <= self.size:
            raise IndexError(f"position {k} out of range")
        path = []
        o, lo, hi = root, 1, self.size
        while lo < hi:
            mid = (lo + hi) >> 1
            go_left = k <= mid
            path.append((o, go_left))
            if go_left:
                o, hi = self._ls[o], mid
            else:
                o, lo = self._rs[o], mid + 1
        node = self._new(0, 0, x)
        for o, go_left in reversed(path):
            if go_left:
                left, right = node, self._rs[o]
            else:
                left, right = self._ls[o], node
            node = self._new(left, right, self._sum[left] + self._sum[right])
        return node

    def prefix_sum(self, root, k):
        """Sum of positions 1..k in the version ``root``."""
        if not 0 <= k <= self.size:
            raise IndexError(f"position {k} out of range")
        if k == 0:
            return 0
        total = 0
        o, lo, hi = root, 1, self.size
        while True:
            if k == hi:
                return total + self._sum[o]
            mid = (lo + hi) >> 1
            if k <= mid:
                o, hi = self._ls[o], mid
            else:
                total += self._sum[self._ls[o]]
                o, lo = self._rs[o], mid + 1


def solve(n, edges, queries):
    """edges are 1-based (u, v, w); queries are encoded (l, r) pairs.

    Each query is decoded by subtracting the previous answer from both ends.
    """
    order = sorted((w, u, v) for u, v, w in edges)
    m = len(order)
    keys = [w for w, _, _ in order]
    tree = PersistentSegmentTree(max(m, 1))
    forest = LinkCutTree(n + m + 1)
    roots = [0] * (m + 2)
    for i in range(m, 0, -1):
        w, u, v = order[i - 1]
        root = tree.change(roots[i + 1], i, w)
        if u == v:
            root = tree.change(root, i, 0)
        else:
            forest.set_value(n + i, i)
            if forest.connected(u, v):
                j = forest.path_max(u, v)
                root = tree.change(root, j, 0)
                _, uj, vj = order[j - 1]
                forest.cut(uj, n + j)
                forest.cut(vj, n + j)
            forest.link(u, n + i)
            forest.link(v, n + i)
        roots[i] = root

    answers = []
    ans = 0
    for l, r in queries:
        l -= ans
        r -= ans
        lp = bisect_left(keys, l) + 1
        rp = bisect_right(keys, r)
        ans = tree.prefix_sum(roots[lp], rp) if 1 <= rp <= m else 0
        answers.append(ans)
    return answers


def run(text):
    """Parse the multi-case input and return the output text."""
    it = iter(map(int, text.split()))
    out = []
    for _ in range(next(it)):
        n, m = next(it), next(it)
        edges = [(next(it), next(it), next(it)) for _ in range(m)]
        q = next(it)
        queries = [(next(it), next(it)) for _ in range(q)]
        out.extend(f"{v}\n" for v in solve(n, edges, queries))
    return "".join(out)