"""Link-cut tree over a forest with path-sum queries."""

from __future__ import annotations

from collections.abc import Sequence


class LinkCutTree:
    """Dynamic forest on vertices ``0..n-1`` with a value per vertex."""

    def __init__(self, values: Sequence[int]) -> None:
        n = len(values)
        self._val = list(values)
        self._sum = list(values)
        self._left = [-1] * n
        self._right = [-1] * n
        self._par = [-1] * n
        self._rev = [False] * n

    def _is_root(self, x: int) -> bool:
        p = self._par[x]
        return p == -1 or (self._left[p] != x and self._right[p] != x)

    def _push(self, x: int) -> None:
        if self._rev[x]:
            self._left[x], self._right[x] = self._right[x], self._left[x]
            for c in (self._left[x], self._right[x]):
                if c != -1:
                    self._rev[c] = not self._rev[c]
            self._rev[x] = False

    def _pull(self, x: int) -> None:
        total = self._val[x]
        for c in (self._left[x], self._right[x]):
            if c != -1:
                total += self._sum[c]
        self._sum[x] = total

    def _rotate(self, x: int) -> None:
        p = self._par[x]
        g = self._par[p]
        if not self._is_root(p):
            if self._left[g] == p:
                self._left[g] = x
            else:
                self._right[g] = x
        if self._left[p] == x:
            b = self._right[x]
            self._left[p] = b
            self._right[x] = p
        else:
            b = self._left[x]
            self._right[p] = b
            self._left[x] = p
        if b != -1:
            self._par[b] = p
        self._par[p] = x
        self._par[x] = g
        self._pull(p)
        self._pull(x)

    def _splay(self, x: int) -> None:
        path = [x]
        y = x
        while not self._is_root(y):
            y = self._par[y]
            path.append(y)
        for node in reversed(path):
            self._push(node)
        while not self._is_root(x):
            p = self._par[x]
            if not self._is_root(p):
                g = self._par[p]
                zigzig = (self._left[g] == p) == (self._left[p] == x)
                self._rotate(p if zigzig else x)
            self._rotate(x)

    def _access(self, x: int) -> None:
        last = -1
        y = x
        while y != -1:
            self._splay(y)
            self._right[y] = last
            self._pull(y)
            last = y
            y = self._par[y]
        self._splay(x)

    def _make_root(self, x: int) -> None:
        self._access(x)
        self._rev[x] = not self._rev[x]
        self._push(x)

    def set_value(self, v: int, value: int) -> None:
        """Change the value stored at vertex ``v``."""
        self._access(v)
        self._val[v] = value
        self._pull(v)

    def find_root(self, v: int) -> int:
        """Return the root of the tree holding ``v``."""
        self._access(v)
        x = v
        while True:
            self._push(x)
            if self._left[x] == -1:
                break
            x = self._left[x]
        self._splay(x)
        return x

    def connected(self, u: int, v: int) -> bool:
        """True if ``u`` and ``v`` lie in the same tree."""
        return self.find_root(u) == self.find_root(v)

    def link(self, u: int, v: int) -> bool:
        """Add edge ``u-v``; return False if they are already connected."""
        if self.connected(u, v):
            return False
        self._make_root(v)
        self._par[v] = u
        return True

    def cut(self, u: int, v: int) -> bool:
        """Remove edge ``u-v``; return False if there is no such edge."""
        if u == v or not self.connected(u, v):
            return False
        self._make_root(u)
        self._access(v)
        self._push(u)
        if self._left[v] != u or self._left[u] != -1 or self._right[u] != -1:
            return False
        self._left[v] = -1
        self._par[u] = -1
        self._pull(v)
        return True

    def query(self, u: int, v: int) -> int:
        """Return the sum of values on the path from ``u`` to ``v``."""
        if not self.connected(u, v):
            raise ValueError("vertices are not connected")
        self._make_root(u)
        self._access(v)
        return self._sum[v]