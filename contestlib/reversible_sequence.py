"""Sequence 1..n supporting reversal of ranges, kept in a splay tree."""

from __future__ import annotations


class _Node:
    __slots__ = ("val", "left", "right", "parent", "size", "rev")

    def __init__(self, val: int) -> None:
        self.val = val
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.parent: _Node | None = None
        self.size = 1
        self.rev = False


def _size(x: _Node | None) -> int:
    return x.size if x is not None else 0


def _turn(x: _Node | None) -> None:
    if x is not None:
        x.left, x.right = x.right, x.left
        x.rev = not x.rev


def _push(x: _Node) -> None:
    if x.rev:
        _turn(x.left)
        _turn(x.right)
        x.rev = False


def _update(x: _Node) -> None:
    x.size = _size(x.left) + _size(x.right) + 1


class ReversibleSequence:
    """The sequence ``1, 2, ..., n`` with in-place reversal of index ranges."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        values = [0, *range(1, n + 1), 0]
        self._root = self._build(values, 0, len(values) - 1, None)

    def _build(self, values, lo, hi, parent):
        if lo > hi:
            return None
        mid = (lo + hi) // 2
        node = _Node(values[mid])
        node.parent = parent
        node.left = self._build(values, lo, mid - 1, node)
        node.right = self._build(values, mid + 1, hi, node)
        _update(node)
        return node

    def __len__(self) -> int:
        return self._n

    def _rotate(self, x: _Node) -> None:
        p = x.parent
        g = p.parent
        if p.left is x:
            p.left = x.right
            if x.right is not None:
                x.right.parent = p
            x.right = p
        else:
            p.right = x.left
            if x.left is not None:
                x.left.parent = p
            x.left = p
        p.parent = x
        x.parent = g
        if g is not None:
            if g.left is p:
                g.left = x
            else:
                g.right = x
        _update(p)
        _update(x)

    def _splay(self, x: _Node, goal: _Node | None) -> None:
        while x.parent is not goal:
            p = x.parent
            g = p.parent
            if g is not goal:
                self._rotate(p if (g.left is p) == (p.left is x) else x)
            self._rotate(x)
        if goal is None:
            self._root = x

    def _select(self, k: int, goal: _Node | None) -> None:
        node = self._root
        while True:
            _push(node)
            rank = _size(node.left) + 1
            if rank == k:
                break
            if rank < k:
                k -= rank
                node = node.right
            else:
                node = node.left
        self._splay(node, goal)

    def reverse(self, first: int, last: int) -> None:
        """Reverse the items at indices ``first..last`` inclusive (0-based)."""
        if not 0 <= first <= last < self._n:
            raise IndexError("invalid range")
        self._select(first + 1, None)
        self._select(last + 3, self._root)
        _turn(self._root.right.left)

    def __getitem__(self, index: int) -> int:
        if index < 0:
            index += self._n
        if not 0 <= index < self._n:
            raise IndexError("index out of range")
        self._select(index + 2, None)
        return self._root.val

    def to_list(self) -> list[int]:
        """Return the current sequence."""
        out: list[int] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                _push(node)
                stack.append(node)
                node = node.left
            node = stack.pop()
            out.append(node.val)
            node = node.right
        return out[1:-1]