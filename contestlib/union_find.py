"""Disjoint-set forest with path compression."""

from __future__ import annotations


class UnionFind:
    """Partition of ``range(n)`` into disjoint sets."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._parent = list(range(n))

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def merge(self, x: int, y: int) -> None:
        """Join the sets of ``x`` and ``y``; the representative of ``y`` survives."""
        self._parent[self.find(x)] = self.find(y)