"""Virtual (auxiliary) tree of a vertex subset, using binary-lifting LCA."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import pairwise


class VirtualTreeBuilder:
    """Preprocesses a tree on ``0..n-1`` to build compressed trees of vertex subsets."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], root: int = 0) -> None:
        adj: list[list[int]] = [[] for _ in range(n)]
        for x, y in edges:
            adj[x].append(y)
            adj[y].append(x)
        self._log = max(1, n.bit_length())
        up = [[root] * n for _ in range(self._log)]
        depth = [0] * n
        tin = [0] * n
        depth[root] = 1
        visited = [False] * n
        visited[root] = True
        stack = [root]
        counter = 0
        while stack:
            s = stack.pop()
            tin[s] = counter
            counter += 1
            for k in range(1, self._log):
                up[k][s] = up[k - 1][up[k - 1][s]]
            for c in reversed(adj[s]):
                if not visited[c]:
                    visited[c] = True
                    depth[c] = depth[s] + 1
                    up[0][c] = s
                    stack.append(c)
        self.depth = depth
        self._up = up
        self._tin = tin

    def lca(self, x: int, y: int) -> int:
        """Return the lowest common ancestor of ``x`` and ``y``."""
        depth, up = self.depth, self._up
        if depth[x] < depth[y]:
            x, y = y, x
        for k in range(self._log - 1, -1, -1):
            if depth[up[k][x]] >= depth[y]:
                x = up[k][x]
        if x == y:
            return x
        for k in range(self._log - 1, -1, -1):
            if up[k][x] != up[k][y]:
                x, y = up[k][x], up[k][y]
        return up[0][x]

    def build(self, nodes: Iterable[int]) -> tuple[int, list[tuple[int, int, int]]]:
        """Return ``(root, edges)``; each edge is ``(parent, child, depth difference)``."""
        key = self._tin.__getitem__
        chosen = sorted(set(nodes), key=key)
        if not chosen:
            raise ValueError("at least one vertex is required")
        extra = {self.lca(a, b) for a, b in pairwise(chosen)}
        vertices = sorted(set(chosen) | extra, key=key)
        edges = []
        for prev, v in pairwise(vertices):
            p = self.lca(v, prev)
            edges.append((p, v, self.depth[v] - self.depth[p]))
        return vertices[0], edges