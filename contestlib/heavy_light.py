"""Heavy-light decomposition of a rooted tree for path queries."""

from __future__ import annotations

from collections.abc import Callable, Sequence


class HeavyLightDecomposition:
    """Numbers vertices so each heavy path occupies a contiguous index range."""

    def __init__(
        self,
        adjacency: Sequence[Sequence[int]],
        values: Sequence[int],
        root: int = 0,
    ) -> None:
        n = len(adjacency)
        if len(values) != n:
            raise ValueError("one value per vertex is required")
        parent = [-1] * n
        depth = [0] * n
        order = []
        stack = [root]
        while stack:
            u = stack.pop()
            order.append(u)
            for v in adjacency[u]:
                if v != parent[u]:
                    parent[v] = u
                    depth[v] = depth[u] + 1
                    stack.append(v)
        size = [1] * n
        for u in reversed(order):
            if parent[u] != -1:
                size[parent[u]] += size[u]
        heavy = [-1] * n
        for u in order:
            for v in adjacency[u]:
                if v != parent[u] and (heavy[u] == -1 or size[heavy[u]] < size[v]):
                    heavy[u] = v
        head = [0] * n
        index = [0] * n
        head[root] = root
        cur = 0
        stack = [root]
        while stack:
            top = stack.pop()
            v = top
            while v != -1:
                index[v] = cur
                cur += 1
                lights = [c for c in adjacency[v] if c != parent[v] and c != heavy[v]]
                for c in lights:
                    head[c] = c
                stack.extend(reversed(lights))
                if heavy[v] != -1:
                    head[heavy[v]] = head[top]
                v = heavy[v]
        self.parent = parent
        self.depth = depth
        self.head = head
        self.index = index
        ordered = [0] * n
        for v in range(n):
            ordered[index[v]] = values[v]
        self.ordered_values = ordered
        self._prefix = [0]
        for value in ordered:
            self._prefix.append(self._prefix[-1] + value)

    def query_path(self, a: int, b: int, range_query: Callable[[int, int], int]) -> int:
        """Sum ``range_query(lo, hi)`` over index ranges covering the path a..b."""
        head, depth, index, parent = self.head, self.depth, self.index, self.parent
        total = 0
        while head[a] != head[b]:
            if depth[head[a]] < depth[head[b]]:
                total += range_query(index[head[b]], index[b])
                b = parent[head[b]]
            else:
                total += range_query(index[head[a]], index[a])
                a = parent[head[a]]
        if depth[a] < depth[b]:
            total += range_query(index[a], index[b])
        else:
            total += range_query(index[b], index[a])
        return total

    def path_sum(self, a: int, b: int) -> int:
        """Return the sum of vertex values on the path a..b."""
        return self.query_path(a, b, lambda lo, hi: self._prefix[hi + 1] - self._prefix[lo])