"""Static k-d tree answering maximum-weight queries over axis-aligned boxes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass
class _Node:
    low: tuple
    high: tuple
    best: float
    left: _Node | None = None
    right: _Node | None = None


class KDTree:
    """Weighted points; query the largest weight inside a closed box."""

    def __init__(self, points: Iterable[tuple[Sequence[float], float]]) -> None:
        items = [(tuple(coords), weight) for coords, weight in points]
        dims = {len(coords) for coords, _ in items}
        if len(dims) > 1:
            raise ValueError("all points must have the same dimension")
        self.dimension = dims.pop() if dims else 0
        if items and self.dimension == 0:
            raise ValueError("points must have at least one coordinate")
        self._root = self._build(items, 0) if items else None

    def _build(self, items: list, axis: int) -> _Node:
        dims = self.dimension
        low = tuple(min(c[k] for c, _ in items) for k in range(dims))
        high = tuple(max(c[k] for c, _ in items) for k in range(dims))
        node = _Node(low, high, max(w for _, w in items))
        if len(items) > 1:
            items = sorted(items, key=lambda item: item[0][axis])
            split = (len(items) + 1) // 2
            following = (axis + 1) % dims
            node.left = self._build(items[:split], following)
            node.right = self._build(items[split:], following)
        return node

    def max_in_box(self, low: Sequence[float], high: Sequence[float]):
        """Return the largest weight of a point inside ``[low, high]``, or None if there is none."""
        if len(low) != self.dimension or len(high) != self.dimension:
            raise ValueError("box dimension does not match the points")
        return self._query(self._root, tuple(low), tuple(high))

    def _query(self, node: _Node | None, low: tuple, high: tuple):
        if node is None:
            return None
        if any(h < nl or l > nh for l, h, nl, nh in zip(low, high, node.low, node.high)):
            return None
        if all(l <= nl and nh <= h for l, h, nl, nh in zip(low, high, node.low, node.high)):
            return node.best
        results = [
            r
            for r in (self._query(node.left, low, high), self._query(node.right, low, high))
            if r is not None
        ]
        return max(results) if results else None