"""Sorted set with rank queries."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator


class OrderedSet:
    """Set of comparable items supporting lookup by rank and rank of a key."""

    def __init__(self, items: Iterable = ()) -> None:
        self._items = sorted(set(items))

    def add(self, item) -> None:
        """Insert ``item`` if absent."""
        i = bisect_left(self._items, item)
        if i == len(self._items) or self._items[i] != item:
            self._items.insert(i, item)

    def discard(self, item) -> None:
        """Remove ``item`` if present."""
        i = bisect_left(self._items, item)
        if i < len(self._items) and self._items[i] == item:
            del self._items[i]

    def find_by_order(self, k: int):
        """Return the k-th smallest item (0-based)."""
        if not 0 <= k < len(self._items):
            raise IndexError("order out of range")
        return self._items[k]

    def order_of_key(self, item) -> int:
        """Return how many items are strictly smaller than ``item``."""
        return bisect_left(self._items, item)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item) -> bool:
        i = bisect_left(self._items, item)
        return i < len(self._items) and self._items[i] == item

    def __iter__(self) -> Iterator:
        return iter(self._items)