"""Open-addressing table counting occurrences of 64-bit keys."""

from __future__ import annotations

DEFAULT_MASK = 8388067
DEFAULT_CAPACITY = 10000007
_KEY_LIMIT = 1 << 64


class CountingHashTable:
    """Counts unsigned 64-bit keys; the home slot of a key is ``key & mask``.

    Collisions are resolved by linear probing, wrapping around at the end.
    """

    def __init__(self, mask: int = DEFAULT_MASK, capacity: int = DEFAULT_CAPACITY) -> None:
        if mask < 0:
            raise ValueError("mask must be non-negative")
        if capacity <= mask:
            raise ValueError("capacity must exceed the mask")
        self.mask = mask
        self.capacity = capacity
        self._keys: list[int | None] = [None] * capacity
        self._counts = [0] * capacity

    def _slot(self, key: int) -> int | None:
        if not 0 <= key < _KEY_LIMIT:
            raise ValueError("key must be an unsigned 64-bit integer")
        e = key & self.mask
        for _ in range(self.capacity):
            stored = self._keys[e]
            if stored is None or stored == key:
                return e
            e = (e + 1) % self.capacity
        return None

    def push(self, key: int) -> None:
        """Record one occurrence of ``key``."""
        e = self._slot(key)
        if e is None:
            raise OverflowError("hash table is full")
        self._keys[e] = key
        self._counts[e] += 1

    def count(self, key: int) -> int:
        """Return how many times ``key`` has been pushed."""
        e = self._slot(key)
        if e is None or self._keys[e] is None:
            return 0
        return self._counts[e]