"""Enumeration of permutations and subsets."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def next_permutation(items: Sequence) -> list | None:
    """Return the next permutation of ``items`` in lexicographic order, or None if last."""
    result = list(items)
    i = len(result) - 2
    while i >= 0 and not result[i] < result[i + 1]:
        i -= 1
    if i < 0:
        return None
    j = len(result) - 1
    while not result[i] < result[j]:
        j -= 1
    result[i], result[j] = result[j], result[i]
    result[i + 1:] = reversed(result[i + 1:])
    return result


def all_permutations(items: Sequence) -> Iterator[list]:
    """Yield each distinct permutation of ``items`` once, in lexicographic order."""
    current: list | None = sorted(items)
    while current is not None:
        yield current
        current = next_permutation(current)


def all_subsets(items: Sequence) -> Iterator[list]:
    """Yield every subset; subset ``b`` holds ``items[i]`` whenever bit i of b is set."""
    n = len(items)
    for mask in range(1 << n):
        yield [item for i, item in enumerate(items) if mask >> i & 1]