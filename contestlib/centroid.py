"""Binary centroid splitting of a tree, duplicating each centre into two copies."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Split:
    """One split: a centre and the original vertices of the two resulting parts."""

    center: int
    first: tuple[int, ...]
    second: tuple[int, ...]


def decompose(n: int, edges: Iterable[tuple[int, int]]) -> list[Split]:
    """Split the tree on vertices ``1..n`` recursively until pieces have at most 2 vertices.

    Each centre is copied into both halves; splits are listed in processing order.
    """
    edges = list(edges)
    if n < 1:
        raise ValueError("n must be positive")
    if len(edges) != n - 1:
        raise ValueError("a tree on n vertices has n - 1 edges")
    adj: dict[int, list[int]] = {v: [] for v in range(1, n + 1)}
    for x, y in edges:
        adj[x].append(y)
        adj[y].append(x)
    ori = {v: v for v in range(1, n + 1)}
    label = {v: 1 for v in range(1, n + 1)}
    counter = n
    splits: list[Split] = []

    def sizes(start: int, leb: int) -> tuple[dict[int, int], list[int], dict[int, int]]:
        parent = {start: 0}
        order = [start]
        stack = [start]
        while stack:
            s = stack.pop()
            for c in adj[s]:
                if c != parent[s] and label.get(c) == leb:
                    parent[c] = s
                    order.append(c)
                    stack.append(c)
        size = {v: 1 for v in order}
        for v in reversed(order[1:]):
            size[parent[v]] += size[v]
        return size, order, parent

    def relabel(start: int, lold: int, lnew: int, avoid: int) -> list[int]:
        label[start] = lnew
        seen = [start]
        stack = [start]
        while stack:
            s = stack.pop()
            for c in adj[s]:
                if c != avoid and label.get(c) == lold:
                    label[c] = lnew
                    seen.append(c)
                    stack.append(c)
        return seen

    pending = [1]
    while pending:
        root = pending.pop()
        size, order, parent = sizes(root, root)
        total = size[root]
        if total <= 2:
            continue
        center, best = 0, None
        for s in reversed(order):
            worst = max(
                [size[c] for c in adj[s] if c != parent[s] and label.get(c) == root]
                + [total - size[s]]
            )
            if best is None or worst < best:
                best, center = worst, s
        size, _, _ = sizes(center, root)
        children = sorted(
            ((size[c], c) for c in adj[center] if label.get(c) == root),
            key=lambda item: (-item[0], item[1]),
        )
        half = size[center] // 2
        first, second = [], []
        filled = 0
        for i, (sz, c) in enumerate(children):
            if filled + sz > half:
                second = [v for _, v in children[i:]]
                break
            filled += sz
            first.append(c)
        parts = []
        for group in (first, second):
            counter += 1
            ori[counter] = ori[center]
            adj[counter] = list(group)
            for c in group:
                adj[c].append(counter)
            members = relabel(counter, root, counter, center)
            parts.append(tuple(sorted(ori[v] for v in members)))
        splits.append(Split(ori[center], parts[0], parts[1]))
        pending.append(counter)
        pending.append(counter - 1)
    return splits