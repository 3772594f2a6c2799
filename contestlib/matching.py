"""Bipartite matching and global minimum cut."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

INF = float("inf")


def hopcroft_karp(
    left_count: int, right_count: int, edges: Iterable[tuple[int, int]]
) -> list[tuple[int, int]]:
    """Maximum bipartite matching; returns the matched ``(left, right)`` pairs sorted."""
    adj: list[list[int]] = [[] for _ in range(left_count)]
    for u, v in edges:
        if not (0 <= u < left_count and 0 <= v < right_count):
            raise IndexError("edge endpoint out of range")
        adj[u].append(v)
    match_left = [-1] * left_count
    match_right = [-1] * right_count

    while True:
        dist = [-1] * left_count
        queue = deque()
        for u in range(left_count):
            if match_left[u] == -1:
                dist[u] = 0
                queue.append(u)
        found = False
        while queue:
            u = queue.popleft()
            for v in adj[u]:
                w = match_right[v]
                if w == -1:
                    found = True
                elif dist[w] == -1:
                    dist[w] = dist[u] + 1
                    queue.append(w)
        if not found:
            break
        pointer = [0] * left_count
        for root in range(left_count):
            if match_left[root] != -1:
                continue
            stack = [root]
            via: list[int] = []
            while stack:
                u = stack[-1]
                advanced = False
                while pointer[u] < len(adj[u]):
                    v = adj[u][pointer[u]]
                    pointer[u] += 1
                    w = match_right[v]
                    if w == -1:
                        via.append(v)
                        for x, y in zip(stack, via):
                            match_left[x] = y
                            match_right[y] = x
                        stack = []
                        advanced = True
                        break
                    if dist[w] == dist[u] + 1:
                        via.append(v)
                        stack.append(w)
                        advanced = True
                        break
                if not advanced:
                    dist[u] = -1
                    stack.pop()
                    if via:
                        via.pop()
    return [(u, v) for u, v in enumerate(match_left) if v != -1]


def kuhn_munkres(weights: Sequence[Sequence[int]]) -> tuple[int, list[int]]:
    """Maximum-weight matching saturating every row of an ``n x m`` matrix, ``n <= m``.

    Returns ``(total weight, assignment)`` where row i is matched to column
    ``assignment[i]``. Weights should be exact numbers.
    """
    n = len(weights)
    if n == 0:
        return 0, []
    m = len(weights[0])
    if any(len(row) != m for row in weights):
        raise ValueError("weights must be a rectangular matrix")
    if n > m:
        raise ValueError("more rows than columns")
    dx = [max(row) for row in weights]
    dy = [0] * m
    match = [-1] * m
    vx = [False] * n
    vy = [False] * m
    slack: list = [INF] * m

    def find(c: int) -> bool:
        vx[c] = True
        row = weights[c]
        for j in range(m):
            if vy[j]:
                continue
            gap = dx[c] + dy[j] - row[j]
            if gap == 0:
                vy[j] = True
                if match[j] == -1 or find(match[j]):
                    match[j] = c
                    return True
            elif gap < slack[j]:
                slack[j] = gap
        return False

    for k in range(n):
        slack[:] = [INF] * m
        while True:
            vx[:] = [False] * n
            vy[:] = [False] * m
            if find(k):
                break
            d = min(slack[j] for j in range(m) if not vy[j])
            for i in range(n):
                if vx[i]:
                    dx[i] -= d
            for j in range(m):
                if vy[j]:
                    dy[j] += d
                else:
                    slack[j] -= d

    assignment = [0] * n
    for j, i in enumerate(match):
        if i != -1:
            assignment[i] = j
    total = sum(weights[i][assignment[i]] for i in range(n))
    return total, assignment


def stoer_wagner(weights: Sequence[Sequence[int]]) -> int:
    """Weight of a global minimum cut of an undirected graph given as a symmetric matrix."""
    n = len(weights)
    if n < 2:
        raise ValueError("need at least two vertices")
    if any(len(row) != n for row in weights):
        raise ValueError("weights must be a square matrix")
    a = [list(row) for row in weights]
    used = [False] * n
    best = None
    for _ in range(n - 1):
        active = [j for j in range(n) if not used[j]]
        first = active[0]
        visited = {first}
        reach = {j: a[first][j] for j in active}
        previous = current = first
        for _ in range(len(active) - 1):
            k = max((j for j in active if j not in visited), key=reach.__getitem__)
            visited.add(k)
            previous, current = current, k
            for j in active:
                if j not in visited:
                    reach[j] += a[k][j]
        cut = sum(a[j][current] for j in active)
        best = cut if best is None else min(best, cut)
        used[current] = True
        for j in range(n):
            if j != previous and not used[j]:
                a[j][previous] += a[j][current]
                a[previous][j] = a[j][previous]
    return best