"""Orderings and decompositions of graphs.

Covers topological order, Eulerian trails, strongly connected components and
biconnected components.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def topological_sort(adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Order the vertices ``0..n-1`` so that every edge ``u -> v`` has u before v.

    Vertices are explored from the lowest number up, neighbours in list order.
    Raise ValueError if the graph has a cycle.
    """
    n = len(adjacency)
    state = [0] * n  # 0 unseen, 1 on the stack, 2 done
    order: list[int] = []
    for root in range(n):
        if state[root]:
            continue
        state[root] = 1
        stack = [(root, iter(adjacency[root]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if state[v] == 1:
                    raise ValueError("graph has a cycle")
                if state[v] == 0:
                    state[v] = 1
                    stack.append((v, iter(adjacency[v])))
                    break
            else:
                state[u] = 2
                order.append(u)
                stack.pop()
    order.reverse()
    return order


def eulerian_circuit(n: int, edges: Sequence[tuple[int, int]], start: int = 0) -> list[int]:
    """Return the vertices of a trail that uses every undirected edge exactly once.

    The trail is listed from its far end back to ``start``; for a circuit both ends
    are ``start``. Raise ValueError if no such trail starts at ``start``.
    """
    if not 0 <= start < n:
        raise ValueError("start vertex out of range")
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    degree = Counter()
    for i, (x, y) in enumerate(edges):
        adj[x].append((y, i))
        adj[y].append((x, i))
        degree[x] += 1
        degree[y] += 1
    odd = [v for v in range(n) if degree[v] % 2]
    if odd and (len(odd) != 2 or start not in odd):
        raise ValueError("no Eulerian trail starts at this vertex")
    used = [False] * len(edges)
    pointer = [0] * n
    stack = [start]
    trail: list[int] = []
    while stack:
        s = stack[-1]
        arcs = adj[s]
        while pointer[s] < len(arcs) and used[arcs[pointer[s]][1]]:
            pointer[s] += 1
        if pointer[s] == len(arcs):
            trail.append(stack.pop())
        else:
            v, i = arcs[pointer[s]]
            used[i] = True
            pointer[s] += 1
            stack.append(v)
    if len(trail) != len(edges) + 1:
        raise ValueError("edges are not all reachable from the start vertex")
    return trail


def strongly_connected_components(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Tarjan's algorithm; components are listed sinks first (reverse topological order)."""
    n = len(adjacency)
    index = [0] * n
    low = [0] * n
    finished = [False] * n
    counter = 0
    stack: list[int] = []
    components: list[list[int]] = []
    for root in range(n):
        if index[root]:
            continue
        counter += 1
        index[root] = low[root] = counter
        stack.append(root)
        work = [(root, 0)]
        while work:
            s, i = work[-1]
            if i < len(adjacency[s]):
                work[-1] = (s, i + 1)
                c = adjacency[s][i]
                if not index[c]:
                    counter += 1
                    index[c] = low[c] = counter
                    stack.append(c)
                    work.append((c, 0))
                elif not finished[c]:
                    low[s] = min(low[s], low[c])
                continue
            work.pop()
            if index[s] == low[s]:
                component = []
                while True:
                    v = stack.pop()
                    finished[v] = True
                    component.append(v)
                    if v == s:
                        break
                components.append(component)
            if work:
                p = work[-1][0]
                if not finished[s]:
                    low[p] = min(low[p], low[s])
    return components


def biconnected_components(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Vertex-biconnected components of an undirected simple graph.

    Each component is a sorted vertex list; a cut vertex appears in every
    component it belongs to. Isolated vertices form no component.
    """
    n = len(adjacency)
    dfn = [0] * n
    low = [0] * n
    parent = [-1] * n
    counter = 0
    components: list[list[int]] = []
    for root in range(n):
        if dfn[root]:
            continue
        counter += 1
        dfn[root] = low[root] = counter
        stack = [root]
        work = [(root, 0)]
        while work:
            s, i = work[-1]
            if i < len(adjacency[s]):
                work[-1] = (s, i + 1)
                c = adjacency[s][i]
                if c == parent[s]:
                    continue
                if not dfn[c]:
                    parent[c] = s
                    counter += 1
                    dfn[c] = low[c] = counter
                    stack.append(c)
                    work.append((c, 0))
                else:
                    low[s] = min(low[s], dfn[c])
                continue
            work.pop()
            if not work:
                continue
            p = work[-1][0]
            low[p] = min(low[p], low[s])
            if low[s] >= dfn[p]:
                component = []
                while True:
                    v = stack.pop()
                    component.append(v)
                    if v == s:
                        break
                component.append(p)
                components.append(sorted(component))
    return components