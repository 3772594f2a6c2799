import itertools
import random

import pytest

from contestlib.matching import hopcroft_karp, kuhn_munkres, stoer_wagner


def _brute_matching(left, edges):
    adj = [sorted({v for u, v in edges if u == x}) for x in range(left)]

    def best(i, used):
        if i == left:
            return 0
        result = best(i + 1, used)
        for v in adj[i]:
            if v not in used:
                result = max(result, 1 + best(i + 1, used | {v}))
        return result

    return best(0, frozenset())


@pytest.mark.parametrize("seed", range(15))
def test_hopcroft_karp_is_maximum_and_valid(seed):
    rng = random.Random(seed)
    left, right = rng.randint(1, 6), rng.randint(1, 6)
    edges = [(u, v) for u in range(left) for v in range(right) if rng.random() < 0.35]
    pairs = hopcroft_karp(left, right, edges)
    edge_set = set(edges)
    assert all(p in edge_set for p in pairs)
    assert len({u for u, _ in pairs}) == len(pairs)
    assert len({v for _, v in pairs}) == len(pairs)
    assert len(pairs) == _brute_matching(left, edges)


def test_hopcroft_karp_needs_augmenting_path():
    pairs = hopcroft_karp(2, 2, [(0, 0), (0, 1), (1, 0)])
    assert pairs == [(0, 1), (1, 0)]


def test_hopcroft_karp_rejects_bad_edge():
    with pytest.raises(IndexError):
        hopcroft_karp(1, 1, [(0, 2)])


@pytest.mark.parametrize("seed", range(15))
def test_kuhn_munkres_matches_brute_force(seed):
    rng = random.Random(100 + seed)
    n = rng.randint(1, 4)
    m = rng.randint(n, 5)
    weights = [[rng.randint(-5, 20) for _ in range(m)] for _ in range(n)]
    total, assignment = kuhn_munkres(weights)
    assert len(set(assignment)) == n
    assert total == sum(weights[i][assignment[i]] for i in range(n))
    brute = max(
        sum(weights[i][cols[i]] for i in range(n))
        for cols in itertools.permutations(range(m), n)
    )
    assert total == brute


def test_kuhn_munkres_rejects_tall_matrix():
    with pytest.raises(ValueError):
        kuhn_munkres([[1], [2]])


def _brute_cut(weights):
    n = len(weights)
    best = None
    for mask in range(1, (1 << n) - 1):
        cut = sum(
            weights[i][j]
            for i in range(n)
            for j in range(n)
            if mask >> i & 1 and not mask >> j & 1
        )
        best = cut if best is None else min(best, cut)
    return best


@pytest.mark.parametrize("seed", range(15))
def test_stoer_wagner_matches_brute_force(seed):
    rng = random.Random(200 + seed)
    n = rng.randint(2, 7)
    weights = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            w = rng.randint(0, 9) if rng.random() < 0.6 else 0
            weights[i][j] = weights[j][i] = w
    original = [row[:] for row in weights]
    assert stoer_wagner(weights) == _brute_cut(original)
    assert weights == original


def test_stoer_wagner_needs_two_vertices():
    with pytest.raises(ValueError):
        stoer_wagner([[0]])