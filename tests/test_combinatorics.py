import itertools

import pytest

from contestlib.combinatorics import all_permutations, all_subsets, next_permutation


def test_next_permutation_step():
    assert next_permutation([1, 2, 3]) == [1, 3, 2]


def test_next_permutation_of_last_is_none():
    assert next_permutation([3, 2, 1]) is None


def test_next_permutation_leaves_input_alone():
    items = [0, 2, 1]
    result = next_permutation(items)
    assert items == [0, 2, 1]
    assert sorted(result) == sorted(items)
    assert result > items


@pytest.mark.parametrize("n", range(0, 6))
def test_all_permutations_match_itertools(n):
    expected = [list(p) for p in itertools.permutations(range(n))]
    assert list(all_permutations(range(n))) == expected


def test_all_permutations_skip_duplicates():
    items = [2, 1, 1, 3]
    expected = sorted(set(itertools.permutations(items)))
    assert [tuple(p) for p in all_permutations(items)] == expected


def test_all_subsets_bit_order():
    assert list(all_subsets("ab")) == [[], ["a"], ["b"], ["a", "b"]]


@pytest.mark.parametrize("n", range(0, 7))
def test_all_subsets_cover_every_combination(n):
    items = list(range(10, 10 + n))
    subsets = list(all_subsets(items))
    assert len(subsets) == 2 ** n
    expected = {
        frozenset(c) for k in range(n + 1) for c in itertools.combinations(items, k)
    }
    assert {frozenset(s) for s in subsets} == expected
    assert all(s == sorted(s) for s in subsets)