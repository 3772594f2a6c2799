import pytest

from contestlib.ordered_set import OrderedSet


def test_example_from_usage():
    s = OrderedSet()
    s.add(1)
    assert s.find_by_order(0) == 1
    assert s.order_of_key(1) == 0


def test_ranks_and_membership():
    s = OrderedSet([5, 1, 9, 5, 3])
    assert list(s) == [1, 3, 5, 9]
    assert s.order_of_key(4) == 2
    assert 9 in s and 4 not in s
    s.discard(3)
    s.discard(100)
    assert len(s) == 3
    assert s.find_by_order(1) == 5


def test_find_by_order_out_of_range():
    with pytest.raises(IndexError):
        OrderedSet([1]).find_by_order(1)