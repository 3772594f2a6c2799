import pytest

from contestlib.link_cut_tree import LinkCutTree


def test_path_sums_on_chain():
    values = [1, 2, 4, 8, 16]
    t = LinkCutTree(values)
    for i in range(4):
        assert t.link(i, i + 1)
    assert t.query(0, 4) == sum(values)
    assert t.query(3, 1) == values[1] + values[2] + values[3]
    assert t.query(2, 2) == values[2]


def test_link_refuses_cycle_and_cut_removes_edge():
    t = LinkCutTree([1, 1, 1, 1])
    assert t.link(0, 1)
    assert t.link(1, 2)
    assert not t.link(0, 2)
    assert t.connected(0, 2)
    assert not t.cut(0, 2)
    assert t.cut(1, 2)
    assert not t.connected(0, 2)
    assert t.connected(0, 1)


def test_find_root_agrees_for_connected_vertices():
    t = LinkCutTree([0] * 6)
    t.link(0, 1)
    t.link(0, 2)
    t.link(2, 3)
    roots = {t.find_root(v) for v in (0, 1, 2, 3)}
    assert len(roots) == 1
    assert t.find_root(4) == 4


def test_set_value_changes_sum():
    values = [3, 5, 7]
    t = LinkCutTree(values)
    t.link(0, 1)
    t.link(1, 2)
    t.set_value(1, 100)
    assert t.query(0, 2) == values[0] + 100 + values[2]


def test_query_disconnected_raises():
    t = LinkCutTree([1, 2])
    with pytest.raises(ValueError):
        t.query(0, 1)