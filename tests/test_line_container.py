import random

import pytest

from contestlib.line_container import MaximumHull


def test_empty_hull_raises():
    with pytest.raises(ValueError):
        MaximumHull().evaluate(0)


def test_two_lines():
    hull = MaximumHull()
    hull.insert_line(1, 0)
    hull.insert_line(-1, 0)
    assert hull.evaluate(3) == 3
    assert hull.evaluate(-2) == 2


def test_equal_slope_keeps_the_higher_line():
    hull = MaximumHull()
    hull.insert_line(2, 5)
    hull.insert_line(2, 1)
    assert len(hull) == 1
    hull.insert_line(2, 9)
    assert len(hull) == 1
    assert hull.evaluate(0) == 9


def test_dominated_line_is_dropped():
    hull = MaximumHull()
    hull.insert_line(1, 0)
    hull.insert_line(-1, 0)
    hull.insert_line(0, -10)
    assert len(hull) == 2


@pytest.mark.parametrize("seed", range(8))
def test_matches_maximum_over_all_lines(seed):
    rng = random.Random(seed)
    hull = MaximumHull()
    lines = []
    for _ in range(60):
        m, c = rng.randint(-20, 20), rng.randint(-100, 100)
        lines.append((m, c))
        hull.insert_line(m, c)
        for x in (rng.randint(-50, 50) for _ in range(5)):
            assert hull.evaluate(x) == max(a * x + b for a, b in lines)
    assert len(hull) <= len(lines)