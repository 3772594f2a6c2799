import pytest

from contestlib.simplex import InfeasibleError, LPSolver, UnboundedError, solve_lp

SOURCE_A = [[6, -1, 0], [-1, -5, 0], [1, 5, 1], [-1, -5, -1]]
SOURCE_B = [10, -4, 5, -5]
SOURCE_C = [1, -1, 0]


def _check_feasible(a, b, x, tol=1e-7):
    assert all(v >= -tol for v in x)
    for row, bound in zip(a, b):
        assert sum(r * v for r, v in zip(row, x)) <= bound + tol


def test_source_example():
    value, x = LPSolver(SOURCE_A, SOURCE_B, SOURCE_C).solve()
    assert value == pytest.approx(1.29032, abs=1e-5)
    assert x == pytest.approx([1.74194, 0.451613, 1], abs=1e-5)
    _check_feasible(SOURCE_A, SOURCE_B, x)


def test_value_matches_objective():
    value, x = solve_lp(SOURCE_A, SOURCE_B, SOURCE_C)
    assert value == pytest.approx(sum(c * v for c, v in zip(SOURCE_C, x)))


def test_solver_can_be_reused():
    solver = LPSolver(SOURCE_A, SOURCE_B, SOURCE_C)
    first = solver.solve()
    second = solver.solve()
    assert first[0] == pytest.approx(second[0])
    assert first[1] == pytest.approx(second[1])


def test_simple_box():
    a = [[1, 0], [0, 1]]
    b = [1, 2]
    value, x = solve_lp(a, b, [1, 1])
    assert value == pytest.approx(3)
    assert x == pytest.approx([1, 2])


def test_zero_objective_is_origin_value():
    a = [[1, 1]]
    value, x = solve_lp(a, [4], [0, 0])
    assert value == pytest.approx(0)
    _check_feasible(a, [4], x)


def test_unbounded():
    with pytest.raises(UnboundedError):
        solve_lp([[-1]], [0], [1])


def test_unbounded_without_constraints():
    with pytest.raises(UnboundedError):
        solve_lp([], [], [1])


def test_infeasible():
    with pytest.raises(InfeasibleError):
        solve_lp([[1]], [-1], [1])


def test_infeasible_is_value_error():
    with pytest.raises(ValueError):
        solve_lp([[1, 1], [-1, -1]], [1, -3], [1, 1])


def test_shape_mismatch():
    with pytest.raises(ValueError):
        LPSolver([[1, 2]], [1, 2], [1, 1])
    with pytest.raises(ValueError):
        LPSolver([[1]], [1], [1, 1])