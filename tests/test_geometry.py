import math

import pytest

from contestlib.geometry import (
    Point,
    circle_circle_intersection,
    circle_line_intersection,
    compute_area,
    compute_centroid,
    compute_circle_center,
    compute_line_intersection,
    compute_signed_area,
    cross,
    dist2,
    distance_point_plane,
    distance_point_segment,
    dot,
    is_simple,
    lines_collinear,
    lines_parallel,
    point_in_polygon,
    point_on_polygon,
    project_point_line,
    project_point_segment,
    rotate_ccw,
    rotate_ccw90,
    rotate_cw90,
    segments_intersect,
)

SQUARE = [Point(0, 0), Point(5, 0), Point(5, 5), Point(0, 5)]


def assert_point(p, x, y, tol=1e-6):
    assert p.x == pytest.approx(x, abs=tol)
    assert p.y == pytest.approx(y, abs=tol)


def test_point_arithmetic():
    p = Point(1, 2) + Point(3, 4)
    assert p == Point(4, 6)
    assert (p - Point(1, 1)) == Point(3, 5)
    assert Point(1, 2) * 3 == Point(3, 6)
    assert Point(4, 6) / 2 == Point(2, 3)
    assert str(Point(-5, 2)) == "(-5,2)"


def test_products():
    assert dot(Point(1, 2), Point(3, 4)) == 11
    assert cross(Point(1, 0), Point(0, 1)) == 1
    assert dist2(Point(0, 0), Point(3, 4)) == 25


def test_rotations():
    assert rotate_ccw90(Point(2, 5)) == Point(-5, 2)
    assert rotate_cw90(Point(2, 5)) == Point(5, -2)
    assert_point(rotate_ccw(Point(2, 5), math.pi / 2), -5, 2)


def test_projections():
    assert_point(project_point_line(Point(-5, -2), Point(10, 4), Point(3, 7)), 5, 2)
    assert_point(project_point_segment(Point(-5, -2), Point(10, 4), Point(3, 7)), 5, 2)
    assert_point(project_point_segment(Point(7.5, 3), Point(10, 4), Point(3, 7)), 7.5, 3)
    assert_point(project_point_segment(Point(-5, -2), Point(2.5, 1), Point(3, 7)), 2.5, 1)


def test_project_point_line_rejects_degenerate_line():
    with pytest.raises(ValueError):
        project_point_line(Point(1, 1), Point(1, 1), Point(0, 0))


def test_distance_point_segment_matches_projection():
    a, b, c = Point(-5, -2), Point(10, 4), Point(3, 7)
    proj = project_point_segment(a, b, c)
    assert distance_point_segment(a, b, c) == pytest.approx(math.sqrt(dist2(c, proj)))


def test_distance_point_plane():
    assert distance_point_plane(4, -4, 3, 2, -2, 5, -8) == pytest.approx(6.78903, abs=1e-5)


def test_lines_parallel_and_collinear():
    a, b = Point(1, 1), Point(3, 5)
    assert [
        lines_parallel(a, b, Point(2, 1), Point(4, 5)),
        lines_parallel(a, b, Point(2, 0), Point(4, 5)),
        lines_parallel(a, b, Point(5, 9), Point(7, 13)),
    ] == [True, False, True]
    assert [
        lines_collinear(a, b, Point(2, 1), Point(4, 5)),
        lines_collinear(a, b, Point(2, 0), Point(4, 5)),
        lines_collinear(a, b, Point(5, 9), Point(7, 13)),
    ] == [False, False, True]


def test_segments_intersect():
    a, b = Point(0, 0), Point(2, 4)
    assert [
        segments_intersect(a, b, Point(3, 1), Point(-1, 3)),
        segments_intersect(a, b, Point(4, 3), Point(0, 5)),
        segments_intersect(a, b, Point(2, -1), Point(-2, 1)),
        segments_intersect(a, b, Point(5, 5), Point(1, 7)),
    ] == [True, True, True, False]


def test_line_intersection_and_circle_center():
    p = compute_line_intersection(Point(0, 0), Point(2, 4), Point(3, 1), Point(-1, 3))
    assert_point(p, 1, 2)
    assert_point(compute_circle_center(Point(-3, 4), Point(6, 1), Point(4, 5)), 1, 1)


def test_line_intersection_parallel_raises():
    with pytest.raises(ValueError):
        compute_line_intersection(Point(0, 0), Point(1, 1), Point(0, 1), Point(1, 2))


def test_point_in_polygon():
    queries = [Point(2, 2), Point(2, 0), Point(0, 2), Point(5, 2), Point(2, 5)]
    assert [point_in_polygon(SQUARE, q) for q in queries] == [True, True, True, False, False]


def test_point_on_polygon():
    queries = [Point(2, 2), Point(2, 0), Point(0, 2), Point(5, 2), Point(2, 5)]
    assert [point_on_polygon(SQUARE, q) for q in queries] == [False, True, True, True, True]


def test_circle_line_intersection():
    u = circle_line_intersection(Point(0, 6), Point(2, 6), Point(1, 1), 5)
    assert len(u) == 1
    assert_point(u[0], 1, 6, tol=1e-5)
    u = circle_line_intersection(Point(0, 9), Point(9, 0), Point(1, 1), 5)
    assert len(u) == 2
    assert_point(u[0], 5, 4)
    assert_point(u[1], 4, 5)


def test_circle_circle_intersection():
    assert circle_circle_intersection(Point(1, 1), Point(10, 10), 5, 5) == []
    u = circle_circle_intersection(Point(1, 1), Point(8, 8), 5, 5)
    assert len(u) == 2
    assert_point(u[0], 4, 5)
    assert_point(u[1], 5, 4)
    assert circle_circle_intersection(Point(1, 1), Point(4.5, 4.5), 10, math.sqrt(2) / 2) == []
    u = circle_circle_intersection(Point(1, 1), Point(4.5, 4.5), 5, math.sqrt(2) / 2)
    assert len(u) == 2
    assert_point(u[0], 4, 5)
    assert_point(u[1], 5, 4)


def test_area_and_centroid():
    p = [Point(0, 0), Point(5, 0), Point(1, 1), Point(0, 5)]
    assert compute_area(p) == pytest.approx(5.0)
    assert_point(compute_centroid(p), 7 / 6, 7 / 6)


def test_signed_area_flips_with_orientation():
    assert compute_signed_area(SQUARE) == pytest.approx(-compute_signed_area(SQUARE[::-1]))
    assert compute_signed_area(SQUARE) > 0


def test_centroid_of_degenerate_polygon_raises():
    with pytest.raises(ValueError):
        compute_centroid([Point(0, 0), Point(1, 1), Point(2, 2)])


def test_is_simple():
    assert is_simple(SQUARE) is True
    bowtie = [Point(0, 0), Point(5, 5), Point(5, 0), Point(0, 5)]
    assert is_simple(bowtie) is False