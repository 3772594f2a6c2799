"""Plane geometry: points, projections, intersections and polygons."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

INF = 1e100
EPS = 1e-12


@dataclass(frozen=True)
class Point:
    """A point or vector in the plane."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> Point:
        return Point(self.x * scale, self.y * scale)

    def __truediv__(self, scale: float) -> Point:
        return Point(self.x / scale, self.y / scale)

    def __str__(self) -> str:
        return f"({self.x:g},{self.y:g})"


def dot(p: Point, q: Point) -> float:
    """Dot product."""
    return p.x * q.x + p.y * q.y


def dist2(p: Point, q: Point) -> float:
    """Squared distance between two points."""
    return dot(p - q, p - q)


def cross(p: Point, q: Point) -> float:
    """Z component of the cross product."""
    return p.x * q.y - p.y * q.x


def rotate_ccw90(p: Point) -> Point:
    """Rotate 90 degrees counter-clockwise around the origin."""
    return Point(-p.y, p.x)


def rotate_cw90(p: Point) -> Point:
    """Rotate 90 degrees clockwise around the origin."""
    return Point(p.y, -p.x)


def rotate_ccw(p: Point, angle: float) -> Point:
    """Rotate counter-clockwise by ``angle`` radians around the origin."""
    cos_t, sin_t = math.cos(angle), math.sin(angle)
    return Point(p.x * cos_t - p.y * sin_t, p.x * sin_t + p.y * cos_t)


def project_point_line(a: Point, b: Point, c: Point) -> Point:
    """Project ``c`` onto the line through ``a`` and ``b`` (``a != b``)."""
    direction = b - a
    length2 = dot(direction, direction)
    if length2 == 0:
        raise ValueError("a and b must be distinct")
    return a + direction * dot(c - a, direction) / length2


def project_point_segment(a: Point, b: Point, c: Point) -> Point:
    """Project ``c`` onto the segment from ``a`` to ``b``."""
    r = dot(b - a, b - a)
    if abs(r) < EPS:
        return a
    r = dot(c - a, b - a) / r
    if r < 0:
        return a
    if r > 1:
        return b
    return a + (b - a) * r


def distance_point_segment(a: Point, b: Point, c: Point) -> float:
    """Distance from ``c`` to the segment from ``a`` to ``b``."""
    return math.sqrt(dist2(c, project_point_segment(a, b, c)))


def distance_point_plane(
    x: float, y: float, z: float, a: float, b: float, c: float, d: float
) -> float:
    """Distance from ``(x, y, z)`` to the plane ``a*x + b*y + c*z = d``."""
    return abs(a * x + b * y + c * z - d) / math.sqrt(a * a + b * b + c * c)


def lines_parallel(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if line ab is parallel to (or collinear with) line cd."""
    return abs(cross(b - a, c - d)) < EPS


def lines_collinear(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if lines ab and cd lie on the same line."""
    return (
        lines_parallel(a, b, c, d)
        and abs(cross(a - b, a - c)) < EPS
        and abs(cross(c - d, c - a)) < EPS
    )


def segments_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if segment ab meets segment cd."""
    if lines_collinear(a, b, c, d):
        if any(dist2(p, q) < EPS for p in (a, b) for q in (c, d)):
            return True
        return not (dot(c - a, c - b) > 0 and dot(d - a, d - b) > 0 and dot(c - b, d - b) > 0)
    if cross(d - a, b - a) * cross(c - a, b - a) > 0:
        return False
    if cross(a - c, d - c) * cross(b - c, d - c) > 0:
        return False
    return True


def compute_line_intersection(a: Point, b: Point, c: Point, d: Point) -> Point:
    """Intersection of line ab with line cd; the lines must cross in one point."""
    b = b - a
    d = c - d
    c = c - a
    if not (dot(b, b) > EPS and dot(d, d) > EPS):
        raise ValueError("each line needs two distinct points")
    denominator = cross(b, d)
    if denominator == 0:
        raise ValueError("lines are parallel")
    return a + b * cross(c, d) / denominator


def compute_circle_center(a: Point, b: Point, c: Point) -> Point:
    """Centre of the circle through three points."""
    mid_b = (a + b) / 2
    mid_c = (a + c) / 2
    return compute_line_intersection(
        mid_b, mid_b + rotate_cw90(a - mid_b), mid_c, mid_c + rotate_cw90(a - mid_c)
    )


def _edges(polygon: Sequence[Point]):
    return zip(polygon, list(polygon[1:]) + list(polygon[:1]))


def point_in_polygon(polygon: Sequence[Point], q: Point) -> bool:
    """Crossing test: True for strictly interior points, False for strictly exterior.

    Points on the boundary may go either way.
    """
    inside = False
    for p, r in _edges(polygon):
        if (p.y <= q.y < r.y or r.y <= q.y < p.y) and q.x < p.x + (r.x - p.x) * (
            q.y - p.y
        ) / (r.y - p.y):
            inside = not inside
    return inside


def point_on_polygon(polygon: Sequence[Point], q: Point) -> bool:
    """True if ``q`` lies on the boundary of the polygon."""
    return any(dist2(project_point_segment(p, r, q), q) < EPS for p, r in _edges(polygon))


def circle_line_intersection(a: Point, b: Point, c: Point, r: float) -> list[Point]:
    """Points where the line through ``a`` and ``b`` meets the circle at ``c`` of radius ``r``."""
    b = b - a
    a = a - c
    big_a = dot(b, b)
    if big_a == 0:
        raise ValueError("a and b must be distinct")
    big_b = dot(a, b)
    big_c = dot(a, a) - r * r
    disc = big_b * big_b - big_a * big_c
    if disc < -EPS:
        return []
    result = [c + a + b * (-big_b + math.sqrt(disc + EPS)) / big_a]
    if disc > EPS:
        result.append(c + a + b * (-big_b - math.sqrt(disc)) / big_a)
    return result


def circle_circle_intersection(a: Point, b: Point, r: float, big_r: float) -> list[Point]:
    """Points where the circle at ``a`` radius ``r`` meets the circle at ``b`` radius ``big_r``."""
    d = math.sqrt(dist2(a, b))
    if d == 0 or d > r + big_r or d + min(r, big_r) < max(r, big_r):
        return []
    x = (d * d - big_r * big_r + r * r) / (2 * d)
    y = math.sqrt(max(r * r - x * x, 0.0))
    v = (b - a) / d
    result = [a + v * x + rotate_ccw90(v) * y]
    if y > 0:
        result.append(a + v * x - rotate_ccw90(v) * y)
    return result


def compute_signed_area(polygon: Sequence[Point]) -> float:
    """Signed area; positive for counter-clockwise vertex order."""
    return sum(p.x * q.y - q.x * p.y for p, q in _edges(polygon)) / 2.0


def compute_area(polygon: Sequence[Point]) -> float:
    """Area of a simple polygon."""
    return abs(compute_signed_area(polygon))


def compute_centroid(polygon: Sequence[Point]) -> Point:
    """Centre of mass of a simple polygon."""
    scale = 6.0 * compute_signed_area(polygon)
    if scale == 0:
        raise ValueError("polygon has zero area")
    total = Point(0.0, 0.0)
    for p, q in _edges(polygon):
        total = total + (p + q) * (p.x * q.y - q.x * p.y)
    return total / scale


def is_simple(polygon: Sequence[Point]) -> bool:
    """True if no two non-adjacent edges of the polygon meet."""
    n = len(polygon)
    for i in range(n):
        j = (i + 1) % n
        for k in range(i + 1, n):
            l = (k + 1) % n
            if i == l or j == k:
                continue
            if segments_intersect(polygon[i], polygon[j], polygon[k], polygon[l]):
                return False
    return True