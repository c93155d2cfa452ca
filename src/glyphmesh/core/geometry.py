"""Geometric primitives for the triangulation pipeline.

This module provides the geometry kernel used by every stage:
- Orientation predicate (signed turn of three points)
- Barycentric point-in-triangle test
- Signed and triangle areas (shoelace formula)
- Bezier curve sampling at a fixed resolution

The y axis points down, so a positive orientation is a clockwise turn on
screen. All functions are pure and stateless.
"""

from glyphmesh.core._bezier import sample_uniform as _sample_uniform
from glyphmesh.domain import Point


def orientation(a: Point, b: Point, c: Point) -> float:
    """Signed turn of the triple (a, b, c).

    Twice the signed area of triangle abc. Zero means the points are
    collinear (or coincident).

    Args:
        a: First point
        b: Second point (the vertex of the turn)
        c: Third point

    Returns:
        Positive, negative, or zero orientation value

    Examples:
        >>> orientation(Point(0.0, 1.0), Point(0.0, 0.0), Point(1.0, 0.0))
        1.0
    """
    return (b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)


def point_in_triangle(a: Point, b: Point, c: Point, p: Point) -> bool:
    """Test whether p lies strictly inside triangle abc.

    Uses barycentric coordinates. Points on an edge or a corner are not
    inside, and a degenerate (zero-area) triangle contains nothing.

    Args:
        a: First triangle corner
        b: Second triangle corner
        c: Third triangle corner
        p: Point to test

    Returns:
        True if p is strictly inside the triangle
    """
    v0 = b - a
    v1 = c - a
    v2 = p - a

    d00 = v0.dot(v0)
    d01 = v0.dot(v1)
    d11 = v1.dot(v1)
    d20 = v2.dot(v0)
    d21 = v2.dot(v1)

    denom = d00 * d11 - d01 * d01
    if denom == 0.0:
        return False

    v = (d11 * d20 - d01 * d21) / denom
    w = (d00 * d21 - d01 * d20) / denom
    u = 1.0 - v - w
    return v > 0 and w > 0 and u > 0


def signed_area(points: list[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    Outer loops have positive area and holes negative area in the
    downward-y convention used throughout glyphmesh.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> signed_area([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)])
        1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def triangle_area(a: Point, b: Point, c: Point) -> float:
    """Unsigned area of triangle abc."""
    return abs(orientation(a, b, c)) / 2.0


def sample_bezier(points: list[Point], n: int) -> list[Point]:
    """Flatten a Bezier curve into n + 1 points.

    Handles both quadratic (3 points) and cubic (4 points) Bezier curves.
    Samples at t = 0, 1/n, ..., 1 inclusive; with n = 1 only the two end
    control points are returned. Coincident control points are allowed and
    simply produce repeated samples.

    Args:
        points: Control points of the Bezier curve (3 for quadratic, 4 for cubic)
        n: Number of segments to flatten the curve into

    Returns:
        List of n + 1 points along the curve

    Raises:
        ValueError: If points list is not of length 3 or 4, or n < 1
    """
    if len(points) not in (3, 4):
        raise ValueError(f"Expected 3-4 points for Bezier curve, got {len(points)}")
    if n < 1:
        raise ValueError(f"Sample count must be at least 1, got {n}")

    return _sample_uniform(points, n)
