"""Internal Bezier curve evaluation.

This is an internal module containing helper functions for sample_bezier.
Not intended for public use.
"""

from glyphmesh.domain import Point


def de_casteljau(points: list[Point], t: float) -> Point:
    """Evaluate a Bezier curve at parameter t using De Casteljau's algorithm.

    Adjacent control points are linearly interpolated repeatedly until a
    single point remains.

    Args:
        points: Control points of the curve (any degree)
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve at t
    """
    level = list(points)
    while len(level) > 1:
        level = [level[i].lerp(level[i + 1], t) for i in range(len(level) - 1)]
    return level[0]


def sample_uniform(points: list[Point], n: int) -> list[Point]:
    """Sample a Bezier curve at n + 1 evenly spaced parameter values.

    The parameter is derived from the integer step so exactly n + 1 points
    are produced and the endpoints are the first and last control points.

    Args:
        points: Control points of the curve
        n: Number of segments

    Returns:
        List of n + 1 points from t = 0 to t = 1 inclusive
    """
    samples = [points[0]]
    for i in range(1, n):
        samples.append(de_casteljau(points, i / n))
    samples.append(points[-1])
    return samples
