"""Converters between fonttools outlines and path commands.

This module handles drawing a fonttools glyph into path command records
(MoveTo, LineTo, QuadTo, CubicTo, ClosePath) in output coordinates.
"""

from typing import Any

from fontTools.pens.basePen import decomposeQuadraticSegment, decomposeSuperBezierSegment
from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.reverseContourPen import ReverseContourPen
from fontTools.pens.transformPen import TransformPen

from glyphmesh.domain import ClosePath, CubicTo, LineTo, MoveTo, PathCommand, QuadTo

Coordinate = tuple[float, float]


def fonttools_glyph_to_commands(
    fonttools_glyph: Any,
    scale: float = 1.0,
    x: float = 0.0,
    baseline: float = 0.0,
    reverse: bool = False,
) -> list[PathCommand]:
    """Convert a fonttools glyph to path commands in output coordinates.

    Font units have y pointing up; the output has y pointing down. Each point
    is mapped to (x + fx * scale, baseline - fy * scale), which keeps the
    glyph upright and turns TrueType outer contours into outer loops.

    Note: CFF fonts wind outer contours the opposite way to TrueType. Pass
    reverse=True for them so the classifier sees consistent winding.

    Args:
        fonttools_glyph: Glyph object from a fonttools GlyphSet
        scale: Output units per font unit
        x: X position of the glyph origin
        baseline: Y position of the baseline
        reverse: Reverse the direction of every contour

    Returns:
        List of path commands
    """
    pen = RecordingPen()
    target: Any = ReverseContourPen(pen) if reverse else pen
    fonttools_glyph.draw(TransformPen(target, (scale, 0, 0, -scale, x, baseline)))
    return recording_to_commands(pen.value)


def recording_to_commands(recording: list[tuple[str, tuple[Any, ...]]]) -> list[PathCommand]:
    """Convert a RecordingPen recording to path commands.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), ..., (x, y)))  # Quadratic, implied on-curve points
    - ('qCurveTo', ((x1, y1), ..., None))  # Closed contour with no on-curve point
    - ('curveTo', ((x1, y1), (x2, y2), (x, y)))  # Cubic
    - ('closePath', ()) / ('endPath', ())

    Open contours (endPath) are closed, since only closed outlines can be
    filled.

    Args:
        recording: List of drawing commands from RecordingPen

    Returns:
        List of path commands
    """
    commands: list[PathCommand] = []

    for operator, args in recording:
        if operator == "moveTo":
            commands.append(MoveTo(*args[0]))

        elif operator == "lineTo":
            commands.append(LineTo(*args[0]))

        elif operator == "qCurveTo":
            points = list(args)
            if points[-1] is None:
                points = points[:-1]
                start = _midpoint(points[-1], points[0])
                commands.append(MoveTo(*start))
                points.append(start)
            commands.extend(_quadratic_commands(points))

        elif operator == "curveTo":
            commands.extend(_cubic_commands(list(args)))

        elif operator in ("closePath", "endPath"):
            commands.append(ClosePath())

    return commands


def _midpoint(a: Coordinate, b: Coordinate) -> Coordinate:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def _quadratic_commands(points: list[Coordinate]) -> list[PathCommand]:
    """Split a TrueType quadratic run into single-control QuadTo commands."""
    if len(points) == 1:
        return [LineTo(*points[0])]
    return [
        QuadTo(control[0], control[1], end[0], end[1])
        for control, end in decomposeQuadraticSegment(points)
    ]


def _cubic_commands(points: list[Coordinate]) -> list[PathCommand]:
    """Convert a curveTo run into CubicTo commands."""
    if len(points) == 1:
        return [LineTo(*points[0])]
    if len(points) == 2:
        (cx, cy), (x, y) = points
        return [QuadTo(cx, cy, x, y)]

    segments = [points] if len(points) == 3 else decomposeSuperBezierSegment(points)
    return [
        CubicTo(c1[0], c1[1], c2[0], c2[1], end[0], end[1])
        for c1, c2, end in segments
    ]
