"""Path command records consumed by the contour builder.

A path is an ordered stream of commands, one case per segment kind:

- MoveTo: start a new sub-path
- LineTo: straight segment to a point
- QuadTo: quadratic Bezier segment (one control point)
- CubicTo: cubic Bezier segment (two control points)
- ClosePath: close the current sub-path

The dictionary form uses the single-letter SVG/opentype.js tags
("M", "L", "Q", "C", "Z") so command streams can be stored as JSON.
"""

from dataclasses import dataclass
from typing import Any, TypeAlias

from glyphmesh.domain.point import Point
from glyphmesh.exceptions import ContourError


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new sub-path at (x, y)."""

    x: float
    y: float

    @property
    def end(self) -> Point:
        return Point(self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        return {"type": "M", "x": self.x, "y": self.y}


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment from the cursor to (x, y)."""

    x: float
    y: float

    @property
    def end(self) -> Point:
        return Point(self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        return {"type": "L", "x": self.x, "y": self.y}


@dataclass(frozen=True, slots=True)
class QuadTo:
    """Quadratic Bezier from the cursor through control (cx, cy) to (x, y)."""

    cx: float
    cy: float
    x: float
    y: float

    @property
    def end(self) -> Point:
        return Point(self.x, self.y)

    def controls(self) -> list[Point]:
        return [Point(self.cx, self.cy)]

    def to_dict(self) -> dict[str, Any]:
        return {"type": "Q", "x1": self.cx, "y1": self.cy, "x": self.x, "y": self.y}


@dataclass(frozen=True, slots=True)
class CubicTo:
    """Cubic Bezier from the cursor through two controls to (x, y)."""

    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float

    @property
    def end(self) -> Point:
        return Point(self.x, self.y)

    def controls(self) -> list[Point]:
        return [Point(self.c1x, self.c1y), Point(self.c2x, self.c2y)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "C",
            "x1": self.c1x,
            "y1": self.c1y,
            "x2": self.c2x,
            "y2": self.c2y,
            "x": self.x,
            "y": self.y,
        }


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current sub-path back to its start point."""

    def to_dict(self) -> dict[str, Any]:
        return {"type": "Z"}


PathCommand: TypeAlias = MoveTo | LineTo | QuadTo | CubicTo | ClosePath


def command_from_dict(data: Any) -> PathCommand:
    """Deserialize a path command from its tagged dictionary form.

    Args:
        data: Dictionary with a "type" tag and the coordinates for that command

    Returns:
        The matching command record

    Raises:
        ContourError: If the value is not a dictionary, the tag is unknown, or a
            coordinate is missing or not a number
    """
    if not isinstance(data, dict):
        raise ContourError(f"Path command must be an object, got {data!r}")

    tag = data.get("type")
    try:
        if tag == "M":
            return MoveTo(float(data["x"]), float(data["y"]))
        if tag == "L":
            return LineTo(float(data["x"]), float(data["y"]))
        if tag == "Q":
            return QuadTo(
                float(data["x1"]), float(data["y1"]), float(data["x"]), float(data["y"])
            )
        if tag == "C":
            return CubicTo(
                float(data["x1"]),
                float(data["y1"]),
                float(data["x2"]),
                float(data["y2"]),
                float(data["x"]),
                float(data["y"]),
            )
        if tag == "Z":
            return ClosePath()
    except KeyError as e:
        raise ContourError(f"Path command '{tag}' is missing coordinate {e}") from e
    except (TypeError, ValueError) as e:
        raise ContourError(f"Path command '{tag}' has a non-numeric coordinate: {e}") from e

    raise ContourError(f"Unknown path command type: {tag!r}")
