"""Two-dimensional point/vector value type.

Points double as vectors: the arithmetic operators, `dot`, `cross` and
`normalize` treat a point as the vector from the origin.
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable. Equality is exact coordinate equality; it is used
    for deduplicating directly sampled duplicate points, not for general
    geometric coincidence.

    Attributes:
        x: X coordinate
        y: Y coordinate (the y axis points down)
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def dot(self, other: "Point") -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> float:
        """Z component of the 3D cross product with another vector."""
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> "Point":
        """Unit vector in the same direction.

        The zero vector normalizes to itself.
        """
        length = self.length()
        if length == 0.0:
            return self
        return Point(self.x / length, self.y / length)

    def lerp(self, other: "Point", t: float) -> "Point":
        """Linear interpolation towards `other` at parameter `t`."""
        return Point((1 - t) * self.x + t * other.x, (1 - t) * self.y + t * other.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=float(data["x"]), y=float(data["y"]))
