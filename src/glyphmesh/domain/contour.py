"""Vertex arena and loop types shared by the triangulation stages.

All loops of one shape reference a single VertexBuffer by index. The buffer
is append-only for the lifetime of one triangulation pass: bridging a hole
appends duplicates of the bridge endpoints but never removes anything.
"""

from collections.abc import Iterable, Iterator
from enum import Enum, auto
from typing import TypeAlias

from glyphmesh.domain.point import Point

Loop: TypeAlias = list[int]


class LoopKind(Enum):
    """Role of a closed contour.

    - OUTER: boundary of a filled region
    - HOLE: boundary of a removed region nested inside an outer loop
    """

    OUTER = auto()
    HOLE = auto()


class VertexBuffer:
    """Append-only ordered collection of points shared by all loops of a shape.

    Example:
        vertices = VertexBuffer()
        loop = vertices.extend([Point(0, 0), Point(1, 0), Point(0, 1)])
        # loop == [0, 1, 2]
    """

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self._points: list[Point] = list(points)

    def append(self, point: Point) -> int:
        """Append a point and return its index."""
        self._points.append(point)
        return len(self._points) - 1

    def extend(self, points: Iterable[Point]) -> Loop:
        """Append points and return their indices as a loop."""
        start = len(self._points)
        self._points.extend(points)
        return list(range(start, len(self._points)))

    def points(self, loop: Loop) -> list[Point]:
        """Resolve a loop of indices to its points."""
        return [self._points[i] for i in loop]

    def to_list(self) -> list[Point]:
        """Copy of the buffer contents."""
        return list(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)
