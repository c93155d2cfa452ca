"""Domain models for glyphmesh.

This module contains the value types that flow through the triangulation
pipeline. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries (JSON input and output)
- Independent of fonttools implementation details

Key classes:
- Point: A 2D point/vector
- MoveTo, LineTo, QuadTo, CubicTo, ClosePath: Path command records
- VertexBuffer: Append-only vertex arena shared by the loops of one shape
- LoopKind: Outer boundary or hole
- Mesh: Vertex buffer plus triangle index list
"""

from glyphmesh.domain.contour import Loop, LoopKind, VertexBuffer
from glyphmesh.domain.mesh import Mesh, Triangle
from glyphmesh.domain.path import (
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadTo,
    command_from_dict,
)
from glyphmesh.domain.point import Point

__all__: list[str] = [
    # Enums
    "LoopKind",
    # Core types
    "Point",
    "Loop",
    "VertexBuffer",
    "Mesh",
    "Triangle",
    # Path commands
    "ClosePath",
    "CubicTo",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "QuadTo",
    "command_from_dict",
]
