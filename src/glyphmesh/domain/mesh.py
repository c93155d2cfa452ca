"""Triangle mesh produced by the triangulator.

A mesh is the complete vertex buffer of one triangulation pass plus a list of
index triples. Vertices that no triangle references (bridge duplicates that
ended up in degenerate ears) are kept so indices stay stable.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from glyphmesh.domain.point import Point

Triangle = tuple[int, int, int]


@dataclass
class Mesh:
    """Vertex buffer plus triangle index list.

    Attributes:
        vertices: Points referenced by the triangles
        triangles: Index triples into `vertices`, one per triangle
    """

    vertices: list[Point] = field(default_factory=list)
    triangles: list[Triangle] = field(default_factory=list)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)

    def is_empty(self) -> bool:
        """Check if the mesh has no triangles."""
        return not self.triangles

    def triangle_points(self, triangle: Triangle) -> tuple[Point, Point, Point]:
        """Resolve a triangle's indices to points."""
        a, b, c = triangle
        return self.vertices[a], self.vertices[b], self.vertices[c]

    def area(self) -> float:
        """Total unsigned area covered by the triangles."""
        total = 0.0
        for triangle in self.triangles:
            a, b, c = self.triangle_points(triangle)
            total += abs((b - a).cross(c - a)) / 2.0
        return total

    def flat_vertices(self) -> list[float]:
        """Vertices as a flat [x0, y0, x1, y1, ...] list for a rasterizer."""
        return [coord for p in self.vertices for coord in (p.x, p.y)]

    def flat_indices(self) -> list[int]:
        """Triangles as a flat [a0, b0, c0, a1, ...] index list."""
        return [index for triangle in self.triangles for index in triangle]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the flat-array dictionary form."""
        return {
            "vertices": self.flat_vertices(),
            "triangles": self.flat_indices(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Mesh":
        """Deserialize from the flat-array dictionary form."""
        coords = data["vertices"]
        indices = data["triangles"]
        vertices = [Point(coords[i], coords[i + 1]) for i in range(0, len(coords), 2)]
        triangles = [
            (indices[i], indices[i + 1], indices[i + 2]) for i in range(0, len(indices), 3)
        ]
        return cls(vertices=vertices, triangles=triangles)

    @classmethod
    def merge(cls, meshes: Iterable["Mesh"]) -> "Mesh":
        """Concatenate meshes into one, offsetting triangle indices."""
        merged = cls()
        for mesh in meshes:
            offset = len(merged.vertices)
            merged.vertices.extend(mesh.vertices)
            merged.triangles.extend(
                (a + offset, b + offset, c + offset) for a, b, c in mesh.triangles
            )
        return merged
