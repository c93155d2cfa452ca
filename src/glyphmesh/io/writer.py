"""Mesh writer for handing triangle meshes to a rasterizer.

This module provides the MeshWriter class, which writes named meshes as
JSON (flat vertex and index arrays) or as an SVG preview with one polygon
per triangle.
"""

import json
from pathlib import Path

from glyphmesh.domain import Mesh
from glyphmesh.exceptions import MeshWriteError

NamedMesh = tuple[str, Mesh]


class MeshWriter:
    """Writes triangle meshes to disk.

    Example:
        writer = MeshWriter()
        writer.write_json([("O", mesh)], Path("o.json"))
    """

    def __init__(self, precision: int = 3) -> None:
        """Initialize the writer.

        Args:
            precision: Decimal places kept for SVG coordinates
        """
        self.precision = precision

    def to_json(self, meshes: list[NamedMesh]) -> str:
        """Serialize named meshes to JSON text."""
        payload = {
            "glyphs": [{"name": name, **mesh.to_dict()} for name, mesh in meshes],
        }
        return json.dumps(payload, indent=2)

    def to_svg(self, meshes: list[NamedMesh], margin: float = 10.0) -> str:
        """Render named meshes as an SVG document of filled triangles."""
        points = [p for _, mesh in meshes for p in mesh.vertices]
        if points:
            min_x = min(p.x for p in points) - margin
            min_y = min(p.y for p in points) - margin
            width = max(p.x for p in points) - min_x + margin
            height = max(p.y for p in points) - min_y + margin
        else:
            min_x = min_y = 0.0
            width = height = 2 * margin

        lines = [
            '<svg xmlns="http://www.w3.org/2000/svg" '
            f'viewBox="{self._fmt(min_x)} {self._fmt(min_y)} '
            f'{self._fmt(width)} {self._fmt(height)}">'
        ]
        for name, mesh in meshes:
            lines.append(f'  <g id="{name}" fill="black" stroke="white" stroke-width="0.5">')
            for triangle in mesh.triangles:
                coords = " ".join(
                    f"{self._fmt(p.x)},{self._fmt(p.y)}" for p in mesh.triangle_points(triangle)
                )
                lines.append(f'    <polygon points="{coords}"/>')
            lines.append("  </g>")
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def write_json(self, meshes: list[NamedMesh], output_path: Path) -> None:
        """Write named meshes as JSON.

        Raises:
            MeshWriteError: If the file cannot be written
        """
        self._write(output_path, self.to_json(meshes))

    def write_svg(self, meshes: list[NamedMesh], output_path: Path) -> None:
        """Write named meshes as an SVG preview.

        Raises:
            MeshWriteError: If the file cannot be written
        """
        self._write(output_path, self.to_svg(meshes))

    def _fmt(self, value: float) -> str:
        return f"{round(value, self.precision):g}"

    def _write(self, output_path: Path, text: str) -> None:
        try:
            output_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise MeshWriteError(str(output_path), str(e)) from e
