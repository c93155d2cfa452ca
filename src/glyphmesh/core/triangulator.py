"""Triangulation pipeline orchestration.

This module wires the stages together for one shape at a time:

1. Build loops from path commands (curve flattening, dedupe)
2. Drop degenerate loops and load the rest into a fresh vertex buffer
3. Classify loops as outer boundaries or holes
4. Bridge every hole into its enclosing outer loop
5. Ear-clip each resulting hole-free polygon

Each call owns its vertex buffer and loops; nothing is shared or cached
between shapes. Geometry errors abort the shape and propagate to the caller.
"""

import time
from collections.abc import Iterable, Sequence

import structlog

from glyphmesh.config import TriangulationConfig
from glyphmesh.core.bridge import HoleEliminator
from glyphmesh.core.builder import build_loops, dedupe
from glyphmesh.core.classifier import ContourClassifier
from glyphmesh.core.earclip import clip_ears
from glyphmesh.domain import Loop, Mesh, PathCommand, Point, Triangle, VertexBuffer
from glyphmesh.exceptions import GeometryError
from glyphmesh.utils import TriangulationLogger, TriangulationStats


class Triangulator:
    """Converts closed outlines into triangle meshes.

    Example:
        triangulator = Triangulator(TriangulationConfig(resolution=16))
        mesh = triangulator.triangulate_commands(commands, name="O")
        print(mesh.triangle_count, mesh.area())
    """

    def __init__(
        self,
        config: TriangulationConfig | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the triangulator.

        Args:
            config: Triangulation settings (curve resolution)
            logger: Structured logger (defaults to the "glyphmesh" logger)
        """
        self.config = config or TriangulationConfig()
        self.logger = logger or structlog.get_logger("glyphmesh")
        self.triangulation_logger = TriangulationLogger(self.logger)
        self.classifier = ContourClassifier()
        self.eliminator = HoleEliminator()

    @property
    def stats(self) -> TriangulationStats:
        """Statistics accumulated over every shape triangulated so far."""
        return self.triangulation_logger.stats

    def triangulate(self, paths: Sequence[Sequence[Point]], name: str = "shape") -> Mesh:
        """Triangulate one shape given as closed point loops.

        Args:
            paths: One sequence of points per closed contour, without an
                explicit closing point
            name: Shape name used in log events

        Returns:
            Mesh covering the filled interior of the shape

        Raises:
            UnenclosedHoleError: If a hole lies outside every outer loop
            EarClippingError: If a polygon cannot be fully triangulated
        """
        start_time = time.perf_counter()
        self.triangulation_logger.log_shape_start(name)

        try:
            vertices = VertexBuffer()
            loops: list[Loop] = []
            for path in paths:
                points = dedupe(list(path))
                if len(points) < 3:
                    self.triangulation_logger.log_loop_dropped(name, len(points))
                    continue
                loops.append(vertices.extend(points))

            classified = self.classifier.classify(loops, vertices)
            self.triangulation_logger.log_classification(
                name, len(classified.outer_loops), len(classified.holes)
            )

            outer_loops = classified.outer_loops
            bridges = self.eliminator.eliminate(vertices, outer_loops, classified.holes)

            triangles: list[Triangle] = []
            for loop in outer_loops:
                triangles.extend(clip_ears(vertices, loop))
        except GeometryError as e:
            self.triangulation_logger.log_shape_error(name, e)
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        self.triangulation_logger.log_shape_complete(
            name, triangles=len(triangles), bridges=bridges, duration_ms=duration_ms
        )
        return Mesh(vertices=vertices.to_list(), triangles=triangles)

    def triangulate_commands(self, commands: Iterable[PathCommand], name: str = "shape") -> Mesh:
        """Triangulate one shape given as a path command stream.

        Curves are flattened at the configured resolution.

        Raises:
            ContourError: If the command stream is malformed
            UnenclosedHoleError: If a hole lies outside every outer loop
            EarClippingError: If a polygon cannot be fully triangulated
        """
        try:
            paths = build_loops(commands, self.config.resolution)
        except GeometryError as e:
            self.triangulation_logger.log_shape_error(name, e)
            raise
        return self.triangulate(paths, name=name)

    def triangulate_shapes(
        self, shapes: Iterable[tuple[str, Iterable[PathCommand]]]
    ) -> list[tuple[str, Mesh]]:
        """Triangulate several independent shapes, one mesh each.

        Args:
            shapes: (name, commands) pairs, e.g. one per glyph of a text run

        Returns:
            (name, mesh) pairs in input order
        """
        return [(name, self.triangulate_commands(commands, name=name)) for name, commands in shapes]


def triangulate(paths: Sequence[Sequence[Point]]) -> Mesh:
    """Triangulate one shape with default settings."""
    return Triangulator().triangulate(paths)
