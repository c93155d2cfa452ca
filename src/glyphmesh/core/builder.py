"""Contour builder: turns a path command stream into closed polylines.

Curves are flattened at a fixed resolution and every closed sub-path becomes
one loop of points. Consecutive duplicate points are removed and the explicit
closing point is stripped, so a loop's first and last points always differ.
"""

import logging
from collections.abc import Iterable

from glyphmesh.core.geometry import sample_bezier
from glyphmesh.domain import ClosePath, CubicTo, LineTo, MoveTo, PathCommand, Point, QuadTo
from glyphmesh.exceptions import ContourError

logger = logging.getLogger(__name__)


def dedupe(points: list[Point]) -> list[Point]:
    """Remove consecutive duplicate points and the closing duplicate.

    Points are compared by exact coordinates. If, after collapsing runs, the
    last point equals the first it is dropped. Idempotent.

    Args:
        points: Points of one loop

    Returns:
        New list with duplicates removed
    """
    result: list[Point] = []
    for point in points:
        if not result or point != result[-1]:
            result.append(point)

    if len(result) > 1 and result[-1] == result[0]:
        result.pop()

    return result


class ContourBuilder:
    """Accumulates path commands into closed loops.

    Example:
        builder = ContourBuilder(resolution=16)
        for command in commands:
            builder.feed(command)
        loops = builder.finish()
    """

    def __init__(self, resolution: int = 32) -> None:
        """Initialize the builder.

        Args:
            resolution: Number of segments each Bezier curve is flattened into
        """
        if resolution < 1:
            raise ValueError(f"Resolution must be at least 1, got {resolution}")
        self.resolution = resolution
        self._loops: list[list[Point]] = []
        self._current: list[Point] | None = None
        self._start: Point | None = None
        self._cursor: Point | None = None

    def feed(self, command: PathCommand) -> None:
        """Consume one path command.

        Raises:
            ContourError: If a drawing command arrives before any MoveTo, or
                the command is not a known path command
        """
        match command:
            case MoveTo():
                if self._current is not None:
                    logger.debug("Implicitly closing open sub-path before move")
                    self._close()
                self._start = self._cursor = command.end
                self._current = [command.end]

            case LineTo():
                current, _ = self._require_open(command)
                current.append(command.end)
                self._cursor = command.end

            case QuadTo() | CubicTo():
                current, cursor = self._require_open(command)
                controls = [cursor, *command.controls(), command.end]
                current.extend(sample_bezier(controls, self.resolution)[1:])
                self._cursor = command.end

            case ClosePath():
                if self._current is None:
                    logger.debug("Ignoring close with no open sub-path")
                    return
                self._close()

            case _:
                raise ContourError(f"Unsupported path command: {command!r}")

    def finish(self) -> list[list[Point]]:
        """Close any open sub-path and return all loops built so far."""
        if self._current is not None:
            logger.debug("Implicitly closing open sub-path at end of stream")
            self._close()
        loops = self._loops
        self._loops = []
        return loops

    def _require_open(self, command: PathCommand) -> tuple[list[Point], Point]:
        if self._current is None or self._cursor is None:
            raise ContourError(f"Path command {command!r} has no preceding MoveTo")
        return self._current, self._cursor

    def _close(self) -> None:
        if self._current is None or self._start is None:
            return
        self._current.append(self._start)
        self._loops.append(dedupe(self._current))
        self._cursor = self._start
        self._current = None


def build_loops(commands: Iterable[PathCommand], resolution: int = 32) -> list[list[Point]]:
    """Build closed loops from a path command stream.

    Args:
        commands: Ordered path commands of one shape or glyph
        resolution: Number of segments each Bezier curve is flattened into

    Returns:
        One deduplicated loop of points per closed sub-path

    Raises:
        ContourError: If the command stream is malformed
    """
    builder = ContourBuilder(resolution=resolution)
    for command in commands:
        builder.feed(command)
    return builder.finish()
