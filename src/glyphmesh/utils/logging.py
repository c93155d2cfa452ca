"""Logging utilities for Glyphmesh."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class TriangulationStats:
    """Statistics from a triangulation run."""

    shape_count: int = 0
    triangle_count: int = 0
    bridges_added: int = 0
    dropped_loops: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    shape_times_ms: list[float] = field(default_factory=list)

    @property
    def total_time_ms(self) -> float:
        """Total time spent triangulating shapes."""
        return sum(self.shape_times_ms)

    @property
    def avg_shape_time_ms(self) -> float | None:
        """Average time per shape, or None if nothing was triangulated."""
        if not self.shape_times_ms:
            return None
        return self.total_time_ms / len(self.shape_times_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("glyphmesh")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class TriangulationLogger:
    """Logger for tracking triangulation progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = TriangulationStats()

    def log_shape_start(self, shape: str) -> None:
        """Log start of shape triangulation."""
        self._logger.debug("Triangulating shape", shape=shape)

    def log_loop_dropped(self, shape: str, point_count: int) -> None:
        """Log a degenerate loop that was dropped."""
        self._logger.debug("Degenerate loop dropped", shape=shape, points=point_count)
        self._stats.dropped_loops += 1

    def log_classification(self, shape: str, outer_count: int, hole_count: int) -> None:
        """Log contour classification results."""
        self._logger.debug(
            "Contour classification",
            shape=shape,
            outer=outer_count,
            holes=hole_count,
        )

    def log_shape_complete(
        self,
        shape: str,
        triangles: int,
        bridges: int,
        duration_ms: float,
    ) -> None:
        """Log successful shape triangulation."""
        self._logger.info(
            "Shape triangulated",
            shape=shape,
            triangles=triangles,
            bridges=bridges,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.shape_count += 1
        self._stats.triangle_count += triangles
        self._stats.bridges_added += bridges
        self._stats.shape_times_ms.append(duration_ms)

    def log_shape_error(self, shape: str, error: Exception) -> None:
        """Log shape triangulation error."""
        self._logger.error(
            "Shape triangulation failed",
            shape=shape,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((shape, str(error)))

    @property
    def stats(self) -> TriangulationStats:
        """Get current triangulation statistics."""
        return self._stats
