"""Utility functions for glyphmesh.

This module provides utility functions including:

- Logging setup and configuration
- Triangulation statistics tracking
"""

from glyphmesh.utils.logging import (
    TriangulationLogger,
    TriangulationStats,
    configure_logging,
)

__all__ = [
    "TriangulationLogger",
    "TriangulationStats",
    "configure_logging",
]
