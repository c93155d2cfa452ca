"""Configuration management for glyphmesh.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TriangulationConfig: Curve sampling resolution
- LayoutConfig: Text layout settings (size, origin, baseline)
- LoggingConfig: Logging settings
- GlyphMeshSettings: Main application settings
"""

from glyphmesh.config.settings import (
    GlyphMeshSettings,
    LayoutConfig,
    LoggingConfig,
    TriangulationConfig,
    get_default_settings,
)

__all__ = [
    "GlyphMeshSettings",
    "LayoutConfig",
    "LoggingConfig",
    "TriangulationConfig",
    "get_default_settings",
]
