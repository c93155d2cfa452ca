"""Configuration settings for Glyphmesh."""

from pathlib import Path

from pydantic import BaseModel, Field


class TriangulationConfig(BaseModel):
    """Configuration for outline triangulation."""

    resolution: int = Field(
        default=32,
        ge=1,
        le=1024,
        description="Number of line segments each Bezier curve is flattened into",
    )


class LayoutConfig(BaseModel):
    """Configuration for laying out text from a font.

    Coordinates use a downward y axis, so the baseline sits `baseline` units
    below the top of the canvas.
    """

    size: float = Field(
        default=300.0,
        gt=0.0,
        description="Font size in output units (one em)",
    )
    x: float = Field(
        default=0.0,
        description="X position of the first glyph origin",
    )
    baseline: float | None = Field(
        default=None,
        description="Y position of the baseline (None = size)",
    )

    def get_baseline(self) -> float:
        """Get the baseline, defaulting to one em below the origin."""
        return self.size if self.baseline is None else self.baseline


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphMeshSettings(BaseModel):
    """Main application settings."""

    triangulation: TriangulationConfig = Field(default_factory=TriangulationConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphMeshSettings:
    """Get default application settings."""
    return GlyphMeshSettings()
