"""Outline sources: TTF/OTF fonts and JSON command files.

This module provides the FontReader class for loading font files and
extracting glyph outlines as path commands, and read_commands for loading
a command stream stored as JSON.
"""

import json
from pathlib import Path
from typing import Any

from fontTools.ttLib import TTFont

from glyphmesh.config import LayoutConfig
from glyphmesh.domain import PathCommand, command_from_dict
from glyphmesh.exceptions import ContourError, GlyphNotFoundError
from glyphmesh.io.converter import fonttools_glyph_to_commands

NOTDEF = ".notdef"


class FontReader:
    """Loads TTF/OTF fonts and extracts glyph outlines.

    The FontReader provides a high-level interface for loading fonts
    and converting fonttools outlines to path commands.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            for name, commands in reader.text_commands("Hi", LayoutConfig()):
                print(name, len(commands))
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        self._font = TTFont(str(self._font_path))

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for CFF-flavoured fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["maxp"].numGlyphs

    def glyph_name_for(self, char: str) -> str:
        """Map a character to its glyph name through the font's cmap.

        Raises:
            GlyphNotFoundError: If the font has no glyph for the character
            RuntimeError: If font has not been loaded yet
        """
        cmap = self._require_font().getBestCmap() or {}
        name = cmap.get(ord(char))
        if name is None:
            raise GlyphNotFoundError(char)
        return name

    def advance_width(self, name: str) -> int:
        """Horizontal advance of a glyph in font units."""
        hmtx = self._require_font().get("hmtx")
        if hmtx is None or name not in hmtx.metrics:
            return 0
        return hmtx.metrics[name][0]

    def glyph_commands(
        self,
        name: str,
        x: float = 0.0,
        baseline: float = 0.0,
        size: float | None = None,
    ) -> list[PathCommand]:
        """Get a glyph's outline as path commands in output coordinates.

        Args:
            name: Glyph name
            x: X position of the glyph origin
            baseline: Y position of the baseline (y points down)
            size: Output size of one em (None keeps font units)

        Returns:
            Path commands for every contour of the glyph

        Raises:
            GlyphNotFoundError: If the glyph is not in the font
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        glyph_set = font.getGlyphSet()
        if name not in glyph_set:
            raise GlyphNotFoundError(name)

        scale = 1.0 if size is None else size / self.units_per_em
        return fonttools_glyph_to_commands(
            glyph_set[name],
            scale=scale,
            x=x,
            baseline=baseline,
            reverse=self.format == "OpenType",
        )

    def text_commands(
        self, text: str, layout: LayoutConfig | None = None
    ) -> list[tuple[str, list[PathCommand]]]:
        """Lay out a line of text, one command stream per glyph.

        Glyphs are placed left to right by advance width. Characters missing
        from the cmap fall back to .notdef; glyphs without outlines (spaces)
        advance the pen but produce no entry.

        Args:
            text: Characters to lay out
            layout: Size, origin and baseline settings

        Returns:
            (glyph name, commands) pairs in text order

        Raises:
            GlyphNotFoundError: If a character is unmapped and the font has
                no .notdef glyph
            RuntimeError: If font has not been loaded yet
        """
        layout = layout or LayoutConfig()
        font = self._require_font()
        scale = layout.size / self.units_per_em
        baseline = layout.get_baseline()
        pen_x = layout.x

        result: list[tuple[str, list[PathCommand]]] = []
        for char in text:
            try:
                name = self.glyph_name_for(char)
            except GlyphNotFoundError:
                if NOTDEF not in font.getGlyphOrder():
                    raise
                name = NOTDEF

            commands = self.glyph_commands(name, x=pen_x, baseline=baseline, size=layout.size)
            if commands:
                result.append((name, commands))
            pen_x += self.advance_width(name) * scale

        return result

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()


def read_commands(path: Path) -> list[tuple[str, list[PathCommand]]]:
    """Read named path command streams from a JSON file.

    Accepted layouts:
    - a list of command dictionaries (one unnamed shape)
    - {"shapes": [{"name": ..., "commands": [...]}, ...]}

    Args:
        path: JSON file to read

    Returns:
        (shape name, commands) pairs

    Raises:
        FileNotFoundError: If the file does not exist
        ContourError: If the JSON does not describe path commands
    """
    if not path.exists():
        raise FileNotFoundError(f"Command file not found: {path}")

    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ContourError(f"Invalid JSON in '{path}': {e}") from e

    if isinstance(data, list):
        return [(path.stem, [command_from_dict(item) for item in data])]

    if isinstance(data, dict) and isinstance(data.get("shapes"), list):
        shapes: list[tuple[str, list[PathCommand]]] = []
        for i, shape in enumerate(data["shapes"]):
            if not isinstance(shape, dict) or not isinstance(shape.get("commands", []), list):
                raise ContourError(f"Shape {i} in '{path}' is not a named command list")
            commands = [command_from_dict(item) for item in shape.get("commands", [])]
            shapes.append((str(shape.get("name", f"shape{i}")), commands))
        return shapes

    raise ContourError(f"'{path}' does not contain path commands")
