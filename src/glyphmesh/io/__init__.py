"""Outline and mesh I/O layer for glyphmesh.

This module handles reading outlines from font files (using fonttools) and
JSON command files, and writing finished meshes. It provides a clean
abstraction layer between fonttools and the domain models.

Key responsibilities:
- Load TTF/OTF fonts
- Convert fonttools outlines to path commands in output coordinates
- Lay out a line of text by advance width
- Write meshes as JSON or SVG

Key classes:
- FontReader: Load fonts and extract glyph outlines
- MeshWriter: Save meshes
"""

from glyphmesh.io.reader import FontReader, read_commands
from glyphmesh.io.writer import MeshWriter

__all__ = [
    "FontReader",
    "MeshWriter",
    "read_commands",
]
