"""Command-line interface for glyphmesh.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Text triangulation from TTF/OTF fonts
- Shape triangulation from JSON path command files
- JSON and SVG mesh output
- Quiet mode that prints the mesh JSON to stdout
- Detailed error reporting
"""

from glyphmesh.cli.app import cli, main

__all__ = ["cli", "main"]
