"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from glyphmesh.domain import Mesh
from glyphmesh.utils import TriangulationStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Glyphmesh[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font_type: str, glyph_count: int, upm: int) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        font_type: Font format type (e.g., "TrueType", "OpenType")
        glyph_count: Total number of glyphs in font
        upm: Units per em value
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(font_path)
    line.append(f" ({font_type})")
    console.print(line)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM")


def print_mesh_table(meshes: list[tuple[str, Mesh]]) -> None:
    """Print one row per mesh with vertex, triangle and area figures."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Shape")
    table.add_column("Vertices", justify="right")
    table.add_column("Triangles", justify="right")
    table.add_column("Area", justify="right")

    for name, mesh in meshes:
        table.add_row(
            Text(name),
            f"{len(mesh.vertices):,}",
            f"{mesh.triangle_count:,}",
            f"{mesh.area():,.1f}",
        )
    console.print(table)


def print_success(output_path: str | None, stats: TriangulationStats) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to the written mesh file, if any
        stats: Statistics collected while triangulating
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {stats.total_time_ms:.1f}ms")

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    console.print(
        f"  {stats.shape_count} shapes {SYM_DOT} {stats.triangle_count} triangles "
        f"{SYM_DOT} {stats.bridges_added} bridges"
    )
    if stats.dropped_loops:
        console.print(f"  {stats.dropped_loops} degenerate loops dropped")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
