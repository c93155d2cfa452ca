"""CLI application entry point for glyphmesh.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from glyphmesh import __version__
from glyphmesh.cli.output import (
    console,
    print_error,
    print_font_info,
    print_header,
    print_mesh_table,
    print_step,
    print_success,
)
from glyphmesh.config import (
    GlyphMeshSettings,
    LayoutConfig,
    LoggingConfig,
    TriangulationConfig,
)
from glyphmesh.core import Triangulator
from glyphmesh.domain import Mesh, PathCommand
from glyphmesh.exceptions import FontLoadError, GlyphMeshError
from glyphmesh.io import FontReader, MeshWriter, read_commands
from glyphmesh.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphmesh",
    help="Triangulate glyph outlines and vector shapes into triangle meshes.",
    add_completion=False,
    no_args_is_help=True,
)

OutputOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Write meshes as JSON to this path",
    ),
]
SvgOption = Annotated[
    Path | None,
    typer.Option(
        "--svg",
        help="Write an SVG preview of the triangles to this path",
    ),
]
ResolutionOption = Annotated[
    int,
    typer.Option(
        "--resolution",
        "-r",
        help="Segments per Bezier curve",
        min=1,
        max=1024,
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphmesh[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Triangulate glyph outlines and vector shapes into triangle meshes."""


@app.command()
def text(
    input_font: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF font file",
            show_default=False,
        ),
    ],
    text_value: Annotated[
        str,
        typer.Argument(
            metavar="TEXT",
            help="Text to lay out and triangulate",
            show_default=False,
        ),
    ],
    output: OutputOption = None,
    svg: SvgOption = None,
    size: Annotated[
        float,
        typer.Option(
            "--size",
            "-s",
            help="Font size (one em) in output units",
            min=0.001,
        ),
    ] = 300.0,
    resolution: ResolutionOption = 32,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Triangulate a line of text set in a font, one mesh per glyph.

    Example:
        glyphmesh text NotoSans-Regular.ttf "Hello" -o hello.json
    """
    if not input_font.is_file():
        print_error(
            f"Input file not found: {input_font}",
            details="Please provide a path to a TTF or OTF font file.",
        )
        raise typer.Exit(code=1)

    settings = GlyphMeshSettings(
        triangulation=TriangulationConfig(resolution=resolution),
        layout=LayoutConfig(size=size),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )

    if not quiet:
        print_header(__version__)
        print_step("Loading font")

    try:
        try:
            with FontReader(input_font) as reader:
                if not quiet:
                    print_font_info(
                        font_path=str(input_font),
                        font_type=reader.format,
                        glyph_count=reader.glyph_count,
                        upm=reader.units_per_em,
                    )
                shapes = reader.text_commands(text_value, settings.layout)
        except GlyphMeshError:
            raise
        except Exception as e:
            raise FontLoadError(str(input_font), str(e)) from e

        _triangulate_and_write(shapes, settings, output, svg, quiet)

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphMeshError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def path(
    commands_file: Annotated[
        Path,
        typer.Argument(
            help="JSON file holding path commands",
            show_default=False,
        ),
    ],
    output: OutputOption = None,
    svg: SvgOption = None,
    resolution: ResolutionOption = 32,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Triangulate shapes described by path commands in a JSON file.

    The file holds either a list of commands such as
    {"type": "M", "x": 0, "y": 0} or {"shapes": [{"name": ..., "commands": [...]}]}.
    """
    if not commands_file.is_file():
        print_error(f"Input file not found: {commands_file}")
        raise typer.Exit(code=1)

    settings = GlyphMeshSettings(
        triangulation=TriangulationConfig(resolution=resolution),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )

    if not quiet:
        print_header(__version__)

    try:
        shapes = read_commands(commands_file)
        _triangulate_and_write(shapes, settings, output, svg, quiet)
    except GlyphMeshError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _triangulate_and_write(
    shapes: list[tuple[str, list[PathCommand]]],
    settings: GlyphMeshSettings,
    output: Path | None,
    svg: Path | None,
    quiet: bool,
) -> None:
    """Triangulate every shape, print a summary and write requested files.

    Raises:
        GlyphMeshError: If a shape cannot be triangulated or a file written
    """
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    triangulator = Triangulator(settings.triangulation, logger=logger)

    if not quiet:
        print_step(f"Triangulating {len(shapes)} shapes")

    meshes: list[tuple[str, Mesh]] = triangulator.triangulate_shapes(shapes)

    if not quiet:
        print_mesh_table(meshes)

    writer = MeshWriter()
    if output is not None:
        writer.write_json(meshes, output)
    if svg is not None:
        writer.write_svg(meshes, svg)

    if not quiet:
        print_success(str(output) if output is not None else None, triangulator.stats)
    elif output is None and svg is None:
        typer.echo(writer.to_json(meshes))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
