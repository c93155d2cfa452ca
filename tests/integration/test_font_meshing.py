"""End-to-end tests that build a small font and triangulate its glyphs."""

import json
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from typer.testing import CliRunner

from glyphmesh.cli.app import app
from glyphmesh.config import LayoutConfig, TriangulationConfig
from glyphmesh.core import Triangulator
from glyphmesh.io import FontReader

UPM = 1000


def _box(pen: TTGlyphPen, x0: int, y0: int, x1: int, y1: int, clockwise: bool) -> None:
    """Draw an axis-aligned rectangle in font units (y up)."""
    corners = [(x0, y0), (x0, y1), (x1, y1), (x1, y0)]
    if not clockwise:
        corners.reverse()
    pen.moveTo(corners[0])
    for corner in corners[1:]:
        pen.lineTo(corner)
    pen.closePath()


def build_test_font(path: Path) -> Path:
    """Write a TrueType font with a square "O", a space and a box .notdef."""
    pen = TTGlyphPen(None)
    _box(pen, 100, 0, 600, 700, clockwise=True)
    _box(pen, 200, 100, 500, 600, clockwise=False)
    o_glyph = pen.glyph()

    pen = TTGlyphPen(None)
    _box(pen, 50, 0, 450, 700, clockwise=True)
    notdef = pen.glyph()

    space = TTGlyphPen(None).glyph()

    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder([".notdef", "space", "O"])
    fb.setupCharacterMap({ord(" "): "space", ord("O"): "O"})
    fb.setupGlyf({".notdef": notdef, "space": space, "O": o_glyph})
    fb.setupHorizontalMetrics({".notdef": (500, 50), "space": (250, 0), "O": (700, 100)})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupMaxp()
    fb.setupNameTable({"familyName": "Meshtest", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture
def font_path(tmp_path) -> Path:
    return build_test_font(tmp_path / "Meshtest-Regular.ttf")


class TestFontMeshing:
    """Tests for triangulating glyphs read from a font file."""

    def test_font_info(self, font_path):
        """Test the reader reports basic font information."""
        with FontReader(font_path) as reader:
            assert reader.format == "TrueType"
            assert reader.units_per_em == UPM
            assert reader.glyph_count == 3
            assert reader.glyph_name_for("O") == "O"

    def test_glyph_with_hole(self, font_path):
        """Test the counter of "O" is left open."""
        with FontReader(font_path) as reader:
            shapes = reader.text_commands("O", LayoutConfig(size=UPM))

        assert [name for name, _ in shapes] == ["O"]
        mesh = Triangulator().triangulate_commands(shapes[0][1], name="O")

        # 500 x 700 outline minus a 300 x 500 counter.
        assert mesh.area() == pytest.approx(200000.0)
        xs = [p.x for p in mesh.vertices]
        ys = [p.y for p in mesh.vertices]
        assert (min(xs), max(xs)) == (100.0, 600.0)
        # Baseline defaults to one em below the origin; y points down.
        assert (min(ys), max(ys)) == (300.0, 1000.0)

    def test_scaled_layout(self, font_path):
        """Test the size setting scales the outline."""
        with FontReader(font_path) as reader:
            shapes = reader.text_commands("O", LayoutConfig(size=100.0))
        mesh = Triangulator().triangulate_commands(shapes[0][1])
        assert mesh.area() == pytest.approx(2000.0)

    def test_text_layout_advances(self, font_path):
        """Test glyphs are placed by advance width and spaces are skipped."""
        with FontReader(font_path) as reader:
            shapes = reader.text_commands("O O", LayoutConfig(size=UPM))

        assert [name for name, _ in shapes] == ["O", "O"]
        meshes = Triangulator().triangulate_shapes(shapes)
        second = meshes[1][1]
        assert min(p.x for p in second.vertices) == pytest.approx(700 + 250 + 100)

    def test_missing_character_uses_notdef(self, font_path):
        """Test unmapped characters fall back to .notdef."""
        with FontReader(font_path) as reader:
            shapes = reader.text_commands("?", LayoutConfig(size=UPM))

        assert [name for name, _ in shapes] == [".notdef"]
        mesh = Triangulator().triangulate_commands(shapes[0][1])
        assert mesh.area() == pytest.approx(400 * 700)

    def test_resolution_has_no_effect_on_lines(self, font_path):
        """Test straight outlines do not depend on curve resolution."""
        with FontReader(font_path) as reader:
            commands = reader.text_commands("O", LayoutConfig(size=UPM))[0][1]
        coarse = Triangulator(TriangulationConfig(resolution=1)).triangulate_commands(commands)
        fine = Triangulator(TriangulationConfig(resolution=64)).triangulate_commands(commands)
        assert len(coarse.vertices) == len(fine.vertices)


class TestCli:
    """Tests for the command-line interface."""

    runner = CliRunner()

    def test_version(self):
        """Test --version prints the version and exits cleanly."""
        result = self.runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "Glyphmesh" in result.stdout

    def test_text_to_json(self, font_path, tmp_path):
        """Test the text command writes one mesh per glyph."""
        output = tmp_path / "o.json"
        svg = tmp_path / "o.svg"
        result = self.runner.invoke(
            app,
            ["text", str(font_path), "OO", "-o", str(output), "--svg", str(svg), "-s", "1000"],
        )

        assert result.exit_code == 0, result.stdout
        assert "Complete" in result.stdout
        data = json.loads(output.read_text())
        assert [glyph["name"] for glyph in data["glyphs"]] == ["O", "O"]
        assert len(data["glyphs"][0]["triangles"]) % 3 == 0
        assert svg.read_text().count("<g id=") == 2

    def test_text_missing_font(self, tmp_path):
        """Test a missing font file exits with an error."""
        result = self.runner.invoke(app, ["text", str(tmp_path / "none.ttf"), "O"])
        assert result.exit_code == 1
        assert "not found" in result.stdout

    def test_text_invalid_font(self, tmp_path):
        """Test a file that is not a font exits with an error."""
        bogus = tmp_path / "bogus.ttf"
        bogus.write_bytes(b"not a font")
        result = self.runner.invoke(app, ["text", str(bogus), "O"])
        assert result.exit_code == 1
        assert "Could not load font" in result.stdout

    def test_path_quiet_prints_json(self, tmp_path):
        """Test quiet mode without output files prints the mesh JSON."""
        commands = tmp_path / "square.json"
        commands.write_text(
            json.dumps(
                [
                    {"type": "M", "x": 0, "y": 0},
                    {"type": "L", "x": 10, "y": 0},
                    {"type": "L", "x": 10, "y": 10},
                    {"type": "L", "x": 0, "y": 10},
                    {"type": "Z"},
                ]
            )
        )
        result = self.runner.invoke(app, ["path", str(commands), "--quiet"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["glyphs"][0]["name"] == "square"
        assert len(data["glyphs"][0]["triangles"]) == 6

    def test_path_malformed_command(self, tmp_path):
        """Test a command that is not an object exits with an error line."""
        commands = tmp_path / "broken.json"
        commands.write_text(json.dumps([{"type": "M", "x": 0, "y": 0}, [1, 2]]))
        result = self.runner.invoke(app, ["path", str(commands)])
        assert result.exit_code == 1
        assert "must be an object" in result.stdout
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_path_unenclosed_hole(self, tmp_path):
        """Test a shape with only a hole fails with exit code 1."""
        commands = tmp_path / "hole.json"
        commands.write_text(
            json.dumps(
                [
                    {"type": "M", "x": 0, "y": 0},
                    {"type": "L", "x": 0, "y": 10},
                    {"type": "L", "x": 10, "y": 10},
                    {"type": "L", "x": 10, "y": 0},
                    {"type": "Z"},
                ]
            )
        )
        result = self.runner.invoke(app, ["path", str(commands)])
        assert result.exit_code == 1
        assert "not enclosed" in result.stdout
