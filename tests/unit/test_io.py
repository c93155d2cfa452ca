"""Unit tests for the I/O layer.

Tests for FontReader, read_commands, MeshWriter, and converter functions.
"""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from glyphmesh.domain import ClosePath, CubicTo, LineTo, Mesh, MoveTo, Point, QuadTo
from glyphmesh.exceptions import ContourError, MeshWriteError
from glyphmesh.io.converter import fonttools_glyph_to_commands, recording_to_commands
from glyphmesh.io.reader import FontReader, read_commands
from glyphmesh.io.writer import MeshWriter


class TestFontReader:
    """Tests for FontReader class."""

    def test_init(self):
        """Test FontReader initialization."""
        path = Path("test.ttf")
        reader = FontReader(path)
        assert reader._font_path == path
        assert reader._font is None

    def test_load_nonexistent_file(self):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = FontReader(Path("nonexistent.ttf"))
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_format_before_load(self):
        """Test accessing format before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.format

    def test_units_per_em_before_load(self):
        """Test accessing units_per_em before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.units_per_em

    def test_glyph_count_before_load(self):
        """Test accessing glyph_count before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.glyph_count

    def test_text_commands_before_load(self):
        """Test laying out text before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            reader.text_commands("A")

    @patch("glyphmesh.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_format_truetype(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test format property for TrueType fonts."""
        mock_font = MagicMock()
        mock_font.__contains__ = lambda _self, key: key == "glyf"
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("test.ttf"))
        reader.load()
        assert reader.format == "TrueType"

    @patch("glyphmesh.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_format_opentype(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test format property for CFF-flavoured fonts."""
        mock_font = MagicMock()
        mock_font.__contains__ = lambda _self, key: key == "CFF "
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("test.otf"))
        reader.load()
        assert reader.format == "OpenType"

    @patch("glyphmesh.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_context_manager_closes(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test the font is closed when the context exits."""
        mock_font = MagicMock()
        mock_ttfont.return_value = mock_font

        with FontReader(Path("test.ttf")) as reader:
            assert reader._font is mock_font

        mock_font.close.assert_called_once()
        assert reader._font is None


class TestConverter:
    """Tests for fonttools recording conversion."""

    def test_lines(self):
        """Test moveTo, lineTo and closePath."""
        recording = [
            ("moveTo", ((0, 0),)),
            ("lineTo", ((10, 0),)),
            ("lineTo", ((10, 10),)),
            ("closePath", ()),
        ]
        assert recording_to_commands(recording) == [
            MoveTo(0, 0),
            LineTo(10, 0),
            LineTo(10, 10),
            ClosePath(),
        ]

    def test_end_path_closes(self):
        """Test open contours are closed."""
        recording = [("moveTo", ((0, 0),)), ("lineTo", ((10, 0),)), ("endPath", ())]
        assert recording_to_commands(recording)[-1] == ClosePath()

    def test_quadratic_with_implied_points(self):
        """Test consecutive off-curve points are split at their midpoints."""
        recording = [
            ("moveTo", ((0, 0),)),
            ("qCurveTo", ((0, 10), (10, 10), (10, 0))),
            ("closePath", ()),
        ]
        assert recording_to_commands(recording) == [
            MoveTo(0, 0),
            QuadTo(0, 10, 5.0, 10.0),
            QuadTo(10, 10, 10, 0),
            ClosePath(),
        ]

    def test_quadratic_without_on_curve_points(self):
        """Test an all-off-curve contour starts at an implied midpoint."""
        recording = [
            ("qCurveTo", ((0, 0), (10, 0), (10, 10), (0, 10), None)),
            ("closePath", ()),
        ]
        commands = recording_to_commands(recording)
        assert commands[0] == MoveTo(0.0, 5.0)
        assert len([c for c in commands if isinstance(c, QuadTo)]) == 4
        assert commands[-2].end == Point(0.0, 5.0)
        assert commands[-1] == ClosePath()

    def test_cubic(self):
        """Test a curveTo with two controls becomes CubicTo."""
        recording = [
            ("moveTo", ((0, 0),)),
            ("curveTo", ((0, 10), (10, 10), (10, 0))),
            ("closePath", ()),
        ]
        assert recording_to_commands(recording)[1] == CubicTo(0, 10, 10, 10, 10, 0)

    def test_cubic_single_control(self):
        """Test a curveTo with one control is treated as quadratic."""
        recording = [("moveTo", ((0, 0),)), ("curveTo", ((5, 10), (10, 0))), ("closePath", ())]
        assert recording_to_commands(recording)[1] == QuadTo(5, 10, 10, 0)

    def test_glyph_transform(self):
        """Test font units are scaled and flipped to a downward y axis."""

        class FakeGlyph:
            def draw(self, pen):
                pen.moveTo((0, 0))
                pen.lineTo((100, 0))
                pen.lineTo((100, 200))
                pen.closePath()

        commands = fonttools_glyph_to_commands(FakeGlyph(), scale=0.5, x=10, baseline=300)
        assert commands[0] == MoveTo(10.0, 300.0)
        assert commands[1] == LineTo(60.0, 300.0)
        assert commands[2] == LineTo(60.0, 200.0)

    def test_glyph_reverse(self):
        """Test contours are reversed when requested."""

        class FakeGlyph:
            def draw(self, pen):
                pen.moveTo((0, 0))
                pen.lineTo((100, 0))
                pen.lineTo((100, 100))
                pen.closePath()

        forward = fonttools_glyph_to_commands(FakeGlyph())
        backward = fonttools_glyph_to_commands(FakeGlyph(), reverse=True)
        assert forward[0] == backward[0]
        assert [c.end for c in backward[1:-1]] == [Point(100.0, -100.0), Point(100.0, 0.0)]


class TestReadCommands:
    """Tests for read_commands function."""

    def test_command_list(self, tmp_path):
        """Test a bare list of commands is one shape named after the file."""
        path = tmp_path / "square.json"
        path.write_text(
            json.dumps(
                [
                    {"type": "M", "x": 0, "y": 0},
                    {"type": "L", "x": 1, "y": 0},
                    {"type": "L", "x": 1, "y": 1},
                    {"type": "Z"},
                ]
            )
        )
        shapes = read_commands(path)
        assert len(shapes) == 1
        name, commands = shapes[0]
        assert name == "square"
        assert commands == [MoveTo(0, 0), LineTo(1, 0), LineTo(1, 1), ClosePath()]

    def test_named_shapes(self, tmp_path):
        """Test the shapes layout keeps names and order."""
        path = tmp_path / "shapes.json"
        path.write_text(
            json.dumps(
                {
                    "shapes": [
                        {"name": "a", "commands": [{"type": "M", "x": 0, "y": 0}]},
                        {"commands": []},
                    ]
                }
            )
        )
        shapes = read_commands(path)
        assert [name for name, _ in shapes] == ["a", "shape1"]
        assert shapes[1][1] == []

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_commands(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON raises ContourError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ContourError, match="Invalid JSON"):
            read_commands(path)

    def test_unsupported_layout(self, tmp_path):
        """Test a JSON value that holds no commands raises ContourError."""
        path = tmp_path / "odd.json"
        path.write_text(json.dumps({"paths": []}))
        with pytest.raises(ContourError, match="does not contain path commands"):
            read_commands(path)

    def test_bad_command(self, tmp_path):
        """Test an unknown command tag raises ContourError."""
        path = tmp_path / "bad_cmd.json"
        path.write_text(json.dumps([{"type": "X"}]))
        with pytest.raises(ContourError):
            read_commands(path)

    def test_command_not_an_object(self, tmp_path):
        """Test a command given as a bare array raises ContourError."""
        path = tmp_path / "array_cmd.json"
        path.write_text(json.dumps([[1, 2]]))
        with pytest.raises(ContourError, match="must be an object"):
            read_commands(path)

    def test_shape_not_an_object(self, tmp_path):
        """Test a shapes entry that is not a dictionary raises ContourError."""
        path = tmp_path / "bad_shape.json"
        path.write_text(json.dumps({"shapes": [{"name": "ok", "commands": []}, "oops"]}))
        with pytest.raises(ContourError, match="Shape 1"):
            read_commands(path)

    def test_shape_commands_not_a_list(self, tmp_path):
        """Test a shape whose commands are not a list raises ContourError."""
        path = tmp_path / "bad_commands.json"
        path.write_text(json.dumps({"shapes": [{"name": "a", "commands": {"type": "Z"}}]}))
        with pytest.raises(ContourError, match="not a named command list"):
            read_commands(path)


class TestMeshWriter:
    """Tests for MeshWriter class."""

    @pytest.fixture
    def meshes(self) -> list[tuple[str, Mesh]]:
        mesh = Mesh(
            vertices=[Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)],
            triangles=[(3, 0, 1), (1, 2, 3)],
        )
        return [("square", mesh)]

    def test_to_json(self, meshes):
        """Test JSON output holds flat arrays per glyph."""
        data = json.loads(MeshWriter().to_json(meshes))
        assert data == {
            "glyphs": [
                {
                    "name": "square",
                    "vertices": [0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0],
                    "triangles": [3, 0, 1, 1, 2, 3],
                }
            ]
        }

    def test_write_json(self, meshes, tmp_path):
        """Test JSON is written to disk."""
        output = tmp_path / "mesh.json"
        MeshWriter().write_json(meshes, output)
        assert json.loads(output.read_text())["glyphs"][0]["name"] == "square"

    def test_to_svg(self, meshes):
        """Test SVG output has one polygon per triangle."""
        svg = MeshWriter().to_svg(meshes, margin=1.0)
        assert svg.startswith("<svg")
        assert 'viewBox="-1 -1 3 3"' in svg
        assert '<g id="square"' in svg
        assert svg.count("<polygon") == 2
        assert 'points="0,1 0,0 1,0"' in svg

    def test_to_svg_empty(self):
        """Test an empty mesh list still gives a valid document."""
        svg = MeshWriter().to_svg([])
        assert "<polygon" not in svg
        assert svg.rstrip().endswith("</svg>")

    def test_write_error(self, meshes, tmp_path):
        """Test unwritable paths raise MeshWriteError."""
        output = tmp_path / "missing_dir" / "mesh.svg"
        with pytest.raises(MeshWriteError) as exc_info:
            MeshWriter().write_svg(meshes, output)
        assert exc_info.value.path == str(output)
