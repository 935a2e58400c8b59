"""Unit tests for the font I/O layer.

Tests for FontReader with a mocked fonttools TTFont.
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from fontTools.ttLib import TTLibError

from fontinjector.exceptions import UnsupportedFontError
from fontinjector.io import FontReader


def make_font(flavor=None, tables=("head", "maxp", "name", "glyf"), names=None):
    """Build a TTFont stand-in with the given flavor, tables and name records."""
    names = names or {}
    head = MagicMock(unitsPerEm=1000)
    maxp = MagicMock(numGlyphs=256)
    name = MagicMock()
    name.getDebugName.side_effect = names.get
    table_map = {"head": head, "maxp": maxp, "name": name}

    font = MagicMock()
    font.flavor = flavor
    font.__contains__.side_effect = lambda tag: tag in tables
    font.__getitem__.side_effect = lambda tag: table_map[tag]
    return font


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

    def test_glyph_count_before_load(self):
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.glyph_count

    @patch("fontinjector.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_unparseable_font(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """fonttools errors become UnsupportedFontError."""
        mock_ttfont.side_effect = TTLibError("Not a TrueType or OpenType font")

        reader = FontReader(Path("broken.ttf"))
        with pytest.raises(UnsupportedFontError, match="Not a TrueType"):
            reader.load()

    @pytest.mark.parametrize(
        ("flavor", "tables", "expected"),
        [
            ("woff2", ("glyf",), "WOFF2"),
            ("woff", ("CFF ",), "WOFF"),
            (None, ("CFF ",), "OpenType"),
            (None, ("CFF2",), "OpenType"),
            (None, ("glyf",), "TrueType"),
        ],
    )
    @patch("fontinjector.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_format(self, _mock_exists, mock_ttfont, flavor, tables, expected):  # noqa: ARG002
        mock_ttfont.return_value = make_font(flavor=flavor, tables=tables)

        reader = FontReader(Path("font.bin"))
        reader.load()

        assert reader.format == expected

    @patch("fontinjector.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_family_name_prefers_typographic(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        mock_ttfont.return_value = make_font(names={16: "Vazirmatn", 1: "Vazirmatn Thin"})

        reader = FontReader(Path("Vazirmatn-Thin.ttf"))
        reader.load()

        assert reader.family_name == "Vazirmatn"

    @patch("fontinjector.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_family_name_fallback(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        mock_ttfont.return_value = make_font(names={1: "Lato"})

        reader = FontReader(Path("Lato.ttf"))
        reader.load()

        assert reader.family_name == "Lato"

    @patch("fontinjector.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_family_name_without_name_table(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        mock_ttfont.return_value = make_font(tables=("head", "maxp", "glyf"))

        reader = FontReader(Path("Bare.ttf"))
        reader.load()

        assert reader.family_name is None

    @patch("fontinjector.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_info(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test info collects metadata and the CSS family used for embedding."""
        mock_ttfont.return_value = make_font(flavor="woff2", names={1: "My Font"})

        with FontReader(Path("MyFont.woff2")) as reader:
            info = reader.info()

        assert info.format == "WOFF2"
        assert info.family == "My Font"
        assert info.css_family == "myfont"
        assert info.glyph_count == 256
        assert info.units_per_em == 1000

    @patch("fontinjector.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_context_manager_closes(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        font = make_font()
        mock_ttfont.return_value = font

        with FontReader(Path("a.ttf")) as reader:
            assert reader._font is font

        font.close.assert_called_once()
        assert reader._font is None
