"""Font reader for inspecting font files.

This module provides the FontReader class for loading font files with
fonttools and reporting the metadata shown by ``fontinjector inspect``.
Conversion itself never parses fonts; it embeds the raw bytes.
"""

from dataclasses import dataclass
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from fontinjector.domain import FontAsset
from fontinjector.exceptions import UnsupportedFontError

# Name table IDs we read
NAME_ID_FAMILY = 1
NAME_ID_TYPOGRAPHIC_FAMILY = 16


@dataclass
class FontInfo:
    """Metadata of an inspected font.

    Attributes:
        path: Font file path
        format: "TrueType", "OpenType", "WOFF" or "WOFF2"
        family: Family name from the name table (None when absent)
        css_family: Family name the generated ``@font-face`` rule uses
        glyph_count: Number of glyphs
        units_per_em: Units per em
    """

    path: Path
    format: str
    family: str | None
    css_family: str
    glyph_count: int
    units_per_em: int


class FontReader:
    """Loads TTF/OTF/WOFF/WOFF2 fonts and reports their metadata.

    Example:
        with FontReader(Path("font.woff2")) as reader:
            print(reader.family_name)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            UnsupportedFontError: If fonttools cannot parse the file
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        try:
            self._font = TTFont(str(self._font_path), lazy=True)
        except (TTLibError, OSError, ImportError) as e:
            raise UnsupportedFontError(str(self._font_path), str(e)) from e

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'WOFF' or 'WOFF2' for web font flavors, otherwise 'OpenType'
            for CFF outlines and 'TrueType' for glyf outlines

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()

        if font.flavor == "woff2":
            return "WOFF2"
        if font.flavor == "woff":
            return "WOFF"
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def family_name(self) -> str | None:
        """Return the typographic family name, falling back to the family name.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if "name" not in font:
            return None

        name_table = font["name"]
        for name_id in (NAME_ID_TYPOGRAPHIC_FAMILY, NAME_ID_FAMILY):
            value = name_table.getDebugName(name_id)
            if value:
                return value
        return None

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

    def info(self) -> FontInfo:
        """Collect the font's metadata.

        Raises:
            RuntimeError: If font has not been loaded yet
            UnsupportedFontError: If a required table is missing
        """
        try:
            return FontInfo(
                path=self._font_path,
                format=self.format,
                family=self.family_name,
                css_family=FontAsset(self._font_path.name).family_name,
                glyph_count=self.glyph_count,
                units_per_em=self.units_per_em,
            )
        except KeyError as e:
            raise UnsupportedFontError(str(self._font_path), f"missing table {e}") from e

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
