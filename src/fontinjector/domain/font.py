"""Font asset and selection types.

This module defines the font-level domain models:
- FontAsset: A font file inside the configured font directory
- EncodedFontFragment: A base64 ``@font-face`` rule for one font
- SelectionKind / FontSelection: The "selected font" setting as a state
"""

import hashlib
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, auto

from fontinjector.config.settings import FONT_ALL, FONT_NONE

# Fixed MIME table used in data: URIs
MIME_TYPES: dict[str, str] = {
    "woff": "font/woff",
    "ttf": "font/truetype",
    "woff2": "font/woff2",
    "otf": "font/opentype",
}
FALLBACK_MIME_TYPE = "font"

SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(MIME_TYPES)

_CLASS_UNSAFE = re.compile(r"[^\w-]+")

# Hex characters of the name digest used to tell selectors apart
CLASS_DIGEST_LENGTH = 8


def mime_type_for(extension: str) -> str:
    """Look up the data: URI MIME type for a font extension.

    Args:
        extension: File extension with or without the leading dot

    Returns:
        MIME type from the fixed table, or the generic ``font`` fallback
    """
    return MIME_TYPES.get(extension.lower().lstrip("."), FALLBACK_MIME_TYPE)


def family_css_class(family_name: str, disambiguate: bool = False) -> str:
    """Class name (without the dot) scoping rules for one family.

    Unicode word characters are kept. A name with no usable characters, or
    any name when ``disambiguate`` is set, gets a digest of the full name
    appended so distinct families never share a class.
    """
    slug = _CLASS_UNSAFE.sub("-", family_name.lower()).strip("-")
    if slug and not disambiguate:
        return f"font-{slug}"
    digest = hashlib.sha256(family_name.encode("utf-8")).hexdigest()[:CLASS_DIGEST_LENGTH]
    return f"font-{slug}-{digest}" if slug else f"font-{digest}"


def family_css_classes(family_names: Sequence[str]) -> list[str]:
    """Distinct class names for families scoped side by side, in input order."""
    classes: list[str] = []
    for family in family_names:
        css_class = family_css_class(family)
        if css_class in classes:
            css_class = family_css_class(family, disambiguate=True)
        classes.append(css_class)
    return classes


def quote_family(family_name: str) -> str:
    """Single-quoted CSS string for a family name."""
    escaped = family_name.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def is_supported_font(file_name: str) -> bool:
    """Check whether a file name carries a supported font extension."""
    return FontAsset(file_name).extension in SUPPORTED_EXTENSIONS


@dataclass(frozen=True, slots=True)
class FontAsset:
    """A font file identified by its name in the font directory.

    Attributes:
        file_name: File name including extension (e.g., "MyFont.woff2")
    """

    file_name: str

    @property
    def family_name(self) -> str:
        """File name with the extension removed, lower-cased."""
        stem, dot, _ = self.file_name.rpartition(".")
        return (stem if dot and stem else self.file_name).lower()

    @property
    def extension(self) -> str:
        """Lower-cased suffix without the dot ("" when there is none)."""
        stem, dot, ext = self.file_name.rpartition(".")
        return ext.lower() if dot and stem else ""

    @property
    def mime_type(self) -> str:
        """MIME type for the data: URI."""
        return mime_type_for(self.extension)

    @property
    def css_class(self) -> str:
        """Per-family class name used to scope rules in batch mode."""
        return family_css_class(self.family_name)


def render_font_face(family_name: str, mime_type: str, payload: str) -> str:
    """Render a ``@font-face`` rule whose source is a base64 data URI."""
    return (
        "@font-face {\n"
        f"    font-family: {quote_family(family_name)};\n"
        f"    src: url(data:{mime_type};base64,{payload});\n"
        "}"
    )


@dataclass(frozen=True)
class EncodedFontFragment:
    """A ``@font-face`` rule embedding one font as a base64 data URI.

    Attributes:
        family_name: CSS family name declared by the rule
        mime_type: MIME type of the data URI
        css: Stylesheet text of the rule, as cached on storage
        fingerprint: SHA-256 hex digest of the font bytes
        cached: True when the text was read back from the cache
    """

    family_name: str
    mime_type: str
    css: str
    fingerprint: str = ""
    cached: bool = field(default=False, compare=False)


class SelectionKind(Enum):
    """State of the "selected font" setting."""

    NONE = auto()
    SINGLE = auto()
    ALL = auto()


@dataclass(frozen=True)
class FontSelection:
    """Parsed form of PresentationConfig.font.

    Attributes:
        kind: NONE, SINGLE or ALL
        file_name: Selected file name for SINGLE, otherwise None
    """

    kind: SelectionKind
    file_name: str | None = None

    @classmethod
    def parse(cls, value: str | None) -> "FontSelection":
        """Parse a stored setting value.

        The sentinels "None" and "All" are matched case-insensitively; an
        empty value counts as "None".
        """
        text = (value or "").strip()
        if not text or text.lower() == FONT_NONE.lower():
            return cls(SelectionKind.NONE)
        if text.lower() == FONT_ALL.lower():
            return cls(SelectionKind.ALL)
        return cls(SelectionKind.SINGLE, text)

    def to_setting(self) -> str:
        """Convert back to the value stored in PresentationConfig.font."""
        if self.kind == SelectionKind.ALL:
            return FONT_ALL
        if self.kind == SelectionKind.SINGLE and self.file_name:
            return self.file_name
        return FONT_NONE
