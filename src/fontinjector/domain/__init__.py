"""Domain models for fontinjector.

This module contains the core domain models representing font files, encoded
``@font-face`` fragments, generated CSS and style slots. All models are
designed to be:

- Immutable where possible (using frozen dataclasses)
- Independent of the storage host and of the CLI

Key classes:
- FontAsset: A font file with derived family name, extension and MIME type
- EncodedFontFragment: Base64 ``@font-face`` rule for one font
- FontSelection: Parsed "selected font" setting (none, single, all)
- Declaration / CssRule / Stylesheet: Structured generated CSS
- SlotId: Named style slots
"""

from fontinjector.domain.css import IMPORTANT, CssRule, Declaration, Stylesheet
from fontinjector.domain.font import (
    FALLBACK_MIME_TYPE,
    MIME_TYPES,
    SUPPORTED_EXTENSIONS,
    EncodedFontFragment,
    FontAsset,
    FontSelection,
    SelectionKind,
    family_css_class,
    family_css_classes,
    is_supported_font,
    mime_type_for,
    quote_family,
    render_font_face,
)
from fontinjector.domain.slot import SlotId

__all__: list[str] = [
    # Constants
    "FALLBACK_MIME_TYPE",
    "IMPORTANT",
    "MIME_TYPES",
    "SUPPORTED_EXTENSIONS",
    # Enums
    "SelectionKind",
    "SlotId",
    # Core types
    "CssRule",
    "Declaration",
    "EncodedFontFragment",
    "FontAsset",
    "FontSelection",
    "Stylesheet",
    # Helpers
    "family_css_class",
    "family_css_classes",
    "is_supported_font",
    "mime_type_for",
    "quote_family",
    "render_font_face",
]
