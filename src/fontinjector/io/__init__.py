"""Font I/O layer for fontinjector.

This module reads font files using fonttools for inspection. It is only
used to report metadata; encoding embeds the raw file bytes.

Key classes:
- FontReader: Load fonts and read their metadata
- FontInfo: Metadata reported for a font
"""

from fontinjector.io.reader import FontInfo, FontReader

__all__ = [
    "FontInfo",
    "FontReader",
]
