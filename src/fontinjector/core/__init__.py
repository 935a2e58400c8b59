"""Core conversion and injection logic for fontinjector.

This module contains the core pieces of a conversion pass:

- Encoding font bytes into base64 ``@font-face`` fragments
- Caching fragments on storage, keyed by file name and content fingerprint
- Building the presentation fragments (default, custom and force modes)
- Installing fragments into named style slots
- Running passes for the none / single font / all fonts selection states
- Stateless conversion of font files into a standalone stylesheet

Key functions:
- convert_font_to_fragment: Encode one font into a ``@font-face`` fragment
- build_presentation_fragment: Build the general and force fragments
- convert_files: Standalone multi-file conversion

Key classes:
- FragmentCache: load_or_convert with an on-storage cache
- StyleRegistry: Single-occupant style slots
- FontInjectionEngine: Runs passes and owns the registry
"""

from fontinjector.core.cache import CacheStats, FragmentCache
from fontinjector.core.converter import (
    ConversionResult,
    build_styling_css,
    convert_files,
    default_output_name,
)
from fontinjector.core.encoder import convert_font_to_fragment, encode_base64, fingerprint
from fontinjector.core.engine import FontInjectionEngine, PassSuperseded
from fontinjector.core.presentation import (
    THEME_VARIABLES,
    PresentationFragments,
    build_presentation_fragment,
)
from fontinjector.core.registry import StyleRegistry

__all__ = [
    "THEME_VARIABLES",
    # Cache classes
    "CacheStats",
    # Converter classes
    "ConversionResult",
    # Engine classes
    "FontInjectionEngine",
    "FragmentCache",
    "PassSuperseded",
    "PresentationFragments",
    "StyleRegistry",
    # Functions
    "build_presentation_fragment",
    "build_styling_css",
    "convert_files",
    "convert_font_to_fragment",
    "default_output_name",
    "encode_base64",
    "fingerprint",
]
