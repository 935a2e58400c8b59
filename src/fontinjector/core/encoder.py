"""Font to ``@font-face`` fragment conversion.

Encoding is pure: bytes and a file name in, fragment out. Reading the font
and caching the result are the caller's concern.
"""

import base64
import hashlib

from fontinjector.domain import EncodedFontFragment, FontAsset, render_font_face


def encode_base64(data: bytes) -> str:
    """Encode bytes with the standard base64 alphabet, without line wrapping."""
    return base64.b64encode(data).decode("ascii")


def fingerprint(data: bytes) -> str:
    """Return the SHA-256 hex digest identifying a font's content."""
    return hashlib.sha256(data).hexdigest()


def convert_font_to_fragment(font_bytes: bytes, font_file_name: str) -> EncodedFontFragment:
    """Convert a font file's content into a base64 ``@font-face`` fragment.

    The family name is the file name without its extension, lower-cased. An
    unrecognized extension is not an error; the data URI falls back to the
    generic ``font`` MIME type.

    Args:
        font_bytes: Raw binary content of the font file
        font_file_name: File name including extension (e.g., "MyFont.woff2")

    Returns:
        EncodedFontFragment for the font

    Example:
        >>> convert_font_to_fragment(b"\\x00\\x01\\x02", "MyFont.woff2").css
        "@font-face {\\n    font-family: 'myfont';\\n    src: url(data:font/woff2;base64,AAEC);\\n}"
    """
    asset = FontAsset(font_file_name)
    css = render_font_face(asset.family_name, asset.mime_type, encode_base64(font_bytes))
    return EncodedFontFragment(
        family_name=asset.family_name,
        mime_type=asset.mime_type,
        css=css,
        fingerprint=fingerprint(font_bytes),
    )
