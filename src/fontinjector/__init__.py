"""Fontinjector - Apply local font files as a vault's UI and text font.

Fontinjector encodes font files as base64 ``@font-face`` rules, caches the
generated fragments next to the vault configuration and installs them,
together with a rule that assigns the family to the theme variables, into a
generated stylesheet snippet.

Example:
    $ fontinjector select Vazirmatn.woff2 --vault ~/Notes

This will embed Vazirmatn.woff2 into .obsidian/snippets/custom-font.css and
point the editor, interface and monospace fonts at the ``vazirmatn`` family.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
