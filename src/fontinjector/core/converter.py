"""Stateless font-to-CSS conversion for offline use.

Turns one or more font files into a single stylesheet: every ``@font-face``
fragment followed by one styling template. Nothing is cached and no vault is
involved.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from fontinjector.config import StyleTemplate
from fontinjector.core.encoder import convert_font_to_fragment
from fontinjector.core.presentation import (
    FORCE_SELECTOR,
    font_family_rule,
    force_rule,
    theme_variable_rule,
)
from fontinjector.domain import (
    CssRule,
    Declaration,
    EncodedFontFragment,
    Stylesheet,
    family_css_classes,
    is_supported_font,
)
from fontinjector.exceptions import FontReadError, MissingCustomCSSError, NoValidFontsError

logger = structlog.get_logger("fontinjector.converter")

PLACEHOLDER_FAMILY = "your-font-name"
MULTI_FONT_FILE_NAME = "custom-fonts.css"


@dataclass
class ConversionResult:
    """Output of a converter run.

    Attributes:
        css: Combined stylesheet text
        fragments: One fragment per converted file, in input order
        skipped: Names of files dropped for an unsupported extension
    """

    css: str
    fragments: list[EncodedFontFragment] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def families(self) -> list[str]:
        return [f.family_name for f in self.fragments]


def filter_font_files(paths: Sequence[Path]) -> tuple[list[Path], list[str]]:
    """Split paths into supported font files and skipped names.

    Raises:
        NoValidFontsError: If no path has a supported extension
    """
    valid = [p for p in paths if is_supported_font(p.name)]
    skipped = [p.name for p in paths if not is_supported_font(p.name)]
    if not valid:
        raise NoValidFontsError(skipped)
    return valid, skipped


def _placeholder_header(title: str, families: Sequence[str]) -> str:
    return (
        f"/* {title} */\n"
        f"/* Replace '{PLACEHOLDER_FAMILY}' with one of: {', '.join(families)} */"
    )


def build_styling_css(
    families: Sequence[str],
    template: StyleTemplate,
    selector: str | None = None,
) -> str:
    """Build the styling template appended after the ``@font-face`` rules.

    Args:
        families: Family names of the converted fonts
        template: ROOT (theme variables), CUSTOM (selector rule) or FORCE
        selector: CSS selector for the CUSTOM template

    Returns:
        Stylesheet text for the template

    Raises:
        MissingCustomCSSError: If CUSTOM is chosen without a selector
    """
    sheet = Stylesheet()

    if template == StyleTemplate.ROOT:
        if len(families) == 1:
            sheet.items.append(theme_variable_rule(families[0]))
        else:
            for family, css_class in zip(families, family_css_classes(families)):
                sheet.items.append(theme_variable_rule(family, f".{css_class}"))

    elif template == StyleTemplate.CUSTOM:
        selector = (selector or "").strip()
        if not selector:
            raise MissingCustomCSSError("Please enter a custom CSS class name")
        if len(families) == 1:
            sheet.items.append(font_family_rule(families[0], selector))
        else:
            sheet.add_text(_placeholder_header("Custom CSS Class", families))
            sheet.items.append(font_family_rule(PLACEHOLDER_FAMILY, selector))

    elif template == StyleTemplate.FORCE:
        if len(families) == 1:
            sheet.add_text("/* Force style for all elements */")
            sheet.items.append(force_rule(families[0]))
        else:
            sheet.add_text(_placeholder_header("Force style for all elements", families))
            sheet.items.append(
                CssRule(
                    FORCE_SELECTOR,
                    (Declaration("font-family", f"'{PLACEHOLDER_FAMILY}'", important=True),),
                )
            )

    return _join_comments(sheet.render())


def _join_comments(css: str) -> str:
    # Comment blocks sit directly above the rule they describe
    return css.replace("*/\n\n", "*/\n")


def convert_files(
    paths: Sequence[Path],
    template: StyleTemplate = StyleTemplate.ROOT,
    selector: str | None = None,
) -> ConversionResult:
    """Convert font files into one stylesheet.

    Args:
        paths: Font files; unsupported extensions are skipped
        template: Styling template appended after the ``@font-face`` rules
        selector: Selector for the CUSTOM template

    Returns:
        ConversionResult with the combined CSS

    Raises:
        NoValidFontsError: If no file has a supported extension
        FontReadError: If a file cannot be read
        MissingCustomCSSError: If CUSTOM is chosen without a selector
    """
    valid, skipped = filter_font_files(paths)
    for name in skipped:
        logger.info("Skipping unsupported file", file=name)

    fragments: list[EncodedFontFragment] = []
    for path in valid:
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FontReadError(str(path), str(e)) from e
        fragments.append(convert_font_to_fragment(data, path.name))
        logger.debug("Font converted", file=path.name, bytes=len(data))

    styling = build_styling_css([f.family_name for f in fragments], template, selector)
    css = "\n\n".join([*(f.css for f in fragments), styling])

    return ConversionResult(css=css.strip() + "\n", fragments=fragments, skipped=skipped)


def default_output_name(paths: Sequence[Path]) -> str:
    """Suggested download name: ``<stem>-font.css`` or ``custom-fonts.css``."""
    if len(paths) == 1:
        stem = paths[0].name.rpartition(".")[0] or paths[0].name
        return f"{stem}-font.css"
    return MULTI_FONT_FILE_NAME

