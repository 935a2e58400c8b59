"""Generation of the "apply" stylesheet fragments.

Three mutually exclusive modes decide what the general slot holds:

- default: theme variables assigned to the family (one ``:root`` rule, or
  one rule per family scoped to a per-family class in batch mode)
- custom: the user's CSS, verbatim
- force: on top of either mode, generated declarations are marked
  ``!important`` and a blanket rule puts the family on every element

Key classes:
- PresentationFragments: Output for the general and force slots

Key functions:
- build_presentation_fragment: Build the fragments for a selection
- theme_variable_rule / force_rule: Building blocks shared with the converter
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from fontinjector.config import PresentationConfig
from fontinjector.domain import (
    CssRule,
    Declaration,
    Stylesheet,
    family_css_classes,
    quote_family,
)
from fontinjector.exceptions import ConfigError, MissingCustomCSSError

# Theme variables the family is assigned to in default mode
THEME_VARIABLES: tuple[str, ...] = (
    "--font-default",
    "--default-font",
    "--font-family-editor",
    "--font-monospace-default",
    "--font-interface-override",
    "--font-text-override",
    "--font-monospace-override",
)

ROOT_SELECTOR = ":root"
FORCE_SELECTOR = "*"


def theme_variable_rule(family_name: str, selector: str = ROOT_SELECTOR) -> CssRule:
    """Rule assigning a family to every theme font variable."""
    value = quote_family(family_name)
    return CssRule(selector, tuple(Declaration(var, value) for var in THEME_VARIABLES))


def font_family_rule(family_name: str, selector: str, important: bool = True) -> CssRule:
    """Rule setting ``font-family`` on a selector."""
    return CssRule(selector, (Declaration("font-family", quote_family(family_name), important),))


def force_rule(family_name: str) -> CssRule:
    """Blanket rule forcing a family onto all elements."""
    return font_family_rule(family_name, FORCE_SELECTOR, important=True)


@dataclass
class PresentationFragments:
    """Generated fragments for the general and force slots.

    Attributes:
        general: Variables rule(s) or custom CSS
        force: Blanket important rule, empty unless force mode is on
    """

    general: Stylesheet = field(default_factory=Stylesheet)
    force: Stylesheet = field(default_factory=Stylesheet)

    @property
    def general_css(self) -> str:
        return self.general.render()

    @property
    def force_css(self) -> str:
        return self.force.render()


def build_presentation_fragment(
    family_names: Sequence[str],
    config: PresentationConfig,
) -> PresentationFragments:
    """Build the presentation fragments for the selected families.

    Args:
        family_names: Families being applied; more than one means batch mode
        config: Presentation settings selecting the mode

    Returns:
        PresentationFragments with the general fragment and, in force mode,
        the blanket important rule

    Raises:
        ConfigError: If no family is given
        MissingCustomCSSError: If custom mode is enabled with blank CSS
    """
    if not family_names:
        raise ConfigError("No font family to apply")

    fragments = PresentationFragments()

    if config.custom_css_enabled:
        if not config.custom_css.strip():
            raise MissingCustomCSSError()
        # Trusted user input, installed as-is
        fragments.general.add_text(config.custom_css)
    elif len(family_names) == 1:
        fragments.general.items.append(theme_variable_rule(family_names[0]))
    else:
        for family, css_class in zip(family_names, family_css_classes(family_names)):
            fragments.general.items.append(theme_variable_rule(family, f".{css_class}"))

    if config.force_mode:
        fragments.general = fragments.general.with_priority()
        fragments.force.items.append(force_rule(family_names[0]))

    return fragments
