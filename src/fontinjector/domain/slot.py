"""Named style slots in the generated stylesheet."""

from enum import Enum


class SlotId(str, Enum):
    """Slots the engine installs fragments into, in render order.

    Values are the identifiers written as markers into the generated
    stylesheet.
    """

    FONT_FACE = "custom-font-plugin-base64"
    GENERAL = "custom-font-plugin-css"
    FORCE = "custom-font-plugin-force"
