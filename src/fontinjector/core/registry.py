"""Style slot registry.

The registry is the engine's view of the live document: one text occupant
per SlotId. It is owned by a single engine instance and ``apply_style`` and
``clear`` are its only mutators.
"""

from fontinjector.domain import SlotId

# Separator between fragments appended to the same slot
APPEND_SEPARATOR = "\n\n"


class StyleRegistry:
    """Single-occupant style slots rendered into one stylesheet.

    Example:
        registry = StyleRegistry()
        registry.apply_style(font_face_css, SlotId.FONT_FACE)
        registry.apply_style(other_font_face_css, SlotId.FONT_FACE, append_mode=True)
        stylesheet = registry.render()
    """

    def __init__(self) -> None:
        self._slots: dict[SlotId, str] = {slot: "" for slot in SlotId}

    def apply_style(self, text: str, slot_id: SlotId, append_mode: bool = False) -> None:
        """Install text into a slot.

        Args:
            text: Stylesheet fragment
            slot_id: Target slot
            append_mode: Concatenate after an existing occupant instead of
                replacing it; behaves as a fresh install on an empty slot
        """
        existing = self._slots[slot_id]
        if append_mode and existing:
            self._slots[slot_id] = f"{existing}{APPEND_SEPARATOR}{text}"
        else:
            self._slots[slot_id] = text

    def clear(self, slot_id: SlotId) -> None:
        """Remove a slot's content entirely."""
        self._slots[slot_id] = ""

    def clear_all(self) -> None:
        for slot in SlotId:
            self.clear(slot)

    def get(self, slot_id: SlotId) -> str:
        return self._slots[slot_id]

    def is_empty(self) -> bool:
        return not any(self._slots.values())

    def render(self) -> str:
        """Render occupied slots in slot order, each behind a marker comment.

        Returns:
            Stylesheet text, or an empty string when every slot is empty
        """
        blocks = [
            f"/* {slot.value} */\n{content}"
            for slot, content in self._slots.items()
            if content
        ]
        return "\n\n".join(blocks) + "\n" if blocks else ""
