"""Unit tests for the style slot registry."""

from fontinjector.core.registry import StyleRegistry
from fontinjector.domain import SlotId


class TestStyleRegistry:
    """Tests for StyleRegistry."""

    def test_starts_empty(self):
        registry = StyleRegistry()
        assert registry.is_empty()
        assert all(registry.get(slot) == "" for slot in SlotId)
        assert registry.render() == ""

    def test_replace(self):
        """Non-append mode leaves no trace of the previous occupant."""
        registry = StyleRegistry()
        registry.apply_style("old { a: 1; }", SlotId.GENERAL)
        registry.apply_style("new { b: 2; }", SlotId.GENERAL)

        assert registry.get(SlotId.GENERAL) == "new { b: 2; }"
        assert "old" not in registry.render()

    def test_append_keeps_prior_first(self):
        registry = StyleRegistry()
        registry.apply_style("first", SlotId.FONT_FACE)
        registry.apply_style("second", SlotId.FONT_FACE, append_mode=True)

        content = registry.get(SlotId.FONT_FACE)
        assert "first" in content
        assert "second" in content
        assert content.index("first") < content.index("second")

    def test_append_on_empty_slot_is_fresh_install(self):
        registry = StyleRegistry()
        registry.apply_style("only", SlotId.FONT_FACE, append_mode=True)
        assert registry.get(SlotId.FONT_FACE) == "only"

    def test_clear(self):
        registry = StyleRegistry()
        registry.apply_style("x", SlotId.FORCE)
        registry.clear(SlotId.FORCE)
        assert registry.get(SlotId.FORCE) == ""

    def test_clear_all(self):
        registry = StyleRegistry()
        for slot in SlotId:
            registry.apply_style("x", slot)
        registry.clear_all()
        assert registry.is_empty()

    def test_slots_are_independent(self):
        registry = StyleRegistry()
        registry.apply_style("a", SlotId.FONT_FACE)
        registry.apply_style("b", SlotId.GENERAL)
        registry.clear(SlotId.GENERAL)
        assert registry.get(SlotId.FONT_FACE) == "a"

    def test_render_order_and_markers(self):
        registry = StyleRegistry()
        registry.apply_style("general", SlotId.GENERAL)
        registry.apply_style("face", SlotId.FONT_FACE)

        rendered = registry.render()

        assert rendered == (
            "/* custom-font-plugin-base64 */\nface\n\n"
            "/* custom-font-plugin-css */\ngeneral\n"
        )
