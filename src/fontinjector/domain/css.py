"""Structured CSS model for generated stylesheet fragments.

Generated CSS is kept as (selector, declarations) pairs and only serialized
to text at the end, so priority markers are decided per declaration instead
of by rewriting text.
"""

from dataclasses import dataclass, field, replace

IMPORTANT = "!important"


@dataclass(frozen=True, slots=True)
class Declaration:
    """A single ``property: value`` declaration.

    Attributes:
        property: CSS property or custom property name
        value: Declared value
        important: Whether the declaration carries ``!important``
    """

    property: str
    value: str
    important: bool = False

    def render(self) -> str:
        """Serialize as ``property: value [!important];``."""
        suffix = f" {IMPORTANT}" if self.important else ""
        return f"{self.property}: {self.value}{suffix};"


@dataclass(frozen=True)
class CssRule:
    """A selector with its declaration block."""

    selector: str
    declarations: tuple[Declaration, ...]

    def with_priority(self) -> "CssRule":
        """Return a copy with every declaration marked important."""
        return replace(
            self,
            declarations=tuple(
                d if d.important else replace(d, important=True)
                for d in self.declarations
            ),
        )

    def render(self, indent: str = "    ") -> str:
        body = "\n".join(f"{indent}{d.render()}" for d in self.declarations)
        return f"{self.selector} {{\n{body}\n}}"


@dataclass
class Stylesheet:
    """Ordered collection of rules and verbatim CSS blocks.

    Verbatim blocks (plain strings) hold trusted user CSS and comments; they
    are emitted unchanged.
    """

    items: list[CssRule | str] = field(default_factory=list)

    def add_rule(self, selector: str, declarations: list[Declaration]) -> CssRule:
        rule = CssRule(selector, tuple(declarations))
        self.items.append(rule)
        return rule

    def add_text(self, text: str) -> None:
        self.items.append(text)

    @property
    def rules(self) -> list[CssRule]:
        return [item for item in self.items if isinstance(item, CssRule)]

    def with_priority(self) -> "Stylesheet":
        """Copy with important markers on every generated declaration."""
        return Stylesheet(
            [item.with_priority() if isinstance(item, CssRule) else item for item in self.items]
        )

    def is_empty(self) -> bool:
        return not any(
            item.declarations if isinstance(item, CssRule) else item.strip()
            for item in self.items
        )

    def render(self) -> str:
        """Serialize all items separated by blank lines."""
        parts = [
            item.render() if isinstance(item, CssRule) else item.strip("\n")
            for item in self.items
        ]
        return "\n\n".join(part for part in parts if part)
