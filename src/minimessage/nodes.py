"""Typed component nodes for MiniMessage.

All components are frozen dataclasses with slots for:
- Immutability: safe sharing across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally

Node Hierarchy:
Component (base: style + children)
├── Text          literal text run
├── Keybind       client-resolved key binding name
└── Translatable  translation key with argument components

Style Model:
Every component produced by the parser carries its *effective* style, the
full merged style context at its position in the tree. A component's style
does not depend on its ancestors, so styles can be compared directly and
the serializer only has to emit the difference between parent and child.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Protocol, runtime_checkable
from uuid import UUID

# =============================================================================
# Colors
# =============================================================================

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


@dataclass(frozen=True, slots=True)
class TextColor:
    """A 24-bit RGB color.

    Examples:
        >>> TextColor(0xFF5555).hex_string
        '#ff5555'
        >>> TextColor.from_hex("#00AA00")
        TextColor(value=43520)

    """

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFFFFFF:
            msg = f"Color value out of range: {self.value!r}"
            raise ValueError(msg)

    @classmethod
    def from_rgb(cls, red: float, green: float, blue: float) -> TextColor:
        """Build a color from channel values, rounding and clamping to 0-255."""
        channels = [max(0, min(255, round(c))) for c in (red, green, blue)]
        return cls((channels[0] << 16) | (channels[1] << 8) | channels[2])

    @classmethod
    def from_hex(cls, text: str) -> TextColor | None:
        """Parse ``#rrggbb``; returns None for anything else."""
        if len(text) != 7 or not text.startswith("#"):
            return None
        if not all(c in _HEX_DIGITS for c in text[1:]):
            return None
        return cls(int(text[1:], 16))

    @property
    def red(self) -> int:
        return (self.value >> 16) & 0xFF

    @property
    def green(self) -> int:
        return (self.value >> 8) & 0xFF

    @property
    def blue(self) -> int:
        return self.value & 0xFF

    @property
    def hex_string(self) -> str:
        return f"#{self.value:06x}"

    def lerp(self, other: TextColor, t: float) -> TextColor:
        """Linearly interpolate towards ``other`` (t in [0, 1])."""
        return TextColor.from_rgb(
            self.red + (other.red - self.red) * t,
            self.green + (other.green - self.green) * t,
            self.blue + (other.blue - self.blue) * t,
        )


NAMED_COLORS: dict[str, TextColor] = {
    "black": TextColor(0x000000),
    "dark_blue": TextColor(0x0000AA),
    "dark_green": TextColor(0x00AA00),
    "dark_aqua": TextColor(0x00AAAA),
    "dark_red": TextColor(0xAA0000),
    "dark_purple": TextColor(0xAA00AA),
    "gold": TextColor(0xFFAA00),
    "gray": TextColor(0xAAAAAA),
    "dark_gray": TextColor(0x555555),
    "blue": TextColor(0x5555FF),
    "green": TextColor(0x55FF55),
    "aqua": TextColor(0x55FFFF),
    "red": TextColor(0xFF5555),
    "light_purple": TextColor(0xFF55FF),
    "yellow": TextColor(0xFFFF55),
    "white": TextColor(0xFFFFFF),
}

COLOR_ALIASES: dict[str, str] = {
    "grey": "gray",
    "dark_grey": "dark_gray",
}

_NAMES_BY_VALUE: dict[int, str] = {color.value: name for name, color in NAMED_COLORS.items()}


def color_by_name(name: str) -> TextColor | None:
    """Look up a named color (or alias) or parse a ``#rrggbb`` hex color."""
    name = name.lower()
    name = COLOR_ALIASES.get(name, name)
    if name in NAMED_COLORS:
        return NAMED_COLORS[name]
    return TextColor.from_hex(name)


def named_color_of(color: TextColor) -> str | None:
    """Return the palette name of ``color``, or None if it is not a named color."""
    return _NAMES_BY_VALUE.get(color.value)


# =============================================================================
# Decorations and events
# =============================================================================


class Decoration(Enum):
    """Text decorations. Values double as Style field names."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINED = "underlined"
    STRIKETHROUGH = "strikethrough"
    OBFUSCATED = "obfuscated"


class ClickAction(Enum):
    """Actions a click event can trigger."""

    OPEN_URL = "open_url"
    OPEN_FILE = "open_file"
    RUN_COMMAND = "run_command"
    SUGGEST_COMMAND = "suggest_command"
    CHANGE_PAGE = "change_page"
    COPY_TO_CLIPBOARD = "copy_to_clipboard"


@dataclass(frozen=True, slots=True)
class ClickEvent:
    """Action performed when the text is clicked."""

    action: ClickAction
    value: str


class HoverAction(Enum):
    """Kinds of hover tooltip."""

    SHOW_TEXT = "show_text"
    SHOW_ITEM = "show_item"
    SHOW_ENTITY = "show_entity"


@dataclass(frozen=True, slots=True)
class ShowItem:
    """Item tooltip payload."""

    item: str
    count: int = 1


@dataclass(frozen=True, slots=True)
class ShowEntity:
    """Entity tooltip payload."""

    type: str
    id: UUID
    name: Component | None = None


@dataclass(frozen=True, slots=True)
class HoverEvent:
    """Tooltip shown when the text is hovered.

    The value type depends on the action: a Component for SHOW_TEXT,
    ShowItem for SHOW_ITEM, ShowEntity for SHOW_ENTITY.

    """

    action: HoverAction
    value: Component | ShowItem | ShowEntity

    @classmethod
    def show_text(cls, component: Component) -> HoverEvent:
        return cls(HoverAction.SHOW_TEXT, component)

    @classmethod
    def show_item(cls, item: str, count: int = 1) -> HoverEvent:
        return cls(HoverAction.SHOW_ITEM, ShowItem(item, count))

    @classmethod
    def show_entity(cls, type: str, id: UUID, name: Component | None = None) -> HoverEvent:
        return cls(HoverAction.SHOW_ENTITY, ShowEntity(type, id, name))


# =============================================================================
# Style
# =============================================================================


@dataclass(frozen=True, slots=True)
class Style:
    """Mergeable bag of style attributes.

    Every attribute is optional. ``None`` means "not set"; for decorations
    ``False`` means "explicitly off", which matters when merging over an
    inherited style that has the decoration on.

    """

    color: TextColor | None = None
    bold: bool | None = None
    italic: bool | None = None
    underlined: bool | None = None
    strikethrough: bool | None = None
    obfuscated: bool | None = None
    click_event: ClickEvent | None = None
    hover_event: HoverEvent | None = None
    insertion: str | None = None
    font: str | None = None

    def decoration(self, decoration: Decoration) -> bool | None:
        """Return the state of a decoration (True, False or None if unset)."""
        return getattr(self, decoration.value)

    def with_decoration(self, decoration: Decoration, state: bool | None) -> Style:
        return replace(self, **{decoration.value: state})

    def with_color(self, color: TextColor | None) -> Style:
        return replace(self, color=color)

    def merge(self, other: Style) -> Style:
        """Overlay ``other`` onto this style.

        Attributes set on ``other`` win; unset ones fall back to this style.
        """
        if other.is_empty:
            return self
        if self.is_empty:
            return other
        values = {}
        for f in fields(self):
            value = getattr(other, f.name)
            values[f.name] = getattr(self, f.name) if value is None else value
        return Style(**values)

    @property
    def is_empty(self) -> bool:
        return self == EMPTY_STYLE

    def effective(self) -> Style:
        """Normalize explicitly-off decorations to unset.

        Two styles with equal ``effective()`` render identically.
        """
        off = {d.value: None for d in Decoration if self.decoration(d) is False}
        return replace(self, **off) if off else self


EMPTY_STYLE = Style()


# =============================================================================
# Components
# =============================================================================


@runtime_checkable
class ComponentLike(Protocol):
    """Anything that can be turned into a Component."""

    def as_component(self) -> Component: ...


@dataclass(frozen=True, slots=True, kw_only=True)
class Component:
    """Base class for all components.

    Attributes:
        style: Effective style of this component
        children: Child components, rendered after this component's content

    """

    style: Style = EMPTY_STYLE
    children: tuple[Component, ...] = ()

    def as_component(self) -> Component:
        return self

    def with_style(self, style: Style) -> Component:
        return replace(self, style=style)

    def with_children(self, children: tuple[Component, ...]) -> Component:
        return replace(self, children=children)

    def append(self, *components: ComponentLike) -> Component:
        """Return a copy with ``components`` added after the existing children."""
        extra = tuple(c.as_component() for c in components)
        return replace(self, children=self.children + extra)


@dataclass(frozen=True, slots=True)
class Text(Component):
    """Plain text content.

    The most common node. An empty Text is used as a style carrier for
    scoped tags and for the root of multi-child results.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Keybind(Component):
    """A key binding resolved by the client (e.g., "key.jump").

    Markup: <key:key.jump>

    """

    keybind: str


@dataclass(frozen=True, slots=True)
class Translatable(Component):
    """A translation key with argument components.

    Markup: <lang:block.minecraft.diamond_block> or
    <lang:commands.give.success:'<red>1'>

    """

    key: str
    args: tuple[Component, ...] = ()


def text(content: str, style: Style = EMPTY_STYLE, *children: ComponentLike) -> Text:
    """Convenience constructor for Text components."""
    return Text(content, style=style, children=tuple(c.as_component() for c in children))


def inherit_style(component: Component, style: Style) -> Component:
    """Place ``component`` into a context styled with ``style``.

    ``style`` is merged underneath the style of every node in the tree, so
    attributes the component sets itself still win. Translation arguments
    inherit as well.
    """
    if style.is_empty:
        return component
    merged = style.merge(component.style)
    children = tuple(inherit_style(child, merged) for child in component.children)
    if isinstance(component, Translatable):
        args = tuple(inherit_style(arg, merged) for arg in component.args)
        return replace(component, style=merged, children=children, args=args)
    return replace(component, style=merged, children=children)
