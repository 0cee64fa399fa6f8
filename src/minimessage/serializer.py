"""Component to markup serializer.

Walks the tree depth-first, emitting for each component only the tags
that turn its parent's style into its own, then its content, then its
children, then the closing tags in reverse order.

A style attribute can be added or changed with a tag, and a decoration can
be turned off with ``<!name>``, but a color, event, insertion or font can
only be dropped with ``<reset>``. When a component drops one, it is
emitted as ``<reset>`` followed by its complete style.

Guarantee: parsing the output yields the same flattened runs (see
minimessage.text.flatten) as the input. The markup itself may differ from
whatever produced the tree.

Thread Safety:
MarkupSerializer is stateless. All state is local to each call.

"""

from __future__ import annotations

from minimessage.errors import SerializeError
from minimessage.lexer import escape_tokens, format_argument
from minimessage.nodes import (
    EMPTY_STYLE,
    Component,
    Decoration,
    HoverAction,
    HoverEvent,
    Keybind,
    Style,
    Text,
    Translatable,
    named_color_of,
)
from minimessage.stringbuilder import StringBuilder

# Attributes that no tag can remove
_RESET_ONLY = ("color", "click_event", "hover_event", "insertion", "font")


class MarkupSerializer:
    """Serialize component trees to MiniMessage markup.

    Usage:
            >>> MarkupSerializer().serialize(Text("Hi", style=Style(bold=True)))
            '<bold>Hi</bold>'

    """

    __slots__ = ()

    def serialize(self, component: Component) -> str:
        """Serialize a component tree.

        Raises:
            SerializeError: If the tree holds a component or event the markup
                cannot express
        """
        sb = StringBuilder()
        self._serialize(component, EMPTY_STYLE, sb)
        return sb.build()

    def _serialize(self, component: Component, parent: Style, sb: StringBuilder) -> None:
        style = component.style.effective()
        closing: list[str] = []

        base = parent
        if any(
            getattr(parent, name) is not None and getattr(style, name) is None
            for name in _RESET_ONLY
        ):
            sb.append("<reset>")
            closing.append("</reset>")
            base = EMPTY_STYLE

        for open_tag, close_tag in self._style_tags(base, style):
            sb.append(open_tag)
            closing.append(close_tag)

        match component:
            case Text():
                sb.append(escape_tokens(component.content))
            case Keybind():
                sb.append(f"<key:{format_argument(component.keybind)}>")
            case Translatable():
                sb.append(f"<lang:{format_argument(component.key)}")
                for arg in component.args:
                    markup = StringBuilder()
                    self._serialize(arg, style, markup)
                    sb.append(":").append(format_argument(markup.build()))
                sb.append(">")
            case _:
                msg = f"Cannot serialize component of type {type(component).__name__}"
                raise SerializeError(msg)

        for child in component.children:
            self._serialize(child, style, sb)

        for close_tag in reversed(closing):
            sb.append(close_tag)

    def _style_tags(self, base: Style, style: Style) -> list[tuple[str, str]]:
        """Tags turning ``base`` into ``style``, as (open, close) pairs."""
        tags: list[tuple[str, str]] = []

        if style.color is not None and style.color != base.color:
            name = named_color_of(style.color) or style.color.hex_string
            tags.append((f"<{name}>", f"</{name}>"))

        for decoration in Decoration:
            wanted = bool(style.decoration(decoration))
            if wanted != bool(base.decoration(decoration)):
                name = decoration.value if wanted else f"!{decoration.value}"
                tags.append((f"<{name}>", f"</{name}>"))

        if style.font is not None and style.font != base.font:
            tags.append((f"<font:{format_argument(style.font)}>", "</font>"))

        if style.insertion is not None and style.insertion != base.insertion:
            tags.append((f"<insert:{format_argument(style.insertion)}>", "</insert>"))

        if style.click_event is not None and style.click_event != base.click_event:
            click = style.click_event
            value = format_argument(click.value)
            tags.append((f"<click:{click.action.value}:{value}>", "</click>"))

        if style.hover_event is not None and style.hover_event != base.hover_event:
            tags.append((f"<hover:{self._hover_arguments(style.hover_event)}>", "</hover>"))

        return tags

    def _hover_arguments(self, hover: HoverEvent) -> str:
        match hover.action:
            case HoverAction.SHOW_TEXT:
                return f"show_text:{format_argument(self.serialize(hover.value))}"
            case HoverAction.SHOW_ITEM:
                item = hover.value
                arguments = f"show_item:{format_argument(item.item)}"
                return arguments if item.count == 1 else f"{arguments}:{item.count}"
            case HoverAction.SHOW_ENTITY:
                entity = hover.value
                arguments = f"show_entity:{format_argument(entity.type)}:{entity.id}"
                if entity.name is None:
                    return arguments
                return f"{arguments}:{format_argument(self.serialize(entity.name))}"
        msg = f"Cannot serialize hover action {hover.action!r}"
        raise SerializeError(msg)


def serialize(component: Component) -> str:
    """Serialize a component tree to markup."""
    return MarkupSerializer().serialize(component)
