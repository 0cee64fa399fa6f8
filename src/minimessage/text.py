"""Extract plain text and styled segments from components.

Example:
    >>> from minimessage import deserialize, plain_text
    >>> plain_text(deserialize("<bold>Hello <key:key.jump>"))
    'Hello key.jump'

``flatten`` reduces a tree to the sequence of (text, effective style) runs
a client would display. Two trees that render identically flatten to the
same segments, whatever their shape.

"""

from __future__ import annotations

from dataclasses import dataclass, replace

from minimessage.nodes import (
    Component,
    HoverAction,
    HoverEvent,
    Keybind,
    ShowEntity,
    Style,
    Text,
    Translatable,
)
from minimessage.stringbuilder import StringBuilder


def plain_text(component: Component) -> str:
    """Extract plain text from a component tree.

    Keybinds contribute their keybind name and translatables their key.
    Hover content is not included.
    """
    sb = StringBuilder()
    _collect_text(component, sb)
    return sb.build()


def _collect_text(component: Component, sb: StringBuilder) -> None:
    match component:
        case Text():
            sb.append(component.content)
        case Keybind():
            sb.append(component.keybind)
        case Translatable():
            sb.append(component.key)
    for child in component.children:
        _collect_text(child, sb)


@dataclass(frozen=True, slots=True)
class Segment:
    """A run of content rendered in one style.

    Attributes:
        text: Text, keybind name or translation key
        style: Effective style with hover content normalized
        kind: "text", "keybind" or "translatable"
        args: Flattened translation arguments (translatable only)

    """

    text: str
    style: Style
    kind: str = "text"
    args: tuple[tuple[Segment, ...], ...] = ()


def flatten(component: Component) -> tuple[Segment, ...]:
    """Reduce a tree to its displayed runs, merging adjacent text runs."""
    out: list[Segment] = []
    _flatten(component, out)
    return tuple(out)


def _flatten(component: Component, out: list[Segment]) -> None:
    style = _normalize(component.style)
    match component:
        case Text() if component.content:
            if out and out[-1].kind == "text" and out[-1].style == style:
                out[-1] = Segment(out[-1].text + component.content, style)
            else:
                out.append(Segment(component.content, style))
        case Keybind():
            out.append(Segment(component.keybind, style, "keybind"))
        case Translatable():
            args = tuple(flatten(arg) for arg in component.args)
            out.append(Segment(component.key, style, "translatable", args))
    for child in component.children:
        _flatten(child, out)


def _normalize(style: Style) -> Style:
    """Effective style with hover components replaced by a canonical shape."""
    style = style.effective()
    hover = style.hover_event
    if hover is None:
        return style
    match hover.action:
        case HoverAction.SHOW_TEXT:
            hover = HoverEvent(hover.action, _canonical(hover.value))
        case HoverAction.SHOW_ENTITY if hover.value.name is not None:
            entity: ShowEntity = hover.value
            hover = HoverEvent(hover.action, replace(entity, name=_canonical(entity.name)))
        case _:
            return style
    return replace(style, hover_event=hover)


def _canonical(component: Component) -> Component:
    """Rebuild a component as a flat list of its displayed runs."""
    return Text("", children=tuple(_segment_component(s) for s in flatten(component)))


def _segment_component(segment: Segment) -> Component:
    match segment.kind:
        case "keybind":
            return Keybind(segment.text, style=segment.style)
        case "translatable":
            args = tuple(Text("", children=tuple(map(_segment_component, arg))) for arg in segment.args)
            return Translatable(segment.text, args, style=segment.style)
        case _:
            return Text(segment.text, style=segment.style)
