"""Color transformations.

Provides:
- color: <red>, <#ff5555>, <color:red>, <colour:#ff5555>, <c:gold>
- gradient: <gradient:red:blue>, <gradient:red:blue:0.5>
- rainbow: <rainbow>, <rainbow:!>, <rainbow:2>

Gradient and rainbow color each character of the text they enclose.
Characters that already carry a color of their own (a nested <red>)
keep it but still take up their position in the sequence.

"""

from __future__ import annotations

import colorsys
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, ClassVar

from minimessage.errors import TransformationLoadError
from minimessage.nodes import (
    NAMED_COLORS,
    Component,
    Style,
    Text,
    TextColor,
    Translatable,
    color_by_name,
    inherit_style,
)
from minimessage.transformations.protocol import Transformation, require_no_arguments

if TYPE_CHECKING:
    from minimessage.tokens import Argument
    from minimessage.transformations.protocol import ParseContext


@dataclass(frozen=True, slots=True)
class ColorTransformation(Transformation):
    """Sets the text color.

    Syntax:
        <red> - Named color (16 named colors, grey aliases accepted)
        <#ff5555> - Hex color
        <color:red> / <colour:#ff5555> / <c:red> - Explicit form

    Thread Safety:
        Immutable. Safe for concurrent use.

    """

    names: ClassVar[tuple[str, ...]] = ("color", "colour", "c")

    color: TextColor

    @staticmethod
    def matches(name: str) -> bool:
        return name in ColorTransformation.names or color_by_name(name) is not None

    @classmethod
    def load(cls, name: str, arguments: tuple[Argument, ...]) -> ColorTransformation:
        if name in cls.names:
            if len(arguments) != 1:
                msg = f"Expected exactly one color argument, got {len(arguments)}"
                raise TransformationLoadError(name, msg)
            value = arguments[0].value
        else:
            require_no_arguments(name, arguments)
            value = name

        color = color_by_name(value)
        if color is None:
            raise TransformationLoadError(name, f"Unknown color: {value!r}")
        return cls(color)

    def apply(self, style: Style, context: ParseContext) -> Style:
        return style.with_color(self.color)


class _PerCharacterColor(Transformation):
    """Recolors every character of the enclosed text.

    The scope is opened without a color, so text that still has none when
    the scope closes is the text to recolor. Everything else gets the
    inherited color back.

    Subclasses provide ``color_at(index, length)``.
    """

    __slots__ = ()

    def color_at(self, index: int, length: int) -> TextColor:
        raise NotImplementedError

    def apply(self, style: Style, context: ParseContext) -> Style:
        return style.with_color(None)

    def modify(self, component: Component, inherited: Style) -> Component:
        base = Style(color=inherited.color)
        length = _count_characters(component)
        position = 0

        def recolor(node: Component) -> Component:
            nonlocal position
            own_color = node.style.color is not None
            parts: tuple[Component, ...] = ()
            if isinstance(node, Text) and node.content:
                if not own_color:
                    parts = tuple(
                        Text(char, style=node.style.with_color(self.color_at(position + i, length)))
                        for i, char in enumerate(node.content)
                    )
                position += len(node.content)

            children = tuple(recolor(child) for child in node.children)
            if parts:
                return Text("", style=base.merge(node.style), children=parts + children)
            if isinstance(node, Translatable):
                node = replace(node, args=tuple(inherit_style(arg, base) for arg in node.args))
            if not own_color:
                node = node.with_style(base.merge(node.style))
            return node.with_children(children) if children else node

        return recolor(component)


def _count_characters(component: Component) -> int:
    count = len(component.content) if isinstance(component, Text) else 0
    return count + sum(_count_characters(child) for child in component.children)


_DEFAULT_GRADIENT = (NAMED_COLORS["white"], NAMED_COLORS["black"])


@dataclass(frozen=True, slots=True)
class GradientTransformation(_PerCharacterColor):
    """Interpolates colors across the enclosed text.

    Syntax:
        <gradient> - White to black
        <gradient:red:blue> - Two or more color stops
        <gradient:red:blue:0.5> - Trailing phase in [-1, 1] shifts the stops

    Thread Safety:
        Immutable. Safe for concurrent use.

    """

    names: ClassVar[tuple[str, ...]] = ("gradient",)

    colors: tuple[TextColor, ...] = _DEFAULT_GRADIENT
    phase: float = 0.0

    @classmethod
    def load(cls, name: str, arguments: tuple[Argument, ...]) -> GradientTransformation:
        colors: list[TextColor] = []
        phase = 0.0
        last = len(arguments) - 1

        for index, argument in enumerate(arguments):
            color = color_by_name(argument.value)
            if color is not None:
                colors.append(color)
                continue
            if index == last:
                phase = _parse_phase(name, argument.value)
                continue
            raise TransformationLoadError(name, f"Unknown color: {argument.value!r}")

        if len(colors) == 1:
            raise TransformationLoadError(name, "A gradient needs at least two colors")
        return cls(tuple(colors) or _DEFAULT_GRADIENT, phase)

    def color_at(self, index: int, length: int) -> TextColor:
        t = index / (length - 1) if length > 1 else 0.0
        if self.phase:
            t = (t + self.phase) % 1.0
        position = t * (len(self.colors) - 1)
        stop = min(int(position), len(self.colors) - 2)
        return self.colors[stop].lerp(self.colors[stop + 1], position - stop)


def _parse_phase(name: str, value: str) -> float:
    try:
        phase = float(value)
    except ValueError:
        raise TransformationLoadError(name, f"Unknown color: {value!r}") from None
    if not -1.0 <= phase <= 1.0:
        raise TransformationLoadError(name, f"Phase must be between -1 and 1, got {value!r}")
    return phase


@dataclass(frozen=True, slots=True)
class RainbowTransformation(_PerCharacterColor):
    """Cycles through the hue circle across the enclosed text.

    Syntax:
        <rainbow> - Red through violet
        <rainbow:!> - Reversed
        <rainbow:3> / <rainbow:!3> - Shift the start by a whole number of characters

    Thread Safety:
        Immutable. Safe for concurrent use.

    """

    names: ClassVar[tuple[str, ...]] = ("rainbow",)

    reverse: bool = False
    phase: int = 0

    @classmethod
    def load(cls, name: str, arguments: tuple[Argument, ...]) -> RainbowTransformation:
        if not arguments:
            return cls()
        if len(arguments) > 1:
            raise TransformationLoadError(name, f"Expected at most one argument, got {len(arguments)}")

        value = arguments[0].value
        reverse = value.startswith("!")
        if reverse:
            value = value[1:]
        if not value:
            return cls(reverse)
        try:
            return cls(reverse, int(value))
        except ValueError:
            raise TransformationLoadError(name, f"Invalid phase: {value!r}") from None

    def color_at(self, index: int, length: int) -> TextColor:
        if self.reverse:
            index = length - 1 - index
        hue = ((index + self.phase) / length) % 1.0
        red, green, blue = colorsys.hsv_to_rgb(hue, 1.0, 1.0)
        return TextColor.from_rgb(red * 255, green * 255, blue * 255)
