"""Formatting transformations without a visual attribute of their own.

Provides:
- font: <font:uniform>, <font:minecraft:alt>
- reset: <reset> clears every inherited attribute
- pre: <pre><red>shown as is</pre>

"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, ClassVar

from minimessage.errors import TransformationLoadError
from minimessage.nodes import EMPTY_STYLE
from minimessage.transformations.protocol import (
    Transformation,
    require_arguments,
    require_no_arguments,
)

if TYPE_CHECKING:
    from minimessage.nodes import Style
    from minimessage.tokens import Argument
    from minimessage.transformations.protocol import ParseContext

_FONT_KEY = re.compile(r"^(?:[a-z0-9_.-]+:)?[a-z0-9_./-]+$")


@dataclass(frozen=True, slots=True)
class FontTransformation(Transformation):
    """Sets the font by resource key.

    Syntax:
        <font:uniform> - Key in the default namespace
        <font:minecraft:uniform> - Namespaced key

    Thread Safety:
        Immutable. Safe for concurrent use.

    """

    names: ClassVar[tuple[str, ...]] = ("font",)

    font: str

    @classmethod
    def load(cls, name: str, arguments: tuple[Argument, ...]) -> FontTransformation:
        require_arguments(name, arguments, 1)
        if len(arguments) > 2:
            raise TransformationLoadError(name, f"Expected a font key, got {len(arguments)} arguments")
        key = ":".join(argument.value for argument in arguments)
        if not _FONT_KEY.match(key):
            raise TransformationLoadError(name, f"Invalid font key: {key!r}")
        return cls(key)

    def apply(self, style: Style, context: ParseContext) -> Style:
        return replace(style, font=self.font)


@dataclass(frozen=True, slots=True)
class ResetTransformation(Transformation):
    """Drops every inherited style attribute for the rest of the scope."""

    names: ClassVar[tuple[str, ...]] = ("reset",)

    @classmethod
    def load(cls, name: str, arguments: tuple[Argument, ...]) -> ResetTransformation:
        require_no_arguments(name, arguments)
        return cls()

    def apply(self, style: Style, context: ParseContext) -> Style:
        return EMPTY_STYLE


@dataclass(frozen=True, slots=True)
class PreTransformation(Transformation):
    """Marks content that is taken literally.

    The lexer stops interpreting tags and escapes after <pre> until the
    matching </pre>; the tag itself changes no style.
    """

    names: ClassVar[tuple[str, ...]] = ("pre",)

    @classmethod
    def load(cls, name: str, arguments: tuple[Argument, ...]) -> PreTransformation:
        require_no_arguments(name, arguments)
        return cls()
