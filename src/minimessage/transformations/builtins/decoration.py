"""Decoration transformation.

Provides bold, italic, underlined, strikethrough and obfuscated, each
with short aliases. A leading ``!`` turns the decoration off, which
matters inside an enclosing tag that turned it on:

    <bold>loud <!bold>quiet</!bold> loud</bold>

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from minimessage.nodes import Decoration
from minimessage.transformations.protocol import Transformation, require_no_arguments

if TYPE_CHECKING:
    from minimessage.nodes import Style
    from minimessage.tokens import Argument
    from minimessage.transformations.protocol import ParseContext

DECORATION_ALIASES: dict[str, Decoration] = {
    "bold": Decoration.BOLD,
    "b": Decoration.BOLD,
    "italic": Decoration.ITALIC,
    "em": Decoration.ITALIC,
    "i": Decoration.ITALIC,
    "underlined": Decoration.UNDERLINED,
    "u": Decoration.UNDERLINED,
    "strikethrough": Decoration.STRIKETHROUGH,
    "st": Decoration.STRIKETHROUGH,
    "obfuscated": Decoration.OBFUSCATED,
    "obf": Decoration.OBFUSCATED,
}


@dataclass(frozen=True, slots=True)
class DecorationTransformation(Transformation):
    """Turns a decoration on or off.

    Syntax:
        <bold>, <b> - On
        <!bold>, <!b> - Off

    Thread Safety:
        Immutable. Safe for concurrent use.

    """

    decoration: Decoration
    state: bool = True

    @staticmethod
    def matches(name: str) -> bool:
        return name.removeprefix("!") in DECORATION_ALIASES

    @classmethod
    def load(cls, name: str, arguments: tuple[Argument, ...]) -> DecorationTransformation:
        require_no_arguments(name, arguments)
        negated = name.startswith("!")
        return cls(DECORATION_ALIASES[name.removeprefix("!")], not negated)

    def apply(self, style: Style, context: ParseContext) -> Style:
        return style.with_decoration(self.decoration, self.state)
