"""Token and TokenType definitions for the MiniMessage lexer.

The lexer produces a flat stream of Token objects; ``build_tree`` in
``minimessage.lexer`` nests them into TagNode scopes for the parser.

Thread Safety:
Token and Argument are frozen (immutable) and safe to share across threads.
TagNode trees are built and consumed inside a single parse call.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer."""

    TEXT = auto()  # literal run, escapes already resolved
    OPEN_TAG = auto()  # <name> or <name:arg:arg>
    CLOSE_TAG = auto()  # </name>


@dataclass(frozen=True, slots=True)
class Argument:
    """One ``:``-separated argument of a tag.

    Attributes:
        value: Argument text with quotes removed and every escape resolved.
            Use for plain values (colors, URLs, keys).
        raw: Argument text with quotes removed but markup escapes
            (``\\<``, ``\\>``, ``\\\\``) kept. Use when the argument is itself
            markup to be parsed again (hover text, translation arguments).
        start: Offset of the argument in the source

    """

    value: str
    raw: str
    start: int = 0


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type
        value: Literal text for TEXT; the original source slice for tags
        start: Absolute start offset in source
        end: Absolute end offset in source
        name: Tag name as written (tags only)
        arguments: Tag arguments (tags only)

    """

    type: TokenType
    value: str
    start: int
    end: int
    name: str = ""
    arguments: tuple[Argument, ...] = ()

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.start})"


@dataclass(slots=True)
class TagNode:
    """A scoped tag and the tokens it encloses.

    The root of a tree has ``token=None``. ``close`` is the explicit closing
    token, or None when the scope was closed implicitly (by an enclosing
    close tag or the end of input).

    """

    token: Token | None
    children: list[TagNode | Token] = field(default_factory=list)
    close: Token | None = None

    @property
    def name(self) -> str:
        return self.token.name if self.token is not None else ""
