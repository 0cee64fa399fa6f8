"""Single-pass lexer for MiniMessage markup.

Scans the source once, left to right, producing TEXT, OPEN_TAG and
CLOSE_TAG tokens. Every branch advances the position, so lexing is O(n).

Tag Syntax:
    <name>                      open tag
    <name:arg1:'arg 2'>         open tag with arguments
    </name>                     close tag
    \\<  \\>  \\\\                  escaped literals in text

A ``<`` only starts a tag when it is followed by a name (optionally after
``/``) and the name is followed by ``:`` or ``>``. Anything else is literal
text, so ``3 < 5`` needs no escaping. Once the argument list has started,
the tag must be terminated.

Arguments:
    Unquoted arguments run to the next ``:`` or ``>`` at nesting depth 0; a
    ``<`` inside an argument opens a nested tag, so
    ``<hover:show_text:<red>hi>`` is a single tag. An argument starting with
    ``'`` or ``"`` is quoted and may contain ``:``, ``<`` and ``>`` freely.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator

from minimessage.errors import TagSyntaxError
from minimessage.stringbuilder import StringBuilder
from minimessage.tokens import Argument, TagNode, Token, TokenType

TAG_START = "<"
TAG_END = ">"
CLOSE_MARKER = "/"
SEPARATOR = ":"
ESCAPE = "\\"
QUOTES = frozenset("'\"")

# Characters an escape turns into literals in text
TEXT_ESCAPABLE = frozenset("<>\\")

# Characters an escape turns into literals in unquoted arguments
ARGUMENT_ESCAPABLE = frozenset("<>\\:'\"")

NAME_PUNCTUATION = frozenset("_#!?.-+")

# Arguments containing any of these are quoted when serialized
_NEEDS_QUOTING = frozenset("<>\\:'\"")


def is_name_char(char: str) -> bool:
    """Check whether ``char`` may appear in a tag name."""
    return char.isalnum() or char in NAME_PUNCTUATION


def _never(name: str) -> bool:
    return False


class Lexer:
    """Single-pass tokenizer for MiniMessage markup.

    Usage:
            >>> lexer = Lexer("<red>Hi</red>")
            >>> list(lexer.tokenize())
            [Token(OPEN_TAG, '<red>', 0), Token(TEXT, 'Hi', 5), Token(CLOSE_TAG, '</red>', 7)]

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_is_verbatim",
    )

    def __init__(
        self,
        source: str,
        is_verbatim: Callable[[str], bool] | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markup source text
            is_verbatim: Predicate over tag names; content after a matching
                open tag is emitted raw up to its own close tag
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._is_verbatim = is_verbatim or _never

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the source.

        Yields:
            Tokens in source order

        Raises:
            TagSyntaxError: On an unterminated tag or an invalid escape
                inside tag arguments
        """
        source = self._source
        text = StringBuilder()
        text_start = 0

        while self._pos < self._source_len:
            pos = self._pos
            char = source[pos]

            if (
                char == ESCAPE
                and pos + 1 < self._source_len
                and source[pos + 1] in TEXT_ESCAPABLE
            ):
                text.append(source[pos + 1])
                self._pos = pos + 2
                continue

            if char == TAG_START:
                tag = self._scan_tag(pos)
                if tag is not None:
                    if text:
                        yield Token(TokenType.TEXT, text.build(), text_start, pos)
                        text.clear()
                    yield tag
                    self._pos = tag.end
                    if tag.type is TokenType.OPEN_TAG and self._is_verbatim(tag.name):
                        yield from self._scan_verbatim(tag)
                    text_start = self._pos
                    continue

            text.append(char)
            self._pos = pos + 1

        if text:
            yield Token(TokenType.TEXT, text.build(), text_start, self._source_len)

    def _scan_tag(self, start: int) -> Token | None:
        """Try to scan a tag at ``start``; None means the ``<`` is literal."""
        source = self._source
        end = self._source_len
        pos = start + 1

        token_type = TokenType.OPEN_TAG
        if pos < end and source[pos] == CLOSE_MARKER:
            token_type = TokenType.CLOSE_TAG
            pos += 1

        name_start = pos
        while pos < end and is_name_char(source[pos]):
            pos += 1
        if pos == name_start or pos >= end:
            return None

        name = source[name_start:pos]
        if source[pos] == TAG_END:
            return Token(token_type, source[start : pos + 1], start, pos + 1, name)
        if source[pos] != SEPARATOR:
            return None

        arguments, pos = self._scan_arguments(start, pos + 1)
        return Token(token_type, source[start:pos], start, pos, name, arguments)

    def _scan_arguments(self, tag_start: int, pos: int) -> tuple[tuple[Argument, ...], int]:
        """Scan arguments up to the tag's closing ``>``.

        Returns:
            The arguments and the position just past the closing ``>``
        """
        source = self._source
        end = self._source_len
        arguments: list[Argument] = []
        value = StringBuilder()
        raw = StringBuilder()
        arg_start = pos
        quote: str | None = None
        fresh = True
        depth = 0

        while True:
            if pos >= end:
                raise TagSyntaxError("Unterminated tag", tag_start, source)
            char = source[pos]

            if quote is not None:
                if char == ESCAPE and pos + 1 < end and source[pos + 1] in (quote, ESCAPE):
                    value.append(source[pos + 1])
                    raw.append(source[pos + 1])
                    pos += 2
                    continue
                if char == quote:
                    quote = None
                else:
                    value.append(char)
                    raw.append(char)
                pos += 1
                continue

            if char == ESCAPE:
                if pos + 1 >= end:
                    raise TagSyntaxError("Unterminated tag", tag_start, source)
                escaped = source[pos + 1]
                if escaped not in ARGUMENT_ESCAPABLE:
                    msg = f"Invalid escape sequence '\\{escaped}' in tag arguments"
                    raise TagSyntaxError(msg, pos, source)
                value.append(escaped)
                raw.append(char + escaped if escaped in TEXT_ESCAPABLE else escaped)
                fresh = False
                pos += 2
                continue

            if char in QUOTES and fresh and depth == 0:
                quote = char
                fresh = False
                pos += 1
                continue

            if depth == 0 and (char == SEPARATOR or char == TAG_END):
                arguments.append(Argument(value.build(), raw.build(), arg_start))
                value.clear()
                raw.clear()
                pos += 1
                if char == TAG_END:
                    return tuple(arguments), pos
                arg_start = pos
                fresh = True
                continue

            if char == TAG_START:
                depth += 1
            elif char == TAG_END:
                depth -= 1
            value.append(char)
            raw.append(char)
            fresh = False
            pos += 1

    def _scan_verbatim(self, tag: Token) -> Iterator[Token]:
        """Emit everything up to the verbatim tag's own close tag as raw text."""
        source = self._source
        start = self._pos
        pattern = re.compile(re.escape(f"</{tag.name}>"), re.IGNORECASE)
        match = pattern.search(source, start)

        if match is None:
            if start < self._source_len:
                yield Token(TokenType.TEXT, source[start:], start, self._source_len)
            self._pos = self._source_len
            return

        if match.start() > start:
            yield Token(TokenType.TEXT, source[start : match.start()], start, match.start())
        yield Token(
            TokenType.CLOSE_TAG,
            match.group(0),
            match.start(),
            match.end(),
            source[match.start() + 2 : match.end() - 1],
        )
        self._pos = match.end()


def build_tree(
    tokens: Iterable[Token],
    opens_scope: Callable[[str], bool],
    max_depth: int,
    source: str = "",
) -> TagNode:
    """Nest a flat token stream into tag scopes.

    A close tag closes the innermost open tag with the same name (case
    insensitive) together with every tag opened after it. Open tags without
    a close tag run to the end of their enclosing scope. Close tags that
    match no open tag are kept as children so the parser can decide what
    they mean. Open tags for which ``opens_scope`` is False stay leaves.

    Args:
        tokens: Tokens from Lexer.tokenize()
        opens_scope: Whether an open tag with this name encloses content
        max_depth: Maximum number of nested scopes
        source: Source text, for error positions

    Returns:
        Root TagNode (token is None)

    Raises:
        TagSyntaxError: If scopes nest deeper than ``max_depth``
    """
    root = TagNode(None)
    stack = [root]

    for token in tokens:
        if token.type is TokenType.OPEN_TAG and opens_scope(token.name):
            if len(stack) > max_depth:
                msg = f"Tags nested deeper than {max_depth} levels"
                raise TagSyntaxError(msg, token.start, source)
            node = TagNode(token)
            stack[-1].children.append(node)
            stack.append(node)
        elif token.type is TokenType.CLOSE_TAG:
            name = token.name.lower()
            for index in range(len(stack) - 1, 0, -1):
                if stack[index].name.lower() == name:
                    stack[index].close = token
                    del stack[index:]
                    break
            else:
                stack[-1].children.append(token)
        else:
            stack[-1].children.append(token)

    return root


def escape_tokens(text: str) -> str:
    """Escape ``text`` so the lexer reads all of it as literal text.

    Every ``<`` is escaped, and so is every backslash that would otherwise
    combine with the following character into an escape sequence. A
    trailing backslash is escaped too, so the result can be followed by a
    tag. Other characters are untouched.

    Example:
        >>> escape_tokens("<red>not a tag")
        '\\\\<red>not a tag'
    """
    sb = StringBuilder()
    last = len(text) - 1
    for index, char in enumerate(text):
        if char == TAG_START:
            sb.append(ESCAPE + char)
        elif char == ESCAPE and (index == last or text[index + 1] in TEXT_ESCAPABLE):
            sb.append(ESCAPE + ESCAPE)
        else:
            sb.append(char)
    return sb.build()


def format_argument(value: str) -> str:
    """Render a tag argument, quoting it when it would not survive bare.

    Quoted arguments escape the quote character and backslashes, which is
    exactly what the lexer undoes inside quotes.
    """
    if value and value[0] not in QUOTES and not any(c in _NEEDS_QUOTING for c in value):
        return value
    return "'" + value.replace(ESCAPE, ESCAPE + ESCAPE).replace("'", ESCAPE + "'") + "'"
