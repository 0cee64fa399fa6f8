"""Markdown preprocessor.

Rewrites markdown-style emphasis into MiniMessage tags before the main
parse, or removes it for plain-text output:

    >>> parse_markdown("**hi** _there_")
    '<bold>hi</bold> <italic>there</italic>'
    >>> strip_markdown("**hi** _there_")
    'hi there'

Rules:
- Delimiters pair up like brackets: a closing delimiter matches the
  nearest open delimiter of the same kind. Open delimiters stacked above
  the match, and delimiters that never pair, stay literal.
- ``<...>`` spans are copied untouched, so tags and their arguments are
  never rewritten.
- A backslash before a delimiter keeps the delimiter literal (and is
  dropped). Any other backslash pair is copied as is.

Thread Safety:
Pure functions over their arguments. Safe for concurrent use.

"""

from __future__ import annotations

from dataclasses import dataclass

from minimessage.markdown.flavor import DEFAULT_FLAVOR, MarkdownFlavor
from minimessage.stringbuilder import StringBuilder


@dataclass(slots=True)
class _Delimiter:
    text: str
    tag: str
    paired: bool = False
    closing: bool = False


def parse_markdown(text: str, flavor: MarkdownFlavor = DEFAULT_FLAVOR) -> str:
    """Rewrite paired markdown delimiters into tags."""
    return _render(_pair(_scan(text, flavor)), emit_tags=True)


def strip_markdown(text: str, flavor: MarkdownFlavor = DEFAULT_FLAVOR) -> str:
    """Remove paired markdown delimiters, keeping the text between them."""
    return _render(_pair(_scan(text, flavor)), emit_tags=False)


def _scan(text: str, flavor: MarkdownFlavor) -> list[str | _Delimiter]:
    """Split text into literal runs and delimiters."""
    pieces: list[str | _Delimiter] = []
    literal = StringBuilder()
    span_ends = _tag_span_ends(text)
    text_len = len(text)
    pos = 0

    while pos < text_len:
        char = text[pos]

        if char == "\\" and pos + 1 < text_len:
            marker = flavor.marker_at(text, pos + 1)
            if marker is not None:
                literal.append(marker[0])
                pos += 1 + len(marker[0])
            else:
                literal.append(text[pos : pos + 2])
                pos += 2
            continue

        if char == "<":
            end = span_ends.get(pos)
            if end is not None:
                literal.append(text[pos:end])
                pos = end
                continue

        marker = flavor.marker_at(text, pos)
        if marker is not None:
            if literal:
                pieces.append(literal.build())
                literal.clear()
            pieces.append(_Delimiter(*marker))
            pos += len(marker[0])
            continue

        literal.append(char)
        pos += 1

    if literal:
        pieces.append(literal.build())
    return pieces


def _tag_span_ends(text: str) -> dict[int, int]:
    """Map each ``<`` that opens a ``<...>`` span to the offset past its ``>``.

    Brackets nest, so a ``<`` matches the ``>`` that brings the nesting back to
    where it started. A ``<`` with no such ``>`` is absent from the result.
    """
    ends: dict[int, int] = {}
    if "<" not in text:
        return ends
    open_positions: list[int] = []
    for pos, char in enumerate(text):
        if char == "<":
            open_positions.append(pos)
        elif char == ">" and open_positions:
            ends[open_positions.pop()] = pos + 1
    return ends


def _pair(pieces: list[str | _Delimiter]) -> list[str | _Delimiter]:
    """Mark delimiters that pair up; unpaired ones stay literal."""
    stack: list[_Delimiter] = []
    for piece in pieces:
        if isinstance(piece, str):
            continue
        for index in range(len(stack) - 1, -1, -1):
            if stack[index].text == piece.text:
                stack[index].paired = True
                piece.paired = True
                piece.closing = True
                del stack[index:]
                break
        else:
            stack.append(piece)
    return pieces


def _render(pieces: list[str | _Delimiter], *, emit_tags: bool) -> str:
    sb = StringBuilder()
    for piece in pieces:
        match piece:
            case str():
                sb.append(piece)
            case _Delimiter(paired=False):
                sb.append(piece.text)
            case _Delimiter(closing=True) if emit_tags:
                sb.append(f"</{piece.tag}>")
            case _Delimiter() if emit_tags:
                sb.append(f"<{piece.tag}>")
    return sb.build()
