"""Exception classes for MiniMessage.

Provides standardized exceptions for error handling throughout MiniMessage.
"""

from __future__ import annotations

from minimessage.location import SourceLocation


class MiniMessageError(Exception):
    """Base exception for all MiniMessage errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(MiniMessageError):
    """Error while turning markup into components.

    Raised when the lexer or parser encounters input it cannot accept.
    """

    def __init__(
        self,
        message: str,
        position: int | None = None,
        source: str | None = None,
    ) -> None:
        """Initialize parse error with optional position.

        Args:
            message: Error description
            position: Offset into the source where the error occurred (0-indexed)
            source: The markup being parsed, used to derive line and column
        """
        self.message = message
        self.position = position
        self.location: SourceLocation | None = None

        prefix = ""
        if position is not None:
            if source is not None:
                self.location = SourceLocation.from_offset(source, position)
                prefix = f"{self.location} "
            else:
                prefix = f"offset {position}: "

        super().__init__(f"{prefix}{message}")

    @property
    def lineno(self) -> int | None:
        """Line number of the error (1-indexed), if known."""
        return self.location.lineno if self.location else None

    @property
    def col_offset(self) -> int | None:
        """Column of the error (1-indexed), if known."""
        return self.location.col_offset if self.location else None


class TagSyntaxError(ParseError):
    """Structurally malformed markup.

    Unterminated tags, invalid escapes inside arguments, closing tags that
    match nothing, and nesting beyond the configured depth.
    """

    pass


class TransformationLoadError(ParseError):
    """A matched tag received arguments its transformation cannot accept."""

    def __init__(
        self,
        tag_name: str,
        message: str,
        position: int | None = None,
        source: str | None = None,
    ) -> None:
        """Initialize transformation load error.

        Args:
            tag_name: Name of the tag as written (e.g., "color", "click")
            message: Description of what was wrong with the arguments
            position: Offset of the tag in the source (optional)
            source: The markup being parsed (optional)
        """
        self.tag_name = tag_name
        self.reason = message
        super().__init__(f"Tag '<{tag_name}>': {message}", position, source)

    def at(self, position: int, source: str) -> TransformationLoadError:
        """Return a copy of this error located at ``position`` in ``source``."""
        return TransformationLoadError(self.tag_name, self.reason, position, source)


class PlaceholderError(MiniMessageError, ValueError):
    """Invalid placeholder arguments passed to a convenience parse form.

    Raised before any tokenizing happens.
    """

    pass


class SerializeError(MiniMessageError):
    """Error while turning components back into markup.

    Raised when a component tree contains something the markup cannot express.
    """

    pass
