"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking positions in markup text.
Tokens record raw offsets; a SourceLocation is only derived when an error
message needs a human-readable line and column.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    Line and column are 1-indexed; offsets are 0-indexed positions in the
    source string.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column offset (1-indexed)
        offset: Absolute start offset in source
        end_offset: Absolute end offset in source

    Examples:
            >>> loc = SourceLocation.from_offset("<red>\\n<bold", 6)
            >>> str(loc)
            '2:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "10:5"
        """
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(cls, source: str, offset: int, end_offset: int | None = None) -> SourceLocation:
        """Derive line and column from an absolute offset.

        Args:
            source: Full source text
            offset: 0-indexed position in source (clamped to its length)
            end_offset: Optional end position; defaults to offset

        Returns:
            SourceLocation for the offset
        """
        offset = max(0, min(offset, len(source)))
        lineno = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return cls(
            lineno=lineno,
            col_offset=offset - line_start + 1,
            offset=offset,
            end_offset=offset if end_offset is None else end_offset,
        )
