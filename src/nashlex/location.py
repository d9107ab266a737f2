"""Source location tracking for diagnostics.

Provides SourceLocation dataclass for positions in lexed input.
Used by Token.location and LexError.

Lines are 1-indexed and columns 0-indexed, matching the positions the
lexer stamps on tokens.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    Attributes:
        line: Line number (1-indexed)
        column: Column offset (0-indexed)
        source_file: Name of the lexed input (optional)

    Examples:
            >>> loc = SourceLocation(line=3, column=7)
            >>> str(loc)
            '3:7'

            >>> str(SourceLocation(1, 0, "build.sh"))
            'build.sh:1:0'

    """

    line: int
    column: int
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "build.sh:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location."""
        return cls(line=0, column=0)
