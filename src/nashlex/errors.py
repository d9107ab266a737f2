"""Exception classes for nashlex.

The lexer itself never raises for malformed input: it reports the problem
as a terminal ILLEGAL token. These exceptions are raised by consumers of
the token stream and by misuse of the stream itself.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nashlex.tokens import Token

# "<name>:<line>:<column>: <message>" as produced by the lexer
_DIAGNOSTIC_RE = re.compile(r"^(?P<name>.*?):(?P<line>\d+):(?P<column>\d+): (?P<message>.*)$", re.S)


class NashlexError(Exception):
    """Base exception for all nashlex errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(NashlexError):
    """Lexical error surfaced to a consumer.

    Raised when a consumer meets an ILLEGAL token, or when a consumer
    finds a token it cannot accept.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error with optional location.

        Args:
            message: Error description
            line: Line number where error occurred (1-indexed)
            column: Column where error occurred (0-indexed)
            source_file: Name of the lexed input (optional)
        """
        self.message = message
        self.line = line
        self.column = column
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if line is not None:
            location += f"{line}:"
            if column is not None:
                location += f"{column}:"
        if location:
            location += " "

        super().__init__(f"{location}{message}")

    @classmethod
    def from_token(cls, token: Token) -> LexError:
        """Rebuild the error carried by an ILLEGAL token.

        The token value is already prefixed with ``name:line:column:``;
        the prefix is split back into fields so that ``str()`` of the
        result equals the token value.
        """
        match = _DIAGNOSTIC_RE.match(token.value)
        if match is None:
            return cls(token.value, token.line, token.column, token.file)
        return cls(
            match["message"],
            int(match["line"]),
            int(match["column"]),
            match["name"],
        )


class StreamClosedError(NashlexError):
    """Raised when pulling a token from a closed stream."""

    def __init__(self, message: str = "stream closed") -> None:
        super().__init__(message)


class LookaheadError(NashlexError):
    """Raised when the one-slot lookahead buffer is already full."""

    pass
