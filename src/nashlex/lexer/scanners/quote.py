"""Quoted string scanner mixin."""

from __future__ import annotations

from nashlex.charsets import EOF
from nashlex.lexer.states import LexerState, StateScan
from nashlex.tokens import Token, TokenType

# Single-rune escapes; any other unknown escape is dropped
ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "\\": "\\",
    '"': '"',
}

OCTAL_DIGITS = "01234567"


class QuoteScannerMixin:
    """Mixin providing the quote state.

    Scans the body of a double-quoted string (the opening quote has been
    consumed and ignored), decoding escape sequences. The STRING token
    carries the decoded text and the position of its first rune.

    """

    # These will be set by the Lexer class
    _source: str
    _start: int
    _line_start: int
    _column_start: int

    def _next(self) -> str:
        raise NotImplementedError

    def _ignore(self) -> None:
        raise NotImplementedError

    def _emit_value(self, token_type: TokenType, value: str, line: int, column: int) -> Token:
        raise NotImplementedError

    def _errorf(self, fmt: str, *args: object) -> StateScan:
        raise NotImplementedError

    def _scan_quote(self) -> StateScan:
        """Scan up to and including the closing quote.

        Yields:
            STRING with the decoded body, or ILLEGAL on an unterminated
            string or a malformed escape.
        """
        data: list[str] = []

        while True:
            r = self._next()

            if r == EOF:
                return (
                    yield from self._errorf(
                        "Quoted string not finished: %s", self._source[self._start :]
                    )
                )

            if r == '"':
                break

            if r != "\\":
                data.append(r)
                continue

            r = self._next()
            escaped = ESCAPES.get(r)
            if escaped is not None:
                data.append(escaped)
            elif r in ("x", "u", "U"):
                return (
                    yield from self._errorf("Escape types 'x', 'u' and 'U' aren't implemented yet")
                )
            elif r and r in OCTAL_DIGITS:
                value = int(r)
                # exactly three octal digits
                for _ in range(2):
                    r = self._next()
                    if not r or r not in OCTAL_DIGITS:
                        return (
                            yield from self._errorf(
                                "non-octal character in escape sequence: %s", r or "EOF"
                            )
                        )
                    value = value * 8 + int(r)

                if value > 255:
                    return (yield from self._errorf("octal escape value > 255: %d", value))

                data.append(chr(value))

        yield self._emit_value(
            TokenType.STRING, "".join(data), self._line_start, self._column_start
        )
        return LexerState.START
