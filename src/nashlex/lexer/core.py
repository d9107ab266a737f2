"""State-machine lexer for the nash shell language.

Each state is a scanner method that consumes runes, yields the tokens it
recognizes, and returns the next state. The driver runs scanners until one
returns None, then publishes a final EOF token.

The token stream is a generator: the consumer pulls tokens one at a time
and the lexer only advances its cursor on demand. FIFO ordering holds by
construction and no threads are involved.

Thread Safety:
Lexer instances are single-use. Create one per input.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import ClassVar

from nashlex.charsets import EOF, is_arg, is_identifier, is_space
from nashlex.config import LexConfig, get_lex_config
from nashlex.errors import StreamClosedError
from nashlex.lexer.scanners import (
    CommentScannerMixin,
    QuoteScannerMixin,
    SpaceScannerMixin,
    StartScannerMixin,
)
from nashlex.lexer.states import LexerState, StateScan
from nashlex.tokens import Token, TokenType
from nashlex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    StartScannerMixin,
    QuoteScannerMixin,
    CommentScannerMixin,
    SpaceScannerMixin,
):
    """Streaming state-machine lexer.

    Usage:
            >>> lexer = Lexer("demo", 'echo "hello world"')
            >>> for token in lexer.tokens:
            ...     print(repr(token))
        Token(IDENT, 'echo', 1:0)
        Token(STRING, 'hello world', 1:6)
        Token(SEMICOLON, ';', 1:18)
        Token(EOF, '', 1:18)

    The stream always ends with EOF. A lexical error is reported as one
    ILLEGAL token (value ``name:line:column: message``) followed by EOF.

    Thread Safety:
        Lexer instances are single-use. Create one per input.

    """

    __slots__ = (
        "_name",
        "_source",
        "_source_len",  # Cached len(source)
        "_start",  # Start of the pending token
        "_pos",
        "_width",  # Width of the last rune read (0 at EOF)
        "_line",
        "_column",
        "_prev_column",  # Column before the last rune, for one back-up
        "_line_start",  # Position of the pending token's first rune
        "_column_start",
        "_open_parens",
        "_add_semicolon",
        "_config",
        "_closed",
        "_finished",
        "tokens",
    )

    # Explicit state graph: state -> scanner
    _STATE_SCANNERS: ClassVar[dict[LexerState, Callable[[Lexer], StateScan]]] = {
        LexerState.START: StartScannerMixin._scan_start,
        LexerState.SPACE: SpaceScannerMixin._scan_space,
        LexerState.QUOTE: QuoteScannerMixin._scan_quote,
        LexerState.COMMENT: CommentScannerMixin._scan_comment,
    }

    def __init__(
        self,
        name: str,
        source: str | bytes,
        *,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer with a named input.

        Args:
            name: Diagnostic label used in error messages (may be empty)
            source: Input text; bytes are decoded as UTF-8, invalid
                sequences becoming U+FFFD
            config: Explicit configuration (defaults to the active LexConfig)
        """
        if isinstance(source, bytes):
            source = source.decode("utf-8", errors="replace")

        self._name = name
        self._source = source
        self._source_len = len(source)
        self._start = 0
        self._pos = 0
        self._width = 0
        self._line = 1
        self._column = 0
        self._prev_column = 0
        self._line_start = 1
        self._column_start = 0
        self._open_parens = 0
        self._add_semicolon = False
        self._config = config if config is not None else get_lex_config()
        self._closed = False
        self._finished = False

        self.tokens: Iterator[Token] = self._run()

    @property
    def name(self) -> str:
        return self._name

    @property
    def closed(self) -> bool:
        """True once EOF has been published or the consumer closed the stream."""
        return self._closed

    def __iter__(self) -> Iterator[Token]:
        return self.tokens

    def next_token(self) -> Token:
        """Pull the next token.

        Raises:
            StreamClosedError: The stream was closed (EOF already delivered
                or the consumer called close()).
        """
        try:
            return next(self.tokens)
        except StopIteration:
            raise StreamClosedError() from None

    def close(self) -> None:
        """Stop the lexer from the consumer side.

        Tokens already delivered stay valid; later pulls raise
        StreamClosedError.
        """
        if not self._finished:
            logger.debug("Token stream for %s cancelled at %d:%d", self._label(), self._line, self._column)
        self.tokens.close()  # type: ignore[attr-defined]
        self._closed = True

    def __repr__(self) -> str:
        return f"Lexer({self._name!r}, pos={self._pos}, start={self._start})"

    # =========================================================================
    # Driver
    # =========================================================================

    def _run(self) -> Iterator[Token]:
        """Run the state machine, filtering tokens the config drops."""
        skip_comments = self._config.skip_comments
        try:
            for token in self._scan():
                if skip_comments and token.type is TokenType.COMMENT:
                    continue
                yield token
        finally:
            self._closed = True

    def _scan(self) -> Iterator[Token]:
        state: LexerState | None = LexerState.START
        while state is not None:
            state = yield from self._STATE_SCANNERS[state](self)

        self._finished = True
        self._closed = True
        yield self._make_token(TokenType.EOF, "", self._line, self._column)

    # =========================================================================
    # Input cursor
    # =========================================================================

    def _next(self) -> str:
        """Consume one rune.

        Returns:
            The rune, or EOF ("") at end of input.
        """
        if self._pos >= self._source_len:
            self._width = 0
            return EOF

        r = self._source[self._pos]
        self._width = 1
        self._pos += 1
        self._prev_column = self._column

        if r == "\n":
            self._line += 1
            self._column = 0
        else:
            self._column += 1

        return r

    def _backup(self) -> None:
        """Step back over the last rune read by _next().

        Only one back-up is possible per _next(); backing up at EOF is a no-op.
        """
        if self._width == 0:
            return

        self._pos -= self._width
        self._width = 0
        self._column = self._prev_column
        if self._source[self._pos] == "\n":
            self._line -= 1

    def _peek(self) -> str:
        """Return but do not consume the next rune."""
        r = self._next()
        self._backup()
        return r

    def _ignore(self) -> None:
        """Skip over the pending input before this point."""
        self._start = self._pos
        self._line_start = self._line
        self._column_start = self._column

    def _accept(self, valid: str) -> bool:
        """Consume the next rune if it is in valid."""
        r = self._next()
        if r and r in valid:
            return True
        self._backup()
        return False

    def _accept_run(self, valid: str) -> None:
        """Consume a run of runes from valid."""
        while True:
            r = self._next()
            if not r or r not in valid:
                break
        self._backup()

    def _accept_while(self, predicate: Callable[[str], bool]) -> None:
        """Consume a run of runes satisfying predicate."""
        while predicate(self._next()):
            pass
        self._backup()

    def _absorb_identifier(self) -> None:
        self._accept_while(is_identifier)

    def _absorb_argument(self) -> None:
        self._accept_while(is_arg)

    def _absorb_spaces(self) -> None:
        self._accept_while(is_space)

    # =========================================================================
    # Emitter
    # =========================================================================

    def _make_token(self, token_type: TokenType, value: str, line: int, column: int) -> Token:
        return Token(token_type, value, line, column, self._name or None)

    def _emit(self, token_type: TokenType) -> Token:
        """Build a token from the pending input and start the next one."""
        token = self._make_token(
            token_type,
            self._source[self._start : self._pos],
            self._line_start,
            self._column_start,
        )
        self._ignore()
        return token

    def _emit_value(self, token_type: TokenType, value: str, line: int, column: int) -> Token:
        """Build a token with an explicit value and position."""
        token = self._make_token(token_type, value, line, column)
        self._ignore()
        return token

    def _errorf(self, fmt: str, *args: object) -> StateScan:
        """Publish a terminal ILLEGAL token and stop the machine.

        The value is ``name:line:column: message`` at the current cursor
        position. The cursor is moved to the end of input.
        """
        message = fmt % args if args else fmt
        line, column = self._line, self._column
        value = f"{self._label()}:{line}:{column}: {message}"
        logger.debug("Lexing stopped: %s", value)

        self._start = self._source_len
        self._pos = self._source_len

        yield self._make_token(TokenType.ILLEGAL, value, line, column)
        return None

    def _end_statement(self) -> Iterator[Token]:
        """Insert an implicit SEMICOLON if a statement is pending.

        Nothing is inserted while a parenthesis is open.
        """
        if not self._add_semicolon or self._open_parens > 0:
            return

        self._add_semicolon = False
        if self._config.auto_semicolons:
            yield self._emit_value(TokenType.SEMICOLON, ";", self._line, self._column)

    def _label(self) -> str:
        return self._name or self._config.default_name
