"""One-token lookahead over a lexer stream.

A parser reads the token stream through a single-slot buffer: it can peek
at the next token, or take one and push it back once. ILLEGAL tokens are
turned into LexError here, so the parser sees lexical errors as exceptions
at the point where it reads them.

Usage:
    >>> from nashlex import lex
    >>> from nashlex.stream import TokenStream
    >>> from nashlex.tokens import TokenType
    >>> stream = TokenStream(lex("demo", "a = b"))
    >>> stream.expect(TokenType.IDENT).value
    'a'
    >>> stream.peek().type
    <TokenType.ASSIGN: ...>

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from nashlex.errors import LexError, LookaheadError, StreamClosedError
from nashlex.tokens import Token, TokenType
from nashlex.utils.logger import get_logger

logger = get_logger(__name__)


class TokenStream:
    """Single-slot lookahead buffer over a token iterator.

    Accepts a Lexer (anything iterable over tokens works).

    """

    __slots__ = ("_tokens", "_lookahead", "_last")

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: Iterator[Token] = iter(tokens)
        self._lookahead: Token | None = None
        self._last: Token | None = None

    def next(self) -> Token:
        """Consume and return the next token.

        Raises:
            LexError: The next token is ILLEGAL.
            StreamClosedError: The underlying stream is exhausted.
        """
        token = self._pull()
        self._last = token
        if token.type is TokenType.ILLEGAL:
            logger.debug("Raising lexical error: %s", token.value)
            raise LexError.from_token(token)
        return token

    def peek(self) -> Token:
        """Return the next token without consuming it.

        An ILLEGAL token is returned as is; it raises once consumed.
        """
        if self._lookahead is None:
            self._lookahead = self._pull()
        return self._lookahead

    def _pull(self) -> Token:
        if self._lookahead is not None:
            token = self._lookahead
            self._lookahead = None
            return token
        try:
            return next(self._tokens)
        except StopIteration:
            raise StreamClosedError() from None

    def backup(self, token: Token) -> None:
        """Push one token back onto the stream.

        Raises:
            LookaheadError: A token is already buffered.
        """
        if self._lookahead is not None:
            msg = f"Lookahead buffer full (holding {self._lookahead!r})"
            raise LookaheadError(msg)
        self._lookahead = token

    def ignore(self) -> None:
        """Drop the next token."""
        self.next()

    def expect(self, *types: TokenType) -> Token:
        """Consume the next token, requiring one of the given types.

        Raises:
            LexError: The token has another type. The token is left in the
                buffer so the caller can recover.
        """
        previous = self._last
        token = self.next()
        if token.type in types:
            return token

        self._lookahead = token
        self._last = previous
        expected = ", ".join(t.label for t in types)
        raise LexError(
            f"Unexpected token {token.type.label}. Expected {expected}",
            token.line,
            token.column,
            token.file,
        )

    def at_end(self) -> bool:
        """True when the next token is EOF or the stream is exhausted."""
        try:
            return self.peek().type is TokenType.EOF
        except StreamClosedError:
            return True

    @property
    def last(self) -> Token | None:
        """The most recently consumed token."""
        return self._last

    def __iter__(self) -> Iterator[Token]:
        while True:
            try:
                yield self.next()
            except StreamClosedError:
                return
