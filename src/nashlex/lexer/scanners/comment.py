"""Comment scanner mixin."""

from __future__ import annotations

from nashlex.charsets import EOF, is_end_of_line
from nashlex.lexer.states import LexerState, StateScan
from nashlex.tokens import Token, TokenType


class CommentScannerMixin:
    """Mixin providing the comment state.

    A comment runs from ``#`` to the end of the line; the line break is left
    for the start state so that it can still end the statement.

    """

    def _next(self) -> str:
        raise NotImplementedError

    def _backup(self) -> None:
        raise NotImplementedError

    def _emit(self, token_type: TokenType) -> Token:
        raise NotImplementedError

    def _scan_comment(self) -> StateScan:
        while True:
            r = self._next()
            if r == EOF or is_end_of_line(r):
                break

        self._backup()
        yield self._emit(TokenType.COMMENT)
        return LexerState.START
