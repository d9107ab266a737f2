"""Start state scanner mixin (the dispatch state)."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from nashlex.charsets import (
    DIGITS,
    EOF,
    describe_rune,
    ends_identifier,
    ends_variable,
    is_arg,
    is_end_of_line,
    is_identifier,
    is_space,
    quote_rune,
)
from nashlex.lexer.states import LexerState, StateScan
from nashlex.tokens import Token, TokenType, lookup

# Single-rune tokens that touch neither the parenthesis count nor the latch
SIMPLE_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    ">": TokenType.GT,
    "|": TokenType.PIPE,
    "[": TokenType.LBRACK,
    "]": TokenType.RBRACK,
    ",": TokenType.COMMA,
}

# Runes after a digit run that keep it a NUMBER (>[2=1], $list[0])
NUMBER_TERMINATORS: frozenset[str] = frozenset("=]")


class StartScannerMixin:
    """Mixin providing the start state.

    Consumes one rune and dispatches on it: single tokens are emitted
    directly, bare words are classified as NUMBER, IDENT, keyword or ARG,
    and strings, comments and whitespace hand over to their own states.

    Implicit statement termination lives here too: a statement-ending token
    sets the ``_add_semicolon`` latch, and the next newline (outside
    parentheses) or EOF turns the latch into a SEMICOLON token.

    """

    # These will be set by the Lexer class
    _source: str
    _start: int
    _pos: int
    _open_parens: int
    _add_semicolon: bool

    def _next(self) -> str:
        raise NotImplementedError

    def _peek(self) -> str:
        raise NotImplementedError

    def _ignore(self) -> None:
        raise NotImplementedError

    def _accept(self, valid: str) -> bool:
        raise NotImplementedError

    def _accept_run(self, valid: str) -> None:
        raise NotImplementedError

    def _accept_while(self, predicate: Callable[[str], bool]) -> None:
        raise NotImplementedError

    def _absorb_identifier(self) -> None:
        raise NotImplementedError

    def _absorb_argument(self) -> None:
        raise NotImplementedError

    def _emit(self, token_type: TokenType) -> Token:
        raise NotImplementedError

    def _errorf(self, fmt: str, *args: object) -> StateScan:
        raise NotImplementedError

    def _end_statement(self) -> Iterator[Token]:
        raise NotImplementedError

    def _scan_start(self) -> StateScan:
        """Dispatch on the next rune."""
        r = self._next()

        if r == EOF:
            yield from self._end_statement()
            return None

        if r in DIGITS:
            return (yield from self._scan_number())

        if r == ";":
            self._add_semicolon = False
            yield self._emit(TokenType.SEMICOLON)
            return LexerState.START

        if is_space(r):
            return LexerState.SPACE

        if is_end_of_line(r):
            self._ignore()
            yield from self._end_statement()
            return LexerState.START

        if r == '"':
            self._ignore()
            return LexerState.QUOTE

        if r == "#":
            return LexerState.COMMENT

        simple = SIMPLE_TOKENS.get(r)
        if simple is not None:
            yield self._emit(simple)
            return LexerState.START

        if r == "$":
            return (yield from self._scan_variable())

        if r == "=":
            yield self._emit(TokenType.EQUAL if self._accept("=") else TokenType.ASSIGN)
            return LexerState.START

        if r == "!":
            if self._accept("="):
                yield self._emit(TokenType.NOT_EQUAL)
            else:
                # bare ! is an argument
                self._add_semicolon = True
                yield self._emit(TokenType.ARG)
            return LexerState.START

        if r == "<":
            yield self._emit(TokenType.ASSIGN_CMD if self._accept("=") else TokenType.LT)
            return LexerState.START

        if r == "{":
            self._add_semicolon = False
            yield self._emit(TokenType.LBRACE)
            return LexerState.START

        if r == "}":
            yield self._emit(TokenType.RBRACE)
            self._add_semicolon = False
            return LexerState.START

        if r == "(":
            self._open_parens += 1
            yield self._emit(TokenType.LPAREN)
            self._add_semicolon = False
            return LexerState.START

        if r == ")":
            if self._open_parens > 0:
                self._open_parens -= 1
            yield self._emit(TokenType.RPAREN)
            self._add_semicolon = True
            return LexerState.START

        if is_identifier(r):
            return (yield from self._scan_word())

        if is_arg(r):
            self._absorb_argument()
            self._add_semicolon = True
            yield self._emit(TokenType.ARG)
            return LexerState.START

        return (yield from self._errorf("Unrecognized character in action: %s", describe_rune(r)))

    def _scan_number(self) -> StateScan:
        """Scan a word starting with a digit.

        A digit run is a NUMBER when it stands alone (or inside a
        redirection map / index); letters turn it into an identifier,
        other argument runes into an argument.
        """
        self._accept_run(DIGITS)
        r = self._peek()

        if r in NUMBER_TERMINATORS or not is_arg(r):
            yield self._emit(TokenType.NUMBER)
            return LexerState.START

        token_type = TokenType.ARG
        if is_identifier(r):
            self._absorb_identifier()
            if is_arg(self._peek()):
                self._absorb_argument()
            else:
                token_type = TokenType.IDENT
        else:
            self._absorb_argument()

        self._add_semicolon = True
        yield self._emit(token_type)
        return LexerState.START

    def _scan_word(self) -> StateScan:
        """Scan a bare word starting with a letter or underscore."""
        self._absorb_identifier()

        if ends_identifier(self._peek()):
            word = self._source[self._start : self._pos]
            token_type = TokenType.IDENT
            # nash keywords are lowercase
            if len(word) > 1 and "a" <= word[0] <= "z":
                token_type = lookup(word)
        else:
            self._absorb_argument()
            token_type = TokenType.ARG

        if not (self._peek() == EOF and self._open_parens > 0):
            self._add_semicolon = True

        yield self._emit(token_type)
        return LexerState.START

    def _scan_variable(self) -> StateScan:
        """Scan $name. The $ has been consumed."""
        r = self._next()
        if not is_identifier(r):
            return (yield from self._errorf("Expected identifier, but found %s", quote_rune(r)))

        self._absorb_identifier()

        r = self._peek()
        if not ends_variable(r):
            return (yield from self._errorf("Unrecognized character in action: %s", describe_rune(r)))

        yield self._emit(TokenType.VARIABLE)
        return LexerState.START
