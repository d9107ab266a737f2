"""Token and TokenType definitions for the nash lexer.

The lexer produces a stream of Token objects that a parser or formatter
consumes. Each Token has a type, a value, and the position where it began.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).
KEYWORDS is built once at import and never mutated.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nashlex.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category:
    - Meta (ILLEGAL, EOF, COMMENT)
    - Literals (identifiers, strings, numbers, shell arguments)
    - Operators and punctuation
    - Shell constructs (variables, pipes, redirections)
    - Keywords

    """

    # Meta
    ILLEGAL = auto()  # terminal error carrier
    EOF = auto()
    COMMENT = auto()  # # to end of line

    # Literals
    IDENT = auto()
    STRING = auto()  # "..." (escape-decoded)
    NUMBER = auto()  # [0-9]+
    ARG = auto()  # unquoted shell argument

    # Operators
    ASSIGN = auto()  # =
    ASSIGN_CMD = auto()  # <=
    EQUAL = auto()  # ==
    NOT_EQUAL = auto()  # !=
    PLUS = auto()  # +

    # Punctuation
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACK = auto()  # [
    RBRACK = auto()  # ]
    COMMA = auto()  # ,
    SEMICOLON = auto()  # ; (explicit or inserted)

    # Shell
    VARIABLE = auto()  # $name
    PIPE = auto()  # |
    GT = auto()  # >
    LT = auto()  # <

    # Keywords
    IMPORT = auto()
    SETENV = auto()
    SHOWENV = auto()
    BINDFN = auto()
    DUMP = auto()
    RETURN = auto()
    IF = auto()
    ELSE = auto()
    FOR = auto()
    FOR_IN = auto()  # in
    RFORK = auto()
    CD = auto()
    FN = auto()

    @property
    def label(self) -> str:
        """Display string of the kind ("IDENT", "<=", "FOR-IN", ...)."""
        return _LABELS[self]

    @property
    def is_literal(self) -> bool:
        return self in _LITERALS

    @property
    def is_operator(self) -> bool:
        return self in _OPERATORS

    @property
    def is_keyword(self) -> bool:
        return self in _KEYWORD_TYPES


_LABELS: dict[TokenType, str] = {
    TokenType.ILLEGAL: "ILLEGAL",
    TokenType.EOF: "EOF",
    TokenType.COMMENT: "COMMENT",
    TokenType.IDENT: "IDENT",
    TokenType.STRING: "STRING",
    TokenType.NUMBER: "NUMBER",
    TokenType.ARG: "ARG",
    TokenType.ASSIGN: "=",
    TokenType.ASSIGN_CMD: "<=",
    TokenType.EQUAL: "==",
    TokenType.NOT_EQUAL: "!=",
    TokenType.PLUS: "+",
    TokenType.LBRACE: "{",
    TokenType.RBRACE: "}",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.LBRACK: "[",
    TokenType.RBRACK: "]",
    TokenType.COMMA: ",",
    TokenType.SEMICOLON: ";",
    TokenType.VARIABLE: "VARIABLE",
    TokenType.PIPE: "|",
    TokenType.GT: ">",
    TokenType.LT: "<",
    TokenType.IMPORT: "IMPORT",
    TokenType.SETENV: "SETENV",
    TokenType.SHOWENV: "SHOWENV",
    TokenType.BINDFN: "BINDFN",
    TokenType.DUMP: "DUMP",
    TokenType.RETURN: "RETURN",
    TokenType.IF: "IF",
    TokenType.ELSE: "ELSE",
    TokenType.FOR: "FOR",
    TokenType.FOR_IN: "FOR-IN",
    TokenType.RFORK: "RFORK",
    TokenType.CD: "CD",
    TokenType.FN: "FN",
}

_LITERALS = frozenset(
    {TokenType.IDENT, TokenType.STRING, TokenType.NUMBER, TokenType.ARG}
)

_OPERATORS = frozenset(
    {
        TokenType.ASSIGN,
        TokenType.ASSIGN_CMD,
        TokenType.EQUAL,
        TokenType.NOT_EQUAL,
        TokenType.PLUS,
    }
)

# Reserved words. Only lowercase words longer than one rune are looked up.
KEYWORDS: dict[str, TokenType] = {
    "import": TokenType.IMPORT,
    "setenv": TokenType.SETENV,
    "showenv": TokenType.SHOWENV,
    "bindfn": TokenType.BINDFN,
    "dump": TokenType.DUMP,
    "return": TokenType.RETURN,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "for": TokenType.FOR,
    "in": TokenType.FOR_IN,
    "rfork": TokenType.RFORK,
    "cd": TokenType.CD,
    "fn": TokenType.FN,
}

_KEYWORD_TYPES = frozenset(KEYWORDS.values())


def lookup(ident: str) -> TokenType:
    """Return the keyword type for ident, or IDENT when it is not reserved.

    Example:
        >>> lookup("rfork")
        <TokenType.RFORK: ...>
        >>> lookup("echo")
        <TokenType.IDENT: ...>
    """
    return KEYWORDS.get(ident, TokenType.IDENT)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Decoded content for literals, source text for operators and
            punctuation, the formatted diagnostic for ILLEGAL
        line: Line where the token began (1-indexed)
        column: Column where the token began (0-indexed)
        file: Name of the lexed input (diagnostic label), if any

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    value: str
    line: int
    column: int
    file: str | None = None

    @property
    def kind(self) -> TokenType:
        """Alias of ``type`` (the name used on the wire)."""
        return self.type

    @property
    def location(self) -> SourceLocation:
        """Source location of the first rune of this token."""
        from nashlex.location import SourceLocation

        return SourceLocation(
            line=self.line, column=self.column, source_file=self.file
        )

    def __str__(self) -> str:
        if self.type is TokenType.ILLEGAL:
            return "ERROR: " + self.value
        if self.type is TokenType.EOF:
            return "EOF"

        label = self.type.label
        if len(label) > 10:
            return label[:10] + "..."
        return label

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.line}:{self.column})"
