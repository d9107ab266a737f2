"""
nashlex: lexer for the nash shell language

Turns nash source text into a stream of typed, positioned tokens for a
parser or formatter. Lexing is lazy: the lexer advances only as tokens are
pulled, and a lexical error ends the stream with one ILLEGAL token
followed by EOF. Zero runtime dependencies.

Quick Start:
    >>> from nashlex import tokenize
    >>> for token in tokenize('echo "hello world"'):
    ...     print(repr(token))
    Token(IDENT, 'echo', 1:0)
    Token(STRING, 'hello world', 1:6)
    Token(SEMICOLON, ';', 1:18)
    Token(EOF, '', 1:18)

    >>> # Or pull tokens one at a time
    >>> from nashlex import lex
    >>> lexer = lex("build.sh", "rfork u { ls }")
    >>> lexer.next_token()
    Token(RFORK, 'rfork', 1:0)

Installation:
    pip install nashlex
"""

from nashlex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from nashlex.errors import LexError, LookaheadError, NashlexError, StreamClosedError
from nashlex.lexer import Lexer, LexerState
from nashlex.location import SourceLocation
from nashlex.stream import TokenStream
from nashlex.tokens import KEYWORDS, Token, TokenType, lookup

__version__ = "0.1.0"


def lex(name: str, source: str | bytes, *, config: LexConfig | None = None) -> Lexer:
    """Start lexing source and return the lexer.

    Nothing is scanned until the first token is pulled from
    ``lexer.tokens`` (or ``lexer.next_token()``).

    Args:
        name: Diagnostic label for error messages (may be empty)
        source: nash source text; bytes are decoded as UTF-8
        config: Optional explicit configuration (default: active LexConfig)

    Returns:
        The Lexer, whose token stream ends with EOF.

    """
    return Lexer(name, source, config=config)


def tokenize(
    source: str | bytes,
    name: str = "",
    *,
    config: LexConfig | None = None,
) -> list[Token]:
    """Lex source to completion and return every token, EOF included.

    Example:
        >>> [t.type.name for t in tokenize("a = b")]
        ['IDENT', 'ASSIGN', 'IDENT', 'SEMICOLON', 'EOF']

    """
    return list(Lexer(name, source, config=config).tokens)


__all__ = [  # noqa: RUF022 (grouped by category)
    "__version__",
    # Entry points
    "lex",
    "tokenize",
    "Lexer",
    "LexerState",
    # Tokens
    "Token",
    "TokenType",
    "KEYWORDS",
    "lookup",
    "SourceLocation",
    # Consumers
    "TokenStream",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Errors
    "NashlexError",
    "LexError",
    "StreamClosedError",
    "LookaheadError",
]
