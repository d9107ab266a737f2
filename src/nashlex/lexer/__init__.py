"""State-machine lexer for the nash shell language.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerState
├── core.py              # Lexer class (mixin composition, cursor, emitter)
├── states.py            # LexerState enum, StateScan alias
└── scanners/            # State scanners
    ├── start.py         # Start state (main dispatch)
    ├── quote.py         # Double-quoted strings
    ├── comment.py       # # comments
    └── space.py         # Spaces and tabs

Usage:
    >>> from nashlex.lexer import Lexer
    >>> lexer = Lexer("demo", "ls -la")
    >>> for token in lexer.tokens:
    ...     print(repr(token))
Token(IDENT, 'ls', 1:0)
Token(ARG, '-la', 1:3)
Token(SEMICOLON, ';', 1:6)
Token(EOF, '', 1:6)

"""

from nashlex.lexer.core import Lexer
from nashlex.lexer.states import LexerState

__all__ = ["Lexer", "LexerState"]
