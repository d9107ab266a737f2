"""Character classes for O(1) rune classification.

Sets are frozensets for O(1) membership testing and module-level caching.
A rune is a one-character string; the end-of-input sentinel is the empty
string ``EOF`` and belongs to no class.

Usage:
    from nashlex.charsets import is_arg, is_identifier

    if is_identifier(r):
        ...
"""

import unicodedata

# End-of-input sentinel returned by the cursor
EOF = ""

DIGITS = "0123456789"

SPACE: frozenset[str] = frozenset(" \t")

END_OF_LINE: frozenset[str] = frozenset("\n\r")

# Runes that can never appear in an unquoted argument
ARG_DELIMITERS: frozenset[str] = frozenset('${}()[]>",;|')

# Runes allowed right after $name
VARIABLE_TRAILERS: frozenset[str] = frozenset(";),+[](")

# Runes that end a bare word as an identifier (anything else makes it an argument)
IDENT_TERMINATORS: frozenset[str] = frozenset("=(),[")


def is_space(r: str) -> bool:
    """Horizontal whitespace (space, tab)."""
    return r in SPACE


def is_end_of_line(r: str) -> bool:
    return r in END_OF_LINE


def is_identifier(r: str) -> bool:
    """Unicode letter, Unicode decimal digit, or underscore."""
    if not r:
        return False
    return r == "_" or r.isalpha() or r.isdecimal()


def is_rune(r: str) -> bool:
    """Check that r is a Unicode scalar value (not EOF, not a lone surrogate)."""
    return bool(r) and unicodedata.category(r) != "Cs"


def is_arg(r: str) -> bool:
    """Any rune admissible in an unquoted shell argument.

    Identifier runes are a strict subset of argument runes.
    """
    if not r or r in SPACE or r in END_OF_LINE or r in ARG_DELIMITERS:
        return False
    return is_rune(r)


def ends_variable(r: str) -> bool:
    """Check whether r may follow a $name."""
    return r == EOF or r in SPACE or r in END_OF_LINE or r in VARIABLE_TRAILERS


def ends_identifier(r: str) -> bool:
    """Check whether r closes a bare word as an identifier or keyword."""
    return r == EOF or r in SPACE or r in END_OF_LINE or r in IDENT_TERMINATORS


def describe_rune(r: str) -> str:
    """Format a rune as ``U+XXXX 'c'`` for diagnostics.

    The quoted character is omitted when it is not printable.
    """
    code = f"U+{ord(r):04X}"
    if r.isprintable():
        return f"{code} '{r}'"
    return code


def quote_rune(r: str) -> str:
    """Quote a rune as a single-quoted literal (``'x'``, ``'\\n'``)."""
    if r == EOF:
        return "EOF"
    if r == "'":
        return "'\\''"
    return repr(r)
