"""Command-line interface: dump the token stream of a nash script."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from nashlex.config import LexConfig
from nashlex.lexer import Lexer
from nashlex.serialization import to_json
from nashlex.tokens import Token, TokenType


def format_token(token: Token) -> str:
    """One dump line: ``line:column KIND value``."""
    line = f"{token.line}:{token.column} {token.type.name}"
    if token.value:
        line += f" {token.value!r}"
    return line


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the nashlex token dumper."""
    parser = argparse.ArgumentParser(
        prog="nashlex",
        description="Print the tokens of a nash script",
    )
    parser.add_argument(
        "source",
        nargs="?",
        default="-",
        help="Script to lex (default: read standard input)",
    )
    parser.add_argument("--json", action="store_true", help="Print the token list as JSON")
    parser.add_argument(
        "--skip-comments",
        action="store_true",
        help="Drop COMMENT tokens",
    )
    parser.add_argument(
        "--no-semicolons",
        action="store_true",
        help="Do not insert implicit SEMICOLON tokens",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.source == "-":
        name = "<stdin>"
        source = sys.stdin.buffer.read()
    else:
        path = Path(args.source)
        name = str(path)
        try:
            source = path.read_bytes()
        except OSError as e:
            print(f"Error: cannot read '{path}': {e.strerror}", file=sys.stderr)
            return 2

    config = LexConfig(
        auto_semicolons=not args.no_semicolons,
        skip_comments=args.skip_comments,
    )
    tokens = list(Lexer(name, source, config=config).tokens)

    if args.json:
        print(to_json(tokens))
    else:
        for token in tokens:
            print(format_token(token))

    if any(t.type is TokenType.ILLEGAL for t in tokens):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
