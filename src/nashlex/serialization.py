"""Token serialization: JSON round-trip for nashlex token streams.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Golden files for lexer regression tests
- Feeding token streams to tools written in other languages
- Debugging and inspection (``nashlex --json``)

A serialized token has the keys ``kind`` (the TokenType member name),
``value``, ``line`` and ``column``, plus ``file`` when the token carries
one. Output is deterministic (sorted keys).

Example:
    from nashlex import tokenize
    from nashlex.serialization import to_json, from_json

    tokens = tokenize("echo hello")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure, safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from nashlex.tokens import Token, TokenType


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict."""
    result: dict[str, Any] = {
        "kind": token.type.name,
        "value": token.value,
        "line": token.line,
        "column": token.column,
    }
    if token.file is not None:
        result["file"] = token.file
    return result


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict.

    Args:
        data: Dict as produced by to_dict.

    Returns:
        The Token.

    Raises:
        ValueError: If ``kind`` is missing or unknown, or a position field
            is missing.

    """
    kind = data.get("kind")
    if kind is None:
        msg = "Missing 'kind' field in serialized token"
        raise ValueError(msg)

    try:
        token_type = TokenType[kind]
    except KeyError:
        msg = f"Unknown token kind: {kind!r}"
        raise ValueError(msg) from None

    try:
        line = int(data["line"])
        column = int(data["column"])
    except KeyError as e:
        msg = f"Missing {e.args[0]!r} field in serialized token"
        raise ValueError(msg) from None

    return Token(token_type, data.get("value", ""), line, column, data.get("file"))


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token sequence to a JSON array.

    Args:
        tokens: Tokens to serialize (a list or a live stream).
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps([to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Token]:
    """Deserialize a token list from a JSON string.

    Raises:
        ValueError: If the JSON is not an array of serialized tokens.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array of tokens, got {type(raw).__name__}"
        raise ValueError(msg)
    return [from_dict(item) for item in raw]
