"""Tests for nashlex.serialization: token JSON round-trip."""

import json

import pytest

from nashlex import tokenize
from nashlex.serialization import from_dict, from_json, to_dict, to_json
from nashlex.tokens import Token, TokenType


class TestToDict:
    """Token to dict conversion."""

    def test_wire_shape(self) -> None:
        token = Token(TokenType.ASSIGN_CMD, "<=", 2, 5)
        assert to_dict(token) == {"kind": "ASSIGN_CMD", "value": "<=", "line": 2, "column": 5}

    def test_file_included_when_set(self) -> None:
        token = Token(TokenType.IDENT, "ls", 1, 0, "build.sh")
        assert to_dict(token)["file"] == "build.sh"


class TestFromDict:
    """Dict to token conversion."""

    def test_roundtrip(self) -> None:
        token = Token(TokenType.STRING, "a\nb", 1, 6, "x.sh")
        assert from_dict(to_dict(token)) == token

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError, match="Unknown token kind"):
            from_dict({"kind": "HEREDOC", "value": "", "line": 1, "column": 0})

    def test_missing_kind(self) -> None:
        with pytest.raises(ValueError, match="Missing 'kind'"):
            from_dict({"value": "", "line": 1, "column": 0})

    def test_missing_position(self) -> None:
        with pytest.raises(ValueError, match="Missing 'column'"):
            from_dict({"kind": "EOF", "value": "", "line": 1})


class TestJson:
    """JSON array round-trip."""

    def test_stream_roundtrip(self) -> None:
        tokens = tokenize('fn build(image) {\n\techo "hi" >[2=1]\n}', "b.sh")
        assert from_json(to_json(tokens)) == tokens

    def test_deterministic_key_order(self) -> None:
        text = to_json(tokenize("ls"))
        first = json.loads(text)[0]
        assert list(first) == ["column", "kind", "line", "value"]

    def test_indent(self) -> None:
        assert "\n" in to_json(tokenize("ls"), indent=2)

    def test_not_an_array(self) -> None:
        with pytest.raises(ValueError, match="Expected a JSON array"):
            from_json('{"kind": "EOF"}')
