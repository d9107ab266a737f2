"""Tests for the nashlex command-line token dumper."""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path

import pytest

from nashlex.cli import format_token, main
from nashlex.tokens import Token, TokenType


class TestFormatToken:
    def test_with_value(self) -> None:
        assert format_token(Token(TokenType.IDENT, "ls", 1, 0)) == "1:0 IDENT 'ls'"

    def test_without_value(self) -> None:
        assert format_token(Token(TokenType.EOF, "", 3, 2)) == "3:2 EOF"


class TestMain:
    """End-to-end runs of main()."""

    def test_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        script = tmp_path / "hello.sh"
        script.write_text('echo "hello"\n')

        assert main([str(script)]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "1:0 IDENT 'echo'",
            "1:6 STRING 'hello'",
            "2:0 SEMICOLON ';'",
            "2:0 EOF",
        ]

    def test_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"ls")))

        assert main(["-"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "1:0 IDENT 'ls'"

    def test_stdin_invalid_utf8(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"echo caf\xe9")))

        assert main(["-"]) == 0
        assert capsys.readouterr().out.splitlines()[1] == "1:5 ARG 'caf\ufffd'"

    def test_json(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        script = tmp_path / "a.sh"
        script.write_text("ls")

        assert main([str(script), "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert [item["kind"] for item in data] == ["IDENT", "SEMICOLON", "EOF"]
        assert data[0]["file"] == str(script)

    def test_flags(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        script = tmp_path / "a.sh"
        script.write_text("ls # c\npwd\n")

        assert main([str(script), "--skip-comments", "--no-semicolons"]) == 0

        kinds = [line.split()[1] for line in capsys.readouterr().out.splitlines()]
        assert kinds == ["IDENT", "IDENT", "EOF"]

    def test_illegal_exit_status(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script = tmp_path / "bad.sh"
        script.write_text('echo "open')

        assert main([str(script)]) == 1
        assert "Quoted string not finished" in capsys.readouterr().out

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "missing.sh")]) == 2
        assert "cannot read" in capsys.readouterr().err

    def test_verbose_logs_errors(
        self,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        script = tmp_path / "bad.sh"
        script.write_text("$")

        with caplog.at_level(logging.DEBUG, logger="nashlex"):
            assert main([str(script), "-v"]) == 1

        assert any("Lexing stopped" in r.getMessage() for r in caplog.records)
