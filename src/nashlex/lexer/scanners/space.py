"""Whitespace scanner mixin."""

from __future__ import annotations

from nashlex.lexer.states import LexerState, StateScan


class SpaceScannerMixin:
    """Mixin providing the space state (runs of spaces and tabs)."""

    def _ignore(self) -> None:
        raise NotImplementedError

    def _absorb_spaces(self) -> None:
        raise NotImplementedError

    def _scan_space(self) -> StateScan:
        """Skip whitespace. Produces no tokens."""
        self._absorb_spaces()
        self._ignore()
        yield from ()
        return LexerState.START
