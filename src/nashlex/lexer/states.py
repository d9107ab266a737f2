"""Lexer states.

This module defines the states of the scanning state machine. Each state
is served by one scanner method (see ``Lexer._STATE_SCANNERS``); a scanner
returns the next state, or None to stop the machine.
"""

from __future__ import annotations

from collections.abc import Generator
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nashlex.tokens import Token


class LexerState(Enum):
    """Lexer states.

    - START: Between tokens, dispatching on the next rune
    - SPACE: Skipping a run of spaces and tabs
    - QUOTE: Inside a double-quoted string
    - COMMENT: Inside a # comment

    """

    START = auto()
    SPACE = auto()
    QUOTE = auto()
    COMMENT = auto()


# A scanner yields tokens and returns the next state (None stops the machine)
StateScan = Generator["Token", None, "LexerState | None"]
