"""State scanners for the nashlex lexer.

Each scanner is a mixin that provides scanning logic for one lexer state
(START, QUOTE, COMMENT, SPACE).
"""

from __future__ import annotations

from nashlex.lexer.scanners.comment import CommentScannerMixin
from nashlex.lexer.scanners.quote import QuoteScannerMixin
from nashlex.lexer.scanners.space import SpaceScannerMixin
from nashlex.lexer.scanners.start import StartScannerMixin

__all__ = [
    "CommentScannerMixin",
    "QuoteScannerMixin",
    "SpaceScannerMixin",
    "StartScannerMixin",
]
