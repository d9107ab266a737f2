"""Utility modules for nashlex.

Provides:
- logger: get_logger for logging
"""

from nashlex.utils.logger import get_logger

__all__ = [
    "get_logger",
]
