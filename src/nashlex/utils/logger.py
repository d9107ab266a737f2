"""Logger lookup for nashlex modules.

Every nashlex logger lives under the ``nashlex`` namespace, so a single
level setting covers the whole package. Two modules log, both at DEBUG:

- ``nashlex.lexer.core`` when a stream ends in an ILLEGAL token or is
  closed before EOF
- ``nashlex.stream`` when a TokenStream raises an ILLEGAL token as
  LexError

No handlers are installed. ``nashlex -v`` turns the output on from the
command line; library users configure ``logging`` themselves:

    >>> import logging
    >>> logging.getLogger("nashlex").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging

_ROOT = "nashlex"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for name inside the nashlex namespace.

    Args:
        name: Module name, usually ``__name__``. Names outside the package
            are nested under it.

    Example:
        >>> get_logger("scanner").name
        'nashlex.scanner'
        >>> get_logger("nashlex.stream").name
        'nashlex.stream'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
