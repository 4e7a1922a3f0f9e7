"""Logger lookup for lexr modules.

Every lexr logger hangs off the "lexr" logger, so an application can turn on
scanner diagnostics with one call:

    >>> import logging
    >>> logging.getLogger("lexr").setLevel(logging.DEBUG)

The library itself never installs handlers; the command-line entry point
does, when run with --verbose.
"""

from __future__ import annotations

import logging

_ROOT = "lexr"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for `name`, placed under the "lexr" hierarchy.

    Module names inside the package are used as-is. Anything else is
    prefixed, so "helpers" and "lexr_tools" become "lexr.helpers" and
    "lexr.lexr_tools".

    Example:
        >>> get_logger("lexr.lexer.core").name
        'lexr.lexer.core'
        >>> get_logger("helpers").name
        'lexr.helpers'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
