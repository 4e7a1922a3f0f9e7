"""Scanner package for lexr.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, ScannerState
├── core.py              # Scanner class (mixin composition + cursor)
├── modes.py             # ScannerState enum
└── scanners/            # Bounded sub-scans
    ├── whitespace.py    # Whitespace skip
    ├── number.py        # Digit runs
    └── word.py          # Identifiers and keywords

Usage:
    >>> from lexr.lexer import Scanner
    >>> for token in Scanner("let x = 1").tokenize():
    ...     print(token)
Type: LET, Literal: 'let'
Type: IDENTIFIER, Literal: 'x'
Type: EQUALS, Literal: '='
Type: NUMBER, Literal: '1'
Type: EOF, Literal: ''

"""

from lexr.lexer.core import SENTINEL, Scanner
from lexr.lexer.modes import ScannerState

__all__ = ["SENTINEL", "Scanner", "ScannerState"]
