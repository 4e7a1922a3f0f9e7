"""Sub-scanners for the lexr scanner.

Each mixin provides one bounded run inside the SCANNING state:
whitespace skipping, digit runs and word runs.
"""

from __future__ import annotations

from lexr.lexer.scanners.number import NumberScannerMixin
from lexr.lexer.scanners.whitespace import WhitespaceScannerMixin
from lexr.lexer.scanners.word import WordScannerMixin

__all__ = [
    "NumberScannerMixin",
    "WhitespaceScannerMixin",
    "WordScannerMixin",
]
