"""Scanner states.

The scanner is a two-state machine. The whitespace, digit and word runs
are bounded sub-scans inside SCANNING, not states of their own.
"""

from __future__ import annotations

from enum import Enum, auto


class ScannerState(Enum):
    """Scanner states.

    - SCANNING: Input remains; each call consumes one lexeme
    - DONE: End of input observed; every call yields END_OF_FILE

    DONE is terminal.
    """

    SCANNING = auto()
    DONE = auto()
