"""Whitespace skipping mixin."""

from __future__ import annotations

from lexr.charsets import WHITESPACE


class WhitespaceScannerMixin:
    """Mixin providing the whitespace skip that precedes every lexeme."""

    __slots__ = ()

    _char: str

    def _read_char(self) -> None:
        """Advance the cursor one character. Implemented by Scanner."""
        raise NotImplementedError

    def _skip_whitespace(self) -> None:
        """Advance past spaces, tabs, newlines and carriage returns.

        Stops on the sentinel, so this never runs past end of input.
        """
        while self._char in WHITESPACE:
            self._read_char()
