"""Number scanning mixin."""

from __future__ import annotations

from lexr.charsets import DIGITS
from lexr.tokens import Token, TokenType


class NumberScannerMixin:
    """Mixin providing decimal integer scanning."""

    __slots__ = ()

    _pos: int
    _char: str

    def _read_char(self) -> None:
        """Advance the cursor one character. Implemented by Scanner."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, start_pos: int) -> Token:
        """Create token from start_pos to the cursor. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_number(self) -> Token:
        """Scan a run of ASCII digits into a NUMBER token.

        Maximal munch: "123" is one token. No sign, decimal point or
        exponent, and leading zeros are kept as written ("007").

        Returns:
            NUMBER token; the cursor sits just past the last digit.
        """
        start = self._pos
        while self._char in DIGITS:
            self._read_char()
        return self._make_token(TokenType.NUMBER, start)
