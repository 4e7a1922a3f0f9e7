"""Identifier and keyword scanning mixin."""

from __future__ import annotations

from lexr.charsets import KEYWORDS, WORD_CHARS
from lexr.tokens import Token, TokenType


class WordScannerMixin:
    """Mixin providing identifier scanning and keyword lookup."""

    __slots__ = ()

    _source: str
    _pos: int
    _char: str

    def _read_char(self) -> None:
        """Advance the cursor one character. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_word(self) -> Token:
        """Scan a run of ASCII letters and underscores.

        Digits end the word, so "x1" scans as IDENTIFIER "x" followed by
        NUMBER "1". The finished word is looked up whole in KEYWORDS:
        "let" is LET, "letx" and "le" are identifiers.

        Returns:
            LET or IDENTIFIER token; the cursor sits just past the word.
        """
        start = self._pos
        while self._char in WORD_CHARS:
            self._read_char()
        word = self._source[start : self._pos]
        return Token(KEYWORDS.get(word, TokenType.IDENTIFIER), word)
