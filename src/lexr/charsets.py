"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Classes are spelled out in ASCII rather than delegated to str.isdigit()
or str.isalpha(), which also accept non-ASCII digits and letters.

Usage:
    from lexr.charsets import DIGITS

    if char in DIGITS:  # O(1) lookup
        ...
"""

from __future__ import annotations

from types import MappingProxyType

from lexr.tokens import TokenType

# Skipped between lexemes, never part of a token
WHITESPACE: frozenset[str] = frozenset(" \t\n\r")

DIGITS: frozenset[str] = frozenset("0123456789")

ASCII_LETTERS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

# Characters that may start and continue an identifier.
# Digits are deliberately absent: "x1" scans as IDENTIFIER then NUMBER.
WORD_CHARS: frozenset[str] = ASCII_LETTERS | frozenset("_")

# Single-character symbols and the token type each one produces
SYMBOLS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "=": TokenType.EQUALS,
        "+": TokenType.PLUS,
        "-": TokenType.MINUS,
        "*": TokenType.STAR,
        "/": TokenType.SLASH,
        "(": TokenType.OPEN_PAREN,
        ")": TokenType.CLOSE_PAREN,
    }
)

# Reserved words, matched against the whole scanned word
KEYWORDS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "let": TokenType.LET,
    }
)

__all__ = [
    "ASCII_LETTERS",
    "DIGITS",
    "KEYWORDS",
    "SYMBOLS",
    "WHITESPACE",
    "WORD_CHARS",
]
