"""
lexr: a small maximal-munch scanner for arithmetic `let` statements.

Turns source text into a stream of classified tokens for a parser to
consume. Pure Python, zero runtime dependencies.

Quick Start:
    >>> from lexr import Scanner
    >>> scanner = Scanner("let x = 42 + (15 - 3)")
    >>> scanner.next_token()
    Token(LET, 'let')

    >>> # Or scan everything at once
    >>> from lexr import tokenize
    >>> [t.text for t in tokenize("x * 2")]
    ['x', '*', '2', '']
"""

from lexr.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from lexr.errors import IllegalCharacterError, LexrError, ScanError, SerializationError
from lexr.lexer import SENTINEL, Scanner, ScannerState
from lexr.tokens import Token, TokenType, token_name

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    strict: bool | None = None,
    source_file: str | None = None,
) -> list[Token]:
    """Scan a whole source string.

    Args:
        source: Source text
        strict: Raise on the first ILLEGAL token. None uses the active
            ScanConfig's strict flag.
        source_file: Name reported in strict-mode errors (optional)

    Returns:
        All tokens, ending with a single END_OF_FILE.

    Raises:
        IllegalCharacterError: In strict mode, on the first unrecognized
            character.

    Example:
        >>> tokenize("@")
        [Token(ILLEGAL, '@'), Token(END_OF_FILE, '')]
        >>> tokenize("@", strict=True)
        Traceback (most recent call last):
        ...
        lexr.errors.IllegalCharacterError: 0: illegal character '@'
    """
    if strict is None:
        strict = get_scan_config().strict

    scanner = Scanner(source)
    tokens: list[Token] = []
    for token in scanner.tokenize():
        if strict and token.type is TokenType.ILLEGAL:
            # ILLEGAL is always one character, so it starts one before the cursor
            raise IllegalCharacterError(
                token, offset=scanner.position - 1, source_file=source_file
            )
        tokens.append(token)
    return tokens


__all__ = [
    "SENTINEL",
    "IllegalCharacterError",
    "LexrError",
    "ScanConfig",
    "ScanError",
    "Scanner",
    "ScannerState",
    "SerializationError",
    "Token",
    "TokenType",
    "__version__",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    "token_name",
    "tokenize",
]
