"""Pull-based scanner with O(n) guaranteed performance.

Each call to next_token() skips whitespace, classifies the current
character, and consumes exactly one lexeme. Every branch either advances
the cursor or reports end of input, so scanning always terminates.

No regex in the hot path. Character classes are ASCII frozensets.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from lexr.charsets import DIGITS, SYMBOLS, WORD_CHARS
from lexr.config import ScanConfig, get_scan_config
from lexr.lexer.modes import ScannerState
from lexr.lexer.scanners import (
    NumberScannerMixin,
    WhitespaceScannerMixin,
    WordScannerMixin,
)
from lexr.tokens import Token, TokenType
from lexr.utils.logger import get_logger

logger = get_logger(__name__)

# Value of `current` once the cursor has moved past the last character
SENTINEL = ""


class Scanner(
    WhitespaceScannerMixin,
    NumberScannerMixin,
    WordScannerMixin,
):
    """Maximal-munch scanner over a fully materialized source string.

    Cursor:
        position: index of the character being examined
        next_position: index of the character after it
        current: source[position], or SENTINEL past the end

    position < next_position always holds, and position never decreases.

    Usage:
            >>> scanner = Scanner("let x = 42")
            >>> scanner.next_token()
        Token(LET, 'let')
            >>> scanner.next_token()
        Token(IDENTIFIER, 'x')

    Thread Safety:
        Scanner instances are single-use. Create one per source string.
        Do not call next_token() on one instance from several threads.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_next_pos",
        "_char",
        "_state",
        "_config",
    )

    def __init__(self, source: str, *, config: ScanConfig | None = None) -> None:
        """Initialize scanner and load the first character.

        Args:
            source: Complete source text
            config: Scan configuration (defaults to the active context config)
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._next_pos = 0
        self._char = SENTINEL
        self._state = ScannerState.SCANNING
        self._config = config if config is not None else get_scan_config()
        self._read_char()

    # =========================================================================
    # Public API
    # =========================================================================

    def next_token(self) -> Token:
        """Consume one lexeme and return its token.

        Never raises. Unrecognized characters come back as ILLEGAL tokens,
        one character each. Once end of input is reached every call returns
        END_OF_FILE without moving the cursor.

        Returns:
            The next Token.
        """
        self._skip_whitespace()
        char = self._char

        if char == SENTINEL:
            if self._state is ScannerState.SCANNING:
                self._state = ScannerState.DONE
                logger.debug("End of input at offset %d", self._pos)
            return Token(TokenType.END_OF_FILE, "")

        token_type = SYMBOLS.get(char)
        if token_type is not None:
            self._read_char()
            return Token(token_type, char)

        if char in DIGITS:
            return self._scan_number()

        if char in WORD_CHARS:
            return self._scan_word()

        if self._config.log_illegal:
            logger.debug("Illegal character %r at offset %d", char, self._pos)
        self._read_char()
        return Token(TokenType.ILLEGAL, char)

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens up to and including the first END_OF_FILE.

        Complexity: O(n) where n = len(source)
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.END_OF_FILE:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        """Index of the character currently being examined."""
        return self._pos

    @property
    def next_position(self) -> int:
        """Index of the character to examine after the current one."""
        return self._next_pos

    @property
    def current(self) -> str:
        """Character at position, or SENTINEL past the end."""
        return self._char

    @property
    def state(self) -> ScannerState:
        return self._state

    @property
    def exhausted(self) -> bool:
        """True once END_OF_FILE has been returned."""
        return self._state is ScannerState.DONE

    def __repr__(self) -> str:
        return f"<Scanner {self._state.name} @{self._pos} {self._source[self._pos :][:20]!r}>"

    # =========================================================================
    # Cursor navigation
    # =========================================================================

    def _read_char(self) -> None:
        """Move the cursor forward one character.

        Past the end of source, current becomes SENTINEL. Callers stop on
        the sentinel, so the cursor settles at position == len(source).
        """
        if self._next_pos >= self._source_len:
            self._char = SENTINEL
        else:
            self._char = self._source[self._next_pos]
        self._pos = self._next_pos
        self._next_pos += 1

    def _make_token(self, token_type: TokenType, start_pos: int) -> Token:
        """Create a Token spanning start_pos to the cursor."""
        return Token(token_type, self._source[start_pos : self._pos])
