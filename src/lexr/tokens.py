"""Token and TokenType definitions for the lexr scanner.

The scanner produces a stream of Token objects that a parser consumes.
Each Token has a type and the exact source text it was scanned from.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the scanner.

    Organized by category:
    - Literals and names (NUMBER, IDENTIFIER)
    - Single-character symbols
    - Keywords (LET)
    - Stream markers (ILLEGAL, END_OF_FILE)

    """

    # Literals and names
    NUMBER = auto()  # 42
    IDENTIFIER = auto()  # x, my_var

    # Symbols
    EQUALS = auto()  # =
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /
    OPEN_PAREN = auto()  # (
    CLOSE_PAREN = auto()  # )

    # Keywords
    LET = auto()  # let

    # Stream markers
    ILLEGAL = auto()  # Any unrecognized character
    END_OF_FILE = auto()


# Display labels that differ from the enum member name
_LABELS: dict[TokenType, str] = {
    TokenType.END_OF_FILE: "EOF",
}


def token_name(token_type: TokenType) -> str:
    """Get the human-readable label for a token type.

    Used for printing and diagnostics only.

    Args:
        token_type: The token type.

    Returns:
        The label, e.g. "NUMBER" or "EOF".

    Example:
        >>> token_name(TokenType.OPEN_PAREN)
        'OPEN_PAREN'
        >>> token_name(TokenType.END_OF_FILE)
        'EOF'
    """
    return _LABELS.get(token_type, token_type.name)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        type: The token type (from TokenType enum)
        text: The exact source substring of the lexeme ("" for END_OF_FILE)

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    text: str

    @property
    def kind(self) -> TokenType:
        """Token type (alias used by parsing code)."""
        return self.type

    @property
    def is_eof(self) -> bool:
        return self.type is TokenType.END_OF_FILE

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"Token({self.type.name}, {self.text!r})"

    def __str__(self) -> str:
        return f"Type: {token_name(self.type)}, Literal: '{self.text}'"


__all__ = ["Token", "TokenType", "token_name"]
