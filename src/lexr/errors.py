"""Exception classes for lexr.

The Scanner never raises: unrecognized characters come back as ILLEGAL
tokens. These exceptions are for callers that choose to treat such tokens
as fatal, and for malformed serialized data.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lexr.tokens import Token


class LexrError(Exception):
    """Base exception for all lexr errors."""

    pass


class ScanError(LexrError):
    """Error tied to a position in scanned source."""

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            offset: Character offset in the source (0-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.offset = offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if offset is not None:
            location += f"{offset}:"
        if location:
            location = location.rstrip(":") + ": "

        super().__init__(f"{location}{message}")


class IllegalCharacterError(ScanError):
    """An ILLEGAL token reached a caller that treats it as fatal."""

    def __init__(
        self,
        token: Token,
        offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.token = token
        super().__init__(
            f"illegal character {token.text!r}", offset=offset, source_file=source_file
        )


class SerializationError(LexrError):
    """Serialized token data could not be decoded."""

    pass


__all__ = [
    "IllegalCharacterError",
    "LexrError",
    "ScanError",
    "SerializationError",
]
