"""Token serialization: JSON round-trip for lexr token streams.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Handing a token stream to tools written in other languages
- Golden-file tests
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from lexr import tokenize
    from lexr.serialization import to_json, from_json

    tokens = tokenize("let x = 1")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure, safe to call from any thread.

"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from lexr.errors import SerializationError
from lexr.tokens import Token, TokenType


def to_dict(token: Token) -> dict[str, str]:
    """Convert a token to a JSON-compatible dict.

    Example:
        >>> to_dict(Token(TokenType.NUMBER, "42"))
        {'type': 'NUMBER', 'text': '42'}
    """
    return {"type": token.type.name, "text": token.text}


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by to_dict().

    Raises:
        SerializationError: If a key is missing, a value is not a string,
            or the type name is unknown.
    """
    try:
        type_name = data["type"]
        text = data["text"]
    except KeyError as e:
        raise SerializationError(f"Token data missing key: {e.args[0]!r}") from e
    except TypeError as e:
        raise SerializationError(f"Token data must be a mapping, got {type(data).__name__}") from e

    if not isinstance(type_name, str):
        raise SerializationError(f"Token type must be a string, got {type(type_name).__name__}")
    try:
        token_type = TokenType[type_name]
    except KeyError as e:
        raise SerializationError(f"Unknown token type: {type_name!r}") from e

    if not isinstance(text, str):
        raise SerializationError(f"Token text must be a string, got {type(text).__name__}")
    return Token(token_type, text)


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token stream to a JSON array string."""
    return json.dumps([to_dict(t) for t in tokens], indent=indent, sort_keys=True)


def from_json(json_str: str) -> list[Token]:
    """Deserialize a JSON array string into a list of tokens.

    Raises:
        SerializationError: If the text is not valid JSON or not a list of
            token dicts.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise SerializationError("Token stream must be a JSON array")
    return [from_dict(item) for item in data]


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
