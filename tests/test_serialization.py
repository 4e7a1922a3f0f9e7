"""Tests for token stream serialization."""

from __future__ import annotations

import json

import pytest

from lexr import tokenize
from lexr.errors import SerializationError
from lexr.serialization import from_dict, from_json, to_dict, to_json
from lexr.tokens import Token, TokenType


class TestToDict:
    def test_shape(self) -> None:
        assert to_dict(Token(TokenType.OPEN_PAREN, "(")) == {"type": "OPEN_PAREN", "text": "("}

    def test_eof(self) -> None:
        assert to_dict(Token(TokenType.END_OF_FILE, "")) == {"type": "END_OF_FILE", "text": ""}


class TestFromDict:
    def test_rebuilds_token(self) -> None:
        assert from_dict({"type": "LET", "text": "let"}) == Token(TokenType.LET, "let")

    def test_missing_key(self) -> None:
        with pytest.raises(SerializationError, match="'text'"):
            from_dict({"type": "LET"})

    def test_unknown_type(self) -> None:
        with pytest.raises(SerializationError, match="Unknown token type"):
            from_dict({"type": "STRING", "text": '"hi"'})

    @pytest.mark.parametrize("type_value", [[], {}, 3, None])
    def test_non_string_type(self, type_value: object) -> None:
        """Unhashable or non-string type values are rejected, not looked up."""
        with pytest.raises(SerializationError, match="Token type must be a string"):
            from_dict({"type": type_value, "text": ""})

    def test_non_string_text(self) -> None:
        with pytest.raises(SerializationError, match="must be a string"):
            from_dict({"type": "NUMBER", "text": 42})

    def test_not_a_mapping(self) -> None:
        with pytest.raises(SerializationError, match="mapping"):
            from_dict(["NUMBER", "42"])  # type: ignore[arg-type]


class TestJson:
    def test_round_trip(self) -> None:
        tokens = tokenize("let x = 42 + (15 - 3) @")
        assert from_json(to_json(tokens)) == tokens

    def test_deterministic_key_order(self) -> None:
        out = to_json([Token(TokenType.NUMBER, "7")])
        assert out == '[{"text": "7", "type": "NUMBER"}]'

    def test_indent(self) -> None:
        out = to_json(tokenize("x"), indent=2)
        assert json.loads(out) == [
            {"text": "x", "type": "IDENTIFIER"},
            {"text": "", "type": "END_OF_FILE"},
        ]
        assert "\n" in out

    def test_invalid_json(self) -> None:
        with pytest.raises(SerializationError, match="Invalid JSON"):
            from_json("[{")

    @pytest.mark.parametrize("payload", ['[{"type": [], "text": ""}]', '[{"type": {}, "text": ""}]'])
    def test_unhashable_type_in_stream(self, payload: str) -> None:
        with pytest.raises(SerializationError):
            from_json(payload)

    def test_not_an_array(self) -> None:
        with pytest.raises(SerializationError, match="array"):
            from_json('{"type": "LET", "text": "let"}')
