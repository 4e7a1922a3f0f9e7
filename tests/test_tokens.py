"""Tests for Token values and token type labels."""

from __future__ import annotations

import dataclasses

import pytest

from lexr.tokens import Token, TokenType, token_name


class TestToken:
    """Test Token frozen dataclass behavior."""

    def test_immutability(self) -> None:
        token = Token(TokenType.NUMBER, "42")
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.text = "43"  # type: ignore[misc]

    def test_value_equality_and_hash(self) -> None:
        a = Token(TokenType.IDENTIFIER, "x")
        b = Token(TokenType.IDENTIFIER, "x")
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b, Token(TokenType.IDENTIFIER, "y")}) == 2

    def test_kind_alias(self) -> None:
        assert Token(TokenType.LET, "let").kind is TokenType.LET

    def test_is_eof(self) -> None:
        assert Token(TokenType.END_OF_FILE, "").is_eof
        assert not Token(TokenType.ILLEGAL, "@").is_eof

    def test_repr(self) -> None:
        assert repr(Token(TokenType.PLUS, "+")) == "Token(PLUS, '+')"

    def test_str_matches_demo_format(self) -> None:
        assert str(Token(TokenType.NUMBER, "42")) == "Type: NUMBER, Literal: '42'"
        assert str(Token(TokenType.END_OF_FILE, "")) == "Type: EOF, Literal: ''"


class TestTokenName:
    """Test display labels."""

    def test_end_of_file_label(self) -> None:
        assert token_name(TokenType.END_OF_FILE) == "EOF"

    @pytest.mark.parametrize(
        "token_type", [t for t in TokenType if t is not TokenType.END_OF_FILE]
    )
    def test_other_labels_are_member_names(self, token_type: TokenType) -> None:
        assert token_name(token_type) == token_type.name

    def test_every_kind_has_a_label(self) -> None:
        labels = {token_name(t) for t in TokenType}
        assert len(labels) == len(TokenType) == 12
