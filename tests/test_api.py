"""Tests for the top-level lexr API."""

from __future__ import annotations

import pytest

import lexr
from lexr import (
    IllegalCharacterError,
    ScanConfig,
    Token,
    TokenType,
    scan_config_context,
    tokenize,
)


class TestTokenize:
    """Test lexr.tokenize()."""

    def test_returns_full_stream(self) -> None:
        assert tokenize("x + 1") == [
            Token(TokenType.IDENTIFIER, "x"),
            Token(TokenType.PLUS, "+"),
            Token(TokenType.NUMBER, "1"),
            Token(TokenType.END_OF_FILE, ""),
        ]

    def test_empty(self) -> None:
        assert tokenize("") == [Token(TokenType.END_OF_FILE, "")]

    def test_illegal_kept_by_default(self) -> None:
        assert tokenize("@") == [
            Token(TokenType.ILLEGAL, "@"),
            Token(TokenType.END_OF_FILE, ""),
        ]

    def test_strict_raises(self) -> None:
        with pytest.raises(IllegalCharacterError) as exc_info:
            tokenize("let x = 4 # 2", strict=True)
        assert exc_info.value.token == Token(TokenType.ILLEGAL, "#")
        assert exc_info.value.offset == 10
        assert str(exc_info.value) == "10: illegal character '#'"

    def test_strict_error_names_source_file(self) -> None:
        with pytest.raises(IllegalCharacterError) as exc_info:
            tokenize("a ?", strict=True, source_file="prog.let")
        assert exc_info.value.source_file == "prog.let"
        assert str(exc_info.value) == "prog.let:2: illegal character '?'"

    def test_strict_at_end_of_source(self) -> None:
        with pytest.raises(IllegalCharacterError) as exc_info:
            tokenize("1 $", strict=True)
        assert exc_info.value.offset == 2

    def test_strict_passes_clean_source(self) -> None:
        assert tokenize("let a = 1", strict=True)[-1].type is TokenType.END_OF_FILE

    def test_strict_from_config(self) -> None:
        with scan_config_context(ScanConfig(strict=True)):
            with pytest.raises(IllegalCharacterError):
                tokenize("?")

    def test_argument_overrides_config(self) -> None:
        with scan_config_context(ScanConfig(strict=True)):
            assert tokenize("?", strict=False)[0].type is TokenType.ILLEGAL


class TestPublicNames:
    def test_all_exports_exist(self) -> None:
        for name in lexr.__all__:
            assert hasattr(lexr, name), name
