"""Tests for the public rulelex API surface."""

from __future__ import annotations

from pathlib import Path

import pytest

from rulelex import (
    EOS,
    Environment,
    LexConfig,
    LexingError,
    LexResult,
    StreamPosition,
    Token,
    lex_config_context,
    scan,
)
from rulelex.lexers import Calculator


class TestTokenizeFile:
    """File wrappers read the whole file before scanning."""

    def test_tokenize_file(self, tmp_path: Path) -> None:
        path = tmp_path / "expr.txt"
        path.write_text("1 +\n2\n")

        tokens = Calculator.tokenize_file(path)
        assert [t.type for t in tokens] == ["NUM", "PLS", "NUM", EOS]
        assert tokens[0].position.source_file == str(path)
        assert tokens[2].position.line_number == 2

    def test_tokenize_file_error_names_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("1 ? 2")

        with pytest.raises(LexingError) as exc_info:
            Calculator.tokenize_file(str(path))
        assert exc_info.value.source_file == str(path)
        assert exc_info.value.remainder == "? 2"

    def test_configured_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.txt"
        path.write_bytes("1\xa02".encode("latin-1"))

        with lex_config_context(LexConfig(encoding="latin-1")):
            tokens = Calculator.tokenize_file(path)
        assert [t.value for t in tokens[:-1]] == [1, 2]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Calculator.tokenize_file(tmp_path / "missing.txt")

    def test_instance_lex_file_shares_environment(self, tmp_path: Path) -> None:
        path = tmp_path / "expr.txt"
        path.write_text("3 * 4")

        lexer = Calculator()
        tokens = lexer.lex_file(path)
        assert [t.value for t in tokens[:-1]] == [3, None, 4]


class TestTryLex:
    """try_lex returns unmatched input as a LexResult."""

    def test_success(self) -> None:
        result = Calculator().try_lex("1+1")
        assert result.ok
        assert result.error is None
        assert [t.type for t in result.unwrap()] == ["NUM", "PLS", "NUM", EOS]

    def test_failure(self) -> None:
        result = Calculator().try_lex("1@2")
        assert not result.ok
        assert result.tokens == ()
        assert result.error.remainder == "@2"
        with pytest.raises(LexingError):
            result.unwrap()

    def test_default_result(self) -> None:
        assert LexResult().ok


class TestScanFunction:
    """scan() drives a definition directly."""

    def test_scan_with_fresh_environment(self) -> None:
        tokens = scan(Calculator.definition, "4/2")
        assert [t.type for t in tokens] == ["NUM", "DIV", "NUM", EOS]

    def test_scan_with_environment(self) -> None:
        env = Environment("default")
        tokens = scan(Calculator.definition, "(", env, source_file="x")
        assert tokens[0].position.source_file == "x"


class TestTokenAndPosition:
    def test_token_defaults(self) -> None:
        tok = Token(EOS)
        assert tok.value is None
        assert tok.position is None
        assert tok.is_eos

    def test_token_repr(self) -> None:
        pos = StreamPosition(0, 1, 0, 2)
        assert repr(Token("NUM", 12, pos)) == "Token(NUM, 12, 1:0)"
        assert repr(Token("PLS", None, pos)) == "Token(PLS, 1:0)"
        assert repr(Token(EOS)) == "Token(EOS)"

    def test_position_str_and_end(self) -> None:
        pos = StreamPosition(4, 2, 1, 3)
        assert str(pos) == "2:1"
        assert pos.end_offset == 7

    def test_token_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Token("X").value = 1  # type: ignore[misc]
