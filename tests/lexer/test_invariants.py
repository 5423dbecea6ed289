"""Property-based tests for scanner invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from rulelex import EOS, Lexer, LexingError, MatchPolicy, rule


class Everything(Lexer):
    """Matches every input: words, digits, newlines and any other char."""

    word = rule(r"[a-z]+", action=lambda env, text: ("WORD", text))
    number = rule(r"[0-9]+", action=lambda env, text: ("NUM", int(text)))
    newline = rule(r"\n")
    other = rule(r".", action=lambda env, text: ("CHAR", text))


class Everything1st(Lexer):
    match_type = MatchPolicy.FIRST

    char = rule(r"[^\n]", action=lambda env, text: ("CHAR", text))
    word = rule(r"[a-z]+", action=lambda env, text: ("WORD", text))
    newline = rule(r"\n", action=lambda env, text: ("NL", text))


class Digits(Lexer):
    number = rule(r"[0-9]+", action=lambda env, text: ("NUM", text))


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_always_ends_with_single_eos(self, source: str) -> None:
        """Every tokenization must end with exactly one EOS token."""
        tokens = Everything.tokenize(source)

        assert tokens[-1].type == EOS
        assert sum(1 for t in tokens if t.type == EOS) == 1

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_offsets_match_source(self, source: str) -> None:
        """Each token's offset and length point at its own text."""
        for token in Everything.tokenize(source)[:-1]:
            pos = token.position
            text = source[pos.stream_offset : pos.end_offset]
            expected = str(token.value) if token.type != "NUM" else text
            assert text == expected

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_line_number_counts_preceding_newlines(self, source: str) -> None:
        for token in Everything.tokenize(source)[:-1]:
            pos = token.position
            assert pos.line_number == 1 + source.count("\n", 0, pos.stream_offset)

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_line_offset_since_last_newline(self, source: str) -> None:
        """Newlines are only ever consumed alone, so offsets equal columns."""
        for token in Everything.tokenize(source)[:-1]:
            pos = token.position
            line_start = source.rfind("\n", 0, pos.stream_offset) + 1
            assert pos.line_offset == pos.stream_offset - line_start

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_first_match_consumes_everything(self, source: str) -> None:
        """With FIRST policy the single-char rule shadows the word rule."""
        tokens = Everything1st.tokenize(source)

        assert "".join(t.value for t in tokens[:-1]) == source
        assert all(t.type != "WORD" for t in tokens)


class TestUnmatchedInput:
    """Unmatched input always reports the exact remainder."""

    @given(st.text(alphabet="0123456789", max_size=20), st.text(min_size=1, max_size=20))
    @settings(max_examples=100)
    def test_remainder_is_exact(self, digits: str, rest: str) -> None:
        if rest[0].isdigit():
            rest = "x" + rest
        source = digits + rest

        with pytest.raises(LexingError) as exc_info:
            Digits.tokenize(source)

        err = exc_info.value
        assert err.remainder == rest
        assert err.stream_offset == len(digits)


class TestDeterminism:
    """Test that tokenization is deterministic."""

    @given(st.text(max_size=200))
    @settings(max_examples=50)
    def test_repeated_tokenization_identical(self, source: str) -> None:
        first_result = Everything.tokenize(source)
        second_result = Everything.tokenize(source)

        assert first_result == second_result
