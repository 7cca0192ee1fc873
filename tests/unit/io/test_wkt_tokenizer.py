"""Tests for wkgeo.io.wkt_tokenizer module."""

from __future__ import annotations

import pytest

from wkgeo.exceptions import UnexpectedTokenError
from wkgeo.io.wkt_tokenizer import Token, TokenKind, WKTTokenStream, tokenize


class TestTokenize:
    """Tests for tokenize()."""

    def test_point(self) -> None:
        assert tokenize("POINT (1 2)") == (
            Token(TokenKind.WORD, "POINT", 0),
            Token(TokenKind.PUNCTUATION, "(", 6),
            Token(TokenKind.NUMBER, "1", 7),
            Token(TokenKind.NUMBER, "2", 9),
            Token(TokenKind.PUNCTUATION, ")", 10),
        )

    @pytest.mark.parametrize("text", ["-1.5e3", "+2", ".5", "3.", "1E-7", "-0.25"])
    def test_number_forms(self, text: str) -> None:
        (token,) = tokenize(text)
        assert token.kind is TokenKind.NUMBER
        assert token.text == text

    def test_whitespace_is_skipped(self) -> None:
        tokens = tokenize("  LINESTRING\n(\t0 0 ,1 1 )  ")
        assert [t.text for t in tokens] == ["LINESTRING", "(", "0", "0", ",", "1", "1", ")"]

    def test_unknown_characters_are_kept(self) -> None:
        tokens = tokenize("POINT [1 2]")
        assert tokens[1] == Token(TokenKind.UNKNOWN, "[", 6)
        assert tokens[-1] == Token(TokenKind.UNKNOWN, "]", 10)

    def test_adjacent_word_and_parenthesis(self) -> None:
        kinds = [t.kind for t in tokenize("POINTZ(1 2 3)")]
        assert kinds[:2] == [TokenKind.WORD, TokenKind.PUNCTUATION]

    def test_empty_text(self) -> None:
        assert tokenize("") == ()


class TestWKTTokenStream:
    """Tests for the WKTTokenStream cursor primitives."""

    def test_peek_does_not_consume(self) -> None:
        stream = WKTTokenStream.from_text("POINT EMPTY")
        assert stream.peek_word() == "POINT"
        assert stream.peek_word() == "POINT"
        assert stream.index == 0
        assert stream.next_word() == "POINT"
        assert stream.next_word() == "EMPTY"
        assert stream.at_end()

    def test_peek_word_on_non_word(self) -> None:
        stream = WKTTokenStream.from_text("(1")
        assert stream.peek_word() is None
        assert stream.index == 0

    def test_at_end_does_not_consume(self) -> None:
        stream = WKTTokenStream.from_text("(")
        assert not stream.at_end()
        assert not stream.at_end()
        stream.expect_opener()
        assert stream.at_end()

    def test_numbers_and_separators(self) -> None:
        stream = WKTTokenStream.from_text("(1.5 -2, 3e2)")
        stream.expect_opener()
        assert stream.next_number() == 1.5
        assert stream.next_number() == -2.0
        assert stream.next_closer_or_comma() == ","
        assert stream.next_number() == 300.0
        assert stream.next_closer_or_comma() == ")"
        assert stream.peek() is None

    def test_peek_is_opener_or_word(self) -> None:
        assert WKTTokenStream.from_text("(0 0)").peek_is_opener_or_word() is True
        assert WKTTokenStream.from_text("CIRCULARSTRING").peek_is_opener_or_word() is False

    def test_peek_is_opener_or_word_rejects_number(self) -> None:
        stream = WKTTokenStream.from_text("12")
        with pytest.raises(UnexpectedTokenError, match="'12'"):
            stream.peek_is_opener_or_word()

    def test_expect_opener_quotes_offending_token(self) -> None:
        stream = WKTTokenStream.from_text("1 2)")
        with pytest.raises(UnexpectedTokenError) as exc_info:
            stream.expect_opener()

        error = exc_info.value
        assert error.expected == "'('"
        assert error.found == "1"
        assert error.position == 0
        assert str(error) == "Expected '(' but encountered '1' (position: 0)"

    def test_expect_closer_on_unknown_character(self) -> None:
        stream = WKTTokenStream.from_text("]")
        with pytest.raises(UnexpectedTokenError, match="encountered ']'"):
            stream.expect_closer()

    def test_next_word_rejects_number(self) -> None:
        with pytest.raises(UnexpectedTokenError, match="Expected word"):
            WKTTokenStream.from_text("42").next_word()

    def test_next_number_rejects_word(self) -> None:
        with pytest.raises(UnexpectedTokenError, match="Expected number"):
            WKTTokenStream.from_text("EMPTY").next_number()

    def test_next_closer_or_comma_rejects_number(self) -> None:
        with pytest.raises(UnexpectedTokenError, match="encountered '3'"):
            WKTTokenStream.from_text("3").next_closer_or_comma()

    def test_end_of_stream(self) -> None:
        stream = WKTTokenStream.from_text("")
        with pytest.raises(UnexpectedTokenError) as exc_info:
            stream.next_number()
        assert exc_info.value.found is None
        assert "end of stream" in str(exc_info.value)
