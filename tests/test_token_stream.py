"""Tests for the eagerly-buffered token stream."""

import pytest

from bbspan.errors import ParseError
from bbspan.parsing import TokenStream
from bbspan.tokens import END, Token, TokenType


class TestTokenStream:
    """Lookahead and consumption."""

    def test_from_source_includes_end(self) -> None:
        stream = TokenStream.from_source("[b]x")
        assert len(stream) == 3
        assert stream.tokens[-1] is END

    def test_lookahead_is_one_based(self) -> None:
        stream = TokenStream.from_source("[b]x")
        assert stream.lookahead() == Token(TokenType.START_TAG, "b")
        assert stream.lookahead(1) == Token(TokenType.START_TAG, "b")
        assert stream.lookahead(2) == Token(TokenType.TEXT, "x")

    def test_lookahead_past_end_returns_end(self) -> None:
        stream = TokenStream.from_source("x")
        assert stream.lookahead(10) is END

    def test_consume_advances(self) -> None:
        stream = TokenStream.from_source("a\nb")
        stream.consume()
        assert stream.lookahead().type == TokenType.LINE_BREAK
        stream.consume()
        stream.consume()
        stream.consume()
        assert stream.lookahead() is END

    def test_at_matches_type_and_value(self) -> None:
        stream = TokenStream.from_source("[url]x[/url]")
        assert stream.at(2, TokenType.TEXT)
        assert stream.at(3, TokenType.END_TAG, "url")
        assert not stream.at(3, TokenType.END_TAG, "email")

    def test_lexer_failure_propagates(self) -> None:
        with pytest.raises(ParseError):
            TokenStream.from_source("[b x]")
