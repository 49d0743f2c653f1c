"""Eagerly-buffered token stream for the parser.

The lexer runs to completion up front, so the parser gets cheap bounded
lookahead and never re-enters the lexer mid-parse.
"""

from __future__ import annotations

from bbspan.lexer import Lexer
from bbspan.tokens import END, Token, TokenType


class TokenStream:
    """Immutable token sequence with a read cursor.

    Usage:
        >>> stream = TokenStream.from_source("[b]x")
        >>> stream.lookahead(2)
        Token(TEXT, 'x')
        >>> stream.consume()
        >>> stream.lookahead()
        Token(TEXT, 'x')

    """

    __slots__ = ("_tokens", "_tokens_len", "_pos")

    def __init__(self, tokens: tuple[Token, ...]) -> None:
        self._tokens = tokens
        self._tokens_len = len(tokens)
        self._pos = 0

    @classmethod
    def from_source(cls, source: str) -> TokenStream:
        """Tokenize source completely.

        Raises:
            ParseError: If the lexer fails anywhere in source.
        """
        return cls(tuple(Lexer(source).tokenize()))

    def __len__(self) -> int:
        return self._tokens_len

    @property
    def tokens(self) -> tuple[Token, ...]:
        """All buffered tokens, including the final END."""
        return self._tokens

    def lookahead(self, count: int = 1) -> Token:
        """Token count positions ahead (1 = next unread), END past the end."""
        index = self._pos + count - 1
        if index < self._tokens_len:
            return self._tokens[index]
        return END

    def consume(self) -> None:
        """Advance the read cursor by one token."""
        self._pos += 1

    def at(self, count: int, token_type: TokenType, value: str | None = None) -> bool:
        """Whether the token count positions ahead has the given type (and value)."""
        token = self.lookahead(count)
        if token.type is not token_type:
            return False
        return value is None or token.value == value
