"""Two-mode state-machine lexer for BBCode.

The lexer reads characters through a CharCursor and emits one Token per
call to next_token(). Modes are held on an explicit stack; an empty stack
means NORMAL.

No regex, no backtracking: every rule consumes at least one character or
raises, so tokenization is O(n).

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from bbspan.errors import ParseError
from bbspan.lexer.cursor import END_OF_INPUT, CharCursor
from bbspan.lexer.modes import (
    NEWLINE_CHARS,
    QUOTE_CHARS,
    SPECIAL_TAG_TYPES,
    TAG_NAME_CHARS,
    WHITESPACE_CHARS,
    LexerMode,
)
from bbspan.tokens import END, Token, TokenType


class Lexer:
    """State-machine lexer producing BBCode tokens.

    Usage:
        >>> for token in Lexer("[b]Hi[/b]").tokenize():
        ...     print(token)
        Token(START_TAG, 'b')
        Token(TEXT, 'Hi')
        Token(END_TAG, 'b')
        Token(END, '')

    """

    __slots__ = ("_cursor", "_modes")

    def __init__(self, source: str) -> None:
        """Initialize lexer with source text.

        Args:
            source: BBCode source text
        """
        self._cursor = CharCursor(source)
        self._modes: list[LexerMode] = []

    @property
    def mode(self) -> LexerMode:
        """Current mode (top of the mode stack, NORMAL when empty)."""
        return self._modes[-1] if self._modes else LexerMode.NORMAL

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream.

        Yields:
            Token objects, ending with exactly one END token.
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.END:
                return

    def next_token(self) -> Token:
        """Produce the next token.

        Raises:
            ParseError: On a malformed character sequence.
        """
        cursor = self._cursor
        while True:
            if cursor.lookahead() == END_OF_INPUT:
                return END

            mode = self.mode
            if mode is LexerMode.NORMAL:
                return self._scan_normal()

            if mode is LexerMode.IN_TAG:
                if cursor.lookahead() == "]":
                    # Tag terminator is not surfaced as a token.
                    cursor.consume()
                    self._modes.pop()
                    continue
                return self._scan_attribute()

            raise self._error(f"Invalid lexer state: {mode!r}")

    # =========================================================================
    # Mode scanners
    # =========================================================================

    def _scan_normal(self) -> Token:
        cursor = self._cursor
        char = cursor.lookahead()
        if char == "[":
            if cursor.lookahead(2) == "/":
                return self._scan_close_tag()
            token = self._scan_open_tag()
            self._modes.append(LexerMode.IN_TAG)
            return token

        if char in NEWLINE_CHARS:
            return self._scan_newline()
        return self._scan_text()

    def _scan_open_tag(self) -> Token:
        start = self._cursor.position
        self._match("[")
        name = self._scan_tag_name()
        token_type = SPECIAL_TAG_TYPES.get(name, TokenType.START_TAG)
        return Token(token_type, name, start)

    def _scan_close_tag(self) -> Token:
        start = self._cursor.position
        self._match("[")
        self._match("/")
        name = self._scan_tag_name()
        self._match("]")
        return Token(TokenType.END_TAG, name, start)

    def _scan_tag_name(self) -> str:
        cursor = self._cursor
        cursor.mark()
        while cursor.lookahead() in TAG_NAME_CHARS:
            cursor.consume()
        return cursor.marked

    def _scan_newline(self) -> Token:
        start = self._cursor.position
        if self._cursor.lookahead() == "\r":
            self._cursor.consume()
        self._match("\n")
        return Token(TokenType.LINE_BREAK, "", start)

    def _scan_text(self) -> Token:
        cursor = self._cursor
        start = cursor.position
        cursor.mark()
        while True:
            char = cursor.lookahead()
            if char == "[" or char == END_OF_INPUT or char in NEWLINE_CHARS:
                break
            cursor.consume()
        return Token(TokenType.TEXT, cursor.marked, start)

    def _scan_attribute(self) -> Token:
        """Scan ``= value`` or ``= "quoted value"`` inside a tag body."""
        cursor = self._cursor
        self._match("=")
        self._skip_whitespace()

        start = cursor.position
        quote = cursor.lookahead()
        if quote in QUOTE_CHARS:
            cursor.consume()
            start = cursor.position
            cursor.mark()
            while cursor.lookahead() != quote:
                if cursor.lookahead() == END_OF_INPUT:
                    raise self._error(f"Unterminated attribute value, expected {quote}")
                cursor.consume()
            token = Token(TokenType.ATTRIBUTE, cursor.marked, start)
            cursor.consume()
        else:
            cursor.mark()
            while True:
                char = cursor.lookahead()
                if char == "]" or char == END_OF_INPUT or char in WHITESPACE_CHARS:
                    break
                cursor.consume()
            token = Token(TokenType.ATTRIBUTE, cursor.marked, start)

        self._skip_whitespace()
        return token

    # =========================================================================
    # Character helpers
    # =========================================================================

    def _skip_whitespace(self) -> None:
        cursor = self._cursor
        while cursor.lookahead() in WHITESPACE_CHARS:
            cursor.consume()

    def _match(self, expected: str) -> None:
        """Consume expected or raise ParseError."""
        actual = self._cursor.lookahead()
        if actual != expected:
            found = repr(actual) if actual != END_OF_INPUT else "end of input"
            raise self._error(f"Expected {expected!r}, found {found}")
        self._cursor.consume()

    def _error(self, message: str) -> ParseError:
        lineno, col = self._cursor.location()
        return ParseError(message, lineno=lineno, col_offset=col)
