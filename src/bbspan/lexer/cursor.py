"""Position/mark character cursor over an immutable source string.

Lookahead past the end returns END_OF_INPUT instead of raising, so every
lexer rule is total.
"""

from __future__ import annotations

# Returned by lookahead() past the end of input. Character sets tested
# against it must be frozensets: "" is a substring of every str.
END_OF_INPUT = ""


class CharCursor:
    """Scanner with unbounded single-character lookahead.

    Usage:
        >>> cursor = CharCursor("[b]")
        >>> cursor.lookahead(2)
        'b'
        >>> cursor.consume()
        >>> cursor.mark()
        >>> cursor.consume()
        >>> cursor.marked
        'b'

    """

    __slots__ = ("_source", "_source_len", "_pos", "_mark")

    def __init__(self, source: str) -> None:
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._mark = 0

    @property
    def position(self) -> int:
        """Current read position (0-indexed)."""
        return self._pos

    @property
    def at_end(self) -> bool:
        """Whether all input has been consumed."""
        return self._pos >= self._source_len

    @property
    def marked(self) -> str:
        """Substring from the mark to the current position."""
        if self._mark < self._pos:
            return self._source[self._mark : self._pos]
        return ""

    def lookahead(self, count: int = 1) -> str:
        """Character count positions ahead (1 = current), without consuming.

        Returns:
            The character, or END_OF_INPUT past the end of the source.
        """
        index = self._pos + count - 1
        if index < self._source_len:
            return self._source[index]
        return END_OF_INPUT

    def consume(self) -> None:
        """Advance one position."""
        self._pos += 1

    def mark(self) -> None:
        """Record the current position for a later ``marked`` slice."""
        self._mark = self._pos

    def location(self) -> tuple[int, int]:
        """Line and column (both 1-indexed) of the current position."""
        pos = min(self._pos, self._source_len)
        lineno = self._source.count("\n", 0, pos) + 1
        col = pos - (self._source.rfind("\n", 0, pos) + 1) + 1
        return lineno, col
