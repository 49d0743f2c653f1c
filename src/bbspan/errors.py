"""Exception classes for bbspan.

Lexical and grammatical failures share one exception type. A failure
anywhere aborts the whole parse; no partial tree is returned.
"""

from __future__ import annotations


class BBSpanError(Exception):
    """Base exception for all bbspan errors."""

    pass


class ParseError(BBSpanError):
    """Error during BBCode tokenization or parsing.

    Raised for malformed tag bodies (missing ``=`` or ``]``, unterminated
    quotes, a lone carriage return) and for tokens the grammar does not
    accept where they appear (a stray attribute, an unknown token type).
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset

        location = ""
        if lineno is not None:
            location = f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")
