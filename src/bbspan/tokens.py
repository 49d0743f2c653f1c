"""Token and TokenType definitions for the bbspan lexer.

The lexer produces a flat sequence of Token objects that the parser
consumes. Tag tokens carry the literal tag name as their value so the
parser can dispatch on it.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer."""

    START_TAG = auto()  # [name
    END_TAG = auto()  # [/name]
    TEXT = auto()  # Literal text between tags
    ATTRIBUTE = auto()  # =value or ="quoted value" inside a tag
    LINE_BREAK = auto()  # \n, \r\n or [br
    IMAGE = auto()  # [img
    LINK = auto()  # [url or [email
    END = auto()  # End of input


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Tag name, text content or attribute value
        offset: Start position in source (-1 for synthetic tokens).
            Excluded from comparison so tokens compare by content.

    """

    type: TokenType
    value: str
    offset: int = field(default=-1, compare=False)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r})"


# Sentinel returned for lookahead past the end of a token sequence.
END = Token(TokenType.END, "")
