"""Lexer operating modes and character classes.

This module defines the finite state machine modes for the lexer and the
constant sets used to classify characters and tag names.
"""

from __future__ import annotations

import string
from enum import Enum, auto

from bbspan.tokens import TokenType


class LexerMode(Enum):
    """Lexer operating modes.

    - NORMAL: Between tags, scanning text, newlines and tag openers
    - IN_TAG: After an opening tag name, scanning attributes up to ``]``

    """

    NORMAL = auto()
    IN_TAG = auto()


TAG_NAME_CHARS = frozenset(string.ascii_letters + "*")
NEWLINE_CHARS = frozenset("\r\n")
QUOTE_CHARS = frozenset("'\"")
WHITESPACE_CHARS = frozenset(" \t")

# Opening tag names that get a dedicated token type. Every other name is a
# plain START_TAG.
SPECIAL_TAG_TYPES: dict[str, TokenType] = {
    "url": TokenType.LINK,
    "email": TokenType.LINK,
    "img": TokenType.IMAGE,
    "br": TokenType.LINE_BREAK,
}
