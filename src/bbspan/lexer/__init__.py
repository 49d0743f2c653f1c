"""State-machine lexer for the bbspan BBCode parser.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode, CharCursor
├── core.py              # Lexer class (mode stack + scanning rules)
├── cursor.py            # CharCursor (position/mark scanner)
└── modes.py             # LexerMode enum, character classes

Usage:
    >>> from bbspan.lexer import Lexer
    >>> list(Lexer("a\\n[br]").tokenize())
    [Token(TEXT, 'a'), Token(LINE_BREAK, ''), Token(LINE_BREAK, 'br'), Token(END, '')]

"""

from bbspan.lexer.core import Lexer
from bbspan.lexer.cursor import END_OF_INPUT, CharCursor
from bbspan.lexer.modes import LexerMode

__all__ = ["END_OF_INPUT", "CharCursor", "Lexer", "LexerMode"]
