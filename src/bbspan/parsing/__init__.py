"""Parsing components for bbspan.

Provides the building blocks the Parser is composed from:
- TokenStream: eager token buffer with bounded lookahead
- StyleContext: per-parse mutable style accumulator
- TagEffectsMixin: open/close effects keyed by tag name
- LinkParsingMixin: [url]/[email] and [img] handling
"""

from bbspan.parsing.context import StyleContext
from bbspan.parsing.links import LinkParsingMixin
from bbspan.parsing.tags import TagEffectsMixin
from bbspan.parsing.token_stream import TokenStream

__all__ = [
    "LinkParsingMixin",
    "StyleContext",
    "TagEffectsMixin",
    "TokenStream",
]
