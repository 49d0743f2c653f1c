"""Recursive descent parser producing an inline node tree.

Consumes the token stream from Lexer and builds one root Container of
frozen inline nodes. Every Run is stamped with a fully-resolved Style
taken from the StyleContext at the moment it is emitted.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TagEffectsMixin`: Open/close effects of each tag name
- `LinkParsingMixin`: Hyperlinks and images (bounded lookahead)

Thread Safety:
- Parser produces an immutable tree (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)

"""

from __future__ import annotations

from bbspan.config import ParseConfig, get_parse_config
from bbspan.errors import ParseError
from bbspan.nodes import Container, InlineNode, LineBreak
from bbspan.parsing import LinkParsingMixin, StyleContext, TagEffectsMixin, TokenStream
from bbspan.tokens import TokenType

LIST_ITEM_TAG = "*"


class Parser(
    TagEffectsMixin,
    LinkParsingMixin,
):
    """Parser for BBCode markup.

    Usage:
        >>> doc = Parser("[b]x[/b]").parse()
        >>> doc.children[0].style.weight
        <FontWeight.BOLD: 2>

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. The resulting tree is immutable and thread-safe.

    """

    __slots__ = ("_source", "_stream", "_context", "_children")

    def __init__(self, source: str) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: BBCode source text
        """
        self._source = source
        self._stream = TokenStream(())
        self._context = StyleContext()
        self._children: list[InlineNode] = []

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    def parse(self) -> Container:
        """Parse source into a root Container.

        Raises:
            ParseError: On any lexical or grammatical failure. No partial
                tree is returned.
        """
        self._stream = TokenStream.from_source(self._source)
        self._context = StyleContext()
        self._children = []

        stream = self._stream
        ctx = self._context
        children = self._children

        while True:
            token = stream.lookahead()
            stream.consume()

            match token.type:
                case TokenType.START_TAG:
                    if token.value == LIST_ITEM_TAG and ctx.list_mode:
                        if ctx.list_item_count > 0:
                            children.append(LineBreak())
                        ctx.list_item_count += 1
                        children.append(ctx.create_run(self._config.bullet))
                        continue
                    self._apply_tag(token.value, True)
                case TokenType.END_TAG:
                    self._apply_tag(token.value, False)
                case TokenType.TEXT:
                    children.append(ctx.create_run(token.value))
                case TokenType.LINK:
                    self._parse_link(token)
                case TokenType.IMAGE:
                    self._parse_image(token)
                case TokenType.LINE_BREAK:
                    children.append(LineBreak())
                case TokenType.ATTRIBUTE:
                    raise ParseError(f"Unexpected attribute {token.value!r}")
                case TokenType.END:
                    break
                case _:
                    raise ParseError(f"Unknown token type: {token.type!r}")

        return Container(children=tuple(children))
