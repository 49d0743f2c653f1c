"""
bbspan: BBCode to styled inline node trees

Converts BBCode markup ([b], [url], [img], [list], [quote], [color=...]
and friends) into a tree of styled runs, hyperlinks, images and line
breaks for a rendering host to draw. Zero runtime dependencies.

Quick Start:
    >>> from bbspan import parse
    >>> doc = parse("[b]Hello[/b], [url=https://example.com]world[/url]")
    >>> doc.children[0].text
    'Hello'
    >>> doc.children[2].target
    'https://example.com'

Host-side usage (never raises for bad markup):
    >>> from bbspan import BBCode
    >>> bb = BBCode()
    >>> bb("[b x]oops").children[0].text
    '[b x]oops'
"""

from bbspan.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from bbspan.errors import BBSpanError, ParseError
from bbspan.lexer import Lexer, LexerMode
from bbspan.nodes import Container, Hyperlink, Image, InlineNode, LineBreak, Run
from bbspan.parser import Parser
from bbspan.result import ParseResult
from bbspan.serialization import from_dict, from_json, to_dict, to_json
from bbspan.styles import Color, FontSlant, FontWeight, Style, TextDecoration
from bbspan.text import extract_text
from bbspan.tokens import Token, TokenType
from bbspan.utils.logger import get_logger
from bbspan.visitor import BaseVisitor, transform

__version__ = "0.1.0"

logger = get_logger(__name__)


def parse(source: str, *, config: ParseConfig | None = None) -> Container:
    """Parse BBCode source into a root Container.

    Args:
        source: BBCode source text
        config: Parse configuration (uses the current context's if None)

    Returns:
        Root Container holding the full ordered node sequence

    Raises:
        ParseError: On any lexical or grammatical failure

    Example:
        >>> parse("[i]x[/i]").children[0].style.slant
        <FontSlant.ITALIC: 2>
    """
    if config is None:
        return Parser(source).parse()
    with parse_config_context(config):
        return Parser(source).parse()


def try_parse(source: str, *, config: ParseConfig | None = None) -> ParseResult:
    """Parse BBCode source, returning the failure instead of raising it.

    Example:
        >>> result = try_parse("[url=a b]x[/url]")
        >>> result.ok
        False
        >>> result.document_or_literal().children[0].text
        '[url=a b]x[/url]'
    """
    try:
        document = parse(source, config=config)
    except ParseError as e:
        return ParseResult(source=source, error=e)
    return ParseResult(source=source, document=document)


class BBCode:
    """High-level BBCode processor for rendering hosts.

    Calling the instance applies the display policy: blank markup yields
    an empty container without parsing, and markup that fails to parse is
    shown as-is in a single unstyled run.

    Usage:
        >>> bb = BBCode(config=ParseConfig(bullet="- "))
        >>> doc = bb("[list][*]a[/list]")

        >>> # Strict parsing
        >>> doc = bb.parse("[b]x[/b]")

    Thread Safety:
        Holds only an immutable config; safe to share across threads.

    """

    __slots__ = ("_config",)

    def __init__(self, *, config: ParseConfig | None = None) -> None:
        self._config = config or ParseConfig()

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> Container:
        """Parse for display; never raises ParseError."""
        if not source or source.isspace():
            return Container()
        result = self.try_parse(source)
        if not result.ok:
            logger.debug("Showing markup as literal text: %s", result.error, exc_info=result.error)
        return result.document_or_literal()

    def parse(self, source: str) -> Container:
        """Parse source, raising ParseError on failure."""
        return parse(source, config=self._config)

    def try_parse(self, source: str) -> ParseResult:
        """Parse source into a ParseResult."""
        return try_parse(source, config=self._config)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "parse",
    "try_parse",
    "BBCode",
    "ParseResult",
    # Nodes
    "InlineNode",
    "Container",
    "Hyperlink",
    "Image",
    "LineBreak",
    "Run",
    # Styles
    "Color",
    "FontSlant",
    "FontWeight",
    "Style",
    "TextDecoration",
    # Parser components
    "Lexer",
    "LexerMode",
    "Parser",
    "Token",
    "TokenType",
    # Errors
    "BBSpanError",
    "ParseError",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Utilities
    "extract_text",
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    "BaseVisitor",
    "transform",
]
