"""Tag-effect table for the bbspan parser.

Each recognized tag name has an open effect (applied on its start token)
and a close effect (applied on its end token). Effects mutate the
StyleContext and, for structural tags, append directly to the root
container. Unrecognized names have no effect.

Tag vocabulary (case-sensitive):
    b, i, u, s, color, font, size, url, email, img, quote, code, list

``*`` list items and ``br`` are handled by the parser's main loop.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from bbspan.errors import ParseError
from bbspan.nodes import Image, InlineNode, LineBreak, Run
from bbspan.styles import Color, FontSlant, FontWeight, Style, TextDecoration
from bbspan.tokens import Token, TokenType
from bbspan.utils.logger import get_logger

if TYPE_CHECKING:
    from bbspan.config import ParseConfig
    from bbspan.parsing.context import StyleContext
    from bbspan.parsing.token_stream import TokenStream

logger = get_logger(__name__)

MAILTO_SCHEME = "mailto:"


class TagEffectsMixin:
    """Mixin applying tag open/close effects.

    Required Host Attributes:
        - _stream: TokenStream
        - _context: StyleContext
        - _children: list[InlineNode] (the root container's children)
        - _config: ParseConfig

    """

    _stream: TokenStream
    _context: StyleContext
    _children: list[InlineNode]
    _config: ParseConfig

    def _apply_tag(self, name: str, start: bool) -> None:
        """Apply the open (start=True) or close effect of tag name."""
        ctx = self._context
        match name:
            case "b":
                ctx.weight = FontWeight.BOLD if start else None
            case "i":
                ctx.slant = FontSlant.ITALIC if start else None
            case "u":
                ctx.decoration = TextDecoration.UNDERLINE if start else None
            case "s":
                ctx.decoration = TextDecoration.STRIKETHROUGH if start else None
            case "color":
                if start:
                    self._open_color()
                else:
                    ctx.foreground = None
            case "font":
                if start:
                    attribute = self._take_attribute()
                    if attribute is not None:
                        ctx.font_family = attribute.value
                else:
                    ctx.font_family = None
            case "size":
                if start:
                    self._open_size()
                else:
                    ctx.font_size = None
            case "url" | "email":
                if start:
                    self._open_link(name)
                else:
                    ctx.link_target = None
            case "img":
                if start:
                    self._open_image()
                else:
                    ctx.image = None
            case "quote":
                if start:
                    self._open_quote()
                else:
                    ctx.slant = None
                    ctx.foreground = None
                    self._children.append(LineBreak())
            case "code":
                if start:
                    ctx.font_family = self._config.code_font_family
                    ctx.background = self._config.code_background
                else:
                    ctx.font_family = None
                    ctx.background = None
                    self._children.append(LineBreak())
            case "list":
                if start:
                    ctx.list_mode = True
                    ctx.list_item_count = 0
                else:
                    ctx.list_mode = False
                self._children.append(LineBreak())
            case _:
                pass

    def _take_attribute(self) -> Token | None:
        """Consume and return the next token if it is an ATTRIBUTE."""
        token = self._stream.lookahead()
        if token.type is not TokenType.ATTRIBUTE:
            return None
        self._stream.consume()
        return token

    # =========================================================================
    # Open effects with attributes
    # =========================================================================

    def _open_color(self) -> None:
        attribute = self._take_attribute()
        if attribute is None:
            return
        try:
            self._context.foreground = Color.parse(attribute.value)
        except ValueError as e:
            if self._config.strict_colors:
                raise ParseError(f"Invalid color attribute: {attribute.value!r}") from e
            logger.debug("Ignoring invalid color %r", attribute.value)

    def _open_size(self) -> None:
        attribute = self._take_attribute()
        if attribute is None:
            return
        size = _parse_number(attribute.value)
        if size is None or size <= 0:
            logger.debug("Ignoring invalid size %r", attribute.value)
            return
        self._context.font_size = size

    def _open_link(self, name: str) -> None:
        attribute = self._take_attribute()
        if attribute is None:
            # Left unset so the parser can try the [url]target[/url] form.
            self._context.link_target = None
            return
        target = attribute.value
        if name == "email" and not target.lower().startswith(MAILTO_SCHEME):
            target = MAILTO_SCHEME + target
        self._context.link_target = target

    def _open_image(self) -> None:
        """Parse ``uri[,width=W][,height=H]`` into a pending Image.

        A bare [img] leaves any previously pending image in place.
        """
        attribute = self._take_attribute()
        if attribute is None:
            return

        uri, *fields = attribute.value.split(",")
        if not uri:
            self._context.image = None
            return

        dimensions: dict[str, float] = {}
        for item in fields:
            key, sep, raw = item.partition("=")
            key = key.strip()
            if not sep or key not in ("width", "height"):
                continue
            number = _parse_number(raw)
            if number is not None:
                dimensions[key] = number

        self._context.image = Image(
            uri=uri,
            width=dimensions.get("width"),
            height=dimensions.get("height"),
        )

    def _open_quote(self) -> None:
        author = self._take_attribute()
        if author is not None:
            # Author line goes straight to the root, unaffected by context.
            self._children.append(LineBreak())
            self._children.append(
                Run(text=f"{author.value} wrote:", style=Style(weight=FontWeight.BOLD))
            )
            self._children.append(LineBreak())
        self._context.slant = FontSlant.ITALIC
        self._context.foreground = self._config.quote_foreground


def _parse_number(text: str) -> float | None:
    """Parse a finite float, or None."""
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value
