"""Hyperlink and image parsing for bbspan.

Handles LINK ([url], [email]) and IMAGE ([img]) tokens. Both read an
optional attribute through their open effect, then use bounded lookahead
on the token stream to pick up display text or a caption. Tags that end
up without a target degrade to their literal name as text.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from bbspan.nodes import Hyperlink, InlineNode
from bbspan.parsing.tags import MAILTO_SCHEME
from bbspan.tokens import Token, TokenType
from bbspan.utils.logger import get_logger

if TYPE_CHECKING:
    from bbspan.parsing.context import StyleContext
    from bbspan.parsing.token_stream import TokenStream

logger = get_logger(__name__)


class LinkParsingMixin:
    """Mixin for [url]/[email] and [img] tokens.

    Required Host Attributes:
        - _stream: TokenStream
        - _context: StyleContext
        - _children: list[InlineNode]

    Required Host Methods:
        - _apply_tag(name, start) -> None

    """

    _stream: TokenStream
    _context: StyleContext
    _children: list[InlineNode]

    def _parse_link(self, token: Token) -> None:
        """Emit a Hyperlink for a LINK token, or its name as literal text.

        Forms:
            [url=target]text[/url]  -> Hyperlink(text, target)
            [url=target][/url]      -> Hyperlink(target, target)
            [url]target[/url]       -> Hyperlink(target, target)
            [email]addr[/email]     -> Hyperlink(addr, "mailto:" + addr)
        """
        name = token.value
        self._apply_tag(name, True)  # type: ignore[attr-defined]
        ctx = self._context
        stream = self._stream

        if ctx.link_target is None and (
            stream.at(1, TokenType.TEXT) and stream.at(2, TokenType.END_TAG, name)
        ):
            text = stream.lookahead().value
            stream.consume()
            target = MAILTO_SCHEME + text if name == "email" else text
            # The closing tag is left to normal dispatch, which clears the target.
            self._children.append(Hyperlink(display=(ctx.create_run(text),), target=target))
            return

        target = ctx.link_target
        if target is None:
            logger.debug("[%s] without a target, emitting literal text", name)
            self._children.append(ctx.create_run(name))
            return

        display = target
        if stream.at(1, TokenType.TEXT):
            display = stream.lookahead().value or target
            stream.consume()
        self._children.append(Hyperlink(display=(ctx.create_run(display),), target=target))

    def _parse_image(self, token: Token) -> None:
        """Emit an Image for an IMAGE token, or its name as literal text.

        A TEXT token directly after the tag becomes the image caption.
        """
        self._apply_tag(token.value, True)  # type: ignore[attr-defined]
        ctx = self._context
        image = ctx.image
        if image is None:
            logger.debug("[%s] without a source, emitting literal text", token.value)
            self._children.append(ctx.create_run(token.value))
            return

        stream = self._stream
        if stream.at(1, TokenType.TEXT):
            caption = stream.lookahead().value
            stream.consume()
            if caption:
                image = dataclasses.replace(image, caption=ctx.create_run(caption))
        self._children.append(image)
