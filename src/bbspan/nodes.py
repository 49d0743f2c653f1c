"""Inline document nodes produced by the parser.

All nodes are frozen dataclasses with slots. There is no node base class:
InlineNode is a plain union, and consumers dispatch with ``match``.

Node kinds:
- Run: text with a fully-resolved Style
- LineBreak: forced line break
- Hyperlink: display inlines plus a target
- Image: picture with optional size and caption
- Container: ordered children (the parse root)

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from bbspan.styles import Style

# Targets of the form "cmd:<parameter>" are commands for the host, not URIs.
COMMAND_SCHEME = "cmd:"


@dataclass(frozen=True, slots=True)
class Run:
    """Text sharing one resolved style.

    BBCode: any text outside tags, e.g. ``[b]bold[/b]``

    """

    text: str
    style: Style = field(default_factory=Style.plain)


@dataclass(frozen=True, slots=True)
class LineBreak:
    """Forced line break.

    BBCode: a newline, ``[br]``, and the framing of quotes, code and lists

    """


@dataclass(frozen=True, slots=True)
class Hyperlink:
    """Hyperlink.

    BBCode: ``[url=target]text[/url]``, ``[url]target[/url]``,
    ``[email=addr]text[/email]``

    """

    display: tuple[InlineNode, ...]
    target: str

    @property
    def command(self) -> str | None:
        """Command parameter for ``cmd:`` targets, None for ordinary links.

        >>> Hyperlink(display=(), target="cmd:open:settings").command
        'open'
        """
        if not self.target.startswith(COMMAND_SCHEME):
            return None
        return self.target.split(":")[1]


@dataclass(frozen=True, slots=True)
class Image:
    """Image with an optional centered caption.

    BBCode: ``[img=uri,width=W,height=H]caption[/img]``

    """

    uri: str
    width: float | None = None
    height: float | None = None
    caption: Run | None = None


@dataclass(frozen=True, slots=True)
class Container:
    """Ordered sequence of inline nodes. The parse result is one Container."""

    children: tuple[InlineNode, ...] = ()


# Type alias for inline nodes
InlineNode: TypeAlias = Run | LineBreak | Hyperlink | Image | Container
