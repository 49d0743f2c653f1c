"""Mutable style context for one parse.

Holds the currently active style attributes and per-tag state. Tags set
attributes on open and clear them on close; there is no save/restore
stack, so nested tags of the same kind share one slot (the inner close
wipes the outer setting).
"""

from __future__ import annotations

from dataclasses import dataclass

from bbspan.nodes import Image, Run
from bbspan.styles import Color, FontSlant, FontWeight, Style, TextDecoration


@dataclass(slots=True)
class StyleContext:
    """Per-parse accumulator of active style attributes.

    Attributes:
        font_family: Active [font] or [code] family
        font_size: Active [size]
        weight: Set by [b]
        slant: Set by [i] and [quote]
        decoration: Set by [u] and [s]
        foreground: Set by [color] and [quote]
        background: Set by [code]
        link_target: Target of the open [url]/[email]
        image: Image pending from the last [img=...]
        list_mode: Inside [list]
        list_item_count: Bullets emitted in the current list

    """

    font_family: str | None = None
    font_size: float | None = None
    weight: FontWeight | None = None
    slant: FontSlant | None = None
    decoration: TextDecoration | None = None
    foreground: Color | None = None
    background: Color | None = None
    link_target: str | None = None
    image: Image | None = None
    list_mode: bool = False
    list_item_count: int = 0

    def snapshot(self) -> Style:
        """Resolve the active attributes into an immutable Style."""
        return Style(
            font_family=self.font_family,
            font_size=self.font_size,
            weight=self.weight,
            slant=self.slant,
            decoration=self.decoration,
            foreground=self.foreground,
            background=self.background,
        )

    def create_run(self, text: str) -> Run:
        """Materialize a Run carrying the current style."""
        return Run(text=text, style=self.snapshot())
