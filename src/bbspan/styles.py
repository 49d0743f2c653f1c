"""Resolved text styles attached to every Run.

A Style is a fully-resolved snapshot: each attribute is either set or
absent, and absent attributes render with the host's defaults. Nothing is
left for the renderer to inherit.

Thread Safety:
All types here are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class FontWeight(Enum):
    """Font weight of a run."""

    NORMAL = auto()
    BOLD = auto()


class FontSlant(Enum):
    """Font slant of a run."""

    NORMAL = auto()
    ITALIC = auto()


class TextDecoration(Enum):
    """Text decoration of a run. Decorations are mutually exclusive."""

    UNDERLINE = auto()
    STRIKETHROUGH = auto()


@dataclass(frozen=True, slots=True)
class Color:
    """An sRGB colour with alpha.

    Examples:
        >>> Color.parse("#F00")
        Color(r=255, g=0, b=0, a=255)
        >>> str(Color.parse("gray"))
        '#808080'

    """

    r: int
    g: int
    b: int
    a: int = 255

    def __str__(self) -> str:
        if self.a == 255:
            return f"#{self.r:02X}{self.g:02X}{self.b:02X}"
        return f"#{self.a:02X}{self.r:02X}{self.g:02X}{self.b:02X}"

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse a colour from hex notation or a named colour.

        Accepts ``#RGB``, ``#ARGB``, ``#RRGGBB``, ``#AARRGGBB`` and the
        named colours in NAMED_COLORS (case-insensitive). Surrounding
        whitespace is ignored.

        Raises:
            ValueError: If text is not a recognised colour.
        """
        value = text.strip()
        if value.startswith("#"):
            return cls._parse_hex(value[1:], text)

        rgb = NAMED_COLORS.get(value.lower())
        if rgb is None:
            msg = f"Unknown color: {text!r}"
            raise ValueError(msg)
        if value.lower() == "transparent":
            return cls(255, 255, 255, 0)
        return cls((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)

    @classmethod
    def _parse_hex(cls, digits: str, original: str) -> Color:
        if not digits or any(c not in _HEX_DIGITS for c in digits):
            msg = f"Invalid hex color: {original!r}"
            raise ValueError(msg)

        match len(digits):
            case 3 | 4:
                # Short forms expand each digit: "F0A" -> "FF00AA"
                channels = [int(c * 2, 16) for c in digits]
            case 6 | 8:
                channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
            case _:
                msg = f"Invalid hex color: {original!r}"
                raise ValueError(msg)

        if len(channels) == 4:
            a, r, g, b = channels
            return cls(r, g, b, a)
        r, g, b = channels
        return cls(r, g, b)


@dataclass(frozen=True, slots=True)
class Style:
    """Fully-resolved style snapshot of a Run.

    Attributes:
        font_family: Font family name
        font_size: Point size
        weight: Font weight
        slant: Font slant
        decoration: Underline or strikethrough
        foreground: Text colour
        background: Highlight colour

    """

    font_family: str | None = None
    font_size: float | None = None
    weight: FontWeight | None = None
    slant: FontSlant | None = None
    decoration: TextDecoration | None = None
    foreground: Color | None = None
    background: Color | None = None

    @classmethod
    def plain(cls) -> Style:
        """Return the style with every attribute unset."""
        return _PLAIN

    @property
    def is_plain(self) -> bool:
        """Whether no attribute is set."""
        return self == _PLAIN


_PLAIN = Style()

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Named colours understood by [color=name], as 0xRRGGBB.
NAMED_COLORS: dict[str, int] = {
    "aliceblue": 0xF0F8FF,
    "antiquewhite": 0xFAEBD7,
    "aqua": 0x00FFFF,
    "aquamarine": 0x7FFFD4,
    "azure": 0xF0FFFF,
    "beige": 0xF5F5DC,
    "bisque": 0xFFE4C4,
    "black": 0x000000,
    "blanchedalmond": 0xFFEBCD,
    "blue": 0x0000FF,
    "blueviolet": 0x8A2BE2,
    "brown": 0xA52A2A,
    "burlywood": 0xDEB887,
    "cadetblue": 0x5F9EA0,
    "chartreuse": 0x7FFF00,
    "chocolate": 0xD2691E,
    "coral": 0xFF7F50,
    "cornflowerblue": 0x6495ED,
    "cornsilk": 0xFFF8DC,
    "crimson": 0xDC143C,
    "cyan": 0x00FFFF,
    "darkblue": 0x00008B,
    "darkcyan": 0x008B8B,
    "darkgoldenrod": 0xB8860B,
    "darkgray": 0xA9A9A9,
    "darkgreen": 0x006400,
    "darkkhaki": 0xBDB76B,
    "darkmagenta": 0x8B008B,
    "darkolivegreen": 0x556B2F,
    "darkorange": 0xFF8C00,
    "darkorchid": 0x9932CC,
    "darkred": 0x8B0000,
    "darksalmon": 0xE9967A,
    "darkseagreen": 0x8FBC8F,
    "darkslateblue": 0x483D8B,
    "darkslategray": 0x2F4F4F,
    "darkturquoise": 0x00CED1,
    "darkviolet": 0x9400D3,
    "deeppink": 0xFF1493,
    "deepskyblue": 0x00BFFF,
    "dimgray": 0x696969,
    "dodgerblue": 0x1E90FF,
    "firebrick": 0xB22222,
    "floralwhite": 0xFFFAF0,
    "forestgreen": 0x228B22,
    "fuchsia": 0xFF00FF,
    "gainsboro": 0xDCDCDC,
    "ghostwhite": 0xF8F8FF,
    "gold": 0xFFD700,
    "goldenrod": 0xDAA520,
    "gray": 0x808080,
    "green": 0x008000,
    "greenyellow": 0xADFF2F,
    "honeydew": 0xF0FFF0,
    "hotpink": 0xFF69B4,
    "indianred": 0xCD5C5C,
    "indigo": 0x4B0082,
    "ivory": 0xFFFFF0,
    "khaki": 0xF0E68C,
    "lavender": 0xE6E6FA,
    "lavenderblush": 0xFFF0F5,
    "lawngreen": 0x7CFC00,
    "lemonchiffon": 0xFFFACD,
    "lightblue": 0xADD8E6,
    "lightcoral": 0xF08080,
    "lightcyan": 0xE0FFFF,
    "lightgoldenrodyellow": 0xFAFAD2,
    "lightgray": 0xD3D3D3,
    "lightgreen": 0x90EE90,
    "lightpink": 0xFFB6C1,
    "lightsalmon": 0xFFA07A,
    "lightseagreen": 0x20B2AA,
    "lightskyblue": 0x87CEFA,
    "lightslategray": 0x778899,
    "lightsteelblue": 0xB0C4DE,
    "lightyellow": 0xFFFFE0,
    "lime": 0x00FF00,
    "limegreen": 0x32CD32,
    "linen": 0xFAF0E6,
    "magenta": 0xFF00FF,
    "maroon": 0x800000,
    "mediumaquamarine": 0x66CDAA,
    "mediumblue": 0x0000CD,
    "mediumorchid": 0xBA55D3,
    "mediumpurple": 0x9370DB,
    "mediumseagreen": 0x3CB371,
    "mediumslateblue": 0x7B68EE,
    "mediumspringgreen": 0x00FA9A,
    "mediumturquoise": 0x48D1CC,
    "mediumvioletred": 0xC71585,
    "midnightblue": 0x191970,
    "mintcream": 0xF5FFFA,
    "mistyrose": 0xFFE4E1,
    "moccasin": 0xFFE4B5,
    "navajowhite": 0xFFDEAD,
    "navy": 0x000080,
    "oldlace": 0xFDF5E6,
    "olive": 0x808000,
    "olivedrab": 0x6B8E23,
    "orange": 0xFFA500,
    "orangered": 0xFF4500,
    "orchid": 0xDA70D6,
    "palegoldenrod": 0xEEE8AA,
    "palegreen": 0x98FB98,
    "paleturquoise": 0xAFEEEE,
    "palevioletred": 0xDB7093,
    "papayawhip": 0xFFEFD5,
    "peachpuff": 0xFFDAB9,
    "peru": 0xCD853F,
    "pink": 0xFFC0CB,
    "plum": 0xDDA0DD,
    "powderblue": 0xB0E0E6,
    "purple": 0x800080,
    "red": 0xFF0000,
    "rosybrown": 0xBC8F8F,
    "royalblue": 0x4169E1,
    "saddlebrown": 0x8B4513,
    "salmon": 0xFA8072,
    "sandybrown": 0xF4A460,
    "seagreen": 0x2E8B57,
    "seashell": 0xFFF5EE,
    "sienna": 0xA0522D,
    "silver": 0xC0C0C0,
    "skyblue": 0x87CEEB,
    "slateblue": 0x6A5ACD,
    "slategray": 0x708090,
    "snow": 0xFFFAFA,
    "springgreen": 0x00FF7F,
    "steelblue": 0x4682B4,
    "tan": 0xD2B48C,
    "teal": 0x008080,
    "thistle": 0xD8BFD8,
    "tomato": 0xFF6347,
    "transparent": 0xFFFFFF,
    "turquoise": 0x40E0D0,
    "violet": 0xEE82EE,
    "wheat": 0xF5DEB3,
    "white": 0xFFFFFF,
    "whitesmoke": 0xF5F5F5,
    "yellow": 0xFFFF00,
    "yellowgreen": 0x9ACD32,
}
