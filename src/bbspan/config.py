"""ContextVar-based parse configuration for bbspan.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per BBCode instance (or per parse() call) and read by
the parser for the fixed presentation choices of quotes, code and lists.

Usage:
    from bbspan.config import ParseConfig, parse_config_context
    from bbspan.parser import Parser

    with parse_config_context(ParseConfig(bullet="- ")):
        doc = Parser("[list][*]a[/list]").parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field

from bbspan.styles import Color


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        bullet: Text of the run emitted for each [*] list item
        quote_foreground: Text colour inside [quote]
        code_font_family: Font family inside [code]
        code_background: Background colour inside [code]
        strict_colors: Raise ParseError on an unparseable [color=...]
            value; when False the value is ignored

    """

    bullet: str = "• "
    quote_foreground: Color = field(default_factory=lambda: Color(128, 128, 128))
    code_font_family: str = "Consolas"
    code_background: Color = field(default_factory=lambda: Color(240, 240, 240))
    strict_colors: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Unknown keys are silently ignored. Colour fields may be given as
        strings in any form Color.parse accepts.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "bullet": "* ",
            ...     "code_background": "#EEE",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.bullet
            '* '

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        for key in ("quote_foreground", "code_background"):
            if isinstance(filtered.get(key), str):
                filtered[key] = Color.parse(filtered[key])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(strict_colors=False)):
        ...     doc = Parser("[color=nope]x[/color]").parse()

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
