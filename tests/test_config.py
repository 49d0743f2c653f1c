"""Tests for ContextVar-based parse configuration."""

from threading import Thread

import pytest

from bbspan import (
    Color,
    ParseConfig,
    Parser,
    Run,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ParseConfig()
        assert config.bullet == "• "
        assert config.quote_foreground == Color(128, 128, 128)
        assert config.code_font_family == "Consolas"
        assert config.code_background == Color(240, 240, 240)
        assert config.strict_colors is True

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.bullet = "*"  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"bullet": "* ", "unknown_key": 1})
        assert config.bullet == "* "

    def test_from_dict_parses_colors(self) -> None:
        config = ParseConfig.from_dict({"code_background": "#EEE", "quote_foreground": "navy"})
        assert config.code_background == Color(0xEE, 0xEE, 0xEE)
        assert config.quote_foreground == Color(0, 0, 128)


class TestContextVar:
    """Config is read from the current context."""

    def test_set_and_reset(self) -> None:
        set_parse_config(ParseConfig(bullet="+ "))
        try:
            assert get_parse_config().bullet == "+ "
            assert Parser("[list][*]a").parse().children[1] == Run("+ ")
        finally:
            reset_parse_config()
        assert get_parse_config() == ParseConfig()

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with parse_config_context(ParseConfig(strict_colors=False)):
                assert get_parse_config().strict_colors is False
                raise RuntimeError("boom")
        assert get_parse_config().strict_colors is True

    def test_thread_isolation(self) -> None:
        seen: list[str] = []

        def worker() -> None:
            seen.append(get_parse_config().bullet)

        with parse_config_context(ParseConfig(bullet="# ")):
            thread = Thread(target=worker)
            thread.start()
            thread.join()

        assert seen == ["• "]
