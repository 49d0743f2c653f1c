"""Tests for colours and resolved styles."""

import pytest

from bbspan import Color, FontWeight, Style


class TestColorParse:
    """Color.parse accepts hex and named forms."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("#F00", Color(255, 0, 0)),
            ("#ff0000", Color(255, 0, 0)),
            ("#8F00", Color(255, 0, 0, 0x88)),
            ("#80FF0000", Color(255, 0, 0, 0x80)),
            ("Red", Color(255, 0, 0)),
            ("CornflowerBlue", Color(0x64, 0x95, 0xED)),
            (" gray ", Color(128, 128, 128)),
            ("transparent", Color(255, 255, 255, 0)),
        ],
    )
    def test_valid(self, text: str, expected: Color) -> None:
        assert Color.parse(text) == expected

    @pytest.mark.parametrize("text", ["", "#", "#12", "#12345", "#GGGGGG", "nope", "rgb(1,2,3)"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            Color.parse(text)


class TestColorFormat:
    def test_opaque(self) -> None:
        assert str(Color(255, 0, 16)) == "#FF0010"

    def test_translucent(self) -> None:
        assert str(Color(255, 0, 0, 0x80)) == "#80FF0000"

    def test_str_parses_back(self) -> None:
        color = Color(1, 2, 3, 4)
        assert Color.parse(str(color)) == color


class TestStyle:
    def test_plain(self) -> None:
        assert Style.plain().is_plain
        assert Style() == Style.plain()

    def test_not_plain(self) -> None:
        assert not Style(weight=FontWeight.BOLD).is_plain

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Style().weight = FontWeight.BOLD  # type: ignore[misc]
