"""Tests for node tree serialization."""

import json

import pytest

from bbspan import Color, Container, FontWeight, Image, Run, Style, parse
from bbspan.serialization import from_dict, from_json, to_dict, to_json


class TestRoundTrip:
    @pytest.mark.parametrize(
        "source",
        [
            "plain",
            "[b]bold[/b] [color=#80FF0000]tinted[/color]",
            "[quote=Al]hi[/quote][code]x[/code]",
            "[list][*]a[*]b[/list]",
            "[url=cmd:go]Go[/url] [email]me@x.org[/email]",
            "[img=a.png,width=3]cap[/img]",
            "line\nbreak",
        ],
    )
    def test_parsed_documents(self, source: str) -> None:
        doc = parse(source)
        assert from_json(to_json(doc)) == doc

    def test_deterministic(self) -> None:
        doc = parse("[b][i]x[/i][/b]")
        assert to_json(doc) == to_json(parse("[b][i]x[/i][/b]"))


class TestFormat:
    def test_discriminator(self) -> None:
        assert to_dict(Run("x"))["_type"] == "Run"

    def test_style_is_sparse(self) -> None:
        data = to_dict(Run("x", Style(weight=FontWeight.BOLD, foreground=Color(255, 0, 0))))
        assert data["style"] == {"weight": "BOLD", "foreground": "#FF0000"}

    def test_plain_style_is_empty(self) -> None:
        assert to_dict(Run("x"))["style"] == {}

    def test_image_fields(self) -> None:
        data = to_dict(Image(uri="a.png", width=2.0))
        assert data == {
            "_type": "Image",
            "uri": "a.png",
            "width": 2.0,
            "height": None,
            "caption": None,
        }

    def test_non_ascii_kept(self) -> None:
        text = to_json(Container(children=(Run("• é"),)))
        assert "• é" in text
        assert json.loads(text)["children"][0]["text"] == "• é"


class TestErrors:
    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="_type"):
            from_dict({"text": "x"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type"):
            from_dict({"_type": "Paragraph"})

    def test_unknown_enum_value(self) -> None:
        with pytest.raises(ValueError, match="weight"):
            from_dict({"_type": "Run", "text": "x", "style": {"weight": "HEAVY"}})

    def test_root_must_be_container(self) -> None:
        with pytest.raises(ValueError, match="Container"):
            from_json(json.dumps(to_dict(Run("x"))))
