"""Tests for plain-text extraction."""

import pytest

from bbspan import LineBreak, Run, extract_text, parse


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("", ""),
        ("[b]Hello[/b]\nWorld", "Hello\nWorld"),
        ("[url=x]go[/url]", "go"),
        ("[img=p.png]cap[/img]", "cap"),
        ("[img=p.png][/img]", ""),
        ("[list][*]a[/list]", "\n• a\n"),
        ("[quote=Al]hi[/quote]", "\nAl wrote:\nhi\n"),
    ],
)
def test_extract_text(source: str, expected: str) -> None:
    assert extract_text(parse(source)) == expected


def test_single_nodes() -> None:
    assert extract_text(Run("x")) == "x"
    assert extract_text(LineBreak()) == "\n"
