"""Tests for hyperlink and image parsing."""

from bbspan import (
    Container,
    FontSlant,
    FontWeight,
    Hyperlink,
    Image,
    Run,
    Style,
    parse,
)


def _link(display: str, target: str, style: Style | None = None) -> Hyperlink:
    return Hyperlink(display=(Run(display, style or Style()),), target=target)


class TestUrl:
    """[url] forms."""

    def test_explicit_target(self) -> None:
        assert parse("[url=https://a.example]go[/url]") == Container(
            children=(_link("go", "https://a.example"),)
        )

    def test_auto_link(self) -> None:
        assert parse("[url]https://a.example[/url]") == Container(
            children=(_link("https://a.example", "https://a.example"),)
        )

    def test_quoted_target(self) -> None:
        doc = parse('[url="https://a.example/?q=a b"]go[/url]')
        assert doc.children == (_link("go", "https://a.example/?q=a b"),)

    def test_target_without_body_is_its_own_display(self) -> None:
        assert parse("[url=x][/url]").children == (_link("x", "x"),)

    def test_target_with_non_text_body(self) -> None:
        children = parse("[url=x][b]go[/b][/url]").children
        assert children == (_link("x", "x"), Run("go", Style(weight=FontWeight.BOLD)))

    def test_text_after_link_is_plain(self) -> None:
        children = parse("[url=x]go[/url] after").children
        assert children == (_link("go", "x"), Run(" after"))

    def test_display_takes_current_style(self) -> None:
        children = parse("[b][url=x]go[/url][/b]").children
        assert children == (_link("go", "x", Style(weight=FontWeight.BOLD)),)

    def test_no_target_degrades_to_literal_name(self) -> None:
        assert parse("[url]").children == (Run("url"),)
        assert parse("[url][/url]").children == (Run("url"),)

    def test_auto_link_needs_matching_close(self) -> None:
        children = parse("[url]a[/email]").children
        assert children == (Run("url"), Run("a"))

    def test_auto_link_needs_text_only_body(self) -> None:
        children = parse("[url]a[b]c[/url]").children
        assert children == (Run("url"), Run("a"), Run("c", Style(weight=FontWeight.BOLD)))

    def test_close_clears_target(self) -> None:
        children = parse("[url=x]a[/url][url]").children
        assert children == (_link("a", "x"), Run("url"))


class TestEmail:
    """[email] forms add the mailto: scheme."""

    def test_auto_link(self) -> None:
        assert parse("[email]me@x.org[/email]").children == (
            _link("me@x.org", "mailto:me@x.org"),
        )

    def test_explicit_target(self) -> None:
        assert parse("[email=me@x.org]Mail me[/email]").children == (
            _link("Mail me", "mailto:me@x.org"),
        )

    def test_existing_scheme_kept(self) -> None:
        children = parse("[email=MAILTO:me@x.org]m[/email]").children
        assert children == (_link("m", "MAILTO:me@x.org"),)


class TestCommandLinks:
    """cmd: targets are surfaced for the host."""

    def test_command_parameter(self) -> None:
        link = parse("[url=cmd:refresh]Reload[/url]").children[0]
        assert isinstance(link, Hyperlink)
        assert link.command == "refresh"

    def test_ordinary_link_has_no_command(self) -> None:
        link = parse("[url]https://a.example[/url]").children[0]
        assert link.command is None


class TestImage:
    """[img] payloads and captions."""

    def test_uri_only(self) -> None:
        assert parse("[img=pic.png][/img]").children == (Image(uri="pic.png"),)

    def test_size_and_caption(self) -> None:
        assert parse("[img=pic.png,width=100,height=50]Cap[/img]").children == (
            Image(uri="pic.png", width=100.0, height=50.0, caption=Run("Cap")),
        )

    def test_unknown_and_invalid_fields_ignored(self) -> None:
        doc = parse('[img="pic.png, height=20,foo=bar,width=x"]')
        assert doc.children == (Image(uri="pic.png", height=20.0),)

    def test_caption_takes_current_style(self) -> None:
        children = parse("[i][img=a.png]cap[/img][/i]").children
        assert children == (
            Image(uri="a.png", caption=Run("cap", Style(slant=FontSlant.ITALIC))),
        )

    def test_no_source_degrades_to_literal_name(self) -> None:
        assert parse("[img]").children == (Run("img"),)
        assert parse("[img]x[/img]").children == (Run("img"), Run("x"))

    def test_empty_uri_degrades(self) -> None:
        assert parse('[img=",width=3"]').children == (Run("img"),)

    def test_pending_image_reused_by_bare_tag(self) -> None:
        children = parse("[img=a.png]x[img]y").children
        assert children == (
            Image(uri="a.png", caption=Run("x")),
            Image(uri="a.png", caption=Run("y")),
        )

    def test_close_clears_pending_image(self) -> None:
        children = parse("[img=a.png][/img][img]").children
        assert children == (Image(uri="a.png"), Run("img"))
