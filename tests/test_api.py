"""Tests for the public API surface (parse, Markdown, serializers)."""

from mdinline import (
    BoldText,
    Flavor,
    HtmlRenderer,
    Image,
    ItalicText,
    Line,
    Link,
    Markdown,
    OrdinaryText,
    Paragraph,
    content_string,
    debug_string,
    parse,
    render_string,
)


class TestParse:
    """Test the parse() function."""

    def test_parse_returns_paragraph(self) -> None:
        assert isinstance(parse(Flavor.STANDARD, "Hello"), Paragraph)

    def test_parse_italic(self) -> None:
        result = parse(Flavor.EXTENDED, "*foo*")
        assert result.children[0].children == (ItalicText("foo"),)

    def test_parse_link(self) -> None:
        result = parse(Flavor.STANDARD, "[abc](http://x)")
        assert result.children[0].children == (Link(url="http://x", label="abc"),)

    def test_parse_image(self) -> None:
        result = parse(Flavor.STANDARD, "![cat](c.png)")
        assert result.children[0].children == (Image(alt="cat", url="c.png"),)


class TestMarkdown:
    """Test the Markdown class."""

    def test_call_renders(self) -> None:
        md = Markdown()
        assert md("Hello **World**") == "<p>\n  Hello <b>World</b>\n</p>"

    def test_parse_returns_ast(self) -> None:
        md = Markdown(flavor="extended")
        assert md.parse("[abc](http://x)").children[0].children[0] == Link(
            url="http://x", label="abc"
        )

    def test_render(self) -> None:
        md = Markdown()
        assert md.render(Line((BoldText("x"),))) == "<b>x</b>"

    def test_parse_many_preserves_order(self) -> None:
        results = Markdown().parse_many(["*a*", "**b**", "c"])
        assert [r.children[0].children[0] for r in results] == [
            ItalicText("a"),
            BoldText("b"),
            OrdinaryText("c"),
        ]

    def test_default_renderer(self) -> None:
        md = Markdown(renderer=HtmlRenderer())
        assert md("x") == Markdown()("x")


class TestThreeProjections:
    """The same tree through each serializer."""

    def test_link_line(self) -> None:
        result = parse(Flavor.STANDARD, "see [abc](http://x)")
        assert debug_string(result) == "Paragraph\n  Line [OrdinaryText [see ], Link [abc](http://x)]"
        assert content_string(result) == "see  http://x abc"
        assert render_string(result) == "<p>\n  see Link [abc](http://x)\n</p>"
