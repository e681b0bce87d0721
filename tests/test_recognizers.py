"""Tests for individual inline recognizers.

Recognizers are exercised through Parser so that each one runs bound to a
real grammar, then checked on the children of the single resulting Line.
"""

import pytest

from mdinline import (
    BoldText,
    BracketedText,
    Code,
    ExtensionInline,
    Flavor,
    HtmlEntity,
    Image,
    InlineMath,
    ItalicText,
    Line,
    Link,
    OrdinaryText,
    Paragraph,
    ParseConfig,
    Parser,
    StrikeThroughText,
    parse,
    parse_config_context,
)
from mdinline.parsing.inline.scan import chomp_char, chomp_until, chomp_while
from mdinline.parsing.inline.tokens import Expected, Matched


def inlines(text: str, flavor: Flavor = Flavor.EXTENDED_MATH) -> tuple:
    """Children of the only Line produced for ``text``."""
    paragraph = Parser(text, flavor=flavor).parse()
    assert len(paragraph.children) == 1
    return paragraph.children[0].children


class TestScanHelpers:
    def test_chomp_until_finds_stop(self) -> None:
        assert chomp_until("ab*c", 0, "*") == 2

    def test_chomp_until_missing_stop_returns_length(self) -> None:
        assert chomp_until("abc", 1, "*") == 3

    def test_chomp_until_stop_at_pos(self) -> None:
        assert chomp_until("*a", 0, "*") == 0

    def test_chomp_while(self) -> None:
        assert chomp_while("abc1 x", 0, str.isalpha) == 3

    def test_chomp_char(self) -> None:
        assert chomp_char("x   y", 1, " ") == 4
        assert chomp_char("xy", 1, " ") == 1


class TestBold:
    def test_simple(self) -> None:
        assert inlines("**foo**") == (BoldText("foo"),)

    def test_bold_wins_over_italic(self) -> None:
        assert inlines("a **b** c") == (OrdinaryText("a "), BoldText("b"), OrdinaryText(" c"))

    def test_inner_star_defeats_bold(self) -> None:
        """The scan stops at the first star, which is not a closing pair."""
        assert inlines("**a*b**") == (ItalicText(""), OrdinaryText("a"), ItalicText("b"))

    def test_recognizer_reports_missing_close(self) -> None:
        parser = Parser("**abc", flavor=Flavor.STANDARD)
        assert parser._try_parse_bold("**abc", 0) == Expected("expected '**' to end bold text", 0)


class TestItalic:
    def test_simple(self) -> None:
        assert inlines("*foo*") == (ItalicText("foo"),)

    def test_empty(self) -> None:
        assert inlines("**") == (ItalicText(""),)

    def test_in_sentence(self) -> None:
        assert inlines("an *important* word") == (
            OrdinaryText("an "),
            ItalicText("important"),
            OrdinaryText(" word"),
        )

    def test_recognizer_result(self) -> None:
        parser = Parser("", flavor=Flavor.STANDARD)
        assert parser._try_parse_italic("*x* y", 0) == Matched(ItalicText("x"), 3)
        assert parser._try_parse_italic("x", 0) == Expected("expected '*' to begin italic text", 0)


class TestStrikethrough:
    def test_simple(self) -> None:
        assert inlines("~~old~~ new", Flavor.EXTENDED) == (
            StrikeThroughText("old"),
            OrdinaryText(" new"),
        )

    def test_single_tilde_is_not_strikethrough(self) -> None:
        """A lone tilde stops the line; the text before it is kept."""
        assert inlines("a ~ b", Flavor.EXTENDED) == (OrdinaryText("a "),)

    def test_not_recognized_in_standard(self) -> None:
        assert inlines("~~old~~", Flavor.STANDARD) == (OrdinaryText("~~old~~"),)


class TestCode:
    def test_simple(self) -> None:
        assert inlines("`x = 1`") == (Code("x = 1"),)

    def test_code_swallows_text_up_to_next_space(self) -> None:
        assert inlines("`a`, b") == (Code("a,"), OrdinaryText(" b"))

    def test_code_then_text(self) -> None:
        assert inlines("use `pip` here", Flavor.STANDARD) == (
            OrdinaryText("use "),
            Code("pip"),
            OrdinaryText(" here"),
        )

    def test_space_inside_backticks_kept(self) -> None:
        assert inlines("` a `") == (Code(" a "),)

    def test_unclosed_code(self) -> None:
        parser = Parser("", flavor=Flavor.STANDARD)
        assert parser._try_parse_code("`foo", 0) == Expected("expected '`' to end inline code", 0)


class TestLinksAndBrackets:
    def test_link(self) -> None:
        assert inlines("[abc](http://x)") == (Link(url="http://x", label="abc"),)

    def test_link_in_sentence(self) -> None:
        assert inlines("go [here](/p) now", Flavor.STANDARD) == (
            OrdinaryText("go "),
            Link(url="/p", label="here"),
            OrdinaryText(" now"),
        )

    def test_bracketed_text_without_url(self) -> None:
        assert inlines("[abc] rest") == (BracketedText("abc"), OrdinaryText(" rest"))

    def test_unclosed_paren_falls_back_to_bracketed_text(self) -> None:
        assert inlines("[abc](x") == (BracketedText("abc"), OrdinaryText("(x"))

    def test_empty_brackets(self) -> None:
        assert inlines("[]") == (BracketedText(""),)


class TestImage:
    def test_image(self) -> None:
        assert inlines("![alt](pic.png)") == (Image(alt="alt", url="pic.png"),)

    def test_image_then_text(self) -> None:
        assert inlines("![a](b) after") == (Image(alt="a", url="b"), OrdinaryText(" after"))

    def test_bang_mid_text_becomes_link(self) -> None:
        """Ordinary text eats the bang; the bracket is read as a link."""
        assert inlines("see ![a](b)", Flavor.STANDARD) == (
            OrdinaryText("see !"),
            Link(url="b", label="a"),
        )

    def test_trailing_newlines_consumed(self) -> None:
        parser = Parser("", flavor=Flavor.STANDARD)
        assert parser._try_parse_image("![a](b)\n\nx", 0) == Matched(Image(alt="a", url="b"), 9)

    @pytest.mark.parametrize(
        ("text", "message"),
        [
            ("x", "expected '![' to begin image"),
            ("![a] b", "expected '](' after image text"),
            ("![a](b", "expected ')' to end image url"),
        ],
    )
    def test_failures(self, text: str, message: str) -> None:
        parser = Parser("", flavor=Flavor.STANDARD)
        assert parser._try_parse_image(text, 0) == Expected(message, 0)


class TestHtmlEntity:
    def test_entity(self) -> None:
        assert inlines("&amp; x", Flavor.EXTENDED) == (HtmlEntity("amp"), OrdinaryText(" x"))

    def test_spaces_removed_from_name(self) -> None:
        assert inlines("& nbsp ;", Flavor.EXTENDED) == (HtmlEntity("nbsp"),)

    def test_missing_semicolon(self) -> None:
        parser = Parser("", flavor=Flavor.EXTENDED)
        assert parser._try_parse_html_entity("&amp", 0) == Expected(
            "expected ';' to end html entity", 0
        )


class TestInlineMath:
    def test_math_consumes_trailing_spaces(self) -> None:
        assert inlines("$x$ and") == (InlineMath("x"), OrdinaryText("and"))

    def test_math_in_sentence(self) -> None:
        assert inlines("so $a^2 + b^2$ holds") == (
            OrdinaryText("so "),
            InlineMath("a^2 + b^2"),
            OrdinaryText("holds"),
        )

    def test_dollar_is_text_outside_math_flavor(self) -> None:
        assert inlines("$x$", Flavor.EXTENDED) == (OrdinaryText("$x$"),)


class TestExtension:
    def test_with_arguments(self) -> None:
        assert inlines("@class[red stuff]", Flavor.EXTENDED) == (
            ExtensionInline(command="class", args=("red", "stuff")),
        )

    def test_empty_arguments(self) -> None:
        assert inlines("@note[] x", Flavor.EXTENDED) == (
            ExtensionInline(command="note", args=()),
            OrdinaryText("x"),
        )

    def test_repeated_spaces_do_not_make_empty_args(self) -> None:
        assert inlines("@tag[a   b]", Flavor.EXTENDED) == (ExtensionInline("tag", ("a", "b")),)

    def test_punctuation_in_arguments_rejected(self) -> None:
        parser = Parser("", flavor=Flavor.EXTENDED)
        assert parser._try_parse_extension("@c[a,b]", 0) == Expected(
            "expected ']' to end extension arguments", 0
        )

    def test_missing_bracket(self) -> None:
        parser = Parser("", flavor=Flavor.EXTENDED)
        assert parser._try_parse_extension("@c", 0) == Expected(
            "expected '[' after extension command name", 0
        )

    def test_not_recognized_in_standard(self) -> None:
        assert parse(Flavor.STANDARD, "@class[red stuff]") == Paragraph(
            (Line((OrdinaryText("@class[red stuff]"),)),)
        )


class TestLiteralLeads:
    """Special characters a flavor has no construct for stay literal."""

    def test_entity_is_literal_in_standard(self) -> None:
        assert parse(Flavor.STANDARD, "&amp;") == Paragraph((Line((OrdinaryText("&amp;"),)),))

    def test_rest_of_line_kept_after_text(self) -> None:
        assert inlines("a @b *c*", Flavor.STANDARD) == (
            OrdinaryText("a "),
            OrdinaryText("@b *c*"),
        )

    def test_transformer_applies_to_literal_tail(self) -> None:
        with parse_config_context(ParseConfig(text_transformer=str.upper)):
            result = Parser("x &amp;", flavor=Flavor.STANDARD).parse()
        assert result.children[0].children == (OrdinaryText("X "), OrdinaryText("&AMP;"))

    def test_extended_still_parses_entity(self) -> None:
        assert inlines("&amp;", Flavor.EXTENDED) == (HtmlEntity("amp"),)


class TestOrdinaryText:
    def test_plain(self) -> None:
        assert inlines("just words") == (OrdinaryText("just words"),)

    def test_stops_at_closing_bracket(self) -> None:
        assert inlines("a]b") == (OrdinaryText("a"),)

    def test_fails_on_special_character(self) -> None:
        parser = Parser("", flavor=Flavor.STANDARD)
        assert parser._try_parse_ordinary_text("*", 0) == Expected("expected ordinary text", 0)
