"""Code, HTML entity, inline math and extension recognizers."""

from __future__ import annotations

from mdinline.nodes import Code, ExtensionInline, HtmlEntity, InlineMath
from mdinline.parsing.charsets import is_argument_char
from mdinline.parsing.inline.scan import chomp_char, chomp_until, chomp_while
from mdinline.parsing.inline.tokens import Expected, Matched, RecognizerResult


class SpecialInlineMixin:
    """Mixin for the remaining single-delimiter constructs.

    Required Host Attributes: None

    Required Host Methods: None

    """

    def _try_parse_code(self, text: str, pos: int) -> RecognizerResult:
        """Recognize `` `code` ``.

        After the closing backtick everything up to the next space is
        consumed too and ends up in the code text, minus backticks:
        ``"`a`, b"`` yields ``Code("a,")``.
        """
        if not text.startswith("`", pos):
            return Expected("expected '`' to begin inline code", pos)
        close = chomp_until(text, pos + 1, "`")
        if close >= len(text):
            return Expected("expected '`' to end inline code", pos)
        end = chomp_until(text, close + 1, " ")
        content = text[pos:end].strip().replace("`", "")
        return Matched(Code(content), end)

    def _try_parse_html_entity(self, text: str, pos: int) -> RecognizerResult:
        """Recognize ``&name;``."""
        if not text.startswith("&", pos):
            return Expected("expected '&' to begin html entity", pos)
        close = chomp_until(text, pos + 1, ";")
        if close >= len(text):
            return Expected("expected ';' to end html entity", pos)
        end = close + 1
        name = text[pos:end].replace("&", "").replace(";", "").replace(" ", "")
        return Matched(HtmlEntity(name), end)

    def _try_parse_inline_math(self, text: str, pos: int) -> RecognizerResult:
        """Recognize ``$math$`` plus any trailing spaces."""
        if not text.startswith("$", pos):
            return Expected("expected '$' to begin inline math", pos)
        close = chomp_until(text, pos + 1, "$")
        if close >= len(text):
            return Expected("expected '$' to end inline math", pos)
        end = chomp_char(text, close + 1, " ")
        content = text[pos:end].strip()[1:-1]
        return Matched(InlineMath(content), end)

    def _try_parse_extension(self, text: str, pos: int) -> RecognizerResult:
        """Recognize ``@command[arg1 arg2]`` plus any trailing spaces.

        Arguments may hold only spaces and alphanumerics.
        """
        if not text.startswith("@", pos):
            return Expected("expected '@' to begin extension command", pos)
        bracket = chomp_until(text, pos + 1, "[")
        if bracket >= len(text):
            return Expected("expected '[' after extension command name", pos)
        args_end = chomp_while(text, bracket + 1, is_argument_char)
        if not text.startswith("]", args_end):
            return Expected("expected ']' to end extension arguments", pos)
        end = chomp_char(text, args_end + 1, " ")
        args = tuple(arg for arg in text[bracket + 1 : args_end].split(" ") if arg)
        return Matched(ExtensionInline(command=text[pos + 1 : bracket], args=args), end)
