"""Bold, italic and strikethrough recognizers.

None of these support nesting. Each one scans to the next occurrence of
its delimiter character and requires the closing delimiter to sit right
there, so ``**a*b**`` is not bold: the scan stops at the lone ``*``.
"""

from __future__ import annotations

from mdinline.nodes import BoldText, ItalicText, StrikeThroughText
from mdinline.parsing.inline.scan import chomp_until
from mdinline.parsing.inline.tokens import Expected, Matched, RecognizerResult


class EmphasisMixin:
    """Mixin for delimiter-pair recognizers.

    Required Host Attributes: None

    Required Host Methods: None

    """

    def _try_parse_bold(self, text: str, pos: int) -> RecognizerResult:
        """Recognize ``**text**``."""
        if not text.startswith("**", pos):
            return Expected("expected '**' to begin bold text", pos)
        close = chomp_until(text, pos + 2, "*")
        if not text.startswith("**", close):
            return Expected("expected '**' to end bold text", pos)
        content = text[pos + 2 : close].replace("*", "")
        return Matched(BoldText(content), close + 2)

    def _try_parse_italic(self, text: str, pos: int) -> RecognizerResult:
        """Recognize ``*text*``."""
        if not text.startswith("*", pos):
            return Expected("expected '*' to begin italic text", pos)
        close = chomp_until(text, pos + 1, "*")
        if close >= len(text):
            return Expected("expected '*' to end italic text", pos)
        content = text[pos + 1 : close].replace("*", "")
        return Matched(ItalicText(content), close + 1)

    def _try_parse_strikethrough(self, text: str, pos: int) -> RecognizerResult:
        """Recognize ``~~text~~``."""
        if not text.startswith("~~", pos):
            return Expected("expected '~~' to begin strikethrough text", pos)
        close = chomp_until(text, pos + 2, "~")
        if not text.startswith("~~", close):
            return Expected("expected '~~' to end strikethrough text", pos)
        end = close + 2
        content = text[pos:end][2:].replace("~~", "")
        return Matched(StrikeThroughText(content), end)
