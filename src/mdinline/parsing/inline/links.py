"""Link, bracketed-text and image recognizers.

A ``[label]`` is a link only when a complete ``(url)`` follows the closing
bracket. Otherwise the cursor goes back to just after ``]`` and the label
becomes ``BracketedText``; whatever follows is left for the next
recognizer.
"""

from __future__ import annotations

from mdinline.nodes import BracketedText, Image, Link
from mdinline.parsing.inline.scan import chomp_char, chomp_until
from mdinline.parsing.inline.tokens import Expected, Matched, RecognizerResult


def _parse_destination(text: str, pos: int) -> tuple[str, int] | None:
    """Parse ``(url)`` at pos.

    Returns:
        (url, end_pos) or None if there is no complete parenthesized URL
    """
    if not text.startswith("(", pos):
        return None
    close = chomp_until(text, pos + 1, ")")
    if close >= len(text):
        return None
    return text[pos + 1 : close], close + 1


class LinkParsingMixin:
    """Mixin for bracket-introduced recognizers.

    Required Host Attributes: None

    Required Host Methods: None

    """

    def _try_parse_image(self, text: str, pos: int) -> RecognizerResult:
        """Recognize ``![alt](url)`` plus any trailing newlines."""
        if not text.startswith("![", pos):
            return Expected("expected '![' to begin image", pos)
        alt_end = chomp_until(text, pos + 2, "]")
        if not text.startswith("](", alt_end):
            return Expected("expected '](' after image text", pos)
        url_end = chomp_until(text, alt_end + 2, ")")
        if url_end >= len(text):
            return Expected("expected ')' to end image url", pos)
        end = chomp_char(text, url_end + 1, "\n")
        node = Image(alt=text[pos + 2 : alt_end], url=text[alt_end + 2 : url_end])
        return Matched(node, end)

    def _try_parse_link(self, text: str, pos: int) -> RecognizerResult:
        """Recognize ``[label](url)``, falling back to ``[label]``."""
        if not text.startswith("[", pos):
            return Expected("expected '[' to begin link or bracketed text", pos)
        label_end = chomp_until(text, pos + 1, "]")
        if label_end >= len(text):
            return Expected("expected ']' to end bracketed text", pos)
        label = text[pos + 1 : label_end]

        destination = _parse_destination(text, label_end + 1)
        if destination is None:
            return Matched(BracketedText(label), label_end + 1)
        url, end = destination
        return Matched(Link(url=url, label=label), end)
