"""Inline recognizers and the line engine.

Provides mixins that together parse one logical line:
- Ordinary text and the repetition loop (core)
- Bold, italic, strikethrough (emphasis)
- Links, bracketed text, images (links)
- Code, HTML entities, inline math, extension commands (special)

Architecture:
Every recognizer is a ``_try_parse_<name>(text, pos)`` method returning
``Matched`` or ``Expected``. The grammar for the active flavor decides
which of them run and in what order.

"""

from __future__ import annotations

from mdinline.parsing.inline.core import InlineParsingCoreMixin
from mdinline.parsing.inline.emphasis import EmphasisMixin
from mdinline.parsing.inline.links import LinkParsingMixin
from mdinline.parsing.inline.special import SpecialInlineMixin
from mdinline.parsing.inline.tokens import Expected, Matched, RecognizerResult


class InlineParsingMixin(
    InlineParsingCoreMixin,
    EmphasisMixin,
    LinkParsingMixin,
    SpecialInlineMixin,
):
    """Combined inline parsing mixin.

    Required Host Attributes:
        - _special: frozenset[str]
        - _literal_leads: frozenset[str]
        - _recognizers: tuple of bound recognizer methods
        - _strict: bool
        - _source_file: str | None
        - _text_transformer: Callable[[str], str] | None

    """

    pass


__all__ = [
    # Mixins
    "InlineParsingMixin",
    "InlineParsingCoreMixin",
    "EmphasisMixin",
    "LinkParsingMixin",
    "SpecialInlineMixin",
    # Results
    "Expected",
    "Matched",
    "RecognizerResult",
]
