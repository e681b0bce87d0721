"""Parsing subsystem for mdinline.

- charsets: per-flavor special characters
- grammar: per-flavor ordered recognizer lists
- inline: recognizers and the line engine
"""

from mdinline.parsing.charsets import special_chars_for
from mdinline.parsing.grammar import GRAMMARS, Recognizer, literal_leads_for, recognizers_for
from mdinline.parsing.inline import InlineParsingMixin

__all__ = [
    "GRAMMARS",
    "InlineParsingMixin",
    "Recognizer",
    "literal_leads_for",
    "recognizers_for",
    "special_chars_for",
]
