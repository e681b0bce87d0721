"""Grammar selection: which recognizers a flavor runs, and in what order.

Order is priority. The engine tries recognizers left to right at every
position and the first one that matches wins, so e.g. bold must come
before italic or ``**x**`` would be read as an empty italic run.

Ordinary text is always last: it is the catch-all that consumes anything
no other recognizer claims.
"""

from enum import StrEnum

from mdinline.flavor import Flavor
from mdinline.parsing.charsets import TEXT_TERMINATORS, special_chars_for


class Recognizer(StrEnum):
    """Identifier for one inline recognizer.

    The value names the parser method ``_try_parse_<value>``.
    """

    EXTENSION = "extension"
    CODE = "code"
    IMAGE = "image"
    LINK = "link"
    BOLD = "bold"
    ITALIC = "italic"
    STRIKETHROUGH = "strikethrough"
    HTML_ENTITY = "html_entity"
    INLINE_MATH = "inline_math"
    ORDINARY_TEXT = "ordinary_text"


GRAMMARS: dict[Flavor, tuple[Recognizer, ...]] = {
    Flavor.STANDARD: (
        Recognizer.CODE,
        Recognizer.IMAGE,
        Recognizer.LINK,
        Recognizer.BOLD,
        Recognizer.ITALIC,
        Recognizer.ORDINARY_TEXT,
    ),
    Flavor.EXTENDED: (
        Recognizer.EXTENSION,
        Recognizer.CODE,
        Recognizer.IMAGE,
        Recognizer.LINK,
        Recognizer.BOLD,
        Recognizer.ITALIC,
        Recognizer.STRIKETHROUGH,
        Recognizer.HTML_ENTITY,
        Recognizer.ORDINARY_TEXT,
    ),
    Flavor.EXTENDED_MATH: (
        Recognizer.EXTENSION,
        Recognizer.CODE,
        Recognizer.IMAGE,
        Recognizer.LINK,
        Recognizer.BOLD,
        Recognizer.ITALIC,
        Recognizer.STRIKETHROUGH,
        Recognizer.HTML_ENTITY,
        Recognizer.INLINE_MATH,
        Recognizer.ORDINARY_TEXT,
    ),
}


def recognizers_for(flavor: Flavor) -> tuple[Recognizer, ...]:
    """Return the ordered recognizer list for a flavor."""
    return GRAMMARS[flavor]


# First character of each construct; ordinary text has none
LEAD_CHARS: dict[Recognizer, str] = {
    Recognizer.EXTENSION: "@",
    Recognizer.CODE: "`",
    Recognizer.IMAGE: "!",
    Recognizer.LINK: "[",
    Recognizer.BOLD: "*",
    Recognizer.ITALIC: "*",
    Recognizer.STRIKETHROUGH: "~",
    Recognizer.HTML_ENTITY: "&",
    Recognizer.INLINE_MATH: "$",
}


def literal_leads_for(flavor: Flavor) -> frozenset[str]:
    """Special characters that begin no construct of ``flavor``.

    Standard keeps ``&`` and ``@`` out of ordinary-text runs without
    recognizing entities or extensions. Reaching one of them, the engine
    keeps the rest of the line as literal text.
    """
    leads = {LEAD_CHARS[r] for r in GRAMMARS[flavor] if r in LEAD_CHARS}
    return special_chars_for(flavor) - leads - TEXT_TERMINATORS - {"\n"}
