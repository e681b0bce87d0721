"""Recovery from lines that cannot be parsed at all.

A line fails totally when no recognizer, not even ordinary text, can
consume its first character. Instead of aborting the document, the
"expected ..." messages of every recognizer tried at that position are
joined and shown in place of the line as plain text.

Example:
    >>> line = fallback_line([Expected("expected '`' to end inline code", 0)])
    >>> line.children[0].text
    "expected '`' to end inline code"
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from mdinline.errors import ParseError
from mdinline.nodes import Error, Line, OrdinaryText
from mdinline.utils.logger import get_logger

if TYPE_CHECKING:
    from mdinline.parsing.inline.tokens import Expected

logger = get_logger(__name__)

RECORD_SEPARATOR = "\n"


def describe_failure(expectations: Sequence[Expected]) -> str:
    """Join expectation messages in the order the recognizers ran.

    Duplicate messages are reported once.
    """
    seen: dict[str, None] = {}
    for expected in expectations:
        seen.setdefault(expected.message, None)
    return RECORD_SEPARATOR.join(seen)


def fallback_line(expectations: Sequence[Expected]) -> Line:
    """Line whose only child is the diagnostic rendered as plain text."""
    return Line((OrdinaryText(describe_failure(expectations)),))


def build_error_node(expectations: Sequence[Expected]) -> Error:
    """Structural form of a failure: one OrdinaryText per expectation."""
    return Error(tuple(OrdinaryText(expected.message) for expected in expectations))


def recover(
    expectations: Sequence[Expected],
    *,
    lineno: int,
    col_offset: int,
    strict: bool = False,
    source_file: str | None = None,
) -> Line:
    """Turn a total failure into a fallback line, or raise in strict mode.

    Args:
        expectations: What every recognizer wanted at the failing position
        lineno: Logical line number (1-indexed)
        col_offset: Failing column (1-indexed)
        strict: Raise instead of degrading
        source_file: Optional source path for the error message

    Raises:
        ParseError: If ``strict`` is set.
    """
    message = describe_failure(expectations)
    if strict:
        raise ParseError(
            message.replace(RECORD_SEPARATOR, "; "),
            lineno=lineno,
            col_offset=col_offset,
            source_file=source_file,
        )
    logger.warning(
        "Inline parse failed at %d:%d, rendering diagnostic text (%d expectations)",
        lineno,
        col_offset,
        len(expectations),
    )
    return fallback_line(expectations)
