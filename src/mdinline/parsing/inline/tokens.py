"""Recognizer results.

Every recognizer returns exactly one of these NamedTuples:

- ``Matched``: the construct was found; ``end`` is the position just past
  everything it consumed.
- ``Expected``: the construct is absent; nothing was consumed and
  ``message`` says what the recognizer was looking for. The engine keeps
  these only long enough to build a diagnostic if no alternative matches.

Thread Safety:
All results are immutable and safe to share across threads.

Usage:
    match recognizer(text, pos):
        case Matched(node=node, end=end):
            ...
        case Expected(message=message):
            ...

"""

from __future__ import annotations

from typing import NamedTuple, TypeAlias

from mdinline.nodes import Inline


class Matched(NamedTuple):
    """Successful recognition.

    Attributes:
        node: The inline node produced.
        end: Position just past the consumed input.

    """

    node: Inline
    end: int


class Expected(NamedTuple):
    """Failed recognition, nothing consumed.

    Attributes:
        message: Human-readable expectation, e.g. ``expected '**' to end bold text``.
        position: Position the recognizer was tried at.

    """

    message: str
    position: int


# Type alias for a recognizer's return value
RecognizerResult: TypeAlias = Matched | Expected


__all__ = [
    "Expected",
    "Matched",
    "RecognizerResult",
]
