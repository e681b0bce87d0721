"""Cursor helpers shared by the recognizers.

All helpers are pure: they take the line and a position and return a new
position. None of them ever moves backwards.
"""

from collections.abc import Callable


def chomp_until(text: str, pos: int, stop: str) -> int:
    """Position of the next ``stop`` at or after ``pos``, or ``len(text)``."""
    idx = text.find(stop, pos)
    return len(text) if idx == -1 else idx


def chomp_while(text: str, pos: int, predicate: Callable[[str], bool]) -> int:
    """Advance past every character satisfying ``predicate``."""
    text_len = len(text)
    while pos < text_len and predicate(text[pos]):
        pos += 1
    return pos


def chomp_char(text: str, pos: int, char: str) -> int:
    """Advance past a run of ``char``."""
    text_len = len(text)
    while pos < text_len and text[pos] == char:
        pos += 1
    return pos
