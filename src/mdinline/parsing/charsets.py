"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from mdinline.parsing.charsets import special_chars_for

    if char in special_chars_for(flavor):  # O(1) lookup
        ...
"""

from mdinline.flavor import Flavor

# Lead characters that end an ordinary-text run, per flavor
STANDARD_SPECIAL: frozenset[str] = frozenset("`[*&@\n")
EXTENDED_SPECIAL: frozenset[str] = STANDARD_SPECIAL | frozenset("~")
EXTENDED_MATH_SPECIAL: frozenset[str] = EXTENDED_SPECIAL | frozenset("$")

# Closing bracket ends ordinary text in every flavor
TEXT_TERMINATORS: frozenset[str] = frozenset("]")

_SPECIAL_BY_FLAVOR: dict[Flavor, frozenset[str]] = {
    Flavor.STANDARD: STANDARD_SPECIAL | TEXT_TERMINATORS,
    Flavor.EXTENDED: EXTENDED_SPECIAL | TEXT_TERMINATORS,
    Flavor.EXTENDED_MATH: EXTENDED_MATH_SPECIAL | TEXT_TERMINATORS,
}


def special_chars_for(flavor: Flavor) -> frozenset[str]:
    """Characters that may not appear inside an ordinary-text run."""
    return _SPECIAL_BY_FLAVOR[flavor]


def is_argument_char(char: str) -> bool:
    """Check if character may appear in extension argument text."""
    return char == " " or char.isalnum()
