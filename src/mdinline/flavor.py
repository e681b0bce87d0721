"""Markdown flavors.

A flavor selects which inline constructs are recognized. The three
flavors are increasingly permissive: each one recognizes everything the
previous one does plus a few more constructs.

Example:
    >>> Flavor.from_name("ExtendedMath")
    <Flavor.EXTENDED_MATH: 'extended_math'>
"""

from __future__ import annotations

from enum import StrEnum

from mdinline.errors import FlavorError


class Flavor(StrEnum):
    """Named inline grammar configuration."""

    STANDARD = "standard"
    EXTENDED = "extended"
    EXTENDED_MATH = "extended_math"

    @classmethod
    def from_name(cls, name: str | Flavor) -> Flavor:
        """Resolve a flavor from a user-facing name.

        Matching ignores case and ``-``/``_`` separators, so
        ``"extended-math"``, ``"extended_math"`` and ``"ExtendedMath"``
        all resolve to ``EXTENDED_MATH``.

        Raises:
            FlavorError: If the name matches no flavor.
        """
        if isinstance(name, Flavor):
            return name
        available = [flavor.value for flavor in cls]
        if not isinstance(name, str):
            raise FlavorError(str(name), available)
        key = name.strip().lower().replace("-", "").replace("_", "")
        for flavor in cls:
            if flavor.value.replace("_", "") == key:
                return flavor
        raise FlavorError(name, available)
