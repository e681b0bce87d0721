"""Per-line parse cache for re-rendering edited blocks.

An edit usually touches one or two logical lines of a block. The parser
looks every logical line up by its text and the settings that change how
it parses, so unchanged lines get back the very same ``Line`` node and
only the edited ones go through the recognizers again.

Keys ignore the line's position: identical text parses to an identical
``Line`` on any row, so repeated lines inside one block also share a node.

Thread Safety:
    DictLineCache is not thread-safe. Give each thread its own cache, or
    guard get/put with a lock.

Example:
    >>> from mdinline import DictLineCache, Markdown
    >>> cache = DictLineCache()
    >>> md = Markdown(flavor="extended")
    >>> before = md.parse("First **draft**.\\nSecond line.", cache=cache)
    >>> after = md.parse("First **draft**.\\nSecond line, edited.", cache=cache)
    >>> before.children[0] is after.children[0]
    True
"""

from __future__ import annotations

from collections import OrderedDict
from typing import TYPE_CHECKING, Protocol

from mdinline.utils.hashing import hash_str

if TYPE_CHECKING:
    from mdinline.flavor import Flavor
    from mdinline.nodes import Line


class LineCache(Protocol):
    """Protocol for logical-line caches.

    Cached Lines are immutable and safe to share across threads.
    """

    def get(self, key: str) -> Line | None:
        """Return the cached Line for ``key``, else None."""
        ...

    def put(self, key: str, line: Line) -> None:
        """Store ``line`` under ``key``."""
        ...


class DictLineCache:
    """In-memory LineCache, optionally bounded.

    With ``maxsize`` set, the least recently used line is evicted once the
    cache grows past it.
    """

    __slots__ = ("_data", "_maxsize")

    def __init__(self, maxsize: int | None = None) -> None:
        if maxsize is not None and maxsize < 1:
            raise ValueError(f"maxsize must be at least 1, got {maxsize}")
        self._data: OrderedDict[str, Line] = OrderedDict()
        self._maxsize = maxsize

    def get(self, key: str) -> Line | None:
        line = self._data.get(key)
        if line is not None:
            self._data.move_to_end(key)
        return line

    def put(self, key: str, line: Line) -> None:
        self._data[key] = line
        self._data.move_to_end(key)
        if self._maxsize is not None and len(self._data) > self._maxsize:
            self._data.popitem(last=False)

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)


def line_key(flavor: Flavor, strict: bool, line: str) -> str:
    """Cache key for one logical line.

    Strictness is part of the key: a line cached as diagnostic text must
    still raise when parsed again in strict mode.
    """
    return hash_str(f"{flavor.value}\x1f{int(strict)}\x1f{line}")


__all__ = [
    "DictLineCache",
    "LineCache",
    "line_key",
]
