"""StringBuilder for O(n) string accumulation with indentation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Block-like nodes (``Paragraph``) render
their children on separate lines, indented two spaces per nesting level;
``append_indented`` takes care of the prefix.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations

INDENT_UNIT = "  "


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<p>").newline()
            >>> sb.append_indented("hello", depth=1).newline()
            >>> sb.append("</p>").build()
            '<p>\\n  hello\\n</p>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def append_indented(self, s: str, depth: int) -> StringBuilder:
        """Append ``s`` prefixed with ``depth`` indentation units.

        Returns:
            self for method chaining
        """
        if depth > 0:
            self._parts.append(INDENT_UNIT * depth)
        return self.append(s)

    def newline(self) -> StringBuilder:
        """Append a line break.

        Returns:
            self for method chaining
        """
        self._parts.append("\n")
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)
