"""Exception classes for mdinline.

Inline parsing itself never raises: malformed syntax degrades to plain
text. These exceptions cover strict mode, configuration and the
serializers' input checks.
"""

from __future__ import annotations


class MdInlineError(Exception):
    """Base exception for all mdinline errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(MdInlineError):
    """A logical line could not be parsed at all.

    Only raised when ``ParseConfig.strict`` is enabled; otherwise the
    failure is rendered as visible diagnostic text.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Logical line number where parsing failed (1-indexed)
            col_offset: Column where parsing failed (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class FlavorError(MdInlineError, ValueError):
    """Unknown markdown flavor name."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown flavor: {name!r}. Available: {', '.join(available)}")


class RenderError(MdInlineError):
    """A serializer was handed something that is not an AST node."""

    pass


class SerializationError(MdInlineError, ValueError):
    """Serialized AST data is malformed or names an unknown node type."""

    pass
