"""Inline parser producing a typed Paragraph AST.

Splits a block's raw text into physical lines, folds them into logical
lines, and runs the flavor's recognizers over each logical line.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `InlineParsingCoreMixin`: ordinary text and the repetition loop
- `EmphasisMixin`, `LinkParsingMixin`, `SpecialInlineMixin`: recognizers

Thread Safety:
- Parser produces immutable AST (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share the AST across threads

"""

from __future__ import annotations

from collections.abc import Callable

from mdinline.cache import LineCache, line_key
from mdinline.config import ParseConfig, get_parse_config
from mdinline.flavor import Flavor
from mdinline.nodes import Line, Paragraph
from mdinline.parsing.charsets import special_chars_for
from mdinline.parsing.grammar import literal_leads_for, recognizers_for
from mdinline.parsing.inline import InlineParsingMixin
from mdinline.parsing.inline.core import RecognizerFn
from mdinline.preprocess import wrap
from mdinline.profiling import get_parse_accumulator


class Parser(InlineParsingMixin):
    """Inline markdown parser for one block of text.

    Usage:
        >>> Parser("Hello **World**").parse()
        Paragraph(children=(Line(children=(OrdinaryText(text='Hello '), BoldText(text='World'))),))

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. The flavor and other settings are captured from the
        ContextVar config when the parser is constructed.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_config",
        "_flavor",
        "_special",
        "_literal_leads",
        "_recognizers",
        "_cache",
    )

    def __init__(
        self,
        source: str,
        flavor: Flavor | str | None = None,
        source_file: str | None = None,
        cache: LineCache | None = None,
    ) -> None:
        """Initialize parser with source text.

        Args:
            source: Raw block text, block-level markup already removed
            flavor: Grammar to use. Defaults to the configured flavor.
            source_file: Optional source file path for error messages
            cache: Optional per-line cache shared between parses

        Raises:
            FlavorError: If ``flavor`` is an unknown name.

        """
        self._source = source
        self._source_file = source_file
        self._config: ParseConfig = get_parse_config()
        self._flavor = self._config.flavor if flavor is None else Flavor.from_name(flavor)
        self._special = special_chars_for(self._flavor)
        self._literal_leads = literal_leads_for(self._flavor)
        self._recognizers: tuple[RecognizerFn, ...] = self._bind_recognizers(
            recognizers_for(self._flavor)
        )
        # A transformer callback cannot be part of a cache key
        self._cache = cache if self._config.text_transformer is None else None

    @property
    def flavor(self) -> Flavor:
        """Grammar this parser runs."""
        return self._flavor

    @property
    def _strict(self) -> bool:
        """Whether a total line failure raises ParseError."""
        return self._config.strict

    @property
    def _text_transformer(self) -> Callable[[str], str] | None:
        """Optional callback to transform ordinary-text runs."""
        return self._config.text_transformer

    def logical_lines(self) -> list[str]:
        """Split the source and fold it into logical lines."""
        physical = self._source.split("\n")
        if not self._config.wrap_lines:
            return physical
        return wrap(physical)

    def parse(self) -> Paragraph:
        """Parse source into a Paragraph of Lines.

        Returns:
            Paragraph with one Line per logical line, in source order

        Raises:
            ParseError: Only in strict mode, when a line fails totally.

        """
        lines = self.logical_lines()
        return Paragraph(
            tuple(self._parse_cached(line, lineno) for lineno, line in enumerate(lines, start=1))
        )

    def _parse_cached(self, text: str, lineno: int) -> Line:
        """Parse one logical line, reusing a cached Line for unchanged text."""
        cache = self._cache
        if cache is None:
            return self._parse_line(text, lineno)

        key = line_key(self._flavor, self._strict, text)
        line = cache.get(key)
        if line is not None:
            acc = get_parse_accumulator()
            if acc is not None:
                acc.record_cache_hit()
            return line

        line = self._parse_line(text, lineno)
        cache.put(key, line)
        return line
