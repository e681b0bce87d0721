"""Alternation/repetition engine for one logical line.

At each position the flavor's recognizers are tried in priority order.
The first ``Matched`` result commits: its node is kept and the cursor
jumps to its end. When every recognizer returns ``Expected`` the loop
stops, unless it stopped on a special character the flavor has no
construct for: then the rest of the line is kept as literal text.
Stopping with nodes in hand is not an error; stopping before the
first node is a total failure and goes to ``mdinline.diagnostics``.

Thread Safety:
All methods use instance-local state only. Safe for concurrent use when
each parser instance is used by one thread.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from mdinline.diagnostics import recover
from mdinline.nodes import Inline, Line, OrdinaryText
from mdinline.parsing.inline.scan import chomp_while
from mdinline.parsing.inline.tokens import Expected, Matched, RecognizerResult
from mdinline.profiling import get_parse_accumulator
from mdinline.utils.logger import get_logger

if TYPE_CHECKING:
    from mdinline.parsing.grammar import Recognizer

logger = get_logger(__name__)

RecognizerFn: TypeAlias = Callable[[str, int], RecognizerResult]


class InlineParsingCoreMixin:
    """Ordinary text plus the repetition loop.

    Required Host Attributes:
        - _special: frozenset[str]
        - _literal_leads: frozenset[str]
        - _recognizers: tuple[RecognizerFn, ...]
        - _strict: bool
        - _source_file: str | None
        - _text_transformer: Callable[[str], str] | None

    Required Host Methods (from other mixins):
        - _try_parse_<recognizer>(text, pos) -> RecognizerResult

    """

    def _bind_recognizers(self, grammar: tuple[Recognizer, ...]) -> tuple[RecognizerFn, ...]:
        """Resolve recognizer ids to bound methods, preserving order."""
        return tuple(getattr(self, f"_try_parse_{recognizer.value}") for recognizer in grammar)

    def _try_parse_ordinary_text(self, text: str, pos: int) -> RecognizerResult:
        """Recognize a run of one or more non-special characters."""
        special = self._special
        end = chomp_while(text, pos, lambda c: c not in special)
        if end == pos:
            return Expected("expected ordinary text", pos)
        return Matched(self._ordinary_text(text[pos:end]), end)

    def _ordinary_text(self, content: str) -> OrdinaryText:
        if self._text_transformer is not None:
            content = self._text_transformer(content)
        return OrdinaryText(content)

    def _parse_line(self, text: str, lineno: int = 1) -> Line:
        """Parse one logical line into a Line node."""
        recognizers = self._recognizers
        nodes: list[Inline] = []
        expectations: list[Expected] = []
        pos = 0
        text_len = len(text)

        while pos < text_len:
            expectations = []
            for recognizer in recognizers:
                match recognizer(text, pos):
                    case Matched(node=node, end=end):
                        nodes.append(node)
                        pos = end
                        break
                    case Expected() as expected:
                        expectations.append(expected)
            else:
                if text[pos] in self._literal_leads:
                    nodes.append(self._ordinary_text(text[pos:]))
                    pos = text_len
                break

        if pos == text_len:
            return Line(tuple(nodes))

        acc = get_parse_accumulator()
        if not nodes:
            if acc is not None:
                acc.record_failure(lineno, pos + 1)
            return recover(
                expectations,
                lineno=lineno,
                col_offset=pos + 1,
                strict=self._strict,
                source_file=self._source_file,
            )

        if acc is not None:
            acc.record_truncation(text_len - pos)
        logger.debug(
            "Line %d stopped at column %d, dropping %d unparsed characters",
            lineno,
            pos + 1,
            text_len - pos,
        )
        return Line(tuple(nodes))
