"""Opt-in parse statistics.

Counts what happened to the logical lines parsed inside a
``profiled_parse`` block:

- served from a line cache
- stopped early, losing the rest of the line
- failed outright and replaced by diagnostic text

Failure locations are kept as ``(lineno, col_offset)`` pairs so a caller
can point authors at the lines to fix without turning on strict mode.

Zero overhead when disabled (get_parse_accumulator() returns None).

Example:
    from mdinline import parse
    from mdinline.profiling import profiled_parse

    with profiled_parse() as stats:
        parse("standard", "ok.\\n`broken")
    print(stats.failures)
    # [(2, 1)]
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mdinline.nodes import Paragraph


@dataclass
class ParseAccumulator:
    """Statistics gathered while profiling.

    Attributes:
        start_time: Profiling start timestamp.
        parse_calls: Number of blocks parsed.
        line_count: Logical lines produced.
        node_count: Inline nodes produced.
        cached_lines: Lines served from a line cache.
        truncated_lines: Lines that stopped with input left over.
        dropped_chars: Characters discarded from truncated lines.
        failures: ``(lineno, col_offset)`` of every line that failed outright.
    """

    start_time: float = field(default_factory=perf_counter)
    parse_calls: int = 0
    line_count: int = 0
    node_count: int = 0
    cached_lines: int = 0
    truncated_lines: int = 0
    dropped_chars: int = 0
    failures: list[tuple[int, int]] = field(default_factory=list)

    def record_parse(self, paragraph: Paragraph) -> None:
        """Record one finished block."""
        self.parse_calls += 1
        self.line_count += len(paragraph.children)
        self.node_count += sum(len(line.children) for line in paragraph.children)

    def record_cache_hit(self) -> None:
        self.cached_lines += 1

    def record_truncation(self, dropped: int) -> None:
        self.truncated_lines += 1
        self.dropped_chars += dropped

    def record_failure(self, lineno: int, col_offset: int) -> None:
        self.failures.append((lineno, col_offset))

    @property
    def failed_lines(self) -> int:
        return len(self.failures)

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Counters as a flat dict, failures reduced to a count."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "parse_calls": self.parse_calls,
            "line_count": self.line_count,
            "node_count": self.node_count,
            "cached_lines": self.cached_lines,
            "truncated_lines": self.truncated_lines,
            "dropped_chars": self.dropped_chars,
            "failed_lines": self.failed_lines,
        }


_accumulator: ContextVar[ParseAccumulator | None] = ContextVar(
    "mdinline_parse_accumulator",
    default=None,
)


def get_parse_accumulator() -> ParseAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_parse() -> Iterator[ParseAccumulator]:
    """Context manager for profiled parsing.

    Yields:
        ParseAccumulator populated by parse calls inside the block.
    """
    acc = ParseAccumulator()
    token: Token[ParseAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
