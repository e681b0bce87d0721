"""Tests for mdinline.profiling (parse statistics)."""

import pytest

from mdinline import DictLineCache, Flavor, Markdown, ParseError, parse
from mdinline.profiling import (
    ParseAccumulator,
    get_parse_accumulator,
    profiled_parse,
)


class TestGetParseAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_parse_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_parse():
            pass
        assert get_parse_accumulator() is None


class TestProfiledParse:
    def test_yields_accumulator(self) -> None:
        with profiled_parse() as acc:
            assert isinstance(acc, ParseAccumulator)
            assert get_parse_accumulator() is acc

    def test_records_parse_call(self) -> None:
        with profiled_parse() as acc:
            parse(Flavor.STANDARD, "Hello **World**")
        assert acc.parse_calls == 1
        assert acc.line_count == 1
        assert acc.node_count == 2
        assert acc.failures == []

    def test_records_multiple_parse_calls(self) -> None:
        with profiled_parse() as acc:
            parse(Flavor.STANDARD, "One.\nTwo.")
            Markdown().parse_many(["*a*", "b"])
        assert acc.parse_calls == 3
        assert acc.line_count == 4


class TestLineOutcomes:
    """What happened to each logical line."""

    def test_failure_location_recorded(self) -> None:
        with profiled_parse() as acc:
            parse(Flavor.STANDARD, "ok.\n`broken")
        assert acc.failures == [(2, 1)]
        assert acc.failed_lines == 1

    def test_failure_recorded_before_strict_raise(self) -> None:
        with profiled_parse() as acc:
            with pytest.raises(ParseError):
                Markdown(strict=True).parse("`x")
        assert acc.failures == [(1, 1)]

    def test_truncation_counts_dropped_characters(self) -> None:
        with profiled_parse() as acc:
            parse(Flavor.STANDARD, "abc `x")
            parse(Flavor.STANDARD, "a]bc")
        assert acc.truncated_lines == 2
        assert acc.dropped_chars == 5
        assert acc.failed_lines == 0

    def test_literal_tail_is_not_truncation(self) -> None:
        with profiled_parse() as acc:
            parse(Flavor.STANDARD, "mail me @home")
        assert acc.truncated_lines == 0
        assert acc.failed_lines == 0

    def test_cache_hits_counted(self) -> None:
        cache = DictLineCache()
        with profiled_parse() as acc:
            parse(Flavor.STANDARD, "a.\nb.", cache=cache)
            parse(Flavor.STANDARD, "a.\nc.", cache=cache)
        assert acc.cached_lines == 1

    def test_summary(self) -> None:
        with profiled_parse() as acc:
            parse(Flavor.EXTENDED, "~~x~~ `y")
        summary = acc.summary()
        assert summary["parse_calls"] == 1
        assert summary["node_count"] == 2
        assert summary["truncated_lines"] == 1
        assert summary["dropped_chars"] == 2
        assert summary["failed_lines"] == 0
        assert summary["total_ms"] >= 0


class TestParseAccumulator:
    def test_record_methods(self) -> None:
        acc = ParseAccumulator()
        acc.record_truncation(3)
        acc.record_truncation(4)
        acc.record_failure(5, 1)
        acc.record_cache_hit()
        assert acc.truncated_lines == 2
        assert acc.dropped_chars == 7
        assert acc.failures == [(5, 1)]
        assert acc.cached_lines == 1

    def test_duration_non_negative(self) -> None:
        assert ParseAccumulator().total_duration_ms >= 0
