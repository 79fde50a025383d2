"""Tests for minire.profiling — match profiling API."""

from minire import MatchConfig, match
from minire.profiling import (
    MatchAccumulator,
    get_match_accumulator,
    profiled_match,
)


class TestGetMatchAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_match_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_match():
            pass
        assert get_match_accumulator() is None


class TestProfiledMatch:
    def test_yields_accumulator(self) -> None:
        with profiled_match() as acc:
            assert isinstance(acc, MatchAccumulator)
            assert get_match_accumulator() is acc

    def test_records_match_call(self) -> None:
        with profiled_match() as acc:
            match("a.c", "xxabc")
        assert acc.match_calls == 1
        assert acc.pattern_chars == 3
        assert acc.subject_chars == 5
        # Offsets 0, 1 and 2 are tried before the match at 2 succeeds
        assert acc.anchored_attempts == 3

    def test_anchored_pattern_makes_one_attempt(self) -> None:
        with profiled_match() as acc:
            match("^abc", "xabc")
        assert acc.anchored_attempts == 1

    def test_records_multiple_calls(self) -> None:
        with profiled_match() as acc:
            match("a", "a")
            match("b", "a")
            match("c", "a")
        assert acc.match_calls == 3

    def test_memoize_reduces_attempts(self) -> None:
        pattern, subject = "a*a*a*b", "aaaaaaaa"
        with profiled_match() as plain:
            match(pattern, subject)
        with profiled_match() as memoized:
            match(pattern, subject, config=MatchConfig(memoize=True))
        assert memoized.anchored_attempts < plain.anchored_attempts


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = MatchAccumulator().summary()
        assert summary["match_calls"] == 0
        assert summary["anchored_attempts"] == 0
        assert summary["pattern_chars"] == 0
        assert summary["subject_chars"] == 0

    def test_summary_after_match(self) -> None:
        with profiled_match() as acc:
            match("bc", "abc")
        summary = acc.summary()
        assert summary["match_calls"] == 1
        assert summary["subject_chars"] == 3
        assert summary["total_ms"] >= 0
