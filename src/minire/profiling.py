"""Opt-in profiling for pattern matching.

This module provides accumulated metrics during matching:
- Number of top-level match() calls
- Number of Anchored Matcher entries (a measure of backtracking work)
- Pattern and subject characters processed

Zero overhead when disabled (get_match_accumulator() returns None).

Example:
    from minire import match
    from minire.profiling import profiled_match

    with profiled_match() as metrics:
        match("a*a*a*b", "aaaaaaaa")

    print(metrics.summary())
    # {"total_ms": 0.4, "match_calls": 1, "anchored_attempts": ..., ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class MatchAccumulator:
    """Accumulated metrics during pattern matching.

    Attributes:
        start_time: Profiling start timestamp.
        match_calls: Number of match() calls recorded.
        anchored_attempts: Number of Anchored Matcher entries.
        pattern_chars: Total pattern length across calls.
        subject_chars: Total subject length across calls.

    """

    start_time: float = field(default_factory=perf_counter)
    match_calls: int = 0
    anchored_attempts: int = 0
    pattern_chars: int = 0
    subject_chars: int = 0

    def record_match(self, pattern_length: int, subject_length: int, attempts: int) -> None:
        """Record a match call.

        Args:
            pattern_length: Length of the pattern.
            subject_length: Length of the subject.
            attempts: Anchored Matcher entries made by the call.

        """
        self.match_calls += 1
        self.pattern_chars += pattern_length
        self.subject_chars += subject_length
        self.anchored_attempts += attempts

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of match metrics.

        Returns:
            Dict with total_ms, match_calls, anchored_attempts,
            pattern_chars, subject_chars.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "match_calls": self.match_calls,
            "anchored_attempts": self.anchored_attempts,
            "pattern_chars": self.pattern_chars,
            "subject_chars": self.subject_chars,
        }


# Module-level ContextVar
_accumulator: ContextVar[MatchAccumulator | None] = ContextVar(
    "match_accumulator",
    default=None,
)


def get_match_accumulator() -> MatchAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_match() -> Iterator[MatchAccumulator]:
    """Context manager for profiled matching.

    Creates a MatchAccumulator and makes it available via
    get_match_accumulator() for the duration of the with block.

    Yields:
        MatchAccumulator that will be populated during match calls.

    """
    acc = MatchAccumulator()
    token: Token[MatchAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = [
    "MatchAccumulator",
    "get_match_accumulator",
    "profiled_match",
]
