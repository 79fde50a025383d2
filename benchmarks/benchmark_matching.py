"""Benchmark sliding search and backtracking.

Run with:
    pytest benchmarks/benchmark_matching.py -v --benchmark-only
"""

import pytest

from minire import MatchConfig, match


@pytest.mark.benchmark(group="sliding")
def test_benchmark_literal_search(benchmark, long_subject):
    """Literal pattern found at the end of a long subject."""
    assert benchmark(match, "needle", long_subject)


@pytest.mark.benchmark(group="sliding")
def test_benchmark_anchored_search(benchmark, long_subject):
    """Start anchor: a single attempt regardless of subject length."""
    assert not benchmark(match, "^needle", long_subject)


@pytest.mark.benchmark(group="backtracking")
def test_benchmark_backtracking_plain(benchmark, pathological_case):
    """Exponential backtracking without memoization (baseline)."""
    pattern, subject = pathological_case
    assert not benchmark(match, pattern, subject)


@pytest.mark.benchmark(group="backtracking")
def test_benchmark_backtracking_memoized(benchmark, pathological_case):
    """Same case with memoization enabled."""
    pattern, subject = pathological_case
    config = MatchConfig(memoize=True)
    assert not benchmark(match, pattern, subject, config=config)
