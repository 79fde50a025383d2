"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def long_subject() -> str:
    """A ~100KB subject with the interesting part at the very end."""
    return "x" * 100_000 + "needle"


@pytest.fixture
def pathological_case() -> tuple[str, str]:
    """Chained stars against a subject that can never match."""
    return "a*" * 6 + "b", "a" * 24
