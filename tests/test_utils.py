"""Tests for minire.utils."""

import logging

from minire.utils import get_logger


class TestGetLogger:
    def test_adds_prefix(self) -> None:
        assert get_logger("mymodule").name == "minire.mymodule"

    def test_keeps_existing_prefix(self) -> None:
        assert get_logger("minire.engine").name == "minire.engine"
        assert get_logger("minire").name == "minire"

    def test_returns_stdlib_logger(self) -> None:
        logger = get_logger("x")
        assert isinstance(logger, logging.Logger)
        assert logger is logging.getLogger("minire.x")

    def test_engine_logs_memoized_matches(self, caplog) -> None:
        from minire import MatchConfig, match

        with caplog.at_level(logging.DEBUG, logger="minire"):
            match("a*b", "aab", config=MatchConfig(memoize=True))
        assert any("Memoized match" in r.getMessage() for r in caplog.records)
