"""Tests for the Matcher facade and line helpers."""

import pytest

from minire import MatchConfig, Matcher, format_result, match_config_context, split_line


class TestSplitLine:
    """Splitting request lines into pattern and subject."""

    def test_splits_at_delimiter(self) -> None:
        assert split_line("a.c|abc") == ("a.c", "abc")

    def test_splits_at_first_delimiter_only(self) -> None:
        assert split_line("a|b|c") == ("a", "b|c")

    def test_missing_delimiter_gives_empty_subject(self) -> None:
        assert split_line("abc") == ("abc", "")

    def test_empty_line(self) -> None:
        assert split_line("") == ("", "")

    def test_strips_line_ending(self) -> None:
        assert split_line("a|b\n") == ("a", "b")
        assert split_line("a|b\r\n") == ("a", "b")

    def test_strips_only_one_line_ending(self) -> None:
        assert split_line("a|b\r\r\n") == ("a", "b\r")
        assert split_line("a|b\n\n") == ("a", "b\n")
        assert split_line("a|\rb") == ("a", "\rb")

    def test_keeps_other_whitespace(self) -> None:
        assert split_line(" a | b ") == (" a ", " b ")

    def test_custom_delimiter(self) -> None:
        assert split_line("a|b,c", ",") == ("a|b", "c")


class TestFormatResult:
    def test_true(self) -> None:
        assert format_result(True) == "true"

    def test_false(self) -> None:
        assert format_result(False) == "false"


class TestMatcher:
    """Matcher binds config and delimiter."""

    def test_call(self) -> None:
        matcher = Matcher()
        assert matcher("colou?r", "color") is True
        assert matcher("^colou?r$", "colors") is False

    def test_bound_config(self) -> None:
        matcher = Matcher(MatchConfig(literal_escapes=True))
        assert matcher("\\.", "x") is False
        assert matcher.config.literal_escapes is True

    def test_config_captured_at_construction(self) -> None:
        with match_config_context(MatchConfig(literal_escapes=True)):
            matcher = Matcher()
        assert matcher("\\.", "x") is False

    def test_match_line(self) -> None:
        matcher = Matcher()
        assert matcher.match_line("a+b|caab") is True
        assert matcher.match_line("a+b|cb") is False
        assert matcher.match_line("|anything") is True

    def test_match_lines_is_lazy(self) -> None:
        matcher = Matcher()
        results = matcher.match_lines(iter(["a|a\n", "b|a\n", "\n"]))
        assert next(results) is True
        assert list(results) == [False, True]

    def test_custom_delimiter(self) -> None:
        matcher = Matcher(delimiter="\t")
        assert matcher.delimiter == "\t"
        assert matcher.match_line("a|b\ta|b") is True

    @pytest.mark.parametrize("delimiter", ["", "||"])
    def test_rejects_bad_delimiter(self, delimiter: str) -> None:
        with pytest.raises(ValueError, match="single character"):
            Matcher(delimiter=delimiter)

    def test_repr(self) -> None:
        assert "delimiter='|'" in repr(Matcher())
