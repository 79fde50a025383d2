"""
minire: a minimal backtracking pattern matcher

Decides whether a subject string contains a match for a small pattern
language: literal characters, the ``.`` wildcard, ``\\`` escapes, the
``^``/``$`` anchors and the ``?``/``*``/``+`` quantifiers. Patterns are
interpreted directly on every call; nothing is compiled.

Quick Start:
    >>> from minire import match
    >>> match("colou?r", "the color red")
    True
    >>> match("^a+$", "aaab")
    False

    >>> # Or bind options with the Matcher class
    >>> from minire import Matcher, MatchConfig
    >>> matcher = Matcher(MatchConfig(memoize=True))
    >>> matcher.match_line("a.*b|axxb")
    True

Command line:
    echo 'a.c|abc' | minire
"""

from minire.config import (
    MatchConfig,
    get_match_config,
    match_config_context,
    reset_match_config,
    set_match_config,
)
from minire.elements import Element, ElementKind, Quantifier, iter_elements, read_element
from minire.engine import match, match_anchored
from minire.errors import InputError, MinireError, PatternError
from minire.matcher import Matcher, format_result, split_line
from minire.profiling import MatchAccumulator, get_match_accumulator, profiled_match

__version__ = "0.1.0"

__all__ = [
    "Element",
    "ElementKind",
    "InputError",
    "MatchAccumulator",
    "MatchConfig",
    "Matcher",
    "MinireError",
    "PatternError",
    "Quantifier",
    "__version__",
    "format_result",
    "get_match_accumulator",
    "get_match_config",
    "iter_elements",
    "match",
    "match_anchored",
    "match_config_context",
    "profiled_match",
    "read_element",
    "reset_match_config",
    "set_match_config",
    "split_line",
]
