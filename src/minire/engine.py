"""Recursive backtracking matcher.

Interprets the pattern text directly against the subject on every call.
Nothing is compiled and nothing is cached across calls.

Components, leaf-first:
- match_unit(): one pattern character against one subject character
- _Attempt.here(): the Anchored Matcher, consuming pattern and subject
  in lockstep from a pair of offsets
- quantifier dispatch inside the Anchored Matcher, with _Attempt._greedy()
  shared by ``*`` and ``+``
- match(): the Top-Level Matcher, applying ``^`` or sliding the start
  offset across the subject

Recursion only happens when a ``*`` or ``+`` unit tries the rest of the
pattern, so stack depth grows with the number of such units, never with
subject length. Backtracking is exponential in the worst case (for
example many chained ``*`` units against a long non-matching subject);
MatchConfig.memoize bounds it.

Thread Safety:
    Every call builds its own _Attempt. There is no shared mutable state,
    so independent (pattern, subject) pairs can be matched from any number
    of threads.

"""

from __future__ import annotations

import logging

from minire.charsets import END_ANCHOR, START_ANCHOR, WILDCARD
from minire.config import MatchConfig, get_match_config
from minire.elements import Element, ElementKind, Quantifier, read_element
from minire.profiling import get_match_accumulator
from minire.utils.logger import get_logger

logger = get_logger(__name__)


def match_unit(pattern_char: str, subject_char: str) -> bool:
    """Return True if one pattern character matches one subject character.

    The wildcard matches anything; every other character matches itself.
    The caller decides whether an escaped character goes through here.
    """
    return pattern_char == WILDCARD or pattern_char == subject_char


class _Attempt:
    """State of one top-level match() call.

    Holds the two strings, the options read from MatchConfig, the optional
    memo table and an attempt counter for profiling. Offsets into the
    strings are threaded through calls; the strings are never sliced.
    """

    __slots__ = (
        "_pattern",
        "_subject",
        "_literal_escapes",
        "_memo",
        "attempts",
    )

    def __init__(self, pattern: str, subject: str, config: MatchConfig) -> None:
        self._pattern = pattern
        self._subject = subject
        self._literal_escapes = config.literal_escapes
        self._memo: dict[tuple[int, int], bool] | None = {} if config.memoize else None
        self.attempts = 0

    @property
    def cached_results(self) -> int:
        """Number of memoized (pattern offset, subject offset) results."""
        return len(self._memo) if self._memo is not None else 0

    def unit(self, element: Element, subject_char: str) -> bool:
        """Compare one element against one subject character."""
        match element.kind:
            case ElementKind.ESCAPED:
                if element.char is None:
                    # Trailing backslash
                    return False
                if self._literal_escapes:
                    return element.char == subject_char
                return match_unit(element.char, subject_char)
            case _:
                return match_unit(element.char, subject_char)

    def here(self, p: int, s: int) -> bool:
        """Match pattern[p:] against subject[s:] with no sliding.

        Succeeds once the pattern is exhausted; the subject may have
        characters left over unless the pattern ends with ``$``.
        """
        memo = self._memo
        if memo is None:
            return self._here(p, s)

        key = (p, s)
        found = memo.get(key)
        if found is None:
            found = memo[key] = self._here(p, s)
        return found

    def _here(self, p: int, s: int) -> bool:
        pattern = self._pattern
        subject = self._subject
        pattern_end = len(pattern)
        subject_end = len(subject)
        self.attempts += 1

        while True:
            if p == pattern_end:
                return True

            if s == subject_end:
                # Only a lone trailing $ can match the end of the subject
                return p == pattern_end - 1 and pattern[p] == END_ANCHOR

            element = read_element(pattern, p)
            current = subject[s]

            match element.quantifier:
                case None:
                    # Plain unit, escape, or a $ compared as a literal
                    if not self.unit(element, current):
                        return False
                    s += 1

                case Quantifier.OPTIONAL:
                    if self.unit(element, current):
                        s += 1

                case Quantifier.STAR:
                    if self.unit(element, current):
                        return self._greedy(element, s)

                case Quantifier.PLUS:
                    if not self.unit(element, current):
                        return False
                    return self._greedy(element, s)

            p = element.end

    def _greedy(self, element: Element, s: int) -> bool:
        """Repeat ``element`` from subject[s], longest run first.

        The unit is already known to match subject[s]. Measure how far the
        run extends, then try the rest of the pattern after every possible
        run end, from the longest run down to a single repetition.
        """
        subject = self._subject
        run_end = s + 1
        while run_end < len(subject) and self.unit(element, subject[run_end]):
            run_end += 1

        rest = element.end
        for stop in range(run_end, s, -1):
            if self.here(rest, stop):
                return True
        return False


def match_anchored(pattern: str, subject: str, *, config: MatchConfig | None = None) -> bool:
    """Match ``pattern`` at the very start of ``subject`` only.

    This is the Anchored Matcher on its own: no ``^`` handling and no
    sliding. A trailing ``$`` is still honored.

    Args:
        pattern: Pattern text
        subject: Text to match against
        config: Options (defaults to the context config)

    Returns:
        True if the whole pattern matches a prefix of the subject

    """
    attempt = _Attempt(pattern, subject, config or get_match_config())
    return attempt.here(0, 0)


def match(pattern: str, subject: str, *, config: MatchConfig | None = None) -> bool:
    """Decide whether ``pattern`` matches somewhere in ``subject``.

    A leading ``^`` restricts the search to offset 0. Otherwise the
    pattern is tried at every offset of the subject, including the empty
    suffix at the end. Never raises: malformed patterns just fail to match
    (or match vacuously).

    Args:
        pattern: Pattern text (literals, ``.``, ``\\``, ``^``, ``$``, ``?``, ``*``, ``+``)
        subject: Text to search
        config: Options (defaults to the context config)

    Returns:
        True on a match, False otherwise

    Example:
        >>> match("a*b", "aaab")
        True
        >>> match("^bc", "abc")
        False
        >>> match("ab?c", "abbc")
        False

    """
    if config is None:
        config = get_match_config()
    attempt = _Attempt(pattern, subject, config)

    if pattern.startswith(START_ANCHOR):
        result = attempt.here(1, 0)
    else:
        result = any(attempt.here(0, start) for start in range(len(subject) + 1))

    acc = get_match_accumulator()
    if acc is not None:
        acc.record_match(len(pattern), len(subject), attempt.attempts)

    if config.memoize and logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Memoized match of %r: %d anchored attempts, %d cached results",
            pattern,
            attempt.attempts,
            attempt.cached_results,
        )

    return result


__all__ = [
    "match",
    "match_anchored",
    "match_unit",
]
