"""High-level matcher facade and line helpers.

Matcher binds a MatchConfig and a delimiter so callers can feed it
requests in the ``pattern|subject`` line format without touching the
context config.

Example:
    >>> from minire import Matcher
    >>> matcher = Matcher()
    >>> matcher("colou?r", "color")
    True
    >>> [format_result(r) for r in matcher.match_lines(["a|a", "b|a"])]
    ['true', 'false']
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from minire.config import MatchConfig, get_match_config
from minire.engine import match
from minire.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_DELIMITER = "|"


def split_line(line: str, delimiter: str = DEFAULT_DELIMITER) -> tuple[str, str]:
    """Split one request line into (pattern, subject).

    Splits at the first occurrence of ``delimiter``; the subject is empty
    when the delimiter is absent. One trailing line ending (``\\n`` or
    ``\\r\\n``) is dropped first.

    Args:
        line: Request line
        delimiter: Single separator character

    Returns:
        (pattern, subject) tuple

    Example:
        >>> split_line("a|b|c")
        ('a', 'b|c')
        >>> split_line("abc\\n")
        ('abc', '')
    """
    line = line.removesuffix("\n").removesuffix("\r")
    pattern, found, subject = line.partition(delimiter)
    if not found:
        logger.debug("No %r delimiter in line %r, matching against empty subject", delimiter, line)
    return pattern, subject


def format_result(value: bool) -> str:
    """Render a match result as ``true`` or ``false``."""
    return "true" if value else "false"


class Matcher:
    """Pattern matcher bound to a configuration.

    Args:
        config: Options for every match (defaults to the context config
            at construction time)
        delimiter: Separator used by match_line()

    Thread Safety:
        Matcher holds only immutable state and can be shared across threads.

    """

    __slots__ = ("_config", "_delimiter")

    def __init__(
        self,
        config: MatchConfig | None = None,
        *,
        delimiter: str = DEFAULT_DELIMITER,
    ) -> None:
        if len(delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
        self._config = config if config is not None else get_match_config()
        self._delimiter = delimiter

    @property
    def config(self) -> MatchConfig:
        return self._config

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def __call__(self, pattern: str, subject: str) -> bool:
        return match(pattern, subject, config=self._config)

    def match_line(self, line: str) -> bool:
        """Split a ``pattern<delimiter>subject`` line and match it."""
        pattern, subject = split_line(line, self._delimiter)
        return self(pattern, subject)

    def match_lines(self, lines: Iterable[str]) -> Iterator[bool]:
        """Yield one result per input line, lazily."""
        for line in lines:
            yield self.match_line(line)

    def __repr__(self) -> str:
        return f"Matcher(config={self._config!r}, delimiter={self._delimiter!r})"


__all__ = [
    "DEFAULT_DELIMITER",
    "Matcher",
    "format_result",
    "split_line",
]
