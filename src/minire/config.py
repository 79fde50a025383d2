"""ContextVar-based match configuration for minire.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is read once per top-level match() call.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Explicit config
    match("a.c", "abc", config=MatchConfig(memoize=True))

    # Context-wide config
    from minire.config import set_match_config, reset_match_config, MatchConfig

    set_match_config(MatchConfig(memoize=True))
    try:
        match(pattern, subject)
    finally:
        reset_match_config()

    # Or use the context manager
    with match_config_context(MatchConfig(literal_escapes=True)):
        match(r"a\\.c", "a.c")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Immutable match configuration.

    Both options default to off, which gives the classic behavior of the
    matcher, quirks included.

    Attributes:
        memoize: Cache Anchored Matcher results on (pattern offset, subject
            offset) within one match() call. Same results, bounded work on
            pathological patterns.
        literal_escapes: Compare escaped characters for equality only, so
            ``\\.`` matches a literal dot. When off, an escaped ``.`` still
            matches any character.

    """

    memoize: bool = False
    literal_escapes: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "MatchConfig":
        """Create MatchConfig from dictionary.

        Only includes keys that are valid MatchConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                MatchConfig attribute names.

        Returns:
            New MatchConfig instance with values from dict.

        Example:
            >>> config = MatchConfig.from_dict({"memoize": True, "color": "red"})
            >>> config.memoize
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: MatchConfig = MatchConfig()

# Thread-local configuration via ContextVar
_match_config: ContextVar[MatchConfig] = ContextVar(
    "match_config",
    default=_DEFAULT_CONFIG,
)


def get_match_config() -> MatchConfig:
    """Get current match configuration (thread-local).

    Returns:
        The active MatchConfig for this thread/context.

    """
    return _match_config.get()


def set_match_config(config: MatchConfig) -> None:
    """Set match configuration for current context.

    Args:
        config: MatchConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _match_config.set(config)


def reset_match_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _match_config.set(_DEFAULT_CONFIG)


@contextmanager
def match_config_context(config: MatchConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: MatchConfig to use within the context.

    Yields:
        None

    Example:
        >>> with match_config_context(MatchConfig(memoize=True)):
        ...     match("a*a*a*b", "aaaaaaaaaaaaaaaa")
        False
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _match_config.get()
    _match_config.set(config)
    try:
        yield
    finally:
        _match_config.set(previous)


__all__ = [
    "MatchConfig",
    "get_match_config",
    "match_config_context",
    "reset_match_config",
    "set_match_config",
]
