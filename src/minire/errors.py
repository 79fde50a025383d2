"""Exception classes for minire.

``match`` itself never raises: malformed patterns simply fail to match.
These exceptions are used by the strict pattern scanner and the
command-line front end.
"""

from __future__ import annotations


class MinireError(Exception):
    """Base exception for all minire errors.

    Subclass this for specific error categories.
    """

    pass


class PatternError(MinireError):
    """Malformed pattern reported by a strict scan.

    Raised by ``iter_elements(pattern, strict=True)`` for a trailing
    backslash or a quantifier with no preceding unit.
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        pattern: str | None = None,
    ) -> None:
        """Initialize pattern error with optional position.

        Args:
            message: Error description
            offset: Position in the pattern where the problem starts (0-indexed)
            pattern: The offending pattern (optional)
        """
        self.message = message
        self.offset = offset
        self.pattern = pattern

        location = f" at offset {offset}" if offset is not None else ""
        super().__init__(f"{message}{location}")


class InputError(MinireError):
    """Error reading matching requests.

    Raised by the command-line front end when an input source cannot
    be read.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source: str | None = None,
    ) -> None:
        """Initialize input error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            source: Input file name (optional)
        """
        self.message = message
        self.lineno = lineno
        self.source = source

        location = ""
        if source:
            location = f"{source}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + ": "

        super().__init__(f"{location}{message}")
