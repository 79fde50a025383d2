"""Pattern element definitions for minire.

A pattern is never compiled. The engine calls read_element() at its
current offset on every step and dispatches on the returned kind, so
the pattern text stays the only representation of the pattern.

Element kinds:
- LITERAL: matches one equal subject character
- WILDCARD: ``.``, matches any one subject character
- ESCAPED: ``\\`` plus one character, compared like a literal/wildcard
- START_ANCHOR: ``^`` as the first pattern character
- END_ANCHOR: ``$`` as the last pattern character

LITERAL and WILDCARD units may carry one quantifier suffix (``?``,
``*``, ``+``). Escapes and anchors are never quantified.

Thread Safety:
Element is frozen (immutable) and safe to share across threads.
ElementKind and Quantifier are enums (inherently immutable).

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

from minire.charsets import END_ANCHOR, ESCAPE, QUANTIFIERS, START_ANCHOR, WILDCARD
from minire.errors import PatternError


class ElementKind(Enum):
    """Kinds of pattern elements."""

    LITERAL = auto()
    WILDCARD = auto()  # .
    ESCAPED = auto()  # \x
    START_ANCHOR = auto()  # ^ at offset 0
    END_ANCHOR = auto()  # $ at the end


class Quantifier(Enum):
    """Quantifier suffixes, valued by their pattern character."""

    OPTIONAL = "?"  # zero or one
    STAR = "*"  # zero or more
    PLUS = "+"  # one or more


@dataclass(frozen=True, slots=True)
class Element:
    """One element of a pattern, read at a given offset.

    Attributes:
        kind: Element category
        char: Character compared against the subject. For ESCAPED this is
            the escaped character; None for a trailing backslash.
        offset: Position of the element's first character in the pattern
        width: Number of pattern characters the element spans
        quantifier: Quantifier suffix, if the element is a quantified unit

    """

    kind: ElementKind
    char: str | None
    offset: int
    width: int = 1
    quantifier: Quantifier | None = None

    @property
    def end(self) -> int:
        """Offset of the first pattern character after this element."""
        return self.offset + self.width

    @property
    def is_quantified(self) -> bool:
        return self.quantifier is not None


def read_element(pattern: str, pos: int) -> Element:
    """Classify the pattern element starting at ``pos``.

    Follows the matcher's priority: an escape claims the next character
    before any quantifier is considered, a quantifier suffix binds to the
    character before it, and ``$`` is an anchor only as the final
    character. A leading ``^`` is handled by the caller; anywhere else it
    reads as a literal.

    Args:
        pattern: Full pattern text
        pos: Offset of the element, must be < len(pattern)

    Returns:
        The Element at ``pos``

    """
    char = pattern[pos]
    following = pattern[pos + 1] if pos + 1 < len(pattern) else ""

    if char == ESCAPE:
        if not following:
            return Element(ElementKind.ESCAPED, None, pos, 1)
        return Element(ElementKind.ESCAPED, following, pos, 2)

    kind = ElementKind.WILDCARD if char == WILDCARD else ElementKind.LITERAL

    if following in QUANTIFIERS:
        return Element(kind, char, pos, 2, Quantifier(following))

    if char == END_ANCHOR and not following:
        return Element(ElementKind.END_ANCHOR, char, pos, 1)

    return Element(kind, char, pos, 1)


def iter_elements(pattern: str, *, strict: bool = False) -> Iterator[Element]:
    """Walk a whole pattern element by element.

    Yields a START_ANCHOR element for a leading ``^`` and then every
    element in order. Matching does not use this; it is for inspecting
    and validating patterns.

    Args:
        pattern: Pattern text
        strict: Raise PatternError for malformed patterns instead of
            yielding the elements the matcher would see

    Yields:
        Element objects in pattern order

    Raises:
        PatternError: In strict mode, for a trailing backslash or a
            quantifier with nothing to repeat

    Example:
        >>> [e.kind.name for e in iter_elements("^a.*$")]
        ['START_ANCHOR', 'LITERAL', 'WILDCARD', 'END_ANCHOR']

    """
    pos = 0
    if pattern.startswith(START_ANCHOR):
        yield Element(ElementKind.START_ANCHOR, START_ANCHOR, 0, 1)
        pos = 1

    body_start = pos
    after_quantified = False
    while pos < len(pattern):
        element = read_element(pattern, pos)
        if strict:
            _check_element(pattern, element, body_start, after_quantified)
        yield element
        after_quantified = element.is_quantified
        pos = element.end


def _check_element(
    pattern: str,
    element: Element,
    body_start: int,
    after_quantified: bool,
) -> None:
    if element.kind is ElementKind.ESCAPED and element.char is None:
        raise PatternError("trailing backslash", element.offset, pattern)

    # A bare quantifier character here would be read as a literal
    if (
        element.kind is ElementKind.LITERAL
        and element.char in QUANTIFIERS
        and (element.offset == body_start or after_quantified)
    ):
        raise PatternError(
            f"quantifier {element.char!r} has nothing to repeat",
            element.offset,
            pattern,
        )


__all__ = [
    "Element",
    "ElementKind",
    "Quantifier",
    "iter_elements",
    "read_element",
]
