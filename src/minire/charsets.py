"""Special characters of the pattern language.

All sets are frozensets for O(1) membership testing and safe sharing
across threads.

Usage:
    from minire.charsets import QUANTIFIERS

    if char in QUANTIFIERS:
        ...
"""

WILDCARD = "."
ESCAPE = "\\"
START_ANCHOR = "^"
END_ANCHOR = "$"

OPTIONAL = "?"
STAR = "*"
PLUS = "+"

# Suffixes that attach to the single preceding unit
QUANTIFIERS: frozenset[str] = frozenset(OPTIONAL + STAR + PLUS)
