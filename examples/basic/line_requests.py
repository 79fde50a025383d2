"""Answer pattern|subject requests the way the CLI does."""

from minire import Matcher, format_result

requests = [
    "a.c|abc",
    "^b|abc",
    "c$|abc",
    "a\\?|a?",
    "no-delimiter",
]

matcher = Matcher()
for line, result in zip(requests, matcher.match_lines(requests)):
    print(f"{line:<16} {format_result(result)}")
