"""Compare backtracking work with and without memoization."""

from minire import MatchConfig, match
from minire.profiling import profiled_match

pattern = "a*" * 8 + "b"
subject = "a" * 14

with profiled_match() as plain:
    match(pattern, subject)

with profiled_match() as memoized:
    match(pattern, subject, config=MatchConfig(memoize=True))

print("plain:   ", plain.summary())
print("memoized:", memoized.summary())
