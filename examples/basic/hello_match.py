"""Match a few patterns, no config needed."""

from minire import match

print(match("colou?r", "What color is it?"))
print(match("^a.*z$", "abcz"))
print(match("a+b", "xyz"))
