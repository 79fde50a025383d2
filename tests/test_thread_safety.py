"""Concurrent matching.

match() keeps all state per call, so independent (pattern, subject)
pairs can be evaluated from many threads at once.
"""

from concurrent.futures import ThreadPoolExecutor

from minire import MatchConfig, Matcher, match

CASES = [
    ("a*b", "aaab", True),
    (".*b", "xxbxxb", True),
    ("ab?c", "abbc", False),
    ("a+", "", False),
    ("^bc", "abc", False),
    ("bc", "abcabc", True),
    ("a\\?", "a?", True),
    ("^.*a.*b$", "xxbxxa", False),
]


class TestConcurrentMatching:
    def test_results_stable_across_threads(self) -> None:
        work = CASES * 50
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda case: match(case[0], case[1]), work))
        assert results == [expected for _, _, expected in work]

    def test_shared_matcher(self) -> None:
        matcher = Matcher(MatchConfig(memoize=True))
        lines = [f"{p}|{s}" for p, s, _ in CASES] * 25
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(matcher.match_line, lines))
        assert results == [expected for _, _, expected in CASES] * 25
