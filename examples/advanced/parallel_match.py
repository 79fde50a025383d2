"""No shared state: match 10,000 pairs in parallel."""

from concurrent.futures import ThreadPoolExecutor

from minire import match

pairs = [(f"^item-{i % 7}.*$", f"item-{i}-payload") for i in range(10_000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(lambda pair: match(*pair), pairs))

print(f"Matched {len(results)} pairs, {sum(results)} hits")
