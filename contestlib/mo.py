"""Offline range queries answered with Mo's algorithm."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Sequence
from itertools import accumulate
from math import isqrt
from operator import xor
from typing import Hashable


def _mo(
    ranges: Sequence[tuple[int, int]],
    block: int,
    add: Callable[[int], None],
    remove: Callable[[int], None],
    answer: Callable[[int], int],
) -> list[int]:
    """Answer inclusive ranges in block order, keeping a sliding window."""
    order = sorted(
        range(len(ranges)), key=lambda q: (ranges[q][0] // block, ranges[q][1])
    )
    results = [0] * len(ranges)
    lo, hi = 0, -1
    for q in order:
        left, right = ranges[q]
        while left < lo:
            lo -= 1
            add(lo)
        while right > hi:
            hi += 1
            add(hi)
        while left > lo:
            remove(lo)
            lo += 1
        while right < hi:
            remove(hi)
            hi -= 1
        results[q] = answer(q)
    return results


def subtree_color_queries(
    colors: Sequence[Hashable],
    edges: Sequence[tuple[int, int]],
    queries: Sequence[tuple[int, int]],
) -> list[int]:
    """For each (v, k), the number of colours with at least k vertices in the
    subtree of v. The tree is rooted at vertex 0; vertices are 0-indexed."""
    n = len(colors)
    if n < 1:
        raise ValueError("a tree needs at least one vertex")
    if len(edges) != n - 1:
        raise ValueError("a tree on n vertices needs exactly n - 1 edges")
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)

    parent = [-1] * n
    seen = [False] * n
    seen[0] = True
    seq: list[int] = []
    stack = [0]
    while stack:
        u = stack.pop()
        seq.append(u)
        for v in reversed(adj[u]):
            if not seen[v]:
                seen[v] = True
                parent[v] = u
                stack.append(v)
    if len(seq) != n:
        raise ValueError("the graph is not connected")

    tin = [0] * n
    for t, u in enumerate(seq):
        tin[u] = t
    size = [1] * n
    for u in reversed(seq[1:]):
        size[parent[u]] += size[u]

    ranges = []
    for v, k in queries:
        if not 0 <= v < n:
            raise IndexError(f"vertex {v} is out of range")
        if k < 1:
            raise ValueError("k must be positive")
        ranges.append((tin[v], tin[v] + size[v] - 1))

    counter: Counter[Hashable] = Counter()
    at_least = [0] * (n + 2)

    def add(pos: int) -> None:
        color = colors[seq[pos]]
        counter[color] += 1
        at_least[counter[color]] += 1

    def remove(pos: int) -> None:
        color = colors[seq[pos]]
        at_least[counter[color]] -= 1
        counter[color] -= 1

    def answer(q: int) -> int:
        k = queries[q][1]
        return at_least[k] if k <= n else 0

    return _mo(ranges, max(1, isqrt(n)), add, remove, answer)


def xor_pair_counts(
    values: Sequence[int], k: int, queries: Sequence[tuple[int, int]]
) -> list[int]:
    """For each inclusive 0-indexed (l, r), the number of subarrays of
    values[l..r] whose XOR equals k."""
    n = len(values)
    prefix = [0, *accumulate(values, xor)]
    ranges = []
    for left, right in queries:
        if not 0 <= left <= right < n:
            raise IndexError(f"range [{left}, {right}] is outside the values")
        ranges.append((left, right + 1))

    counter: Counter[int] = Counter()
    total = 0

    def add(i: int) -> None:
        nonlocal total
        total += counter[k ^ prefix[i]]
        counter[prefix[i]] += 1

    def remove(i: int) -> None:
        nonlocal total
        counter[prefix[i]] -= 1
        total -= counter[k ^ prefix[i]]

    return _mo(ranges, max(1, isqrt(n)), add, remove, lambda _: total)