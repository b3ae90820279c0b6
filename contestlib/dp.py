"""Dynamic programming problems: matching substrings, album impressions,
binary sorting cost, submask pairs, partitions, split costs and equalising."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections import Counter
from collections.abc import Sequence
from itertools import combinations

from .digit_dp import MOD

SWAP_COST = 10**12
REMOVE_COST = SWAP_COST + 1
SUBMASK_BITS = 20


def _runs_total(a: str, b: str, allowed: set[str]) -> int:
    """Substrings on which a, with letters in allowed made free, equals b."""
    total = 0
    run = 0
    for x, y in zip(a, b):
        if x == y or x in allowed:
            run += 1
        else:
            total += run * (run + 1) // 2
            run = 0
    return total + run * (run + 1) // 2


def max_equal_substrings(a: str, b: str, k: int) -> int:
    """Most substrings where a equals b after freely rewriting at most k
    distinct letters of a."""
    if len(a) != len(b):
        raise ValueError("a and b must have the same length")
    if k < 0:
        raise ValueError("k must not be negative")
    letters = list(dict.fromkeys(a))
    k = min(k, len(letters))
    return max(_runs_total(a, b, set(chosen)) for chosen in combinations(letters, k))


def max_impressions(albums: Sequence[Sequence[int]]) -> int:
    """Most times the best coolness so far rises when listening to a chosen
    order of whole albums."""
    if not albums:
        raise ValueError("albums must not be empty")
    compressed: list[list[int]] = []
    for album in albums:
        if not album:
            raise ValueError("every album needs at least one track")
        kept: list[int] = []
        for x in album:
            if not kept or x > kept[-1]:
                kept.append(x)
        compressed.append(kept)
    compressed.sort(key=lambda kept: kept[-1])

    best: list[int] = []
    backs: list[int] = []
    for kept in compressed:
        score = max(best[-1] if best else 0, len(kept))
        for j, x in enumerate(kept):
            idx = bisect_left(backs, x) - 1
            if idx >= 0:
                score = max(score, best[idx] + len(kept) - j)
        best.append(score)
        backs.append(kept[-1])
    return best[-1]


def min_sort_cost(s: str) -> int:
    """Least cost to sort a binary string, where swapping neighbours costs
    SWAP_COST and deleting a character costs REMOVE_COST."""
    if not s:
        raise ValueError("s must not be empty")
    if set(s) - {"0", "1"}:
        raise ValueError("s must consist of '0' and '1' only")
    inf = math.inf
    # Cheapest valid prefix ending with 0, with a lone 1 after zeros, with 11.
    end0: float = 0 if s[0] == "0" else REMOVE_COST
    end01: float = 0 if s[0] == "1" else inf
    end11: float = inf
    for ch in s[1:]:
        if ch == "1":
            end0, end01, end11 = (
                end0 + REMOVE_COST,
                min(end0, end01 + REMOVE_COST),
                min(end01, end11),
            )
        else:
            end0, end01, end11 = (
                end0,
                min(end0, end01 + SWAP_COST),
                end11 + REMOVE_COST,
            )
    return int(min(end0, end01, end11))


def count_submask_pairs(nums: Sequence[int]) -> int:
    """Ordered pairs (i, j), i == j allowed, with nums[j] a submask of nums[i]."""
    if not nums:
        return 0
    for x in nums:
        if not 0 <= x < 1 << SUBMASK_BITS:
            raise ValueError(f"value {x} is outside [0, 2**{SUBMASK_BITS})")
    bits = max(nums).bit_length()
    counts = [0] * (1 << bits)
    for x in nums:
        counts[x] += 1
    for i in range(bits):
        bit = 1 << i
        for mask in range(1 << bits):
            if mask & bit:
                counts[mask] += counts[mask ^ bit]
    return sum(counts[x] for x in nums)


def count_partitions(nums: Sequence[int], k: int) -> int:
    """Ways to split nums into two ordered groups each summing to at least k,
    modulo 1e9+7."""
    if k < 1:
        raise ValueError("k must be positive")
    if any(x < 0 for x in nums):
        raise ValueError("nums must not be negative")
    if sum(nums) < 2 * k:
        return 0
    ways = [1] + [0] * (k - 1)
    for x in nums:
        for j in range(k - 1, x - 1, -1):
            ways[j] = (ways[j] + ways[j - x]) % MOD
    return (pow(2, len(nums), MOD) - 2 * sum(ways)) % MOD


def min_split_cost(nums: Sequence[int], k: int) -> int:
    """Least total cost of splitting nums into subarrays, each costing k plus
    the number of its elements whose value occurs more than once in it."""
    n = len(nums)
    best: list[float] = [0] + [math.inf] * n
    for i in range(n):
        seen: Counter[int] = Counter()
        importance = k
        for j in range(i, -1, -1):
            seen[nums[j]] += 1
            count = seen[nums[j]]
            if count == 2:
                importance += 2
            elif count > 2:
                importance += 1
            best[i + 1] = min(best[i + 1], best[j] + importance)
    return int(best[n])


def min_equalize_cost(nums: Sequence[int], cost: Sequence[int]) -> int:
    """Least cost to make every value equal, where moving nums[i] by one costs
    cost[i]."""
    if not nums:
        raise ValueError("nums must not be empty")
    if len(nums) != len(cost):
        raise ValueError("nums and cost must have the same length")

    def total(target: int) -> int:
        return sum(abs(target - x) * c for x, c in zip(nums, cost))

    lo, hi = min(nums), max(nums)
    best: int | None = None
    while lo <= hi:
        mid1 = lo + (hi - lo) // 3
        mid2 = hi - (hi - lo) // 3
        c1, c2 = total(mid1), total(mid2)
        if c1 <= c2:
            hi = mid2 - 1
        else:
            lo = mid1 + 1
        low = min(c1, c2)
        best = low if best is None else min(best, low)
    assert best is not None
    return best