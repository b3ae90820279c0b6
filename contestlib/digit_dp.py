"""Digit dynamic programming and modular counting."""

from __future__ import annotations

from functools import lru_cache

MOD = 1_000_000_007


def count_classy_up_to(x: int) -> int:
    """Count integers in [0, x] with at most three non-zero digits."""
    if x < 0:
        return 0
    digits = [int(c) for c in str(x)]

    @lru_cache(maxsize=None)
    def go(pos: int, non_zero: int, tight: bool) -> int:
        if pos == len(digits):
            return 1
        limit = digits[pos] if tight else 9
        total = 0
        for d in range(limit + 1):
            if d and non_zero == 3:
                continue
            total += go(pos + 1, non_zero + (d > 0), tight and d == limit)
        return total

    return go(0, 0, True)


def count_classy(low: int, high: int) -> int:
    """Count integers in [low, high] with at most three non-zero digits."""
    return count_classy_up_to(high) - count_classy_up_to(low - 1)


def least_lucky(low: int, high: int) -> int:
    """A number in [low, high] whose largest minus smallest digit is least."""
    if low > high:
        raise ValueError("low must not exceed high")
    sl, sr = str(low), str(high)
    if len(sl) < len(sr):
        return int("9" * (len(sr) - 1))

    lower = [int(c) for c in sl]
    upper = [int(c) for c in sr]
    n = len(lower)
    current = [0] * n
    visited: set[tuple[int, int, int, bool, bool]] = set()
    best_spread = 10
    best = low

    def dfs(pos: int, lo: int, hi: int, tight_low: bool, tight_high: bool) -> None:
        nonlocal best_spread, best
        if pos == n:
            if hi - lo < best_spread:
                best_spread = hi - lo
                best = int("".join(map(str, current)))
            return
        state = (pos, lo, hi, tight_low, tight_high)
        if state in visited or hi - lo >= best_spread:
            return
        visited.add(state)
        start = lower[pos] if tight_low else 0
        stop = upper[pos] if tight_high else 9
        for d in range(start, stop + 1):
            current[pos] = d
            dfs(pos + 1, min(lo, d), max(hi, d),
                tight_low and d == lower[pos], tight_high and d == upper[pos])

    dfs(0, 9, 0, True, True)
    return best


def _count_digit_sum_up_to(bound: str, min_sum: int, max_sum: int) -> int:
    digits = [int(c) for c in bound]

    @lru_cache(maxsize=None)
    def go(pos: int, dsum: int, tight: bool) -> int:
        if dsum > max_sum:
            return 0
        if pos == len(digits):
            return int(dsum >= min_sum)
        limit = digits[pos] if tight else 9
        return sum(
            go(pos + 1, dsum + d, tight and d == limit) for d in range(limit + 1)
        ) % MOD

    return go(0, 0, True)


def count_digit_sum(num1: str, num2: str, min_sum: int, max_sum: int) -> int:
    """Count integers in [num1, num2] whose digit sum lies in [min_sum, max_sum], mod 1e9+7."""
    below_high = _count_digit_sum_up_to(num2, min_sum, max_sum)
    below_low = _count_digit_sum_up_to(num1, min_sum, max_sum)
    low_sum = sum(int(c) for c in num1)
    extra = int(min_sum <= low_sum <= max_sum)
    return (below_high - below_low + extra) % MOD


def monkey_move(n: int) -> int:
    """Ways for n monkeys on a polygon to collide: 2**n - 2, mod 1e9+7."""
    return (pow(2, n, MOD) - 2) % MOD