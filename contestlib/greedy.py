"""Greedy and sorting problems: tile rows, blocked cars, colouring,
packaging, planting, parity matching, windows, permutations and rooms."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import accumulate, groupby
from operator import itemgetter

from sortedcontainers import SortedList

MAX_INT32 = 2**31 - 1

_MOVES = {"R": (1, 0), "L": (-1, 0), "U": (0, 1), "D": (0, -1)}


def _price_groups(
    prices: Sequence[int], heights: Sequence[int]
) -> list[list[tuple[int, int]]]:
    """(height, 1-based index) pairs, grouped by equal price in ascending order."""
    tiles = sorted(zip(prices, heights, range(1, len(prices) + 1)))
    return [
        [(height, index) for _, height, index in group]
        for _, group in groupby(tiles, key=itemgetter(0))
    ]


def arrange_tiles(
    back_prices: Sequence[int],
    back_heights: Sequence[int],
    front_prices: Sequence[int],
    front_heights: Sequence[int],
) -> tuple[list[int], list[int]] | None:
    """Order two rows of tiles so both rows have non-decreasing prices and every
    front tile is strictly lower than the back tile behind it.

    Returns the 1-based tile indices of the back and the front row, position by
    position, or None when no such order exists.
    """
    n = len(back_prices)
    if any(len(s) != n for s in (back_heights, front_prices, front_heights)):
        raise ValueError("all four sequences must have the same length")

    back_groups = iter(_price_groups(back_prices, back_heights))
    front_groups = iter(_price_groups(front_prices, front_heights))
    backs: SortedList = SortedList()
    fronts: SortedList = SortedList()
    order_back: list[int] = []
    order_front: list[int] = []

    while len(order_back) < n:
        if not backs:
            backs.update(next(back_groups))
        if not fronts:
            fronts.update(next(front_groups))

        if len(backs) <= len(fronts):
            for height, index in backs:
                pos = fronts.bisect_left((height,))
                if pos == 0:
                    return None
                _, partner = fronts.pop(pos - 1)
                order_back.append(index)
                order_front.append(partner)
            backs.clear()
        else:
            for height, index in fronts:
                pos = backs.bisect_right((height, math.inf))
                if pos == len(backs):
                    return None
                _, partner = backs.pop(pos)
                order_front.append(index)
                order_back.append(partner)
            fronts.clear()

    return order_back, order_front


def final_positions(
    command: str, cars: Sequence[tuple[int, int]]
) -> list[tuple[int, int]]:
    """Positions of the cars after every car tries each move of command.

    A move is one of R, L, U, D. All cars move together, except that a cell at
    the origin is blocked: a car that would step onto it stays put, and cars
    piling up behind a blocked car stay with it.
    """
    groups: dict[tuple[int, int], list[int]] = {}
    for index, (x, y) in enumerate(cars):
        groups.setdefault((x, y), []).append(index)

    wall_x = wall_y = 0
    shift_x = shift_y = 0
    for ch in command:
        try:
            dx, dy = _MOVES[ch]
        except KeyError:
            raise ValueError(f"unknown move {ch!r}") from None
        wall_x -= dx
        wall_y -= dy
        blocked = groups.pop((wall_x, wall_y), None)
        if blocked is not None:
            dest = (wall_x - dx, wall_y - dy)
            waiting = groups.get(dest)
            if waiting is None:
                groups[dest] = blocked
            elif len(waiting) >= len(blocked):
                waiting.extend(blocked)
            else:
                blocked.extend(waiting)
                groups[dest] = blocked
        shift_x += dx
        shift_y += dy

    positions = [(0, 0)] * len(cars)
    for (x, y), indices in groups.items():
        for index in indices:
            positions[index] = (x + shift_x, y + shift_y)
    return positions


def can_paint(n: int, m: int, k: int, counts: Sequence[int]) -> bool:
    """Whether n cells can take m colours, counts[i] cells of colour i, so that
    every k consecutive cells have distinct colours."""
    if len(counts) != m:
        raise ValueError("counts must hold exactly m values")
    if k < 1:
        raise ValueError("k must be positive")
    full, extra = divmod(n, k)
    for i, total in enumerate(accumulate(sorted(counts, reverse=True)), start=1):
        if total > full * i + min(extra, i):
            return False
    return True


def min_packages(times: Sequence[int], k: int, d: int, w: int) -> int:
    """Fewest packages for customers arriving at sorted times, each package
    holding at most k items and serving arrivals within d + w of its first."""
    if k < 1:
        raise ValueError("k must be positive")
    packages = 0
    start = 0
    filled = k
    for t in times:
        if filled == k or t - start > d + w:
            packages += 1
            start = t
            filled = 0
        filled += 1
    return packages


def earliest_full_bloom(plant_time: Sequence[int], grow_time: Sequence[int]) -> int:
    """Earliest day by which every seed has been planted and has bloomed."""
    if len(plant_time) != len(grow_time):
        raise ValueError("plant_time and grow_time must have the same length")
    day = best = 0
    for grow, plant in sorted(zip(grow_time, plant_time), reverse=True):
        best = max(best, day + plant + grow)
        day += plant
    return best


def _by_parity(values: Sequence[int]) -> tuple[list[int], list[int]]:
    odd = sorted(v for v in values if v % 2)
    even = sorted(v for v in values if not v % 2)
    return odd, even


def make_similar(nums: Sequence[int], target: Sequence[int]) -> int:
    """Fewest +2/-2 paired operations making nums a rearrangement of target."""
    if len(nums) != len(target):
        raise ValueError("nums and target must have the same length")
    total = 0
    for mine, theirs in zip(_by_parity(nums), _by_parity(target)):
        if len(mine) != len(theirs):
            raise ValueError("nums and target differ in how many values are odd")
        total += sum((t - x) // 2 for x, t in zip(mine, theirs) if x < t)
    return total


def max_consecutive_ones(nums: Sequence[int]) -> int:
    """Longest run of ones in a 0/1 sequence after flipping at most one zero."""
    best = 0
    start = 0
    last_zero = -1
    for right, value in enumerate(nums):
        if not value:
            start = last_zero + 1
            last_zero = right
        best = max(best, right - start + 1)
    return best


def next_greater_element(n: int) -> int:
    """Smallest number above n made of n's digits, or -1 if none fits in 32 bits."""
    if n < 0:
        raise ValueError("n must not be negative")
    digits = list(str(n))
    for i in range(len(digits) - 2, -1, -1):
        if digits[i] < digits[i + 1]:
            break
    else:
        return -1
    j = next(j for j in range(len(digits) - 1, i, -1) if digits[j] > digits[i])
    digits[i], digits[j] = digits[j], digits[i]
    digits[i + 1:] = reversed(digits[i + 1:])
    result = int("".join(digits))
    return -1 if result > MAX_INT32 else result


def closest_room(
    rooms: Sequence[Sequence[int]], queries: Sequence[Sequence[int]]
) -> list[int]:
    """For each [preferred, min_size] query, the id of a room of at least that
    size whose id is closest to preferred (smaller id on ties), or -1."""
    by_size = sorted(rooms, key=itemgetter(1), reverse=True)
    order = sorted(range(len(queries)), key=lambda q: queries[q][1], reverse=True)
    ids: SortedList = SortedList()
    result = [-1] * len(queries)
    added = 0
    for q in order:
        preferred, min_size = queries[q]
        while added < len(by_size) and by_size[added][1] >= min_size:
            ids.add(by_size[added][0])
            added += 1
        if not ids:
            continue
        pos = ids.bisect_left(preferred)
        candidates = ids[max(pos - 1, 0):pos + 1]
        result[q] = min(candidates, key=lambda room: (abs(room - preferred), room))
    return result