"""Segment trees: range XOR with sums, bracket matching, interval coverage,
point updates with range sums, and maximum booking overlap."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_BITS = 20
_COVER_LOW, _COVER_HIGH = 1, 10**9 + 1
_CALENDAR_LOW, _CALENDAR_HIGH = 0, 10**9 + 1


def _check_range(left: int, right: int, size: int) -> None:
    if not 0 <= left <= right < size:
        raise IndexError(f"range [{left}, {right}] is outside [0, {size - 1}]")


class _FlipTree:
    """Counts ones over a 0/1 array, with lazy range flips."""

    def __init__(self, bits: Sequence[int]) -> None:
        n = len(bits)
        self._ones = [0] * (4 * n)
        self._flip = [False] * (4 * n)
        self._last = n - 1
        self._build(1, 0, n - 1, bits)

    def _build(self, i: int, lo: int, hi: int, bits: Sequence[int]) -> None:
        if lo == hi:
            self._ones[i] = bits[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * i, lo, mid, bits)
        self._build(2 * i + 1, mid + 1, hi, bits)
        self._ones[i] = self._ones[2 * i] + self._ones[2 * i + 1]

    def _apply(self, i: int, lo: int, hi: int) -> None:
        self._ones[i] = (hi - lo + 1) - self._ones[i]
        self._flip[i] = not self._flip[i]

    def _push(self, i: int, lo: int, mid: int, hi: int) -> None:
        if self._flip[i]:
            self._apply(2 * i, lo, mid)
            self._apply(2 * i + 1, mid + 1, hi)
            self._flip[i] = False

    def flip(self, left: int, right: int) -> None:
        self._flip_at(1, 0, self._last, left, right)

    def _flip_at(self, i: int, lo: int, hi: int, left: int, right: int) -> None:
        if left <= lo and hi <= right:
            self._apply(i, lo, hi)
            return
        mid = (lo + hi) // 2
        self._push(i, lo, mid, hi)
        if left <= mid:
            self._flip_at(2 * i, lo, mid, left, right)
        if right > mid:
            self._flip_at(2 * i + 1, mid + 1, hi, left, right)
        self._ones[i] = self._ones[2 * i] + self._ones[2 * i + 1]

    def count(self, left: int, right: int) -> int:
        return self._count_at(1, 0, self._last, left, right)

    def _count_at(self, i: int, lo: int, hi: int, left: int, right: int) -> int:
        if left <= lo and hi <= right:
            return self._ones[i]
        mid = (lo + hi) // 2
        self._push(i, lo, mid, hi)
        total = 0
        if left <= mid:
            total += self._count_at(2 * i, lo, mid, left, right)
        if right > mid:
            total += self._count_at(2 * i + 1, mid + 1, hi, left, right)
        return total


class XorSegmentTree:
    """Array of values below 2**20 supporting range XOR and range sums.

    Ranges are 0-indexed and inclusive.
    """

    def __init__(self, values: Sequence[int]) -> None:
        if not values:
            raise ValueError("values must not be empty")
        for v in values:
            if not 0 <= v < 1 << _BITS:
                raise ValueError(f"value {v} is outside [0, 2**{_BITS})")
        self._size = len(values)
        self._trees = [
            _FlipTree([(v >> bit) & 1 for v in values]) for bit in range(_BITS)
        ]

    def __len__(self) -> int:
        return self._size

    def xor_range(self, left: int, right: int, x: int) -> None:
        """XOR every value in [left, right] with x."""
        _check_range(left, right, self._size)
        if not 0 <= x < 1 << _BITS:
            raise ValueError(f"x {x} is outside [0, 2**{_BITS})")
        for bit, tree in enumerate(self._trees):
            if x >> bit & 1:
                tree.flip(left, right)

    def sum_range(self, left: int, right: int) -> int:
        """Sum of the values in [left, right]."""
        _check_range(left, right, self._size)
        return sum(
            tree.count(left, right) << bit for bit, tree in enumerate(self._trees)
        )


@dataclass(frozen=True)
class _Brackets:
    matched: int
    open: int
    close: int

    def __add__(self, other: _Brackets) -> _Brackets:
        pairs = min(self.open, other.close)
        return _Brackets(
            self.matched + other.matched + 2 * pairs,
            self.open + other.open - pairs,
            self.close + other.close - pairs,
        )


_NO_BRACKETS = _Brackets(0, 0, 0)


class BracketTree:
    """Answers the longest regular bracket subsequence of a substring.

    Any character other than '(' counts as a closing bracket. Ranges are
    0-indexed and inclusive.
    """

    def __init__(self, s: str) -> None:
        if not s:
            raise ValueError("s must not be empty")
        self._size = len(s)
        self._nodes = [_NO_BRACKETS] * (4 * len(s))
        self._build(1, 0, len(s) - 1, s)

    def __len__(self) -> int:
        return self._size

    def _build(self, i: int, lo: int, hi: int, s: str) -> None:
        if lo == hi:
            is_open = s[lo] == "("
            self._nodes[i] = _Brackets(0, int(is_open), int(not is_open))
            return
        mid = (lo + hi) // 2
        self._build(2 * i, lo, mid, s)
        self._build(2 * i + 1, mid + 1, hi, s)
        self._nodes[i] = self._nodes[2 * i] + self._nodes[2 * i + 1]

    def _query(self, i: int, lo: int, hi: int, left: int, right: int) -> _Brackets:
        if hi < left or right < lo:
            return _NO_BRACKETS
        if left <= lo and hi <= right:
            return self._nodes[i]
        mid = (lo + hi) // 2
        return self._query(2 * i, lo, mid, left, right) + self._query(
            2 * i + 1, mid + 1, hi, left, right
        )

    def max_regular(self, left: int, right: int) -> int:
        """Length of the longest regular bracket subsequence of s[left..right]."""
        _check_range(left, right, self._size)
        return self._query(1, 0, self._size - 1, left, right).matched


class _Node:
    __slots__ = ("start", "end", "value", "lazy", "left", "right")

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        self.value = 0
        self.lazy = 0
        self.left: _Node | None = None
        self.right: _Node | None = None

    @property
    def size(self) -> int:
        return self.end - self.start + 1

    def children(self) -> tuple[_Node, _Node]:
        """Both children, created on first use."""
        if self.left is None:
            mid = (self.start + self.end) // 2
            self.left = _Node(self.start, mid)
            self.right = _Node(mid + 1, self.end)
        assert self.right is not None
        return self.left, self.right


class CountIntervals:
    """Union of added integer intervals over [1, 10**9 + 1]."""

    def __init__(self) -> None:
        self._root = _Node(_COVER_LOW, _COVER_HIGH)

    def add(self, left: int, right: int) -> None:
        """Add the interval [left, right]."""
        if left > right:
            raise ValueError("left must not exceed right")
        self._add(self._root, left, right)

    def _add(self, node: _Node, left: int, right: int) -> None:
        if node.value == node.size or right < node.start or node.end < left:
            return
        if left <= node.start and node.end <= right:
            node.value = node.size
            return
        low, high = node.children()
        self._add(low, left, right)
        self._add(high, left, right)
        node.value = low.value + high.value

    def count(self) -> int:
        """Number of integers covered by at least one added interval."""
        return self._root.value


class NumArray:
    """Array with point assignment and inclusive range sums."""

    def __init__(self, nums: Sequence[int]) -> None:
        self._size = len(nums)
        self._tree = [0] * self._size + list(nums)
        for i in range(self._size - 1, 0, -1):
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]

    def __len__(self) -> int:
        return self._size

    def update(self, index: int, val: int) -> None:
        """Set the value at index to val."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} is out of range")
        i = index + self._size
        self._tree[i] = val
        while i > 1:
            i //= 2
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]

    def sum_range(self, left: int, right: int) -> int:
        """Sum of the values with index in [left, right]."""
        _check_range(left, right, self._size)
        lo, hi = left + self._size, right + self._size + 1
        total = 0
        while lo < hi:
            if lo & 1:
                total += self._tree[lo]
                lo += 1
            if hi & 1:
                hi -= 1
                total += self._tree[hi]
            lo //= 2
            hi //= 2
        return total


class MyCalendarThree:
    """Bookings of half-open intervals, reporting the largest overlap so far."""

    def __init__(self) -> None:
        self._root = _Node(_CALENDAR_LOW, _CALENDAR_HIGH)

    def book(self, start: int, end: int) -> int:
        """Book [start, end) and return the maximum number of overlapping bookings."""
        if not 0 <= start < end <= 10**9:
            raise ValueError("booking must satisfy 0 <= start < end <= 10**9")
        self._add(self._root, start, end - 1)
        return self._root.value

    def _add(self, node: _Node, left: int, right: int) -> None:
        if right < node.start or node.end < left:
            return
        if left <= node.start and node.end <= right:
            node.value += 1
            node.lazy += 1
            return
        low, high = node.children()
        self._add(low, left, right)
        self._add(high, left, right)
        node.value = node.lazy + max(low.value, high.value)