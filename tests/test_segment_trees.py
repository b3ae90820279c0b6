import random

import pytest

from contestlib.segment_trees import (
    BracketTree,
    CountIntervals,
    MyCalendarThree,
    NumArray,
    XorSegmentTree,
)


def _brute_brackets(s):
    depth = matched = 0
    for ch in s:
        if ch == "(":
            depth += 1
        elif depth:
            depth -= 1
            matched += 2
    return matched


def test_xor_tree_matches_list():
    rng = random.Random(1)
    values = [rng.randrange(1 << 20) for _ in range(37)]
    tree = XorSegmentTree(values)
    for _ in range(300):
        left = rng.randrange(len(values))
        right = rng.randrange(left, len(values))
        if rng.random() < 0.5:
            x = rng.randrange(1 << 20)
            tree.xor_range(left, right, x)
            for i in range(left, right + 1):
                values[i] ^= x
        else:
            assert tree.sum_range(left, right) == sum(values[left:right + 1])


def test_xor_twice_restores():
    values = [4, 7, 0, 19, 3]
    tree = XorSegmentTree(values)
    tree.xor_range(1, 3, 12345)
    tree.xor_range(1, 3, 12345)
    assert tree.sum_range(0, 4) == sum(values)


def test_xor_tree_errors():
    with pytest.raises(ValueError):
        XorSegmentTree([])
    with pytest.raises(ValueError):
        XorSegmentTree([1 << 20])
    tree = XorSegmentTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.sum_range(2, 3)
    with pytest.raises(ValueError):
        tree.xor_range(0, 1, -1)


def test_bracket_example():
    s = "())(())(())("
    tree = BracketTree(s)
    assert tree.max_regular(0, len(s) - 1) == 10
    assert tree.max_regular(0, 0) == 0


def test_bracket_matches_brute():
    rng = random.Random(2)
    s = "".join(rng.choice("()") for _ in range(60))
    tree = BracketTree(s)
    for left in range(0, 60, 3):
        for right in range(left, 60, 4):
            assert tree.max_regular(left, right) == _brute_brackets(s[left:right + 1])


def test_bracket_errors():
    with pytest.raises(ValueError):
        BracketTree("")
    with pytest.raises(IndexError):
        BracketTree("()").max_regular(1, 0)


def test_count_intervals_example():
    ci = CountIntervals()
    ci.add(2, 3)
    ci.add(7, 10)
    assert ci.count() == 6
    ci.add(5, 8)
    assert ci.count() == 8


def test_count_intervals_matches_set():
    rng = random.Random(3)
    ci = CountIntervals()
    covered = set()
    for _ in range(100):
        left = rng.randrange(1, 500)
        right = rng.randrange(left, 520)
        ci.add(left, right)
        covered.update(range(left, right + 1))
        assert ci.count() == len(covered)


def test_count_intervals_full_range():
    ci = CountIntervals()
    ci.add(1, 10**9)
    ci.add(5, 100)
    assert ci.count() == 10**9
    with pytest.raises(ValueError):
        ci.add(4, 3)


def test_num_array_matches_list():
    rng = random.Random(4)
    nums = [rng.randrange(-100, 100) for _ in range(23)]
    arr = NumArray(nums)
    for _ in range(200):
        if rng.random() < 0.5:
            i = rng.randrange(len(nums))
            nums[i] = rng.randrange(-100, 100)
            arr.update(i, nums[i])
        left = rng.randrange(len(nums))
        right = rng.randrange(left, len(nums))
        assert arr.sum_range(left, right) == sum(nums[left:right + 1])


def test_num_array_errors():
    arr = NumArray([1, 2])
    with pytest.raises(IndexError):
        arr.update(2, 5)
    with pytest.raises(IndexError):
        arr.sum_range(-1, 1)


def test_calendar_matches_brute():
    rng = random.Random(5)
    calendar = MyCalendarThree()
    counts = [0] * 200
    for _ in range(80):
        start = rng.randrange(0, 199)
        end = rng.randrange(start + 1, 200)
        for t in range(start, end):
            counts[t] += 1
        assert calendar.book(start, end) == max(counts)


def test_calendar_is_monotone_and_validates():
    calendar = MyCalendarThree()
    results = [calendar.book(s, e) for s, e in [(10, 20), (50, 60), (10, 40), (5, 15)]]
    assert results == sorted(results)
    with pytest.raises(ValueError):
        calendar.book(5, 5)