# contestlib

Classic competitive-programming algorithms and data structures, written as
plain Python functions and classes.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

The only runtime dependency is `sortedcontainers`, used by `contestlib.greedy`.

## Modules

- `contestlib.digit_dp`: digit dynamic programming.
  `count_classy_up_to`, `count_classy` (numbers with at most three non-zero
  digits), `least_lucky` (a number in a range whose largest minus smallest
  digit is least), `count_digit_sum` (numbers between two decimal strings with
  digit sum in a range, modulo 1e9+7) and `monkey_move`.
- `contestlib.segment_trees`:
  - `XorSegmentTree`: values below 2**20 with `xor_range` and `sum_range`.
  - `BracketTree`: `max_regular` gives the longest regular bracket
    subsequence of a substring.
  - `CountIntervals`: `add` intervals, `count` the integers covered.
  - `NumArray`: point `update` and `sum_range`.
  - `MyCalendarThree`: `book` half-open intervals and get the largest overlap.
- `contestlib.graphs`: `bipartite_orientation`, `isolated_components`,
  `shortest_path` (Dijkstra), `removal_distance_sums` (Floyd–Warshall while
  removing vertices) and `walls_and_gates` (multi-source BFS on a grid, with
  the cell constants `WALL`, `GATE` and `EMPTY_ROOM`).
- `contestlib.trees`: `component_value`, `TreeNode` with `tree_queries`,
  `max_output` and `tree_diameter_interactive`, which drives a caller-supplied
  `ask` function.
- `contestlib.word_search`: `find_words`, a trie-backed search for words
  traced through a letter grid.
- `contestlib.greedy`: `arrange_tiles`, `final_positions`, `can_paint`,
  `min_packages`, `earliest_full_bloom`, `make_similar`,
  `max_consecutive_ones`, `next_greater_element` and `closest_room`.
- `contestlib.mo`: Mo's algorithm for offline queries:
  `subtree_color_queries` and `xor_pair_counts`.
- `contestlib.dp`: `max_equal_substrings`, `max_impressions`,
  `min_sort_cost`, `count_submask_pairs`, `count_partitions`,
  `min_split_cost` and `min_equalize_cost`.

Vertices and array positions are 0-indexed and ranges are inclusive, unless a
docstring says otherwise.

## Examples

```python
from contestlib.digit_dp import count_classy, monkey_move
from contestlib.segment_trees import CountIntervals, MyCalendarThree, NumArray
from contestlib.graphs import shortest_path
from contestlib.word_search import find_words
from contestlib.greedy import next_greater_element

count_classy(1, 1000)                   # 1000
monkey_move(3)                          # 6

arr = NumArray([1, 3, 5])
arr.sum_range(0, 2)                     # 9
arr.update(1, 2)
arr.sum_range(0, 2)                     # 8

intervals = CountIntervals()
intervals.add(2, 3)
intervals.add(7, 10)
intervals.count()                       # 6

calendar = MyCalendarThree()
[calendar.book(s, e) for s, e in [(10, 20), (50, 60), (10, 40), (5, 15)]]
# [1, 1, 2, 3]

edges = [(0, 1, 2), (1, 4, 5), (1, 2, 4), (0, 3, 1), (3, 2, 3), (2, 4, 1)]
shortest_path(5, edges)                 # [0, 3, 2, 4]

board = [list("oaan"), list("etae"), list("ihkr"), list("iflv")]
find_words(board, ["oath", "pea", "eat", "rain"])   # ["oath", "eat"]

next_greater_element(12)                # 21
```

## Errors

Invalid arguments raise `ValueError`, and out-of-range positions raise
`IndexError`. Where a problem has no answer, the function returns `None`
(`bipartite_orientation`, `shortest_path`, `arrange_tiles`) or the value the
problem defines, such as `-1` from `next_greater_element`.

## What it does not do

This is a library only: it reads no input files and installs no command.
It has no string-matching routines, no LRU cache, union-find or monotonic
queue, no heavy-light decomposition and no assignment solver.