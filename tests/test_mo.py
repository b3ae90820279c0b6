import pytest

from contestlib.mo import subtree_color_queries, xor_pair_counts

COLORS = [1, 2, 2, 3, 3, 2, 3, 3]
EDGES = [(0, 1), (0, 4), (1, 2), (1, 3), (4, 5), (4, 6), (4, 7)]


def test_subtree_color_queries_sample():
    queries = [(0, 2), (0, 3), (0, 4), (1, 3), (4, 3)]
    assert subtree_color_queries(COLORS, EDGES, queries) == [2, 2, 1, 0, 1]


def test_subtree_color_queries_root_counts_distinct_colours():
    result = subtree_color_queries(COLORS, EDGES, [(0, 1)])
    assert result == [len(set(COLORS))]


def test_subtree_color_queries_sum_over_k_is_subtree_size():
    n = len(COLORS)
    for v, subtree_size in ((0, n), (1, 3), (4, 4), (7, 1)):
        answers = subtree_color_queries(
            COLORS, EDGES, [(v, k) for k in range(1, n + 1)]
        )
        assert sum(answers) == subtree_size
        assert answers == sorted(answers, reverse=True)


def test_subtree_color_queries_leaf_and_large_k():
    n = len(COLORS)
    result = subtree_color_queries(COLORS, EDGES, [(3, 1), (3, 2), (0, n + 5)])
    assert result == [1, 0, 0]


def test_subtree_color_queries_single_vertex():
    assert subtree_color_queries(["red"], [], [(0, 1)]) == [1]


def test_subtree_color_queries_errors():
    with pytest.raises(IndexError):
        subtree_color_queries(COLORS, EDGES, [(8, 1)])
    with pytest.raises(ValueError):
        subtree_color_queries(COLORS, EDGES, [(0, 0)])
    with pytest.raises(ValueError):
        subtree_color_queries(COLORS, EDGES[:-1], [(0, 1)])


def test_xor_pair_counts_sample():
    assert xor_pair_counts([1, 2, 1, 1, 0, 3], 3, [(0, 5), (2, 4)]) == [7, 0]


def test_xor_pair_counts_all_zero_counts_every_subarray():
    values = [0] * 6
    queries = [(0, 5), (1, 3), (2, 2)]
    result = xor_pair_counts(values, 0, queries)
    assert result == [
        (r - l + 1) * (r - l + 2) // 2 for l, r in queries
    ]


def test_xor_pair_counts_single_elements():
    values = [4, 7, 4, 1, 7]
    k = 7
    queries = [(i, i) for i in range(len(values))]
    assert xor_pair_counts(values, k, queries) == [int(v == k) for v in values]


def test_xor_pair_counts_order_independent():
    values = [1, 2, 1, 1, 0, 3]
    queries = [(0, 5), (2, 4), (1, 3), (0, 0)]
    forward = xor_pair_counts(values, 3, queries)
    backward = xor_pair_counts(values, 3, queries[::-1])
    assert forward == backward[::-1]


def test_xor_pair_counts_bad_range():
    with pytest.raises(IndexError):
        xor_pair_counts([1, 2], 1, [(1, 2)])
    with pytest.raises(IndexError):
        xor_pair_counts([1, 2], 1, [(1, 0)])