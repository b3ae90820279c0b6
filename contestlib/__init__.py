"""Competitive-programming algorithms: digit DP, segment trees, graphs, trees,
word search, greedy methods, Mo's algorithm and dynamic programming."""

__version__ = "0.1.0"