"""Find dictionary words traced through a letter grid."""

from __future__ import annotations

from collections.abc import Sequence


class _TrieNode:
    __slots__ = ("children", "word")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.word: str | None = None


def find_words(board: Sequence[Sequence[str]], words: Sequence[str]) -> list[str]:
    """Words that can be traced through horizontally or vertically adjacent
    cells, each cell used at most once per word.

    Found words are returned once each, in the order they first appear in words.
    """
    root = _TrieNode()
    for word in words:
        node = root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.word = word

    found: set[str] = set()
    visited: set[tuple[int, int]] = set()
    rows = len(board)

    def dfs(i: int, j: int, node: _TrieNode) -> None:
        if (i, j) in visited:
            return
        child = node.children.get(board[i][j])
        if child is None:
            return
        if child.word:
            found.add(child.word)
        visited.add((i, j))
        for x, y in ((i - 1, j), (i, j - 1), (i + 1, j), (i, j + 1)):
            if 0 <= x < rows and 0 <= y < len(board[x]):
                dfs(x, y, child)
        visited.discard((i, j))

    for i, row in enumerate(board):
        for j in range(len(row)):
            dfs(i, j, root)
    return [w for w in dict.fromkeys(words) if w in found]