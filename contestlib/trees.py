"""Tree problems: equal-value components, height after subtree removal,
maximum price spread and an interactive diameter search."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass


def _rooted(n: int, edges: Sequence[Sequence[int]]) -> tuple[list[int], list[list[int]], list[int]]:
    """Preorder from vertex 0, adjacency lists and parents."""
    adj: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        adj[a].append(b)
        adj[b].append(a)
    parent = [-1] * n
    seen = [False] * n
    seen[0] = True
    order = []
    stack = [0]
    while stack:
        u = stack.pop()
        order.append(u)
        for v in adj[u]:
            if not seen[v]:
                seen[v] = True
                parent[v] = u
                stack.append(v)
    return order, adj, parent


def component_value(nums: Sequence[int], edges: Sequence[Sequence[int]]) -> int:
    """Most edges that can be cut so every component has the same value sum."""
    if not nums:
        raise ValueError("nums must not be empty")
    n = len(nums)
    order, adj, parent = _rooted(n, edges)
    total = sum(nums)

    def splits(target: int) -> bool:
        leftover = [0] * n
        for u in reversed(order):
            s = nums[u] + sum(leftover[c] for c in adj[u] if c != parent[u])
            if s > target:
                return False
            leftover[u] = 0 if s == target else s
        return leftover[0] == 0

    for target in range(1, total // 2 + 1):
        if total % target == 0 and splits(target):
            return total // target - 1
    return 0


@dataclass(eq=False)
class TreeNode:
    """Binary tree node."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def tree_queries(root: TreeNode, queries: Sequence[int]) -> list[int]:
    """Height of the tree after removing, independently, the subtree rooted at
    each queried value. Node values must be distinct."""
    levels: list[list[TreeNode]] = []
    frontier = [root]
    while frontier:
        levels.append(frontier)
        frontier = [c for node in frontier for c in (node.left, node.right) if c]

    depth = {node.val: d for d, level in enumerate(levels) for node in level}
    height: dict[int, int] = {}
    for level in reversed(levels):
        for node in level:
            kids = [c for c in (node.left, node.right) if c]
            height[node.val] = 1 + max(height[c.val] for c in kids) if kids else 0

    def h(val: int | None) -> int:
        return -1 if val is None else height[val]

    top: list[tuple[int | None, int | None]] = []
    for level in levels:
        first: int | None = None
        second: int | None = None
        for node in level:
            if height[node.val] >= h(first):
                first, second = node.val, first
            elif height[node.val] > h(second):
                second = node.val
        top.append((first, second))

    result = []
    for query in queries:
        if query not in depth:
            raise ValueError(f"no node holds value {query}")
        d = depth[query]
        first, second = top[d]
        result.append(h(second if first == query else first) + d)
    return result


def max_output(n: int, edges: Sequence[Sequence[int]], price: Sequence[int]) -> int:
    """Largest difference between the heaviest and lightest path sums that
    start at a common root, over all roots."""
    order, adj, parent = _rooted(n, edges)
    with_leaf = [0] * n
    no_leaf = [0] * n
    best = 0
    for u in reversed(order):
        wl, nl = price[u], 0
        for c in adj[u]:
            if c == parent[u]:
                continue
            best = max(best, with_leaf[c] + nl, no_leaf[c] + wl)
            wl = max(wl, with_leaf[c] + price[u])
            nl = max(nl, no_leaf[c] + price[u])
        with_leaf[u], no_leaf[u] = wl, nl
    return best


def tree_diameter_interactive(
    n: int, ask: Callable[[list[int], list[int]], int]
) -> int:
    """Diameter of a hidden tree on vertices 1..n.

    ask(first, second) must return the largest distance between a vertex of
    first and a vertex of second (disjoint, non-empty lists).
    """
    if n < 2:
        raise ValueError("the tree needs at least two vertices")
    farthest = ask([1], list(range(2, n + 1)))
    lo, hi = 2, n
    x = n
    while lo <= hi:
        mid = (lo + hi) // 2
        if ask([1], list(range(lo, mid + 1))) < farthest:
            lo = mid + 1
        else:
            x = mid
            hi = mid - 1
    return ask([x], [v for v in range(1, n + 1) if v != x])