"""Graph problems: bipartite orientation, tree distance components,
Dijkstra paths, incremental Floyd-Warshall and grid distances."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence
from itertools import accumulate

EMPTY_ROOM = 2**31 - 1
WALL = -1
GATE = 0


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        adj[a].append(b)
        adj[b].append(a)
    return adj


def bipartite_orientation(n: int, edges: Sequence[tuple[int, int]]) -> str | None:
    """Orient the edges so that no directed path has length two.

    Vertices are 0-indexed. Returns one character per edge: '1' when the edge
    (a, b) points from a to b, '0' when it points from b to a. Vertex 0 is
    coloured as a source. Returns None when the graph is not bipartite.
    """
    adj = _adjacency(n, edges)
    color = [0] * n
    for start in range(n):
        if color[start]:
            continue
        color[start] = 1
        stack = [start]
        while stack:
            u = stack.pop()
            for w in adj[u]:
                if not color[w]:
                    color[w] = -color[u]
                    stack.append(w)
                elif color[w] == color[u]:
                    return None
    return "".join("1" if color[a] == 1 else "0" for a, _ in edges)


def _bfs(adj: list[list[int]], source: int) -> tuple[list[int], int]:
    """Distances from source and the last vertex reached (one of the farthest)."""
    dist = [-1] * len(adj)
    dist[source] = 0
    queue = deque([source])
    last = source
    while queue:
        u = queue.popleft()
        last = u
        for v in adj[u]:
            if dist[v] < 0:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist, last


def isolated_components(n: int, edges: Sequence[tuple[int, int]]) -> list[int]:
    """For k = 1..n, the number of components when vertices of the tree are
    joined exactly when their distance is at least k.

    Vertices are 0-indexed.
    """
    if n < 1:
        raise ValueError("a tree needs at least one vertex")
    if len(edges) != n - 1:
        raise ValueError("a tree on n vertices needs exactly n - 1 edges")
    adj = _adjacency(n, edges)
    _, x = _bfs(adj, 0)
    dx, y = _bfs(adj, x)
    dy, _ = _bfs(adj, y)
    if min(dx) < 0:
        raise ValueError("the graph is not connected")

    diff = [0] * (n + 2)
    for a, b in zip(dx, dy):
        diff[max(a, b) + 1] += 1
    diff[0] = 1
    diff[dx[y] + 1] -= 1
    return list(accumulate(diff[: n + 1]))[1:]


def shortest_path(n: int, edges: Iterable[tuple[int, int, int]]) -> list[int] | None:
    """A shortest path from vertex 0 to vertex n - 1, or None if unreachable.

    Edges are undirected (a, b, weight) triples on 0-indexed vertices.
    """
    if n < 1:
        raise ValueError("the graph needs at least one vertex")
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for a, b, w in edges:
        graph[a].append((w, b))
        graph[b].append((w, a))

    inf = float("inf")
    dist: list[float] = [inf] * n
    prev = [-1] * n
    visited = [False] * n
    dist[0] = 0
    heap = [(0, 0)]
    while heap:
        _, u = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True
        for w, v in graph[u]:
            candidate = dist[u] + w
            if candidate < dist[v]:
                dist[v] = candidate
                prev[v] = u
                heapq.heappush(heap, (candidate, v))

    if dist[n - 1] == inf:
        return None
    path = []
    v = n - 1
    while v != -1:
        path.append(v)
        v = prev[v]
    path.reverse()
    return path


def removal_distance_sums(
    dist: Sequence[Sequence[int]], order: Sequence[int]
) -> list[int]:
    """Sum of shortest distances over all ordered pairs of remaining vertices,
    taken before each vertex in order is removed.

    dist is the matrix of direct edge weights; order lists 0-indexed vertices.
    """
    n = len(dist)
    if sorted(order) != list(range(n)):
        raise ValueError("order must be a permutation of the vertices")
    d = [list(row) for row in dist]
    result = [0] * n
    for k in range(n - 1, -1, -1):
        pivot_row = d[order[k]]
        for row in d:
            via = row[order[k]]
            for j, step in enumerate(pivot_row):
                if via + step < row[j]:
                    row[j] = via + step
        alive = order[k:]
        result[k] = sum(d[i][j] for i in alive for j in alive)
    return result


def walls_and_gates(rooms: Sequence[Sequence[int]]) -> list[list[int]]:
    """Grid where every empty room holds its distance to the nearest gate.

    Cells are WALL (-1), GATE (0) or EMPTY_ROOM; unreachable rooms stay
    EMPTY_ROOM. The input is left untouched.
    """
    grid = [list(row) for row in rooms]
    queue = deque(
        (i, j) for i, row in enumerate(grid) for j, cell in enumerate(row) if cell == GATE
    )
    while queue:
        i, j = queue.popleft()
        for x, y in ((i - 1, j), (i, j - 1), (i + 1, j), (i, j + 1)):
            if 0 <= x < len(grid) and 0 <= y < len(grid[x]) and grid[x][y] == EMPTY_ROOM:
                grid[x][y] = grid[i][j] + 1
                queue.append((x, y))
    return grid