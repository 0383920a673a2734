"""Undirected graphs on vertices numbered 0 .. n-1, with search routines."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class Graph:
    """An undirected graph stored as adjacency sets.

    Vertices are labelled 0, 1, ..., n-1 in the order they are added, and
    neighbours are always visited in increasing order of their label.
    """

    def __init__(self, vertices: int = 0) -> None:
        self._adjacent: list[set[int]] = [set() for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adjacent)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacent):
            raise IndexError(f"no vertex {vertex} in a graph of {len(self._adjacent)}")

    def _neighbours(self, vertex: int) -> list[int]:
        return sorted(self._adjacent[vertex])

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        return len(self._adjacent)

    def edge_count(self) -> int:
        """Return the number of edges."""
        return sum(len(neighbours) for neighbours in self._adjacent) // 2

    def add_vertex(self) -> int:
        """Add a vertex and return its label."""
        self._adjacent.append(set())
        return len(self._adjacent) - 1

    def add_edge(self, i: int, j: int) -> None:
        """Join ``i`` and ``j``; an existing edge is left as it is."""
        self._check(i)
        self._check(j)
        self._adjacent[i].add(j)
        self._adjacent[j].add(i)

    def delete_edge(self, i: int, j: int) -> None:
        """Remove the edge between ``i`` and ``j`` if there is one."""
        self._check(i)
        self._check(j)
        self._adjacent[i].discard(j)
        self._adjacent[j].discard(i)

    def are_adjacent(self, i: int, j: int) -> bool:
        """Return True when ``i`` and ``j`` share an edge."""
        self._check(i)
        self._check(j)
        return j in self._adjacent[i]

    def edge_list(self) -> list[tuple[int, int]]:
        """Return every edge once as ``(i, j)`` with ``i < j``, in sorted order."""
        return [
            (i, j)
            for i in range(len(self._adjacent))
            for j in self._neighbours(i)
            if i < j
        ]

    def _distances(self, source: int) -> list[int | None]:
        self._check(source)
        distance: list[int | None] = [None] * len(self._adjacent)
        distance[source] = 0
        queue = deque([source])
        while queue:
            current = queue.popleft()
            for neighbour in self._neighbours(current):
                if distance[neighbour] is None:
                    distance[neighbour] = distance[current] + 1
                    queue.append(neighbour)
        return distance

    def bfs_order(self, source: int) -> list[int]:
        """Return the vertices reachable from ``source`` in breadth-first order."""
        self._check(source)
        visited = {source}
        queue = deque([source])
        order: list[int] = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbour in self._neighbours(current):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs_order(self, source: int) -> list[int]:
        """Return the order in which a stack-based depth-first search pops vertices."""
        self._check(source)
        visited = {source}
        stack = [source]
        order: list[int] = []
        while stack:
            current = stack.pop()
            order.append(current)
            for neighbour in self._neighbours(current):
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
        return order

    def dfs_recursive_order(self, source: int) -> list[int]:
        """Return the order in which a recursive depth-first search enters vertices."""
        self._check(source)
        visited = {source}
        order = [source]
        pending: list[Iterator[int]] = [iter(self._neighbours(source))]
        while pending:
            for neighbour in pending[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    pending.append(iter(self._neighbours(neighbour)))
                    break
            else:
                pending.pop()
        return order

    def shortest_path(self, source: int, target: int) -> list[int]:
        """Return a shortest path from ``source`` to ``target``, or [] if none."""
        self._check(source)
        self._check(target)
        previous: dict[int, int | None] = {source: None}
        queue = deque([source])
        while queue:
            current = queue.popleft()
            for neighbour in self._neighbours(current):
                if neighbour not in previous:
                    previous[neighbour] = current
                    queue.append(neighbour)
        if target not in previous:
            return []
        path: list[int] = []
        step: int | None = target
        while step is not None:
            path.append(step)
            step = previous[step]
        path.reverse()
        return path

    def shortest_path_length(self, source: int, target: int) -> int | None:
        """Return the number of edges on a shortest path, or None if unreachable."""
        self._check(target)
        return self._distances(source)[target]

    def diameter(self) -> int | None:
        """Return the greatest distance between two vertices, or None if disconnected."""
        diameter = 0
        for source in range(len(self._adjacent)):
            distances = self._distances(source)
            if None in distances:
                return None
            diameter = max(diameter, max(distances))
        return diameter

    def vertices_at_distance(self, source: int, distance: int) -> list[int]:
        """Return, in increasing order, the vertices exactly ``distance`` from ``source``."""
        return [
            vertex
            for vertex, found in enumerate(self._distances(source))
            if found == distance
        ]