"""Directed graphs on vertices numbered 0 .. n-1, with reachability."""

from __future__ import annotations


class Digraph:
    """A directed graph stored as sets of outgoing neighbours."""

    def __init__(self, vertices: int = 0) -> None:
        self._out: list[set[int]] = [set() for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._out)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._out):
            raise IndexError(f"no vertex {vertex} in a digraph of {len(self._out)}")

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        return len(self._out)

    def edge_count(self) -> int:
        """Return the number of directed edges."""
        return sum(len(targets) for targets in self._out)

    def add_vertex(self) -> int:
        """Add a vertex and return its label."""
        self._out.append(set())
        return len(self._out) - 1

    def add_edge(self, source: int, target: int) -> None:
        """Add the edge ``source -> target``; an existing edge is left as it is."""
        self._check(source)
        self._check(target)
        self._out[source].add(target)

    def can_reach(self, source: int, target: int) -> bool:
        """Return True when a directed path leads from ``source`` to ``target``."""
        self._check(source)
        self._check(target)
        visited = {source}
        stack = [source]
        while stack:
            current = stack.pop()
            for neighbour in sorted(self._out[current]):
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
        return target in visited