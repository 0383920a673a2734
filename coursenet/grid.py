"""Reachability across a rectangular grid of solid ground and lava."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def can_cross(grid: Sequence[Sequence[bool]]) -> bool:
    """Return True when the bottom-right cell is reachable from the top-left one.

    Truthy cells are solid ground and falsy cells are lava; moves go to the
    four orthogonal neighbours. The start cell is taken as reachable.
    """
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must have at least one cell")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid must be rectangular")
    height = len(rows)

    visited = {(0, 0)}
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < height and 0 <= ny < width and rows[nx][ny]:
                if (nx, ny) not in visited:
                    visited.add((nx, ny))
                    queue.append((nx, ny))
    return (height - 1, width - 1) in visited