"""Graph algorithms on adjacency matrices and grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_FRESH = 1
_ROTTEN = 2


def count_provinces(is_connected: Sequence[Sequence[int]]) -> int:
    """Return the number of connected groups in an adjacency matrix."""
    n = len(is_connected)
    visited = [False] * n
    provinces = 0
    for start in range(n):
        if not visited[start]:
            provinces += 1
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbour, linked in enumerate(is_connected[node]):
                if linked and not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
    return provinces


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange is left, or -1 if one never rots.

    Cells hold 0 (empty), 1 (fresh) or 2 (rotten); the grid is not modified.
    """
    if not grid:
        return 0
    cells = [list(row) for row in grid]
    rows, cols = len(cells), len(cells[0])
    total = sum(value != 0 for row in cells for value in row)
    rotten = deque(
        (i, j) for i, row in enumerate(cells) for j, value in enumerate(row) if value == _ROTTEN
    )
    reached = 0
    minutes = 0
    while rotten:
        reached += len(rotten)
        for _ in range(len(rotten)):
            x, y = rotten.popleft()
            for nx, ny in ((x, y + 1), (x, y - 1), (x + 1, y), (x - 1, y)):
                if 0 <= nx < rows and 0 <= ny < cols and cells[nx][ny] == _FRESH:
                    cells[nx][ny] = _ROTTEN
                    rotten.append((nx, ny))
        if rotten:
            minutes += 1
    return minutes if reached == total else -1