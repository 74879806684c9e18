"""Two-dimensional grid problems solved with compression and prefix sums."""

from __future__ import annotations

from collections.abc import Sequence


def _prefix_table(grid: Sequence[Sequence[int]], rows: int, cols: int) -> list[list[int]]:
    table = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i in range(rows):
        running = 0
        for j in range(cols):
            running += grid[i][j]
            table[i + 1][j + 1] = table[i][j + 1] + running
    return table


def rectangular_pasture(points: Sequence[tuple[int, int]]) -> int:
    """Count the distinct subsets of cows a fenced rectangle can enclose, empty included.

    All x coordinates must differ, and so must all y coordinates.
    """
    count = len(points)
    if len({x for x, _ in points}) != count or len({y for _, y in points}) != count:
        raise ValueError("cows must have distinct x and distinct y coordinates")
    x_rank = {x: rank for rank, x in enumerate(sorted(x for x, _ in points))}
    # Cows ordered by y; each holds its compressed x.
    by_y = [x_rank[x] for x, _ in sorted(points, key=lambda p: p[1])]
    marks = [[0] * count for _ in range(count)]
    for y, x in enumerate(by_y):
        marks[x][y] = 1
    prefix = _prefix_table(marks, count, count)

    def block(x1: int, y1: int, x2: int, y2: int) -> int:
        return (
            prefix[x2 + 1][y2 + 1]
            - prefix[x2 + 1][y1]
            - prefix[x1][y2 + 1]
            + prefix[x1][y1]
        )

    subsets = 1
    for i in range(count):
        for j in range(i, count):
            left = min(by_y[i], by_y[j])
            right = max(by_y[i], by_y[j])
            subsets += block(0, i, left, j) * block(right, i, count - 1, j)
    return subsets


def the_lazy_cow(grid: Sequence[Sequence[int]], k: int) -> int:
    """Return the most grass within ``k`` steps (Manhattan distance) of one square."""
    n = len(grid)
    if n == 0:
        raise ValueError("grid must not be empty")
    if any(len(row) != n for row in grid):
        raise ValueError("grid must be square")
    if k < 0:
        raise ValueError("k must not be negative")
    size = 2 * n - 1
    rotated = [[0] * size for _ in range(size)]
    for i, row in enumerate(grid):
        for j, grass in enumerate(row):
            rotated[i + j][n - i + j - 1] = grass
    prefix = _prefix_table(rotated, size, size)
    best = None
    for i in range(n):
        for j in range(n):
            u, v = i + j, n - i + j - 1
            top, bottom = max(u - k, 0), min(u + k, size - 1)
            left, right = max(v - k, 0), min(v + k, size - 1)
            total = (
                prefix[bottom + 1][right + 1]
                - prefix[top][right + 1]
                - prefix[bottom + 1][left]
                + prefix[top][left]
            )
            best = total if best is None else max(best, total)
    return best