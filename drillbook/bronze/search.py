"""Complete-search problems: subsets, permutations and exhaustive scans."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from functools import lru_cache
from itertools import combinations

BOARD_SIZE = 8


def apple_division(weights: Sequence[int]) -> int:
    """Return the smallest difference between the weights of two groups of apples."""
    total = sum(weights)
    reachable = {0}
    for weight in weights:
        reachable |= {s + weight for s in reachable}
    return min(abs(total - 2 * s) for s in reachable)


@lru_cache(maxsize=None)
def _queen_solutions() -> tuple[tuple[int, ...], ...]:
    """All placements of eight non-attacking queens, as the row of each column."""

    def extend(placed: tuple[int, ...]) -> Iterator[tuple[int, ...]]:
        if len(placed) == BOARD_SIZE:
            yield placed
            return
        col = len(placed)
        for row in range(1, BOARD_SIZE + 1):
            if all(
                prev_row != row and abs(prev_row - row) != col - prev_col
                for prev_col, prev_row in enumerate(placed)
            ):
                yield from extend(placed + (row,))

    return tuple(extend(()))


def count_eight_queens(row: int, col: int) -> int:
    """Count eight-queens solutions that have a queen at ``row`` in column ``col`` (1-based)."""
    if not (1 <= row <= BOARD_SIZE and 1 <= col <= BOARD_SIZE):
        raise ValueError(f"square ({row}, {col}) is off the board")
    return sum(1 for rows in _queen_solutions() if rows[col - 1] == row)


def kayaking(weights: Sequence[int]) -> int:
    """Return the least total instability when two people take single kayaks.

    The remaining people share tandem kayaks in pairs; a pair's instability is the
    difference of their weights.
    """
    if len(weights) < 2 or len(weights) % 2:
        raise ValueError("need an even number of at least two weights")
    best = None
    for i, j in combinations(range(len(weights)), 2):
        rest = sorted(w for k, w in enumerate(weights) if k not in (i, j))
        instability = sum(heavy - light for light, heavy in zip(rest[::2], rest[1::2]))
        best = instability if best is None else min(best, instability)
    return best


def maximum_distance(xs: Sequence[int], ys: Sequence[int]) -> int:
    """Return the largest squared Euclidean distance between two of the points."""
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    points = list(zip(xs, ys))
    if len(points) < 2:
        raise ValueError("need at least two points")
    return max(
        (x1 - x2) ** 2 + (y1 - y2) ** 2
        for (x1, y1), (x2, y2) in combinations(points, 2)
    )


def bovine_genomics(spotty: Sequence[str], plain: Sequence[str]) -> int:
    """Count genome positions whose letter alone tells spotty cows from plain ones."""
    genomes = [*spotty, *plain]
    if not genomes:
        return 0
    length = len(genomes[0])
    if any(len(g) != length for g in genomes):
        raise ValueError("all genomes must have the same length")
    return sum(
        1
        for pos in range(length)
        if not {g[pos] for g in spotty} & {g[pos] for g in plain}
    )


def string_permutations(s: str) -> Iterator[str]:
    """Yield every distinct arrangement of the characters of ``s`` in lexicographic order."""
    chars = sorted(s)
    while True:
        yield "".join(chars)
        pivot = next(
            (i for i in reversed(range(len(chars) - 1)) if chars[i] < chars[i + 1]),
            None,
        )
        if pivot is None:
            return
        successor = next(
            j for j in reversed(range(pivot + 1, len(chars))) if chars[j] > chars[pivot]
        )
        chars[pivot], chars[successor] = chars[successor], chars[pivot]
        chars[pivot + 1 :] = reversed(chars[pivot + 1 :])


def cow_tipping(grid: Sequence[str]) -> int:
    """Return the fewest top-left anchored rectangle flips turning every cell to '0'."""
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError("grid must be square")
    if any(cell not in "01" for row in grid for cell in row):
        raise ValueError("grid cells must be '0' or '1'")
    cells = [[cell == "1" for cell in row] for row in grid]
    flips = 0
    for i in reversed(range(size)):
        for j in reversed(range(size)):
            if cells[i][j]:
                flips += 1
                for row in cells[: i + 1]:
                    row[: j + 1] = [not cell for cell in row[: j + 1]]
    return flips