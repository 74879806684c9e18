"""Problems answered with one- and two-dimensional prefix sums."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import accumulate

BARN_SIZE = 1000
BREEDS = (1, 2, 3)


def breed_counting(
    breeds: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[tuple[int, int, int]]:
    """For each 1-based inclusive range, count the cows of breeds 1, 2 and 3."""
    if any(breed not in BREEDS for breed in breeds):
        raise ValueError("breeds must be 1, 2 or 3")
    prefix = [
        [0, *accumulate(int(breed == kind) for breed in breeds)] for kind in BREEDS
    ]
    answers = []
    for a, b in queries:
        if not 1 <= a <= b <= len(breeds):
            raise ValueError(f"query ({a}, {b}) is out of range")
        answers.append(tuple(counts[b] - counts[a - 1] for counts in prefix))
    return answers


def forest_queries(
    grid: Sequence[str], queries: Iterable[tuple[int, int, int, int]]
) -> list[int]:
    """Count trees ('*') in each ``(y1, x1, y2, x2)`` block of the grid, 1-based inclusive."""
    width = len(grid[0]) if grid else 0
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must have the same length")
    prefix = [[0] * (width + 1)]
    for row in grid:
        running = [0, *accumulate(int(cell == "*") for cell in row)]
        prefix.append([above + here for above, here in zip(prefix[-1], running)])
    answers = []
    for y1, x1, y2, x2 in queries:
        if not (1 <= y1 <= y2 <= len(grid) and 1 <= x1 <= x2 <= width):
            raise ValueError(f"query {(y1, x1, y2, x2)} is out of range")
        answers.append(
            prefix[y2][x2] - prefix[y1 - 1][x2] - prefix[y2][x1 - 1] + prefix[y1 - 1][x1 - 1]
        )
    return answers


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty run of consecutive values."""
    best = None
    lowest = 0
    for total in accumulate(values):
        candidate = total - lowest
        best = candidate if best is None else max(best, candidate)
        lowest = min(lowest, total)
    if best is None:
        raise ValueError("need at least one value")
    return best


def painting_the_barn(
    rectangles: Iterable[tuple[int, int, int, int]], k: int
) -> int:
    """Return the barn area covered by exactly ``k`` coats of paint.

    Rectangles are ``(x1, y1, x2, y2)`` within a barn wall of side 1000.
    """
    rects = list(rectangles)
    for x1, y1, x2, y2 in rects:
        if not (0 <= x1 <= x2 <= BARN_SIZE and 0 <= y1 <= y2 <= BARN_SIZE):
            raise ValueError(f"rectangle {(x1, y1, x2, y2)} is outside the barn")
    xs = sorted({0, BARN_SIZE, *(x for r in rects for x in (r[0], r[2]))})
    ys = sorted({0, BARN_SIZE, *(y for r in rects for y in (r[1], r[3]))})
    x_at = {x: i for i, x in enumerate(xs)}
    y_at = {y: j for j, y in enumerate(ys)}
    diff = [[0] * len(ys) for _ in xs]
    for x1, y1, x2, y2 in rects:
        diff[x_at[x1]][y_at[y1]] += 1
        diff[x_at[x1]][y_at[y2]] -= 1
        diff[x_at[x2]][y_at[y1]] -= 1
        diff[x_at[x2]][y_at[y2]] += 1
    widths = [right - left for left, right in zip(xs, xs[1:])]
    heights = [top - bottom for bottom, top in zip(ys, ys[1:])]
    coats = [0] * len(ys)
    area = 0
    for diff_row, width in zip(diff, widths):
        coats = [above + here for above, here in zip(coats, accumulate(diff_row))]
        area += width * sum(h for c, h in zip(coats, heights) if c == k)
    return area


def subsequence_summing_sevens(ids: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive ids whose sum divides by 7."""
    first_seen = {0: 0}
    best = 0
    remainder = 0
    for position, cow in enumerate(ids, start=1):
        remainder = (remainder + cow) % 7
        if remainder in first_seen:
            best = max(best, position - first_seen[remainder])
        else:
            first_seen[remainder] = position
    return best


def static_range_queries(
    updates: Iterable[tuple[int, int, int]], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Add ``v`` over each half-open ``[l, r)`` update, then sum each ``[l, r)`` query."""
    updates = list(updates)
    queries = list(queries)
    indices = sorted(
        {c for l, r, _ in updates for c in (l, r)} | {c for q in queries for c in q}
    )

    def compressed(index: int) -> int:
        return bisect_left(indices, index)

    diff = [0] * (len(indices) + 1)
    for l, r, v in updates:
        diff[compressed(l) + 1] += v
        diff[compressed(r) + 1] -= v
    values = list(accumulate(diff))
    prefix = [0]
    for left, right, value in zip(indices, indices[1:], values[1:]):
        prefix.append(prefix[-1] + value * (right - left))
    return [prefix[compressed(r)] - prefix[compressed(l)] for l, r in queries]