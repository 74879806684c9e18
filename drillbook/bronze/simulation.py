"""Problems solved by directly simulating the process described."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import groupby
from string import ascii_lowercase

POUR_COUNT = 100

_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (6, 4, 2),
)


def milk_mixing(buckets: Sequence[tuple[int, int]]) -> list[int]:
    """Pour milk cyclically between ``(capacity, milk)`` buckets and return the final amounts."""
    if not buckets:
        raise ValueError("need at least one bucket")
    capacities = [capacity for capacity, _ in buckets]
    milk = [amount for _, amount in buckets]
    count = len(buckets)
    for step in range(POUR_COUNT):
        src, dst = step % count, (step + 1) % count
        amount = min(milk[src], capacities[dst] - milk[dst])
        milk[src] -= amount
        milk[dst] += amount
    return milk


def shell_game(swaps: Iterable[tuple[int, int, int]]) -> int:
    """Return the best score over all starting pebble shells for ``(a, b, guess)`` swaps."""
    position = [0, 1, 2]
    hits = [0, 0, 0]
    for a, b, guess in swaps:
        if not all(1 <= shell <= 3 for shell in (a, b, guess)):
            raise ValueError(f"shell numbers must be 1 to 3, got {(a, b, guess)}")
        a, b, guess = a - 1, b - 1, guess - 1
        position[a], position[b] = position[b], position[a]
        hits[position[guess]] += 1
    return max(hits)


def _per_mile(segments: Iterable[tuple[int, int]]) -> list[int]:
    return [value for length, value in segments for _ in range(length)]


def speeding_ticket(
    road: Iterable[tuple[int, int]], bessie: Iterable[tuple[int, int]]
) -> int:
    """Return by how much Bessie most exceeds the limit, from ``(length, value)`` segments."""
    limits = _per_mile(road)
    speeds = _per_mile(bessie)
    if len(limits) != len(speeds):
        raise ValueError("road and journey must have the same total length")
    return max((speed - limit for speed, limit in zip(speeds, limits)), default=0) if speeds and max(
        speed - limit for speed, limit in zip(speeds, limits)
    ) > 0 else 0


def bubble_sort(values: Iterable[int]) -> tuple[int, int, int]:
    """Bubble-sort the values; return the swap count, the first and the last element."""
    items = list(values)
    if not items:
        raise ValueError("need at least one value")
    swaps = 0
    for _ in items:
        for j in range(len(items) - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swaps += 1
    return swaps, items[0], items[-1]


def mad_scientist(a: str, b: str) -> int:
    """Count the substring flips needed to turn ``a`` into ``b``: one per run of mismatches."""
    if len(a) != len(b):
        raise ValueError("strings must have the same length")
    return sum(1 for differs, _ in groupby(x != y for x, y in zip(a, b)) if differs)


def block_game(boards: Iterable[tuple[str, str]]) -> list[int]:
    """Return, for each letter a..z, the blocks needed to spell either word of every board."""
    needed = Counter()
    for front, back in boards:
        for word in (front, back):
            if any(ch not in ascii_lowercase for ch in word):
                raise ValueError(f"words must be lowercase letters: {word!r}")
        front_counts, back_counts = Counter(front), Counter(back)
        needed.update(front_counts | back_counts)
    return [needed[letter] for letter in ascii_lowercase]


def tic_tac_toe(board: str | Iterable[str]) -> tuple[int, int]:
    """Return how many single cows and how many two-cow teams can claim a win."""
    cells = "".join(board)
    if len(cells) != 9:
        raise ValueError("board must have nine cells")
    winners = {frozenset(cells[i] for i in line) for line in _LINES}
    singles = sum(1 for group in winners if len(group) == 1)
    teams = sum(1 for group in winners if len(group) == 2)
    return singles, teams