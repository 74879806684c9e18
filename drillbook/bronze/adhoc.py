"""Ad hoc counting problems and simple lookups."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def even_more_odd(ids: Iterable[int]) -> int:
    """Return the most groups the cows can form, with group sums alternating even and odd.

    The first group has an even sum.
    """
    even = odd = 0
    for cow in ids:
        if cow % 2 == 0:
            even += 1
        else:
            odd += 1
    # Two odd cows make an even group.
    while odd > even:
        odd -= 2
        even += 1
    if even > odd + 1:
        even = odd + 1
    return odd + even


def sleepy_cow_herding(a: int, b: int, c: int) -> tuple[int, int]:
    """Return the fewest and the most moves that bring three cows to consecutive spots."""
    left_gap = abs(b - a)
    right_gap = abs(c - b)
    smaller = min(left_gap, right_gap)
    if smaller == 1:
        fewest = 0
    elif smaller == 2:
        fewest = 1
    else:
        fewest = 2
    return fewest, max(left_gap, right_gap) - 1


def sleepy_cow_sorting(order: Sequence[int]) -> int:
    """Return how many cows must move to sort the line: all before its sorted tail."""
    if not order:
        raise ValueError("need at least one cow")
    moves = len(order) - 1
    for i in reversed(range(len(order) - 1)):
        if order[i] >= order[i + 1]:
            break
        moves = i
    return moves


def associative_array(queries: Iterable[Sequence[int]]) -> list[int]:
    """Run ``(0, key, value)`` stores and ``(1, key)`` lookups; return the lookups' answers.

    A key never stored reads as 0.
    """
    table: dict[int, int] = {}
    answers = []
    for op, *args in queries:
        if op == 0:
            key, value = args
            table[key] = value
        elif op == 1:
            (key,) = args
            answers.append(table.get(key, 0))
        else:
            raise ValueError(f"unknown query type {op!r}")
    return answers


def distinct_numbers(values: Iterable[int]) -> int:
    """Return how many different values there are."""
    return len(set(values))


def sum_of_two_values(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return 1-based positions of two values adding up to ``target``, or None."""
    seen: dict[int, int] = {}
    for position, value in enumerate(values, start=1):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, position
        seen[value] = position
    return None