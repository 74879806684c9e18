"""Sliding-window and two-pointer problems."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from collections.abc import Sequence


def books(times: Sequence[int], limit: int) -> int:
    """Return the most consecutive books that can be read within ``limit`` minutes."""
    best = 0
    total = 0
    left = 0
    for right, minutes in enumerate(times):
        total += minutes
        while total > limit:
            total -= times[left]
            left += 1
        best = max(best, right - left + 1)
    return best


def cellular_network(cities: Sequence[int], towers: Sequence[int]) -> int:
    """Return the smallest tower range that puts every city within reach of a tower."""
    if not towers:
        raise ValueError("need at least one tower")
    sorted_towers = sorted(towers)
    worst = 0
    for city in cities:
        k = bisect_left(sorted_towers, city)
        nearby = sorted_towers[max(k - 1, 0) : k + 1]
        worst = max(worst, min(abs(city - tower) for tower in nearby))
    return worst


def subarray_sum(values: Sequence[int], target: int) -> int:
    """Count runs of consecutive positive values that add up to ``target``."""
    count = 0
    total = 0
    left = 0
    for value in values:
        total += value
        while total > target:
            total -= values[left]
            left += 1
        if total == target:
            count += 1
    return count


def sum_of_three(values: Sequence[int], target: int) -> tuple[int, int, int] | None:
    """Return 1-based positions of three values adding up to ``target``, or None."""
    pairs = sorted((value, index) for index, value in enumerate(values))
    for i, (value, index) in enumerate(pairs):
        need = target - value
        low, high = 0, len(pairs) - 1
        while low < high:
            pair_sum = pairs[low][0] + pairs[high][0]
            if low != i and high != i and pair_sum == need:
                return index + 1, pairs[low][1] + 1, pairs[high][1] + 1
            if pair_sum < need:
                low += 1
            else:
                high -= 1
    return None


def they_are_everywhere(flats: Sequence[str]) -> int:
    """Return the fewest consecutive flats that hold every kind of creature in the house."""
    if not flats:
        raise ValueError("need at least one flat")
    kinds = len(set(flats))
    counts: Counter[str] = Counter()
    shortest = len(flats)
    left = 0
    for right, kind in enumerate(flats):
        counts[kind] += 1
        while left < right and counts[flats[left]] > 1:
            counts[flats[left]] -= 1
            left += 1
        if len(counts) == kinds:
            shortest = min(shortest, right - left + 1)
    return shortest