"""Problems solved by sorting, sorted containers and priority queues."""

from __future__ import annotations

import heapq
from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from itertools import accumulate

from sortedcontainers import SortedList


def concert_tickets(
    prices: Iterable[int], offers: Iterable[int]
) -> list[int | None]:
    """Sell each customer the dearest ticket not above their offer; None if there is none."""
    available = SortedList(prices)
    sold: list[int | None] = []
    for offer in offers:
        k = available.bisect_right(offer)
        sold.append(available.pop(k - 1) if k else None)
    return sold


def counting_haybales(
    positions: Iterable[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Count haybales lying in each inclusive ``(a, b)`` range."""
    ordered = sorted(positions)
    return [bisect_right(ordered, b) - bisect_left(ordered, a) for a, b in queries]


def movie_festival(tasks: Iterable[tuple[int, int]]) -> int:
    """Return the best total reward for ``(duration, deadline)`` tasks done back to back.

    A task finished at time ``f`` earns ``deadline - f``; shortest tasks go first.
    """
    reward = 0
    finish = 0
    for duration, deadline in sorted(tasks):
        finish += duration
        reward += deadline - finish
    return reward


def restaurant_customers(intervals: Iterable[tuple[int, int]]) -> int:
    """Return the most customers in the restaurant at the same time."""
    events = sorted(
        event for arrive, leave in intervals for event in ((arrive, 1), (leave, -1))
    )
    return max(accumulate(delta for _, delta in events), default=0)


def room_allocation(stays: Sequence[tuple[int, int]]) -> tuple[int, list[int]]:
    """Assign rooms to ``(arrival, departure)`` stays.

    Returns the number of rooms needed and each customer's room, in input order.
    A room is free again only after the day its guest departs.
    """
    order = sorted(range(len(stays)), key=lambda k: (stays[k][0], stays[k][1], k))
    rooms = [0] * len(stays)
    occupied: list[tuple[int, int]] = []
    opened = 0
    most = 0
    for k in order:
        arrive, leave = stays[k]
        if occupied and occupied[0][0] < arrive:
            _, negated_room = occupied[0]
            heapq.heapreplace(occupied, (leave, negated_room))
            room = -negated_room
        else:
            opened += 1
            heapq.heappush(occupied, (leave, -opened))
            room = opened
        rooms[k] = room
        most = max(most, len(occupied))
    return most, rooms


def stick_lengths(lengths: Iterable[int]) -> int:
    """Return the least total change that makes every stick the same length."""
    ordered = sorted(lengths)
    if not ordered:
        raise ValueError("need at least one stick")
    median = ordered[len(ordered) // 2]
    return sum(abs(median - length) for length in ordered)


def traffic_lights(length: int, positions: Iterable[int]) -> list[int]:
    """Return the longest unlit stretch of the street after each light is added."""
    lights = SortedList([0, length])
    gaps = SortedList([length])
    longest = []
    for position in positions:
        if not 0 < position < length:
            raise ValueError(f"light at {position} is not inside the street")
        k = lights.bisect_left(position)
        if lights[k] == position:
            raise ValueError(f"there is already a light at {position}")
        left, right = lights[k - 1], lights[k]
        gaps.remove(right - left)
        gaps.add(position - left)
        gaps.add(right - position)
        lights.add(position)
        longest.append(gaps[-1])
    return longest


def lifeguards(shifts: Iterable[tuple[int, int]]) -> int:
    """Return the most time still covered after firing exactly one lifeguard."""
    ordered = sorted(shifts, key=lambda shift: shift[0])
    if not ordered:
        raise ValueError("need at least one lifeguard")
    covered = 0
    right = 0
    for start, end in ordered:
        if end > right:
            covered += end - max(right, start)
            right = end
    next_starts = [start for start, _ in ordered[1:]] + [ordered[-1][1]]
    least_alone = covered
    right = 0
    for (start, end), next_start in zip(ordered, next_starts):
        least_alone = min(least_alone, min(next_start, end) - max(start, right))
        right = max(right, end)
    return covered - max(0, least_alone)


def _show_length(durations: Sequence[int], stage_size: int) -> int:
    stage = list(durations[:stage_size])
    heapq.heapify(stage)
    waiting = iter(durations[stage_size:])
    time = 0
    while stage:
        time = max(time, heapq.heappop(stage))
        following = next(waiting, None)
        if following is not None:
            heapq.heappush(stage, following + time)
    return time


def cow_dance_show(durations: Sequence[int], limit: int) -> int:
    """Return the smallest stage size that ends the show within ``limit``."""
    low, high = 1, len(durations)
    best = len(durations)
    while low <= high:
        mid = (low + high) // 2
        if _show_length(durations, mid) > limit:
            low = mid + 1
        else:
            best = min(best, mid)
            high = mid - 1
    return best


def rental_service(
    milk: Iterable[int], shops: Iterable[tuple[int, int]], rents: Iterable[int]
) -> int:
    """Return the most money from milking some cows and renting out the rest.

    Shops are ``(gallons wanted, price per gallon)``; rents are offers per cow.
    """
    cows = sorted(milk, reverse=True)
    if not cows:
        raise ValueError("need at least one cow")
    buyers = sorted(shops, key=lambda shop: shop[1], reverse=True)
    offers = sorted(rents, reverse=True)
    best = None
    for milked in range(len(cows)):
        gallons = sum(cows[:milked])
        money = 0
        for wanted, price in buyers:
            sold = min(gallons, wanted)
            money += sold * price
            gallons -= sold
            if gallons == 0:
                break
        money += sum(offers[: len(cows) - milked])
        best = money if best is None else max(best, money)
    return best