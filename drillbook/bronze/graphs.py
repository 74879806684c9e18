"""Small graph problems on numbered pastures and stations."""

from __future__ import annotations

from collections.abc import Iterable

GRASS_TYPES = (1, 2, 3, 4)


def _checked_edges(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    checked = list(edges)
    for a, b in checked:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) names a node outside 1..{n}")
    return checked


def grass_planting(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the fewest grass types so that neighbouring and near fields all differ."""
    degree = [0] * (n + 1)
    for a, b in _checked_edges(n, edges):
        degree[a] += 1
        degree[b] += 1
    return max(degree[1:], default=0) + 1


def milk_factory(n: int, edges: Iterable[tuple[int, int]]) -> int | None:
    """Return the one station every other can reach along ``(from, to)`` walkways, or None."""
    outgoing = [0] * (n + 1)
    for a, _ in _checked_edges(n, edges):
        outgoing[a] += 1
    sinks = [station for station in range(1, n + 1) if outgoing[station] == 0]
    return sinks[0] if len(sinks) == 1 else None


def great_revegetation(n: int, edges: Iterable[tuple[int, int]]) -> str:
    """Give each pasture in turn the smallest grass type its seeded neighbours lack.

    Returns the types of pastures 1..n as a string of digits.
    """
    neighbours: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in _checked_edges(n, edges):
        neighbours[a].append(b)
        neighbours[b].append(a)
    grass = [0] * (n + 1)
    for pasture in range(1, n + 1):
        taken = {grass[other] for other in neighbours[pasture]}
        choice = next((kind for kind in GRASS_TYPES if kind not in taken), None)
        if choice is None:
            raise ValueError(f"pasture {pasture} has no grass type left")
        grass[pasture] = choice
    return "".join(str(kind) for kind in grass[1:])