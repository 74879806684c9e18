"""Graph traversal problems: covers, connected networks and reachability."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _adjacency(
    n: int, edges: Iterable[tuple[int, int]], *, directed: bool = False
) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) names a node outside 1..{n}")
        adjacency[a - 1].append(b - 1)
        if not directed:
            adjacency[b - 1].append(a - 1)
    return adjacency


def _reachable(adjacency: Sequence[Sequence[int]], start: int) -> list[bool]:
    seen = [False] * len(adjacency)
    seen[start] = True
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for other in adjacency[node]:
            if not seen[other]:
                seen[other] = True
                queue.append(other)
    return seen


def cover_it(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Choose vertices of a connected graph so every other vertex has a chosen neighbour.

    A depth-first walk from vertex 1 chooses each vertex that has an unchosen child
    in the walk's tree. Returns the chosen vertices, 1-based and ascending.
    """
    if n < 1:
        raise ValueError("need at least one vertex")
    adjacency = _adjacency(n, edges)
    # None: not reached yet; False: reached, not chosen; True: chosen.
    chosen: list[bool | None] = [None] * n
    chosen[0] = False
    stack = [(0, iter(adjacency[0]))]
    while stack:
        node, pending = stack[-1]
        for child in pending:
            if chosen[child] is None:
                chosen[child] = False
                stack.append((child, iter(adjacency[child])))
                break
        else:
            stack.pop()
            if stack and not chosen[node]:
                chosen[stack[-1][0]] = True
    if any(state is None for state in chosen):
        raise ValueError("graph must be connected")
    return [vertex for vertex, state in enumerate(chosen, start=1) if state]


def fence_planning(
    positions: Sequence[tuple[int, int]], edges: Iterable[tuple[int, int]]
) -> int:
    """Return the smallest perimeter of a fence around one whole moo network."""
    if not positions:
        raise ValueError("need at least one cow")
    adjacency = _adjacency(len(positions), edges)
    assigned = [False] * len(positions)
    best = None
    for start in range(len(positions)):
        if assigned[start]:
            continue
        members = [i for i, seen in enumerate(_reachable(adjacency, start)) if seen]
        for member in members:
            assigned[member] = True
        xs = [positions[i][0] for i in members]
        ys = [positions[i][1] for i in members]
        perimeter = 2 * (max(xs) - min(xs)) + 2 * (max(ys) - min(ys))
        best = perimeter if best is None else min(best, perimeter)
    return best


def flight_route_check(
    n: int, flights: Iterable[tuple[int, int]]
) -> tuple[int, int] | None:
    """Check that every city can reach every other along one-way ``(from, to)`` flights.

    Returns None when they can, otherwise a 1-based pair ``(a, b)`` with no route from
    ``a`` to ``b``.
    """
    if n < 1:
        raise ValueError("need at least one city")
    flights = list(flights)
    forward = _adjacency(n, flights, directed=True)
    backward = _adjacency(n, ((b, a) for a, b in flights), directed=True)
    for city, seen in enumerate(_reachable(forward, 0), start=1):
        if not seen:
            return 1, city
    for city, seen in enumerate(_reachable(backward, 0), start=1):
        if not seen:
            return city, 1
    return None


def moocast(cows: Sequence[tuple[int, int, int]]) -> int:
    """Return the most cows one broadcast can reach, relayed by ``(x, y, power)`` walkies."""
    adjacency = [
        [
            j
            for j, (x2, y2, _) in enumerate(cows)
            if (x1 - x2) ** 2 + (y1 - y2) ** 2 <= power * power
        ]
        for x1, y1, power in cows
    ]
    return max((sum(_reachable(adjacency, i)) for i in range(len(cows))), default=0)