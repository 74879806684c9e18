"""Axis-aligned rectangle and interval problems."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its lower-left and upper-right corners."""

    x1: int
    y1: int
    x2: int
    y2: int

    def area(self) -> int:
        """Return the area covered by the rectangle."""
        return (self.x2 - self.x1) * (self.y2 - self.y1)


def overlap_area(a: Rect, b: Rect) -> int:
    """Return the area shared by two rectangles, zero if they do not meet."""
    x_overlap = max(0, min(a.x2, b.x2) - max(a.x1, b.x1))
    y_overlap = max(0, min(a.y2, b.y2) - max(a.y1, b.y1))
    return x_overlap * y_overlap


def blocked_billboard(a: Rect, b: Rect, truck: Rect) -> int:
    """Return the billboard area of ``a`` and ``b`` still visible in front of the truck."""
    return a.area() + b.area() - overlap_area(a, truck) - overlap_area(b, truck)


def blocked_billboard_ii(lawnmower: Rect, feed: Rect) -> int:
    """Return the tarp area needed to cover what of ``lawnmower`` the ``feed`` board leaves visible."""
    a, b = lawnmower, feed
    covers_full_width = (
        a.x1 >= b.x1
        and a.x2 <= b.x2
        and (b.y1 <= a.y2 <= b.y2 or b.y1 <= a.y1 <= b.y2)
    )
    covers_full_height = (
        a.y1 >= b.y1
        and a.y2 <= b.y2
        and (b.x1 <= a.x2 <= b.x2 or b.x1 <= a.x1 <= b.x2)
    )
    if covers_full_width or covers_full_height:
        return a.area() - overlap_area(a, b)
    return a.area()


def square_pasture(a: Rect, b: Rect) -> int:
    """Return the area of the smallest square pasture enclosing both rectangles."""
    width = max(a.x2, b.x2) - min(a.x1, b.x1)
    height = max(a.y2, b.y2) - min(a.y1, b.y1)
    side = max(width, height)
    return side * side


def white_sheet_visible(white: Rect, black1: Rect, black2: Rect) -> bool:
    """Tell whether some of the white sheet remains uncovered by the two black sheets."""
    remaining = white.area() - overlap_area(white, black1) - overlap_area(white, black2)
    return max(0, remaining) > 0


def fence_painting(a: int, b: int, c: int, d: int) -> int:
    """Return the fence length painted when ``[a, b]`` and ``[c, d]`` are both painted."""
    total = (b - a) + (d - c)
    shared = abs(min(b, d) - max(a, c))
    return total - shared


def two_tables(
    room_width: int, room_height: int, table: Rect, width2: int, height2: int
) -> int | None:
    """Return how far ``table`` must move so a ``width2`` x ``height2`` table also fits.

    Returns None when the second table cannot fit however the first one is moved.
    """
    moves = []
    if room_width >= width2 + table.x2 - table.x1:
        moves.append(
            min(max(0, width2 - table.x1), max(0, width2 - (room_width - table.x2)))
        )
    if room_height >= height2 + table.y2 - table.y1:
        moves.append(
            min(max(0, height2 - table.y1), max(0, height2 - (room_height - table.y2)))
        )
    return min(moves) if moves else None