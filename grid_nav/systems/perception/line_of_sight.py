"""Line-of-sight helpers."""

from __future__ import annotations

from typing import Iterator, List, Sequence

from grid_nav.core.components.cell import Cell
from grid_nav.core.spatial.interfaces import WalkabilityOracle


def bresenham_line(a: Cell, b: Cell) -> Iterator[Cell]:
    """Yield the cells rasterized between ``a`` and ``b``, both included."""

    x, y = a.x, a.y
    dx = abs(b.x - a.x)
    dy = abs(b.y - a.y)
    sx = 1 if a.x < b.x else -1
    sy = 1 if a.y < b.y else -1
    err = dx - dy

    while True:
        yield Cell(x, y)
        if x == b.x and y == b.y:
            return
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def has_line_of_sight(a: Cell, b: Cell, oracle: WalkabilityOracle) -> bool:
    """Return ``True`` if every rasterized cell from ``a`` to ``b`` is walkable.

    This is a discrete approximation: an obstacle touching the segment only
    between two sampled cells, such as a corner cut diagonally, is not seen.
    """

    for cell in bresenham_line(a, b):
        if not oracle.is_walkable(cell):
            return False
    return True


def trace_path(cells: Sequence[Cell]) -> List[Cell]:
    """Return every cell crossed by the polyline through ``cells``.

    Consecutive waypoints are joined with :func:`bresenham_line`; shared
    endpoints appear once.
    """

    traced: List[Cell] = list(cells[:1])
    for a, b in zip(cells, cells[1:]):
        traced.extend(list(bresenham_line(a, b))[1:])
    return traced


__all__ = ["bresenham_line", "has_line_of_sight", "trace_path"]
