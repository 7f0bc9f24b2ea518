"""Layered obstacle sets acting as a walkability oracle."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Set, Tuple

from ..components.cell import Cell
from .interfaces import WalkabilityOracle

BLOCKED_GLYPH = "#"


class ObstacleMap(WalkabilityOracle):
    """Walkability backed by one or more sets of blocked cells.

    Each layer stands for one obstacle source (walls, water, props...). A cell
    is walkable when no layer contains it and, if ``bounds`` is given, it lies
    inside ``0 <= x < width`` and ``0 <= y < height``.
    """

    def __init__(
        self,
        layers: Iterable[Iterable[Cell]] = (),
        bounds: Optional[Tuple[int, int]] = None,
    ) -> None:
        self.layers: List[Set[Cell]] = [set(layer) for layer in layers]
        self.bounds = bounds

    # ------------------------------------------------------------------
    # WalkabilityOracle
    # ------------------------------------------------------------------
    def is_walkable(self, cell: Cell) -> bool:
        if not self.in_bounds(cell):
            return False
        for layer in self.layers:
            if cell in layer:
                return False
        return True

    def is_valid(self) -> bool:
        """A map without any obstacle source is treated as misconfigured."""
        return bool(self.layers)

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------
    def add_layer(self, cells: Iterable[Cell] = ()) -> int:
        """Append a new obstacle layer and return its index."""
        self.layers.append(set(cells))
        return len(self.layers) - 1

    def block(self, cell: Cell, layer: int = 0) -> None:
        while len(self.layers) <= layer:
            self.layers.append(set())
        self.layers[layer].add(cell)

    def unblock(self, cell: Cell) -> None:
        """Remove ``cell`` from every layer."""
        for cells in self.layers:
            cells.discard(cell)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def in_bounds(self, cell: Cell) -> bool:
        if self.bounds is None:
            return True
        width, height = self.bounds
        return 0 <= cell.x < width and 0 <= cell.y < height

    def iter_cells(self) -> Iterator[Cell]:
        """Yield every cell inside ``bounds`` row by row."""
        if self.bounds is None:
            raise ValueError("unbounded map has no finite cell range")
        width, height = self.bounds
        for y in range(height):
            for x in range(width):
                yield Cell(x, y)

    def walkable_count(self) -> int:
        return sum(1 for cell in self.iter_cells() if self.is_walkable(cell))

    # ------------------------------------------------------------------
    # ASCII helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_ascii(cls, text: str, blocked: str = BLOCKED_GLYPH) -> "ObstacleMap":
        """Build a bounded map from rows of glyphs.

        Row ``y`` of the text is grid row ``y`` and column ``x`` is grid
        column ``x``. ``blocked`` marks obstacles; every other glyph is free.
        Short rows are padded with free cells up to the widest row.
        """

        rows = _rows(text)
        width = max((len(row) for row in rows), default=0)
        walls = {
            Cell(x, y)
            for y, row in enumerate(rows)
            for x, glyph in enumerate(row)
            if glyph in blocked
        }
        return cls([walls], bounds=(width, len(rows)))


def find_glyph(text: str, glyph: str) -> Cell | None:
    """Return the first cell in ``text`` holding ``glyph``."""

    for y, row in enumerate(_rows(text)):
        x = row.find(glyph)
        if x >= 0:
            return Cell(x, y)
    return None


def _rows(text: str) -> List[str]:
    lines = text.splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


__all__ = ["ObstacleMap", "find_glyph", "BLOCKED_GLYPH"]
