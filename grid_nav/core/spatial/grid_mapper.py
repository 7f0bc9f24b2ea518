"""Uniform square-cell coordinate mapper."""

from __future__ import annotations

import math

from ..components.cell import Cell
from ..components.position import Position
from .interfaces import CoordinateMapper


class GridMapper(CoordinateMapper):
    """Uniform grid of square cells anchored at ``origin``."""

    def __init__(self, cell_size: float = 1.0, origin: Position | None = None) -> None:
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        self.cell_size = float(cell_size)
        self.origin = origin if origin is not None else Position(0.0, 0.0)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def world_to_cell(self, pos: Position) -> Cell:
        """Return integer cell coordinates for ``pos``."""
        cx = math.floor((pos.x - self.origin.x) / self.cell_size)
        cy = math.floor((pos.y - self.origin.y) / self.cell_size)
        return Cell(int(cx), int(cy))

    def cell_to_world_center(self, cell: Cell) -> Position:
        """Return the world position at the middle of ``cell``."""
        half = self.cell_size / 2.0
        return Position(
            self.origin.x + cell.x * self.cell_size + half,
            self.origin.y + cell.y * self.cell_size + half,
        )


__all__ = ["GridMapper"]
