"""Boundary interfaces the search layer consumes."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..components.cell import Cell
from ..components.position import Position


class WalkabilityOracle(ABC):
    """Answer whether an arbitrary cell can be entered."""

    @abstractmethod
    def is_walkable(self, cell: Cell) -> bool:
        """Return ``True`` if ``cell`` is not blocked.

        Must be query-only for the duration of a search.
        """
        raise NotImplementedError

    def is_valid(self) -> bool:
        """Return ``False`` if the oracle has no usable obstacle source."""
        return True


class CoordinateMapper(ABC):
    """Convert between world positions and grid cells."""

    @abstractmethod
    def world_to_cell(self, pos: Position) -> Cell:
        """Return the cell containing ``pos``."""
        raise NotImplementedError

    @abstractmethod
    def cell_to_world_center(self, cell: Cell) -> Position:
        """Return the world-space center of ``cell``."""
        raise NotImplementedError


__all__ = ["WalkabilityOracle", "CoordinateMapper"]
