"""components package."""

from .cell import Cell
from .position import Position

__all__ = ["Cell", "Position"]
