"""Integer grid cell."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Cell:
    """Unit square of the grid addressed by integer ``(x, y)``."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Cell":
        """Return the cell translated by ``(dx, dy)``."""

        return Cell(self.x + dx, self.y + dy)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


__all__ = ["Cell"]
