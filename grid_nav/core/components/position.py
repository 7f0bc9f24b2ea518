"""World-space position component."""

from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Position:
    """Continuous 2D coordinate in world units."""

    x: float
    y: float

    def distance_to(self, other: "Position") -> float:
        """Return the Euclidean distance to ``other``."""

        return math.hypot(other.x - self.x, other.y - self.y)

    def move_towards(self, target: "Position", max_delta: float) -> "Position":
        """Return a point moved toward ``target`` by at most ``max_delta``.

        The target is returned as-is once it is within reach, so repeated
        calls never overshoot.
        """

        dist = self.distance_to(target)
        if dist <= max_delta or dist == 0.0:
            return target
        ratio = max_delta / dist
        return Position(
            self.x + (target.x - self.x) * ratio,
            self.y + (target.y - self.y) * ratio,
        )


__all__ = ["Position"]
