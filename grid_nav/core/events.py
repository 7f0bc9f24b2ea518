"""Event dataclasses emitted by path following."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from ..systems.movement.pathfinding import PathResult


class MovementEventKind(str, Enum):
    PATH_COMPUTED = "path_computed"
    MOVEMENT_STARTED = "movement_started"
    WAYPOINT_REACHED = "waypoint_reached"
    MOVEMENT_COMPLETED = "movement_completed"
    MOVEMENT_CANCELLED = "movement_cancelled"


@dataclass(slots=True)
class MovementEvent:
    """Record a change in a follower's movement lifecycle.

    ``result`` is set for ``PATH_COMPUTED``; ``waypoint_index`` for
    ``WAYPOINT_REACHED``.
    """

    kind: MovementEventKind
    result: "PathResult | None" = None
    waypoint_index: int | None = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.result is not None:
            data["success"] = self.result.success
            data["reason"] = self.result.reason.value if self.result.reason else None
            data["waypoints"] = len(self.result.path)
        if self.waypoint_index is not None:
            data["waypoint_index"] = self.waypoint_index
        return data


__all__ = ["MovementEventKind", "MovementEvent"]
