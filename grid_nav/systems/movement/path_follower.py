# grid_nav/systems/movement/path_follower.py
"""Tick-driven movement of a single agent along computed paths."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple
import logging

from ...config import CONFIG
from ...core.components.position import Position
from ...core.events import MovementEvent, MovementEventKind
from ...core.spatial.interfaces import CoordinateMapper, WalkabilityOracle
from ...utils.observer import log_event
from .pathfinding import PathResult

logger = logging.getLogger(__name__)

EventCallback = Callable[[MovementEvent], None]


class FollowerState(str, Enum):
    IDLE = "idle"
    FOLLOWING = "following"


class PathFollower:
    """Advance an agent toward each waypoint of a path, one tick at a time.

    ``search`` is any object exposing ``find_path(start, target, oracle,
    mapper)``, normally an :class:`AStarSearch` or :class:`ThetaStarSearch`.
    Events go to subscribers registered with :meth:`subscribe` and, as
    dicts, to ``event_log`` (or the observer's shared buffer when omitted).
    """

    def __init__(
        self,
        search: Any,
        oracle: WalkabilityOracle,
        mapper: CoordinateMapper,
        position: Position,
        speed: float | None = None,
        arrival_tolerance: float | None = None,
        event_log: List[Dict[str, Any]] | None = None,
    ) -> None:
        self.search = search
        self.oracle = oracle
        self.mapper = mapper
        self.speed = float(speed if speed is not None else CONFIG.follower.speed)
        self.arrival_tolerance = float(
            arrival_tolerance
            if arrival_tolerance is not None
            else CONFIG.follower.arrival_tolerance
        )
        if self.speed <= 0:
            raise ValueError("speed must be positive")
        if self.arrival_tolerance < 0:
            raise ValueError("arrival_tolerance must be non-negative")
        self.event_log = event_log

        self._position = position
        self._state = FollowerState.IDLE
        self._path: Tuple[Position, ...] = ()
        self._index = 0
        self._last_result: PathResult | None = None
        # Bumped whenever the current traversal is replaced or stopped so
        # that work queued for an abandoned path can detect it.
        self._generation = 0
        self._subscribers: Dict[Optional[MovementEventKind], List[EventCallback]] = {}

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------
    def subscribe(
        self, kind: MovementEventKind | None, callback: EventCallback
    ) -> None:
        """Call ``callback`` for every event of ``kind`` (all kinds if ``None``)."""
        self._subscribers.setdefault(kind, []).append(callback)

    def unsubscribe(
        self, kind: MovementEventKind | None, callback: EventCallback
    ) -> None:
        callbacks = self._subscribers.get(kind)
        if callbacks and callback in callbacks:
            callbacks.remove(callback)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def move_to(self, target: Position) -> PathResult:
        """Plan from the current position to ``target`` and start following.

        A failed plan is reported through ``PATH_COMPUTED`` only; any
        traversal already in progress carries on untouched. A successful
        plan silently replaces the current traversal.
        """

        result = self._plan(target)
        if not result.success:
            logger.warning("Pathfinding failed: %s", result.message)
            self._emit(MovementEvent(MovementEventKind.PATH_COMPUTED, result=result))
            return result

        self._generation += 1
        generation = self._generation
        self._path = result.path
        self._index = 0
        self._state = FollowerState.FOLLOWING

        self._emit(MovementEvent(MovementEventKind.PATH_COMPUTED, result=result))
        if generation != self._generation:
            return result
        self._emit(MovementEvent(MovementEventKind.MOVEMENT_STARTED))
        return result

    def plan_only(self, target: Position) -> PathResult:
        """Compute a path to ``target`` and report it without moving."""

        result = self._plan(target)
        self._emit(MovementEvent(MovementEventKind.PATH_COMPUTED, result=result))
        return result

    def stop(self) -> None:
        """Abandon the current traversal, if any."""

        self._generation += 1
        was_following = self._state is FollowerState.FOLLOWING
        self._state = FollowerState.IDLE
        self._index = 0
        if was_following:
            logger.debug("Movement cancelled at %s", self._position)
            self._emit(MovementEvent(MovementEventKind.MOVEMENT_CANCELLED))

    def step(self, elapsed: float) -> None:
        """Advance toward the current waypoint by ``speed * elapsed``.

        At most one waypoint is reached per call.
        """

        if self._state is not FollowerState.FOLLOWING or elapsed <= 0:
            return

        waypoint = self._path[self._index]
        self._position = self._position.move_towards(waypoint, self.speed * elapsed)
        if self._position.distance_to(waypoint) > self.arrival_tolerance:
            return

        generation = self._generation
        self._emit(
            MovementEvent(
                MovementEventKind.WAYPOINT_REACHED, waypoint_index=self._index
            )
        )
        if generation != self._generation:
            return

        self._index += 1
        if self._index >= len(self._path):
            self._state = FollowerState.IDLE
            logger.debug("Movement completed at %s", self._position)
            self._emit(MovementEvent(MovementEventKind.MOVEMENT_COMPLETED))

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def position(self) -> Position:
        return self._position

    @property
    def state(self) -> FollowerState:
        return self._state

    @property
    def is_moving(self) -> bool:
        return self._state is FollowerState.FOLLOWING

    @property
    def current_path(self) -> Tuple[Position, ...]:
        return self._path

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current_waypoint(self) -> Position | None:
        if self._state is not FollowerState.FOLLOWING:
            return None
        return self._path[self._index]

    @property
    def last_result(self) -> PathResult | None:
        return self._last_result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _plan(self, target: Position) -> PathResult:
        result = self.search.find_path(self._position, target, self.oracle, self.mapper)
        self._last_result = result
        return result

    def _emit(self, event: MovementEvent) -> None:
        log_event(event.kind.value, event.to_dict(), self.event_log)
        callbacks = list(self._subscribers.get(event.kind, ()))
        callbacks.extend(self._subscribers.get(None, ()))
        for callback in callbacks:
            callback(event)


__all__ = ["FollowerState", "PathFollower"]
