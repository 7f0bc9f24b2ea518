"""Shared grid search primitives used by the A* and Theta* strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from heapq import heappop, heappush
from itertools import count
from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple
import logging
import math

from grid_nav.core.components.cell import Cell
from grid_nav.core.components.position import Position
from grid_nav.core.spatial.interfaces import CoordinateMapper, WalkabilityOracle

logger = logging.getLogger(__name__)


# Left, right, up, down, then the four diagonals.
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, 1),
    (0, -1),
    (-1, 1),
    (1, 1),
    (-1, -1),
    (1, -1),
)

CARDINAL_COST = 1.0
DIAGONAL_COST = 1.414


# ----------------------------------------------------------------------
# Results
# ----------------------------------------------------------------------


class FailureReason(str, Enum):
    """Why a search produced no path."""

    INVALID_REFERENCES = "invalid_references"
    UNWALKABLE_ENDPOINT = "unwalkable_endpoint"
    NO_PATH_EXISTS = "no_path_exists"
    EXPANSION_LIMIT = "expansion_limit"


@dataclass(frozen=True)
class PathResult:
    """Outcome of a single ``find_path`` call.

    ``path`` holds world-space cell centers from start to target and
    ``cells`` the matching grid cells. Both are empty on failure, in which
    case ``reason`` and ``message`` explain why.
    """

    success: bool
    path: Tuple[Position, ...] = ()
    cells: Tuple[Cell, ...] = ()
    reason: FailureReason | None = None
    message: str | None = None
    expansions: int = 0

    @property
    def length(self) -> float:
        """Euclidean length of ``path`` in world units."""
        return path_length(self.path)


def path_found(
    cells: Sequence[Cell], mapper: CoordinateMapper, expansions: int = 0
) -> PathResult:
    """Return a successful result for ``cells`` converted through ``mapper``."""

    return PathResult(
        success=True,
        path=tuple(mapper.cell_to_world_center(c) for c in cells),
        cells=tuple(cells),
        expansions=expansions,
    )


def path_failed(
    reason: FailureReason, message: str = "No path found", expansions: int = 0
) -> PathResult:
    return PathResult(
        success=False, reason=reason, message=message, expansions=expansions
    )


def path_length(points: Sequence[Position]) -> float:
    return sum(a.distance_to(b) for a, b in zip(points, points[1:]))


# ----------------------------------------------------------------------
# Grid metrics
# ----------------------------------------------------------------------


def neighbors(cell: Cell) -> Iterator[Cell]:
    """Yield the 8 surrounding cells in :data:`DIRECTIONS` order."""

    for dx, dy in DIRECTIONS:
        yield cell.offset(dx, dy)


def movement_cost(a: Cell, b: Cell) -> float:
    """Return the cost of a single step from ``a`` to adjacent ``b``."""

    if a.x != b.x and a.y != b.y:
        return DIAGONAL_COST
    return CARDINAL_COST


def manhattan(a: Cell, b: Cell) -> float:
    """Manhattan distance, used as the A* heuristic."""

    return float(abs(a.x - b.x) + abs(a.y - b.y))


def euclidean(a: Cell, b: Cell) -> float:
    """Straight-line distance, used as heuristic and shortcut cost by Theta*."""

    return math.hypot(a.x - b.x, a.y - b.y)


def cells_cost(cells: Sequence[Cell]) -> float:
    """Sum of :func:`movement_cost` along consecutive adjacent ``cells``."""

    return sum(movement_cost(a, b) for a, b in zip(cells, cells[1:]))


# ----------------------------------------------------------------------
# Open set
# ----------------------------------------------------------------------


class Frontier:
    """Binary-heap open set ordered by f-score then first insertion.

    A cell is held at most once. Lowering its f-score pushes a fresh heap
    entry that keeps the cell's original insertion number and invalidates
    the old entry, so ties resolve exactly like a first-come linear scan.
    """

    def __init__(self) -> None:
        self._heap: List[list] = []
        self._entries: Dict[Cell, list] = {}
        self._arrival = count()
        self._push_id = count()

    def __contains__(self, cell: object) -> bool:
        return cell in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def push(self, cell: Cell, f_score: float) -> None:
        """Insert ``cell`` or update its priority in place."""

        old = self._entries.get(cell)
        if old is None:
            arrival = next(self._arrival)
        else:
            arrival = old[1]
            old[3] = None
        entry = [f_score, arrival, next(self._push_id), cell]
        self._entries[cell] = entry
        heappush(self._heap, entry)

    def pop(self) -> Cell:
        """Remove and return the cell with the lowest f-score."""

        while self._heap:
            entry = heappop(self._heap)
            cell = entry[3]
            if cell is not None:
                del self._entries[cell]
                return cell
        raise KeyError("pop from an empty frontier")

    def f_score(self, cell: Cell) -> float:
        return self._entries[cell][0]


@dataclass
class SearchState:
    """Per-call bookkeeping; never shared between searches."""

    frontier: Frontier = field(default_factory=Frontier)
    closed: Set[Cell] = field(default_factory=set)
    parents: Dict[Cell, Cell] = field(default_factory=dict)
    g_score: Dict[Cell, float] = field(default_factory=dict)
    expansions: int = 0

    def admit(self, cell: Cell, parent: Cell, g: float, f: float) -> bool:
        """Record ``parent``/``g``/``f`` for ``cell`` if new or strictly cheaper."""

        if cell in self.frontier and g >= self.g_score.get(cell, math.inf):
            return False
        self.parents[cell] = parent
        self.g_score[cell] = g
        self.frontier.push(cell, f)
        return True


def reconstruct_path(parents: Dict[Cell, Cell], current: Cell) -> List[Cell]:
    """Walk ``parents`` back from ``current`` and return cells start-first.

    Stops at a cell without a parent or at one recorded as its own parent.
    """

    path = [current]
    while current in parents and parents[current] != current:
        current = parents[current]
        path.append(current)
    path.reverse()
    return path


# ----------------------------------------------------------------------
# Strategy base
# ----------------------------------------------------------------------


class GridSearch(ABC):
    """Base class for grid search strategies.

    Subclasses provide the heuristic and decide, for every walkable
    neighbour, which parent it gets and at what cost.
    """

    name = "grid"
    heuristic = staticmethod(manhattan)
    root_is_own_parent = False
    no_path_message = "No path found"

    def __init__(self, max_expansions: Optional[int] = None) -> None:
        if max_expansions is not None and max_expansions < 0:
            raise ValueError("max_expansions must be non-negative")
        self.max_expansions = max_expansions

    def find_path(
        self,
        start_world: Position,
        target_world: Position,
        oracle: WalkabilityOracle | None,
        mapper: CoordinateMapper | None,
    ) -> PathResult:
        """Return a path between two world positions.

        Never raises for unreachable or invalid requests; those come back as
        a failed :class:`PathResult`.
        """

        if oracle is None or mapper is None or not oracle.is_valid():
            logger.warning(
                "%s: missing walkability oracle or coordinate mapper.", self.name
            )
            return path_failed(
                FailureReason.INVALID_REFERENCES,
                "Missing walkability oracle or coordinate mapper reference.",
            )

        start = mapper.world_to_cell(start_world)
        target = mapper.world_to_cell(target_world)

        if not oracle.is_walkable(start) or not oracle.is_walkable(target):
            logger.debug(
                "%s: endpoint blocked (start=%s target=%s)", self.name, start, target
            )
            return path_failed(
                FailureReason.UNWALKABLE_ENDPOINT,
                "Start or target position is not walkable.",
            )

        if start == target:
            return path_found([start], mapper)

        return self._search(start, target, oracle, mapper)

    def _search(
        self,
        start: Cell,
        target: Cell,
        oracle: WalkabilityOracle,
        mapper: CoordinateMapper,
    ) -> PathResult:
        state = SearchState()
        state.g_score[start] = 0.0
        if self.root_is_own_parent:
            state.parents[start] = start
        state.frontier.push(start, self.heuristic(start, target))

        while state.frontier:
            if (
                self.max_expansions is not None
                and state.expansions >= self.max_expansions
            ):
                logger.debug(
                    "%s: expansion limit %s reached", self.name, self.max_expansions
                )
                return path_failed(
                    FailureReason.EXPANSION_LIMIT,
                    f"Search stopped after {state.expansions} expansions.",
                    state.expansions,
                )

            current = state.frontier.pop()
            if current == target:
                cells = reconstruct_path(state.parents, current)
                logger.debug(
                    "%s: path of %d cells after %d expansions",
                    self.name,
                    len(cells),
                    state.expansions,
                )
                return path_found(cells, mapper, state.expansions)

            state.closed.add(current)
            state.expansions += 1

            for neighbor in neighbors(current):
                if neighbor in state.closed or not oracle.is_walkable(neighbor):
                    continue
                parent, g = self._relax(state, current, neighbor, oracle)
                state.admit(neighbor, parent, g, g + self.heuristic(neighbor, target))

        logger.debug(
            "%s: frontier exhausted after %d expansions", self.name, state.expansions
        )
        return path_failed(
            FailureReason.NO_PATH_EXISTS, self.no_path_message, state.expansions
        )

    @abstractmethod
    def _relax(
        self,
        state: SearchState,
        current: Cell,
        neighbor: Cell,
        oracle: WalkabilityOracle,
    ) -> Tuple[Cell, float]:
        """Return ``(parent, g_score)`` proposed for ``neighbor``."""
        raise NotImplementedError


__all__ = [
    "DIRECTIONS",
    "CARDINAL_COST",
    "DIAGONAL_COST",
    "FailureReason",
    "PathResult",
    "path_found",
    "path_failed",
    "path_length",
    "neighbors",
    "movement_cost",
    "manhattan",
    "euclidean",
    "cells_cost",
    "Frontier",
    "SearchState",
    "reconstruct_path",
    "GridSearch",
]
