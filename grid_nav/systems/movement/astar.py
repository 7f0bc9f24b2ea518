"""Classic 8-directional A* search."""

from __future__ import annotations

from typing import Tuple

from grid_nav.core.components.cell import Cell
from grid_nav.core.spatial.interfaces import WalkabilityOracle

from .pathfinding import GridSearch, SearchState, manhattan, movement_cost


class AStarSearch(GridSearch):
    """A* over the 8-connected grid with a Manhattan heuristic.

    Each neighbour is reached only through the cell being expanded, so paths
    follow grid axes and diagonals. Closed cells are never reopened.
    """

    name = "astar"
    heuristic = staticmethod(manhattan)
    root_is_own_parent = False
    no_path_message = "No path found"

    def _relax(
        self,
        state: SearchState,
        current: Cell,
        neighbor: Cell,
        oracle: WalkabilityOracle,
    ) -> Tuple[Cell, float]:
        return current, state.g_score[current] + movement_cost(current, neighbor)


__all__ = ["AStarSearch"]
