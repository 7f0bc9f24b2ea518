"""Any-angle Theta* search."""

from __future__ import annotations

from typing import Tuple

from grid_nav.core.components.cell import Cell
from grid_nav.core.spatial.interfaces import WalkabilityOracle
from grid_nav.systems.perception.line_of_sight import has_line_of_sight

from .pathfinding import GridSearch, SearchState, euclidean, movement_cost


class ThetaStarSearch(GridSearch):
    """Theta*: A* whose nodes may inherit their parent's parent.

    When the expanded cell's parent can see a neighbour directly, that
    neighbour is linked to the grandparent at straight-line cost instead of
    through the expanded cell. The resulting paths bend only where an
    obstacle forces them to. The start cell is recorded as its own parent.
    """

    name = "theta_star"
    heuristic = staticmethod(euclidean)
    root_is_own_parent = True
    no_path_message = "No path exists between start and target positions."

    def _relax(
        self,
        state: SearchState,
        current: Cell,
        neighbor: Cell,
        oracle: WalkabilityOracle,
    ) -> Tuple[Cell, float]:
        grandparent = state.parents[current]
        if grandparent != current and has_line_of_sight(grandparent, neighbor, oracle):
            return grandparent, state.g_score[grandparent] + euclidean(
                grandparent, neighbor
            )
        return current, state.g_score[current] + movement_cost(current, neighbor)


__all__ = ["ThetaStarSearch"]
