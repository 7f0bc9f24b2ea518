"""Lookup of search strategies by name."""

from __future__ import annotations

from typing import Dict, Optional, Type

from .astar import AStarSearch
from .pathfinding import GridSearch
from .theta_star import ThetaStarSearch

STRATEGIES: Dict[str, Type[GridSearch]] = {
    AStarSearch.name: AStarSearch,
    ThetaStarSearch.name: ThetaStarSearch,
}


def get_search(name: str, max_expansions: Optional[int] = None) -> GridSearch:
    """Return a new strategy instance registered under ``name``."""

    key = name.strip().lower().replace("-", "_")
    cls = STRATEGIES.get(key)
    if cls is None:
        known = ", ".join(sorted(STRATEGIES))
        raise ValueError(f"Unknown search strategy: {name!r} (expected one of {known})")
    return cls(max_expansions=max_expansions)


__all__ = ["STRATEGIES", "get_search"]
