# tests/conftest.py
import pytest

from grid_nav.core.components.cell import Cell
from grid_nav.core.spatial.grid_mapper import GridMapper
from grid_nav.core.spatial.interfaces import WalkabilityOracle
from grid_nav.core.spatial.obstacle_map import ObstacleMap


class CountingOracle(WalkabilityOracle):
    """Wrap another oracle and count ``is_walkable`` calls."""

    def __init__(self, inner: WalkabilityOracle) -> None:
        self.inner = inner
        self.calls = 0

    def is_walkable(self, cell: Cell) -> bool:
        self.calls += 1
        return self.inner.is_walkable(cell)

    def is_valid(self) -> bool:
        return self.inner.is_valid()


@pytest.fixture
def mapper() -> GridMapper:
    return GridMapper(cell_size=1.0)


@pytest.fixture
def open_grid() -> ObstacleMap:
    """Bounded 10x10 map without obstacles."""
    return ObstacleMap([set()], bounds=(10, 10))


@pytest.fixture
def open_world() -> ObstacleMap:
    """Unbounded map without obstacles."""
    return ObstacleMap([set()])


@pytest.fixture
def counting_oracle():
    return CountingOracle
