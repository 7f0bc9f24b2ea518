import pytest

from grid_nav.core.components.cell import Cell
from grid_nav.core.components.position import Position
from grid_nav.core.spatial.grid_mapper import GridMapper
from grid_nav.core.spatial.obstacle_map import ObstacleMap, find_glyph


MAP = """
S..#
.#..
...G
"""


def test_from_ascii_bounds_and_walls():
    grid = ObstacleMap.from_ascii(MAP)
    assert grid.bounds == (4, 3)
    assert not grid.is_walkable(Cell(3, 0))
    assert not grid.is_walkable(Cell(1, 1))
    assert grid.is_walkable(Cell(0, 0))
    assert grid.is_walkable(Cell(3, 2))
    assert grid.walkable_count() == 10


def test_out_of_bounds_is_blocked():
    grid = ObstacleMap.from_ascii(MAP)
    assert not grid.is_walkable(Cell(-1, 0))
    assert not grid.is_walkable(Cell(4, 0))
    assert not grid.is_walkable(Cell(0, 3))


def test_find_glyph():
    assert find_glyph(MAP, "S") == Cell(0, 0)
    assert find_glyph(MAP, "G") == Cell(3, 2)
    assert find_glyph(MAP, "X") is None


def test_layers_block_and_unblock():
    grid = ObstacleMap()
    assert not grid.is_valid()
    grid.block(Cell(1, 1))
    assert grid.is_valid()
    idx = grid.add_layer([Cell(5, 5), Cell(1, 1)])
    assert idx == 1
    assert not grid.is_walkable(Cell(5, 5))
    grid.unblock(Cell(1, 1))
    assert grid.is_walkable(Cell(1, 1))
    assert grid.is_walkable(Cell(1000, -1000))


def test_unbounded_map_cannot_iterate():
    with pytest.raises(ValueError):
        list(ObstacleMap([set()]).iter_cells())


def test_mapper_floors_negative_coordinates():
    mapper = GridMapper()
    assert mapper.world_to_cell(Position(-0.5, 0.2)) == Cell(-1, 0)
    assert mapper.world_to_cell(Position(2.999, 3.0)) == Cell(2, 3)


def test_mapper_round_trip_with_origin_and_size():
    mapper = GridMapper(cell_size=2.0, origin=Position(10.0, -4.0))
    assert mapper.cell_to_world_center(Cell(0, 0)) == Position(11.0, -3.0)
    for cell in (Cell(0, 0), Cell(-3, 7), Cell(12, -5)):
        assert mapper.world_to_cell(mapper.cell_to_world_center(cell)) == cell


def test_mapper_rejects_bad_cell_size():
    with pytest.raises(ValueError):
        GridMapper(cell_size=0)


def test_cell_value_semantics():
    assert Cell(1, 2) == Cell(1, 2)
    assert len({Cell(1, 2), Cell(1, 2), Cell(2, 1)}) == 2
    assert Cell(1, 2).offset(-1, 1) == Cell(0, 3)
    assert Cell(4, 5).as_tuple() == (4, 5)


def test_position_move_towards_never_overshoots():
    start = Position(0.0, 0.0)
    target = Position(3.0, 4.0)
    assert start.distance_to(target) == pytest.approx(5.0)
    mid = start.move_towards(target, 2.5)
    assert mid.x == pytest.approx(1.5)
    assert mid.y == pytest.approx(2.0)
    assert start.move_towards(target, 10.0) == target
    assert target.move_towards(target, 1.0) == target


def test_spatial_modules_are_documented():
    from grid_nav.core.spatial import grid_mapper, interfaces, obstacle_map

    for module in (grid_mapper, interfaces, obstacle_map):
        assert module.__doc__
