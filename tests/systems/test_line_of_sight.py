from grid_nav.core.components.cell import Cell
from grid_nav.core.spatial.obstacle_map import ObstacleMap
from grid_nav.systems.perception.line_of_sight import (
    bresenham_line,
    has_line_of_sight,
    trace_path,
)


def test_bresenham_horizontal_includes_endpoints():
    assert list(bresenham_line(Cell(0, 0), Cell(3, 0))) == [
        Cell(0, 0),
        Cell(1, 0),
        Cell(2, 0),
        Cell(3, 0),
    ]


def test_bresenham_diagonal():
    assert list(bresenham_line(Cell(0, 0), Cell(2, 2))) == [
        Cell(0, 0),
        Cell(1, 1),
        Cell(2, 2),
    ]


def test_bresenham_shallow_slope():
    assert list(bresenham_line(Cell(0, 0), Cell(3, 1))) == [
        Cell(0, 0),
        Cell(1, 0),
        Cell(2, 1),
        Cell(3, 1),
    ]


def test_bresenham_negative_direction():
    cells = list(bresenham_line(Cell(4, 2), Cell(0, -1)))
    assert cells[0] == Cell(4, 2)
    assert cells[-1] == Cell(0, -1)
    assert len(cells) == 5
    for a, b in zip(cells, cells[1:]):
        assert max(abs(a.x - b.x), abs(a.y - b.y)) == 1


def test_bresenham_single_cell():
    assert list(bresenham_line(Cell(7, 7), Cell(7, 7))) == [Cell(7, 7)]


def test_line_of_sight_clear_and_blocked():
    grid = ObstacleMap([{Cell(2, 0)}])
    assert has_line_of_sight(Cell(0, 1), Cell(4, 1), grid)
    assert not has_line_of_sight(Cell(0, 0), Cell(4, 0), grid)


def test_line_of_sight_blocked_endpoint():
    grid = ObstacleMap([{Cell(3, 3)}])
    assert not has_line_of_sight(Cell(0, 0), Cell(3, 3), grid)
    assert not has_line_of_sight(Cell(3, 3), Cell(0, 0), grid)


def test_diagonal_squeeze_between_blocked_corners_is_visible():
    # Rasterization samples only (0, 0) and (1, 1); the two blocked corners
    # the segment passes between are not detected.
    grid = ObstacleMap([{Cell(1, 0), Cell(0, 1)}])
    assert has_line_of_sight(Cell(0, 0), Cell(1, 1), grid)


def test_trace_path_joins_waypoints():
    assert trace_path([Cell(0, 0), Cell(3, 1), Cell(3, 3)]) == [
        Cell(0, 0),
        Cell(1, 0),
        Cell(2, 1),
        Cell(3, 1),
        Cell(3, 2),
        Cell(3, 3),
    ]
    assert trace_path([Cell(2, 2)]) == [Cell(2, 2)]
    assert trace_path([]) == []
