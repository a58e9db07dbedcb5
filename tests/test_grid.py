import pytest

from pipemap_lib.analysis.grid import build_grid
from pipemap_lib.constants import EAST, NORTH, SOUTH, WEST
from pipemap_lib.errors import GridShapeError, InvalidTile, StartCountError

from conftest import SQUARE_LOOP, WINDING_LOOP


def test_build_grid_finds_start_and_dimensions():
    grid = build_grid(SQUARE_LOOP)
    assert grid.start == (1, 1)
    assert (grid.height, grid.width) == (5, 5)
    assert grid.rows() == SQUARE_LOOP


def test_start_tile_declares_all_directions_until_resolved():
    grid = build_grid(SQUARE_LOOP)
    assert grid.tile(grid.start).connections == {NORTH, EAST, SOUTH, WEST}
    assert grid.tile((1, 2)).connections == {EAST, WEST}
    assert grid.tile((0, 0)).connections == frozenset()


def test_invalid_glyph_reports_position():
    with pytest.raises(InvalidTile) as exc_info:
        build_grid(["S-7", "|X|", "L-J"])
    assert exc_info.value.glyph == "X"
    assert exc_info.value.position == (1, 1)


@pytest.mark.parametrize(
    "rows, count",
    [
        (["F-7", "|.|", "L-J"], 0),
        (["S-S", "|.|", "L-J"], 2),
    ],
)
def test_start_count_must_be_one(rows, count):
    with pytest.raises(StartCountError) as exc_info:
        build_grid(rows)
    assert exc_info.value.count == count


@pytest.mark.parametrize("rows", [[], [""], ["S-7", "|.", "L-J"]])
def test_grid_must_be_a_non_empty_rectangle(rows):
    with pytest.raises(GridShapeError):
        build_grid(rows)


def test_neighbors_require_reciprocal_connections():
    grid = build_grid(WINDING_LOOP)
    # North of the start is ground, south is '|', east is 'J'.
    assert grid.neighbors(grid.start, include_visited=False) == [(3, 0), (2, 1)]
    # 'J' at (2, 1) points north to 'F' at (1, 1) and west back to the start.
    assert grid.neighbors((2, 1), include_visited=False) == [(1, 1), (2, 0)]


def test_neighbors_order_is_north_south_west_east():
    grid = build_grid([".|.", "-S-", ".|."])
    assert grid.neighbors((1, 1), include_visited=True) == [(0, 1), (2, 1), (1, 0), (1, 2)]


def test_neighbors_skip_visited_unless_requested():
    grid = build_grid(SQUARE_LOOP)
    grid.tile((1, 2)).visited = True
    assert grid.neighbors(grid.start, include_visited=False) == [(2, 1)]
    assert grid.neighbors(grid.start, include_visited=True) == [(2, 1), (1, 2)]


def test_neighbors_stay_in_bounds():
    grid = build_grid(["S7", "LJ"])
    assert grid.neighbors((0, 0), include_visited=True) == [(1, 0), (0, 1)]
