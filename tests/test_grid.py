import pytest

from pathviz.world.coords import in_boundary, neighbors4, sqr_distance
from pathviz.world.grid import Grid, UNVISITED, WALL


def test_new_grid_is_all_unvisited():
    grid = Grid(cols=4, rows=3)
    assert len(grid.cells) == 3
    assert all(len(line) == 4 for line in grid.cells)
    assert all(v == UNVISITED for line in grid.cells for v in line)
    assert grid.walls() == set()
    assert grid.max_distance() == 0


@pytest.mark.parametrize("cols,rows", [(0, 5), (5, 0), (-1, 3)])
def test_grid_rejects_non_positive_dimensions(cols, rows):
    with pytest.raises(ValueError):
        Grid(cols=cols, rows=rows)


def test_toggle_wall_flips_and_ignores_out_of_bounds():
    grid = Grid(cols=3, rows=3)
    grid.cells[1][1] = 4
    grid.toggle_wall(1, 1)
    assert grid.is_wall(1, 1)
    assert not grid.is_passable(1, 1)
    grid.toggle_wall(1, 1)
    assert grid.value(1, 1) == UNVISITED
    grid.toggle_wall(3, 0)
    grid.toggle_wall(-1, 0)
    assert grid.walls() == set()


def test_pixel_mapping_round_trips_through_origin():
    grid = Grid(cols=4, rows=4, tile_size=10, origin=(5, 7))
    assert grid.to_px(2, 3) == (25, 37)
    assert grid.center_px(0, 0) == (10, 12)
    assert grid.from_px(26, 38) == (2, 3)
    assert grid.from_px(0, 0) == (-1, -1)
    assert grid.pixel_size() == (40, 40)
    assert grid.tile_rect(1, 1).topleft == (15, 17)


def test_neighbors_are_orthogonal_and_in_scan_order():
    assert list(neighbors4((1, 1), 3, 3)) == [(1, 0), (0, 1), (1, 2), (2, 1)]
    assert list(neighbors4((0, 0), 3, 3)) == [(0, 1), (1, 0)]
    assert list(neighbors4((0, 0), 1, 1)) == []


def test_coord_helpers():
    assert in_boundary((0, 0), 1, 1)
    assert not in_boundary((1, 0), 1, 1)
    assert sqr_distance((0, 0), (3, 4)) == 25
