# pathviz/world/editing.py
from __future__ import annotations
import logging
from typing import Literal

from pathviz.world.coords import Coord
from pathviz.world.grid import Grid
from pathviz.world.positions import Positions

LOGGER = logging.getLogger(__name__)

Direction = Literal["up", "left", "down", "right"]

DIRS: dict[Direction, tuple[int, int]] = {
    "up": (0, -1),
    "left": (-1, 0),
    "down": (0, 1),
    "right": (1, 0),
}

# Each mutation returns True when the distance field / path must be recomputed.

def toggle_wall(grid: Grid, positions: Positions, pos: Coord) -> bool:
    if not grid.in_bounds(*pos):
        return False
    if pos == positions.start or pos == positions.target:
        LOGGER.debug("Refusing wall toggle on %s: start/target cell", pos)
        return False
    grid.toggle_wall(*pos)
    return True

def _can_place(grid: Grid, pos: Coord, other: Coord) -> bool:
    if not grid.is_passable(*pos):
        LOGGER.debug("Refusing move onto %s: wall or off the grid", pos)
        return False
    if pos == other:
        LOGGER.debug("Refusing move onto %s: start and target must differ", pos)
        return False
    return True

def move_start(grid: Grid, positions: Positions, pos: Coord) -> bool:
    if not _can_place(grid, pos, positions.target):
        return False
    positions.start = pos
    return True

def move_target(grid: Grid, positions: Positions, pos: Coord) -> bool:
    if not _can_place(grid, pos, positions.start):
        return False
    positions.target = pos
    return True

def move_selected(grid: Grid, positions: Positions, direction: Direction) -> bool:
    """Shift the cursor one tile, clamped to the grid. Never needs a recompute."""
    dx, dy = DIRS[direction]
    x, y = positions.selected
    positions.selected = (
        min(max(0, x + dx), grid.cols - 1),
        min(max(0, y + dy), grid.rows - 1),
    )
    return False

def select_cell(grid: Grid, positions: Positions, pos: Coord) -> bool:
    if grid.in_bounds(*pos):
        positions.selected = pos
    return False

def clear_walls(grid: Grid) -> bool:
    walls = grid.walls()
    for c in walls:
        grid.toggle_wall(*c)
    return bool(walls)
