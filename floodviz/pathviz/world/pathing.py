# pathviz/world/pathing.py
from __future__ import annotations
import logging

from pathviz.world.coord_queue import CoordinateQueue
from pathviz.world.coords import Coord, neighbors4, sqr_distance
from pathviz.world.grid import Grid, UNVISITED, WALL
from pathviz.world.positions import Positions

LOGGER = logging.getLogger(__name__)

def _fill(cells: list[list[int]], cols: int, rows: int, start: Coord) -> None:
    for line in cells:
        for col, v in enumerate(line):
            if v != WALL:
                line[col] = UNVISITED

    q = CoordinateQueue(capacity=cols * rows)
    cells[start[1]][start[0]] = 1
    q.push(start)

    while not q.empty():
        cx, cy = q.front()
        new_value = cells[cy][cx] + 1
        for nx, ny in neighbors4((cx, cy), cols, rows):
            if cells[ny][nx] == UNVISITED:
                cells[ny][nx] = new_value
                q.push((nx, ny))
        q.pop()

def flood_fill(grid: Grid, start: Coord) -> bool:
    """
    4-way BFS from start (start = 1, +1 per step). Walls are left untouched;
    unreachable cells stay UNVISITED.
    Reset + fill run on a scratch copy that replaces grid.cells only on success,
    so an allocation failure returns False with the previous field intact.
    """
    if not grid.in_bounds(*start):
        raise ValueError(f"flood fill start {start} is outside the {grid.cols}x{grid.rows} grid")
    if grid.is_wall(*start):
        raise ValueError(f"flood fill start {start} is a wall")

    try:
        cells = [line[:] for line in grid.cells]
        _fill(cells, grid.cols, grid.rows, start)
    except MemoryError:
        LOGGER.warning("Skipping flood fill from %s: out of memory, keeping previous field", start)
        return False

    grid.cells = cells
    return True

def reconstruct_path(grid: Grid, start: Coord, target: Coord) -> list[Coord]:
    """
    Greedy walk down the distance field from target toward start.
    Returns [target-adjacent .. start-adjacent]; neither endpoint is included.
    Empty if target is unreachable (or a wall, or next to start).
    """
    path: list[Coord] = []
    cur = target
    while True:
        cur_value = grid.value(*cur)
        candidates: list[Coord] = []
        for n in neighbors4(cur, grid.cols, grid.rows):
            n_value = grid.value(*n)
            if n_value == WALL or n_value >= cur_value:
                continue
            if n == start:
                # cur touches start: the walk is done
                candidates.clear()
                break
            candidates.append(n)

        if not candidates:
            return path

        # min() keeps the first minimal entry, so ties go to scan order
        cur = min(candidates, key=lambda c: sqr_distance(c, start))
        path.append(cur)

def recompute(grid: Grid, positions: Positions) -> bool:
    """Refresh the distance field and positions.path. False if the fill was skipped."""
    if not flood_fill(grid, positions.start):
        return False
    positions.path = reconstruct_path(grid, positions.start, positions.target)
    LOGGER.debug(
        "Recomputed from %s: target %s distance=%d, path=%d cells",
        positions.start, positions.target, grid.value(*positions.target), len(positions.path),
    )
    return True
