# pathviz/world/coords.py
from __future__ import annotations
from typing import Iterator

Coord = tuple[int, int]

# Scan order matters for path tie-breaks: up, left, down, right. No diagonals.
NEIGHBOR_OFFSETS: tuple[Coord, ...] = ((0, -1), (-1, 0), (0, 1), (1, 0))

def in_boundary(c: Coord, cols: int, rows: int) -> bool:
    x, y = c
    return 0 <= x < cols and 0 <= y < rows

def neighbors4(c: Coord, cols: int, rows: int) -> Iterator[Coord]:
    """In-bounds orthogonal neighbours of c, in scan order."""
    x, y = c
    for dx, dy in NEIGHBOR_OFFSETS:
        n = (x + dx, y + dy)
        if in_boundary(n, cols, rows):
            yield n

def sqr_distance(a: Coord, b: Coord) -> int:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy
