# pathviz/world/grid.py
from __future__ import annotations
import pygame
from dataclasses import dataclass, field
from pathviz import settings
from pathviz.world.coords import Coord

WALL: int = settings.WALL_VALUE
UNVISITED: int = settings.UNVISITED_VALUE

@dataclass(slots=True)
class Grid:
    """Cell store: WALL, UNVISITED, or a 1-based hop distance per tile.

    cells is indexed [row][col].
    """
    cols: int = settings.GRID_COLS
    rows: int = settings.GRID_ROWS
    tile_size: int = settings.TILE_SIZE
    origin: tuple[int, int] = (settings.BOARD_MARGIN, settings.BOARD_MARGIN)
    cells: list[list[int]] = field(init=False)

    def __post_init__(self) -> None:
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError(f"grid dimensions must be positive, got {self.cols}x{self.rows}")
        self.cells = [[UNVISITED] * self.cols for _ in range(self.rows)]

    # --- cells ---
    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.cols and 0 <= row < self.rows

    def value(self, col: int, row: int) -> int:
        return self.cells[row][col]

    def is_wall(self, col: int, row: int) -> bool:
        return self.cells[row][col] == WALL

    def is_passable(self, col: int, row: int) -> bool:
        return self.in_bounds(col, row) and self.cells[row][col] != WALL

    def toggle_wall(self, col: int, row: int) -> None:
        if not self.in_bounds(col, row):
            return
        self.cells[row][col] = UNVISITED if self.cells[row][col] == WALL else WALL

    def walls(self) -> set[Coord]:
        return {(c, r) for r, line in enumerate(self.cells) for c, v in enumerate(line) if v == WALL}

    def max_distance(self) -> int:
        return max(0, max(v for line in self.cells for v in line))

    # --- math ---
    def to_px(self, col: int, row: int) -> tuple[int, int]:
        ox, oy = self.origin
        return ox + col * self.tile_size, oy + row * self.tile_size

    def center_px(self, col: int, row: int) -> tuple[int, int]:
        x, y = self.to_px(col, row)
        half = self.tile_size // 2
        return x + half, y + half

    def from_px(self, x: int, y: int) -> tuple[int, int]:
        ox, oy = self.origin
        return (x - ox) // self.tile_size, (y - oy) // self.tile_size

    def pixel_size(self) -> tuple[int, int]:
        return self.cols * self.tile_size, self.rows * self.tile_size

    def tile_rect(self, col: int, row: int) -> pygame.Rect:
        x, y = self.to_px(col, row)
        return pygame.Rect(x, y, self.tile_size, self.tile_size)

    # --- drawing ---
    def draw_lines(self, surface: pygame.Surface) -> None:
        ts = self.tile_size
        ox, oy = self.origin
        w, h = self.pixel_size()
        color = settings.GRID_COLOR

        for c in range(self.cols + 1):
            x = ox + c * ts
            pygame.draw.line(surface, color, (x, oy), (x, oy + h), 1)

        for r in range(self.rows + 1):
            y = oy + r * ts
            pygame.draw.line(surface, color, (ox, y), (ox + w, y), 1)
