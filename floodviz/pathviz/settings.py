# pathviz/settings.py
from __future__ import annotations

# Window
WINDOW_TITLE: str = "floodviz - BFS distance field + path"

# Grid (in tiles); fixed for the whole session
GRID_COLS: int = 40
GRID_ROWS: int = 20
TILE_SIZE: int = 28
BOARD_MARGIN: int = 16

# Side panel with positions / help, right of the board
PANEL_WIDTH: int = 300

# Cell values
WALL_VALUE: int = -1
UNVISITED_VALUE: int = 0

# Colors
BG_COLOR: tuple[int, int, int] = (15, 15, 20)
GRID_COLOR: tuple[int, int, int] = (45, 45, 60)
START_COLOR: tuple[int, int, int] = (60, 200, 90)     # green
TARGET_COLOR: tuple[int, int, int] = (220, 60, 60)    # red
WALL_COLOR: tuple[int, int, int] = (50, 90, 220)      # blue
PATH_COLOR: tuple[int, int, int] = (235, 210, 40)     # yellow
SELECTED_RGB: tuple[int, int, int] = (245, 245, 245)  # selection ring

# Distance shading: near -> far, lerped by distance / max distance
DIST_NEAR_RGB: tuple[int, int, int] = (40, 70, 80)
DIST_FAR_RGB: tuple[int, int, int] = (25, 25, 40)
DIST_TEXT_RGB: tuple[int, int, int] = (150, 150, 170)
SHOW_DISTANCES: bool = True

# HUD / panel
HUD_TEXT_RGB: tuple[int, int, int] = (240, 240, 240)
HUD_DIM_RGB: tuple[int, int, int] = (150, 150, 160)
HUD_FONT_SIZE: int = 22
DIST_FONT_SIZE: int = 16
HUD_LINE_SPACING: int = 6

# Logging
LOG_LEVEL: str = "INFO"
