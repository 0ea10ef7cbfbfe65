# pathviz/scenes/editor.py
from __future__ import annotations
import logging
import pygame
from dataclasses import dataclass, field

from pathviz import settings
from pathviz.world.coords import Coord
from pathviz.world.grid import Grid, UNVISITED, WALL
from pathviz.world.positions import Positions
from pathviz.world.pathing import recompute
from pathviz.world.editing import (
    Direction, clear_walls, move_selected, move_start, move_target, select_cell, toggle_wall,
)

LOGGER = logging.getLogger(__name__)

ARROW_KEYS: dict[int, Direction] = {
    pygame.K_UP: "up",
    pygame.K_LEFT: "left",
    pygame.K_DOWN: "down",
    pygame.K_RIGHT: "right",
}

HELP_LINES: tuple[str, ...] = (
    "Arrows  move cursor",
    "A       set start",
    "S       set target",
    "D       toggle wall",
    "C       clear walls",
    "V       show distances",
    "Q/Esc   quit",
)

def _lerp_rgb(a: tuple[int, int, int], b: tuple[int, int, int], t: float) -> tuple[int, int, int]:
    return (
        int(a[0] + (b[0] - a[0]) * t),
        int(a[1] + (b[1] - a[1]) * t),
        int(a[2] + (b[2] - a[2]) * t),
    )

@dataclass
class EditorScene:
    """
    Wall/start/target editor:
    - Cursor movement (arrows / mouse), start (A), target (S), walls (D)
    - Dirty flag: at most one flood fill + path rebuild per render
    - Board (distance shading, path, endpoints) + side panel
    """
    grid: Grid = field(default_factory=Grid)
    positions: Positions | None = None
    show_distances: bool = settings.SHOW_DISTANCES
    running: bool = field(default=True, init=False)
    dirty: bool = field(default=True, init=False)

    def __post_init__(self) -> None:
        if self.positions is None:
            self.positions = Positions.default_for(self.grid)
        self._font: pygame.font.Font | None = None
        self._dist_font: pygame.font.Font | None = None

    # ---- Input ----
    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
            return

        if event.type == pygame.KEYDOWN:
            self._handle_key(event.key)
            return

        # click selects; editing stays on the keyboard like the arrows
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            select_cell(self.grid, self.positions, self.grid.from_px(*event.pos))

    def _handle_key(self, key: int) -> None:
        pos = self.positions
        if key in (pygame.K_q, pygame.K_ESCAPE):
            self.running = False
        elif key in ARROW_KEYS:
            move_selected(self.grid, pos, ARROW_KEYS[key])
        elif key == pygame.K_a:
            self.dirty |= move_start(self.grid, pos, pos.selected)
        elif key == pygame.K_s:
            self.dirty |= move_target(self.grid, pos, pos.selected)
        elif key == pygame.K_d:
            self.dirty |= toggle_wall(self.grid, pos, pos.selected)
        elif key == pygame.K_c:
            self.dirty |= clear_walls(self.grid)
        elif key == pygame.K_v:
            self.show_distances = not self.show_distances

    # ---- Update ----
    def update(self) -> None:
        """Bring the distance field and path in line with the current walls/endpoints."""
        if not self.dirty:
            return
        if recompute(self.grid, self.positions):
            self.dirty = False
        else:
            LOGGER.debug("Recompute skipped; field left stale until the next frame")

    # ---- Render ----
    def window_size(self) -> tuple[int, int]:
        w, h = self.grid.pixel_size()
        ox, oy = self.grid.origin
        return ox * 2 + w + settings.PANEL_WIDTH, oy * 2 + h

    def draw(self, surface: pygame.Surface) -> None:
        self.update()
        if self._font is None:
            self._font = pygame.font.Font(None, settings.HUD_FONT_SIZE)
            self._dist_font = pygame.font.Font(None, settings.DIST_FONT_SIZE)

        surface.fill(settings.BG_COLOR)
        self._draw_cells(surface)
        self.grid.draw_lines(surface)
        self._draw_selection(surface)
        self._draw_panel(surface)

    def cell_color(self, col: int, row: int, max_dist: int, path_cells: set[Coord]) -> tuple[int, int, int]:
        c = (col, row)
        pos = self.positions
        if c == pos.start:
            return settings.START_COLOR
        if c == pos.target:
            return settings.TARGET_COLOR
        v = self.grid.value(col, row)
        if v == WALL:
            return settings.WALL_COLOR
        if c in path_cells:
            return settings.PATH_COLOR
        if v == UNVISITED:
            return settings.BG_COLOR
        t = (v - 1) / (max_dist - 1) if max_dist > 1 else 0.0
        return _lerp_rgb(settings.DIST_NEAR_RGB, settings.DIST_FAR_RGB, t)

    def _draw_cells(self, surface: pygame.Surface) -> None:
        path_cells = set(self.positions.path)
        max_dist = self.grid.max_distance()
        for row in range(self.grid.rows):
            for col in range(self.grid.cols):
                rect = self.grid.tile_rect(col, row)
                surface.fill(self.cell_color(col, row, max_dist, path_cells), rect)
                v = self.grid.value(col, row)
                if self.show_distances and v > 0 and self._dist_font is not None:
                    label = self._dist_font.render(str(v), True, settings.DIST_TEXT_RGB)
                    surface.blit(label, label.get_rect(center=self.grid.center_px(col, row)))

    def _draw_selection(self, surface: pygame.Surface) -> None:
        rect = self.grid.tile_rect(*self.positions.selected)
        pygame.draw.rect(surface, settings.SELECTED_RGB, rect, width=3)

    def panel_lines(self) -> list[str]:
        pos = self.positions
        sx, sy = pos.selected
        sel_value = self.grid.value(sx, sy)
        if sel_value == WALL:
            sel_text = "wall"
        elif sel_value == UNVISITED:
            sel_text = "unreachable"
        else:
            sel_text = str(sel_value - 1)

        target_value = self.grid.value(*pos.target)
        if target_value == UNVISITED:
            path_text = "No path"
        else:
            path_text = f"Path: {target_value - 1} steps ({len(pos.path)} cells between)"

        return [
            "Positions:",
            f"  Start    = ({pos.start[0]:2d}; {pos.start[1]:2d})",
            f"  Target   = ({pos.target[0]:2d}; {pos.target[1]:2d})",
            f"  Selected = ({sx:2d}; {sy:2d})",
            f"  Distance = {sel_text}",
            "",
            path_text,
        ]

    def _draw_panel(self, surface: pygame.Surface) -> None:
        ox, oy = self.grid.origin
        x = ox * 2 + self.grid.pixel_size()[0]
        y = oy
        lines = [(t, settings.HUD_TEXT_RGB) for t in self.panel_lines()]
        lines.append(("", settings.HUD_DIM_RGB))
        lines.extend((t, settings.HUD_DIM_RGB) for t in HELP_LINES)
        for text, color in lines:
            surf_text = self._font.render(text, True, color)
            surface.blit(surf_text, (x, y))
            y += surf_text.get_height() + settings.HUD_LINE_SPACING
