# pathviz/app.py
from __future__ import annotations
import argparse
import logging
import pygame
from pathviz import settings
from pathviz.world.grid import Grid
from pathviz.scenes.editor import EditorScene

LOGGER = logging.getLogger(__name__)

def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value

def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive BFS flood-fill / path visualizer")
    parser.add_argument("--cols", type=_positive_int, default=settings.GRID_COLS, help="grid width in tiles")
    parser.add_argument("--rows", type=_positive_int, default=settings.GRID_ROWS, help="grid height in tiles")
    parser.add_argument("--tile-size", type=_positive_int, default=settings.TILE_SIZE, help="tile size in px")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)

def build_scene(args: argparse.Namespace) -> EditorScene:
    grid = Grid(cols=args.cols, rows=args.rows, tile_size=args.tile_size)
    return EditorScene(grid=grid)

def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    scene = build_scene(args)
    LOGGER.info("Starting %dx%d session (start=%s, target=%s)",
                scene.grid.cols, scene.grid.rows, scene.positions.start, scene.positions.target)

    pygame.init()
    pygame.display.set_caption(settings.WINDOW_TITLE)
    screen = pygame.display.set_mode(scene.window_size())

    try:
        scene.draw(screen)
        pygame.display.flip()
        while scene.running:
            # -- Input (blocks until the next event) --
            scene.handle_event(pygame.event.wait())

            # -- Recompute if dirty, then render --
            scene.draw(screen)
            pygame.display.flip()
    finally:
        pygame.quit()
        LOGGER.info("Session closed")

if __name__ == "__main__":
    main()
