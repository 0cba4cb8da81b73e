"""
App shell: display and main loop. One settling tick per frame at the configured fps;
world, input and rendering are wired here.
"""

import logging
from pathlib import Path

import pygame

from world import FrameDriver, Grid, make_rng
from ui.grid_view import draw_cells, present
from ui.input import PointerInput
import config

TITLE = "Sand"

logger = logging.getLogger("sand")


def run(config_path: Path | str | None = None) -> None:
    cfg = config.load_config(config_path)
    logging.basicConfig(level=cfg["log_level"], format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    width, height = cfg["world"]["width"], cfg["world"]["height"]
    scale = cfg["scale"]
    grid = Grid.from_world(width, height, scale)
    rng, seed_used = make_rng(cfg["seed"])
    driver = FrameDriver(grid, scale, rng, config.palette_from_config(cfg))
    background = tuple(cfg["background"])

    logger.info("Initializing pygame")
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        pointer = PointerInput()
        logger.info("Grid %dx%d (scale %d), seed %d", grid.rows, grid.cols, scale, seed_used)

        while driver.tick(pointer.poll()):
            draw_cells(screen, driver.cells(), scale, background)
            present()
            clock.tick(cfg["fps"])
    finally:
        pygame.quit()


def main() -> int:
    run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
