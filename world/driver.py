"""
Frame driver: one iteration = pointer handling -> settle once -> expose cells for render.
Pure simulation side; the pygame shell in app.py supplies PointerFrames and draws the cells.
"""

import logging
import random
from dataclasses import dataclass
from typing import Iterator

from world.grid import Grid
from world.palette import Color, Palette
from world.settle import step
from world.stroke import Cell, draw_stroke

logger = logging.getLogger("sand.driver")


@dataclass
class PointerFrame:
    """Input for one tick. x, y in window pixels."""

    held: bool = False
    x: int = 0
    y: int = 0
    quit: bool = False
    clear: bool = False


class FrameDriver:
    """Owns the grid and the stroke state (previous pointer cell) across ticks."""

    def __init__(self, grid: Grid, scale: int, rng: random.Random, palette: Palette = Palette()) -> None:
        if scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")
        self.grid = grid
        self.scale = scale
        self.rng = rng
        self.palette = palette
        self.prev_cell: Cell | None = None
        self.ticks = 0

    def to_cell(self, x: int, y: int) -> Cell:
        """Pixel position -> (row, col)."""
        return y // self.scale, x // self.scale

    def handle_pointer(self, frame: PointerFrame) -> int:
        """Place sand for a held pointer; release ends the stroke. Returns cells placed."""
        if not frame.held:
            if self.prev_cell is not None:
                logger.debug("Stroke ended at %s", self.prev_cell)
            self.prev_cell = None
            return 0
        cell = self.to_cell(frame.x, frame.y)
        placed = draw_stroke(self.grid, self.prev_cell, cell, self.rng, self.palette)
        # Off the right/bottom edge the stroke stays connected; a negative cell ends it.
        self.prev_cell = cell if cell[0] >= 0 and cell[1] >= 0 else None
        return placed

    def tick(self, frame: PointerFrame) -> bool:
        """Run one iteration. Returns False once quit is signaled."""
        if frame.quit:
            logger.info("Quit after %d ticks", self.ticks)
            return False
        if frame.clear:
            logger.info("Canvas cleared (%d particles)", self.grid.occupied_count())
            self.grid.clear_all()
            self.prev_cell = None
        self.handle_pointer(frame)
        step(self.grid)
        self.ticks += 1
        return True

    def cells(self) -> Iterator[tuple[int, int, Color]]:
        return self.grid.snapshot()
