"""
Stroke interpolation: fill every cell between two pointer samples so a fast drag
leaves a continuous line instead of isolated dots (integer Bresenham line).
"""

import logging
import random
from typing import Iterator

from world.grid import Grid, OutOfBounds
from world.palette import Palette, random_color

logger = logging.getLogger("sand.stroke")

Cell = tuple[int, int]


def line_cells(start: Cell, end: Cell) -> Iterator[Cell]:
    """Yield (row, col) along the line from start to end, both inclusive."""
    r, c = start
    r2, c2 = end
    dr, dc = abs(r2 - r), abs(c2 - c)
    sr = 1 if r < r2 else -1
    sc = 1 if c < c2 else -1
    err = dc - dr
    while True:
        yield r, c
        if (r, c) == (r2, c2):
            return
        e2 = 2 * err
        if e2 > -dr:
            err -= dr
            c += sc
        if e2 < dc:
            err += dc
            r += sr


def place_new(grid: Grid, cell: Cell, rng: random.Random, palette: Palette) -> bool:
    """Direct placement with a fresh color. Off-grid is logged and skipped; returns True if placed."""
    try:
        grid.place(cell[0], cell[1], random_color(rng, palette))
    except OutOfBounds as e:
        logger.info("Pointer out of bounds: %s", e)
        return False
    return True


def draw_stroke(
    grid: Grid,
    prev: Cell | None,
    cell: Cell,
    rng: random.Random,
    palette: Palette = Palette(),
) -> int:
    """
    Mark cells from prev to cell as sand; returns how many were newly placed.
    No prev = single direct placement (overwrites). Along a line, existing sand keeps its color.
    """
    if prev is None:
        return int(place_new(grid, cell, rng, palette))
    placed = 0
    for r, c in line_cells(prev, cell):
        if not grid.in_bounds(r, c):
            logger.debug("Stroke cell (%d, %d) off grid, skipped", r, c)
            continue
        if grid.is_occupied(r, c):
            continue
        grid.place(r, c, random_color(rng, palette))
        placed += 1
    return placed
