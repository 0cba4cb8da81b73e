"""
Per-tick settling: each particle falls down, else down-left, else down-right, else rests.
Scan is row-major (top to bottom, left to right) and mutates the grid in place; a cell
filled during this tick is not evaluated again until the next tick, so sand falls at
most one row per tick. Off-grid destinations are blocked, so sand rests on the floor
and against the side walls.
"""

import numpy as np

from world.constants import FALL_OFFSETS
from world.grid import Grid


def _destination(grid: Grid, row: int, col: int) -> tuple[int, int] | None:
    """First free cell among the fall offsets, or None to rest."""
    for dr, dc in FALL_OFFSETS:
        r, c = row + dr, col + dc
        if grid.in_bounds(r, c) and not grid.is_occupied(r, c):
            return r, c
    return None


def step(grid: Grid) -> int:
    """One tick. Returns number of particles that moved."""
    arrived = np.zeros(grid.shape, dtype=bool)
    moved = 0
    rows, cols = grid.shape
    for row in range(rows):
        # Only occupied cells in this row; arrivals from the row above are skipped.
        for col in np.flatnonzero(grid.occupied[row]):
            col = int(col)
            if arrived[row, col]:
                continue
            dst = _destination(grid, row, col)
            if dst is None:
                continue
            grid.move((row, col), dst)
            arrived[dst] = True
            moved += 1
    return moved


def settle(grid: Grid, max_ticks: int = 10_000) -> int:
    """Step until nothing moves or max_ticks is reached. Returns ticks run."""
    for tick in range(1, max_ticks + 1):
        if step(grid) == 0:
            return tick
    return max_ticks
