"""World: sand grid, stroke interpolation, tick-driven settling and the frame driver."""

from world.grid import Grid, OutOfBounds, grid_shape
from world.settle import step, settle
from world.stroke import draw_stroke, line_cells
from world.palette import Palette, make_rng, random_color
from world.driver import FrameDriver, PointerFrame

__all__ = [
    "Grid", "OutOfBounds", "grid_shape", "step", "settle", "draw_stroke", "line_cells",
    "Palette", "make_rng", "random_color", "FrameDriver", "PointerFrame",
]
