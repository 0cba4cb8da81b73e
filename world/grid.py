"""2D grid of sand cells. Shape (rows, cols); each cell is empty or occupied with an RGB color."""

from typing import Iterator

import numpy as np

from world.palette import Color


class OutOfBounds(IndexError):
    """Placement target outside the grid. Recoverable: callers skip the cell."""

    def __init__(self, row: int, col: int, shape: tuple[int, int]) -> None:
        super().__init__(f"cell ({row}, {col}) outside grid {shape[0]}x{shape[1]}")
        self.row = row
        self.col = col
        self.shape = shape


def grid_shape(width: int, height: int, scale: int) -> tuple[int, int]:
    """(rows, cols) for a world of width x height pixels at scale pixels per cell."""
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")
    rows, cols = height // scale, width // scale
    if rows <= 0 or cols <= 0:
        raise ValueError(f"world {width}x{height} is smaller than one {scale}px cell")
    return rows, cols


class Grid:
    """Occupancy mask plus per-cell color; color travels with a particle when it moves."""

    __slots__ = ("shape", "occupied", "colors")

    def __init__(self, rows: int, cols: int) -> None:
        self.shape = (rows, cols)
        self.occupied = np.zeros(self.shape, dtype=bool)
        self.colors = np.zeros((rows, cols, 3), dtype=np.uint8)

    @classmethod
    def from_world(cls, width: int, height: int, scale: int) -> "Grid":
        return cls(*grid_shape(width, height, scale))

    @property
    def rows(self) -> int:
        return self.shape[0]

    @property
    def cols(self) -> int:
        return self.shape[1]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.shape[0] and 0 <= col < self.shape[1]

    def place(self, row: int, col: int, color: Color) -> None:
        """Occupy (row, col) with color, overwriting whatever is there. Raises OutOfBounds."""
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.shape)
        self.occupied[row, col] = True
        self.colors[row, col] = color

    def is_occupied(self, row: int, col: int) -> bool:
        """False for empty cells and for anything off the grid."""
        if not self.in_bounds(row, col):
            return False
        return bool(self.occupied[row, col])

    def color_at(self, row: int, col: int) -> Color | None:
        if not self.is_occupied(row, col):
            return None
        r, g, b = self.colors[row, col]
        return int(r), int(g), int(b)

    def clear(self, row: int, col: int) -> None:
        """Empty (row, col). Off-grid is a no-op."""
        if self.in_bounds(row, col):
            self.occupied[row, col] = False
            self.colors[row, col] = 0

    def move(self, src: tuple[int, int], dst: tuple[int, int]) -> None:
        """Vacate src, then place its color at dst. dst must be on the grid and empty."""
        color = self.color_at(*src)
        if color is None:
            return
        if not self.in_bounds(*dst):
            raise OutOfBounds(dst[0], dst[1], self.shape)
        if self.occupied[dst]:
            raise ValueError(f"cell {dst} already occupied")
        self.clear(*src)
        self.place(dst[0], dst[1], color)

    def snapshot(self) -> Iterator[tuple[int, int, Color]]:
        """(row, col, color) for every occupied cell, row-major."""
        for row, col in np.argwhere(self.occupied):
            r, g, b = self.colors[row, col]
            yield int(row), int(col), (int(r), int(g), int(b))

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.occupied))

    def clear_all(self) -> None:
        self.occupied.fill(False)
        self.colors.fill(0)

    def copy(self) -> "Grid":
        out = Grid(*self.shape)
        out.occupied[:] = self.occupied
        out.colors[:] = self.colors
        return out
