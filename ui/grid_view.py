"""Draw occupied cells as scale x scale squares on a background; errors surface as RenderFailure."""

from typing import Iterable

import pygame

from world.constants import BACKGROUND
from world.palette import Color


class RenderFailure(RuntimeError):
    """Drawing or presenting a frame failed. Fatal for the frame loop."""


def draw_cells(
    surface: pygame.Surface,
    cells: Iterable[tuple[int, int, Color]],
    scale: int,
    background: Color = BACKGROUND,
) -> int:
    """Clear to background, then draw each (row, col, color). Returns cells drawn."""
    drawn = 0
    try:
        surface.fill(background)
        for row, col, color in cells:
            pygame.draw.rect(surface, color, (col * scale, row * scale, scale, scale))
            drawn += 1
    except pygame.error as e:
        raise RenderFailure(f"drawing cell {drawn}: {e}") from e
    return drawn


def present() -> None:
    try:
        pygame.display.flip()
    except pygame.error as e:
        raise RenderFailure(f"presenting frame: {e}") from e
