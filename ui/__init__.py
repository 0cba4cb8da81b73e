"""UI: pointer input and grid view."""

from ui.grid_view import RenderFailure, draw_cells, present
from ui.input import PointerInput

__all__ = ["RenderFailure", "draw_cells", "present", "PointerInput"]
