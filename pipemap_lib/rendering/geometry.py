# --- pipemap_lib/rendering/geometry.py ---
import logging
from typing import List

import numpy as np
from shapely.geometry import Point, Polygon

from pipemap_lib.analysis.context import Position
from pipemap_lib.analysis.grid import PipeGrid

log = logging.getLogger("pipemap.geometry")


def _cell_center(position: Position) -> tuple:
    row, col = position
    return (col + 0.5, row + 0.5)


def loop_polygon(grid: PipeGrid) -> Polygon:
    """Builds the polygon through the centers of the loop tiles, in loop order."""
    if len(grid.loop_path) < 4:
        raise ValueError("Grid has no marked loop; run the loop marker first")
    return Polygon([_cell_center(p) for p in grid.loop_path])


def loop_mask(grid: PipeGrid) -> np.ndarray:
    mask = np.zeros((grid.height, grid.width), dtype=bool)
    for row, col in grid.loop_path:
        mask[row, col] = True
    return mask


def enclosed_mask(grid: PipeGrid) -> np.ndarray:
    """Marks every non-loop cell whose center lies inside the loop polygon."""
    poly = loop_polygon(grid)
    on_loop = loop_mask(grid)
    mask = np.zeros((grid.height, grid.width), dtype=bool)

    min_x, min_y, max_x, max_y = [int(b) for b in poly.bounds]
    for row in range(min_y, max_y + 1):
        for col in range(min_x, max_x + 1):
            if on_loop[row, col]:
                continue
            if poly.contains(Point(_cell_center((row, col)))):
                mask[row, col] = True

    log.debug("Polygon containment found %d enclosed cells.", int(mask.sum()))
    return mask


def parity_mask(grid: PipeGrid) -> np.ndarray:
    """Enclosed cells as decided by the interior counter's parity scan."""
    mask = np.zeros((grid.height, grid.width), dtype=bool)
    for row, col in grid.positions():
        tile = grid.tile((row, col))
        mask[row, col] = tile.inside and not tile.is_loop
    return mask


def picks_interior_count(grid: PipeGrid) -> int:
    """Interior lattice points of the loop polygon: A = I + B/2 - 1."""
    poly = loop_polygon(grid)
    boundary = len(grid.loop_path)
    return int(round(poly.area - boundary / 2 + 1))


def mismatched_cells(grid: PipeGrid) -> List[Position]:
    """Cells where the parity scan and polygon containment disagree."""
    diff = enclosed_mask(grid) != parity_mask(grid)
    cells = [(int(r), int(c)) for r, c in np.argwhere(diff)]
    if cells:
        log.warning("Parity scan disagrees with polygon containment at %d cells.", len(cells))
    else:
        log.info("Parity scan agrees with polygon containment.")
    return cells
