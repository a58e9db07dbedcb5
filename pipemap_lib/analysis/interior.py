# --- pipemap_lib/analysis/interior.py ---
import logging

from pipemap_lib.constants import CORNER_GLYPHS, CROSSING_TABLE, START_GLYPH
from .grid import PipeGrid

log = logging.getLogger("pipemap.interior")


class InteriorCounter:
    """Counts the non-loop tiles enclosed by the marked loop, one ray per row."""

    def count_row(self, grid: PipeGrid, row: int) -> int:
        inside = False
        open_side = None
        enclosed = 0

        for tile in grid.tiles[row]:
            if tile.is_loop:
                if tile.glyph == "|":
                    inside = not inside
                elif tile.glyph in CORNER_GLYPHS:
                    open_side, crossed = CROSSING_TABLE[(open_side, tile.glyph)]
                    if crossed:
                        inside = not inside
                # '-' continues the open run unchanged
            elif inside:
                enclosed += 1
            tile.inside = inside
        return enclosed

    def count(self, grid: PipeGrid) -> int:
        log.info("Counting enclosed tiles over %d rows...", grid.height)
        if grid.tile(grid.start).glyph == START_GLYPH:
            raise ValueError("Start tile must be resolved before counting enclosed tiles")

        total = 0
        for row in range(grid.height):
            enclosed = self.count_row(grid, row)
            if enclosed:
                log.debug("Row %d: %d enclosed", row, enclosed)
            total += enclosed

        log.info("Enclosed tiles: %d", total)
        return total
