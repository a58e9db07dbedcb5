# --- pipemap_lib/rendering/ascii_renderer.py ---
from typing import List

from pipemap_lib.analysis.grid import PipeGrid
from pipemap_lib.constants import BOX_CHARS, INSIDE_CHAR, OUTSIDE_CHAR


class ASCIIRenderer:
    """Renders an analyzed pipe map with box-drawing characters for debugging."""

    def __init__(self):
        self.canvas: List[List[str]] = []
        self.width = 0
        self.height = 0

    def render_from_grid(self, grid: PipeGrid):
        self.height, self.width = grid.height, grid.width
        self.canvas = [[OUTSIDE_CHAR for _ in range(self.width)] for _ in range(self.height)]

        for row, col in grid.positions():
            tile = grid.tile((row, col))
            if tile.is_loop:
                self.canvas[row][col] = BOX_CHARS.get(tile.glyph, tile.glyph)
            elif tile.inside:
                self.canvas[row][col] = INSIDE_CHAR

    def get_output(self) -> str:
        if not self.canvas:
            return ""
        RULER_WIDTH = 4
        d_ruler = [" "] * self.width
        u_ruler = [" "] * self.width
        for col in range(self.width):
            s_col = str(col)
            if len(s_col) >= 2:
                d_ruler[col] = s_col[-2]
            u_ruler[col] = s_col[-1]

        ruler_prefix = " " * RULER_WIDTH
        output_lines = [ruler_prefix + "".join(d_ruler), ruler_prefix + "".join(u_ruler)]
        for row, cells in enumerate(self.canvas):
            output_lines.append(f"{row:>3}|" + "".join(cells))
        return "\n".join(output_lines)
