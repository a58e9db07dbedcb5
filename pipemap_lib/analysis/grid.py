# --- pipemap_lib/analysis/grid.py ---
import logging
from typing import Iterable, Iterator, List, Sequence

from pipemap_lib.constants import NEIGHBOR_ORDER, OPPOSITE, START_GLYPH, VALID_GLYPHS
from pipemap_lib.errors import GridShapeError, InvalidTile, StartCountError
from .context import _TileData, Position

log = logging.getLogger("pipemap.grid")


class PipeGrid:
    """Row-major grid of connector tiles with the position of the start tile."""

    def __init__(self, tiles: List[List[_TileData]], start: Position):
        self.tiles = tiles
        self.start = start
        # Ordered cycle starting at the start tile, filled in by the loop marker.
        self.loop_path: List[Position] = []

    @property
    def height(self) -> int:
        return len(self.tiles)

    @property
    def width(self) -> int:
        return len(self.tiles[0]) if self.tiles else 0

    def tile(self, position: Position) -> _TileData:
        row, col = position
        return self.tiles[row][col]

    def in_bounds(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.height and 0 <= col < self.width

    def positions(self) -> Iterator[Position]:
        for row in range(self.height):
            for col in range(self.width):
                yield (row, col)

    def loop_positions(self) -> List[Position]:
        return [p for p in self.positions() if self.tile(p).is_loop]

    def neighbors(self, position: Position, include_visited: bool) -> List[Position]:
        """
        Returns the adjacent positions joined to `position` by a matched connection,
        in North, South, West, East order. Both tiles must point at each other.
        """
        row, col = position
        current = self.tile(position)
        found = []
        for direction, (d_row, d_col) in NEIGHBOR_ORDER:
            other = (row + d_row, col + d_col)
            if not self.in_bounds(other) or not current.connects(direction):
                continue
            neighbor = self.tile(other)
            if not neighbor.connects(OPPOSITE[direction]):
                continue
            if neighbor.visited and not include_visited:
                continue
            found.append(other)
        return found

    def rows(self) -> List[str]:
        return ["".join(t.glyph for t in row) for row in self.tiles]


def build_grid(rows: Iterable[Sequence[str]]) -> PipeGrid:
    """Parses glyph rows into a PipeGrid, validating the alphabet and the start tile."""
    tiles: List[List[_TileData]] = []
    starts: List[Position] = []

    for r, line in enumerate(rows):
        row_tiles = []
        for c, glyph in enumerate(line):
            if glyph not in VALID_GLYPHS:
                raise InvalidTile(glyph, (r, c))
            if glyph == START_GLYPH:
                starts.append((r, c))
            row_tiles.append(_TileData(glyph=glyph))
        tiles.append(row_tiles)

    if not tiles or not tiles[0]:
        raise GridShapeError("Grid is empty")
    width = len(tiles[0])
    for r, row_tiles in enumerate(tiles):
        if len(row_tiles) != width:
            raise GridShapeError(
                f"Row {r} has {len(row_tiles)} tiles, expected {width} (grid must be rectangular)"
            )

    if len(starts) != 1:
        raise StartCountError(len(starts))

    log.debug("Built %dx%d grid, start at %s", width, len(tiles), starts[0])
    return PipeGrid(tiles, starts[0])
