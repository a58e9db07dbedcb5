# --- pipemap_lib/analysis/marker.py ---
import logging
from typing import List

from pipemap_lib.constants import EAST, NORTH, SHAPE_FOR_DIRECTIONS, SOUTH, WEST
from pipemap_lib.errors import AmbiguousStart
from .context import Position, TraceResult
from .grid import PipeGrid

log = logging.getLogger("pipemap.marker")


def _direction_from(origin: Position, other: Position) -> str:
    """Compass direction of an adjacent `other` as seen from `origin`."""
    if other[0] < origin[0]:
        return NORTH
    if other[0] > origin[0]:
        return SOUTH
    if other[1] > origin[1]:
        return EAST
    if other[1] < origin[1]:
        return WEST
    raise ValueError(f"{other} is not adjacent to {origin}")


class LoopMarker:
    """Flags loop tiles from the traced parent chains and resolves the start shape."""

    def _parent_chain(self, grid: PipeGrid, position: Position) -> List[Position]:
        """Positions from `position` back to the start, both included."""
        chain = [position]
        parent = grid.tile(position).parent
        while parent is not None:
            chain.append(parent)
            parent = grid.tile(parent).parent
        return chain

    def mark_and_resolve(self, grid: PipeGrid, trace: TraceResult) -> PipeGrid:
        log.info("Marking loop tiles from meeting pair %s...", trace.meeting_pair)
        first, second = trace.meeting_pair
        first_chain = self._parent_chain(grid, first)
        second_chain = self._parent_chain(grid, second)

        for position in first_chain + second_chain:
            grid.tile(position).is_loop = True
        grid.tile(grid.start).is_loop = True

        # start -> first ... second -> back towards start
        grid.loop_path = list(reversed(first_chain)) + second_chain[:-1]
        log.debug("Loop closed with %d tiles.", len(grid.loop_path))

        self.resolve_start(grid)
        return grid

    def resolve_start(self, grid: PipeGrid) -> str:
        """Rewrites the start glyph to the shape joining its two loop neighbors."""
        start = grid.start
        loop_neighbors = [
            p for p in grid.neighbors(start, include_visited=True) if grid.tile(p).is_loop
        ]
        if len(loop_neighbors) != 2:
            raise AmbiguousStart(start, loop_neighbors)

        directions = frozenset(_direction_from(start, p) for p in loop_neighbors)
        glyph = SHAPE_FOR_DIRECTIONS[directions]
        grid.tile(start).glyph = glyph
        log.info("Resolved start tile %s as '%s'.", start, glyph)
        return glyph
