# --- pipemap_lib/analysis/tracer.py ---
import logging
from collections import deque

from pipemap_lib.errors import NoLoopFound
from .context import TraceResult
from .grid import PipeGrid

log = logging.getLogger("pipemap.trace")


class LoopTracer:
    """Breadth-first search from the start tile until both loop branches meet."""

    def find_farthest(self, grid: PipeGrid) -> TraceResult:
        """
        Walks the loop in both directions at once. The first tile reached from
        both sides is the point farthest from the start; its distance is half
        the loop length.

        Sets `distance`, `parent` and `visited` on the tiles it reaches.
        """
        log.info("Tracing loop from start %s...", grid.start)
        start_tile = grid.tile(grid.start)
        start_tile.distance = 0
        queue = deque([grid.start])
        processed = 0

        while queue:
            current = queue.popleft()
            tile = grid.tile(current)
            tile.visited = True
            processed += 1

            for neighbor_pos in grid.neighbors(current, include_visited=False):
                neighbor = grid.tile(neighbor_pos)
                if neighbor.distance is not None:
                    log.debug(
                        "Branches met between %s and %s after %d tiles.",
                        current,
                        neighbor_pos,
                        processed,
                    )
                    log.info("Farthest loop distance: %d", neighbor.distance)
                    return TraceResult(
                        farthest_distance=neighbor.distance,
                        meeting_pair=(current, neighbor_pos),
                    )

                neighbor.distance = tile.distance + 1
                neighbor.parent = current
                queue.append(neighbor_pos)

        log.warning("Search exhausted after %d tiles without closing a loop.", processed)
        raise NoLoopFound(grid.start)
