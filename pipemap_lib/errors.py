# --- pipemap_lib/errors.py ---
from typing import Optional, Tuple


class PipeMapError(Exception):
    """Base class for every failure raised while analyzing a pipe map."""


class InputReadError(PipeMapError):
    """The puzzle file could not be read."""

    def __init__(self, path, reason):
        super().__init__(f"Could not read '{path}': {reason}")
        self.path = path
        self.reason = reason


class GridShapeError(PipeMapError):
    """The rows do not form a non-empty rectangle."""


class InvalidTile(PipeMapError):
    def __init__(self, glyph: str, position: Tuple[int, int]):
        super().__init__(f"Invalid tile {glyph!r} at row {position[0]}, col {position[1]}")
        self.glyph = glyph
        self.position = position


class StartCountError(PipeMapError):
    def __init__(self, count: int):
        super().__init__(f"Expected exactly one start tile 'S', found {count}")
        self.count = count


class NoLoopFound(PipeMapError):
    """The tiles reachable from the start do not close into a loop."""

    def __init__(self, start: Optional[Tuple[int, int]] = None):
        super().__init__(f"No closed loop reachable from start {start}")
        self.start = start


class AmbiguousStart(PipeMapError):
    def __init__(self, start: Tuple[int, int], loop_neighbors):
        super().__init__(
            f"Start {start} has {len(loop_neighbors)} loop neighbors, expected 2: "
            f"{list(loop_neighbors)}"
        )
        self.start = start
        self.loop_neighbors = list(loop_neighbors)
