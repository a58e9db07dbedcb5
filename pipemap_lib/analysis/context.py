# --- pipemap_lib/analysis/context.py ---
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, FrozenSet, TYPE_CHECKING

from pipemap_lib.constants import CONNECTIONS

if TYPE_CHECKING:
    from .grid import PipeGrid

Position = Tuple[int, int]


# The mutable per-cell state shared by every pipeline stage.
@dataclass
class _TileData:
    glyph: str  # one of '. | - L J 7 F S'
    is_loop: bool = False
    visited: bool = False
    distance: Optional[int] = None
    parent: Optional[Position] = None  # (row, col) lookup, never an owning reference
    inside: bool = False  # parity in effect at this tile during the interior scan

    @property
    def connections(self) -> FrozenSet[str]:
        return CONNECTIONS[self.glyph]

    def connects(self, direction: str) -> bool:
        return direction in CONNECTIONS[self.glyph]


@dataclass
class TraceResult:
    """Where the two branches of the breadth-first search met."""

    farthest_distance: int
    meeting_pair: Tuple[Position, Position]


@dataclass
class LoopReport:
    """Final output of one pipeline run."""

    farthest_distance: int
    enclosed_count: int
    start: Position
    start_glyph: str
    loop_length: int
    grid: "PipeGrid" = field(repr=False)

    @property
    def answers(self) -> List[int]:
        return [self.farthest_distance, self.enclosed_count]
