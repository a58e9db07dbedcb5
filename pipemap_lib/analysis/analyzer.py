# --- pipemap_lib/analysis/analyzer.py ---
import logging
from typing import Iterable, Sequence

from .context import LoopReport
from .grid import PipeGrid, build_grid
from .interior import InteriorCounter
from .marker import LoopMarker
from .tracer import LoopTracer

log = logging.getLogger("pipemap.main")


class LoopAnalyzer:
    """Orchestrates the loop analysis pipeline for a single pipe map."""

    def __init__(self):
        self.tracer = LoopTracer()
        self.marker = LoopMarker()
        self.counter = InteriorCounter()

    def analyze_grid(self, grid: PipeGrid) -> LoopReport:
        """
        Runs the trace, mark and count stages. The grid is handed from one stage
        to the next and comes back annotated inside the report.
        """
        log.info("⚙️  Stage 1: Loop Tracing...")
        trace = self.tracer.find_farthest(grid)

        log.info("⚙️  Stage 2: Loop Marking...")
        grid = self.marker.mark_and_resolve(grid, trace)

        log.info("⚙️  Stage 3: Interior Counting...")
        enclosed = self.counter.count(grid)

        return LoopReport(
            farthest_distance=trace.farthest_distance,
            enclosed_count=enclosed,
            start=grid.start,
            start_glyph=grid.tile(grid.start).glyph,
            loop_length=len(grid.loop_path),
            grid=grid,
        )

    def analyze(self, rows: Iterable[Sequence[str]]) -> LoopReport:
        """Builds a grid from glyph rows and runs the full pipeline on it."""
        grid = build_grid(rows)
        log.info("Analyzing %dx%d pipe map.", grid.width, grid.height)
        report = self.analyze_grid(grid)
        log.info(
            "Analysis complete: farthest=%d, enclosed=%d, loop length=%d.",
            report.farthest_distance,
            report.enclosed_count,
            report.loop_length,
        )
        return report
