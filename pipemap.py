import argparse
import logging
import sys

from pipemap_lib.analysis.analyzer import LoopAnalyzer
from pipemap_lib.errors import PipeMapError
from pipemap_lib.log_utils import setup_logging
from pipemap_lib.reader import read_rows
from pipemap_lib.rendering import geometry
from pipemap_lib.rendering.ascii_renderer import ASCIIRenderer


def get_cli_args(argv=None):
    """Configures and parses command-line arguments."""
    p = argparse.ArgumentParser(
        description="Finds the loop in a pipe map and counts the tiles it encloses."
    )
    p.add_argument("input", help="Path to the puzzle text file.")
    p.add_argument(
        "--verify",
        action="store_true",
        help="Cross-check the enclosed count against polygon containment.",
    )
    # Logging arguments
    g_log = p.add_argument_group("Logging & Output")
    g_log.add_argument(
        "-v", "--verbose", action="store_true", help="Enable INFO logging."
    )
    g_log.add_argument(
        "--color-logs", action="store_true", help="Enable colored logging."
    )
    g_log.add_argument(
        "--log-file", metavar="FILE", help="Redirect log output to a file."
    )
    g_log.add_argument(
        "--ascii-debug",
        action="store_true",
        help="Render an ASCII map of the analyzed loop for debugging.",
    )
    g_log.add_argument(
        "-d",
        "--debug",
        nargs="?",
        const="all",
        dest="debug_topics",
        metavar="TOPICS",
        help="Enable DEBUG logging (all,grid,trace,marker,interior,geometry,render).",
    )
    return p.parse_args(argv)


def run_verification(report) -> bool:
    """Compares the parity scan with two geometric counts of the same loop."""
    log = logging.getLogger("pipemap.geometry")
    mismatches = geometry.mismatched_cells(report.grid)
    picks = geometry.picks_interior_count(report.grid)
    if picks != report.enclosed_count:
        log.error(
            "Pick's theorem gives %d enclosed tiles, parity scan gave %d.",
            picks,
            report.enclosed_count,
        )
        return False
    if mismatches:
        log.error("Mismatched cells: %s", mismatches)
        return False
    log.info("Verification passed (%d enclosed tiles).", picks)
    return True


def main(argv=None):
    """Main entry point for the pipemap CLI."""
    args = get_cli_args(argv)
    log_level = logging.INFO if args.verbose else logging.WARNING
    if args.debug_topics:
        log_level = logging.DEBUG

    setup_logging(log_level, args.color_logs, args.debug_topics, args.log_file)
    log = logging.getLogger("pipemap.main")

    log.info("--- PIPEMAP CLI Initialized ---")
    log.debug("Arguments received: %s", vars(args))

    try:
        rows = read_rows(args.input)
        report = LoopAnalyzer().analyze(rows)
    except PipeMapError as e:
        log.critical("%s: %s", type(e).__name__, e)
        return 1

    if args.ascii_debug:
        log.info("--- ASCII Debug Output ---")
        renderer = ASCIIRenderer()
        renderer.render_from_grid(report.grid)
        logging.getLogger("pipemap.render").info(
            "\n%s", renderer.get_output(), extra={"raw": True}
        )
        log.info("--- End ASCII Debug Output ---")

    print(f"Part 1: {report.farthest_distance}")
    print(f"Part 2: {report.enclosed_count}")

    if args.verify and not run_verification(report):
        return 1
    log.info("--- Processing complete. ---")
    return 0


if __name__ == "__main__":
    sys.exit(main())
