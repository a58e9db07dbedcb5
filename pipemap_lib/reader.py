# --- pipemap_lib/reader.py ---
import logging
from typing import List

from pipemap_lib.errors import InputReadError

log = logging.getLogger("pipemap.main")


def read_rows(input_path: str) -> List[str]:
    """
    Reads a puzzle file into a list of grid rows.

    Line endings and trailing blank lines are dropped; everything else is
    passed through untouched for the grid builder to validate.

    Raises:
        InputReadError: The file is missing, unreadable or not valid UTF-8.
    """
    try:
        with open(input_path, "r", encoding="utf-8") as f:
            rows = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(input_path, e) from e

    while rows and not rows[-1].strip():
        rows.pop()
    log.debug("Read %d rows from '%s'", len(rows), input_path)
    return rows
