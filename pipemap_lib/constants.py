# --- pipemap_lib/constants.py ---
# Fixed tile alphabet and lookup tables shared by the analysis and rendering packages.

NORTH, EAST, SOUTH, WEST = "N", "E", "S", "W"

# (row, col) offsets, in the order neighbors are reported.
NEIGHBOR_ORDER = (
    (NORTH, (-1, 0)),
    (SOUTH, (1, 0)),
    (WEST, (0, -1)),
    (EAST, (0, 1)),
)

OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

START_GLYPH = "S"
GROUND_GLYPH = "."

CONNECTIONS = {
    "|": frozenset({NORTH, SOUTH}),
    "-": frozenset({EAST, WEST}),
    "L": frozenset({NORTH, EAST}),
    "J": frozenset({NORTH, WEST}),
    "7": frozenset({SOUTH, WEST}),
    "F": frozenset({EAST, SOUTH}),
    GROUND_GLYPH: frozenset(),
    # Placeholder until the start tile's real shape is resolved.
    START_GLYPH: frozenset({NORTH, EAST, SOUTH, WEST}),
}

VALID_GLYPHS = frozenset(CONNECTIONS)

# Unordered direction pair -> the only glyph whose connections equal it.
SHAPE_FOR_DIRECTIONS = {
    directions: glyph
    for glyph, directions in CONNECTIONS.items()
    if len(directions) == 2
}

CORNER_GLYPHS = frozenset({"L", "J", "7", "F"})

# Parity scan over horizontal runs. Key: (open corner side, corner glyph).
# Value: (open corner side afterwards, toggle parity). A run that leaves on the
# same vertical side it entered on does not cross the scan line.
CROSSING_TABLE = {
    (None, "L"): (NORTH, False),
    (None, "J"): (NORTH, False),
    (None, "F"): (SOUTH, False),
    (None, "7"): (SOUTH, False),
    (NORTH, "L"): (None, False),
    (NORTH, "J"): (None, False),
    (NORTH, "F"): (None, True),
    (NORTH, "7"): (None, True),
    (SOUTH, "L"): (None, True),
    (SOUTH, "J"): (None, True),
    (SOUTH, "F"): (None, False),
    (SOUTH, "7"): (None, False),
}

# ASCII debug rendering.
BOX_CHARS = {
    "|": "│",
    "-": "─",
    "L": "└",
    "J": "┘",
    "7": "┐",
    "F": "┌",
}
INSIDE_CHAR = "I"
OUTSIDE_CHAR = "."
