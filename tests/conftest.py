import pytest

SQUARE_LOOP = [
    ".....",
    ".S-7.",
    ".|.|.",
    ".L-J.",
    ".....",
]

WINDING_LOOP = [
    "..F7.",
    ".FJ|.",
    "SJ.L7",
    "|F--J",
    "LJ...",
]

DOUBLE_WALLED_LOOP = [
    "...........",
    ".S-------7.",
    ".|F-----7|.",
    ".||.....||.",
    ".||.....||.",
    ".|L-7.F-J|.",
    ".|..|.|..|.",
    ".L--J.L--J.",
    "...........",
]

SQUEEZED_LOOP = [
    ".F----7F7F7F7F-7....",
    ".|F--7||||||||FJ....",
    ".||.FJ||||||||L7....",
    "FJL7L7LJLJ||LJ.L-7..",
    "L--J.L7...LJS7F-7L7.",
    "....F-J..F7FJ|L7L7L7",
    "....L7.F7||L7|.L7L7|",
    ".....|FJLJ|FJ|F7|.LJ",
    "....FJL-7.||.||||...",
    "....L---J.LJ.LJLJ...",
]

JUNK_PIPE_LOOP = [
    "FF7FSF7F7F7F7F7F---7",
    "L|LJ||||||||||||F--J",
    "FL-7LJLJ||||||LJL-77",
    "F--JF--7||LJLJ7F7FJ-",
    "L---JF-JLJ.||-FJLJJ7",
    "|F|F-JF---7F7-L7L|7|",
    "|FFJF7L7F-JF7|JL---7",
    "7-L-JL7||F7|L7F-7F7|",
    "L.L7LFJ|||||FJL7||LJ",
    "L7JLJL-JLJLJL--JLJ.L",
]

# (rows, farthest distance or None, enclosed count or None)
SCENARIOS = {
    "square": (SQUARE_LOOP, 4, 1),
    "winding": (WINDING_LOOP, 8, 1),
    "double_walled": (DOUBLE_WALLED_LOOP, 23, 4),
    "squeezed": (SQUEEZED_LOOP, None, 8),
    "junk_pipes": (JUNK_PIPE_LOOP, None, 10),
}


def rectangle_loop(height, width, start=(0, 0)):
    """A bordered rectangular loop filling a height x width grid."""
    rows = []
    for r in range(height):
        line = []
        for c in range(width):
            top, bottom = r == 0, r == height - 1
            left, right = c == 0, c == width - 1
            if top and left:
                glyph = "F"
            elif top and right:
                glyph = "7"
            elif bottom and left:
                glyph = "L"
            elif bottom and right:
                glyph = "J"
            elif top or bottom:
                glyph = "-"
            elif left or right:
                glyph = "|"
            else:
                glyph = "."
            line.append(glyph)
        rows.append(line)
    rows[start[0]][start[1]] = "S"
    return ["".join(line) for line in rows]


@pytest.fixture(params=sorted(SCENARIOS))
def scenario(request):
    rows, farthest, enclosed = SCENARIOS[request.param]
    return request.param, rows, farthest, enclosed


@pytest.fixture
def puzzle_file(tmp_path):
    path = tmp_path / "pipes.txt"
    path.write_text("\n".join(DOUBLE_WALLED_LOOP) + "\n\n", encoding="utf-8")
    return path
