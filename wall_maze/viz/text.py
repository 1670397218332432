from wall_maze.core.grid import Wall, WallGrid

O, C = Wall.OPEN, Wall.CLOSED

LINE_ENDING = "\n"
HORIZONTAL_SEGMENT = "───"
VERTICAL_SEGMENT = "│"
NOWALL_SEGMENT = "   "

# Interior lattice points, keyed by the walls touching the point:
# (up, right, down, left). Every closed wall draws one arm.
CORNER_GLYPHS = {
    (O, O, O, O): " ",
    (O, O, O, C): "╴",
    (O, O, C, O): "╷",
    (O, O, C, C): "┐",
    (O, C, O, O): "╶",
    (O, C, O, C): "─",
    (O, C, C, O): "┌",
    (O, C, C, C): "┬",
    (C, O, O, O): "╵",
    (C, O, O, C): "┘",
    (C, O, C, O): "│",
    (C, O, C, C): "┤",
    (C, C, O, O): "└",
    (C, C, O, C): "┴",
    (C, C, C, O): "├",
    (C, C, C, C): "┼",
}


def _state(grid: WallGrid, index) -> Wall:
    # Boundary walls are always closed
    return C if index is None else grid.wall(index)


def corner_glyph(grid: WallGrid, x: int, y: int) -> str:
    """
    Glyph for lattice point (x, y), the bottom-left corner of cell (x, y).
    Valid for 0 <= x <= width and 0 <= y <= height.
    """
    w, h = grid.width, grid.height
    if not (0 <= x <= w and 0 <= y <= h):
        raise IndexError(f"Lattice point ({x}, {y}) out of bounds")

    # Grid corners
    if (x, y) == (0, 0):
        return "└"
    if (x, y) == (0, h):
        return "┌"
    if (x, y) == (w, 0):
        return "┘"
    if (x, y) == (w, h):
        return "┐"

    # Grid edges only have one internal wall touching them
    if x == 0:
        return "│" if grid.is_open(grid.south_wall_index(0, y)) else "├"
    if x == w:
        return "│" if grid.is_open(grid.south_wall_index(w - 1, y)) else "┤"
    if y == 0:
        return "─" if grid.is_open(grid.east_wall_index(x - 1, 0)) else "┴"
    if y == h:
        return "─" if grid.is_open(grid.east_wall_index(x - 1, h - 1)) else "┬"

    key = (
        _state(grid, grid.east_wall_index(x - 1, y)),
        _state(grid, grid.north_wall_index(x, y - 1)),
        _state(grid, grid.east_wall_index(x - 1, y - 1)),
        _state(grid, grid.north_wall_index(x - 1, y - 1)),
    )
    return CORNER_GLYPHS[key]


def render_lines(grid: WallGrid):
    """Yields the diagram line by line, top border first."""
    top = ["┌"]
    for x in range(1, grid.width + 1):
        top.append(HORIZONTAL_SEGMENT)
        top.append(corner_glyph(grid, x, grid.height))
    yield "".join(top)

    # Grid y grows upward, text grows downward
    for y in range(grid.height - 1, -1, -1):
        row = [VERTICAL_SEGMENT]
        for x in range(grid.width):
            row.append(NOWALL_SEGMENT)
            row.append(" " if grid.is_open(grid.east_wall_index(x, y)) else VERTICAL_SEGMENT)
        yield "".join(row)

        row = [corner_glyph(grid, 0, y)]
        for x in range(grid.width):
            row.append(NOWALL_SEGMENT if grid.is_open(grid.south_wall_index(x, y)) else HORIZONTAL_SEGMENT)
            row.append(corner_glyph(grid, x + 1, y))
        yield "".join(row)


def render_text(grid: WallGrid) -> str:
    return LINE_ENDING.join(render_lines(grid))
