import numpy as np
from wall_maze.core.grid import WallGrid

WALL = 1
PASSAGE = 0


def to_occupancy(grid: WallGrid) -> np.ndarray:
    """
    Rasterises the grid into a (2h+1, 2w+1) uint8 array, 1 = wall.
    Cell (x, y) lands on column 2x+1, row 2(h-1-y)+1 so row 0 is the top border.
    Lattice points stay solid.
    """
    w, h = grid.width, grid.height
    occ = np.full((2 * h + 1, 2 * w + 1), WALL, dtype=np.uint8)

    # Cell interiors
    occ[1:-1:2, 1:-1:2] = PASSAGE

    for y in range(h):
        row = 2 * (h - 1 - y) + 1
        for x in range(w):
            col = 2 * x + 1
            if grid.is_open(grid.east_wall_index(x, y)):
                occ[row, col + 1] = PASSAGE
            if grid.is_open(grid.north_wall_index(x, y)):
                occ[row - 1, col] = PASSAGE
    return occ
