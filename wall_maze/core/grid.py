from array import array
from enum import IntEnum
from typing import NamedTuple, Optional

#   +---+---+---+
#   | 02| 12| 22|      cells labelled xy, y grows upward
#   +---+---+---+
#   | 01| 11| 21|      horizontal walls      vertical walls
#   +---+---+---+        3  4  5               8  11
#   | 00| 10| 20|        0  1  2               7  10
#   +---+---+---+                              6   9


class MazeError(Exception):
    pass


class InvalidDimension(MazeError, ValueError):
    pass


class EdgeWall(MazeError, IndexError):
    """Raised when opening a wall that lies on the outer boundary."""


class Wall(IntEnum):
    OPEN = 0
    CLOSED = 1


class Cell(NamedTuple):
    x: int
    y: int


class MovementOptions(NamedTuple):
    """Neighbours reachable from a cell. None means a closed wall or the grid edge."""
    north: Optional[Cell] = None
    east: Optional[Cell] = None
    south: Optional[Cell] = None
    west: Optional[Cell] = None

    def reachable(self):
        return [c for c in self if c is not None]


class WallGrid:
    __slots__ = ('width', 'height', 'horizontal_count', 'walls')

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise InvalidDimension(f"Grid dimensions must be >= 1, got {width}x{height}")
        self.width = width
        self.height = height
        # Horizontal (north/south) walls come first, vertical (east/west) after
        self.horizontal_count = (height - 1) * width
        vertical_count = (width - 1) * height
        # 1 byte per wall, all closed
        self.walls = array('B', [Wall.CLOSED] * (self.horizontal_count + vertical_count))

    def __len__(self):
        return len(self.walls)

    def __repr__(self):
        return f"WallGrid({self.width}, {self.height})"

    def north_wall_index(self, x: int, y: int) -> Optional[int]:
        assert 0 <= x < self.width and 0 <= y < self.height, f"({x}, {y}) out of bounds"
        if y >= self.height - 1:
            return None
        return x + y * self.width

    def east_wall_index(self, x: int, y: int) -> Optional[int]:
        assert 0 <= x < self.width and 0 <= y < self.height, f"({x}, {y}) out of bounds"
        if x >= self.width - 1:
            return None
        return self.horizontal_count + y + x * self.height

    def south_wall_index(self, x: int, y: int) -> Optional[int]:
        if y == 0:
            return None
        return self.north_wall_index(x, y - 1)

    def west_wall_index(self, x: int, y: int) -> Optional[int]:
        if x == 0:
            return None
        return self.east_wall_index(x - 1, y)

    def wall(self, index: int) -> Wall:
        return Wall(self.walls[index])

    def is_open(self, index: Optional[int]) -> bool:
        """False for None, so boundary lookups read as closed."""
        return index is not None and self.walls[index] == Wall.OPEN

    def open_north(self, cell: Cell):
        """
        Opens the wall between `cell` and the cell above it.
        Raises EdgeWall for cells in the top row.
        """
        index = self.north_wall_index(cell[0], cell[1])
        if index is None:
            raise EdgeWall(f"No north wall to open at {tuple(cell)}")
        self.walls[index] = Wall.OPEN

    def open_east(self, cell: Cell):
        """
        Opens the wall between `cell` and the cell to its right.
        Raises EdgeWall for cells in the right-most column.
        """
        index = self.east_wall_index(cell[0], cell[1])
        if index is None:
            raise EdgeWall(f"No east wall to open at {tuple(cell)}")
        self.walls[index] = Wall.OPEN

    # South and west opens go through the neighbour's north/east wall.

    def open_count(self) -> int:
        return self.walls.count(Wall.OPEN)

    def cells(self):
        from wall_maze.core.iterator import CellIterator
        return CellIterator(self)

    def movement_options(self, cell: Cell) -> MovementOptions:
        x, y = cell
        return MovementOptions(
            north=Cell(x, y + 1) if self.is_open(self.north_wall_index(x, y)) else None,
            east=Cell(x + 1, y) if self.is_open(self.east_wall_index(x, y)) else None,
            south=Cell(x, y - 1) if self.is_open(self.south_wall_index(x, y)) else None,
            west=Cell(x - 1, y) if self.is_open(self.west_wall_index(x, y)) else None,
        )
