from wall_maze.core.grid import Cell


class CellIterator:
    """
    Walks the grid row by row, x fastest, starting at the bottom-left cell.
    Single pass: once exhausted it stays exhausted.
    """
    __slots__ = ('current_x', 'current_y', 'max_x', 'max_y')

    def __init__(self, grid):
        self.current_x = 0
        self.current_y = 0
        self.max_x = grid.width - 1
        self.max_y = grid.height - 1

    def __iter__(self):
        return self

    def __next__(self) -> Cell:
        if self.current_y > self.max_y:
            raise StopIteration

        cell = Cell(self.current_x, self.current_y)
        if self.current_x < self.max_x:
            self.current_x += 1
        else:
            # Right-most column, wrap to the next row
            self.current_x = 0
            self.current_y += 1
        return cell
