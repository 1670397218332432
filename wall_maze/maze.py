import logging
from typing import Callable
from wall_maze.core.grid import WallGrid
from wall_maze.algo.binary_tree import BinaryTree
from wall_maze.algo.sidewinder import Sidewinder
from wall_maze.viz.text import render_text

logger = logging.getLogger(__name__)


class Maze:
    """A carved WallGrid plus the ways to build and print one."""

    def __init__(self, grid: WallGrid):
        self.grid = grid

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @classmethod
    def binary_tree(cls, width: int, height: int, seed: int = None, bias: float = 0.5) -> "Maze":
        grid = WallGrid(width, height)
        BinaryTree(grid, seed=seed, bias=bias).run_all()
        logger.info(f"Binary tree maze {width}x{height} generated (seed={seed})")
        return cls(grid)

    @classmethod
    def binary_tree_with_rand_fn(cls, width: int, height: int, rand_bool: Callable[[], bool]) -> "Maze":
        grid = WallGrid(width, height)
        BinaryTree(grid, rand_bool=rand_bool).run_all()
        return cls(grid)

    @classmethod
    def sidewinder(cls, width: int, height: int, seed: int = None) -> "Maze":
        grid = WallGrid(width, height)
        Sidewinder(grid, seed=seed).run_all()
        logger.info(f"Sidewinder maze {width}x{height} generated (seed={seed})")
        return cls(grid)

    @classmethod
    def sidewinder_with_rand_fn(cls, width: int, height: int, rand_bool: Callable[[], bool],
                                rand_usize: Callable[[], int]) -> "Maze":
        grid = WallGrid(width, height)
        Sidewinder(grid, rand_bool=rand_bool, rand_usize=rand_usize).run_all()
        return cls(grid)

    def render(self) -> str:
        return render_text(self.grid)

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"Maze({self.width}x{self.height}, open={self.grid.open_count()})"
