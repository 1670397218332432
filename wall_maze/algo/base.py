from abc import ABC, abstractmethod
from typing import Callable, Iterator, Optional
from wall_maze.core.grid import WallGrid
from wall_maze.algo.randomness import UniformRandom


class Generator(ABC):
    def __init__(self, grid: WallGrid, rand_bool: Optional[Callable[[], bool]] = None,
                 seed: int = None, bias: float = 0.5):
        self.grid = grid
        self.seed = seed
        self.step_count = 0
        # Fall back to a seeded uniform source when nothing is injected
        self.source = UniformRandom(seed, bias=bias)
        self.rand_bool = rand_bool if rand_bool is not None else self.source.rand_bool

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields a status string after each carved cell, then "Done".
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
        return self.grid
