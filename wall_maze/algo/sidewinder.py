import logging
from typing import Callable, Iterator, List, Optional
from wall_maze.core.grid import Cell, EdgeWall, WallGrid
from wall_maze.algo.base import Generator

logger = logging.getLogger(__name__)


class Sidewinder(Generator):
    """
    Extends a run of cells eastward until the coin says to close it, then opens
    north from one random member of the run.

    When a closing run sits in the top row the selected cell opens east
    instead. That keeps the traditional bias but can leave the top row split
    into several corridors, so the result is always acyclic yet not always
    connected.
    """

    def __init__(self, grid: WallGrid, rand_bool: Optional[Callable[[], bool]] = None,
                 rand_usize: Optional[Callable[[], int]] = None, seed: int = None):
        super().__init__(grid, rand_bool=rand_bool, seed=seed)
        self.rand_usize = rand_usize if rand_usize is not None else self.source.rand_usize

    def run(self) -> Iterator[str]:
        logger.debug("Sidewinder on %dx%d grid", self.grid.width, self.grid.height)
        run: List[Cell] = []

        for cell in self.grid.cells():
            run.append(cell)

            if self.rand_bool():
                selected = run[self.rand_usize() % len(run)]
                run.clear()
                try:
                    self.grid.open_north(selected)
                except EdgeWall:
                    try:
                        self.grid.open_east(selected)
                    except EdgeWall:
                        logger.debug("No wall to open at %s", tuple(selected))
            else:
                try:
                    self.grid.open_east(cell)
                except EdgeWall:
                    # End of the row closes the run northward
                    run.clear()
                    try:
                        self.grid.open_north(cell)
                    except EdgeWall:
                        logger.debug("No wall to open at %s", tuple(cell))

            self.step_count += 1
            yield f"Carving... Run: {len(run)}"

        logger.debug("Sidewinder done, %d walls open", self.grid.open_count())
        yield "Done"
