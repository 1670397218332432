import logging
from typing import Iterator
from wall_maze.core.grid import EdgeWall
from wall_maze.algo.base import Generator

logger = logging.getLogger(__name__)


class BinaryTree(Generator):
    """
    Opens exactly one of north/east for every cell. Corridors run along the
    top row and the right column; the north-east cell opens nothing.
    """

    def run(self) -> Iterator[str]:
        logger.debug("Binary tree on %dx%d grid", self.grid.width, self.grid.height)

        for cell in self.grid.cells():
            if self.rand_bool():
                first, fallback = self.grid.open_north, self.grid.open_east
            else:
                first, fallback = self.grid.open_east, self.grid.open_north

            try:
                first(cell)
            except EdgeWall:
                try:
                    fallback(cell)
                except EdgeWall:
                    # North-east corner has neither wall
                    logger.debug("No wall to open at %s", tuple(cell))

            self.step_count += 1
            yield f"Carving... Cell: {cell.x},{cell.y}"

        logger.debug("Binary tree done, %d walls open", self.grid.open_count())
        yield "Done"
