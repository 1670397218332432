from collections import deque
from wall_maze.core.grid import Cell, WallGrid


class MazeAnalyzer:
    @staticmethod
    def count_exits(grid: WallGrid, cell: Cell) -> int:
        return len(grid.movement_options(cell).reachable())

    @staticmethod
    def calculate_stats(grid: WallGrid):
        dead_ends = 0
        corridors = 0  # 2 exits
        junctions = 0  # 3 or 4 exits
        isolated = 0  # no exits

        for cell in grid.cells():
            exits = MazeAnalyzer.count_exits(grid, cell)
            if exits == 1: dead_ends += 1
            elif exits == 2: corridors += 1
            elif exits >= 3: junctions += 1
            else: isolated += 1

        total = grid.width * grid.height
        return {
            "open_walls": grid.open_count(),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "isolated": isolated,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }

    @staticmethod
    def count_components(grid: WallGrid) -> int:
        """Number of connected regions, flood filling through open walls."""
        seen = set()
        components = 0
        for start in grid.cells():
            if start in seen:
                continue
            components += 1
            seen.add(start)
            queue = deque([start])
            while queue:
                current = queue.popleft()
                for neighbor in grid.movement_options(current).reachable():
                    if neighbor not in seen:
                        seen.add(neighbor)
                        queue.append(neighbor)
        return components

    @staticmethod
    def is_perfect(grid: WallGrid) -> bool:
        """
        Connected with exactly cells - 1 passages, i.e. a spanning tree:
        one path between any two cells.
        """
        if grid.open_count() != grid.width * grid.height - 1:
            return False
        return MazeAnalyzer.count_components(grid) == 1
