import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wall_maze.core.grid import WallGrid
from wall_maze.core.complexity import MazeAnalyzer
from wall_maze.algo.binary_tree import BinaryTree
from wall_maze.algo.sidewinder import Sidewinder
from wall_maze.viz.text import render_text

def benchmark_size(width: int, height: int):
    print(f"\n--- Benchmarking {width}x{height} ({width*height/1e6:.2f}M cells) ---")

    for name, cls in [("Binary Tree", BinaryTree), ("Sidewinder", Sidewinder)]:
        start_time = time.time()
        grid = WallGrid(width, height)
        print(f"[{name}] Grid Init: {time.time() - start_time:.4f}s ({len(grid) / (1024 * 1024):.2f} MB walls)")

        gen_start = time.time()
        cls(grid, seed=42).run_all()
        gen_time = time.time() - gen_start
        print(f"[{name}] Generation Time: {gen_time:.4f}s")
        print(f"[{name}] Speed: {(width*height)/gen_time:,.0f} cells/sec")

        render_start = time.time()
        text = render_text(grid)
        print(f"[{name}] Render Time: {time.time() - render_start:.4f}s ({len(text):,} chars)")

        stats = MazeAnalyzer.calculate_stats(grid)
        print(f"[{name}] Dead ends: {stats['dead_end_percent']:.1f}%")

def run_suite():
    sizes = [
        (10, 10),
        (100, 100),
        (1000, 1000),      # 1M
    ]

    for w, h in sizes:
        benchmark_size(w, h)

if __name__ == "__main__":
    run_suite()
