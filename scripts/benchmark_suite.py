import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_scad.core.grid import SquareGrid
from maze_scad.core.stats import calculate_stats, is_spanning_tree
from maze_scad.algo.registry import GENERATORS

def benchmark_size(width: int, height: int):
    print(f"\n--- Benchmarking {width}x{height} ({width*height:,} cells) ---")
    print(f"{'ALGORITHM':<10} | {'TIME (s)':<10} | {'CELLS/SEC':<12} | {'DEAD ENDS':<10} | TREE")
    print("-" * 60)

    for name, cls in GENERATORS.items():
        grid = SquareGrid(width, height)
        algo = cls(grid, seed=42)

        gen_start = time.time()
        algo.run_all()
        gen_time = time.time() - gen_start

        stats = calculate_stats(grid)
        speed = (width * height) / gen_time if gen_time > 0 else float("inf")
        print(f"{name:<10} | {gen_time:<10.4f} | {speed:<12,.0f} | {stats['dead_end_percent']:<9.1f}% | {is_spanning_tree(grid)}")

def main():
    sizes = [(10, 10), (100, 100), (300, 300)]
    for w, h in sizes:
        benchmark_size(w, h)

if __name__ == "__main__":
    main()
