import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from algoviz.algo.registry import (
    ALGORITHM_NAMES, GENERATION_ALGORITHMS, GENERATION_NAMES,
    SOLVING_ALGORITHMS, SOLVING_NAMES, SORTING_ALGORITHMS,
)
from algoviz.core.rng import generate_random_array_with_seed


def benchmark_sorting(size: int, seed: int = 42):
    print(f"\n--- Sorting {size} values ---")
    base = generate_random_array_with_seed(size, seed)
    for key, cls in SORTING_ALGORITHMS.items():
        sorter = cls(list(base))
        t0 = time.time()
        sorter.run_all()
        elapsed = time.time() - t0
        print(f"{ALGORITHM_NAMES[key]:<24} {elapsed:>8.4f}s  {sorter.step_count:>10,} steps")


def benchmark_maze(size: int, seed: int = 42):
    print(f"\n--- Maze {size}x{size} ({size * size:,} cells) ---")
    grid = None
    for key, cls in GENERATION_ALGORITHMS.items():
        gen = cls(size, size, seed=seed)
        t0 = time.time()
        grid = gen.run_all()
        elapsed = time.time() - t0
        print(f"{GENERATION_NAMES[key]:<24} {elapsed:>8.4f}s  {gen.step_count:>10,} snapshots")

    # Solve the last generated maze
    start, end = (1, 1), (size - 2, size - 2)
    for key, cls in SOLVING_ALGORITHMS.items():
        solver = cls(grid)
        t0 = time.time()
        solver.run_all(start, end)
        elapsed = time.time() - t0
        print(f"{SOLVING_NAMES[key]:<24} {elapsed:>8.4f}s  {solver.step_count:>10,} steps  path={len(solver.path)}")


def run_suite():
    # Snapshots copy the whole array/grid per step, so cost grows ~quadratically
    for n in (64, 256, 1024):
        benchmark_sorting(n)

    for size in (15, 51, 101):
        benchmark_maze(size)


if __name__ == "__main__":
    run_suite()
