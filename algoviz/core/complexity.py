from algoviz.core.grid import Grid
from algoviz.core.rng import create_seeded_random


class MazePostProcessor:
    @staticmethod
    def braid(grid: Grid, factor: float = 1.0, seed: int = 0) -> int:
        """
        Removes dead ends to create loops.
        factor: 0.0 = Remove NO dead ends (Perfect Maze)
                1.0 = Remove ALL dead ends (No dead ends)
        Only walls are opened, so every reachable room stays reachable.
        """
        rand = create_seeded_random(seed)

        # Dead-end rooms: odd coordinates with a single open neighbour
        dead_ends = [
            (x, y)
            for y in range(1, grid.height - 1, 2)
            for x in range(1, grid.width - 1, 2)
            if grid.is_path(x, y) and MazePostProcessor.open_sides(grid, x, y) == 1
        ]

        # Fisher-Yates, seeded
        for i in range(len(dead_ends) - 1, 0, -1):
            j = int(rand() * (i + 1))
            dead_ends[i], dead_ends[j] = dead_ends[j], dead_ends[i]

        target_remove = int(len(dead_ends) * factor)
        removed_count = 0

        for x, y in dead_ends:
            if removed_count >= target_remove:
                break

            # A neighbour's braid may already have opened this one up
            if MazePostProcessor.open_sides(grid, x, y) != 1:
                continue

            # Closed walls leading to another interior room
            closed = []
            for nx, ny in grid.get_neighbors(x, y, step=2):
                if 0 < nx < grid.width - 1 and 0 < ny < grid.height - 1 and grid.is_path(nx, ny):
                    wx, wy = (x + nx) // 2, (y + ny) // 2
                    if grid.is_wall(wx, wy):
                        closed.append((wx, wy))

            if closed:
                wx, wy = closed[int(rand() * len(closed))]
                grid.carve(wx, wy)
                removed_count += 1

        return removed_count

    @staticmethod
    def open_sides(grid: Grid, x: int, y: int) -> int:
        return sum(1 for _ in grid.get_open_neighbors(x, y))

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        corridors = 0
        intersections = 0

        for y in range(grid.height):
            for x in range(grid.width):
                if not grid.is_path(x, y):
                    continue
                sides = MazePostProcessor.open_sides(grid, x, y)
                if sides == 1: dead_ends += 1
                elif sides == 2: corridors += 1
                elif sides >= 3: intersections += 1

        total = grid.path_count()
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
