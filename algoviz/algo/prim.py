from typing import Iterator, List, Tuple

from algoviz.algo.base import Generator
from algoviz.core.grid import Grid
from algoviz.core.rng import create_seeded_random


class PrimsAlgorithm(Generator):
    """Randomized Prim's. Short branches, lots of dead ends."""
    def run(self) -> Iterator[Grid]:
        rand = create_seeded_random(self.seed)

        start_x, start_y = 1, 1
        self._carve(start_x, start_y)

        # Frontier: List of (x, y, parent_x, parent_y)
        # A cell can go stale (carved through another parent) while it waits,
        # it is re-checked when picked
        frontier: List[Tuple[int, int, int, int]] = []

        def add_frontier(cx, cy):
            for nx, ny in self.grid.get_neighbors(cx, cy, step=2):
                if self.is_room(nx, ny) and self.grid.is_wall(nx, ny):
                    if not any(fx == nx and fy == ny for fx, fy, _, _ in frontier):
                        frontier.append((nx, ny, cx, cy))

        add_frontier(start_x, start_y)

        while frontier:
            idx = int(rand() * len(frontier))
            fx, fy, px, py = frontier.pop(idx)

            if self.grid.is_wall(fx, fy):
                self._carve(fx, fy)
                self._carve((fx + px) // 2, (fy + py) // 2)

                add_frontier(fx, fy)
                yield self._snapshot()

        return self.grid
