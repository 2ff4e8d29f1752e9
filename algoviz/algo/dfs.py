from typing import Iterator, List, Tuple

from algoviz.algo.base import Generator
from algoviz.core.grid import Grid
from algoviz.core.rng import create_seeded_random


class RecursiveBacktracker(Generator):
    """Long winding passages, few dead ends."""
    def run(self) -> Iterator[Grid]:
        rand = create_seeded_random(self.seed)

        # Start at (1,1) to leave the border intact
        start_x, start_y = 1, 1
        self._carve(start_x, start_y)

        # Stack of (x, y)
        stack: List[Tuple[int, int]] = [(start_x, start_y)]

        while stack:
            cx, cy = stack[-1]

            # Rooms two cells away that are still solid
            neighbors = []
            for nx, ny in self.grid.get_neighbors(cx, cy, step=2):
                if self.is_room(nx, ny) and self.grid.is_wall(nx, ny):
                    neighbors.append((nx, ny))

            if neighbors:
                nx, ny = neighbors[int(rand() * len(neighbors))]

                # Wall between current and neighbor, then the neighbor itself
                self._carve((cx + nx) // 2, (cy + ny) // 2)
                self._carve(nx, ny)

                stack.append((nx, ny))
                yield self._snapshot()
            else:
                # Backtrack
                stack.pop()

        return self.grid
