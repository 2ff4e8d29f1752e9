from typing import Dict, Iterator, List, Tuple

from algoviz.algo.base import Generator
from algoviz.core.grid import Grid
from algoviz.core.rng import create_seeded_random

Position = Tuple[int, int]


class DisjointSet:
    """
    Union-Find with path compression and union by rank.
    Lives for a single generation run.
    """
    def __init__(self, items):
        self.parent: Dict[Position, Position] = {item: item for item in items}
        self.rank: Dict[Position, int] = {item: 0 for item in items}

    def find(self, item: Position) -> Position:
        root = item
        while self.parent[root] != root:
            root = self.parent[root]

        # Path compression
        while self.parent[item] != root:
            next_item = self.parent[item]
            self.parent[item] = root
            item = next_item

        return root

    def union(self, a: Position, b: Position) -> bool:
        """Merges the sets of a and b. False if they were already joined."""
        ra = self.find(a)
        rb = self.find(b)
        if ra == rb:
            return False

        if self.rank[ra] < self.rank[rb]:
            self.parent[ra] = rb
        elif self.rank[ra] > self.rank[rb]:
            self.parent[rb] = ra
        else:
            self.parent[rb] = ra
            self.rank[ra] += 1
        return True


class KruskalsAlgorithm(Generator):
    def run(self) -> Iterator[Grid]:
        rand = create_seeded_random(self.seed)

        # Every room starts as its own isolated cell
        cells: List[Position] = []
        for y in range(1, self.height - 1, 2):
            for x in range(1, self.width - 1, 2):
                self._carve(x, y)
                cells.append((x, y))

        yield self._snapshot()

        # Edges between adjacent rooms, right before down
        walls: List[Tuple[int, int, int, int]] = []
        for y in range(1, self.height - 1, 2):
            for x in range(1, self.width - 1, 2):
                if x + 2 < self.width - 1:
                    walls.append((x, y, x + 2, y))
                if y + 2 < self.height - 1:
                    walls.append((x, y, x, y + 2))

        # Fisher-Yates with the same generator
        for i in range(len(walls) - 1, 0, -1):
            j = int(rand() * (i + 1))
            walls[i], walls[j] = walls[j], walls[i]

        sets = DisjointSet(cells)

        for x1, y1, x2, y2 in walls:
            if sets.union((x1, y1), (x2, y2)):
                self._carve((x1 + x2) // 2, (y1 + y2) // 2)
                yield self._snapshot()

        return self.grid

