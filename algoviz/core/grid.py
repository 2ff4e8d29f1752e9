from array import array
from typing import Iterator, List, Sequence, Tuple

Position = Tuple[int, int]

# Neighbour order is part of the trace contract: North, South, West, East
DIRECTIONS: Tuple[Position, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))

# Odd sizes so odd coordinates are rooms and even ones are walls
GRID_SIZES = {
    "Small": 15,
    "Medium": 31,
    "Large": 51,
    "XLarge": 75,
    "Huge": 101,
}


class Grid:
    WALL = 0
    PATH = 1

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int, cells: array = None):
        self.width = width
        self.height = height
        # 'B' (unsigned char) -> 1 byte per cell, row-major
        if cells is None:
            cells = array('B', [self.WALL] * (width * height))
        self.cells = cells

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        height = len(rows)
        width = len(rows[0]) if height else 0
        cells = array('B')
        for row in rows:
            cells.extend(row)
        return cls(width, height, cells)

    def rows(self) -> List[List[int]]:
        w = self.width
        return [self.cells[y * w:(y + 1) * w].tolist() for y in range(self.height)]

    def copy(self) -> "Grid":
        return Grid(self.width, self.height, array('B', self.cells))

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_path(self, x: int, y: int) -> bool:
        return self.cells[self.get_index(x, y)] == self.PATH

    def is_wall(self, x: int, y: int) -> bool:
        return self.cells[self.get_index(x, y)] == self.WALL

    def carve(self, x: int, y: int):
        """Turns (x, y) into Path. Cells never go back to Wall."""
        self.cells[self.get_index(x, y)] = self.PATH

    def path_count(self) -> int:
        return self.cells.count(self.PATH)

    def get_neighbors(self, x: int, y: int, step: int = 1) -> Iterator[Position]:
        """
        Yields in-bounds (nx, ny) `step` cells away, in N, S, W, E order.
        Does NOT check cell state.
        """
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx * step, y + dy * step
            if 0 <= nx < self.width and 0 <= ny < self.height:
                yield (nx, ny)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Position]:
        for nx, ny in self.get_neighbors(x, y):
            if self.cells[ny * self.width + nx] == self.PATH:
                yield (nx, ny)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and self.cells == other.cells

    def __repr__(self):
        return f"Grid({self.width}x{self.height}, path={self.path_count()})"


def create_empty_grid(width: int, height: int) -> Grid:
    return Grid(width, height)


def get_default_start_end(grid_size: int) -> Tuple[Position, Position]:
    return (1, 1), (grid_size - 2, grid_size - 2)
