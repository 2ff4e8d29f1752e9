from abc import ABC, abstractmethod
from typing import Iterator, List, Tuple

from algoviz.core.grid import Grid
from algoviz.core.steps import SortState, SortStep, SolveStep

Position = Tuple[int, int]


class Sorter(ABC):
    """
    Sorts `array` in place. run() yields one SortStep per observable event
    and always finishes with a single SORTED step.
    """
    def __init__(self, array: List[int], event_writer=None):
        self.array = array
        self.event_writer = event_writer
        self.step_count = 0

        if self.event_writer:
            self.event_writer.write_sort_header(array)

    @abstractmethod
    def run(self) -> Iterator[SortStep]:
        pass

    def run_all(self) -> List[int]:
        """Helper to run the sort to completion."""
        for _ in self.run():
            pass
        return self.array

    def compare(self, a: int, b: int) -> SortStep:
        if self.event_writer:
            self.event_writer.log_compare(a, b)
        return self._step(a, b, SortState.COMPARE)

    def swapped(self, a: int, b: int = -1) -> SortStep:
        """Step for slots `a` (and `b`) AFTER they were written."""
        if self.event_writer:
            value_b = self.array[b] if b >= 0 else 0
            self.event_writer.log_swap(a, b, self.array[a], value_b)
        return self._step(a, b, SortState.SWAP)

    def wrote(self, index: int):
        """Logs a write to `index` that is not reported as a step."""
        if self.event_writer:
            self.event_writer.log_set(index, self.array[index])

    def done(self) -> SortStep:
        if self.event_writer:
            self.event_writer.log_sorted()
        return self._step(-1, -1, SortState.SORTED)

    def _step(self, a: int, b: int, state: SortState) -> SortStep:
        self.step_count += 1
        return SortStep(tuple(self.array), a, b, state)


class Generator(ABC):
    """
    Carves a width x height maze. run() yields an independent Grid snapshot
    per carving event and returns the finished grid.
    """
    def __init__(self, width: int, height: int, seed: int = 0, event_writer=None):
        self.width = width
        self.height = height
        self.seed = seed
        self.grid = Grid(width, height)
        self.event_writer = event_writer
        self.step_count = 0

        if self.event_writer:
            self.event_writer.write_maze_header(width, height)

    @abstractmethod
    def run(self) -> Iterator[Grid]:
        pass

    def run_all(self) -> Grid:
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
        return self.grid

    def is_room(self, x: int, y: int) -> bool:
        # Interior only, border cells are never carved
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def _carve(self, x: int, y: int):
        self.grid.carve(x, y)
        if self.event_writer:
            self.event_writer.log_carve(x, y)

    def _snapshot(self) -> Grid:
        self.step_count += 1
        if self.event_writer:
            self.event_writer.log_frame()
        return self.grid.copy()


class Solver(ABC):
    def __init__(self, grid: Grid):
        self.grid = grid
        self.path: List[Position] = []
        self.visited_count = 0
        self.step_count = 0

    @abstractmethod
    def run(self, start: Position, end: Position) -> Iterator[SolveStep]:
        pass

    def run_all(self, start: Position, end: Position) -> List[Position]:
        for _ in self.run(start, end):
            pass
        return self.path

    def expand(self, x: int, y: int, visited) -> Iterator[Position]:
        """Open (Path) 4-neighbours of (x, y) that are not yet visited."""
        for n in self.grid.get_open_neighbors(x, y):
            if n not in visited:
                yield n

    def emit(self, visited, frontier, path) -> SolveStep:
        self.step_count += 1
        self.visited_count = len(visited)
        self.path = list(path)
        return SolveStep(frozenset(visited), frozenset(frontier), tuple(path))
