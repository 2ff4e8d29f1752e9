from typing import Dict, Iterator, List, Set, Tuple

from algoviz.algo.base import Solver
from algoviz.core.steps import SolveStep

Position = Tuple[int, int]
Path = Tuple[Position, ...]


class DFS(Solver):
    """
    Marks cells visited when popped, so a cell can sit on the stack more than
    once. Finds *a* path, not necessarily the shortest.
    """
    def run(self, start: Position, end: Position) -> Iterator[SolveStep]:
        start, end = tuple(start), tuple(end)
        visited: Set[Position] = set()
        # Stack of (position, path-so-far)
        stack: List[Tuple[Position, Path]] = [(start, (start,))]

        while stack:
            pos, path = stack.pop()

            if pos == end:
                yield self.emit(visited, (), path)
                return

            if pos in visited:
                continue
            visited.add(pos)

            for n in self.expand(*pos, visited):
                stack.append((n, path + (n,)))

            yield self.emit(visited, (p for p, _ in stack), path)

        yield self.emit(visited, (), ())


class BFS(Solver):
    """Marks cells visited when queued. Shortest path on an unweighted grid."""
    def run(self, start: Position, end: Position) -> Iterator[SolveStep]:
        start, end = tuple(start), tuple(end)
        visited: Set[Position] = {start}
        queue: List[Tuple[Position, Path]] = [(start, (start,))]
        head = 0

        while head < len(queue):
            pos, path = queue[head]
            head += 1

            if pos == end:
                yield self.emit(visited, (), path)
                return

            for n in self.expand(*pos, visited):
                visited.add(n)
                queue.append((n, path + (n,)))

            yield self.emit(visited, (p for p, _ in queue[head:]), path)

        yield self.emit(visited, (), ())


class AStar(Solver):
    """
    Open list is re-sorted (stable, by priority) before every pop instead of
    using a binary heap; ties keep insertion order, which fixes the trace.
    A cell may be queued again whenever a strictly shorter distance shows up;
    stale entries are skipped when popped.
    """
    def run(self, start: Position, end: Position) -> Iterator[SolveStep]:
        start, end = tuple(start), tuple(end)
        visited: Set[Position] = set()
        g_score: Dict[Position, int] = {start: 0}

        # (priority, g, position, path)
        open_list: List[Tuple[int, int, Position, Path]] = [
            (self.heuristic(start, end), 0, start, (start,))
        ]

        while open_list:
            open_list.sort(key=lambda entry: entry[0])
            _, g, pos, path = open_list.pop(0)

            if pos == end:
                yield self.emit(visited, (), path)
                return

            if pos in visited:
                continue
            visited.add(pos)

            for n in self.expand(*pos, visited):
                new_g = g + 1
                old_g = g_score.get(n)
                if old_g is None or new_g < old_g:
                    g_score[n] = new_g
                    open_list.append((new_g + self.heuristic(n, end), new_g, n, path + (n,)))

            yield self.emit(visited, (entry[2] for entry in open_list), path)

        yield self.emit(visited, (), ())

    def heuristic(self, a: Position, b: Position) -> int:
        return abs(a[0] - b[0]) + abs(a[1] - b[1])


class Dijkstra(AStar):
    """ Uniform-cost search is just A* with h(n) = 0. """
    def heuristic(self, a: Position, b: Position) -> int:
        return 0
