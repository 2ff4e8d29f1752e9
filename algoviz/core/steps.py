from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Tuple

Position = Tuple[int, int]


class SortState(Enum):
    COMPARE = "compare"
    SWAP = "swap"
    SORTED = "sorted"


@dataclass(frozen=True)
class SortStep:
    """
    One observable event of a sort.
    array   : snapshot of the array at that instant (tuple, never aliased)
    index_a : first index involved, -1 when not meaningful
    index_b : second index involved, -1 when not meaningful
    """
    array: Tuple[int, ...]
    index_a: int
    index_b: int
    state: SortState


@dataclass(frozen=True)
class SolveStep:
    visited: FrozenSet[Position] = field(default_factory=frozenset)
    frontier: FrozenSet[Position] = field(default_factory=frozenset)
    path: Tuple[Position, ...] = ()

    def reaches(self, end: Position) -> bool:
        return bool(self.path) and self.path[-1] == tuple(end)
