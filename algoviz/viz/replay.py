import logging
from typing import Iterator, List, Union

from algoviz.core.events import (
    EventReader, KIND_MAZE, KIND_SORT,
    EVT_CARVE, EVT_COMPARE, EVT_FRAME, EVT_SET, EVT_SORTED, EVT_SWAP,
)
from algoviz.core.grid import Grid
from algoviz.core.steps import SortState, SortStep

logger = logging.getLogger(__name__)


class EventAdapter:
    """
    Adapts an EventReader stream back into the step stream of the engine
    that wrote it: SortSteps for a sort log, Grid snapshots for a maze log.
    """
    def __init__(self, reader: EventReader):
        self.reader = reader
        self.kind = reader.kind or reader.read_header()
        self.step_count = 0

        self.array: List[int] = list(reader.initial_values)
        self.grid = Grid(reader.width, reader.height) if self.kind == KIND_MAZE else None

    def run(self) -> Iterator[Union[SortStep, Grid]]:
        if self.kind == KIND_SORT:
            steps = self._sort_steps()
        else:
            steps = self._maze_steps()

        for step in steps:
            self.step_count += 1
            yield step

        logger.debug("Replayed %d steps from %s", self.step_count, self.reader.filename)

    def _sort_steps(self) -> Iterator[SortStep]:
        arr = self.array
        for type_code, data in self.reader.stream_events():
            if type_code == EVT_COMPARE:
                a, b = data
                yield SortStep(tuple(arr), a, b, SortState.COMPARE)

            elif type_code == EVT_SWAP:
                a, b, value_a, value_b = data
                arr[a] = value_a
                if b >= 0:
                    arr[b] = value_b
                yield SortStep(tuple(arr), a, b, SortState.SWAP)

            elif type_code == EVT_SET:
                index, value = data
                arr[index] = value

            elif type_code == EVT_SORTED:
                yield SortStep(tuple(arr), -1, -1, SortState.SORTED)

    def _maze_steps(self) -> Iterator[Grid]:
        for type_code, data in self.reader.stream_events():
            if type_code == EVT_CARVE:
                self.grid.carve(*data)

            elif type_code == EVT_FRAME:
                yield self.grid.copy()
