from typing import Optional

import numpy as np

from algoviz.core.grid import Grid
from algoviz.core.steps import SolveStep, SortState, SortStep

COLOR_WALL = (10, 10, 10)
COLOR_PATH = (200, 200, 200)
COLOR_VISITED = (60, 100, 160)  # Blue tint
COLOR_FRONTIER = (100, 200, 120)
COLOR_SOLUTION = (255, 215, 0)  # Gold

COLOR_BAR = (120, 120, 220)
COLOR_BG = (10, 10, 10)
SORT_COLORS = {
    SortState.COMPARE: (255, 200, 60),
    SortState.SWAP: (230, 70, 70),
    SortState.SORTED: (80, 200, 120),
}


def grid_frame(grid: Grid, solve_step: Optional[SolveStep] = None, cell_size: int = 4) -> np.ndarray:
    """
    RGB uint8 image of shape (height*cell_size, width*cell_size, 3).
    Solver overlays are painted visited < frontier < path.
    """
    cells = np.frombuffer(grid.cells.tobytes(), dtype=np.uint8).reshape(grid.height, grid.width)

    palette = np.array([COLOR_WALL, COLOR_PATH], dtype=np.uint8)
    img = palette[cells]

    if solve_step is not None:
        for positions, color in (
            (solve_step.visited, COLOR_VISITED),
            (solve_step.frontier, COLOR_FRONTIER),
            (solve_step.path, COLOR_SOLUTION),
        ):
            if positions:
                xs, ys = zip(*positions)
                img[list(ys), list(xs)] = color

    return np.repeat(np.repeat(img, cell_size, axis=0), cell_size, axis=1)


def sort_frame(step: SortStep, max_value: Optional[int] = None, bar_width: int = 4, height: int = 200) -> np.ndarray:
    """One bar per slot; the slots named by the step are highlighted."""
    values = np.asarray(step.array, dtype=np.int64)
    n = len(values)
    img = np.empty((height, max(n, 1) * bar_width, 3), dtype=np.uint8)
    img[:] = COLOR_BG
    if n == 0:
        return img

    top = max_value if max_value is not None else max(int(values.max()), 1)
    bar_heights = np.clip(values * height // top, 0, height)

    colors = np.tile(np.array(COLOR_BAR, dtype=np.uint8), (n, 1))
    if step.state == SortState.SORTED:
        colors[:] = SORT_COLORS[SortState.SORTED]
    else:
        for idx in (step.index_a, step.index_b):
            if 0 <= idx < n:
                colors[idx] = SORT_COLORS[step.state]

    # Mask rows from the bottom up to each bar's height
    rows = np.arange(height)[:, None]
    filled = rows >= (height - bar_heights)[None, :]
    filled = np.repeat(filled, bar_width, axis=1)
    bar_colors = np.repeat(colors, bar_width, axis=0)
    img[filled] = np.broadcast_to(bar_colors, img.shape)[filled]
    return img
