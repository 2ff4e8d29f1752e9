import unittest
import sys
import os
import shutil
import tempfile

import numpy as np

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from algoviz.algo.solvers import BFS
from algoviz.core.grid import Grid
from algoviz.core.steps import SolveStep, SortState, SortStep
from algoviz.viz import frames
from algoviz.viz.recorder import VideoRecorder


class TestGridFrame(unittest.TestCase):
    def test_shape_and_palette(self):
        grid = Grid(5, 3)
        grid.carve(1, 1)
        img = frames.grid_frame(grid, cell_size=2)
        self.assertEqual(img.shape, (6, 10, 3))
        self.assertEqual(img.dtype, np.uint8)
        self.assertEqual(tuple(img[2, 2]), frames.COLOR_PATH)
        self.assertEqual(tuple(img[0, 0]), frames.COLOR_WALL)

    def test_solver_overlay(self):
        grid = Grid.from_rows([[0, 0, 0, 0], [0, 1, 1, 0], [0, 0, 0, 0]])
        step = SolveStep(frozenset({(1, 1), (2, 1)}), frozenset({(2, 1)}), ((1, 1),))
        img = frames.grid_frame(grid, step, cell_size=1)
        self.assertEqual(tuple(img[1, 1]), frames.COLOR_SOLUTION)
        self.assertEqual(tuple(img[1, 2]), frames.COLOR_FRONTIER)

    def test_live_solver_steps(self):
        grid = Grid.from_rows([[0, 0, 0], [0, 1, 0], [0, 1, 0], [0, 0, 0]])
        for step in BFS(grid).run((1, 1), (1, 2)):
            img = frames.grid_frame(grid, step, cell_size=3)
            self.assertEqual(img.shape, (12, 9, 3))


class TestSortFrame(unittest.TestCase):
    def test_bars(self):
        step = SortStep((1, 2, 4), 0, 2, SortState.COMPARE)
        img = frames.sort_frame(step, bar_width=2, height=8)
        self.assertEqual(img.shape, (8, 6, 3))
        # Tallest bar fills the column, shortest only the bottom quarter
        self.assertEqual(tuple(img[0, 4]), frames.SORT_COLORS[SortState.COMPARE])
        self.assertEqual(tuple(img[0, 0]), frames.COLOR_BG)
        self.assertEqual(tuple(img[7, 0]), frames.SORT_COLORS[SortState.COMPARE])
        self.assertEqual(tuple(img[7, 2]), frames.COLOR_BAR)

    def test_sorted_and_empty(self):
        img = frames.sort_frame(SortStep((2, 2), -1, -1, SortState.SORTED), height=4, bar_width=1)
        self.assertTrue((img == np.array(frames.SORT_COLORS[SortState.SORTED], dtype=np.uint8)).all())
        empty = frames.sort_frame(SortStep((), -1, -1, SortState.SORTED), height=4, bar_width=3)
        self.assertEqual(empty.shape, (4, 3, 3))


class TestRecorder(unittest.TestCase):
    def setUp(self):
        self.out = tempfile.mkdtemp(prefix="algoviz_rec_")

    def tearDown(self):
        shutil.rmtree(self.out, ignore_errors=True)

    def test_inactive_recorder_ignores_frames(self):
        rec = VideoRecorder(active=False)
        rec.capture_frame(np.zeros((4, 4, 3), dtype=np.uint8))
        rec.stop()
        self.assertEqual(rec.frame_count, 0)

    def test_writes_video(self):
        path = os.path.join(self.out, "run.mp4")
        rec = VideoRecorder(active=True, output_file=path, fps=10)
        grid = Grid(9, 9)
        for x in range(1, 8):
            grid.carve(x, 1)
            rec.capture_frame(frames.grid_frame(grid, cell_size=8))
        rec.stop()
        self.assertEqual(rec.frame_count, 7)
        if not os.path.exists(path) or os.path.getsize(path) == 0:
            self.skipTest("OpenCV build has no mp4v encoder")

    def test_frame_size_must_not_change(self):
        rec = VideoRecorder(active=True, output_file=os.path.join(self.out, "x.mp4"))
        rec.capture_frame(np.zeros((16, 16, 3), dtype=np.uint8))
        with self.assertRaises(ValueError):
            rec.capture_frame(np.zeros((8, 8, 3), dtype=np.uint8))
        rec.stop()


if __name__ == '__main__':
    unittest.main()
