import unittest
import sys
import os
from collections import Counter

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from algoviz.algo.registry import SORTING_ALGORITHMS
from algoviz.algo.sorting import BubbleSort, CountingSort, QuickSort, SelectionSort
from algoviz.core.rng import generate_random_array_with_seed
from algoviz.core.steps import SortState, SortStep


def trace(steps):
    """Compact 'c0,1 s0,1 ...' form of a step list."""
    return " ".join(f"{s.state.value[0]}{s.index_a},{s.index_b}" for s in steps)


class TestSortTraces(unittest.TestCase):
    # Step sequences for [5, 2, 4, 1, 3]
    EXPECTED = {
        "bubble": "c0,1 s0,1 c1,2 s1,2 c2,3 s2,3 c3,4 s3,4 c0,1 c1,2 s1,2 c2,3 s2,3 c0,1 s0,1 c1,2 c0,1 s-1,-1",
        "insertion": "c0,1 s0,1 c1,2 s1,2 c0,2 c2,3 s2,3 c1,3 s1,2 c0,3 s0,1 c3,4 s3,4 c2,4 s2,3 c1,4 s-1,-1",
        "selection": "c0,1 c1,2 c1,3 c3,4 s0,3 c1,2 c1,3 c1,4 c2,3 c2,4 s2,4 c3,4 s3,4 s-1,-1",
        "merge": "c0,1 s0,-1 s1,-1 c2,3 s2,-1 s3,-1 c0,2 c0,3 c1,3 s0,-1 s1,-1 s2,-1 s3,-1 c0,4 c1,4 c2,4 s2,-1 s3,-1 s4,-1 s-1,-1",
        "quick": "c0,4 c1,4 s0,1 c2,4 c3,4 s1,3 s2,4 c0,1 s0,1 c3,4 s3,4 s-1,-1",
        "heap": "c1,3 c1,4 s1,4 c0,1 c0,2 s0,4 c0,1 c1,2 s0,2 s0,3 c0,1 c1,2 s0,1 s0,2 c0,1 s0,1 s-1,-1",
        "counting": "c0,-1 c1,-1 c2,-1 c3,-1 c4,-1 s0,-1 s2,-1 s3,-1 s4,-1 s-1,-1",
    }

    def test_traces(self):
        for key, expected in self.EXPECTED.items():
            with self.subTest(algo=key):
                steps = list(SORTING_ALGORITHMS[key]([5, 2, 4, 1, 3]).run())
                self.assertEqual(trace(steps), expected)

    def test_bubble_example(self):
        arr = [3, 1, 2]
        steps = list(BubbleSort(arr).run())
        self.assertEqual(steps, [
            SortStep((3, 1, 2), 0, 1, SortState.COMPARE),
            SortStep((1, 3, 2), 0, 1, SortState.SWAP),
            SortStep((1, 3, 2), 1, 2, SortState.COMPARE),
            SortStep((1, 2, 3), 1, 2, SortState.SWAP),
            SortStep((1, 2, 3), 0, 1, SortState.COMPARE),
            SortStep((1, 2, 3), -1, -1, SortState.SORTED),
        ])
        self.assertEqual(arr, [1, 2, 3])


class TestSortProperties(unittest.TestCase):
    # Engines that only ever exchange two slots; the others write single
    # slots (shift, write-back, rebuild) so a mid-sort snapshot can hold a
    # duplicate while the displaced value is in flight
    EXCHANGE_ONLY = ("bubble", "selection", "quick", "heap")

    def test_sorted_permutation(self):
        for seed in (1, 2, 3):
            base = generate_random_array_with_seed(40, seed, 25)
            for key, cls in SORTING_ALGORITHMS.items():
                with self.subTest(algo=key, seed=seed):
                    arr = list(base)
                    steps = list(cls(arr).run())
                    self.assertEqual(list(steps[-1].array), sorted(base))
                    self.assertEqual(arr, sorted(base))
                    self.assertEqual(Counter(steps[0].array), Counter(base))
                    self.assertEqual(Counter(steps[-1].array), Counter(base))

    def test_exchange_sorts_conserve_values_every_step(self):
        base = generate_random_array_with_seed(40, 5, 25)
        for key in self.EXCHANGE_ONLY:
            with self.subTest(algo=key):
                for step in SORTING_ALGORITHMS[key](list(base)).run():
                    self.assertEqual(Counter(step.array), Counter(base))

    def test_insertion_shift_snapshot(self):
        # The shifted value is duplicated until the key lands
        steps = list(SORTING_ALGORITHMS["insertion"]([2, 1]).run())
        self.assertEqual([s.array for s in steps], [(2, 1), (2, 2), (1, 2)])

    def test_single_sorted_step_last(self):
        for key, cls in SORTING_ALGORITHMS.items():
            with self.subTest(algo=key):
                steps = list(cls([4, 4, 1, 0, 9, 2]).run())
                states = [s.state for s in steps]
                self.assertEqual(states[-1], SortState.SORTED)
                self.assertEqual(states.count(SortState.SORTED), 1)
                self.assertEqual((steps[-1].index_a, steps[-1].index_b), (-1, -1))

    def test_empty_and_single(self):
        for key, cls in SORTING_ALGORITHMS.items():
            with self.subTest(algo=key):
                self.assertEqual(len(list(cls([]).run())), 1)
                self.assertEqual(list(cls([7]).run())[-1].array, (7,))

    def test_snapshots_are_not_aliased(self):
        arr = [3, 2, 1]
        steps = list(SelectionSort(arr).run())
        self.assertEqual(steps[0].array, (3, 2, 1))
        arr[0] = 99
        self.assertEqual(steps[-1].array, (1, 2, 3))

    def test_bubble_early_exit(self):
        steps = list(BubbleSort([1, 2, 3, 4]).run())
        # One pass of n-1 compares, then stop
        self.assertEqual(len(steps), 4)

    def test_selection_silent_noop(self):
        steps = list(SelectionSort([1, 2, 3]).run())
        self.assertFalse(any(s.state == SortState.SWAP for s in steps))

    def test_quick_sorted_input(self):
        sorter = QuickSort([1, 2, 3])
        sorter.run_all()
        self.assertEqual(sorter.array, [1, 2, 3])
        self.assertEqual(sorter.step_count, 6)

    def test_counting_only_terminal_on_empty(self):
        steps = list(CountingSort([]).run())
        self.assertEqual(steps, [SortStep((), -1, -1, SortState.SORTED)])

    def test_run_all_returns_array(self):
        arr = [2, 1]
        self.assertIs(BubbleSort(arr).run_all(), arr)


if __name__ == '__main__':
    unittest.main()
