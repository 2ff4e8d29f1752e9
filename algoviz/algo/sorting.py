from typing import Iterator

from algoviz.algo.base import Sorter
from algoviz.core.steps import SortStep


class BubbleSort(Sorter):
    """O(n^2). Stops after the first pass without a swap."""
    def run(self) -> Iterator[SortStep]:
        arr = self.array
        n = len(arr)
        for i in range(n):
            swapped = False
            for j in range(n - i - 1):
                yield self.compare(j, j + 1)
                if arr[j] > arr[j + 1]:
                    arr[j], arr[j + 1] = arr[j + 1], arr[j]
                    yield self.swapped(j, j + 1)
                    swapped = True
            if not swapped:
                break
        yield self.done()


class InsertionSort(Sorter):
    def run(self) -> Iterator[SortStep]:
        arr = self.array
        for i in range(1, len(arr)):
            key = arr[i]
            j = i - 1
            while j >= 0:
                yield self.compare(j, i)
                if arr[j] > key:
                    # Shift right, key is written back once its slot is found
                    arr[j + 1] = arr[j]
                    yield self.swapped(j, j + 1)
                    j -= 1
                else:
                    break
            arr[j + 1] = key
            self.wrote(j + 1)
        yield self.done()


class SelectionSort(Sorter):
    def run(self) -> Iterator[SortStep]:
        arr = self.array
        n = len(arr)
        for i in range(n):
            min_idx = i
            for j in range(i + 1, n):
                yield self.compare(min_idx, j)
                if arr[j] < arr[min_idx]:
                    min_idx = j
            if min_idx != i:
                arr[i], arr[min_idx] = arr[min_idx], arr[i]
                yield self.swapped(i, min_idx)
        yield self.done()


class MergeSort(Sorter):
    """Bottom-up: segment size 1, 2, 4, ... Only changed slots are reported."""
    def run(self) -> Iterator[SortStep]:
        arr = self.array
        n = len(arr)
        size = 1

        while size < n:
            for left in range(0, n, 2 * size):
                mid = min(left + size, n)
                right = min(left + 2 * size, n)

                merged = []
                i, j = left, mid
                while i < mid and j < right:
                    yield self.compare(i, j)
                    if arr[i] <= arr[j]:
                        merged.append(arr[i])
                        i += 1
                    else:
                        merged.append(arr[j])
                        j += 1
                merged.extend(arr[i:mid])
                merged.extend(arr[j:right])

                for k, value in enumerate(merged):
                    if arr[left + k] != value:
                        arr[left + k] = value
                        yield self.swapped(left + k)
            size *= 2

        yield self.done()


class QuickSort(Sorter):
    """Iterative Lomuto partition, pivot = last element of the range."""
    def run(self) -> Iterator[SortStep]:
        arr = self.array
        stack = [(0, len(arr) - 1)]

        while stack:
            low, high = stack.pop()
            if low >= high:
                continue

            pivot = arr[high]
            i = low - 1
            for j in range(low, high):
                yield self.compare(j, high)
                if arr[j] <= pivot:
                    i += 1
                    if i != j:
                        arr[i], arr[j] = arr[j], arr[i]
                        yield self.swapped(i, j)

            arr[i + 1], arr[high] = arr[high], arr[i + 1]
            yield self.swapped(i + 1, high)

            pi = i + 1
            # LIFO: push right first so the left partition runs next
            stack.append((pi + 1, high))
            stack.append((low, pi - 1))

        yield self.done()


class HeapSort(Sorter):
    def run(self) -> Iterator[SortStep]:
        arr = self.array
        n = len(arr)

        for i in range(n // 2 - 1, -1, -1):
            yield from self.heapify(n, i)

        for i in range(n - 1, 0, -1):
            arr[0], arr[i] = arr[i], arr[0]
            yield self.swapped(0, i)
            yield from self.heapify(i, 0)

        yield self.done()

    def heapify(self, size: int, root: int) -> Iterator[SortStep]:
        """Sift `root` down a max-heap of `size` elements."""
        arr = self.array
        largest = root
        left = 2 * root + 1
        right = 2 * root + 2

        if left < size:
            yield self.compare(largest, left)
            if arr[left] > arr[largest]:
                largest = left

        if right < size:
            yield self.compare(largest, right)
            if arr[right] > arr[largest]:
                largest = right

        if largest != root:
            arr[root], arr[largest] = arr[largest], arr[root]
            yield self.swapped(root, largest)
            yield from self.heapify(size, largest)


class CountingSort(Sorter):
    """
    O(n + k). Input must be non-negative integers; this is not checked.
    Counting steps are tagged COMPARE with index_b = -1.
    """
    def run(self) -> Iterator[SortStep]:
        arr = self.array
        if not arr:
            yield self.done()
            return

        max_val = max(arr)
        count = [0] * (max_val + 1)

        for i, value in enumerate(arr):
            count[value] += 1
            yield self.compare(i, -1)

        idx = 0
        for value in range(max_val + 1):
            for _ in range(count[value]):
                if arr[idx] != value:
                    arr[idx] = value
                    yield self.swapped(idx)
                idx += 1

        yield self.done()

