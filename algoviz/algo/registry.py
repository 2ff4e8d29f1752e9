from algoviz.algo.dfs import RecursiveBacktracker
from algoviz.algo.kruskal import KruskalsAlgorithm
from algoviz.algo.prim import PrimsAlgorithm
from algoviz.algo.solvers import AStar, BFS, DFS, Dijkstra
from algoviz.algo.sorting import (
    BubbleSort, CountingSort, HeapSort, InsertionSort,
    MergeSort, QuickSort, SelectionSort,
)

# CLI key -> class. Dict order is the order shown to users.
SORTING_ALGORITHMS = {
    "bubble": BubbleSort,
    "insertion": InsertionSort,
    "selection": SelectionSort,
    "merge": MergeSort,
    "quick": QuickSort,
    "heap": HeapSort,
    "counting": CountingSort,
}

GENERATION_ALGORITHMS = {
    "dfs": RecursiveBacktracker,
    "prim": PrimsAlgorithm,
    "kruskal": KruskalsAlgorithm,
}

SOLVING_ALGORITHMS = {
    "dfs": DFS,
    "bfs": BFS,
    "dijkstra": Dijkstra,
    "astar": AStar,
}

# CLI key -> display name
ALGORITHM_NAMES = {
    "bubble": "Bubble Sort",
    "insertion": "Insertion Sort",
    "selection": "Selection Sort",
    "merge": "Merge Sort",
    "quick": "Quick Sort",
    "heap": "Heap Sort",
    "counting": "Counting Sort",
}

GENERATION_NAMES = {
    "dfs": "Recursive Backtracking",
    "prim": "Prim's Algorithm",
    "kruskal": "Kruskal's Algorithm",
}

SOLVING_NAMES = {
    "dfs": "Depth-First Search",
    "bfs": "Breadth-First Search",
    "dijkstra": "Dijkstra's Algorithm",
    "astar": "A* Search",
}
