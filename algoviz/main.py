import argparse
import contextlib
import logging
import os
import sys
import time

# Ensure project root is in path so we can import 'algoviz' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from algoviz.algo.registry import (
    ALGORITHM_NAMES, GENERATION_ALGORITHMS, GENERATION_NAMES,
    SOLVING_ALGORITHMS, SOLVING_NAMES, SORTING_ALGORITHMS,
)

logger = logging.getLogger("algoviz")


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="algoviz: step-by-step sorting and maze algorithms")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Sort Command
    sort_parser = subparsers.add_parser("sort", help="Run a sorting algorithm on a random array")
    sort_parser.add_argument("--algo", type=str, default="bubble", choices=list(SORTING_ALGORITHMS), help="Sorting algorithm")
    sort_parser.add_argument("--size", type=int, default=32, help="Array length")
    sort_parser.add_argument("--max-value", type=int, default=None, help="Largest value (defaults to size)")
    sort_parser.add_argument("--seed", type=int, default=None, help="Random Seed (unseeded if omitted)")
    sort_parser.add_argument("--record-events", type=str, help="Save sort steps to binary event log")
    sort_parser.add_argument("--record", type=str, help="Write the run to a video file")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--width", type=int, default=31, help="Maze Width (odd)")
    gen_parser.add_argument("--height", type=int, default=31, help="Maze Height (odd)")
    gen_parser.add_argument("--seed", type=int, default=0, help="Random Seed")
    gen_parser.add_argument("--algo", type=str, default="dfs", choices=list(GENERATION_ALGORITHMS), help="Generation Algorithm")
    gen_parser.add_argument("--braid", type=float, default=0.0, help="Braid Factor (0.0 - 1.0)")
    gen_parser.add_argument("--out", type=str, help="Output file path (optional)")
    gen_parser.add_argument("--seed-only", action="store_true", help="Store only algo + seed in the output file")
    gen_parser.add_argument("--compress", action="store_true", help="zlib-compress the output file")
    gen_parser.add_argument("--record-events", type=str, help="Save generation events to binary file")
    gen_parser.add_argument("--record", type=str, help="Write the generation to a video file")

    # Solve Command
    solve_parser = subparsers.add_parser("solve", help="Solve an existing maze")
    solve_parser.add_argument("input_file", help="Path to maze file")
    solve_parser.add_argument("--algo", type=str, default="bfs", choices=list(SOLVING_ALGORITHMS), help="Solver algorithm")
    solve_parser.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), help="Start cell (default 1 1)")
    solve_parser.add_argument("--end", type=int, nargs=2, metavar=("X", "Y"), help="End cell (default width-2 height-2)")
    solve_parser.add_argument("--record", type=str, help="Write the search to a video file")

    # Replay Command
    replay_parser = subparsers.add_parser("replay", help="Replay an event log")
    replay_parser.add_argument("event_file", help="Path to event log file")
    replay_parser.add_argument("--record", type=str, help="Write the replay to a video file")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Race the solvers on one maze")
    bench_parser.add_argument("--size", type=int, default=101, help="Benchmark maze size (odd)")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser


def load_maze(path: str):
    """Loads a .maze file, replaying the generator for seed-only files."""
    from algoviz.io.serializer import MazeSerializer
    grid, meta = MazeSerializer.load(path)
    if meta.get("seed_only"):
        algo = meta["algo"]
        if algo not in GENERATION_ALGORITHMS:
            raise ValueError(f"Unknown generation algorithm in {path}: {algo}")
        logger.info(f"Regenerating {GENERATION_NAMES[algo]} from seed {meta['seed']}...")
        grid = GENERATION_ALGORITHMS[algo](grid.width, grid.height, seed=meta["seed"]).run_all()
    return grid, meta


def open_event_log(path):
    """EventWriter for `path`, or a no-op context yielding None."""
    if not path:
        return contextlib.nullcontext()
    from algoviz.core.events import EventWriter
    logger.info(f"Recording events to {path}...")
    return EventWriter(path)


def open_recorder(path):
    if not path:
        return None
    from algoviz.viz.recorder import VideoRecorder
    recorder = VideoRecorder(active=True, output_file=path)
    logger.info(f"Recording video to {recorder.output_file}")
    return recorder


def cmd_sort(args):
    from algoviz.core.rng import generate_random_array, generate_random_array_with_seed

    if args.seed is None:
        values = generate_random_array(args.size, args.max_value)
    else:
        values = generate_random_array_with_seed(args.size, args.seed, args.max_value)
    logger.debug(f"Input: {values}")

    recorder = open_recorder(args.record)
    if recorder:
        from algoviz.viz.frames import sort_frame
    top = max(values, default=1)

    counts = {}
    t0 = time.time()
    with open_event_log(args.record_events) as evt_writer:
        sorter = SORTING_ALGORITHMS[args.algo](values, event_writer=evt_writer)
        logger.info(f"Sorting {len(values)} values with {ALGORITHM_NAMES[args.algo]}...")
        try:
            for step in sorter.run():
                counts[step.state.value] = counts.get(step.state.value, 0) + 1
                if recorder:
                    recorder.capture_frame(sort_frame(step, max_value=top))
        finally:
            if recorder:
                recorder.stop()

    logger.info(f"Done in {time.time() - t0:.4f}s: {sorter.step_count} steps {counts}")
    print(sorter.array)


def cmd_generate(args):
    if args.width % 2 == 0 or args.height % 2 == 0:
        logger.warning(f"{args.width}x{args.height} is not odd-by-odd; the last row/column stays solid.")

    recorder = open_recorder(args.record)
    if recorder:
        from algoviz.viz.frames import grid_frame

    t0 = time.time()
    with open_event_log(args.record_events) as evt_writer:
        generator = GENERATION_ALGORITHMS[args.algo](args.width, args.height, seed=args.seed, event_writer=evt_writer)
        logger.info(f"Generating {args.width}x{args.height} maze with {GENERATION_NAMES[args.algo]} (seed={args.seed})...")
        try:
            for snapshot in generator.run():
                if recorder:
                    recorder.capture_frame(grid_frame(snapshot))
        finally:
            if recorder:
                recorder.stop()
    grid = generator.grid
    logger.info(f"Generation complete in {time.time() - t0:.4f}s ({generator.step_count} steps)")

    # Post-Processing (Braid)
    if args.braid > 0.0:
        logger.info(f"Braiding maze (factor={args.braid})...")
        from algoviz.core.complexity import MazePostProcessor
        removed = MazePostProcessor.braid(grid, factor=args.braid, seed=args.seed)
        logger.info(f"Removed {removed} dead ends.")
        logger.info(f"Stats: {MazePostProcessor.calculate_stats(grid)}")

    if args.seed_only and args.braid > 0.0:
        logger.warning("Braiding is not replayable from a seed; saving full cells instead.")
        args.seed_only = False

    if args.out:
        logger.info(f"Saving maze to {args.out}...")
        from algoviz.io.serializer import MazeSerializer
        meta = {"algo": args.algo, "seed": args.seed}
        MazeSerializer.save(grid, args.out, meta=meta, seed_only=args.seed_only, compress=args.compress)
        logger.info("Save complete.")
    else:
        for row in grid.rows():
            print("".join("  " if cell else "##" for cell in row))


def cmd_solve(args):
    logger.info(f"Loading {args.input_file}...")
    grid, meta = load_maze(args.input_file)
    logger.info(f"Loaded {grid.width}x{grid.height} maze. Meta: {meta}")

    start = tuple(args.start) if args.start else (1, 1)
    end = tuple(args.end) if args.end else (grid.width - 2, grid.height - 2)
    for name, pos in (("start", start), ("end", end)):
        if not grid.in_bounds(*pos) or not grid.is_path(*pos):
            raise SystemExit(f"error: {name} {pos} is not an open cell")

    recorder = open_recorder(args.record)
    if recorder:
        from algoviz.viz.frames import grid_frame

    solver = SOLVING_ALGORITHMS[args.algo](grid)
    logger.info(f"Solving with {SOLVING_NAMES[args.algo]} from {start} to {end}...")

    t0 = time.time()
    try:
        for step in solver.run(start, end):
            if recorder:
                recorder.capture_frame(grid_frame(grid, step))
    finally:
        if recorder:
            recorder.stop()

    if solver.path and tuple(solver.path[-1]) == end:
        logger.info(f"Solved in {time.time() - t0:.4f}s")
        print(f"Path Length: {len(solver.path)} | Visited: {solver.visited_count} | Steps: {solver.step_count}")
    else:
        print(f"No path. Visited: {solver.visited_count} | Steps: {solver.step_count}")


def cmd_replay(args):
    from algoviz.core.events import EventReader, KIND_SORT
    from algoviz.viz.replay import EventAdapter

    logger.info(f"Replaying {args.event_file}...")
    with EventReader(args.event_file) as reader:
        kind = reader.read_header()
        adapter = EventAdapter(reader)

        recorder = open_recorder(args.record)
        if recorder:
            from algoviz.viz.frames import grid_frame, sort_frame
        top = max(reader.initial_values, default=1)

        last = None
        try:
            for last in adapter.run():
                if recorder:
                    frame = sort_frame(last, max_value=top) if kind == KIND_SORT else grid_frame(last)
                    recorder.capture_frame(frame)
        finally:
            if recorder:
                recorder.stop()

    print(f"Replayed {adapter.step_count} steps.")
    if kind == KIND_SORT and last is not None:
        print(list(last.array))


def cmd_benchmark(args):
    from algoviz.algo.dfs import RecursiveBacktracker

    logger.info(f"Running Solver Benchmark Suite (Size: {args.size}x{args.size})...")
    t0 = time.time()
    grid = RecursiveBacktracker(args.size, args.size, seed=args.seed).run_all()
    logger.info(f"Generation complete in {time.time() - t0:.4f}s")

    print(f"\n{'ALGORITHM':<22} | {'TIME (s)':<10} | {'PATH LEN':<10} | {'VISITED':<10} | {'STEPS':<10}")
    print("-" * 72)

    start_pos = (1, 1)
    end_pos = (grid.width - 2, grid.height - 2)

    for key, cls in SOLVING_ALGORITHMS.items():
        s = cls(grid)
        t_start = time.time()
        s.run_all(start_pos, end_pos)
        duration = time.time() - t_start
        print(f"{SOLVING_NAMES[key]:<22} | {duration:<10.4f} | {len(s.path):<10} | {s.visited_count:<10} | {s.step_count:<10}")


COMMANDS = {
    "sort": cmd_sort,
    "generate": cmd_generate,
    "solve": cmd_solve,
    "replay": cmd_replay,
    "benchmark": cmd_benchmark,
}


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")
    COMMANDS[args.command](args)


if __name__ == "__main__":
    main()
