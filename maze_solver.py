#!/usr/bin/env python3
"""
Maze Solver - generate a perfect maze and compare pathfinding algorithms.

Examples:
    python maze_solver.py --width 31 --height 21 --algorithm all --show-path
    python maze_solver.py --algorithm astar --runs 5 --log
    python maze_solver.py --algorithm all --plot comparison.png
"""

import argparse
import sys

import config
from algorithm_runner import AlgorithmKind, fastest_result
from comparison_report import (
    format_comparison_table,
    format_metrics,
    format_robust_metrics,
    plot_comparison,
)
from grid import MazeConfigurationError
from maze_session import MazeSession
from pathfinding_data_logger import PathfindingDataLogger


def _maze_size(value):
    size = int(value)
    low = getattr(config, 'MIN_MAZE_SIZE', 5)
    high = getattr(config, 'MAX_MAZE_SIZE', 101)
    if not low <= size <= high:
        raise argparse.ArgumentTypeError(f"maze size must be between {low} and {high}")
    return size


def _algorithm(value):
    if value.lower() == 'all':
        return 'all'
    try:
        return AlgorithmKind.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser():
    size = getattr(config, 'DEFAULT_MAZE_SIZE', 21)
    p = argparse.ArgumentParser(description="Generate a perfect maze and solve it with several algorithms")
    p.add_argument('--width', type=_maze_size, default=size)
    p.add_argument('--height', type=_maze_size, default=size)
    p.add_argument('--seed', type=int, default=None, help='fixed seed for reproducible mazes')
    p.add_argument('--algorithm', type=_algorithm, default='all',
                   help='dijkstra, astar, bidirectional-astar, jps or all')
    p.add_argument('--runs', type=int, default=0, help='robust analysis: repeated runs per algorithm')
    p.add_argument('--show-maze', action='store_true')
    p.add_argument('--show-path', action='store_true')
    p.add_argument('--plot', metavar='PATH', default=None, help='save a comparison chart')
    p.add_argument('--log', action='store_true', help='save a JSON run log')
    return p


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = PathfindingDataLogger() if args.log else None
    try:
        session = MazeSession(args.width, args.height, seed=args.seed, logger=logger)
    except MazeConfigurationError as e:
        print(f"Invalid maze configuration: {e}")
        return 2

    print(f"Maze {session.width}x{session.height}  start={session.grid.start}  goal={session.grid.goal}")
    if args.show_maze:
        print(session.render(show_path=False))

    kinds = list(AlgorithmKind) if args.algorithm == 'all' else [args.algorithm]
    results = session.compare(kinds)

    for kind, result in results.items():
        print(format_metrics(kind.display_name, result))
    if len(results) > 1:
        print(format_comparison_table(results))

    if args.show_path:
        best = fastest_result(results)
        if best is not None:
            print(f"\n{best.algorithm} Path Visualization:")
            print(session.grid.to_ascii(path=best.path))
        else:
            print("No valid path found!")

    if args.runs > 0:
        print(f"\n🔬 Running Robust Analysis ({args.runs} runs per algorithm)...")
        for kind in kinds:
            metrics = session.benchmark(kind, runs=args.runs)
            print(format_robust_metrics(kind.display_name, metrics))

    if args.plot:
        plot_comparison(results, args.plot, title=f"Maze {session.width}x{session.height}")
        print(f"Chart saved to: {args.plot}")

    if logger is not None:
        logger.save_logs()

    return 0 if all(r.success for r in results.values()) else 1


if __name__ == '__main__':
    sys.exit(main())
