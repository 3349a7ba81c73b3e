"""
Algorithm registry, safety wrapper and repeated-run benchmarking.

run_algorithm_safely() never lets an algorithm fault escape: crashes become
failed results with elapsed_ms = -1.0 so that a comparison over several
algorithms always completes.
"""

import time
from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum

import numpy as np

import config
from astar_algorithm import AStarAlgorithm
from bfs_utilities import BFSUtilities
from bidirectional_astar import BidirectionalAStarAlgorithm
from dijkstra_algorithm import DijkstraAlgorithm
from jump_point_search import JumpPointSearchAlgorithm
from path_validator import PathValidator
from pathfinding_base import AlgorithmResult, Metrics

FAILED_TIME = -1.0


class AlgorithmKind(Enum):
    DIJKSTRA = 'dijkstra'
    ASTAR = 'astar'
    BIDIRECTIONAL_ASTAR = 'bidirectional-astar'
    JUMP_POINT_SEARCH = 'jps'

    @property
    def display_name(self):
        return ALGORITHMS[self].algorithm_name

    @classmethod
    def parse(cls, value):
        """Accept an AlgorithmKind, its value or its name (case and -/_ insensitive)"""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace('_', '-')
        for kind in cls:
            if key in (kind.value, kind.name.lower().replace('_', '-')):
                return kind
        aliases = {'a*': cls.ASTAR, 'a-star': cls.ASTAR, 'bidirectional': cls.BIDIRECTIONAL_ASTAR,
                   'jump-point-search': cls.JUMP_POINT_SEARCH}
        if key in aliases:
            return aliases[key]
        raise ValueError(f"Unknown algorithm: {value!r}")


ALGORITHMS = {
    AlgorithmKind.DIJKSTRA: DijkstraAlgorithm,
    AlgorithmKind.ASTAR: AStarAlgorithm,
    AlgorithmKind.BIDIRECTIONAL_ASTAR: BidirectionalAStarAlgorithm,
    AlgorithmKind.JUMP_POINT_SEARCH: JumpPointSearchAlgorithm,
}

# Algorithms whose result must match the BFS optimum
OPTIMAL_ALGORITHMS = (AlgorithmKind.DIJKSTRA, AlgorithmKind.ASTAR)


@dataclass(frozen=True)
class RobustMetrics:
    best_ms: float = FAILED_TIME
    worst_ms: float = FAILED_TIME
    average_ms: float = FAILED_TIME
    median_ms: float = FAILED_TIME
    std_dev_ms: float = 0.0
    successful_runs: int = 0
    total_runs: int = 0

    @classmethod
    def from_times(cls, times_ms, total_runs):
        if not times_ms:
            return cls(total_runs=total_runs)
        times = np.asarray(times_ms, dtype=float)
        return cls(
            best_ms=float(times.min()),
            worst_ms=float(times.max()),
            average_ms=float(times.mean()),
            median_ms=float(np.median(times)),
            std_dev_ms=float(times.std()),
            successful_runs=len(times_ms),
            total_runs=total_runs,
        )

    def to_dict(self):
        return {
            'best_ms': self.best_ms,
            'worst_ms': self.worst_ms,
            'average_ms': self.average_ms,
            'median_ms': self.median_ms,
            'std_dev_ms': self.std_dev_ms,
            'successful_runs': self.successful_runs,
            'total_runs': self.total_runs,
        }


def _log(message, end='\n'):
    if getattr(config, 'ENABLE_HARNESS_LOGGING', True):
        print(message, end=end, flush=True)


def create_algorithm(kind, grid, timeout_ms=None):
    return ALGORITHMS[AlgorithmKind.parse(kind)](grid, timeout_ms=timeout_ms)


def solve(kind, grid, observer=None, timeout_ms=None):
    """Solve grid.start -> grid.goal with the given algorithm"""
    return create_algorithm(kind, grid, timeout_ms).solve(observer)


def _downgrade(result, reason):
    return AlgorithmResult(
        algorithm=result.algorithm,
        path=(),
        visited_order=result.visited_order,
        success=False,
        metrics=Metrics(0, result.metrics.nodes_explored, result.metrics.elapsed_ms),
        timed_out=result.timed_out,
        error=reason,
    )


def run_algorithm_safely(grid, kind, observer=None, logger=None, timeout_ms=None):
    """Run one solve; faults and invalid paths become failed results"""
    kind = AlgorithmKind.parse(kind)
    try:
        result = solve(kind, grid, observer=observer, timeout_ms=timeout_ms)
    except Exception as e:
        _log(f"⚠️  {kind.display_name} crashed: {e!r}")
        result = AlgorithmResult.failed(kind.display_name, error=f"{type(e).__name__}: {e}",
                                        elapsed_ms=FAILED_TIME)
        if logger is not None:
            logger.log_error('ALGORITHM_CRASHED', {'algorithm': kind.display_name, 'error': result.error})
            logger.log_result(grid, result)
        return result

    if result.success:
        validator = PathValidator(grid)
        if not validator.validate_path_strict(result.path):
            _log(f"⚠️  {kind.display_name}: path validation failed!")
            result = _downgrade(result, f"Invalid path: {validator.last_error}")
        elif kind in OPTIMAL_ALGORITHMS and getattr(config, 'VERIFY_OPTIMALITY_WITH_BFS', False):
            optimum = BFSUtilities(grid).bfs_shortest_path_length()
            if optimum != result.metrics.path_length:
                _log(f"⚠️  {kind.display_name}: path length {result.metrics.path_length} "
                     f"differs from BFS optimum {optimum}")
                result = _downgrade(result, f"Non-optimal path: {result.metrics.path_length} != {optimum}")

    if logger is not None:
        logger.log_result(grid, result)
    return result


def run_algorithm_multiple_times(grid, kind, runs=None, pause_ms=None, logger=None):
    """Sequential repeated solves; statistics over the successful run times"""
    kind = AlgorithmKind.parse(kind)
    runs = runs if runs is not None else getattr(config, 'BENCHMARK_RUNS', 3)
    pause_ms = pause_ms if pause_ms is not None else getattr(config, 'BENCHMARK_PAUSE_MS', 10)
    if runs <= 0:
        raise ValueError(f"runs must be positive, got {runs}")

    times = []
    for i in range(runs):
        _log(f"Run {i + 1}/{runs}... ", end='')
        result = run_algorithm_safely(grid, kind)
        if result.success and result.metrics.elapsed_ms > 0:
            times.append(result.metrics.elapsed_ms)
            _log(f"✓ ({result.metrics.elapsed_ms:.3f} ms)")
        else:
            _log("✗ (Failed)")
        if pause_ms and i + 1 < runs:
            time.sleep(pause_ms / 1000.0)

    metrics = RobustMetrics.from_times(times, runs)
    if logger is not None:
        logger.log_robust_metrics(grid, kind.display_name, metrics)
    return metrics


def compare_algorithms(grid, kinds=None, logger=None):
    """Run each algorithm once on the same grid; returns OrderedDict kind -> result"""
    kinds = [AlgorithmKind.parse(k) for k in kinds] if kinds else list(AlgorithmKind)
    results = OrderedDict()
    for kind in kinds:
        results[kind] = run_algorithm_safely(grid, kind, logger=logger)
    return results


def fastest_result(results):
    """Successful result with the lowest elapsed time, or None"""
    candidates = [r for r in results.values() if r.success]
    if not candidates:
        return None
    return min(candidates, key=lambda r: r.metrics.elapsed_ms)
