"""
Shared result types and the best-first search skeleton used by
Dijkstra, A* and Jump Point Search.
"""

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Optional

from pathfinding_utils import SolveTimer, reconstruct_path, solve_timeout_ms


@dataclass(frozen=True)
class Metrics:
    path_length: int = 0  # Number of cells in the path, start and goal included
    nodes_explored: int = 0
    elapsed_ms: float = 0.0  # -1.0 marks a run that crashed


@dataclass(frozen=True)
class AlgorithmResult:
    algorithm: str = ''
    path: tuple = ()
    visited_order: tuple = ()
    success: bool = False
    metrics: Metrics = field(default_factory=Metrics)
    timed_out: bool = False
    error: Optional[str] = None

    @property
    def path_positions(self):
        return [cell.position for cell in self.path]

    @property
    def visited_positions(self):
        return [cell.position for cell in self.visited_order]

    def to_dict(self):
        return {
            'algorithm': self.algorithm,
            'success': self.success,
            'timed_out': self.timed_out,
            'error': self.error,
            'path': self.path_positions,
            'path_length': self.metrics.path_length,
            'nodes_explored': self.metrics.nodes_explored,
            'computation_time_ms': self.metrics.elapsed_ms,
        }

    @classmethod
    def failed(cls, algorithm, error=None, elapsed_ms=0.0, visited_order=(), timed_out=False):
        return cls(
            algorithm=algorithm,
            visited_order=tuple(visited_order),
            success=False,
            metrics=Metrics(0, len(visited_order), elapsed_ms),
            timed_out=timed_out,
            error=error,
        )


class PathfindingAlgorithm:
    """Base class for grid pathfinding algorithms"""

    algorithm_name = 'Pathfinding'

    def __init__(self, grid, timeout_ms=None):
        self.grid = grid
        self.timeout_ms = timeout_ms  # None = pick from config depending on observation
        self.nodes_explored = 0
        self.computation_time_ms = 0.0
        self.path_length = 0
        self.last_result = None

    def reset_stats(self):
        self.nodes_explored = 0
        self.computation_time_ms = 0.0
        self.path_length = 0
        self.last_result = None

    def solve(self, observer=None):
        """Run one search from grid.start to grid.goal and return an AlgorithmResult."""
        self.reset_stats()
        grid = self.grid
        grid.reset_for_solve()
        start, goal = grid.start_cell, grid.goal_cell

        if not self._validate_positions(start, goal):
            return self._finish(AlgorithmResult(algorithm=self.algorithm_name))

        if start is goal:
            start.g_cost = 0.0
            start.search_closed = True
            if observer is not None:
                observer.on_visit(start)
            return self._finish(AlgorithmResult(
                algorithm=self.algorithm_name,
                path=(start,),
                visited_order=(start,),
                success=True,
                metrics=Metrics(1, 1, 0.0),
            ))

        timeout = self.timeout_ms if self.timeout_ms is not None else solve_timeout_ms(observer is not None)
        timer = SolveTimer(timeout).start()
        success, visited, timed_out = self._search(start, goal, observer, timer)
        elapsed = timer.stop()

        # Path reconstruction is excluded from timing
        path = tuple(self._build_path(start, goal)) if success else ()
        return self._finish(AlgorithmResult(
            algorithm=self.algorithm_name,
            path=path,
            visited_order=tuple(visited),
            success=success,
            metrics=Metrics(len(path), len(visited), elapsed),
            timed_out=timed_out,
        ))

    def _finish(self, result):
        self.nodes_explored = result.metrics.nodes_explored
        self.computation_time_ms = result.metrics.elapsed_ms
        self.path_length = result.metrics.path_length
        self.last_result = result
        return result

    @staticmethod
    def _validate_positions(start, goal):
        return start is not None and goal is not None and not start.is_wall and not goal.is_wall

    # ------------------------------------------------------------------
    # Best-first skeleton
    # ------------------------------------------------------------------

    def _heuristic(self, cell, goal):
        return 0.0

    def _priority(self, cell):
        return cell.g_cost

    def _successors(self, current, goal):
        """(neighbor_cell, step_cost) pairs reachable from current"""
        for neighbor in self.grid.navigable_neighbor_cells(current):
            yield neighbor, 1.0

    def _search(self, start, goal, observer, timer):
        """Returns (success, visited_order, timed_out)"""
        cells = self.grid.cells
        width = self.grid.width
        counter = itertools.count()  # FIFO among equal keys
        visited = []

        start.g_cost = 0.0
        start.h_cost = self._heuristic(start, goal)
        open_set = [(self._priority(start), next(counter), start.y * width + start.x)]

        while open_set:
            if timer.is_timeout():
                return False, visited, True

            _, _, index = heapq.heappop(open_set)
            current = cells[index]
            if current.search_closed:
                continue  # Stale duplicate entry

            current.search_closed = True
            visited.append(current)
            if observer is not None:
                observer.on_visit(current)

            if current is goal:
                return True, visited, False

            for neighbor, cost in self._successors(current, goal):
                if neighbor.search_closed:
                    continue
                new_g = current.g_cost + cost
                if new_g < neighbor.g_cost:
                    neighbor.g_cost = new_g
                    neighbor.h_cost = self._heuristic(neighbor, goal)
                    neighbor.parent = current
                    heapq.heappush(open_set, (self._priority(neighbor), next(counter),
                                              neighbor.y * width + neighbor.x))
                    if observer is not None:
                        observer.on_frontier(neighbor)

        return False, visited, False

    def _build_path(self, start, goal):
        return reconstruct_path(goal, max_length=len(self.grid.cells))

    def get_statistics(self):
        return {
            'algorithm': self.algorithm_name,
            'nodes_explored': self.nodes_explored,
            'computation_time_ms': self.computation_time_ms,
            'path_length': self.path_length,
        }
