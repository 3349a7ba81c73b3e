"""
Bidirectional A*: two A* frontiers expanded alternately, one from the start
toward the goal and one from the goal toward the start.

The search stops at the first cell closed by both sides. The joined path is
valid but not guaranteed to be the shortest one.
"""

import heapq
import itertools
import math

from pathfinding_base import PathfindingAlgorithm
from pathfinding_utils import manhattan_distance


class _Frontier:
    """Per-direction open set, costs, parents and closed flags"""

    def __init__(self, grid, origin, target, mirror_to_cells=False):
        size = len(grid.cells)
        self.grid = grid
        self.target = target
        self.mirror_to_cells = mirror_to_cells
        self.g = [math.inf] * size
        self.parent = [None] * size
        self.closed = [False] * size
        self.open_set = []
        self.counter = itertools.count()

        index = grid.index_of(origin.x, origin.y)
        self.g[index] = 0.0
        self._push(origin, index, 0.0)
        if mirror_to_cells:
            origin.g_cost = 0.0
            origin.h_cost = float(manhattan_distance(origin, target))

    def _push(self, cell, index, g):
        f = g + manhattan_distance(cell, self.target)
        heapq.heappush(self.open_set, (f, next(self.counter), index))

    def pop_unclosed(self):
        """Pop the best cell not yet closed by this side, or None when exhausted"""
        while self.open_set:
            _, _, index = heapq.heappop(self.open_set)
            if not self.closed[index]:
                return index
        return None

    def relax_neighbors(self, index, observer):
        grid = self.grid
        current = grid.cells[index]
        for neighbor in grid.navigable_neighbor_cells(current):
            nidx = grid.index_of(neighbor.x, neighbor.y)
            if self.closed[nidx]:
                continue
            new_g = self.g[index] + 1.0
            if new_g < self.g[nidx]:
                self.g[nidx] = new_g
                self.parent[nidx] = index
                self._push(neighbor, nidx, new_g)
                if self.mirror_to_cells:
                    neighbor.g_cost = new_g
                    neighbor.h_cost = float(manhattan_distance(neighbor, self.target))
                    neighbor.parent = current
                if observer is not None:
                    observer.on_frontier(neighbor)

    def chain(self, index):
        """Indices from index back to this side's origin"""
        out = []
        limit = len(self.g)
        while index is not None:
            out.append(index)
            if len(out) > limit:
                raise RuntimeError("Bidirectional parent chain does not terminate")
            index = self.parent[index]
        return out


class BidirectionalAStarAlgorithm(PathfindingAlgorithm):
    algorithm_name = 'Bidirectional A*'

    def __init__(self, grid, timeout_ms=None):
        super().__init__(grid, timeout_ms)
        self.forward = None
        self.backward = None
        self.meeting_index = None

    def _search(self, start, goal, observer, timer):
        grid = self.grid
        self.forward = _Frontier(grid, start, goal, mirror_to_cells=True)
        self.backward = _Frontier(grid, goal, start)
        self.meeting_index = None
        visited = []

        while self.forward.open_set or self.backward.open_set:
            if timer.is_timeout():
                return False, visited, True

            if self._step(self.forward, self.backward, visited, observer):
                return True, visited, False
            if self._step(self.backward, self.forward, visited, observer):
                return True, visited, False

        return False, visited, False

    def _step(self, side, other, visited, observer):
        """Advance one side by one pop/relax; True when the frontiers meet"""
        index = side.pop_unclosed()
        if index is None:
            return False

        cell = self.grid.cells[index]
        side.closed[index] = True
        cell.search_closed = True
        visited.append(cell)
        if observer is not None:
            observer.on_visit(cell)

        if other.closed[index]:
            self.meeting_index = index
            return True

        side.relax_neighbors(index, observer)
        return False

    def _build_path(self, start, goal):
        cells = self.grid.cells
        # start -> meeting
        indices = list(reversed(self.forward.chain(self.meeting_index)))
        # predecessor of meeting on the backward side -> goal
        backward_next = self.backward.parent[self.meeting_index]
        if backward_next is not None:
            indices.extend(self.backward.chain(backward_next))
        return [cells[i] for i in indices]

    @property
    def meeting_cell(self):
        if self.meeting_index is None:
            return None
        return self.grid.cells[self.meeting_index]
