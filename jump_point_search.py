"""
Jump Point Search for 4-connected uniform-cost grids.

From every expanded cell the search probes the four cardinal directions and
only queues the cells where straight travel has to stop:

- the goal;
- a forced neighbor: moving horizontally, a cell above/below the next cell
  is open while the matching cell one step back is a wall (vertical moves
  check left/right the same way).

Probes that run into a wall are abandoned. Jump points are relaxed with the
straight-line distance to them, and the final path is interpolated back to
unit steps. The rule above is a simplified forced-neighbor test: it is
complete on perfect mazes (one-cell corridors) but can miss routes through
open rooms.
"""

from grid import DIRECTIONS
from pathfinding_base import PathfindingAlgorithm
from pathfinding_utils import interpolate_path, manhattan_distance, reconstruct_path


class JumpPointSearchAlgorithm(PathfindingAlgorithm):
    algorithm_name = 'Jump Point Search'

    def __init__(self, grid, timeout_ms=None):
        super().__init__(grid, timeout_ms)
        self.jump_operations = 0

    def reset_stats(self):
        super().reset_stats()
        self.jump_operations = 0

    def _heuristic(self, cell, goal):
        return float(manhattan_distance(cell, goal))

    def _priority(self, cell):
        return cell.g_cost + cell.h_cost

    def _successors(self, current, goal):
        for dx, dy in DIRECTIONS:
            point = self._jump(current.x, current.y, dx, dy, goal)
            if point is not None:
                cell = self.grid.at(*point)
                yield cell, float(manhattan_distance(current, cell))

    def _jump(self, x, y, dx, dy, goal):
        """Step from (x, y) along (dx, dy) until a jump point; None on a dead end"""
        grid = self.grid
        self.jump_operations += 1
        while True:
            nx, ny = x + dx, y + dy
            if not grid.is_open(nx, ny):
                return None
            if (nx, ny) == (goal.x, goal.y):
                return (nx, ny)

            if dx != 0:
                for py in (-1, 1):
                    if grid.is_open(nx, ny + py) and not grid.is_open(x, y + py):
                        return (nx, ny)
            else:
                for px in (-1, 1):
                    if grid.is_open(nx + px, ny) and not grid.is_open(x + px, y):
                        return (nx, ny)
            x, y = nx, ny

    def _build_path(self, start, goal):
        jump_points = reconstruct_path(goal, max_length=len(self.grid.cells))
        positions = interpolate_path([cell.position for cell in jump_points])
        return [self.grid.at(x, y) for x, y in positions]

    def get_statistics(self):
        stats = super().get_statistics()
        stats['jump_operations'] = self.jump_operations
        return stats
