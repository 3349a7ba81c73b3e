import random
import time

import config
from grid import Grid, MazeConfigurationError


class MazeGenerator:
    """
    Perfect maze generator using randomized recursive backtracking (iterative DFS).

    Rooms are the cells with both coordinates odd; the cells between rooms
    start as walls and are knocked down as the DFS carves a spanning tree.
    """

    def __init__(self, width=21, height=21, seed=None, chooser=None):
        self.width = self._normalize_dimension(width, 'width')
        self.height = self._normalize_dimension(height, 'height')
        self.seed = seed
        self.chooser = chooser  # Optional fixed carve order: chooser(candidates) -> candidate
        self.grid = None
        self.start = (1, 1)
        self.goal = (self.width - 2, self.height - 2)
        self.carve_steps = 0

    @staticmethod
    def _normalize_dimension(value, name):
        if isinstance(value, bool) or not isinstance(value, int):
            raise MazeConfigurationError(f"{name} must be an integer, got {value!r}")
        if value <= 0:
            raise MazeConfigurationError(f"{name} must be positive, got {value}")
        value = max(value, getattr(config, 'MIN_MAZE_SIZE', 5))
        return value if value % 2 == 1 else value + 1

    def _make_rng(self):
        # Fresh generator per call; clock-seeded unless a seed was given
        if self.seed is not None:
            return random.Random(self.seed)
        return random.Random(time.perf_counter_ns())

    def generate_maze(self):
        grid = Grid(self.width, self.height, start=self.start, goal=self.goal)

        # Initialize: walls everywhere except room cells
        for cell in grid.cells:
            cell.is_wall = not (cell.x % 2 == 1 and cell.y % 2 == 1)

        rng = self._make_rng()
        choose = self.chooser or rng.choice

        stack = []
        start_x, start_y = self.start
        first = grid.at(start_x, start_y)
        first.generation_visited = True
        stack.append(first)
        self.carve_steps = 0

        while stack:
            current = stack[-1]
            neighbors = self.get_unvisited_neighbors(grid, current.x, current.y)
            if neighbors:
                nx, ny = choose(neighbors)
                # Remove wall between current and neighbor
                grid.at((current.x + nx) // 2, (current.y + ny) // 2).is_wall = False
                room = grid.at(nx, ny)
                room.is_wall = False
                room.generation_visited = True
                stack.append(room)
                self.carve_steps += 1
            else:
                stack.pop()

        grid.reset_generation_state()
        grid.reset_for_solve()

        # Ensure start and goal are open
        grid.open_cell(*self.start)
        grid.open_cell(*self.goal)

        self.grid = grid
        return grid

    def get_unvisited_neighbors(self, grid, x, y):
        """Unvisited rooms two steps away (N, S, E, W) strictly inside the border"""
        neighbors = []
        for dx, dy in ((0, -2), (0, 2), (2, 0), (-2, 0)):
            nx, ny = x + dx, y + dy
            if 0 < nx < self.width - 1 and 0 < ny < self.height - 1 and not grid.at(nx, ny).generation_visited:
                neighbors.append((nx, ny))
        return neighbors


def generate_maze(width=21, height=21, seed=None):
    """Build and carve a grid with start=(1, 1) and goal=(width-2, height-2)."""
    return MazeGenerator(width, height, seed=seed).generate_maze()
