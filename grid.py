"""
Grid and Cell model shared by the maze generator and every search algorithm.

Cells live in one flat row-major list owned by the Grid. Coordinates are
(x, y) with x = column and y = row; the numpy view is indexed [y, x].
"""

import math

import numpy as np


# Neighbor order: North, South, East, West. Every algorithm relies on it
# for reproducible tie-breaking.
DIRECTIONS = [(0, -1), (0, 1), (1, 0), (-1, 0)]


class MazeConfigurationError(ValueError):
    """Raised for degenerate dimensions or invalid start/goal positions."""


class Cell:
    __slots__ = ('x', 'y', 'is_wall', 'generation_visited', 'search_closed',
                 'g_cost', 'h_cost', 'parent')

    def __init__(self, x=0, y=0, is_wall=False):
        self.x = x
        self.y = y
        self.is_wall = is_wall

        # Two distinct bookkeeping flags: one for carving, one for searching
        self.generation_visited = False
        self.search_closed = False

        self.g_cost = math.inf
        self.h_cost = 0.0
        self.parent = None  # Back-reference into the same grid

    @property
    def position(self):
        return (self.x, self.y)

    @property
    def f_cost(self):
        return self.g_cost + self.h_cost

    def reset_search_state(self):
        self.search_closed = False
        self.g_cost = math.inf
        self.h_cost = 0.0
        self.parent = None

    def __repr__(self):
        kind = 'wall' if self.is_wall else 'open'
        return f"Cell({self.x}, {self.y}, {kind})"


class Grid:
    """Rectangular maze grid of width x height cells."""

    def __init__(self, width, height, start=None, goal=None, fill_walls=True):
        if width <= 0 or height <= 0:
            raise MazeConfigurationError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells = [Cell(x, y, fill_walls) for y in range(height) for x in range(width)]
        self.start = tuple(start) if start is not None else (1, 1)
        self.goal = tuple(goal) if goal is not None else (width - 2, height - 2)

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------

    def index_of(self, x, y):
        return y * self.width + x

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x, y):
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return self.cells[y * self.width + x]

    def get(self, position):
        """Cell at (x, y) or None when out of bounds."""
        if position is None:
            return None
        x, y = position
        if not self.in_bounds(x, y):
            return None
        return self.cells[y * self.width + x]

    def is_open(self, x, y):
        return self.in_bounds(x, y) and not self.cells[y * self.width + x].is_wall

    @property
    def start_cell(self):
        return self.get(self.start)

    @property
    def goal_cell(self):
        return self.get(self.goal)

    def neighbors4(self, x, y):
        """In-bounds orthogonal neighbors in N, S, E, W order"""
        out = []
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                out.append((nx, ny))
        return out

    def navigable_neighbors(self, x, y):
        return [(nx, ny) for nx, ny in self.neighbors4(x, y)
                if not self.cells[ny * self.width + nx].is_wall]

    def navigable_neighbor_cells(self, cell):
        return [self.cells[ny * self.width + nx] for nx, ny in self.navigable_neighbors(cell.x, cell.y)]

    # ------------------------------------------------------------------
    # State management
    # ------------------------------------------------------------------

    def reset_for_solve(self):
        """Clear search bookkeeping on every cell; must run before each solve."""
        for cell in self.cells:
            cell.reset_search_state()

    def reset_generation_state(self):
        for cell in self.cells:
            cell.generation_visited = False

    def set_endpoints(self, start, goal):
        """Move start/goal; rejects out-of-bounds or wall positions without mutating."""
        for name, pos in (('start', start), ('goal', goal)):
            cell = self.get(pos)
            if cell is None:
                raise MazeConfigurationError(f"{name} {pos} is outside the grid")
            if cell.is_wall:
                raise MazeConfigurationError(f"{name} {pos} is a wall")
        self.start = tuple(start)
        self.goal = tuple(goal)

    def open_cell(self, x, y):
        self.at(x, y).is_wall = False

    def set_wall(self, x, y, is_wall=True):
        self.at(x, y).is_wall = is_wall

    def open_cells(self):
        return [cell for cell in self.cells if not cell.is_wall]

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def as_array(self):
        """Wall matrix (1 = wall, 0 = open) indexed [y, x]"""
        walls = np.fromiter((1 if c.is_wall else 0 for c in self.cells), dtype=int, count=len(self.cells))
        return walls.reshape((self.height, self.width))

    @classmethod
    def from_array(cls, array, start=None, goal=None):
        matrix = np.asarray(array, dtype=int)
        if matrix.ndim != 2:
            raise MazeConfigurationError("Wall matrix must be two-dimensional")
        height, width = matrix.shape
        grid = cls(width, height, start=start, goal=goal, fill_walls=False)
        for cell in grid.cells:
            cell.is_wall = bool(matrix[cell.y, cell.x])
        return grid

    @classmethod
    def from_ascii(cls, text):
        """Parse the to_ascii format: '#' walls, 'S'/'E' endpoints, anything else open."""
        rows = [line for line in text.splitlines() if line]
        if not rows:
            raise MazeConfigurationError("Empty maze text")
        width = max(len(row) for row in rows)
        start = goal = None
        matrix = np.ones((len(rows), width), dtype=int)
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                matrix[y, x] = 1 if ch == '#' else 0
                if ch == 'S':
                    start = (x, y)
                elif ch == 'E':
                    goal = (x, y)
        return cls.from_array(matrix, start=start, goal=goal)

    def to_ascii(self, path=None, show_visited=False):
        marked = set()
        if path:
            marked.update(_position_of(item) for item in path)
        if show_visited:
            marked.update(cell.position for cell in self.cells if cell.search_closed)

        lines = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                if (x, y) == self.start:
                    row.append('S')
                elif (x, y) == self.goal:
                    row.append('E')
                elif self.cells[y * self.width + x].is_wall:
                    row.append('#')
                elif (x, y) in marked:
                    row.append('.')
                else:
                    row.append(' ')
            lines.append(''.join(row) + '\n')
        return ''.join(lines)

    def __repr__(self):
        return f"Grid({self.width}x{self.height}, start={self.start}, goal={self.goal})"


def _position_of(item):
    if isinstance(item, Cell):
        return item.position
    x, y = item
    return (x, y)


def render_ascii(grid, path=None):
    """'#' wall, 'S' start, 'E' goal, '.' path marker, ' ' open cell"""
    return grid.to_ascii(path=path)
