#!/usr/bin/env python3
"""
Robust path validation utility to ensure no wall crossing
"""

import config


class PathValidator:
    def __init__(self, grid):
        self.grid = grid
        self.last_error = None

    @staticmethod
    def _coords(item):
        if hasattr(item, 'x'):
            return (item.x, item.y)
        return (item[0], item[1])

    def is_position_valid(self, pos):
        """Check if a position is valid (within bounds and not a wall)"""
        x, y = self._coords(pos)
        return self.grid.is_open(x, y)

    def validate_path_strict(self, path):
        """Path must start at start, end at goal, avoid walls and use only adjacent moves"""
        self.last_error = None
        if not path:
            return self._fail("Empty path")

        coords = [self._coords(item) for item in path]
        if coords[0] != tuple(self.grid.start):
            return self._fail(f"Path doesn't start at start position {self.grid.start}")
        if coords[-1] != tuple(self.grid.goal):
            return self._fail(f"Path doesn't end at goal position {self.grid.goal}")

        # Check each position
        for pos in coords:
            if not self.is_position_valid(pos):
                return self._fail(f"Invalid position in path: {pos} (wall or out of bounds)")

        # Check adjacency for consecutive positions
        for i in range(1, len(coords)):
            if not self.are_adjacent(coords[i - 1], coords[i]):
                return self._fail(f"Non-adjacent cells at step {i}: {coords[i - 1]} -> {coords[i]}")

        return True

    def are_adjacent(self, pos1, pos2):
        """Check if two positions are adjacent (4-connected)"""
        x1, y1 = self._coords(pos1)
        x2, y2 = self._coords(pos2)
        return abs(x1 - x2) + abs(y1 - y2) == 1

    def _fail(self, reason):
        self.last_error = reason
        if getattr(config, 'STRICT_PATH_VALIDATION_LOGGING', True):
            print(f"VALIDATION FAILED: {reason}")
        return False


def validate_path(grid, path):
    return PathValidator(grid).validate_path_strict(path)
