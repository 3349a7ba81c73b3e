"""
Cost, heuristic and timing helpers shared by all search algorithms.
"""

import time

import config


def _xy(item):
    if hasattr(item, 'x'):
        return item.x, item.y
    return item[0], item[1]


def manhattan_distance(a, b):
    """Manhattan distance between two Cells or (x, y) tuples"""
    ax, ay = _xy(a)
    bx, by = _xy(b)
    return abs(ax - bx) + abs(ay - by)


def reconstruct_path(end_cell, max_length=None):
    """Follow parent pointers from end_cell back to the root; returns root -> end."""
    path = []
    current = end_cell
    while current is not None:
        path.append(current)
        if max_length is not None and len(path) > max_length:
            raise RuntimeError(f"Parent chain from {end_cell!r} does not terminate")
        current = current.parent
    path.reverse()
    return path


def interpolate_path(points):
    """Expand straight horizontal/vertical segments into unit steps.

    points: consecutive (x, y) tuples, each pair sharing a row or a column.
    """
    if not points:
        return []
    out = [tuple(points[0])]
    for (x1, y1), (x2, y2) in zip(points, points[1:]):
        if x1 != x2 and y1 != y2:
            raise ValueError(f"Segment {(x1, y1)} -> {(x2, y2)} is not straight")
        dx = (x2 > x1) - (x2 < x1)
        dy = (y2 > y1) - (y2 < y1)
        x, y = x1, y1
        while (x, y) != (x2, y2):
            x += dx
            y += dy
            out.append((x, y))
    return out


def solve_timeout_ms(observed):
    if observed:
        return getattr(config, 'OBSERVED_SOLVE_TIMEOUT_MS', 300000)
    return getattr(config, 'SOLVE_TIMEOUT_MS', 2000)


class SolveTimer:
    """Deadline timer checked on every search iteration (no background thread)."""

    def __init__(self, timeout_ms=2000):
        self.timeout_ms = timeout_ms
        self._t0 = None
        self._deadline = None
        self._elapsed_ms = None

    def start(self):
        self._t0 = time.perf_counter()
        self._deadline = self._t0 + self.timeout_ms / 1000.0
        self._elapsed_ms = None
        return self

    def is_timeout(self):
        if self._deadline is None:
            return False
        return time.perf_counter() > self._deadline

    def elapsed_ms(self):
        if self._elapsed_ms is not None:
            return self._elapsed_ms
        if self._t0 is None:
            return 0.0
        return (time.perf_counter() - self._t0) * 1000

    def stop(self):
        """Freeze elapsed time; repeated calls return the first value."""
        if self._elapsed_ms is None:
            self._elapsed_ms = max(self.elapsed_ms(), 0.001)
        return self._elapsed_ms
