"""
Step observation sinks for visualization and replay.

Algorithms call on_visit(cell) when a cell is closed and on_frontier(cell)
each time a cell's cost improves and it is queued. Observers only watch;
they never mutate the grid or change the search outcome.
"""

import time

import config


class StepObserver:
    def on_visit(self, cell):
        pass

    def on_frontier(self, cell):
        pass


class CallbackObserver(StepObserver):
    """Adapts a callback(visited_cell, frontier_cell) function; one argument is always None."""

    def __init__(self, callback, delay_ms=0):
        self.callback = callback
        self.delay_ms = delay_ms

    def on_visit(self, cell):
        self.callback(cell, None)
        self._pause()

    def on_frontier(self, cell):
        self.callback(None, cell)
        self._pause()

    def _pause(self):
        if self.delay_ms > 0:
            time.sleep(self.delay_ms / 1000.0)


class RecordingObserver(StepObserver):
    def __init__(self):
        self.visited = []
        self.frontier = []
        self.events = []  # ('visit' | 'frontier', (x, y))

    def on_visit(self, cell):
        self.visited.append(cell)
        self.events.append(('visit', cell.position))

    def on_frontier(self, cell):
        self.frontier.append(cell)
        self.events.append(('frontier', cell.position))


class AnimationFrame:
    def __init__(self, visited_cells=None, frontier_cells=None, path_cells=None):
        self.visited_cells = list(visited_cells or [])
        self.frontier_cells = list(frontier_cells or [])
        self.path_cells = list(path_cells or [])

    def __repr__(self):
        return (f"AnimationFrame(visited={len(self.visited_cells)}, "
                f"frontier={len(self.frontier_cells)}, path={len(self.path_cells)})")


class FrameObserver(RecordingObserver):
    """Emits a cumulative AnimationFrame after every event, paced by delay_ms."""

    def __init__(self, on_frame=None, delay_ms=0):
        super().__init__()
        self.on_frame = on_frame
        self.delay_ms = delay_ms
        self.frame_count = 0

    def on_visit(self, cell):
        super().on_visit(cell)
        self._emit()

    def on_frontier(self, cell):
        super().on_frontier(cell)
        self._emit()

    def _emit(self):
        self.frame_count += 1
        if self.on_frame is not None:
            self.on_frame(AnimationFrame(self.visited, self.frontier))
        if self.delay_ms > 0:
            time.sleep(self.delay_ms / 1000.0)

    def final_frame(self, path):
        return AnimationFrame(self.visited, [], path)


def pacing_delay_ms(speed):
    """Delay between animation events for speed 1..10 (10 = no delay)"""
    max_speed = getattr(config, 'ANIMATION_MAX_SPEED', 10)
    step = getattr(config, 'ANIMATION_DELAY_STEP_MS', 5)
    if speed >= max_speed:
        return 0
    speed = max(speed, 1)
    return (max_speed + 1 - speed) * step
