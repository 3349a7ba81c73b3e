"""
Maze session: one object owning the current Grid, exposing generate/solve
for CLI and GUI front ends. Front ends hold a session instance instead of a
process-wide singleton.
"""

import config
from algorithm_runner import (
    AlgorithmKind,
    compare_algorithms,
    run_algorithm_multiple_times,
    run_algorithm_safely,
)
from maze_generator import MazeGenerator
from step_observer import FrameObserver, pacing_delay_ms


class MazeSession:
    def __init__(self, width=None, height=None, seed=None, logger=None):
        size = getattr(config, 'DEFAULT_MAZE_SIZE', 21)
        self.width = size if width is None else width
        self.height = size if height is None else height
        self.seed = seed
        self.logger = logger
        self.grid = None
        self.last_result = None
        self.generate()

    def generate(self, width=None, height=None):
        """Replace the grid with a freshly carved maze"""
        width = self.width if width is None else width
        height = self.height if height is None else height
        generator = MazeGenerator(width, height, seed=self.seed)
        self.grid = generator.generate_maze()
        self.width, self.height = generator.width, generator.height
        self.last_result = None
        return self.grid

    def solve(self, kind, observer=None):
        self.last_result = run_algorithm_safely(self.grid, AlgorithmKind.parse(kind),
                                                observer=observer, logger=self.logger)
        return self.last_result

    def animate(self, kind, speed=10, on_frame=None):
        """Solve with per-event frames; the last frame carries the final path"""
        observer = FrameObserver(on_frame=on_frame, delay_ms=pacing_delay_ms(speed))
        result = self.solve(kind, observer=observer)
        final = observer.final_frame(result.path)
        if on_frame is not None:
            on_frame(final)
        return result, final

    def compare(self, kinds=None):
        results = compare_algorithms(self.grid, kinds, logger=self.logger)
        self.grid.reset_for_solve()
        return results

    def benchmark(self, kind, runs=None):
        return run_algorithm_multiple_times(self.grid, kind, runs=runs, logger=self.logger)

    def reset(self):
        self.grid.reset_for_solve()
        self.last_result = None

    def render(self, show_path=True):
        path = self.last_result.path if (show_path and self.last_result is not None) else None
        return self.grid.to_ascii(path=path)

    def snapshot(self):
        """Copy of the wall matrix for renderers"""
        return self.grid.as_array().copy()
