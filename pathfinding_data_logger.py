#!/usr/bin/env python3
"""
Pathfinding run logger: structured JSON records of solves and benchmarks.

Only maze size and a hash of the wall matrix are recorded; the maze layout
itself is never written.
"""

import hashlib
import json
import os
from datetime import datetime

import numpy as np

import config


class PathfindingDataLogger:
    def __init__(self, base_dir=None):
        self.base_dir = base_dir or getattr(config, 'LOG_DIR', 'logs')
        self.session_id = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.log_data = []

    def _get_maze_hash(self, grid):
        """Generate unique hash for maze"""
        maze_bytes = np.ascontiguousarray(grid.as_array()).tobytes()
        return hashlib.md5(maze_bytes).hexdigest()

    def _maze_info(self, grid):
        walls = grid.as_array()
        return {
            'size': f"{grid.width}x{grid.height}",
            'maze_hash': self._get_maze_hash(grid),
            'start': list(grid.start),
            'goal': list(grid.goal),
            'wall_density': float(np.mean(walls)),
        }

    def _entry(self, entry_type, **fields):
        entry = {
            'session_id': self.session_id,
            'timestamp': datetime.now().isoformat(),
            'type': entry_type,
        }
        entry.update(fields)
        self.log_data.append(entry)
        return entry

    def log_result(self, grid, result):
        m = result.metrics
        entry_type = 'SUCCESSFUL_PATH' if result.success else 'FAILED_PATH'
        path_info = result.to_dict()
        path_info['efficiency'] = m.path_length / m.nodes_explored if m.nodes_explored > 0 else 0
        return self._entry(entry_type, maze_info=self._maze_info(grid), path_info=path_info)

    def log_robust_metrics(self, grid, algorithm, metrics):
        return self._entry(
            'ROBUST_METRICS',
            maze_info=self._maze_info(grid),
            algorithm=algorithm,
            metrics=metrics.to_dict(),
        )

    def log_error(self, error_type, error_data):
        return self._entry('ERROR', error_type=error_type, error_data=error_data)

    def get_summary(self):
        results = [e for e in self.log_data if e['type'] in ('SUCCESSFUL_PATH', 'FAILED_PATH')]
        successful = [e for e in results if e['type'] == 'SUCCESSFUL_PATH']
        times = [e['path_info']['computation_time_ms'] for e in successful]
        return {
            'session_id': self.session_id,
            'total_runs': len(results),
            'successful_runs': len(successful),
            'success_rate': len(successful) / len(results) if results else 0,
            'avg_computation_time_ms': float(np.mean(times)) if times else 0.0,
            'errors': sum(1 for e in self.log_data if e['type'] == 'ERROR'),
        }

    def save_logs(self, filename=None):
        if not filename:
            filename = f"pathfinding_log_{self.session_id}.json"
        os.makedirs(self.base_dir, exist_ok=True)
        fp = os.path.join(self.base_dir, filename)
        with open(fp, 'w') as f:
            json.dump({'summary': self.get_summary(), 'entries': self.log_data}, f, indent=2, default=str)
        print(f'Logs saved to: {fp}')
        return fp
