"""
Global configuration for maze generation, solving and benchmarking.
"""

# Maze dimensions (normalized to odd values by the generator)
DEFAULT_MAZE_SIZE = 21
MIN_MAZE_SIZE = 5
MAX_MAZE_SIZE = 101  # Upper bound accepted by the CLI

# Solve time budget per run (milliseconds)
SOLVE_TIMEOUT_MS = 2000  # Unattended / benchmark runs fail fast
OBSERVED_SOLVE_TIMEOUT_MS = 300000  # Step observers may pace events with delays

# Robust analysis (repeated runs)
BENCHMARK_RUNS = 3
BENCHMARK_PAUSE_MS = 10  # Cosmetic pause between runs

# Optional validation: Verify Dijkstra/A* path length equals the BFS shortest path
VERIFY_OPTIMALITY_WITH_BFS = True

# Print the reason when a path fails validation
STRICT_PATH_VALIDATION_LOGGING = True

# Logging and Debugging
ENABLE_HARNESS_LOGGING = True  # Run progress, crashes and validation failures
LOG_DIR = "logs"  # Where PathfindingDataLogger writes JSON logs

# Animation pacing (speed 1..10, 10 = no delay)
ANIMATION_MAX_SPEED = 10
ANIMATION_DELAY_STEP_MS = 5
