import unittest

from astar_algorithm import AStarAlgorithm
from bfs_utilities import BFSUtilities
from bidirectional_astar import BidirectionalAStarAlgorithm
from dijkstra_algorithm import DijkstraAlgorithm
from grid import Grid
from jump_point_search import JumpPointSearchAlgorithm
from maze_generator import MazeGenerator, generate_maze
from path_validator import validate_path
from step_observer import CallbackObserver, RecordingObserver

ALL_ALGORITHMS = (DijkstraAlgorithm, AStarAlgorithm, BidirectionalAStarAlgorithm, JumpPointSearchAlgorithm)

LOOP_MAZE = (
    "#######\n"
    "#S    #\n"
    "# ### #\n"
    "#    E#\n"
    "#######\n"
)


def fixed_maze():
    return MazeGenerator(7, 7, chooser=lambda options: options[0]).generate_maze()


def wall_off_goal(grid):
    for x, y in grid.navigable_neighbors(*grid.goal):
        grid.set_wall(x, y)
    return grid


class TestShortestPaths(unittest.TestCase):
    def test_dijkstra_and_astar_match_bfs_optimum(self):
        for seed in (3, 11, 2024):
            grid = generate_maze(31, 21, seed=seed)
            optimum = BFSUtilities(grid).bfs_shortest_path_length()
            dijkstra = DijkstraAlgorithm(grid).solve()
            astar = AStarAlgorithm(grid).solve()
            self.assertTrue(dijkstra.success and astar.success)
            self.assertEqual(dijkstra.metrics.path_length, optimum)
            self.assertEqual(astar.metrics.path_length, optimum)
            self.assertLessEqual(astar.metrics.nodes_explored, dijkstra.metrics.nodes_explored)

    def test_bidirectional_and_jps_paths_valid(self):
        for seed in (3, 11, 2024):
            grid = generate_maze(31, 21, seed=seed)
            optimum = BFSUtilities(grid).bfs_shortest_path_length()
            for algorithm in (BidirectionalAStarAlgorithm, JumpPointSearchAlgorithm):
                result = algorithm(grid).solve()
                self.assertTrue(result.success, algorithm.algorithm_name)
                self.assertTrue(validate_path(grid, result.path))
                self.assertGreaterEqual(result.metrics.path_length, optimum)

    def test_all_results_validate(self):
        grid = generate_maze(25, 25, seed=8)
        for algorithm in ALL_ALGORITHMS:
            result = algorithm(grid).solve()
            self.assertTrue(result.success)
            self.assertEqual(result.metrics.path_length, len(result.path))
            self.assertEqual(result.metrics.nodes_explored, len(result.visited_order))
            self.assertGreater(result.metrics.elapsed_ms, 0)
            self.assertIs(result.path[0], grid.start_cell)
            self.assertIs(result.path[-1], grid.goal_cell)
            self.assertTrue(validate_path(grid, result.path))

    def test_resolve_is_idempotent(self):
        grid = generate_maze(21, 21, seed=17)
        for algorithm in ALL_ALGORITHMS:
            solver = algorithm(grid)
            first = solver.solve()
            grid.reset_for_solve()
            second = solver.solve()
            self.assertEqual(first.path_positions, second.path_positions)
            self.assertEqual(first.visited_positions, second.visited_positions)
            self.assertEqual(first.metrics.path_length, second.metrics.path_length)

    def test_minimum_maze_solvable(self):
        grid = generate_maze(5, 5)
        for algorithm in ALL_ALGORITHMS:
            result = algorithm(grid).solve()
            self.assertTrue(result.success)
            self.assertEqual(result.metrics.path_length, 5)

    def test_start_equals_goal(self):
        grid = generate_maze(9, 9, seed=1)
        grid.set_endpoints((1, 1), (1, 1))
        for algorithm in ALL_ALGORITHMS:
            result = algorithm(grid).solve()
            self.assertTrue(result.success)
            self.assertEqual(result.path_positions, [(1, 1)])
            self.assertEqual(result.metrics.path_length, 1)

    def test_loop_grid(self):
        grid = Grid.from_ascii(LOOP_MAZE)
        for algorithm in ALL_ALGORITHMS:
            result = algorithm(grid).solve()
            self.assertTrue(result.success)
            self.assertTrue(validate_path(grid, result.path))
            self.assertEqual(result.metrics.path_length, 7)


class TestFailureModes(unittest.TestCase):
    def test_goal_walled_off(self):
        grid = wall_off_goal(generate_maze(11, 11, seed=4))
        reachable = BFSUtilities(grid).flood_fill_reachable_area(grid.start, return_distances=False)
        for algorithm in ALL_ALGORITHMS:
            result = algorithm(grid).solve()
            self.assertFalse(result.success)
            self.assertFalse(result.timed_out)
            self.assertEqual(result.path, ())
            self.assertEqual(result.metrics.path_length, 0)
            self.assertTrue(result.visited_order)

        for algorithm in (DijkstraAlgorithm, AStarAlgorithm):
            result = algorithm(grid).solve()
            self.assertEqual(set(result.visited_positions), reachable)
            self.assertEqual(len(result.visited_order), len(reachable))

        # Both sides record closures; the backward side only closes the goal
        result = BidirectionalAStarAlgorithm(grid).solve()
        self.assertLessEqual(reachable, set(result.visited_positions))
        self.assertEqual(set(result.visited_positions) - reachable, {grid.goal})

    def test_out_of_bounds_goal(self):
        grid = generate_maze(9, 9, seed=2)
        grid.goal = (40, 40)
        for algorithm in ALL_ALGORITHMS:
            result = algorithm(grid).solve()
            self.assertFalse(result.success)
            self.assertEqual(result.visited_order, ())
            self.assertEqual(result.metrics.nodes_explored, 0)

    def test_start_on_wall(self):
        grid = generate_maze(9, 9, seed=2)
        grid.start = (0, 0)
        for algorithm in ALL_ALGORITHMS:
            self.assertFalse(algorithm(grid).solve().success)

    def test_timeout_returns_unsuccessful(self):
        grid = generate_maze(21, 21, seed=6)
        for algorithm in ALL_ALGORITHMS:
            result = algorithm(grid, timeout_ms=-1).solve()
            self.assertFalse(result.success)
            self.assertTrue(result.timed_out)
            self.assertEqual(result.path, ())


class TestAlgorithmDetails(unittest.TestCase):
    def test_jps_expands_only_jump_points(self):
        grid = fixed_maze()
        jps = JumpPointSearchAlgorithm(grid).solve()
        dijkstra = DijkstraAlgorithm(grid).solve()
        self.assertEqual(jps.visited_positions, [(1, 1), (1, 5), (3, 5), (3, 1), (5, 1), (5, 5)])
        self.assertEqual(jps.path_positions, dijkstra.path_positions)
        self.assertEqual(jps.metrics.path_length, 17)
        self.assertLess(jps.metrics.nodes_explored, dijkstra.metrics.nodes_explored)

    def test_jps_relaxes_with_straight_line_cost(self):
        grid = fixed_maze()
        JumpPointSearchAlgorithm(grid).solve()
        corner = grid.at(1, 5)
        self.assertEqual(corner.g_cost, 4.0)
        self.assertIs(corner.parent, grid.at(1, 1))

    def test_astar_sets_manhattan_heuristic(self):
        grid = fixed_maze()
        AStarAlgorithm(grid).solve()
        cell = grid.at(1, 3)
        self.assertEqual(cell.g_cost, 2.0)
        self.assertEqual(cell.h_cost, 4.0 + 2.0)
        self.assertEqual(cell.f_cost, 8.0)
        self.assertIs(cell.parent, grid.at(1, 2))

    def test_bidirectional_meeting_cell_on_path(self):
        grid = generate_maze(21, 21, seed=12)
        solver = BidirectionalAStarAlgorithm(grid)
        result = solver.solve()
        self.assertTrue(result.success)
        self.assertIn(solver.meeting_cell, result.path)
        self.assertEqual(len(set(result.path_positions)), len(result.path))

    def test_dijkstra_distance_map(self):
        grid = generate_maze(15, 15, seed=21)
        solver = DijkstraAlgorithm(grid)
        distances, previous = solver.get_all_shortest_paths()
        result = solver.solve()
        self.assertEqual(distances[grid.goal] + 1, result.metrics.path_length)
        self.assertIsNone(previous[grid.start])

    def test_statistics_dict(self):
        grid = fixed_maze()
        solver = JumpPointSearchAlgorithm(grid)
        solver.solve()
        stats = solver.get_statistics()
        self.assertEqual(stats['algorithm'], 'Jump Point Search')
        self.assertEqual(stats['path_length'], 17)
        self.assertGreater(stats['jump_operations'], 0)


class TestStepObservation(unittest.TestCase):
    def test_recording_observer_matches_result(self):
        grid = generate_maze(15, 15, seed=9)
        for algorithm in ALL_ALGORITHMS:
            observer = RecordingObserver()
            result = algorithm(grid).solve(observer)
            self.assertEqual(observer.visited, list(result.visited_order))
            self.assertEqual(observer.events[0], ('visit', grid.start))
            self.assertTrue(all(kind in ('visit', 'frontier') for kind, _ in observer.events))

    def test_observer_does_not_change_outcome(self):
        grid = generate_maze(15, 15, seed=9)
        for algorithm in ALL_ALGORITHMS:
            plain = algorithm(grid).solve()
            observed = algorithm(grid).solve(RecordingObserver())
            self.assertEqual(plain.path_positions, observed.path_positions)
            self.assertEqual(plain.visited_positions, observed.visited_positions)

    def test_callback_gets_exactly_one_cell(self):
        grid = generate_maze(11, 11, seed=5)
        calls = []
        observer = CallbackObserver(lambda visited, frontier: calls.append((visited, frontier)))
        result = AStarAlgorithm(grid).solve(observer)
        self.assertTrue(calls)
        for visited, frontier in calls:
            self.assertTrue((visited is None) != (frontier is None))
        self.assertEqual(sum(1 for v, _ in calls if v is not None), result.metrics.nodes_explored)


if __name__ == '__main__':
    unittest.main()
