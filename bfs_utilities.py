"""
BFS Utilities - Maze Structure Analysis
=======================================

BFS is used for:
1. FLOOD FILL - which open cells are reachable from a position
2. SHORTEST DISTANCE - unweighted optimum used to cross-check Dijkstra/A*
3. STRUCTURE CHECKS - dead ends and perfect-maze (spanning tree) detection

BFS is NOT one of the benchmarked solvers; it is an analysis tool.
It only reads walls, never the search bookkeeping on cells.
"""

from collections import deque


class BFSUtilities:
    def __init__(self, grid):
        """
        Args:
            grid: Grid instance to analyse
        """
        self.grid = grid

        # Statistics
        self.stats = {
            'flood_fills': 0,
            'total_nodes_explored': 0
        }

    # ============================================================================
    # FLOOD FILL
    # ============================================================================

    def flood_fill_reachable_area(self, start_pos, max_distance=None, return_distances=True):
        """
        FLOOD FILL: every open position reachable from start_pos

        Args:
            start_pos: (x, y) start position
            max_distance: stop expanding beyond this many steps (None = unlimited)
            return_distances: return distances as well as positions

        Returns:
            return_distances=True: dict {position: distance}
            return_distances=False: set of positions
        """
        start_pos = tuple(start_pos)
        if not self.grid.is_open(*start_pos):
            return {} if return_distances else set()

        queue = deque([(start_pos, 0)])
        visited = {start_pos: 0}
        nodes_explored = 0

        while queue:
            current, distance = queue.popleft()
            nodes_explored += 1

            if max_distance is not None and distance >= max_distance:
                continue

            for neighbor in self.grid.navigable_neighbors(*current):
                if neighbor in visited:
                    continue
                visited[neighbor] = distance + 1
                queue.append((neighbor, distance + 1))

        self.stats['flood_fills'] += 1
        self.stats['total_nodes_explored'] += nodes_explored

        if return_distances:
            return visited
        return set(visited)

    def bfs_shortest_path_length(self, start=None, goal=None):
        """Number of cells on the shortest start -> goal path, None if unreachable"""
        start = tuple(start) if start is not None else self.grid.start
        goal = tuple(goal) if goal is not None else self.grid.goal
        distances = self.flood_fill_reachable_area(start)
        if goal not in distances:
            return None
        return distances[goal] + 1

    # ============================================================================
    # STRUCTURE CHECKS
    # ============================================================================

    def count_dead_ends(self):
        """Open cells with exactly one open neighbor"""
        return sum(
            1 for cell in self.grid.open_cells()
            if len(self.grid.navigable_neighbors(cell.x, cell.y)) == 1
        )

    def is_fully_connected(self):
        open_cells = self.grid.open_cells()
        if not open_cells:
            return False
        reachable = self.flood_fill_reachable_area(open_cells[0].position, return_distances=False)
        return len(reachable) == len(open_cells)

    def is_perfect_maze(self):
        """Connected and acyclic: open-cell adjacency forms a spanning tree"""
        open_cells = self.grid.open_cells()
        if not self.is_fully_connected():
            return False
        # Count each undirected edge once (east and south only)
        edges = 0
        for cell in open_cells:
            if self.grid.is_open(cell.x + 1, cell.y):
                edges += 1
            if self.grid.is_open(cell.x, cell.y + 1):
                edges += 1
        return edges == len(open_cells) - 1
