import heapq

from pathfinding_base import PathfindingAlgorithm


class DijkstraAlgorithm(PathfindingAlgorithm):
    """Dijkstra on a uniform-cost 4-connected grid: open set ordered by g only."""

    algorithm_name = 'Dijkstra'

    def get_all_shortest_paths(self, start=None):
        """Distance map from start (default grid.start) to every reachable cell.

        Returns (distances, previous) keyed by (x, y). Does not touch cell
        search state, so it is safe between solves.
        """
        start = tuple(start) if start is not None else self.grid.start
        cell = self.grid.get(start)
        if cell is None or cell.is_wall:
            return {}, {}
        distances = {start: 0}
        previous = {start: None}
        pq = [(0, start)]
        while pq:
            g, node = heapq.heappop(pq)
            if g > distances.get(node, float('inf')):
                continue
            for nb in self.grid.navigable_neighbors(*node):
                ng = g + 1
                if ng < distances.get(nb, float('inf')):
                    distances[nb] = ng
                    previous[nb] = node
                    heapq.heappush(pq, (ng, nb))
        return distances, previous
