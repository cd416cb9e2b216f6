"""A* search for the shortest obstacle-free route through the road graph."""

from __future__ import annotations

import heapq
import itertools
import logging
import math

from streetrouter.data_types import Node
from streetrouter.graph_manager import GraphManager, haversine_distance

logger = logging.getLogger(__name__)


class RouteFinder:
    """Finds routes between nodes with A*, using great-circle distance."""

    def calculate_heuristic(self, current: Node, goal: Node) -> float:
        """Great-circle distance in kilometres between two nodes."""
        return haversine_distance(
            current.coords.lat, current.coords.lon, goal.coords.lat, goal.coords.lon
        )

    def find_route(
        self, graph_manager: GraphManager, origin_id: int, dest_id: int
    ) -> list[int]:
        """Return node ids from origin to destination, or an empty list if there is no route.

        Obstacle nodes are never entered; if either end is an obstacle or an
        unknown id, the result is empty.
        """
        logger.debug("Searching route from %s to %s", origin_id, dest_id)

        if graph_manager.is_obstacle(origin_id):
            logger.warning("Origin node %s is an obstacle. Cannot find route.", origin_id)
            return []
        if graph_manager.is_obstacle(dest_id):
            logger.warning("Destination node %s is an obstacle. Cannot find route.", dest_id)
            return []
        if origin_id not in graph_manager or dest_id not in graph_manager:
            logger.warning("No route: node %s or %s not found.", origin_id, dest_id)
            return []

        goal = graph_manager.get_node(dest_id)
        g_score = {node.id: math.inf for node in graph_manager.nodes}
        g_score[origin_id] = 0.0
        came_from: dict[int, int] = {}
        tie_breaker = itertools.count()
        open_set = [
            (
                self.calculate_heuristic(graph_manager.get_node(origin_id), goal),
                next(tie_breaker),
                origin_id,
            )
        ]

        while open_set:
            _, _, current_id = heapq.heappop(open_set)
            if current_id == dest_id:
                path = self._reconstruct(came_from, origin_id, current_id)
                logger.debug("Route found with %d nodes.", len(path))
                return path

            current = graph_manager.get_node(current_id)
            for neighbor_id in current.neighbors:
                if graph_manager.is_obstacle(neighbor_id):
                    continue
                neighbor = graph_manager.get_node(neighbor_id)
                tentative = g_score[current_id] + haversine_distance(
                    current.coords.lat, current.coords.lon,
                    neighbor.coords.lat, neighbor.coords.lon,
                )
                if tentative < g_score.get(neighbor_id, math.inf):
                    came_from[neighbor_id] = current_id
                    g_score[neighbor_id] = tentative
                    f_score = tentative + self.calculate_heuristic(neighbor, goal)
                    heapq.heappush(open_set, (f_score, next(tie_breaker), neighbor_id))

        logger.warning("No route found from %s to %s", origin_id, dest_id)
        return []

    @staticmethod
    def _reconstruct(came_from: dict[int, int], origin_id: int, dest_id: int) -> list[int]:
        path = [dest_id]
        while path[-1] != origin_id:
            path.append(came_from[path[-1]])
        path.reverse()
        return path