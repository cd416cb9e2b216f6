"""Coordinates map events, the road graph and route searches."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from os import PathLike
from typing import Any

from streetrouter.data_types import LatLon, RouteSelectionMode
from streetrouter.graph_manager import GraphManager
from streetrouter.map_interface import MapInterface, Signal
from streetrouter.route_finder import RouteFinder

logger = logging.getLogger(__name__)

_NO_NODE = -1


class AppController:
    """Reacts to map events and pushes the graph state to the map display.

    The display is any callable that accepts a script command such as
    ``updateMapDisplay({...});``.
    """

    def __init__(
        self,
        graph_manager: GraphManager,
        route_finder: RouteFinder,
        map_interface: MapInterface | None = None,
        run_javascript: Callable[[str], Any] | None = None,
    ) -> None:
        self.graph_manager = graph_manager
        self.route_finder = route_finder
        self._run_javascript = run_javascript
        self.origin_node_id: int | None = None
        self.destination_node_id: int | None = None
        self.current_selection_mode = RouteSelectionMode.NONE
        self.status_message = Signal()
        self.route_found = Signal()

        if map_interface is not None:
            map_interface.map_ready.connect(self.handle_map_ready)
            map_interface.node_selection_requested.connect(self.handle_node_selection_requested)
            map_interface.obstacle_marker_drawn.connect(self.handle_obstacle_marker_drawn)
            map_interface.obstacle_area_drawn.connect(self.handle_obstacle_area_drawn)
        graph_manager.graph_updated.connect(self.update_map_display)

    def load_graph_data(self, path: str | PathLike[str]) -> bool:
        """Load nodes from a CSV file and triangulate them; return whether it worked."""
        self.status_message.emit("Loading graph data...")
        try:
            self.graph_manager.load_nodes_from_file(path)
        except (OSError, ValueError) as error:
            logger.error("Could not load node file %s: %s", path, error)
            self.status_message.emit("Failed to load graph data.")
            return False
        self.graph_manager.perform_triangulation()
        self.status_message.emit(
            "Graph loaded and triangulated successfully. "
            f"Total nodes: {len(self.graph_manager.nodes)}, "
            f"Total edges: {len(self.graph_manager.edges)}"
        )
        return True

    def find_route(self) -> list[int]:
        """Search a route between the selected nodes and report the outcome."""
        if self.origin_node_id is None or self.destination_node_id is None:
            self.status_message.emit("Please select both origin and destination nodes.")
            self.route_found.emit(False)
            return []

        self.status_message.emit("Finding route...")
        path = self.route_finder.find_route(
            self.graph_manager, self.origin_node_id, self.destination_node_id
        )
        if path:
            self.status_message.emit("Route found!")
        else:
            self.status_message.emit("No route found between selected nodes.")
        self.update_map_display()
        self.route_found.emit(bool(path))
        return path

    def clear_obstacles(self) -> None:
        self.graph_manager.clear_all_obstacles()
        self.status_message.emit("All obstacles cleared.")

    def handle_map_ready(self) -> None:
        self.status_message.emit("Map is ready. Please load graph data.")

    def handle_node_selection_requested(self, node_id: int) -> None:
        """Apply a click on a node according to the current selection mode."""
        mode = self.current_selection_mode
        if mode is RouteSelectionMode.ORIGIN:
            self.origin_node_id = node_id
            self.status_message.emit(f"Origin node selected: {node_id}")
        elif mode is RouteSelectionMode.DESTINATION:
            self.destination_node_id = node_id
            self.status_message.emit(f"Destination node selected: {node_id}")
        elif mode is RouteSelectionMode.OBSTACLE:
            self.graph_manager.toggle_obstacle_node(node_id)
            self.status_message.emit(f"Node {node_id} obstacle status toggled.")
        elif mode is RouteSelectionMode.CLEAR_OBSTACLE:
            self.graph_manager.toggle_obstacle_node(node_id)
            self.status_message.emit(f"Node {node_id} obstacle status toggled (cleared).")
        else:
            self.status_message.emit("No selection mode active. Click a UI button first.")
        self.update_map_display()

    def handle_obstacle_marker_drawn(self, coords: LatLon) -> None:
        """Toggle the obstacle mark of the node nearest to a drawn marker."""
        closest = self.graph_manager.closest_node_id(coords.lat, coords.lon)
        if closest is not None:
            self.graph_manager.toggle_obstacle_node(closest)
            self.status_message.emit(f"Obstacle added at node: {closest}")
        else:
            self.status_message.emit("No nearby node found for obstacle marker.")
        self.update_map_display()

    def handle_obstacle_area_drawn(
        self, min_lat: float, min_lon: float, max_lat: float, max_lon: float
    ) -> None:
        self.graph_manager.set_obstacle_area(min_lat, min_lon, max_lat, max_lon)
        self.status_message.emit("Obstacle area set. Nodes within area marked.")
        self.update_map_display()

    def map_display_data(self) -> dict[str, Any]:
        """The graph, current route, selections and obstacles as plain data."""
        manager = self.graph_manager
        nodes = [
            {"id": node.id, "lat": node.coords.lat, "lon": node.coords.lon}
            for node in manager.nodes
        ]
        edges = []
        for edge in manager.edges:
            u = manager.get_node(edge.u_id)
            v = manager.get_node(edge.v_id)
            edges.append(
                {
                    "startLat": u.coords.lat,
                    "startLon": u.coords.lon,
                    "endLat": v.coords.lat,
                    "endLon": v.coords.lon,
                }
            )

        path: list[int] = []
        if self.origin_node_id is not None and self.destination_node_id is not None:
            path = self.route_finder.find_route(
                manager, self.origin_node_id, self.destination_node_id
            )
        route = []
        for node_id in path:
            node = manager.get_node(node_id)
            route.append({"id": node.id, "lat": node.coords.lat, "lon": node.coords.lon})

        return {
            "nodes": nodes,
            "edges": edges,
            "route": route,
            "originNodeId": _NO_NODE if self.origin_node_id is None else self.origin_node_id,
            "destinationNodeId": (
                _NO_NODE if self.destination_node_id is None else self.destination_node_id
            ),
            "obstacleNodeIds": sorted(manager.obstacle_node_ids),
        }

    def update_map_display(self) -> str:
        """Build the display command, send it to the map if one is attached, and return it."""
        payload = json.dumps(self.map_display_data(), separators=(",", ":"), sort_keys=True)
        command = f"updateMapDisplay({payload});"
        if self._run_javascript is not None:
            self._run_javascript(command)
        return command