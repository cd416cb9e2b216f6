"""Road graph built from node coordinates by Delaunay triangulation."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Sequence
from os import PathLike

import numpy as np
from scipy.spatial import Delaunay, QhullError

from streetrouter.data_types import Edge, LatLon, Node
from streetrouter.map_interface import Signal

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|infinity|inf|nan)",
    re.IGNORECASE,
)


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres between two points given in degrees."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    a = math.sin(d_lat / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer field: {text!r}")
    return int(match.group())


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid number field: {text!r}")
    return float(match.group())


def _point_key(lat: float, lon: float) -> tuple[float, float]:
    """Single-precision (lon, lat) key used to map triangulation points to ids."""
    return float(np.float32(lon)), float(np.float32(lat))


class GraphManager:
    """Holds the road graph's nodes, edges and obstacle marks."""

    def __init__(self) -> None:
        self.graph_updated = Signal()
        self._nodes: list[Node] = []
        self._edges: list[Edge] = []
        self._index_by_id: dict[int, int] = {}
        self._id_by_point: dict[tuple[float, float], int] = {}
        self._obstacle_ids: set[int] = set()

    @property
    def nodes(self) -> Sequence[Node]:
        return tuple(self._nodes)

    @property
    def edges(self) -> Sequence[Edge]:
        return tuple(self._edges)

    @property
    def obstacle_node_ids(self) -> frozenset[int]:
        return frozenset(self._obstacle_ids)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index_by_id

    def load_nodes_from_file(self, path: str | PathLike[str]) -> int:
        """Read ``id,lat,lon`` rows after a header line; return how many were loaded.

        Rows with fewer than three fields are skipped; a field that is not a
        number raises ValueError; a file that cannot be opened raises OSError.
        """
        logger.debug("Loading nodes from %s", path)
        with open(path, encoding="utf-8") as handle:
            self._nodes.clear()
            self._index_by_id.clear()
            self._id_by_point.clear()
            next(handle, None)
            count = 0
            for line in handle:
                fields = line.rstrip("\n").split(",")
                if fields[-1] == "":
                    fields.pop()
                if len(fields) < 3:
                    continue
                node_id = _parse_int(fields[0])
                lat = _parse_float(fields[1])
                lon = _parse_float(fields[2])
                self._nodes.append(Node(node_id, LatLon(lat, lon)))
                self._index_by_id[node_id] = len(self._nodes) - 1
                self._id_by_point[_point_key(lat, lon)] = node_id
                count += 1
        logger.debug("Loaded %d nodes.", count)
        self.graph_updated.emit()
        return count

    def perform_triangulation(self) -> None:
        """Replace the edges with those of the Delaunay triangulation of the nodes."""
        self._edges.clear()
        for node in self._nodes:
            node.neighbors.clear()
        if not self._nodes:
            logger.warning("No nodes loaded for triangulation.")
            return

        keys = list(self._id_by_point)
        ids = [self._id_by_point[key] for key in keys]
        unique_edges: set[tuple[int, int]] = set()

        def add_edge_if_new(u: int, v: int) -> None:
            if u == v:
                return
            pair = (min(u, v), max(u, v))
            if pair in unique_edges:
                return
            unique_edges.add(pair)
            node_u = self.get_node(u)
            node_v = self.get_node(v)
            weight = haversine_distance(
                node_u.coords.lat, node_u.coords.lon, node_v.coords.lat, node_v.coords.lon
            )
            self._edges.append(Edge(u, v, weight))
            node_u.neighbors.append(v)
            node_v.neighbors.append(u)

        if len(keys) >= 3:
            try:
                triangulation = Delaunay(np.array(keys, dtype=np.float64))
            except (QhullError, ValueError):
                logger.debug("Points are degenerate; no triangles formed.")
            else:
                for simplex in triangulation.simplices:
                    id1, id2, id3 = (ids[int(i)] for i in simplex)
                    add_edge_if_new(id1, id2)
                    add_edge_if_new(id2, id3)
                    add_edge_if_new(id3, id1)

        logger.debug("Triangulation complete. Found %d edges.", len(self._edges))
        self.graph_updated.emit()

    def closest_node_id(self, lat: float, lon: float) -> int | None:
        """Id of the node nearest to the point, or None when there are no nodes."""
        closest: int | None = None
        best = math.inf
        for node in self._nodes:
            distance = haversine_distance(lat, lon, node.coords.lat, node.coords.lon)
            if distance < best:
                best = distance
                closest = node.id
        logger.debug("Closest node to (%s, %s) is %s at %s km.", lat, lon, closest, best)
        return closest

    def toggle_obstacle_node(self, node_id: int) -> None:
        """Flip the obstacle mark of a node; unknown ids are logged and ignored."""
        index = self._index_by_id.get(node_id)
        if index is None:
            logger.warning("Node ID %s not found.", node_id)
            return
        node = self._nodes[index]
        node.is_obstacle = not node.is_obstacle
        if node.is_obstacle:
            self._obstacle_ids.add(node_id)
            logger.debug("Node %s set as obstacle.", node_id)
        else:
            self._obstacle_ids.discard(node_id)
            logger.debug("Node %s cleared as obstacle.", node_id)
        self.graph_updated.emit()

    def set_obstacle_area(
        self, min_lat: float, min_lon: float, max_lat: float, max_lon: float
    ) -> int:
        """Mark every node inside the box as an obstacle; return how many were newly marked."""
        count = 0
        for node in self._nodes:
            inside = (
                min_lat <= node.coords.lat <= max_lat
                and min_lon <= node.coords.lon <= max_lon
            )
            if inside and not node.is_obstacle:
                node.is_obstacle = True
                self._obstacle_ids.add(node.id)
                count += 1
        logger.debug("Set %d nodes as obstacles in the area.", count)
        self.graph_updated.emit()
        return count

    def clear_all_obstacles(self) -> None:
        for node in self._nodes:
            node.is_obstacle = False
        self._obstacle_ids.clear()
        self.graph_updated.emit()

    def get_node(self, node_id: int) -> Node:
        """Return the node with this id; raises KeyError if there is none."""
        index = self._index_by_id.get(node_id)
        if index is None:
            raise KeyError(f"Node ID {node_id} not found")
        return self._nodes[index]

    def is_obstacle(self, node_id: int) -> bool:
        return node_id in self._obstacle_ids