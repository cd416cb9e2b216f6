"""Geographic points, road-graph nodes and edges, and selection modes."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum, auto

_TOLERANCE = sys.float_info.epsilon * 100.0


@dataclass(eq=False)
class LatLon:
    """A latitude/longitude pair compared with a small tolerance."""

    lat: float = 0.0
    lon: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LatLon):
            return NotImplemented
        return abs(self.lat - other.lat) < _TOLERANCE and abs(self.lon - other.lon) < _TOLERANCE


@dataclass
class Node:
    """An intersection of the road graph."""

    id: int = -1
    coords: LatLon = field(default_factory=LatLon)
    neighbors: list[int] = field(default_factory=list)
    is_obstacle: bool = False


@dataclass
class Edge:
    """A weighted road segment between two node ids."""

    u_id: int = -1
    v_id: int = -1
    weight: float = 0.0


class RouteSelectionMode(Enum):
    """What a click on a map node means."""

    NONE = auto()
    ORIGIN = auto()
    DESTINATION = auto()
    OBSTACLE = auto()
    CLEAR_OBSTACLE = auto()