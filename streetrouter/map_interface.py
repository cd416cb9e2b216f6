"""Entry points for map events and the signals they raise."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from streetrouter.data_types import LatLon

logger = logging.getLogger(__name__)


class Signal:
    """A list of callbacks that are all called when the signal is emitted."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[..., Any]] = []

    def connect(self, callback: Callable[..., Any]) -> None:
        self._callbacks.append(callback)

    def disconnect(self, callback: Callable[..., Any]) -> None:
        """Remove a connected callback; raises ValueError if it was not connected."""
        self._callbacks.remove(callback)

    def emit(self, *args: Any) -> None:
        for callback in list(self._callbacks):
            callback(*args)


class MapInterface:
    """Receives events from the map page and re-emits them as signals."""

    def __init__(self) -> None:
        self.map_ready = Signal()
        self.node_selection_requested = Signal()
        self.obstacle_marker_drawn = Signal()
        self.obstacle_area_drawn = Signal()

    def on_map_loaded(self) -> None:
        logger.debug("Map fully loaded and ready.")
        self.map_ready.emit()

    def on_node_click(self, node_id: int) -> None:
        logger.debug("Node clicked: ID = %s", node_id)
        self.node_selection_requested.emit(node_id)

    def on_obstacle_marker_drawn(self, lat: float, lon: float) -> None:
        logger.debug("Obstacle marker drawn at lat %s, lon %s", lat, lon)
        self.obstacle_marker_drawn.emit(LatLon(lat, lon))

    def on_obstacle_area_drawn(
        self, min_lat: float, min_lon: float, max_lat: float, max_lon: float
    ) -> None:
        logger.debug(
            "Obstacle area drawn: minLat=%s, minLon=%s, maxLat=%s, maxLon=%s",
            min_lat, min_lon, max_lat, max_lon,
        )
        self.obstacle_area_drawn.emit(min_lat, min_lon, max_lat, max_lon)

    def log_from_js(self, message: str) -> None:
        logger.debug("Map log: %s", message)