import pytest

from streetrouter.graph_manager import GraphManager, haversine_distance
from streetrouter.route_finder import RouteFinder


def _grid_manager(tmp_path):
    """3x3 grid of nodes, id = row * 3 + col, spaced 0.01 degrees apart."""
    lines = ["id,lat,lon"]
    for row in range(3):
        for col in range(3):
            lines.append(f"{row * 3 + col},{row * 0.01},{col * 0.01}")
    path = tmp_path / "nodes.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    manager = GraphManager()
    manager.load_nodes_from_file(path)
    manager.perform_triangulation()
    return manager


@pytest.fixture
def manager(tmp_path):
    return _grid_manager(tmp_path)


def _path_cost(manager, path):
    total = 0.0
    for a, b in zip(path, path[1:]):
        na, nb = manager.get_node(a), manager.get_node(b)
        total += haversine_distance(na.coords.lat, na.coords.lon, nb.coords.lat, nb.coords.lon)
    return total


def _assert_valid_path(manager, path, origin, dest):
    assert path[0] == origin
    assert path[-1] == dest
    for a, b in zip(path, path[1:]):
        assert b in manager.get_node(a).neighbors
    assert not set(path) & manager.obstacle_node_ids


def test_heuristic_matches_haversine(manager):
    finder = RouteFinder()
    a, b = manager.get_node(0), manager.get_node(8)
    expected = haversine_distance(a.coords.lat, a.coords.lon, b.coords.lat, b.coords.lon)
    assert finder.calculate_heuristic(a, b) == pytest.approx(expected)
    assert finder.calculate_heuristic(b, a) == pytest.approx(expected)


def test_heuristic_zero_for_same_node(manager):
    node = manager.get_node(4)
    assert RouteFinder().calculate_heuristic(node, node) == 0.0


def test_route_to_self(manager):
    assert RouteFinder().find_route(manager, 4, 4) == [4]


def test_route_between_neighbours(manager):
    assert RouteFinder().find_route(manager, 0, 1) == [0, 1]


def test_route_along_straight_row(manager):
    assert RouteFinder().find_route(manager, 0, 2) == [0, 1, 2]


def test_route_across_grid_is_valid(manager):
    path = RouteFinder().find_route(manager, 0, 8)
    _assert_valid_path(manager, path, 0, 8)
    origin, dest = manager.get_node(0), manager.get_node(8)
    straight = haversine_distance(origin.coords.lat, origin.coords.lon, dest.coords.lat, dest.coords.lon)
    assert _path_cost(manager, path) >= straight - 1e-9


def test_route_is_symmetric_in_cost(manager):
    finder = RouteFinder()
    forward = finder.find_route(manager, 0, 8)
    backward = finder.find_route(manager, 8, 0)
    assert _path_cost(manager, forward) == pytest.approx(_path_cost(manager, backward))


def test_route_avoids_obstacle(manager):
    manager.toggle_obstacle_node(4)
    path = RouteFinder().find_route(manager, 0, 8)
    assert path
    assert 4 not in path
    _assert_valid_path(manager, path, 0, 8)


def test_obstacle_origin_gives_no_route(manager):
    manager.toggle_obstacle_node(0)
    assert RouteFinder().find_route(manager, 0, 8) == []


def test_obstacle_destination_gives_no_route(manager):
    manager.toggle_obstacle_node(8)
    assert RouteFinder().find_route(manager, 0, 8) == []


def test_isolated_origin_gives_no_route(manager):
    for neighbor in manager.get_node(0).neighbors:
        if not manager.is_obstacle(neighbor):
            manager.toggle_obstacle_node(neighbor)
    assert RouteFinder().find_route(manager, 0, 8) == []


def test_cleared_obstacles_restore_route(manager):
    finder = RouteFinder()
    manager.toggle_obstacle_node(8)
    assert finder.find_route(manager, 0, 8) == []
    manager.clear_all_obstacles()
    path = finder.find_route(manager, 0, 8)
    _assert_valid_path(manager, path, 0, 8)


def test_unknown_node_gives_no_route(manager):
    finder = RouteFinder()
    assert finder.find_route(manager, 0, 99) == []
    assert finder.find_route(manager, 99, 0) == []


def test_empty_graph_gives_no_route():
    assert RouteFinder().find_route(GraphManager(), 1, 2) == []