import math

import pytest

from streetrouter.graph_manager import EARTH_RADIUS_KM, GraphManager, haversine_distance


def _write_csv(tmp_path, rows, header="id,lat,lon"):
    path = tmp_path / "nodes.csv"
    path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
    return path


def _manager(tmp_path, rows):
    manager = GraphManager()
    manager.load_nodes_from_file(_write_csv(tmp_path, rows))
    return manager


def test_haversine_same_point_is_zero():
    assert haversine_distance(10.0, 20.0, 10.0, 20.0) == 0.0


def test_haversine_equator_to_pole_is_quarter_circle():
    assert haversine_distance(0.0, 0.0, 90.0, 0.0) == pytest.approx(EARTH_RADIUS_KM * math.pi / 2)


def test_haversine_is_symmetric():
    a = haversine_distance(10.0, 20.0, 11.5, 19.0)
    b = haversine_distance(11.5, 19.0, 10.0, 20.0)
    assert a == pytest.approx(b)
    assert a > 0


def test_load_skips_header_and_short_rows(tmp_path):
    manager = GraphManager()
    path = _write_csv(tmp_path, ["1,10.0,20.0", "2,10.5", "", "3,11.0,21.0,extra"])
    assert manager.load_nodes_from_file(path) == 2
    assert [node.id for node in manager.nodes] == [1, 3]
    assert manager.get_node(3).coords.lat == 11.0
    assert manager.get_node(3).coords.lon == 21.0


def test_load_emits_graph_updated(tmp_path):
    manager = GraphManager()
    calls = []
    manager.graph_updated.connect(lambda: calls.append(True))
    manager.load_nodes_from_file(_write_csv(tmp_path, ["1,10.0,20.0"]))
    assert calls == [True]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        GraphManager().load_nodes_from_file(tmp_path / "absent.csv")


def test_load_bad_number_raises(tmp_path):
    with pytest.raises(ValueError):
        GraphManager().load_nodes_from_file(_write_csv(tmp_path, ["x,10.0,20.0"]))


def test_load_replaces_previous_nodes(tmp_path):
    manager = _manager(tmp_path, ["1,10.0,20.0", "2,11.0,21.0"])
    other = tmp_path / "other.csv"
    other.write_text("id,lat,lon\n7,1.0,2.0\n", encoding="utf-8")
    manager.load_nodes_from_file(other)
    assert [node.id for node in manager.nodes] == [7]
    with pytest.raises(KeyError):
        manager.get_node(1)


def test_triangle_gives_three_edges(tmp_path):
    manager = _manager(tmp_path, ["1,10.0,20.0", "2,10.0,21.0", "3,11.0,20.5"])
    manager.perform_triangulation()
    pairs = {frozenset((e.u_id, e.v_id)) for e in manager.edges}
    assert pairs == {frozenset((1, 2)), frozenset((2, 3)), frozenset((1, 3))}
    assert sorted(manager.get_node(1).neighbors) == [2, 3]


def test_interior_point_connects_to_all_corners(tmp_path):
    manager = _manager(
        tmp_path, ["1,10.0,20.0", "2,10.0,22.0", "3,12.0,21.0", "4,10.7,21.0"]
    )
    manager.perform_triangulation()
    assert len(manager.edges) == 6
    assert sorted(manager.get_node(4).neighbors) == [1, 2, 3]


def test_edge_weights_and_neighbors_are_consistent(tmp_path):
    manager = _manager(
        tmp_path,
        ["1,10.0,20.0", "2,10.1,20.3", "3,10.4,20.1", "4,10.5,20.6", "5,10.2,20.9"],
    )
    manager.perform_triangulation()
    assert manager.edges
    for edge in manager.edges:
        u = manager.get_node(edge.u_id)
        v = manager.get_node(edge.v_id)
        expected = haversine_distance(u.coords.lat, u.coords.lon, v.coords.lat, v.coords.lon)
        assert edge.weight == pytest.approx(expected)
        assert edge.v_id in u.neighbors
        assert edge.u_id in v.neighbors
    total_neighbors = sum(len(node.neighbors) for node in manager.nodes)
    assert total_neighbors == 2 * len(manager.edges)


def test_collinear_points_give_no_edges(tmp_path):
    manager = _manager(tmp_path, ["1,10.0,20.0", "2,10.0,21.0", "3,10.0,22.0"])
    manager.perform_triangulation()
    assert list(manager.edges) == []


def test_two_points_give_no_edges(tmp_path):
    manager = _manager(tmp_path, ["1,10.0,20.0", "2,11.0,21.0"])
    manager.perform_triangulation()
    assert list(manager.edges) == []
    assert manager.get_node(1).neighbors == []


def test_triangulation_without_nodes_does_not_emit():
    manager = GraphManager()
    calls = []
    manager.graph_updated.connect(lambda: calls.append(True))
    manager.perform_triangulation()
    assert calls == []
    assert list(manager.edges) == []


def test_retriangulation_does_not_duplicate(tmp_path):
    manager = _manager(tmp_path, ["1,10.0,20.0", "2,10.0,21.0", "3,11.0,20.5"])
    manager.perform_triangulation()
    manager.perform_triangulation()
    assert len(manager.edges) == 3
    assert len(manager.get_node(2).neighbors) == 2


def test_closest_node(tmp_path):
    manager = _manager(tmp_path, ["1,10.0,20.0", "2,11.0,21.0", "3,12.0,22.0"])
    assert manager.closest_node_id(11.1, 21.1) == 2
    assert manager.closest_node_id(9.0, 19.0) == 1


def test_closest_node_without_nodes():
    assert GraphManager().closest_node_id(1.0, 2.0) is None


def test_toggle_obstacle(tmp_path):
    manager = _manager(tmp_path, ["1,10.0,20.0", "2,11.0,21.0"])
    manager.toggle_obstacle_node(2)
    assert manager.is_obstacle(2)
    assert manager.get_node(2).is_obstacle
    assert manager.obstacle_node_ids == frozenset({2})
    manager.toggle_obstacle_node(2)
    assert not manager.is_obstacle(2)
    assert manager.obstacle_node_ids == frozenset()


def test_toggle_unknown_node_changes_nothing(tmp_path):
    manager = _manager(tmp_path, ["1,10.0,20.0"])
    manager.toggle_obstacle_node(99)
    assert manager.obstacle_node_ids == frozenset()


def test_obstacle_area_marks_nodes_inside(tmp_path):
    manager = _manager(tmp_path, ["1,10.0,20.0", "2,11.0,21.0", "3,12.0,22.0"])
    assert manager.set_obstacle_area(9.5, 19.5, 11.0, 21.0) == 2
    assert manager.obstacle_node_ids == frozenset({1, 2})
    assert manager.set_obstacle_area(9.5, 19.5, 12.0, 22.0) == 1
    assert manager.obstacle_node_ids == frozenset({1, 2, 3})


def test_clear_all_obstacles(tmp_path):
    manager = _manager(tmp_path, ["1,10.0,20.0", "2,11.0,21.0"])
    manager.set_obstacle_area(0.0, 0.0, 90.0, 90.0)
    manager.clear_all_obstacles()
    assert manager.obstacle_node_ids == frozenset()
    assert not any(node.is_obstacle for node in manager.nodes)


def test_get_node_unknown_raises(tmp_path):
    manager = _manager(tmp_path, ["1,10.0,20.0"])
    with pytest.raises(KeyError):
        manager.get_node(5)
    assert 1 in manager
    assert 5 not in manager