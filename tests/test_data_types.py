from streetrouter.data_types import Edge, LatLon, Node


def test_latlon_defaults():
    point = LatLon()
    assert (point.lat, point.lon) == (0.0, 0.0)


def test_latlon_equality_tolerates_rounding():
    assert LatLon(0.1 + 0.2, 1.0) == LatLon(0.3, 1.0)


def test_latlon_inequality():
    assert not LatLon(1.0, 2.0) == LatLon(1.0, 2.001)
    assert not LatLon(1.0, 2.0) == LatLon(1.5, 2.0)


def test_latlon_compared_with_other_type():
    assert (LatLon(1.0, 2.0) == (1.0, 2.0)) is False


def test_node_defaults():
    node = Node()
    assert node.id == -1
    assert node.coords == LatLon()
    assert node.neighbors == []
    assert node.is_obstacle is False


def test_node_neighbor_lists_are_independent():
    first, second = Node(1), Node(2)
    first.neighbors.append(2)
    assert second.neighbors == []


def test_node_with_coords():
    node = Node(5, LatLon(48.5, 2.25))
    assert node.coords.lat == 48.5
    assert node.coords.lon == 2.25


def test_edge_defaults():
    edge = Edge()
    assert (edge.u_id, edge.v_id, edge.weight) == (-1, -1, 0.0)


def test_edge_values():
    edge = Edge(3, 4, 1.5)
    assert edge == Edge(u_id=3, v_id=4, weight=1.5)