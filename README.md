# streetrouter

Find routes across a street network that is described only by its intersections.

You supply a CSV file of nodes: a header line, then `id,lat,lon` rows. The
package joins the nodes into an undirected graph by Delaunay triangulation
(using SciPy). Each edge is weighted by its great-circle (haversine) distance
in kilometres. You can mark nodes as obstacles, one at a time or by bounding
box. Routes are found with A* search, which never enters an obstacle node.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Loading and triangulating a graph

```python
from streetrouter.graph_manager import GraphManager, haversine_distance

manager = GraphManager()
count = manager.load_nodes_from_file("nodes.csv")   # returns the number of nodes read
manager.perform_triangulation()

manager.nodes        # tuple of data_types.Node
manager.edges        # tuple of data_types.Edge (u_id, v_id, weight in km)
node = manager.get_node(3)                      # KeyError if there is no such id
nearest = manager.closest_node_id(40.4168, -3.7038)   # None when no nodes are loaded
print(haversine_distance(40.0, -3.0, 41.0, -3.0))     # kilometres
```

Notes on loading:

- The first line of the file is always skipped as a header.
- Rows with fewer than three fields are skipped.
- A field that does not start with a number raises `ValueError`.
- A file that cannot be opened raises `OSError`.
- Loading replaces the nodes that were there before. It does not build edges
  until `perform_triangulation()` is called.

Fewer than three nodes, or nodes that all lie on one line, give no edges.

## Obstacles

```python
manager.toggle_obstacle_node(7)                                  # mark or unmark one node
newly_marked = manager.set_obstacle_area(40.41, -3.71, 40.42, -3.70)  # min_lat, min_lon, max_lat, max_lon
manager.is_obstacle(7)
manager.obstacle_node_ids     # frozenset of ids
manager.clear_all_obstacles()
```

Unknown ids passed to `toggle_obstacle_node` are logged and ignored.

Every change to the graph emits `manager.graph_updated`. That is a `Signal`
from `streetrouter.map_interface`: `connect(callback)`, `disconnect(callback)`,
`emit(*args)`.

## Finding a route

```python
from streetrouter.route_finder import RouteFinder

path = RouteFinder().find_route(manager, origin_id=1, dest_id=9)
# node ids from origin to destination, or [] when no route exists
```

The result is an empty list in these cases:

- either end is an obstacle;
- either end is an unknown id;
- no path avoids the obstacles.

## Driving it from a map front end

`streetrouter.map_interface.MapInterface` takes calls for map events and
re-emits each one on a `Signal`:

| Call | Signal |
| --- | --- |
| `on_map_loaded()` | `map_ready` |
| `on_node_click(node_id)` | `node_selection_requested` |
| `on_obstacle_marker_drawn(lat, lon)` | `obstacle_marker_drawn`, carrying a `LatLon` |
| `on_obstacle_area_drawn(min_lat, min_lon, max_lat, max_lon)` | `obstacle_area_drawn` |

`log_from_js(message)` only logs the message.

`streetrouter.app_controller.AppController` is built as
`AppController(graph_manager, route_finder, map_interface=None, run_javascript=None)`.
It connects those signals, and it keeps:

- `origin_node_id`
- `destination_node_id`
- `current_selection_mode`, a `RouteSelectionMode`: `NONE`, `ORIGIN`,
  `DESTINATION`, `OBSTACLE` or `CLEAR_OBSTACLE`

What a node click does depends on the current mode:

- `ORIGIN` sets the origin.
- `DESTINATION` sets the destination.
- `OBSTACLE` or `CLEAR_OBSTACLE` toggles the node's obstacle mark.

Its methods:

- `load_graph_data(path)` loads and triangulates. It returns `False` if the
  file could not be read.
- `find_route()` searches between the selected nodes and returns the path.
- `clear_obstacles()`.
- `map_display_data()` returns a JSON-ready dictionary with these keys:
  - `nodes`
  - `edges`
  - `route`
  - `originNodeId`
  - `destinationNodeId`
  - `obstacleNodeIds`

  An unset origin or destination appears as `-1`.
- `update_map_display()` builds the command `updateMapDisplay({...});`,
  passes it to `run_javascript` if one was given, and returns it.

Progress is reported on two signals: `status_message` (strings) and
`route_found` (a bool).

## What this package does not do

There is no window, web map page or command-line program. The package draws
nothing itself. A front end has to do two things:

- call `MapInterface`'s methods;
- supply a `run_javascript` callable that shows the display state.

## Supporting containers

The package also has its own general-purpose containers:

- `streetrouter.deque.Deque`: begin/end insertion and removal. Removing from
  an empty deque does nothing; reading from one raises `IndexError`.
- `streetrouter.adapters.Stack` and `streetrouter.adapters.Queue`, built on
  `Deque`.
- `streetrouter.linked_list.SingleLinkedList`: a list of integers.
  `insert_in_order` refuses duplicates.
- `streetrouter.vector.Vector`: a growable array with a tracked `capacity`.
  It has sorted insertion with `add_item`, and swap-removal with
  `remove_index_swap`.

`streetrouter.graph.Graph` is a generic graph, directed or undirected. It keeps
both adjacency lists and an adjacency matrix, and it offers:

- `depth_first_search(start, target)` and `breadth_first_search(start, target)`,
  which return the visit order;
- `format_adjacency()` and `format_matrix()`, which return text.