"""A generic weighted graph kept both as adjacency lists and as a matrix."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

from streetrouter.adapters import Queue, Stack

N = TypeVar("N")
E = TypeVar("E")


@dataclass(eq=False)
class Edge(Generic[N, E]):
    """A weighted link from ``nodes[0]`` to ``nodes[1]``."""

    data: E
    nodes: tuple[GraphNode[N, E], GraphNode[N, E]]

    def _other(self, node: GraphNode[N, E]) -> GraphNode[N, E]:
        return self.nodes[1] if self.nodes[0] is node else self.nodes[0]


@dataclass(eq=False)
class GraphNode(Generic[N, E]):
    """A vertex with the edges that leave it."""

    data: N
    adjacency: list[Edge[N, E]] = field(default_factory=list)


_Frontier = Union[Stack, Queue]


class Graph(Generic[N, E]):
    """Graph whose vertices are identified by their data."""

    def __init__(self, directed: bool = False, default_weight: E = 0) -> None:  # type: ignore[assignment]
        self.directed = directed
        self.vertices: list[GraphNode[N, E]] = []
        self.matrix: list[list[E]] = []
        self._default_weight = default_weight

    def index_of(self, data: N) -> int:
        """Return the index of the first vertex holding data, or -1."""
        return next((i for i, node in enumerate(self.vertices) if node.data == data), -1)

    def find(self, value: N) -> GraphNode[N, E] | None:
        """Return the first vertex holding value, or None."""
        index = self.index_of(value)
        return self.vertices[index] if index != -1 else None

    def _resize_matrix(self) -> None:
        size = len(self.vertices)
        for row in self.matrix:
            row.extend([self._default_weight] * (size - len(row)))
        while len(self.matrix) < size:
            self.matrix.append([self._default_weight] * size)

    def add_node(self, data: N) -> None:
        self.vertices.append(GraphNode(data))
        self._resize_matrix()

    def add_edge(self, u: N, v: N, weight: E) -> None:
        """Link the vertices holding u and v; does nothing if either is missing."""
        index_u = self.index_of(u)
        index_v = self.index_of(v)
        if index_u == -1 or index_v == -1:
            return
        self.add_edge_by_index(index_u, index_v, weight)

    def add_edge_by_index(self, u: int, v: int, weight: E) -> None:
        size = len(self.vertices)
        if not (0 <= u < size and 0 <= v < size):
            raise IndexError("Index out of bounds")
        self.matrix[u][v] = weight
        node_u, node_v = self.vertices[u], self.vertices[v]
        node_u.adjacency.append(Edge(weight, (node_u, node_v)))
        if not self.directed:
            self.matrix[v][u] = weight
            node_v.adjacency.append(Edge(weight, (node_v, node_u)))

    def num_vertices(self) -> int:
        return len(self.vertices)

    def num_edges(self) -> int:
        count = sum(len(node.adjacency) for node in self.vertices)
        return count if self.directed else count // 2

    def _traverse(
        self, start: N, target: N, frontier: _Frontier, take: Callable[[], N]
    ) -> list[N]:
        start_index = self.index_of(start)
        if start_index == -1 or self.index_of(target) == -1:
            return []
        visited = [False] * len(self.vertices)
        visited[start_index] = True
        frontier.push(start)
        order: list[N] = []
        while not frontier.empty():
            current = take()
            frontier.pop()
            order.append(current)
            if current == target:
                break
            index = self.index_of(current)
            if index == -1:
                continue
            node = self.vertices[index]
            for edge in node.adjacency:
                neighbor = edge._other(node)
                neighbor_index = self.index_of(neighbor.data)
                if neighbor_index != -1 and not visited[neighbor_index]:
                    visited[neighbor_index] = True
                    frontier.push(neighbor.data)
        return order

    def depth_first_search(self, start: N, target: N) -> list[N]:
        """Return vertices in the order a depth-first search visits them, up to target."""
        stack: Stack[N] = Stack()
        return self._traverse(start, target, stack, stack.top)

    def breadth_first_search(self, start: N, target: N) -> list[N]:
        """Return vertices in the order a breadth-first search visits them, up to target."""
        queue: Queue[N] = Queue()
        return self._traverse(start, target, queue, queue.front)

    def format_adjacency(self) -> str:
        """One line per vertex: its data followed by each neighbour and weight."""
        lines = []
        for node in self.vertices:
            links = " ".join(f"{edge._other(node).data}({edge.data})" for edge in node.adjacency)
            lines.append(f"{node.data}: {links}".rstrip())
        return "\n".join(lines)

    def format_matrix(self) -> str:
        return "\n".join(" ".join(str(weight) for weight in row) for row in self.matrix)