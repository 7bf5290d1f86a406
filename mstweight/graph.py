import operator
import typing as t

import numpy as np
import numpy.typing as npt

from .errors import InvalidArgumentError, NotFoundError


_WEIGHT_RANGE = np.iinfo(np.int64)


class Edge:
    """Directed edge record. An undirected edge is stored as two of these."""

    __slots__ = ("origin", "destination", "distance")

    def __init__(self, origin: "Vertex", destination: "Vertex", distance: int):
        self.origin = origin
        self.destination = destination
        self.distance = distance

    def __repr__(self) -> str:
        return f"Edge({self.origin.label}, {self.destination.label}, distance={self.distance})"

    def __str__(self) -> str:
        return f"({self.origin.label},{self.destination.label}) with distance = {self.distance}"


class Vertex:
    __slots__ = ("label", "edges")

    def __init__(self, label: int):
        self.label = label
        self.edges: t.List[Edge] = []

    def __repr__(self) -> str:
        return f"Vertex({self.label})"

    def __str__(self) -> str:
        if not self.edges:
            return f"Vertex {self.label} has no edges."
        lines = [f"Vertex {self.label} has edges:"]
        lines.extend(str(edge) for edge in self.edges)
        return "\n".join(lines)


class Graph:
    """Vertices keyed by integer label plus the ordered list of directed edges.

    The order of `edges` is the order in which Prim's algorithm scans them, so it
    also decides which edge wins when two crossing edges have the same weight.
    """

    def __init__(self) -> None:
        self._vertices: t.Dict[int, Vertex] = {}
        self._edges: t.List[Edge] = []

    def __contains__(self, item: t.Union[int, Vertex]) -> bool:
        if isinstance(item, Vertex):
            return self._vertices.get(item.label) is item
        return item in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(num_vertices={self.num_vertices}, num_edges={self.num_edges})"

    @property
    def vertices(self) -> t.List[Vertex]:
        return list(self._vertices.values())

    @property
    def edges(self) -> t.List[Edge]:
        return list(self._edges)

    @property
    def num_vertices(self) -> int:
        return len(self._vertices)

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    def get_or_create_vertex(self, label: int) -> Vertex:
        try:
            label = operator.index(label)
        except TypeError:
            raise InvalidArgumentError(f"Vertex label must be an integer, got {label!r}.") from None

        vertex = self._vertices.get(label)
        if vertex is None:
            vertex = Vertex(label)
            self._vertices[label] = vertex
        return vertex

    def get_vertex(self, label: int) -> Vertex:
        try:
            return self._vertices[label]
        except KeyError:
            raise NotFoundError(f"Vertex with label {label!r} does not exist in the graph.") from None

    def add_edge(self, u: t.Optional[Vertex], v: t.Optional[Vertex], weight: int) -> Edge:
        """Register the directed edge u -> v.

        Both endpoints must already belong to this graph. Callers modelling an
        undirected edge call this twice, once per direction.
        """
        if u is None or v is None:
            raise InvalidArgumentError("Both endpoints of an edge must be provided.")

        for vertex in (u, v):
            if vertex not in self:
                raise InvalidArgumentError(f"{vertex!r} is not registered in this graph.")

        try:
            weight = operator.index(weight)
        except TypeError:
            raise InvalidArgumentError(f"Edge weight must be an integer, got {weight!r}.") from None

        if not _WEIGHT_RANGE.min <= weight <= _WEIGHT_RANGE.max:
            raise InvalidArgumentError(f"Edge weight {weight} does not fit in a 64-bit integer.")

        edge = Edge(u, v, weight)
        u.edges.append(edge)
        self._edges.append(edge)
        return edge

    def add_undirected_edge(self, label_a: int, label_b: int, weight: int) -> t.Tuple[Edge, Edge]:
        vertex_a = self.get_or_create_vertex(label_a)
        vertex_b = self.get_or_create_vertex(label_b)
        return (self.add_edge(vertex_a, vertex_b, weight), self.add_edge(vertex_b, vertex_a, weight))

    def vertex_positions(self) -> t.Dict[int, int]:
        """Map each label to its position in vertex insertion order."""
        return {label: i for i, label in enumerate(self._vertices)}

    def edge_arrays(
        self,
    ) -> t.Tuple[npt.NDArray[np.intp], npt.NDArray[np.intp], npt.NDArray[np.int64]]:
        """Snapshot of the edge list as (origins, destinations, weights) arrays.

        Endpoints are given as positions from `vertex_positions`; the arrays keep
        the edge scan order.
        """
        positions = self.vertex_positions()
        n_edges = len(self._edges)

        origins = np.fromiter((positions[e.origin.label] for e in self._edges), dtype=np.intp, count=n_edges)
        destinations = np.fromiter((positions[e.destination.label] for e in self._edges), dtype=np.intp, count=n_edges)
        weights = np.fromiter((e.distance for e in self._edges), dtype=np.int64, count=n_edges)

        return (origins, destinations, weights)

    def describe(self) -> str:
        return "\n".join(str(vertex) for vertex in self._vertices.values())

    def describe_edges(self) -> str:
        return "\n".join(str(edge) for edge in self._edges)
