"""Naive Prim's MST: every growth step rescans the whole edge list.

Runs in O(V * E). Of all edges leaving the tree, the lightest one is taken; on
ties the edge appearing first in the graph's edge list wins.
"""

import logging
import typing as t

import numpy as np
import numpy.typing as npt

from .errors import DisconnectedGraphError, NotFoundError
from .graph import Edge, Graph, Vertex


logger = logging.getLogger(__name__)


class MSTResult(t.NamedTuple):
    total_weight: int
    edges: t.List[Edge]


def find_crossing_edge(
    in_tree: npt.NDArray[np.bool_],
    origins: npt.NDArray[np.intp],
    destinations: npt.NDArray[np.intp],
    weights: npt.NDArray[np.int64],
) -> int:
    """Index of the lightest edge going from the tree to outside of it, or -1."""
    is_crossing = in_tree[origins] & ~in_tree[destinations]
    crossing_inds = np.flatnonzero(is_crossing)

    if crossing_inds.size == 0:
        return -1

    # NOTE: argmin returns the first occurrence, which keeps ties in scan order.
    return int(crossing_inds[np.argmin(weights[crossing_inds])])


def compute_mst(graph: Graph, source: Vertex) -> MSTResult:
    if not isinstance(source, Vertex) or source not in graph:
        raise NotFoundError(f"Source {source!r} does not belong to the graph.")

    edges = graph.edges
    (origins, destinations, weights) = graph.edge_arrays()
    n = graph.num_vertices

    in_tree = np.full(n, fill_value=False)
    in_tree[graph.vertex_positions()[source.label]] = True

    total_weight = 0
    tree_edges: t.List[Edge] = []

    for n_in_tree in range(1, n):
        ind = find_crossing_edge(in_tree, origins, destinations, weights)

        if ind < 0:
            raise DisconnectedGraphError(
                f"No edge leaves the tree grown from vertex {source.label}: "
                f"{n - n_in_tree} of {n} vertices are unreachable."
            )

        in_tree[destinations[ind]] = True
        total_weight += int(weights[ind])
        tree_edges.append(edges[ind])
        logger.debug("Step %d: added %s (total weight %d).", n_in_tree, edges[ind], total_weight)

    logger.debug("MST from vertex %s spans %d vertices with total weight %d.", source.label, n, total_weight)

    return MSTResult(total_weight=total_weight, edges=tree_edges)


def compute_mst_weight(graph: Graph, source: Vertex) -> int:
    return compute_mst(graph, source).total_weight
