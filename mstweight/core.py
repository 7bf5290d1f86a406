import logging
import typing as t

import numpy as np
import pandas as pd
import scipy.sparse
import scipy.sparse.csgraph

from . import prim
from .errors import DisconnectedGraphError, NotFoundError
from .graph import Graph, Vertex


logger = logging.getLogger(__name__)


def resolve_source(graph: Graph, source: t.Union[int, Vertex, None]) -> Vertex:
    if source is None:
        if graph.num_vertices == 0:
            raise NotFoundError("Cannot pick a source vertex from an empty graph.")
        return graph.vertices[0]

    if isinstance(source, Vertex):
        if source not in graph:
            raise NotFoundError(f"Source {source!r} does not belong to the graph.")
        return source

    return graph.get_vertex(source)


def reduce_parallel_edges(
    origins: np.ndarray, destinations: np.ndarray, weights: np.ndarray
) -> pd.DataFrame:
    """Drop self-loops and keep only the lightest edge between each pair of vertices.

    Pairs are unordered: `origin` always holds the smaller vertex position.
    """
    edges = pd.DataFrame(
        {
            "origin": np.minimum(origins, destinations),
            "destination": np.maximum(origins, destinations),
            "weight": weights,
        }
    )
    edges = edges[edges["origin"] != edges["destination"]]
    return edges.groupby(["origin", "destination"], as_index=False, sort=False)["weight"].min()


def compute_scipy_mst_weight(graph: Graph, source: Vertex) -> int:
    """MST weight with scipy's minimum spanning tree routine (Kruskal).

    Same total as the naive Prim's implementation, though not necessarily the
    same tree when several edges share a weight. Edges are read as undirected.
    """
    if source not in graph:
        raise NotFoundError(f"Source {source!r} does not belong to the graph.")

    n = graph.num_vertices

    if n == 1:
        return 0

    edges = reduce_parallel_edges(*graph.edge_arrays())

    if edges.empty:
        raise DisconnectedGraphError(f"Graph has {n} vertices and no edges between distinct vertices.")

    # NOTE: scipy reads zero entries as missing edges and works in float64. Dense
    # ranks of the weights are positive, exact in float64 and keep the weight order,
    # so a tree minimal for the ranks is minimal for the weights.
    (_, ranks) = np.unique(edges["weight"].to_numpy(), return_inverse=True)

    adjacency = scipy.sparse.csr_matrix(
        (
            ranks.astype(np.float64) + 1.0,
            (edges["origin"].to_numpy(), edges["destination"].to_numpy()),
        ),
        shape=(n, n),
    )

    n_components, _ = scipy.sparse.csgraph.connected_components(adjacency, directed=False)

    if n_components > 1:
        raise DisconnectedGraphError(f"Graph is split into {n_components} connected components.")

    mst = scipy.sparse.csgraph.minimum_spanning_tree(adjacency)
    (rows, cols) = mst.nonzero()

    tree = pd.DataFrame(
        {
            "origin": np.minimum(rows, cols).astype(np.intp),
            "destination": np.maximum(rows, cols).astype(np.intp),
        }
    )
    tree = tree.merge(edges, on=["origin", "destination"], how="left")
    total_weight = sum(int(weight) for weight in tree["weight"])

    logger.debug("scipy MST spans %d vertices with total weight %d.", n, total_weight)

    return total_weight


def compute_mst_weight(
    graph: Graph,
    source: t.Union[int, Vertex, None] = None,
    use_scipy_implementation: bool = False,
) -> int:
    """Compute the total weight of a minimum spanning tree of `graph`.

    Parameters
    ----------
    graph : Graph
        Undirected, connected graph. Every undirected edge is expected to be
        registered in both directions (see `Graph.add_undirected_edge`).

    source : int, Vertex or None, default=None
        Vertex the tree is grown from, given either as a label or as a vertex of
        `graph`. If None, the first vertex inserted into the graph is used.
        The total weight does not depend on this choice.

    use_scipy_implementation : bool, default=False
        If set to False, run the naive Prim's algorithm, which rescans every edge
        at each growth step (O(V * E)) and resolves ties by edge order.
        If set to True, use `scipy.sparse.csgraph.minimum_spanning_tree` instead.
        Both return the same total weight.

    Returns
    -------
    total_weight : int
        Sum of the weights of the spanning tree edges. Zero for a graph with a
        single vertex.

    Raises
    ------
    NotFoundError
        If `source` is not a vertex of `graph`, or `graph` is empty.

    DisconnectedGraphError
        If some vertex cannot be reached from `source`.
    """
    source = resolve_source(graph, source)

    if use_scipy_implementation:
        return compute_scipy_mst_weight(graph, source)

    return prim.compute_mst_weight(graph, source)
