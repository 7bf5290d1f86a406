from .core import compute_mst_weight
from .errors import DisconnectedGraphError, GraphFormatError, InvalidArgumentError, MSTError, NotFoundError
from .graph import Edge, Graph, Vertex
from .loader import parse_graph, read_graph
from .prim import MSTResult, compute_mst

__all__ = [
    "compute_mst",
    "compute_mst_weight",
    "parse_graph",
    "read_graph",
    "DisconnectedGraphError",
    "Edge",
    "Graph",
    "GraphFormatError",
    "InvalidArgumentError",
    "MSTError",
    "MSTResult",
    "NotFoundError",
    "Vertex",
]
