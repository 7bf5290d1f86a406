"""Read graphs from the plain text edge-list format.

The first line holds the vertex and edge counts, every following line one
undirected edge as three whitespace separated integers::

    3 3
    1 2 1
    2 3 2
    1 3 3

The counts in the header are informative only: mismatches are logged, not
enforced.
"""

import logging
import os
import typing as t

import numpy as np
import pandas as pd

from .errors import GraphFormatError
from .graph import Graph


logger = logging.getLogger(__name__)


def _parse_header(line: str) -> t.Tuple[int, int]:
    fields = line.split()

    if len(fields) < 2:
        raise GraphFormatError(f"Expected '<vertex count> <edge count>' header, got {line.strip()!r}.")

    try:
        return (int(fields[0]), int(fields[1]))
    except ValueError:
        raise GraphFormatError(f"Header counts must be integers, got {line.strip()!r}.") from None


def _read_triples(buffer: t.TextIO) -> pd.DataFrame:
    try:
        triples = pd.read_csv(buffer, sep=r"\s+", header=None, index_col=None, dtype=np.int64)
    except pd.errors.EmptyDataError:
        return pd.DataFrame(np.empty((0, 3), dtype=np.int64))
    except (ValueError, OverflowError) as err:
        raise GraphFormatError(f"Edge lines must hold three 64-bit integers: {err}") from err

    if triples.shape[1] != 3:
        raise GraphFormatError(f"Edge lines must hold three integers, found {triples.shape[1]} columns.")

    return triples


def parse_graph(buffer: t.TextIO) -> Graph:
    (n_vertices, n_edges) = _parse_header(buffer.readline())
    triples = _read_triples(buffer)

    graph = Graph()

    for label_a, label_b, weight in triples.itertuples(index=False, name=None):
        graph.add_undirected_edge(int(label_a), int(label_b), int(weight))

    if graph.num_vertices != n_vertices:
        logger.warning("Header announces %d vertices, edges reference %d.", n_vertices, graph.num_vertices)

    if len(triples) != n_edges:
        logger.warning("Header announces %d edges, found %d.", n_edges, len(triples))

    logger.debug("Loaded %r.", graph)

    return graph


def read_graph(path: t.Union[str, os.PathLike]) -> Graph:
    with open(path, "r", encoding="utf-8") as f_in:
        return parse_graph(f_in)
