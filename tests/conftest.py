import numpy as np
import pytest

from mstweight import Graph


def make_random_graph(rng: np.random.RandomState, n_vertices: int, n_extra_edges: int, max_weight: int = 20) -> Graph:
    """Random connected graph: a random spanning tree plus `n_extra_edges` extra edges."""
    graph = Graph()
    labels = [int(label) for label in rng.permutation(n_vertices) + 1]
    graph.get_or_create_vertex(labels[0])

    for i in range(1, n_vertices):
        graph.add_undirected_edge(labels[i], labels[rng.randint(0, i)], int(rng.randint(0, max_weight)))

    for _ in range(n_extra_edges):
        (ind_a, ind_b) = rng.randint(0, n_vertices, size=2)
        graph.add_undirected_edge(labels[ind_a], labels[ind_b], int(rng.randint(0, max_weight)))

    return graph


@pytest.fixture
def random_graph_factory():
    return make_random_graph


@pytest.fixture
def triangle() -> Graph:
    graph = Graph()
    graph.add_undirected_edge(1, 2, 1)
    graph.add_undirected_edge(2, 3, 2)
    graph.add_undirected_edge(1, 3, 3)
    return graph
