import os

import pytest

import mstweight


def get_dataset_uri(dataset_name: str) -> str:
    base_uri = os.path.dirname(__file__)
    return os.path.abspath(os.path.join(base_uri, "assets", dataset_name))


@pytest.mark.parametrize("use_scipy_implementation", (False, True))
@pytest.mark.parametrize(
    "dataset_name,expected_output",
    (
        ("triangle.txt", 3),
        ("cycle_4.txt", 6),
        ("clrs_9.txt", 37),
        ("zero_and_large_weights.txt", 2000000),
        ("parallel_edges.txt", 7),
    ),
)
def test_compare_to_expected(dataset_name: str, expected_output: int, use_scipy_implementation: bool):
    graph = mstweight.read_graph(get_dataset_uri(dataset_name))

    assert graph.num_edges % 2 == 0

    output = mstweight.compute_mst_weight(
        graph,
        source=1,
        use_scipy_implementation=use_scipy_implementation,
    )

    assert output == expected_output


@pytest.mark.parametrize("use_scipy_implementation", (False, True))
def test_disconnected_dataset(use_scipy_implementation: bool):
    graph = mstweight.read_graph(get_dataset_uri("disconnected.txt"))

    with pytest.raises(mstweight.DisconnectedGraphError):
        mstweight.compute_mst_weight(graph, source=1, use_scipy_implementation=use_scipy_implementation)
