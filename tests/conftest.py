import os
import random

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

from graph import Graph  # noqa: E402


@pytest.fixture
def two_nodes():
    g = Graph(2)
    g.set_edge(0, 1, 10)
    return g


@pytest.fixture
def triangle():
    g = Graph(3)
    g.set_edge(0, 1, 4)
    g.set_edge(1, 2, 4)
    g.set_edge(0, 2, 10)
    return g


@pytest.fixture
def isolated_end():
    g = Graph(4)
    g.set_edge(0, 1, 3)
    g.set_edge(1, 2, 5)
    return g


@pytest.fixture
def five_nodes():
    # Discounting 0-3 and 2-4 both give cost 14; 0-3 comes first.
    return Graph.from_matrix(
        [
            [-1, 4, -1, 12, -1],
            [4, -1, 6, -1, -1],
            [-1, 6, -1, 3, 9],
            [12, -1, 3, -1, 8],
            [-1, -1, 9, 8, -1],
        ]
    )


def random_graph(rng: random.Random, max_nodes: int = 7) -> Graph:
    n = rng.randint(1, max_nodes)
    g = Graph(n)
    for u in range(n):
        for v in range(u, n):
            if rng.random() < 0.45:
                g.set_edge(u, v, rng.randint(0, 20))
    return g


@pytest.fixture
def random_graphs():
    rng = random.Random(1234)
    return [random_graph(rng) for _ in range(40)]
