import random

import pytest

from graphgen import generate_graph
from mstgraph import Graph


def make_graph(size: int, density: float, seed: int = 42) -> Graph:
    return Graph.from_dict(generate_graph(1, size, density, random.Random(seed)))


@pytest.fixture
def scenario_graph():
    return Graph(['A', 'B', 'C', 'D'],
                 [('A', 'B', 1), ('B', 'C', 2), ('C', 'D', 3), ('A', 'D', 10), ('A', 'C', 5)])


@pytest.fixture
def disconnected_graph():
    return Graph(['A', 'B', 'C', 'D'], [('A', 'B', 1), ('C', 'D', 2)])


@pytest.fixture
def random_graphs():
    return [make_graph(size, density, seed)
            for (size, density, seed) in [(10, 0.3, 1), (25, 0.5, 2), (60, 0.2, 3), (120, 0.1, 4)]]
