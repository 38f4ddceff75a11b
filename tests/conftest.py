import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from config import Settings
from engine import ResultCache, Runner
from graph import Graph
from main import create_app


@pytest.fixture
def runner():
    return Runner(ResultCache(capacity=100))


@pytest.fixture
def weighted_graph():
    """A-B-C-D diamond with a cheaper detour through C."""
    g = Graph()
    for nid in "ABCDE":
        g.add_node(nid)
    g.add_edge("A", "B", 4)
    g.add_edge("A", "C", 1)
    g.add_edge("C", "B", 2)
    g.add_edge("B", "D", 5)
    g.add_edge("C", "D", 8)
    g.add_edge("D", "E", 3)
    return g


@pytest.fixture
def app():
    return create_app(Settings(cache_capacity=10, max_array_length=50, max_graph_nodes=20,
                               max_dp_cells=300, max_value_range=100))


@pytest.fixture
def client(app):
    return app.test_client()
