"""Shared test fixtures."""

import pytest

from undigraph.core.config import GraphConfig
from undigraph.core.graph import GraphEdgeList


@pytest.fixture(params=[False, True], ids=["scan", "indexed"])
def graph(request) -> GraphEdgeList:
    """Fixture providing an empty graph, with and without the incidence index."""
    return GraphEdgeList(GraphConfig(index_incidence=request.param))


@pytest.fixture
def abc_graph(graph):
    """Fixture providing vertices A, B, C with edges e1 = (A, B) and e2 = (B, C)."""
    a = graph.insert_vertex("A")
    b = graph.insert_vertex("B")
    c = graph.insert_vertex("C")
    e1 = graph.insert_edge(a, b, "e1")
    e2 = graph.insert_edge(b, c, "e2")
    return graph, (a, b, c), (e1, e2)
