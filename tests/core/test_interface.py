"""
Tests for the abstract graph contract.
"""

import pytest

from undigraph.core.exceptions import OperationNotSupportedError
from undigraph.core.graph import GraphEdgeList
from undigraph.core.interface import Graph


class PartialGraph(GraphEdgeList):
    """Graph that defers two operations to the abstract contract."""

    def opposite(self, v, e):
        return super(GraphEdgeList, self).opposite(v, e)

    def replace_edge(self, e, element):
        return super(GraphEdgeList, self).replace_edge(e, element)


def test_interface_cannot_be_instantiated():
    """Test that the contract itself is abstract."""
    with pytest.raises(TypeError):
        Graph()


def test_edge_list_is_a_graph():
    """Test that the edge-list container implements the contract."""
    assert isinstance(GraphEdgeList(), Graph)


def test_unimplemented_operations_fail_loudly():
    """Test that deferring to the contract raises instead of returning a default."""
    graph = PartialGraph()
    a = graph.insert_vertex("A")
    edge = graph.insert_edge(a, a, "aa")

    with pytest.raises(OperationNotSupportedError, match="opposite"):
        graph.opposite(a, edge)
    with pytest.raises(NotImplementedError):
        graph.replace(edge, "bb")
    assert edge.element == "aa"


def test_len_counts_vertices():
    """Test len() on a graph."""
    graph = GraphEdgeList()
    graph.insert_vertex(1)
    graph.insert_vertex(2)
    assert len(graph) == 2


def test_empty_graph_is_falsy():
    """Test truthiness follows the vertex count."""
    graph = GraphEdgeList()
    assert not graph
    assert graph is not None

    graph.insert_vertex("A")
    assert graph
