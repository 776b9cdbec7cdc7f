"""
Tests for vertex and edge handles.
"""

from undigraph.core.graph import GraphEdgeList


def test_vertex_repr():
    """Test vertex text rendering."""
    graph = GraphEdgeList()
    vertex = graph.insert_vertex(42)

    assert repr(vertex) == "Vertex{42}"
    assert vertex.element == 42


def test_edge_vertices_and_contains():
    """Test edge endpoint accessors."""
    graph = GraphEdgeList()
    a = graph.insert_vertex("A")
    b = graph.insert_vertex("B")
    c = graph.insert_vertex("C")
    edge = graph.insert_edge(a, b, "ab")

    assert edge.vertices() == (a, b)
    assert edge.vertex_outbound is a
    assert edge.vertex_inbound is b
    assert edge.contains(a)
    assert edge.contains(b)
    assert not edge.contains(c)
    assert not edge.is_loop()


def test_edge_contains_uses_identity():
    """Test that containment is by handle, not by element."""
    graph = GraphEdgeList()
    other = GraphEdgeList()
    a = graph.insert_vertex("A")
    edge = graph.insert_edge(a, a, "aa")

    assert edge.contains(a)
    assert not edge.contains(other.insert_vertex("A"))
    assert not edge.contains("A")


def test_edge_repr():
    """Test edge text rendering."""
    graph = GraphEdgeList()
    a = graph.insert_vertex("A")
    b = graph.insert_vertex("B")
    edge = graph.insert_edge(a, b, 7)

    assert repr(edge) == "Edge{{7}, vertexOutbound=Vertex{A}, vertexInbound=Vertex{B}}"
