"""
Abstract contract for undirected graph containers.

Any conforming graph exposes the operations of the Graph base class below,
parameterized over the vertex element type V and the edge element type E.
Vertices and edges are passed around as handles (see models.py); the
elements they hold must support equality so that duplicates can be
detected.

The abstract bodies raise OperationNotSupportedError, so an implementation
that defers an operation to the base class fails loudly instead of returning
an empty result.
"""

from abc import ABC, abstractmethod
from typing import Any, Collection, Generic, Union

from .exceptions import OperationNotSupportedError
from .models import E, Edge, V, Vertex


class Graph(ABC, Generic[V, E]):
    """
    Abstract base class for undirected graphs.

    len(graph) is the number of vertices, so like any Python container an
    empty graph is falsy. Test "graph is not None" rather than "if graph:"
    when checking that a graph was supplied.
    """

    @abstractmethod
    def num_vertices(self) -> int:
        """Return the number of vertices of the graph."""
        raise OperationNotSupportedError("num_vertices")

    @abstractmethod
    def num_edges(self) -> int:
        """Return the number of edges of the graph."""
        raise OperationNotSupportedError("num_edges")

    @abstractmethod
    def vertices(self) -> Collection[Vertex[V]]:
        """Return a snapshot of the vertices of the graph."""
        raise OperationNotSupportedError("vertices")

    @abstractmethod
    def edges(self) -> Collection[Edge[E, V]]:
        """Return a snapshot of the edges of the graph."""
        raise OperationNotSupportedError("edges")

    @abstractmethod
    def incident_edges(self, v: Vertex[V]) -> Collection[Edge[E, V]]:
        """
        Return the edges incident to a vertex.

        Args:
            v (Vertex[V]): The vertex

        Returns:
            Collection[Edge[E, V]]: Every edge that has v as an endpoint

        Raises:
            InvalidVertexError: If v is not a valid vertex of this graph
        """
        raise OperationNotSupportedError("incident_edges")

    @abstractmethod
    def opposite(self, v: Vertex[V], e: Edge[E, V]) -> Vertex[V]:
        """
        Return the endpoint of an edge opposite to a vertex.

        For a self-loop the opposite of v is v itself.

        Args:
            v (Vertex[V]): One endpoint of e
            e (Edge[E, V]): The edge

        Returns:
            Vertex[V]: The other endpoint

        Raises:
            InvalidVertexError: If v is invalid or is not an endpoint of e
            InvalidEdgeError: If e is not a valid edge of this graph
        """
        raise OperationNotSupportedError("opposite")

    @abstractmethod
    def are_adjacent(self, u: Vertex[V], v: Vertex[V]) -> bool:
        """
        Check whether two vertices are connected by an edge.

        Loops are allowed, so a vertex is adjacent to itself when it has a
        self-loop.

        Raises:
            InvalidVertexError: If either vertex is invalid
        """
        raise OperationNotSupportedError("are_adjacent")

    @abstractmethod
    def insert_vertex(self, element: V) -> Vertex[V]:
        """
        Insert a new vertex holding the given element.

        Raises:
            InvalidVertexError: If a vertex already holds an equal element
        """
        raise OperationNotSupportedError("insert_vertex")

    @abstractmethod
    def insert_edge(self, u: Vertex[V], v: Vertex[V], element: E) -> Edge[E, V]:
        """
        Insert a new edge holding the given element between two vertices.

        Raises:
            InvalidVertexError: If either vertex is invalid
            InvalidEdgeError: If an edge already holds an equal element
        """
        raise OperationNotSupportedError("insert_edge")

    @abstractmethod
    def remove_vertex(self, v: Vertex[V]) -> V:
        """
        Remove a vertex and all its incident edges.

        Returns:
            V: The element held by the removed vertex

        Raises:
            InvalidVertexError: If v is not a valid vertex of this graph
        """
        raise OperationNotSupportedError("remove_vertex")

    @abstractmethod
    def remove_edge(self, e: Edge[E, V]) -> E:
        """
        Remove an edge.

        Returns:
            E: The element held by the removed edge

        Raises:
            InvalidEdgeError: If e is not a valid edge of this graph
        """
        raise OperationNotSupportedError("remove_edge")

    @abstractmethod
    def replace_vertex(self, v: Vertex[V], element: V) -> V:
        """
        Replace the element held by a vertex.

        Returns:
            V: The previous element

        Raises:
            InvalidVertexError: If v is invalid or another vertex holds an
                equal element
        """
        raise OperationNotSupportedError("replace_vertex")

    @abstractmethod
    def replace_edge(self, e: Edge[E, V], element: E) -> E:
        """
        Replace the element held by an edge.

        Returns:
            E: The previous element

        Raises:
            InvalidEdgeError: If e is invalid or another edge holds an equal
                element
        """
        raise OperationNotSupportedError("replace_edge")

    def replace(self, handle: Union[Vertex[V], Edge[E, V]], element: Any) -> Any:
        """Replace the element of a vertex or an edge, returning the previous one."""
        if isinstance(handle, Edge):
            return self.replace_edge(handle, element)
        return self.replace_vertex(handle, element)

    def __len__(self) -> int:
        """Number of vertices; an empty graph is falsy."""
        return self.num_vertices()
