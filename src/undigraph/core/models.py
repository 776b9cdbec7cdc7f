"""
Vertex and edge handles for the undirected graph.

Handles are opaque tokens issued by a graph. A handle keeps its element, the
identity tag of the graph that created it and a key that graph never reuses,
which lets the graph validate a handle without scanning its contents.
Handles compare by identity: two vertices holding equal elements are still
two different vertices.
"""

from typing import Generic, Tuple, TypeVar

V = TypeVar("V")  # Type of element stored at a vertex
E = TypeVar("E")  # Type of element stored at an edge


class Vertex(Generic[V]):
    """
    Handle for a vertex of a graph.

    Attributes:
        element (V): The element stored at this vertex
    """

    __slots__ = ("_element", "_owner", "_key")

    def __init__(self, element: V, owner: object, key: int):
        self._element = element
        self._owner = owner
        self._key = key

    @property
    def element(self) -> V:
        """The element stored at this vertex."""
        return self._element

    def __repr__(self) -> str:
        return f"Vertex{{{self._element}}}"


class Edge(Generic[E, V]):
    """
    Handle for an undirected edge of a graph.

    The two endpoint slots are named outbound and inbound only to tell them
    apart; the edge has no direction.

    Attributes:
        element (E): The element stored at this edge
        vertex_outbound (Vertex[V]): First endpoint
        vertex_inbound (Vertex[V]): Second endpoint
    """

    __slots__ = ("_element", "_owner", "_key", "vertex_outbound", "vertex_inbound")

    def __init__(
        self,
        element: E,
        vertex_outbound: Vertex[V],
        vertex_inbound: Vertex[V],
        owner: object,
        key: int,
    ):
        self._element = element
        self.vertex_outbound = vertex_outbound
        self.vertex_inbound = vertex_inbound
        self._owner = owner
        self._key = key

    @property
    def element(self) -> E:
        """The element stored at this edge."""
        return self._element

    def vertices(self) -> Tuple[Vertex[V], Vertex[V]]:
        """Return both endpoints as an (outbound, inbound) pair."""
        return (self.vertex_outbound, self.vertex_inbound)

    def contains(self, vertex: object) -> bool:
        """Check whether the given vertex handle is one of the endpoints."""
        return self.vertex_outbound is vertex or self.vertex_inbound is vertex

    def is_loop(self) -> bool:
        """Check whether both endpoints are the same vertex."""
        return self.vertex_outbound is self.vertex_inbound

    def __repr__(self) -> str:
        return (
            f"Edge{{{{{self._element}}}, vertexOutbound={self.vertex_outbound!r}, "
            f"vertexInbound={self.vertex_inbound!r}}}"
        )
