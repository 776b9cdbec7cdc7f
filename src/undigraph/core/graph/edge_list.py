"""
Undirected graph stored as an edge list.

GraphEdgeList keeps a collection of vertices and a collection of edges, where
each edge holds references to the two vertices it connects. There is no
adjacency structure: traversal queries scan the edge collection, unless the
incidence index is enabled in the configuration.

Elements are not duplicated: inserting a vertex (or edge) whose element is
equal to the element of an existing vertex (or edge) is rejected.

Example:
    >>> graph = GraphEdgeList()
    >>> a = graph.insert_vertex("A")
    >>> b = graph.insert_vertex("B")
    >>> e = graph.insert_edge(a, b, "AB")
    >>> graph.opposite(a, e) is b
    True
"""

import itertools
import logging
from typing import Dict, List, NoReturn, Optional, Set, Type

from ..config import GraphConfig
from ..exceptions import GraphError, InvalidEdgeError, InvalidVertexError
from ..interface import Graph
from ..models import E, Edge, V, Vertex
from .events import GraphEvent, GraphEventDetails, GraphEventListener, GraphEventManager
from .state import GraphStateManager, PendingEvents

logger = logging.getLogger(__name__)


class GraphEdgeList(Graph[V, E]):
    """
    Edge-list implementation of the undirected graph contract.

    Vertices and edges are registered under integer keys drawn from a
    counter that never repeats, and every handle is tagged with the graph
    that issued it. A handle is valid exactly when it carries this graph's
    tag and is still registered under its key.

    Attributes:
        config (GraphConfig): Options this graph was created with
        state_manager (GraphStateManager): Lock and transaction handling
        event_manager (GraphEventManager): Listener registry
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        """
        Initialize an empty graph.

        Args:
            config (Optional[GraphConfig]): Graph options. If None, the
                defaults are used.
        """
        self.config = config if config is not None else GraphConfig()
        self.event_manager = GraphEventManager()
        self.state_manager = GraphStateManager(self.event_manager)
        self._vertices: Dict[int, Vertex[V]] = {}
        self._edges: Dict[int, Edge[E, V]] = {}
        self._incidence: Optional[Dict[int, Set[Edge[E, V]]]] = (
            {} if self.config.index_incidence else None
        )
        self._token = object()
        self._keys = itertools.count()

    # Queries

    def num_vertices(self) -> int:
        with self.state_manager.read():
            return len(self._vertices)

    def num_edges(self) -> int:
        with self.state_manager.read():
            return len(self._edges)

    def vertices(self) -> Set[Vertex[V]]:
        with self.state_manager.read():
            return set(self._vertices.values())

    def edges(self) -> Set[Edge[E, V]]:
        with self.state_manager.read():
            return set(self._edges.values())

    def incident_edges(self, v: Vertex[V]) -> Set[Edge[E, V]]:
        with self.state_manager.read():
            vertex = self._check_vertex(v)
            return set(self._incident(vertex))

    def opposite(self, v: Vertex[V], e: Edge[E, V]) -> Vertex[V]:
        with self.state_manager.read():
            vertex = self._check_vertex(v)
            edge = self._check_edge(e)
            if not edge.contains(vertex):
                self._reject(InvalidVertexError, f"{vertex!r} is not an endpoint of {edge!r}.")
            return self._other_endpoint(edge, vertex)

    def are_adjacent(self, u: Vertex[V], v: Vertex[V]) -> bool:
        with self.state_manager.read():
            first = self._check_vertex(u)
            second = self._check_vertex(v)
            # Loops are allowed, so first may be second
            return any(
                self._other_endpoint(edge, first) is second for edge in self._incident(first)
            )

    def vertex_of(self, element: V) -> Optional[Vertex[V]]:
        """Return the vertex holding an element equal to the given one, if any."""
        with self.state_manager.read():
            return self._find_vertex(element)

    def edge_of(self, element: E) -> Optional[Edge[E, V]]:
        """Return the edge holding an element equal to the given one, if any."""
        with self.state_manager.read():
            return self._find_edge(element)

    # Mutations

    def insert_vertex(self, element: V) -> Vertex[V]:
        with self.state_manager.transaction() as pending:
            if self._find_vertex(element) is not None:
                self._reject(InvalidVertexError, "There's already a vertex with this element.")

            vertex = Vertex(element, self._token, next(self._keys))
            self._vertices[vertex._key] = vertex
            if self._incidence is not None:
                self._incidence[vertex._key] = set()

            logger.debug(f"Inserted {vertex!r}")
            details = GraphEventDetails()
            details.add_vertex(vertex)
            pending.append((GraphEvent.VERTEX_INSERTED, details))
            return vertex

    def insert_edge(self, u: Vertex[V], v: Vertex[V], element: E) -> Edge[E, V]:
        with self.state_manager.transaction() as pending:
            outbound = self._check_vertex(u)
            inbound = self._check_vertex(v)
            return self._insert_edge(outbound, inbound, element, pending)

    def insert_edge_between(self, u_element: V, v_element: V, element: E) -> Edge[E, V]:
        """
        Insert an edge between the vertices holding the given elements.

        Args:
            u_element (V): Element of the first endpoint
            v_element (V): Element of the second endpoint
            element (E): Element to store at the new edge

        Returns:
            Edge[E, V]: The new edge

        Raises:
            InvalidVertexError: If no vertex holds one of the endpoint elements
            InvalidEdgeError: If an edge already holds an equal element
        """
        with self.state_manager.transaction() as pending:
            outbound = self._find_vertex(u_element)
            if outbound is None:
                self._reject(InvalidVertexError, f"No vertex contains {u_element}.")
            inbound = self._find_vertex(v_element)
            if inbound is None:
                self._reject(InvalidVertexError, f"No vertex contains {v_element}.")
            return self._insert_edge(outbound, inbound, element, pending)

    def remove_vertex(self, v: Vertex[V]) -> V:
        with self.state_manager.transaction() as pending:
            vertex = self._check_vertex(v)
            details = GraphEventDetails()
            details.add_vertex(vertex)

            for edge in self._incident(vertex):
                self._detach_edge(edge)
                details.add_edge(edge)

            del self._vertices[vertex._key]
            if self._incidence is not None:
                del self._incidence[vertex._key]

            logger.debug(f"Removed {vertex!r} and {len(details.edges)} incident edge(s)")
            pending.append((GraphEvent.VERTEX_REMOVED, details))
            return vertex.element

    def remove_edge(self, e: Edge[E, V]) -> E:
        with self.state_manager.transaction() as pending:
            edge = self._check_edge(e)
            self._detach_edge(edge)

            logger.debug(f"Removed {edge!r}")
            details = GraphEventDetails()
            details.add_edge(edge)
            pending.append((GraphEvent.EDGE_REMOVED, details))
            return edge.element

    def replace_vertex(self, v: Vertex[V], element: V) -> V:
        with self.state_manager.transaction() as pending:
            vertex = self._check_vertex(v)
            holder = self._find_vertex(element)
            if holder is not None and holder is not vertex:
                self._reject(InvalidVertexError, "There's already a vertex with this element.")

            previous = vertex.element
            vertex._element = element

            details = GraphEventDetails()
            details.add_vertex(vertex)
            details.add_metadata("previous", previous)
            pending.append((GraphEvent.ELEMENT_REPLACED, details))
            return previous

    def replace_edge(self, e: Edge[E, V], element: E) -> E:
        with self.state_manager.transaction() as pending:
            edge = self._check_edge(e)
            holder = self._find_edge(element)
            if holder is not None and holder is not edge:
                self._reject(InvalidEdgeError, "There's already an edge with this element.")

            previous = edge.element
            edge._element = element

            details = GraphEventDetails()
            details.add_edge(edge)
            details.add_metadata("previous", previous)
            pending.append((GraphEvent.ELEMENT_REPLACED, details))
            return previous

    def clear(self) -> None:
        """Remove all vertices and edges. Every handle issued so far becomes invalid."""
        with self.state_manager.transaction() as pending:
            self._edges.clear()
            self._vertices.clear()
            if self._incidence is not None:
                self._incidence.clear()
            pending.append((GraphEvent.GRAPH_CLEARED, GraphEventDetails()))

    # Listeners

    def add_listener(self, listener: GraphEventListener) -> None:
        """Subscribe a listener to the mutations of this graph."""
        self.event_manager.add_listener(listener)

    def remove_listener(self, listener: GraphEventListener) -> None:
        """Unsubscribe a listener."""
        self.event_manager.remove_listener(listener)

    # Helpers. Callers hold the state lock.

    def _insert_edge(
        self, outbound: Vertex[V], inbound: Vertex[V], element: E, pending: PendingEvents
    ) -> Edge[E, V]:
        if self._find_edge(element) is not None:
            self._reject(InvalidEdgeError, "There's already an edge with this element.")

        edge = Edge(element, outbound, inbound, self._token, next(self._keys))
        self._edges[edge._key] = edge
        if self._incidence is not None:
            self._incidence[outbound._key].add(edge)
            self._incidence[inbound._key].add(edge)

        logger.debug(f"Inserted {edge!r}")
        details = GraphEventDetails()
        details.add_edge(edge)
        pending.append((GraphEvent.EDGE_INSERTED, details))
        return edge

    def _detach_edge(self, edge: Edge[E, V]) -> None:
        del self._edges[edge._key]
        if self._incidence is not None:
            self._incidence[edge.vertex_outbound._key].discard(edge)
            self._incidence[edge.vertex_inbound._key].discard(edge)

    def _incident(self, vertex: Vertex[V]) -> List[Edge[E, V]]:
        if self._incidence is not None:
            return list(self._incidence[vertex._key])
        return [edge for edge in self._edges.values() if edge.contains(vertex)]

    @staticmethod
    def _other_endpoint(edge: Edge[E, V], vertex: Vertex[V]) -> Vertex[V]:
        if edge.vertex_outbound is vertex:
            return edge.vertex_inbound
        return edge.vertex_outbound

    def _find_vertex(self, element: V) -> Optional[Vertex[V]]:
        for vertex in self._vertices.values():
            if vertex.element == element:
                return vertex
        return None

    def _find_edge(self, element: E) -> Optional[Edge[E, V]]:
        for edge in self._edges.values():
            if edge.element == element:
                return edge
        return None

    def _check_vertex(self, v: object) -> Vertex[V]:
        """
        Check that a vertex handle is valid and belongs to this graph.

        Raises:
            InvalidVertexError: If the handle is None, not a vertex, or not a
                live vertex of this graph
        """
        if v is None:
            self._reject(InvalidVertexError, "Null vertex.")
        if not isinstance(v, Vertex):
            self._reject(InvalidVertexError, "Not a vertex.")
        if v._owner is not self._token or self._vertices.get(v._key) is not v:
            self._reject(InvalidVertexError, "Vertex does not belong to this graph.")
        return v

    def _check_edge(self, e: object) -> Edge[E, V]:
        """
        Check that an edge handle is valid and belongs to this graph.

        Raises:
            InvalidEdgeError: If the handle is None, not an edge, or not a
                live edge of this graph
        """
        if e is None:
            self._reject(InvalidEdgeError, "Null edge.")
        if not isinstance(e, Edge):
            self._reject(InvalidEdgeError, "Not an edge.")
        if e._owner is not self._token or self._edges.get(e._key) is not e:
            self._reject(InvalidEdgeError, "Edge does not belong to this graph.")
        return e

    def _reject(self, error: Type[GraphError], message: str) -> NoReturn:
        if self.config.log_rejections:
            logger.debug(f"Rejected graph operation: {message}")
        raise error(message)

    def __contains__(self, handle: object) -> bool:
        with self.state_manager.read():
            if isinstance(handle, Vertex):
                return handle._owner is self._token and self._vertices.get(handle._key) is handle
            if isinstance(handle, Edge):
                return handle._owner is self._token and self._edges.get(handle._key) is handle
            return False

    def __str__(self) -> str:
        with self.state_manager.read():
            lines = [f"Graph with {len(self._vertices)} vertices and {len(self._edges)} edges:"]
            lines.append("--- Vertices: ")
            lines.extend(f"\t{vertex!r}" for vertex in self._vertices.values())
            lines.append("")
            lines.append("--- Edges: ")
            lines.extend(f"\t{edge!r}" for edge in self._edges.values())
            return "\n".join(lines) + "\n"
