"""
Graph event system.

This module provides an event system for graph mutations, allowing components
to subscribe to and be notified of changes in the graph. Notifications are
delivered synchronously, after the mutation has been committed and the graph
lock released.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from threading import RLock
from typing import Any, Dict, List, Protocol, Set

from ..models import Edge, Vertex

logger = logging.getLogger(__name__)


class GraphEvent(Enum):
    """Events that can occur in the graph."""

    VERTEX_INSERTED = auto()
    VERTEX_REMOVED = auto()
    EDGE_INSERTED = auto()
    EDGE_REMOVED = auto()
    ELEMENT_REPLACED = auto()
    GRAPH_CLEARED = auto()


class GraphEventListener(Protocol):
    """Protocol for objects that listen to graph state changes."""

    def on_state_change(self, event: GraphEvent, details: Dict[str, Any]) -> None:
        """
        Called when the graph state changes.

        Args:
            event (GraphEvent): Type of event that occurred
            details (Dict[str, Any]): Additional information about the event
        """
        ...


@dataclass
class GraphEventManager:
    """
    Manages graph event subscriptions and notifications.

    Attributes:
        _listeners (List[GraphEventListener]): Registered event listeners
        _lock (RLock): Thread lock for synchronization
    """

    _listeners: List[GraphEventListener] = field(default_factory=list)
    _lock: RLock = field(default_factory=RLock)

    def add_listener(self, listener: GraphEventListener) -> None:
        """Add a listener for graph events."""
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def remove_listener(self, listener: GraphEventListener) -> None:
        """Remove a graph event listener."""
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def notify(self, event: GraphEvent, details: Dict[str, Any]) -> None:
        """
        Notify all listeners of a graph event.

        A failing listener is logged and skipped; the remaining listeners are
        still notified and the failure does not reach the caller, whose
        mutation has already been committed.

        Args:
            event (GraphEvent): The type of event that occurred
            details (Dict[str, Any]): Additional information about the event
        """
        with self._lock:
            listeners = self._listeners.copy()

        for listener in listeners:
            try:
                listener.on_state_change(event, details)
            except Exception as e:
                logger.error(f"Error notifying listener {listener} of {event.name}: {e}")

    def clear_listeners(self) -> None:
        """Remove all event listeners."""
        with self._lock:
            self._listeners.clear()

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)


@dataclass
class GraphEventDetails:
    """
    Container for graph event details.

    Attributes:
        vertices (Set[Vertex]): Affected vertices
        edges (Set[Edge]): Affected edges
        metadata (Dict[str, Any]): Additional event metadata
    """

    vertices: Set[Vertex] = field(default_factory=set)
    edges: Set[Edge] = field(default_factory=set)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_vertex(self, vertex: Vertex) -> None:
        """Add an affected vertex."""
        self.vertices.add(vertex)

    def add_edge(self, edge: Edge) -> None:
        """Add an affected edge."""
        self.edges.add(edge)

    def add_metadata(self, key: str, value: Any) -> None:
        """Add additional metadata."""
        self.metadata[key] = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert event details to dictionary format, handles rendered by element."""
        return {
            "vertices": [vertex.element for vertex in self.vertices],
            "edges": [
                {
                    "element": edge.element,
                    "endpoints": [edge.vertex_outbound.element, edge.vertex_inbound.element],
                }
                for edge in self.edges
            ],
            "metadata": self.metadata,
        }
