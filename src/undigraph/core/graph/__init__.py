"""
Graph container module.

This module provides the edge-list implementation of the undirected graph
contract, together with:
- Thread-safe state management for mutations and queries
- Event system for graph modifications
"""

from .edge_list import GraphEdgeList
from .events import GraphEvent, GraphEventDetails, GraphEventListener, GraphEventManager
from .state import GraphStateManager

__all__ = [
    "GraphEdgeList",
    "GraphEvent",
    "GraphEventDetails",
    "GraphEventListener",
    "GraphEventManager",
    "GraphStateManager",
]
