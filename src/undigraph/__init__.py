"""
undigraph - Undirected Graph Abstract Data Type

This package provides an in-memory undirected graph whose vertices and edges
store caller supplied elements. It includes:

- The abstract graph contract shared by graph containers
- An edge-list container with thread-safe mutations
- Vertex and edge handles with identity semantics
- Synchronous notifications of graph mutations

Example:
    >>> from undigraph import GraphEdgeList
    >>> graph = GraphEdgeList()
    >>> a = graph.insert_vertex("A")
    >>> graph.are_adjacent(a, a)
    False
"""

__version__ = "0.1.0"
__author__ = "undigraph developers"
__license__ = "MIT"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("undigraph requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.config import GraphConfig
from .core.exceptions import InvalidEdgeError, InvalidVertexError
from .core.graph import GraphEdgeList
from .core.interface import Graph
from .core.models import Edge, Vertex

__all__ = [
    "Edge",
    "Graph",
    "GraphConfig",
    "GraphEdgeList",
    "InvalidEdgeError",
    "InvalidVertexError",
    "Vertex",
]
