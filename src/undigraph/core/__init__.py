"""Core graph functionality."""

from .config import GraphConfig
from .exceptions import (
    ConfigurationError,
    GraphError,
    InvalidEdgeError,
    InvalidVertexError,
    OperationNotSupportedError,
)
from .interface import Graph
from .models import Edge, Vertex
from .graph import GraphEdgeList, GraphEvent, GraphEventListener

__all__ = [
    "ConfigurationError",
    "Edge",
    "Graph",
    "GraphConfig",
    "GraphEdgeList",
    "GraphError",
    "GraphEvent",
    "GraphEventListener",
    "InvalidEdgeError",
    "InvalidVertexError",
    "OperationNotSupportedError",
    "Vertex",
]
