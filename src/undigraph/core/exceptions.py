"""
Custom exceptions for the undirected graph container.

This module defines the hierarchy of exceptions raised by graph operations.
Every exception here signals a contract violation by the caller (an invalid
handle, a duplicate element, an unsupported operation), never a transient
runtime fault, so none of them is meant to be retried.
"""


class GraphError(Exception):
    """
    Base class for all graph errors.

    Raised (through a subclass) when an operation on a graph cannot be
    carried out. Catching GraphError catches every error the package raises.
    """

    def __str__(self) -> str:
        """Format graph error message."""
        return f"Graph Error: {super().__str__()}"


class InvalidVertexError(GraphError):
    """
    Raised when a vertex argument is invalid.

    The graph validates every vertex handle it receives before touching its
    state, and raises this error when the handle cannot be used.

    Examples:
        * None passed where a vertex is expected
        * A vertex issued by a different graph
        * A vertex that has already been removed
        * Inserting (or replacing to) an element that another vertex holds
        * Asking for the opposite endpoint of an edge the vertex is not on
    """


class InvalidEdgeError(GraphError):
    """
    Raised when an edge argument is invalid.

    Examples:
        * None passed where an edge is expected
        * An edge issued by a different graph
        * An edge that has already been removed, directly or by removing
          one of its endpoints
        * Inserting (or replacing to) an element that another edge holds
    """


class OperationNotSupportedError(GraphError, NotImplementedError):
    """
    Raised when a graph implementation does not provide an operation.

    Distinct from the invalid-argument errors so that a partial
    implementation is never mistaken for a valid empty result.
    """


class ConfigurationError(GraphError):
    """
    Raised when graph configuration is invalid.

    Examples:
        * Unknown configuration keys
        * Values of the wrong type
    """
