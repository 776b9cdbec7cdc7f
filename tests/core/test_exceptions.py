"""
Tests for custom exceptions.
"""

import pytest

from undigraph.core.exceptions import (
    ConfigurationError,
    GraphError,
    InvalidEdgeError,
    InvalidVertexError,
    OperationNotSupportedError,
)


def test_graph_error_message():
    """Test graph error message formatting."""
    error = GraphError("test message")
    assert str(error) == "Graph Error: test message"


def test_subclass_message_formatting():
    """Test that subclasses share the base formatting."""
    assert str(InvalidVertexError("Null vertex.")) == "Graph Error: Null vertex."
    assert str(InvalidEdgeError("Null edge.")) == "Graph Error: Null edge."


@pytest.mark.parametrize(
    "error_type",
    [InvalidVertexError, InvalidEdgeError, OperationNotSupportedError, ConfigurationError],
)
def test_hierarchy(error_type):
    """Test that every error is a GraphError."""
    assert issubclass(error_type, GraphError)


def test_not_supported_is_not_implemented():
    """Test that unsupported operations are also NotImplementedError."""
    with pytest.raises(NotImplementedError):
        raise OperationNotSupportedError("insert_edge")


def test_invalid_errors_are_distinct():
    """Test that invalid vertex and invalid edge errors do not overlap."""
    assert not issubclass(InvalidVertexError, InvalidEdgeError)
    assert not issubclass(InvalidEdgeError, InvalidVertexError)
    assert not issubclass(InvalidVertexError, NotImplementedError)
