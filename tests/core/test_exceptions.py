"""
Tests for custom exceptions.
"""

import pytest

from skyroute.core.exceptions import (
    ConfigurationError,
    GraphOperationError,
    LoadError,
    RecordSkippedError,
    ValidationError,
)
from skyroute.core.graph_paths import RouteValidationError


def test_validation_error_message():
    """Test validation error message formatting."""
    error = ValidationError("test message")
    assert str(error) == "Validation Error: test message"


def test_graph_operation_error_message():
    """Test graph operation error message formatting."""
    error = GraphOperationError("test message")
    assert str(error) == "Graph Operation Error: test message"


def test_record_skipped_error():
    """Test skipped record error attributes and message."""
    error = RecordSkippedError("flight", 3, "cost_usd is negative")

    assert isinstance(error, ValidationError)
    assert error.kind == "flight"
    assert error.index == 3
    assert error.reason == "cost_usd is negative"
    assert str(error) == "Validation Error: skipped flight record at index 3: cost_usd is negative"


@pytest.mark.parametrize(
    "error_type", [ConfigurationError, LoadError, RouteValidationError]
)
def test_plain_errors(error_type):
    """Test that the remaining errors carry their message unchanged."""
    error = error_type("test message")
    assert str(error) == "test message"
    assert isinstance(error, Exception)
