"""
Custom exceptions for the route search system.

This module defines the hierarchy of custom exceptions used throughout the system
to handle error conditions in a structured way. Note that an unreachable
destination is not an error: searches return an empty result instead.
"""


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when input data fails to meet the required validation
    criteria, such as schema validation or field type checks.

    Examples:
        * City record without a code or name
        * Flight record without a flight number
        * Negative cost or duration
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class RecordSkippedError(ValidationError):
    """
    Raised when a single city or flight record is malformed.

    The loader catches this exception, logs a warning and continues with the
    next record. It never aborts a load on its own.

    Attributes:
        kind: Record kind ("city" or "flight")
        index: Position of the record inside its collection
    """

    def __init__(self, kind: str, index: int, reason: str):
        self.kind = kind
        self.index = index
        self.reason = reason
        super().__init__(f"skipped {kind} record at index {index}: {reason}")


class LoadError(Exception):
    """
    Raised when network data cannot be loaded.

    This is fatal at startup: the data file is missing or unreadable, is not
    valid JSON, or its required top-level collection is absent or empty.

    Examples:
        * cities.json does not exist
        * flights.json has no "flights" array
        * every flight record was malformed
    """


class GraphOperationError(Exception):
    """
    Raised when a search cannot proceed.

    Examples:
        * Search queue exceeded its configured size limit
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Non-positive comparison tolerance
        * Non-positive path cap
        * Recommendation ratio outside (0, 1]
    """
