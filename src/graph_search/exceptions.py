"""
Custom exceptions for the graph_search module.

Provides a hierarchy of exceptions for clear error handling
and debugging of graph building and traversal operations.
"""

from typing import Optional


class GraphSearchError(Exception):
    """Base exception for all graph_search module errors."""

    pass


class ValidationError(GraphSearchError):
    """Base exception for input validation errors."""

    pass


class MissingColumnsError(ValidationError):
    """Raised when required edge table columns are missing."""

    def __init__(self, missing: set[str]) -> None:
        self.missing = missing
        columns_str = ", ".join(sorted(missing))
        message = f"Missing required columns: {columns_str}"
        super().__init__(message)


class MalformedEdgeError(ValidationError):
    """Raised when an edge violates the graph's structural rules."""

    def __init__(self, reason: str, row: Optional[int] = None) -> None:
        self.row = row
        self.reason = reason
        if row is None:
            message = f"Malformed edge: {reason}"
        else:
            message = f"Malformed edge at row {row}: {reason}"
        super().__init__(message)


class NotFoundError(GraphSearchError):
    """Base exception for lookups of unknown identifiers."""

    pass


class AirportNotFoundError(NotFoundError):
    """Raised when an airport code is not a vertex of the graph."""

    def __init__(self, airport: str, context: str = "flight graph") -> None:
        self.airport = airport
        message = f"Airport '{airport}' not found in {context}"
        super().__init__(message)
