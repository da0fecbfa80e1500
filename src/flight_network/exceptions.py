"""
Domain exceptions for the Flight Network engine.

Lookup failures extend the graph_search NotFoundError so callers can
catch every unknown-identifier case with a single except clause.
"""

from src.graph_search.exceptions import GraphSearchError, NotFoundError


class FlightNetworkError(GraphSearchError):
    """Base exception for domain-level errors."""

    pass


class AirlineNotFoundError(NotFoundError, FlightNetworkError):
    """Raised when an airline code is unknown to the catalog."""

    def __init__(self, airline: str) -> None:
        self.airline = airline
        super().__init__(f"Airline '{airline}' not found")


class LocationNotFoundError(NotFoundError, FlightNetworkError):
    """Raised when a location query resolves to no airport."""

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"No airport matches {description}")


class GraphNotInitializedError(FlightNetworkError):
    """Raised when the flight graph cannot be built on first access."""

    pass


class DataSourceUnavailableError(FlightNetworkError):
    """Raised when the data provider reports its source as unavailable."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"Data source unavailable: {source}")
