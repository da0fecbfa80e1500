"""
Schema definitions for the Flight Network engine.

Pandera-validated DataFrames for source tables and aggregates, frozen
dataclasses for records and query results.
"""

from .airport import (
    Airline,
    AirlineSchema,
    Airport,
    AirportSchema,
    Position,
    haversine_km,
)
from .flight import (
    FlightEdgeDataFrame,
    FlightEdgeSchema,
    RawFlightDataFrame,
    RawFlightSchema,
)
from .metrics import (
    AirlineTrafficSchema,
    CityTrafficSchema,
    LongestTrip,
    ReachabilitySummary,
    ShortestDistanceTrip,
    TrafficEntry,
)
from .queries import (
    AirportCodeQuery,
    AirportNameQuery,
    CityQuery,
    CoordinatesQuery,
    LocationQuery,
)
from .route import Itinerary, Route, RouteOption

__all__ = [
    # Source tables
    "RawFlightSchema",
    "FlightEdgeSchema",
    "RawFlightDataFrame",
    "FlightEdgeDataFrame",
    "AirportSchema",
    "AirlineSchema",
    # Records
    "Airport",
    "Airline",
    "Position",
    "haversine_km",
    # Queries
    "AirportCodeQuery",
    "AirportNameQuery",
    "CityQuery",
    "CoordinatesQuery",
    "LocationQuery",
    # Results
    "Route",
    "Itinerary",
    "RouteOption",
    "ReachabilitySummary",
    "TrafficEntry",
    "LongestTrip",
    "ShortestDistanceTrip",
    "CityTrafficSchema",
    "AirlineTrafficSchema",
]
