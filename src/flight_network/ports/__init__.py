"""
Port interfaces for the Flight Network engine.

Ports define the abstract interfaces (ABCs) that the domain layer uses
to communicate with external systems. This follows the Ports and
Adapters (Hexagonal) architecture pattern.
"""

from src.flight_network.ports.airport_catalog import AirportCatalog
from src.flight_network.ports.flight_data_provider import FlightDataProvider
from src.flight_network.ports.route_finder import RouteFinder

__all__ = [
    "AirportCatalog",
    "FlightDataProvider",
    "RouteFinder",
]
