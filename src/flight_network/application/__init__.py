"""
Application layer for the Flight Network engine.

This layer provides the public API: a facade that wires the default
adapters and exposes every route query and network metric.
"""

from src.flight_network.application.flight_network import FlightNetwork

__all__ = ["FlightNetwork"]
