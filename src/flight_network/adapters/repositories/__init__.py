"""
Repository adapters for the flight graph.
"""

from src.flight_network.adapters.repositories.flight_graph_repo import (
    AdjacencyIndex,
    Edge,
    FlightGraph,
    FlightGraphRepository,
    build_adjacency_index,
    build_logical_adjacency,
)

__all__ = [
    "AdjacencyIndex",
    "Edge",
    "FlightGraph",
    "FlightGraphRepository",
    "build_adjacency_index",
    "build_logical_adjacency",
]
