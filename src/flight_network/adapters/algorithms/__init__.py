"""
Algorithm adapters implementing the RouteFinder port.
"""

from src.flight_network.adapters.algorithms.bfs_adapter import BfsRouteFinder

__all__ = ["BfsRouteFinder"]
