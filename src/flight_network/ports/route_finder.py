"""
Route Finder port interface.

Defines the abstract contract for routing algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, AbstractSet, List, Optional

if TYPE_CHECKING:
    from src.flight_network.adapters.repositories.flight_graph_repo import (
        FlightGraph,
    )
    from src.flight_network.schemas.route import Itinerary


class RouteFinder(ABC):
    """
    Abstract interface for route finding algorithms.

    Algorithm adapters receive the full FlightGraph and query its
    traversal primitives directly.

    Implementations:
    - BfsRouteFinder: all fewest-hop itineraries via multi-path BFS
    """

    @abstractmethod
    def find_best_options(
        self,
        graph: FlightGraph,
        source: str,
        destination: str,
        allowed_airlines: Optional[AbstractSet[str]] = None,
    ) -> List[Itinerary]:
        """
        Find every fewest-hop itinerary between two airports.

        Args:
            graph: Built FlightGraph.
            source: Origin airport code.
            destination: Destination airport code.
            allowed_airlines: Optional airline filter (empty = none).

        Returns:
            Deduplicated itineraries, all with the same hop count.
            Empty if no path satisfies the filter.

        Raises:
            AirportNotFoundError: If either code is not in the graph.
        """
        ...

    @abstractmethod
    def find_best_options_with_fewest_airlines(
        self,
        graph: FlightGraph,
        source: str,
        destination: str,
        allowed_airlines: Optional[AbstractSet[str]] = None,
    ) -> List[Itinerary]:
        """
        Same as find_best_options, with each itinerary's airline
        annotation reduced to a common carrier set where one exists.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
