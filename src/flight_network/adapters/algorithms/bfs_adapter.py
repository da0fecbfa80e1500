"""
BFS Algorithm Adapter - Bridge between the graph engine and route results.

Turns the fewest-hop airport sequences found by the multi-path BFS into
Route itineraries, attaching to each hop the airlines that fly it.
"""

import logging
from collections import Counter
from typing import AbstractSet, List, Optional

from src.graph_search.shortest_paths import Path
from src.flight_network.adapters.repositories.flight_graph_repo import FlightGraph
from src.flight_network.ports.route_finder import RouteFinder
from src.flight_network.schemas.route import Itinerary, Route

logger = logging.getLogger(__name__)


class BfsRouteFinder(RouteFinder):
    """
    Route finder returning every fewest-hop itinerary.

    Parallel airline edges on the same airport pair collapse into one
    hop whose airline set lists every (allowed) carrier.
    """

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Multi-Path BFS"

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
            allowed_airlines: Optional airline filter (None or empty = any).

        Returns:
            Sorted, duplicate-free itineraries of equal hop count.

        Raises:
            AirportNotFoundError: If either code is not in the graph.
        """
        paths = graph.shortest_path_set(
            source, destination, allowed_airlines=allowed_airlines
        )
        itineraries = {
            self._path_to_itinerary(graph, path, allowed_airlines) for path in paths
        }

        logger.debug(
            "BFS found %d itineraries for %s -> %s (filter=%s)",
            len(itineraries),
            source,
            destination,
            sorted(allowed_airlines) if allowed_airlines else None,
        )
        return sorted(itineraries)

    def find_best_options_with_fewest_airlines(
        self,
        graph: FlightGraph,
        source: str,
        destination: str,
        allowed_airlines: Optional[AbstractSet[str]] = None,
    ) -> List[Itinerary]:
        options = self.find_best_options(graph, source, destination, allowed_airlines)
        return sorted({self.minimize_airlines(itinerary) for itinerary in options})

    @staticmethod
    def minimize_airlines(itinerary: Itinerary) -> Itinerary:
        """
        Reduce every hop to the airlines that fly the whole itinerary.

        Counts on how many hops each airline appears. When the most
        frequent airlines appear on every hop, each hop is annotated with
        exactly that set; otherwise the itinerary is returned unchanged.
        The hop sequence itself never changes.

        Example:
            >>> hops = (Route('A', 'B', ('X', 'Y')), Route('B', 'C', ('X', 'Z')))
            >>> BfsRouteFinder.minimize_airlines(hops)
            (Route(source='A', target='B', airlines=('X',)), Route(source='B', target='C', airlines=('X',)))
        """
        if not itinerary:
            return itinerary

        counts = Counter(code for hop in itinerary for code in hop.airlines)
        if not counts:
            return itinerary

        best = max(counts.values())
        if best != len(itinerary):
            return itinerary

        common = [code for code, count in counts.items() if count == best]
        return tuple(hop.with_airlines(common) for hop in itinerary)

    @staticmethod
    def _path_to_itinerary(
        graph: FlightGraph,
        path: Path,
        allowed_airlines: Optional[AbstractSet[str]],
    ) -> Itinerary:
        """Annotate each consecutive airport pair with its operating airlines."""
        hops = []
        for source, target in zip(path, path[1:]):
            airlines = graph.airlines_between(source, target)
            if allowed_airlines:
                airlines = airlines & allowed_airlines
            hops.append(Route.create(source, target, airlines))
        return tuple(hops)
