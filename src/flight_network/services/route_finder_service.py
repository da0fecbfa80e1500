"""
Route Finder Service - Domain orchestrator for route queries.

Coordinates the interaction between:
- FlightGraphRepository (build-once flight graph)
- RouteFinder (algorithm adapter)
- LocationResolverService (location queries to airport codes)
- AirportCatalog (airline filter validation)
"""

from __future__ import annotations

import logging
import time
from itertools import product
from typing import TYPE_CHECKING, FrozenSet, Iterable, List, Optional

from src.graph_search.exceptions import GraphSearchError
from src.flight_network.exceptions import AirlineNotFoundError
from src.flight_network.schemas.queries import AirportCodeQuery, LocationQuery
from src.flight_network.schemas.route import Itinerary, RouteOption

if TYPE_CHECKING:
    from src.flight_network.adapters.repositories.flight_graph_repo import (
        FlightGraphRepository,
    )
    from src.flight_network.ports.airport_catalog import AirportCatalog
    from src.flight_network.ports.route_finder import RouteFinder
    from src.flight_network.services.location_resolver_service import (
        LocationResolverService,
    )

logger = logging.getLogger(__name__)


class RouteFinderService:
    """
    Domain service for fewest-hop route queries.

    Orchestrates the routing process:
    1. Validates the airline filter against the catalog
    2. Resolves both endpoints to airport codes
    3. Searches every (source, destination) combination
    4. Logs performance metrics

    A failure in one combination is reported on its RouteOption and the
    remaining combinations are still searched.

    Attributes:
        _graph_repo: Repository providing the flight graph.
        _route_finder: Algorithm adapter for route finding.
        _resolver: Location query resolver.
        _catalog: Airport and airline lookups.
    """

    def __init__(
        self,
        graph_repo: FlightGraphRepository,
        route_finder: RouteFinder,
        resolver: LocationResolverService,
        catalog: AirportCatalog,
    ) -> None:
        self._graph_repo = graph_repo
        self._route_finder = route_finder
        self._resolver = resolver
        self._catalog = catalog

    def find_options(
        self,
        source_query: LocationQuery,
        destination_query: LocationQuery,
        airlines: Optional[Iterable[str]] = None,
        fewest_airlines: bool = False,
    ) -> List[RouteOption]:
        """
        Find fewest-hop itineraries between two locations.

        Each endpoint may resolve to several airports (a city with two
        airports, coordinates equidistant to several airports); every
        combination becomes one RouteOption.

        Args:
            source_query: Where the trip starts.
            destination_query: Where the trip ends.
            airlines: Optional airline codes the trip may use.
            fewest_airlines: Reduce each itinerary to a common carrier set.

        Returns:
            One RouteOption per (source, destination) combination,
            ordered by source then destination code.

        Raises:
            AirlineNotFoundError: If a filter airline is unknown.
            LocationNotFoundError: If an endpoint resolves to no airport.
        """
        start_time = time.perf_counter()

        allowed = self._validate_airlines(airlines)
        sources = self._resolver.resolve(source_query)
        destinations = self._resolver.resolve(destination_query)

        graph = self._graph_repo.get_graph()

        options = []
        for source, destination in product(sources, destinations):
            try:
                if fewest_airlines:
                    itineraries = self._route_finder.find_best_options_with_fewest_airlines(
                        graph, source, destination, allowed
                    )
                else:
                    itineraries = self._route_finder.find_best_options(
                        graph, source, destination, allowed
                    )
            except GraphSearchError as e:
                logger.warning("Route search %s -> %s failed: %s", source, destination, e)
                options.append(RouteOption(source, destination, error=str(e)))
                continue

            options.append(RouteOption(source, destination, tuple(itineraries)))

        logger.info(
            "Route search %s -> %s completed: %d combinations, %d itineraries in %.3fms",
            source_query.describe(),
            destination_query.describe(),
            len(options),
            sum(len(option.itineraries) for option in options),
            (time.perf_counter() - start_time) * 1000,
        )
        return options

    def best_options(
        self,
        source: str,
        destination: str,
        airlines: Optional[Iterable[str]] = None,
    ) -> List[Itinerary]:
        """
        Every fewest-hop itinerary between two airport codes.

        Raises:
            AirportNotFoundError: If either code is not in the graph.
            AirlineNotFoundError: If a filter airline is unknown.
        """
        allowed = self._validate_airlines(airlines)
        graph = self._graph_repo.get_graph()
        return self._route_finder.find_best_options(graph, source, destination, allowed)

    def best_options_fewest_airlines(
        self,
        source: str,
        destination: str,
    ) -> List[Itinerary]:
        """Like best_options, each itinerary reduced to a common carrier set."""
        graph = self._graph_repo.get_graph()
        return self._route_finder.find_best_options_with_fewest_airlines(
            graph, source, destination
        )

    def options_between_codes(
        self,
        source: str,
        destination: str,
        airlines: Optional[Iterable[str]] = None,
        fewest_airlines: bool = False,
    ) -> List[RouteOption]:
        """Convenience wrapper of find_options for two airport codes."""
        return self.find_options(
            AirportCodeQuery(source),
            AirportCodeQuery(destination),
            airlines=airlines,
            fewest_airlines=fewest_airlines,
        )

    def _validate_airlines(
        self, airlines: Optional[Iterable[str]]
    ) -> Optional[FrozenSet[str]]:
        """
        Check every filter airline against the catalog.

        Returns:
            Frozen airline set, or None when no filter was given.

        Raises:
            AirlineNotFoundError: On the first unknown code.
        """
        if airlines is None:
            return None

        allowed = frozenset(airlines)
        for code in sorted(allowed):
            if not self._catalog.has_airline(code):
                raise AirlineNotFoundError(code)
        return allowed or None

    @property
    def algorithm_name(self) -> str:
        """Get name of the underlying algorithm."""
        return self._route_finder.name
