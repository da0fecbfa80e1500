"""
FlightNetwork Use Case - Public API for the flight network engine.

This module provides the main entry point for route queries and network
metrics. It acts as a Facade/Factory, handling dependency initialization
and providing a clean interface for consumers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from src.flight_network.adapters.algorithms.bfs_adapter import BfsRouteFinder
from src.flight_network.adapters.catalogs.dataframe_catalog import (
    DataFrameAirportCatalog,
)
from src.flight_network.adapters.data_providers.csv_provider import CsvDataProvider
from src.flight_network.adapters.repositories.flight_graph_repo import (
    FlightGraphRepository,
)
from src.flight_network.config import Config
from src.flight_network.exceptions import DataSourceUnavailableError
from src.flight_network.ports.flight_data_provider import FlightDataProvider
from src.flight_network.ports.route_finder import RouteFinder
from src.flight_network.schemas.airport import Airline, Airport
from src.flight_network.schemas.metrics import (
    AirlineTrafficDataFrame,
    CityTrafficDataFrame,
    LongestTrip,
    ReachabilitySummary,
    ShortestDistanceTrip,
    TrafficEntry,
)
from src.flight_network.schemas.queries import AirportCodeQuery, LocationQuery
from src.flight_network.schemas.route import Itinerary, RouteOption
from src.flight_network.services.location_resolver_service import (
    LocationResolverService,
)
from src.flight_network.services.network_metrics_service import (
    NetworkMetricsService,
)
from src.flight_network.services.route_finder_service import RouteFinderService

logger = logging.getLogger(__name__)

Endpoint = Union[str, LocationQuery]


class FlightNetwork:
    """
    Public API for the flight network engine.

    Example usage:
        >>> network = FlightNetwork(data_dir="data")
        >>> for option in network.find_routes("OPO", CityQuery("London", "United Kingdom")):
        ...     print(option.source, option.destination, len(option.itineraries))
        >>> network.top_traffic_airports(5)

    Attributes:
        _data_provider: Source of the network tables.
        _catalog: Airport and airline lookups.
        _graph_repo: Build-once flight graph repository.
        _route_service: Route queries.
        _metrics_service: Network statistics.
    """

    def __init__(
        self,
        data_dir: Optional[Union[str, Path]] = None,
        data_provider: Optional[FlightDataProvider] = None,
        route_finder: Optional[RouteFinder] = None,
    ) -> None:
        """
        Initialize the engine with optional custom dependencies.

        Args:
            data_dir: Directory of CSV files. Defaults to Config.DATA_DIR.
            data_provider: Custom data provider. If None, uses CsvDataProvider.
            route_finder: Custom algorithm. If None, uses BfsRouteFinder.

        Raises:
            DataSourceUnavailableError: If the provider reports its source missing.
        """
        if data_provider is not None:
            self._data_provider = data_provider
        else:
            self._data_provider = CsvDataProvider(
                data_dir=data_dir or Config.DATA_DIR,
                airports_file=Config.AIRPORTS_FILE,
                airlines_file=Config.AIRLINES_FILE,
                flights_file=Config.FLIGHTS_FILE,
            )

        if not self._data_provider.is_available:
            raise DataSourceUnavailableError(self._data_provider.name)

        self._catalog = DataFrameAirportCatalog(
            self._data_provider.get_airports_df(),
            self._data_provider.get_airlines_df(),
        )
        self._graph_repo = FlightGraphRepository(data_provider=self._data_provider)
        self._route_finder = route_finder or BfsRouteFinder()

        self._resolver = LocationResolverService(self._graph_repo, self._catalog)
        self._route_service = RouteFinderService(
            graph_repo=self._graph_repo,
            route_finder=self._route_finder,
            resolver=self._resolver,
            catalog=self._catalog,
        )
        self._metrics_service = NetworkMetricsService(
            graph_repo=self._graph_repo,
            catalog=self._catalog,
            route_finder=self._route_finder,
        )

        logger.info(
            "FlightNetwork initialized from %s with %s algorithm",
            self._data_provider.name,
            self._route_finder.name,
        )

    # -------------------------------------------------------------------------
    # Route queries
    # -------------------------------------------------------------------------

    def find_routes(
        self,
        source: Endpoint,
        destination: Endpoint,
        airlines: Optional[Iterable[str]] = None,
        fewest_airlines: bool = False,
    ) -> List[RouteOption]:
        """
        Find fewest-hop itineraries between two locations.

        Plain strings are treated as airport codes; any location query
        (name, city, coordinates) is accepted for either endpoint.

        Args:
            source: Origin code or location query.
            destination: Destination code or location query.
            airlines: Optional airline codes the trip may use.
            fewest_airlines: Reduce each itinerary to a common carrier set.

        Returns:
            One RouteOption per resolved (source, destination) pair.
        """
        return self._route_service.find_options(
            _as_query(source),
            _as_query(destination),
            airlines=airlines,
            fewest_airlines=fewest_airlines,
        )

    def best_options(
        self,
        source: str,
        destination: str,
        airlines: Optional[Iterable[str]] = None,
    ) -> List[Itinerary]:
        """Every fewest-hop itinerary between two airport codes."""
        return self._route_service.best_options(source, destination, airlines)

    def best_options_fewest_airlines(
        self, source: str, destination: str
    ) -> List[Itinerary]:
        """Every fewest-hop itinerary, each reduced to a common carrier set."""
        return self._route_service.best_options_fewest_airlines(source, destination)

    def smallest_distance(self, source: str, destination: str) -> Optional[float]:
        """Shortest total distance (km) among the fewest-hop itineraries."""
        return self._metrics_service.smallest_distance(source, destination)

    def shortest_distance_trip(
        self, source: str, destination: str
    ) -> Optional[ShortestDistanceTrip]:
        """Fewest-hop itinerary covering the least distance, with its total."""
        return self._metrics_service.shortest_distance_trip(source, destination)

    def resolve(self, query: LocationQuery) -> List[str]:
        """Airport codes a location query resolves to."""
        return self._resolver.resolve(query)

    # -------------------------------------------------------------------------
    # Network metrics
    # -------------------------------------------------------------------------

    def total_flight_count(self) -> int:
        return self._metrics_service.total_flight_count()

    def total_airport_count(self) -> int:
        return self._metrics_service.total_airport_count()

    def flights_from_airport(self, code: str) -> int:
        return self._metrics_service.flights_from_airport(code)

    def airlines_from_airport(self, code: str) -> int:
        return self._metrics_service.airlines_from_airport(code)

    def countries_from_airport(self, code: str) -> int:
        return self._metrics_service.countries_from_airport(code)

    def countries_from_city(self, city: str, country: str) -> int:
        return self._metrics_service.countries_from_city(city, country)

    def flights_per_city(self) -> CityTrafficDataFrame:
        return self._metrics_service.flights_per_city()

    def flights_per_airline(self) -> AirlineTrafficDataFrame:
        return self._metrics_service.flights_per_airline()

    def top_traffic_airports(self, k: int) -> List[TrafficEntry]:
        return self._metrics_service.top_traffic_airports(k)

    def reachability_summary(self, source: str) -> ReachabilitySummary:
        return self._metrics_service.reachability_summary(source)

    def reachability_with_stop_budget(
        self, source: str, max_stops: int
    ) -> ReachabilitySummary:
        return self._metrics_service.reachability_with_stop_budget(source, max_stops)

    def longest_shortest_trip(self) -> LongestTrip:
        return self._metrics_service.longest_shortest_trip()

    def essential_airports(self) -> List[str]:
        return self._metrics_service.essential_airports()

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def airport(self, code: str) -> Airport:
        """Catalog record of an airport."""
        return self._catalog.lookup_airport(code)

    def airline(self, code: str) -> Airline:
        """Catalog record of an airline."""
        return self._catalog.lookup_airline(code)

    def get_available_airports(self) -> List[str]:
        """Sorted codes of every airport with at least one flight."""
        return self._graph_repo.get_graph().airports

    def has_route(self, origin: str, destination: str) -> bool:
        """Check if a direct flight exists between two airports."""
        return self._graph_repo.get_graph().has_route(origin, destination)

    @property
    def is_ready(self) -> bool:
        """Check if the flight graph has been built."""
        return self._graph_repo.is_initialized

    @property
    def algorithm_name(self) -> str:
        """Get the name of the routing algorithm being used."""
        return self._route_service.algorithm_name

    def shutdown(self) -> None:
        """Release the built graph."""
        self._graph_repo.invalidate()
        logger.info("FlightNetwork shutdown complete")

    def __enter__(self) -> "FlightNetwork":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit with cleanup."""
        self.shutdown()


def _as_query(endpoint: Endpoint) -> LocationQuery:
    if isinstance(endpoint, str):
        return AirportCodeQuery(endpoint)
    return endpoint
