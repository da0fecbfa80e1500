"""
Network Metrics Service - structural statistics of the flight network.

Counts and rankings come straight from the graph's degree tables;
reachability and the longest shortest trip run the graph's BFS/DFS
primitives; tabular aggregates are grouped with pandas and validated
against the metric schemas.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Iterable, List, Optional, Set

import pandas as pd

from src.flight_network.schemas.metrics import (
    AirlineTrafficDataFrame,
    AirlineTrafficSchema,
    CityTrafficDataFrame,
    CityTrafficSchema,
    LongestTrip,
    ReachabilitySummary,
    ShortestDistanceTrip,
    TrafficEntry,
)

if TYPE_CHECKING:
    from src.flight_network.adapters.repositories.flight_graph_repo import (
        FlightGraphRepository,
    )
    from src.flight_network.ports.airport_catalog import AirportCatalog
    from src.flight_network.ports.route_finder import RouteFinder

logger = logging.getLogger(__name__)


class NetworkMetricsService:
    """
    Read-only metrics over the built flight graph.

    Attributes:
        _graph_repo: Repository providing the flight graph.
        _catalog: Airport and airline lookups (names, cities, countries).
        _route_finder: Algorithm used by smallest_distance.
    """

    def __init__(
        self,
        graph_repo: FlightGraphRepository,
        catalog: AirportCatalog,
        route_finder: RouteFinder,
    ) -> None:
        self._graph_repo = graph_repo
        self._catalog = catalog
        self._route_finder = route_finder

    # -------------------------------------------------------------------------
    # Global counts
    # -------------------------------------------------------------------------

    def total_flight_count(self) -> int:
        """Directed edges in the network (parallel airline edges counted apart)."""
        return self._graph_repo.get_graph().edge_count

    def total_airport_count(self) -> int:
        """Airports in the catalog, including those without flights."""
        return self._catalog.airport_count

    # -------------------------------------------------------------------------
    # Per-airport statistics
    # -------------------------------------------------------------------------

    def flights_from_airport(self, code: str) -> int:
        """Outgoing flights of an airport."""
        return self._graph_repo.get_graph().out_degree(code)

    def airlines_from_airport(self, code: str) -> int:
        """Distinct airlines with an outgoing flight from the airport."""
        edges = self._graph_repo.get_graph().adjacency(code)
        return len({edge.airline for edge in edges})

    def countries_from_airport(self, code: str) -> int:
        """Distinct countries served directly from the airport."""
        graph = self._graph_repo.get_graph()
        return len(self._countries_of(graph.neighbours(code)))

    def countries_from_city(self, city: str, country: str) -> int:
        """Distinct countries served directly from any airport of the city."""
        graph = self._graph_repo.get_graph()
        targets: Set[str] = set()
        for code in self._catalog.airports_in_city(city, country):
            if graph.has_vertex(code):
                targets.update(graph.neighbours(code))
        return len(self._countries_of(targets))

    def top_traffic_airports(self, k: int) -> List[TrafficEntry]:
        """
        Rank airports by traffic (in-degree + out-degree).

        Args:
            k: Number of airports to return.

        Returns:
            The k busiest airports, busiest first, ties ordered by code.
            Empty when k <= 0 or k exceeds the number of airports.
        """
        graph = self._graph_repo.get_graph()
        if k <= 0 or k > len(graph.vertices):
            return []

        traffic = sorted(
            ((graph.in_degree(code) + graph.out_degree(code), code) for code in graph.vertices),
            key=lambda item: (-item[0], item[1]),
        )
        return [
            TrafficEntry(rank=rank, code=code, name=self._airport_name(code), traffic=count)
            for rank, (count, code) in enumerate(traffic[:k], start=1)
        ]

    # -------------------------------------------------------------------------
    # Reachability
    # -------------------------------------------------------------------------

    def reachability_summary(self, source: str) -> ReachabilitySummary:
        """
        Airports, cities and countries reachable from an airport.

        The source's own airport, city and country are never counted.

        Raises:
            AirportNotFoundError: If the code is not in the graph.
        """
        reached = self._graph_repo.get_graph().depth_first_reach(source)
        return self._summarize(source, reached)

    def reachability_with_stop_budget(
        self, source: str, max_stops: int
    ) -> ReachabilitySummary:
        """
        Reachability restricted to trips with at most max_stops stops.

        A direct flight has zero stops, so the search goes max_stops + 1
        hops deep.

        Raises:
            AirportNotFoundError: If the code is not in the graph.
            ValueError: If max_stops is negative.
        """
        if max_stops < 0:
            raise ValueError(f"max_stops must be >= 0, got {max_stops}")

        reached = self._graph_repo.get_graph().nodes_within_hops(source, max_stops + 1)
        return self._summarize(source, reached)

    def longest_shortest_trip(self) -> LongestTrip:
        """
        Longest fewest-hop trip in the network.

        Runs a BFS from every airport and keeps the greatest eccentricity
        found, with every (source, furthest airport) pair reaching it.
        """
        start_time = time.perf_counter()
        graph = self._graph_repo.get_graph()

        best = 0
        pairs = []
        for source in graph.airports:
            hops, furthest = graph.eccentricity(source)
            if hops == 0 or hops < best:
                continue
            if hops > best:
                best = hops
                pairs = []
            pairs.extend((source, target) for target in furthest)

        logger.info(
            "Longest shortest trip: %d hops, %d pairs (%.3fms)",
            best,
            len(pairs),
            (time.perf_counter() - start_time) * 1000,
        )
        return LongestTrip(hops=best, pairs=tuple(pairs))

    def smallest_distance(self, source: str, destination: str) -> Optional[float]:
        """Total distance (km) of shortest_distance_trip, or None when no path exists."""
        trip = self.shortest_distance_trip(source, destination)
        return trip.distance if trip is not None else None

    def shortest_distance_trip(
        self, source: str, destination: str
    ) -> Optional[ShortestDistanceTrip]:
        """
        Fewest-hop itinerary covering the least distance.

        Longer itineraries are never considered, even when they cover
        less distance. Ties keep the first itinerary in sorted order.

        Returns:
            The trip with its total distance, or None when no path exists.

        Raises:
            AirportNotFoundError: If either code is not in the graph.
        """
        graph = self._graph_repo.get_graph()
        itineraries = self._route_finder.find_best_options(graph, source, destination)
        if not itineraries:
            return None

        best = None
        for itinerary in itineraries:
            distance = sum(
                graph.edge_distance(hop.source, hop.target) for hop in itinerary
            )
            if best is None or distance < best.distance:
                best = ShortestDistanceTrip(distance=distance, itinerary=itinerary)
        return best

    def essential_airports(self) -> List[str]:
        """Sorted airports whose removal disconnects the network."""
        return sorted(self._graph_repo.get_graph().articulation_points())

    # -------------------------------------------------------------------------
    # Aggregates
    # -------------------------------------------------------------------------

    def flights_per_city(self) -> CityTrafficDataFrame:
        """
        Flights touching each city (in- plus out-degree of its airports).

        Returns:
            DataFrame with city, country, flights, sorted by city then country.
        """
        graph = self._graph_repo.get_graph()
        degrees = pd.DataFrame(
            {
                "code": graph.airports,
                "flights": [
                    graph.in_degree(code) + graph.out_degree(code)
                    for code in graph.airports
                ],
            }
        )
        locales = self._catalog.locales()
        merged = degrees.merge(
            locales, left_on="code", right_index=True, how="inner"
        )
        per_city = (
            merged.groupby(["city", "country"], as_index=False)["flights"]
            .sum()
            .sort_values(["city", "country"])
            .reset_index(drop=True)
        )
        return CityTrafficSchema.validate(per_city[["city", "country", "flights"]])

    def flights_per_airline(self) -> AirlineTrafficDataFrame:
        """
        Flights operated by each airline.

        Returns:
            DataFrame with airline, name, flights, sorted by airline code.
        """
        edges = self._graph_repo.get_graph().edges_df
        counts = (
            edges.groupby("airline").size().rename("flights").reset_index()
        )
        names = self._catalog.airline_names()
        counts["name"] = counts["airline"].map(names).fillna("")
        counts = counts.sort_values("airline").reset_index(drop=True)
        return AirlineTrafficSchema.validate(counts[["airline", "name", "flights"]])

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _summarize(self, source: str, reached: Iterable[str]) -> ReachabilitySummary:
        """Count reached airports, cities and countries net of the source's own."""
        locales = self._catalog.locales()
        targets = set(reached) - {source}
        known = locales.loc[locales.index.isin(targets)]

        cities = set(zip(known["city"], known["country"]))
        countries = set(known["country"])
        if source in locales.index:
            city, country = locales.loc[source, ["city", "country"]]
            cities.discard((city, country))
            countries.discard(country)

        return ReachabilitySummary(
            source=source,
            airports=len(targets),
            cities=len(cities),
            countries=len(countries),
        )

    def _countries_of(self, codes: Iterable[str]) -> Set[str]:
        locales = self._catalog.locales()
        return set(locales.loc[locales.index.isin(list(codes)), "country"])

    def _airport_name(self, code: str) -> str:
        if self._catalog.has_airport(code):
            return self._catalog.lookup_airport(code).name
        return code
