"""
Location Resolver Service - location queries to airport codes.

Only airports that are vertices of the flight graph are candidates, so a
resolved code can always be searched.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

import numpy as np

from src.flight_network.exceptions import LocationNotFoundError
from src.flight_network.schemas.airport import haversine_km
from src.flight_network.schemas.queries import (
    AirportCodeQuery,
    AirportNameQuery,
    CityQuery,
    CoordinatesQuery,
    LocationQuery,
)

if TYPE_CHECKING:
    from src.flight_network.adapters.repositories.flight_graph_repo import (
        FlightGraphRepository,
    )
    from src.flight_network.ports.airport_catalog import AirportCatalog

logger = logging.getLogger(__name__)


class LocationResolverService:
    """
    Resolves code, name, city and coordinate queries to airport codes.

    Attributes:
        _graph_repo: Repository providing the flight graph.
        _catalog: Airport lookup tables.
    """

    def __init__(
        self,
        graph_repo: FlightGraphRepository,
        catalog: AirportCatalog,
    ) -> None:
        self._graph_repo = graph_repo
        self._catalog = catalog

    def resolve(self, query: LocationQuery) -> List[str]:
        """
        Resolve a location query to one or more airport codes.

        Args:
            query: Code, name, city or coordinates query.

        Returns:
            Non-empty list of airport codes.

        Raises:
            LocationNotFoundError: If no graph airport matches.
            TypeError: If the query type is not supported.
        """
        codes = self._resolve(query)
        if not codes:
            raise LocationNotFoundError(query.describe())

        logger.debug("Resolved %s to %s", query.describe(), codes)
        return codes

    def _resolve(self, query: LocationQuery) -> List[str]:
        if isinstance(query, AirportCodeQuery):
            graph = self._graph_repo.get_graph()
            return [query.code] if graph.has_vertex(query.code) else []
        if isinstance(query, AirportNameQuery):
            return self._in_graph(self._catalog.airports_named(query.name))
        if isinstance(query, CityQuery):
            return self._in_graph(
                self._catalog.airports_in_city(query.city, query.country)
            )
        if isinstance(query, CoordinatesQuery):
            return self.nearest_airports(query.latitude, query.longitude)
        raise TypeError(f"Unsupported location query: {type(query).__name__}")

    def nearest_airports(self, latitude: float, longitude: float) -> List[str]:
        """
        Airports closest to a point.

        Distances are compared in whole kilometres (truncated), so every
        airport within the same kilometre as the closest one is returned.

        Returns:
            Sorted airport codes; empty when the graph has no positioned airport.
        """
        graph = self._graph_repo.get_graph()
        positions = self._catalog.positions()
        positions = positions[positions.index.isin(graph.vertices)]
        if positions.empty:
            return []

        distances = haversine_km(
            latitude,
            longitude,
            positions["latitude"].to_numpy(dtype=float),
            positions["longitude"].to_numpy(dtype=float),
        )
        whole_km = np.floor(distances).astype(np.int64)
        nearest = positions.index[whole_km == whole_km.min()]

        logger.debug(
            "Nearest airports to (%.4f, %.4f): %s at %d km",
            latitude,
            longitude,
            list(nearest),
            int(whole_km.min()),
        )
        return sorted(str(code) for code in nearest)

    def _in_graph(self, codes: List[str]) -> List[str]:
        graph = self._graph_repo.get_graph()
        return sorted(code for code in codes if graph.has_vertex(code))
