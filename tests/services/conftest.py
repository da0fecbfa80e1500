"""Pytest configuration for service tests."""

import pandas as pd
import pytest

from src.flight_network.adapters.catalogs.dataframe_catalog import (
    DataFrameAirportCatalog,
)
from src.flight_network.services.location_resolver_service import (
    LocationResolverService,
)
from src.flight_network.services.network_metrics_service import (
    NetworkMetricsService,
)
from src.flight_network.services.route_finder_service import RouteFinderService


@pytest.fixture
def resolver(graph_repo, catalog) -> LocationResolverService:
    return LocationResolverService(graph_repo, catalog)


@pytest.fixture
def route_service(graph_repo, route_finder, resolver, catalog) -> RouteFinderService:
    return RouteFinderService(graph_repo, route_finder, resolver, catalog)


@pytest.fixture
def metrics(graph_repo, catalog, route_finder) -> NetworkMetricsService:
    return NetworkMetricsService(graph_repo, catalog, route_finder)


@pytest.fixture
def equator_network(repo_from_edges):
    """
    Three airports near the equator and their catalog.

    A and B are both 111 km (truncated) from (0, 0); C is far away.
    """
    repo = repo_from_edges(
        [
            ("A", "B", "X", 112.0),
            ("B", "A", "X", 112.0),
            ("B", "C", "Y", 1500.0),
        ]
    )
    airports = pd.DataFrame(
        [
            ("A", "Alpha", "Alphaville", "Eastland", 0.0, 1.0),
            ("B", "Bravo", "Bravotown", "Westland", 0.0, -1.004),
            ("C", "Charlie", "Charlieton", "Northland", 10.0, 10.0),
        ],
        columns=["code", "name", "city", "country", "latitude", "longitude"],
    )
    airlines = pd.DataFrame(
        [("X", "Xair", "", ""), ("Y", "Yair", "", "")],
        columns=["code", "name", "callsign", "country"],
    )
    return repo, DataFrameAirportCatalog(airports, airlines)
