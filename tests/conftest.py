"""
Shared fixtures: a small Iberian/transatlantic network snapshot.

Undirected shape of the network:

    FNC - LIS - OPO
           |     |
          LHR - MAD - BCN - LGW
           |
          JFK

OPO-LIS-LHR-MAD is a cycle; BCN, LGW, JFK and FNC hang off it, so the
cut vertices are LIS, LHR, MAD and BCN. XXX is in the catalog but has
no flights.
"""

from typing import Callable, Iterable, Tuple

import pandas as pd
import pytest

from src.flight_network.adapters.algorithms.bfs_adapter import BfsRouteFinder
from src.flight_network.adapters.catalogs.dataframe_catalog import (
    DataFrameAirportCatalog,
)
from src.flight_network.adapters.data_providers.dataframe_provider import (
    DataFrameDataProvider,
)
from src.flight_network.adapters.repositories.flight_graph_repo import (
    EDGE_COLUMNS,
    FlightGraph,
    FlightGraphRepository,
)


AIRPORT_ROWS = [
    ("OPO", "Francisco Sa Carneiro", "Porto", "Portugal", 41.2481, -8.6814),
    ("LIS", "Humberto Delgado", "Lisbon", "Portugal", 38.7813, -9.1359),
    ("FNC", "Madeira", "Funchal", "Portugal", 32.6979, -16.7745),
    ("MAD", "Adolfo Suarez Barajas", "Madrid", "Spain", 40.4719, -3.5626),
    ("BCN", "El Prat", "Barcelona", "Spain", 41.2971, 2.0785),
    ("LHR", "Heathrow", "London", "United Kingdom", 51.4706, -0.4619),
    ("LGW", "Gatwick", "London", "United Kingdom", 51.1481, -0.1903),
    ("JFK", "John F Kennedy Intl", "New York", "United States", 40.6398, -73.7789),
    ("XXX", "Isolated Field", "Nowhere", "Iceland", 64.0, -20.0),
]

AIRLINE_ROWS = [
    ("TP", "TAP Air Portugal", "AIR PORTUGAL", "Portugal"),
    ("IB", "Iberia", "IBERIA", "Spain"),
    ("BA", "British Airways", "SPEEDBIRD", "United Kingdom"),
    ("FR", "Ryanair", "RYANAIR", "Ireland"),
    ("AA", "American Airlines", "AMERICAN", "United States"),
    ("ZZ", "Dormant Air", None, None),
]

FLIGHT_ROWS = [
    ("OPO", "LIS", "TP"),
    ("LIS", "OPO", "TP"),
    ("OPO", "MAD", "IB"),
    ("OPO", "MAD", "FR"),
    ("MAD", "OPO", "IB"),
    ("LIS", "LHR", "TP"),
    ("LIS", "LHR", "BA"),
    ("LHR", "LIS", "BA"),
    ("MAD", "BCN", "IB"),
    ("BCN", "MAD", "IB"),
    ("MAD", "LHR", "IB"),
    ("BCN", "LGW", "FR"),
    ("LGW", "BCN", "FR"),
    ("LHR", "JFK", "BA"),
    ("LHR", "JFK", "AA"),
    ("JFK", "LHR", "AA"),
    ("LIS", "FNC", "TP"),
    ("FNC", "LIS", "TP"),
]


# =============================================================================
# SOURCE TABLES
# =============================================================================


@pytest.fixture
def airports_df() -> pd.DataFrame:
    """Airport table with schema column names."""
    return pd.DataFrame(
        AIRPORT_ROWS,
        columns=["code", "name", "city", "country", "latitude", "longitude"],
    )


@pytest.fixture
def airlines_df() -> pd.DataFrame:
    """Airline table with schema column names."""
    return pd.DataFrame(AIRLINE_ROWS, columns=["code", "name", "callsign", "country"])


@pytest.fixture
def flights_df() -> pd.DataFrame:
    """Raw flights (no distance column)."""
    return pd.DataFrame(FLIGHT_ROWS, columns=["source", "target", "airline"])


@pytest.fixture
def csv_dir(tmp_path, airports_df, airlines_df, flights_df):
    """Directory holding the snapshot as CSV files with source headers."""
    airports_df.rename(columns=str.capitalize).to_csv(
        tmp_path / "airports.csv", index=False
    )
    airlines_df.rename(columns=str.capitalize).to_csv(
        tmp_path / "airlines.csv", index=False
    )
    flights_df.rename(columns=str.capitalize).to_csv(
        tmp_path / "flights.csv", index=False
    )
    return tmp_path


# =============================================================================
# WIRED COMPONENTS
# =============================================================================


@pytest.fixture
def provider(flights_df, airports_df, airlines_df) -> DataFrameDataProvider:
    return DataFrameDataProvider(flights_df, airports_df, airlines_df)


@pytest.fixture
def graph_repo(provider) -> FlightGraphRepository:
    return FlightGraphRepository(provider)


@pytest.fixture
def graph(graph_repo) -> FlightGraph:
    return graph_repo.get_graph()


@pytest.fixture
def catalog(provider) -> DataFrameAirportCatalog:
    return DataFrameAirportCatalog(
        provider.get_airports_df(), provider.get_airlines_df()
    )


@pytest.fixture
def route_finder() -> BfsRouteFinder:
    return BfsRouteFinder()


@pytest.fixture
def empty_catalog() -> DataFrameAirportCatalog:
    """Catalog without airports or airlines, for graphs built from bare edges."""
    return DataFrameAirportCatalog(
        pd.DataFrame(columns=["code", "name", "city", "country", "latitude", "longitude"]),
        pd.DataFrame(columns=["code", "name", "callsign", "country"]),
    )


@pytest.fixture
def repo_from_edges() -> Callable[[Iterable[Tuple[str, str, str, float]]], FlightGraphRepository]:
    """Factory building a repository over (source, target, airline, distance) tuples."""

    def _build(edges: Iterable[Tuple[str, str, str, float]]) -> FlightGraphRepository:
        edges_df = pd.DataFrame(list(edges), columns=EDGE_COLUMNS)
        empty = pd.DataFrame(columns=["code"])
        return FlightGraphRepository(DataFrameDataProvider(edges_df, empty, empty))

    return _build
