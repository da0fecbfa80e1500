"""
Tests for DataFrameAirportCatalog.
"""

import numpy as np
import pandas as pd
import pytest

from src.graph_search.exceptions import AirportNotFoundError, NotFoundError
from src.flight_network.adapters.catalogs.dataframe_catalog import (
    DataFrameAirportCatalog,
)
from src.flight_network.exceptions import AirlineNotFoundError
from src.flight_network.schemas.airport import Airline, Airport, Position


class TestAirportLookups:
    """Tests for airport lookups by key."""

    def test_lookup_airport(self, catalog):
        airport = catalog.lookup_airport("OPO")

        assert airport == Airport(
            code="OPO",
            name="Francisco Sa Carneiro",
            city="Porto",
            country="Portugal",
            position=Position(41.2481, -8.6814),
        )

    def test_unknown_airport(self, catalog):
        with pytest.raises(AirportNotFoundError, match="airport catalog"):
            catalog.lookup_airport("QQQ")

    def test_airports_named_exact_match(self, catalog):
        assert catalog.airports_named("Heathrow") == ["LHR"]
        assert catalog.airports_named("heathrow") == []

    def test_airports_in_city_needs_country(self, catalog):
        assert sorted(catalog.airports_in_city("London", "United Kingdom")) == ["LGW", "LHR"]
        assert catalog.airports_in_city("London", "Canada") == []

    def test_positions_and_locales_indexed_by_code(self, catalog):
        assert catalog.positions().loc["LIS", "latitude"] == pytest.approx(38.7813)
        assert catalog.locales().loc["JFK", "city"] == "New York"

    def test_counts(self, catalog):
        assert catalog.airport_count == 9
        assert catalog.has_airport("XXX")
        assert not catalog.has_airport("QQQ")

    def test_positions_measure_distances(self, catalog):
        opo = catalog.lookup_airport("OPO").position
        lis = catalog.lookup_airport("LIS").position

        assert opo.distance_to(lis) == pytest.approx(277, abs=3)
        assert opo.distance_to(opo) == 0.0


class TestAirlineLookups:
    """Tests for airline lookups by key."""

    def test_lookup_airline(self, catalog):
        assert catalog.lookup_airline("TP") == Airline(
            code="TP", name="TAP Air Portugal", callsign="AIR PORTUGAL", country="Portugal"
        )

    def test_blank_optional_fields_become_none(self, catalog):
        airline = catalog.lookup_airline("ZZ")

        assert airline.callsign is None
        assert airline.country is None

    def test_missing_optional_fields_in_raw_table(self, airports_df):
        airlines = pd.DataFrame(
            {"code": ["X", "Y"], "name": ["Xair", "Yair"], "callsign": [np.nan, "YANKEE"]}
        )
        catalog = DataFrameAirportCatalog(airports_df, airlines)

        assert catalog.lookup_airline("X") == Airline(code="X", name="Xair")
        assert catalog.lookup_airline("Y").callsign == "YANKEE"
        assert catalog.lookup_airline("Y").country is None

    def test_unknown_airline(self, catalog):
        with pytest.raises(AirlineNotFoundError, match="'QQ' not found") as exc_info:
            catalog.lookup_airline("QQ")

        assert isinstance(exc_info.value, NotFoundError)
        assert exc_info.value.airline == "QQ"

    def test_airline_names(self, catalog):
        assert catalog.airline_names()["BA"] == "British Airways"
        assert catalog.has_airline("AA")
        assert not catalog.has_airline("QQ")
