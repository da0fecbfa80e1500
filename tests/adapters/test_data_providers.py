"""
Tests for the CSV and in-memory data providers.

Tests cover:
- Header renaming and string-typed codes from CSV
- Distance attachment (vectorized haversine)
- Rejection of blank codes and unknown airports
- Optional airline columns
"""

import pandas as pd
import pytest
from pandera.errors import SchemaError

from src.graph_search.exceptions import MalformedEdgeError, MissingColumnsError
from src.flight_network.adapters.data_providers.csv_provider import CsvDataProvider
from src.flight_network.adapters.data_providers.dataframe_provider import (
    DataFrameDataProvider,
    attach_distances,
    prepare_airlines,
    prepare_flights,
)
from src.flight_network.schemas.airport import haversine_km


# =============================================================================
# attach_distances
# =============================================================================


class TestAttachDistances:
    """Tests for the distance transformation."""

    def test_adds_haversine_distance(self, flights_df, airports_df):
        result = attach_distances(flights_df, airports_df)

        expected = float(haversine_km(41.2481, -8.6814, 38.7813, -9.1359))
        assert result.loc[0, "distance"] == pytest.approx(expected)
        assert "distance" not in flights_df.columns

    def test_symmetric_routes_share_distance(self, flights_df, airports_df):
        result = attach_distances(flights_df, airports_df)
        assert result.loc[0, "distance"] == pytest.approx(result.loc[1, "distance"])

    def test_unknown_airport_raises(self, flights_df, airports_df):
        flights = pd.concat(
            [flights_df, pd.DataFrame([("OPO", "QQQ", "TP")], columns=flights_df.columns)],
            ignore_index=True,
        )

        with pytest.raises(MalformedEdgeError, match="unknown target airport 'QQQ'") as exc_info:
            attach_distances(flights, airports_df)

        assert exc_info.value.row == len(flights_df)


class TestPrepareTables:
    """Tests for prepare_flights and prepare_airlines."""

    def test_missing_flight_columns(self):
        with pytest.raises(MissingColumnsError, match="airline"):
            prepare_flights(pd.DataFrame({"source": ["OPO"], "target": ["LIS"]}))

    def test_blank_code_is_malformed_edge(self, flights_df):
        flights_df.loc[3, "source"] = None

        with pytest.raises(MalformedEdgeError, match="row 3"):
            prepare_flights(flights_df)

    def test_null_airline_fails_schema(self, flights_df):
        flights_df.loc[0, "airline"] = None

        with pytest.raises(SchemaError):
            prepare_flights(flights_df)

    def test_airline_optional_columns_filled(self):
        airlines = prepare_airlines(pd.DataFrame({"code": ["TP"], "name": ["TAP"]}))

        assert airlines.loc[0, "callsign"] == ""
        assert airlines.loc[0, "country"] == ""

    def test_duplicate_airline_code_rejected(self, airlines_df):
        duplicated = pd.concat([airlines_df, airlines_df.head(1)], ignore_index=True)

        with pytest.raises(SchemaError):
            prepare_airlines(duplicated)


# =============================================================================
# DataFrameDataProvider
# =============================================================================


class TestDataFrameDataProvider:
    """Tests for the in-memory provider."""

    def test_flights_get_distances(self, provider):
        flights = provider.get_flights_df()

        assert list(flights.columns[:4]) == ["source", "target", "airline", "distance"]
        assert (flights["distance"] > 0).all()

    def test_existing_distance_kept(self, airports_df, airlines_df):
        edges = pd.DataFrame(
            {"source": ["A"], "target": ["B"], "airline": ["X"], "distance": [42.0]}
        )
        provider = DataFrameDataProvider(edges, airports_df, airlines_df)

        assert provider.get_flights_df().loc[0, "distance"] == 42.0

    def test_invalid_latitude_rejected(self, flights_df, airports_df, airlines_df):
        airports_df.loc[0, "latitude"] = 123.0
        provider = DataFrameDataProvider(flights_df, airports_df, airlines_df)

        with pytest.raises(SchemaError):
            provider.get_airports_df()

    def test_name(self, provider):
        assert provider.name == "In-memory tables"
        assert provider.is_available


# =============================================================================
# CsvDataProvider
# =============================================================================


class TestCsvDataProvider:
    """Tests for the CSV file provider."""

    def test_reads_all_tables(self, csv_dir):
        provider = CsvDataProvider(csv_dir)

        assert len(provider.get_airports_df()) == 9
        assert len(provider.get_airlines_df()) == 6
        assert len(provider.get_flights_df()) == 18

    def test_columns_renamed(self, csv_dir):
        airports = CsvDataProvider(csv_dir).get_airports_df()
        assert {"code", "name", "city", "country", "latitude", "longitude"} <= set(
            airports.columns
        )

    def test_coordinates_coerced_to_float(self, csv_dir):
        airports = CsvDataProvider(csv_dir).get_airports_df()
        assert airports["latitude"].dtype == float

    def test_numeric_looking_codes_stay_strings(self, csv_dir):
        (csv_dir / "airlines.csv").write_text("Code,Name,Callsign,Country\n1I,NetJets,,\n")

        airlines = CsvDataProvider(csv_dir).get_airlines_df()

        assert airlines.loc[0, "code"] == "1I"
        assert airlines.loc[0, "callsign"] == ""

    def test_matches_in_memory_provider(self, csv_dir, provider):
        from_csv = CsvDataProvider(csv_dir).get_flights_df()
        in_memory = provider.get_flights_df()

        assert list(from_csv["source"]) == list(in_memory["source"])
        assert from_csv["distance"].to_numpy() == pytest.approx(
            in_memory["distance"].to_numpy()
        )

    def test_blank_code_in_file(self, csv_dir):
        (csv_dir / "flights.csv").write_text("Source,Target,Airline\nOPO,,TP\n")

        with pytest.raises(MalformedEdgeError, match="empty target"):
            CsvDataProvider(csv_dir).get_flights_df()

    def test_missing_file(self, tmp_path):
        provider = CsvDataProvider(tmp_path)

        assert not provider.is_available
        with pytest.raises(FileNotFoundError, match="airports.csv"):
            provider.get_airports_df()

    def test_custom_file_names(self, csv_dir):
        (csv_dir / "flights.csv").rename(csv_dir / "routes.csv")
        provider = CsvDataProvider(csv_dir, flights_file="routes.csv")

        assert provider.is_available
        assert len(provider.get_flights_df()) == 18

    def test_tables_read_once(self, csv_dir):
        provider = CsvDataProvider(csv_dir)
        first = provider.get_airports_df()

        (csv_dir / "airports.csv").unlink()

        assert provider.get_airports_df() is first
        assert provider.name == f"CSV files in {csv_dir}"
