"""
Tests for the graph_search validation module.

Tests input validation functions and custom exceptions.
"""

import numpy as np
import pandas as pd
import pytest

from src.graph_search.exceptions import (
    AirportNotFoundError,
    GraphSearchError,
    MalformedEdgeError,
    MissingColumnsError,
    NotFoundError,
    ValidationError,
)
from src.graph_search.validation import (
    REQUIRED_COLUMNS,
    validate_edge_codes,
    validate_edges_df,
    validate_search_endpoints,
    validate_vertex_exists,
)


# -------------------------
# Fixtures
# -------------------------


@pytest.fixture
def valid_edges_df() -> pd.DataFrame:
    """Create a valid edges DataFrame."""
    return pd.DataFrame({
        "source": ["OPO", "LIS", "OPO"],
        "target": ["LIS", "OPO", "LIS"],
        "airline": ["TP", "TP", "FR"],
        "distance": [274.0, 274.0, 274.0],
    })


# -------------------------
# Exception hierarchy tests
# -------------------------


class TestExceptionHierarchy:
    """Tests for exception class hierarchy."""

    def test_validation_error_is_graph_search_error(self) -> None:
        assert issubclass(ValidationError, GraphSearchError)

    def test_missing_columns_error_is_validation_error(self) -> None:
        assert issubclass(MissingColumnsError, ValidationError)

    def test_malformed_edge_error_is_validation_error(self) -> None:
        assert issubclass(MalformedEdgeError, ValidationError)

    def test_airport_not_found_is_not_found_error(self) -> None:
        assert issubclass(AirportNotFoundError, NotFoundError)
        assert issubclass(NotFoundError, GraphSearchError)


class TestExceptionMessages:
    """Tests for exception error messages."""

    def test_missing_columns_error_lists_columns(self) -> None:
        error = MissingColumnsError({"airline", "distance"})
        assert "airline, distance" in str(error)

    def test_malformed_edge_error_with_row(self) -> None:
        error = MalformedEdgeError("empty source airport code", row=3)
        assert error.row == 3
        assert "row 3" in str(error)

    def test_malformed_edge_error_without_row(self) -> None:
        error = MalformedEdgeError("bad")
        assert error.row is None
        assert str(error) == "Malformed edge: bad"

    def test_airport_not_found_includes_context(self) -> None:
        error = AirportNotFoundError("XYZ", "source airports")
        assert error.airport == "XYZ"
        assert "XYZ" in str(error)
        assert "source airports" in str(error)


# -------------------------
# validate_edges_df tests
# -------------------------


class TestValidateEdgesDf:
    """Tests for validate_edges_df function."""

    def test_valid_df_passes(self, valid_edges_df: pd.DataFrame) -> None:
        """Duplicate airport pairs are parallel service, not an error."""
        validate_edges_df(valid_edges_df)

    def test_empty_df_passes(self) -> None:
        validate_edges_df(pd.DataFrame(columns=list(REQUIRED_COLUMNS)))

    def test_missing_columns_raises(self) -> None:
        df = pd.DataFrame({"source": ["OPO"], "target": ["LIS"]})

        with pytest.raises(MissingColumnsError) as exc_info:
            validate_edges_df(df)

        assert exc_info.value.missing == {"airline", "distance"}

    @pytest.mark.parametrize("blank", ["", "   ", None, np.nan])
    def test_blank_source_raises(self, valid_edges_df: pd.DataFrame, blank) -> None:
        df = valid_edges_df.copy()
        df["source"] = df["source"].astype(object)
        df.loc[1, "source"] = blank

        with pytest.raises(MalformedEdgeError, match="row 1: empty source"):
            validate_edges_df(df)

    def test_blank_target_raises(self, valid_edges_df: pd.DataFrame) -> None:
        df = valid_edges_df.copy()
        df.loc[2, "target"] = ""

        with pytest.raises(MalformedEdgeError, match="empty target"):
            validate_edges_df(df)

    @pytest.mark.parametrize("distance", [-1.0, np.nan, np.inf, -np.inf])
    def test_invalid_distance_raises(
        self, valid_edges_df: pd.DataFrame, distance: float
    ) -> None:
        df = valid_edges_df.copy()
        df.loc[1, "distance"] = distance

        with pytest.raises(MalformedEdgeError, match="row 1: distance must be") as exc_info:
            validate_edges_df(df)

        assert exc_info.value.row == 1

    def test_zero_distance_allowed(self, valid_edges_df: pd.DataFrame) -> None:
        df = valid_edges_df.copy()
        df.loc[0, "distance"] = 0.0
        validate_edges_df(df)

    def test_extra_columns_allowed(self, valid_edges_df: pd.DataFrame) -> None:
        df = valid_edges_df.copy()
        df["equipment"] = "320"
        validate_edges_df(df)


class TestValidateEdgeCodes:
    """Tests for validate_edge_codes function."""

    def test_reports_first_blank_row(self) -> None:
        df = pd.DataFrame({"source": ["OPO", "LIS", ""], "target": ["LIS", "", "OPO"]})

        with pytest.raises(MalformedEdgeError) as exc_info:
            validate_edge_codes(df)

        # Sources are checked before targets
        assert exc_info.value.row == 2
        assert "source" in exc_info.value.reason


# -------------------------
# Vertex validation tests
# -------------------------


class TestValidateVertexExists:
    """Tests for validate_vertex_exists and validate_search_endpoints."""

    def test_existing_vertex_passes(self) -> None:
        validate_vertex_exists("OPO", {"OPO", "LIS"})

    def test_missing_vertex_raises(self) -> None:
        with pytest.raises(AirportNotFoundError, match="'XYZ' not found in flight graph"):
            validate_vertex_exists("XYZ", {"OPO", "LIS"})

    def test_missing_source_context(self) -> None:
        with pytest.raises(AirportNotFoundError, match="source airports"):
            validate_search_endpoints("XYZ", "OPO", {"OPO"})

    def test_missing_destination_context(self) -> None:
        with pytest.raises(AirportNotFoundError, match="destination airports"):
            validate_search_endpoints("OPO", "XYZ", {"OPO"})
