"""
DataFrame Data Provider - in-memory tables to validated DataFrames.

Also hosts the shared transformation that turns raw flight records into
graph-ready edges by attaching each hop's great-circle distance.
"""

import logging

import pandas as pd

from src.graph_search.exceptions import MalformedEdgeError, MissingColumnsError
from src.graph_search.validation import validate_edge_codes
from src.flight_network.ports.flight_data_provider import FlightDataProvider
from src.flight_network.schemas.airport import (
    AirlineDataFrame,
    AirlineSchema,
    AirportDataFrame,
    AirportSchema,
    haversine_km,
)
from src.flight_network.schemas.flight import (
    FlightEdgeDataFrame,
    FlightEdgeSchema,
    RawFlightSchema,
)

logger = logging.getLogger(__name__)

_OPTIONAL_AIRLINE_COLUMNS = ("callsign", "country")
RAW_FLIGHT_COLUMNS = {"source", "target", "airline"}


def attach_distances(
    flights_df: pd.DataFrame,
    airports_df: pd.DataFrame,
) -> pd.DataFrame:
    """
    Add a 'distance' column computed from the airport positions.

    Vectorized: both endpoints are joined to their coordinates and the
    haversine formula runs once over the whole column.

    Args:
        flights_df: Raw flights with 'source', 'target', 'airline'.
        airports_df: Airport table with 'code', 'latitude', 'longitude'.

    Returns:
        Copy of flights_df with a float 'distance' column (km).

    Raises:
        MalformedEdgeError: If a flight references an unknown airport.
    """
    positions = airports_df.set_index("code")[["latitude", "longitude"]]

    for column in ("source", "target"):
        unknown = ~flights_df[column].isin(positions.index)
        if unknown.any():
            row = int(unknown.to_numpy().nonzero()[0][0])
            code = flights_df[column].iloc[row]
            raise MalformedEdgeError(f"unknown {column} airport '{code}'", row=row)

    src = positions.loc[flights_df["source"]].to_numpy()
    dst = positions.loc[flights_df["target"]].to_numpy()

    result = flights_df.copy()
    result["distance"] = haversine_km(src[:, 0], src[:, 1], dst[:, 0], dst[:, 1])
    return result


def prepare_flights(flights_df: pd.DataFrame) -> pd.DataFrame:
    """
    Check raw flight records before schema coercion.

    Blank codes are reported as MalformedEdgeError rather than a schema
    error, since they are a structural fault of the edge itself.

    Raises:
        MissingColumnsError: If source, target or airline is missing.
        MalformedEdgeError: If a source or target code is empty.
    """
    missing = RAW_FLIGHT_COLUMNS - set(flights_df.columns)
    if missing:
        raise MissingColumnsError(missing)

    validate_edge_codes(flights_df)
    return RawFlightSchema.validate(flights_df)


def prepare_airlines(airlines_df: pd.DataFrame) -> AirlineDataFrame:
    """Fill absent optional airline columns and validate the table."""
    airlines_df = airlines_df.copy()
    for column in _OPTIONAL_AIRLINE_COLUMNS:
        if column not in airlines_df.columns:
            airlines_df[column] = ""
        airlines_df[column] = airlines_df[column].fillna("")
    return AirlineSchema.validate(airlines_df)


class DataFrameDataProvider(FlightDataProvider):
    """
    Data provider serving tables that are already in memory.

    Flights without a 'distance' column get one computed from the airport
    positions; flights that carry one are validated as-is.

    Attributes:
        _flights: Raw or graph-ready flight table.
        _airports: Airport table.
        _airlines: Airline table.
    """

    def __init__(
        self,
        flights_df: pd.DataFrame,
        airports_df: pd.DataFrame,
        airlines_df: pd.DataFrame,
    ) -> None:
        self._flights = flights_df
        self._airports = airports_df
        self._airlines = airlines_df

    def get_flights_df(self) -> FlightEdgeDataFrame:
        flights = prepare_flights(self._flights)
        if "distance" not in flights.columns:
            flights = attach_distances(flights, self.get_airports_df())

        validated = FlightEdgeSchema.validate(flights)
        logger.debug("Prepared %d flight edges", len(validated))
        return validated

    def get_airports_df(self) -> AirportDataFrame:
        return AirportSchema.validate(self._airports)

    def get_airlines_df(self) -> AirlineDataFrame:
        return prepare_airlines(self._airlines)

    @property
    def name(self) -> str:
        """Human-readable provider name."""
        return "In-memory tables"
