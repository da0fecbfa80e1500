"""
CSV Data Provider - source files to DataFrame adapter.

Reads the airports, airlines and flights CSV files of a network snapshot
and transforms them into schema-compliant DataFrames.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

import pandas as pd

from src.flight_network.adapters.data_providers.dataframe_provider import (
    attach_distances,
    prepare_airlines,
    prepare_flights,
)
from src.flight_network.ports.flight_data_provider import FlightDataProvider
from src.flight_network.schemas.airport import (
    AirlineDataFrame,
    AirportDataFrame,
    AirportSchema,
)
from src.flight_network.schemas.flight import FlightEdgeDataFrame, FlightEdgeSchema

logger = logging.getLogger(__name__)

# Source file headers -> schema column names
AIRPORT_COLUMNS: Dict[str, str] = {
    "Code": "code",
    "Name": "name",
    "City": "city",
    "Country": "country",
    "Latitude": "latitude",
    "Longitude": "longitude",
}
AIRLINE_COLUMNS: Dict[str, str] = {
    "Code": "code",
    "Name": "name",
    "Callsign": "callsign",
    "Country": "country",
}
FLIGHT_COLUMNS: Dict[str, str] = {
    "Source": "source",
    "Target": "target",
    "Airline": "airline",
}


class CsvDataProvider(FlightDataProvider):
    """
    Data provider for a directory of CSV files.

    Expected files (header row included):
    - airports.csv: Code,Name,City,Country,Latitude,Longitude
    - airlines.csv: Code,Name,Callsign,Country
    - flights.csv:  Source,Target,Airline

    Tables are read once and kept for the lifetime of the provider.

    Attributes:
        _data_dir: Directory holding the CSV files.
        _frames: Loaded tables keyed by file name.
    """

    def __init__(
        self,
        data_dir: Union[str, Path] = "data",
        airports_file: str = "airports.csv",
        airlines_file: str = "airlines.csv",
        flights_file: str = "flights.csv",
    ) -> None:
        """
        Initialize the CSV data provider.

        Args:
            data_dir: Directory holding the CSV files.
            airports_file: Airport table file name.
            airlines_file: Airline table file name.
            flights_file: Flight table file name.
        """
        self._data_dir = Path(data_dir)
        self._airports_file = airports_file
        self._airlines_file = airlines_file
        self._flights_file = flights_file
        self._frames: Dict[str, pd.DataFrame] = {}
        self._airports: Optional[AirportDataFrame] = None

    def _read_csv(self, file_name: str, columns: Dict[str, str]) -> pd.DataFrame:
        """Read one CSV file (cached) and rename its headers."""
        if file_name in self._frames:
            return self._frames[file_name]

        path = self._data_dir / file_name
        if not path.exists():
            raise FileNotFoundError(f"Data file not found: {path}")

        # Codes stay strings ("0B" or "1I" must not turn into numbers)
        df = pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""])
        df = df.rename(columns=columns)

        logger.debug("Read %d rows from %s", len(df), path)
        self._frames[file_name] = df
        return df

    def get_flights_df(self) -> FlightEdgeDataFrame:
        """
        Load flights and attach the distance of every hop.

        Returns:
            DataFrame validated against FlightEdgeSchema.
        """
        flights = prepare_flights(self._read_csv(self._flights_file, FLIGHT_COLUMNS))
        flights = attach_distances(flights, self.get_airports_df())
        validated = FlightEdgeSchema.validate(flights)

        logger.info("Loaded %d flights from %s", len(validated), self._data_dir)
        return validated

    def get_airports_df(self) -> AirportDataFrame:
        """
        Load the airport table.

        Returns:
            DataFrame validated against AirportSchema.
        """
        if self._airports is None:
            raw = self._read_csv(self._airports_file, AIRPORT_COLUMNS)
            self._airports = AirportSchema.validate(raw)
            logger.info("Loaded %d airports", len(self._airports))
        return self._airports

    def get_airlines_df(self) -> AirlineDataFrame:
        """
        Load the airline table.

        Returns:
            DataFrame validated against AirlineSchema.
        """
        return prepare_airlines(self._read_csv(self._airlines_file, AIRLINE_COLUMNS))

    @property
    def name(self) -> str:
        """Human-readable provider name."""
        return f"CSV files in {self._data_dir}"

    @property
    def is_available(self) -> bool:
        """Check if every data file exists."""
        return all(
            (self._data_dir / file_name).exists()
            for file_name in (
                self._airports_file,
                self._airlines_file,
                self._flights_file,
            )
        )
