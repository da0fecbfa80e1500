"""
DataFrame Airport Catalog - indexed lookups over the airport/airline tables.
"""

import logging
from typing import List, Optional

import pandas as pd

from src.graph_search.exceptions import AirportNotFoundError
from src.flight_network.exceptions import AirlineNotFoundError
from src.flight_network.ports.airport_catalog import AirportCatalog
from src.flight_network.schemas.airport import Airline, Airport, Position

logger = logging.getLogger(__name__)


class DataFrameAirportCatalog(AirportCatalog):
    """
    Airport catalog backed by code-indexed DataFrames.

    Attributes:
        _airports: Airport table indexed by code.
        _airlines: Airline table indexed by code.
    """

    def __init__(self, airports_df: pd.DataFrame, airlines_df: pd.DataFrame) -> None:
        """
        Index the tables by code.

        Args:
            airports_df: Table validated against AirportSchema.
            airlines_df: Table validated against AirlineSchema.
        """
        self._airports = airports_df.set_index("code", drop=False)
        self._airlines = airlines_df.set_index("code", drop=False)
        logger.debug(
            "Catalog indexed: %d airports, %d airlines",
            len(self._airports),
            len(self._airlines),
        )

    def lookup_airport(self, code: str) -> Airport:
        if code not in self._airports.index:
            raise AirportNotFoundError(code, "airport catalog")

        row = self._airports.loc[code]
        return Airport(
            code=code,
            name=str(row["name"]),
            city=str(row["city"]),
            country=str(row["country"]),
            position=Position(float(row["latitude"]), float(row["longitude"])),
        )

    def lookup_airline(self, code: str) -> Airline:
        if code not in self._airlines.index:
            raise AirlineNotFoundError(code)

        row = self._airlines.loc[code]
        return Airline(
            code=code,
            name=str(row["name"]),
            callsign=_optional_text(row.get("callsign")),
            country=_optional_text(row.get("country")),
        )

    def airports_named(self, name: str) -> List[str]:
        mask = self._airports["name"] == name
        return self._airports.loc[mask, "code"].tolist()

    def airports_in_city(self, city: str, country: str) -> List[str]:
        mask = (self._airports["city"] == city) & (self._airports["country"] == country)
        return self._airports.loc[mask, "code"].tolist()

    def positions(self) -> pd.DataFrame:
        return self._airports[["latitude", "longitude"]]

    def locales(self) -> pd.DataFrame:
        return self._airports[["city", "country"]]

    def airline_names(self) -> pd.Series:
        return self._airlines["name"]

    def has_airline(self, code: str) -> bool:
        return code in self._airlines.index

    @property
    def airport_count(self) -> int:
        return len(self._airports)


def _optional_text(value: Optional[object]) -> Optional[str]:
    """Blank or missing table cells become None."""
    if value is None or pd.isna(value):
        return None
    return str(value) or None
