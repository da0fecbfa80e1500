"""
Airport Catalog port interface.

Read-only lookup of airports and airlines by key. The graph engine only
knows airport codes; everything else (names, cities, positions) comes
from the catalog.
"""

from abc import ABC, abstractmethod
from typing import List

import pandas as pd

from src.flight_network.schemas.airport import Airline, Airport


class AirportCatalog(ABC):
    """
    Abstract interface for airport and airline lookups.

    Implementations:
    - DataFrameAirportCatalog: indexed pandas tables
    """

    @abstractmethod
    def lookup_airport(self, code: str) -> Airport:
        """
        Return the airport with this code.

        Raises:
            AirportNotFoundError: If the code is unknown.
        """
        ...

    @abstractmethod
    def lookup_airline(self, code: str) -> Airline:
        """
        Return the airline with this code.

        Raises:
            AirlineNotFoundError: If the code is unknown.
        """
        ...

    @abstractmethod
    def airports_named(self, name: str) -> List[str]:
        """Codes of every airport with exactly this name."""
        ...

    @abstractmethod
    def airports_in_city(self, city: str, country: str) -> List[str]:
        """Codes of every airport in this city and country."""
        ...

    @abstractmethod
    def positions(self) -> pd.DataFrame:
        """
        Airport coordinates indexed by code.

        Returns:
            DataFrame with 'latitude' and 'longitude' columns, index = code.
        """
        ...

    @abstractmethod
    def locales(self) -> pd.DataFrame:
        """
        City and country of every airport.

        Returns:
            DataFrame with 'city' and 'country' columns, index = code.
        """
        ...

    @abstractmethod
    def airline_names(self) -> pd.Series:
        """Airline display names indexed by airline code."""
        ...

    @abstractmethod
    def has_airline(self, code: str) -> bool:
        """Check if an airline code is known."""
        ...

    @property
    @abstractmethod
    def airport_count(self) -> int:
        """Number of airports in the catalog."""
        ...

    def has_airport(self, code: str) -> bool:
        """Check if an airport code is known."""
        return code in self.positions().index
