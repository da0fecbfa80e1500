"""
Flight Data Provider port interface.

Defines the abstract contract for data sources that provide the network
snapshot. Implementations handle the specifics of different backends
(CSV files, in-memory tables, ...).
"""

from abc import ABC, abstractmethod

from src.flight_network.schemas.airport import AirlineDataFrame, AirportDataFrame
from src.flight_network.schemas.flight import FlightEdgeDataFrame


class FlightDataProvider(ABC):
    """
    Abstract interface for flight network data providers.

    Data providers return validated DataFrames directly - no object creation.
    Schema validation happens at the boundary (in the provider), not per-row.

    Implementations:
    - CsvDataProvider: airports/airlines/flights CSV files -> DataFrames
    - MockDataProvider: In-memory DataFrames for testing
    """

    @abstractmethod
    def get_flights_df(self) -> FlightEdgeDataFrame:
        """
        Return flight edges as a validated DataFrame.

        Returns:
            DataFrame validated against FlightEdgeSchema, one row per
            (source, target, airline) service with its distance.

        Raises:
            pandera.errors.SchemaError: If data fails validation.
            MalformedEdgeError: If a flight references an unknown airport.
        """
        ...

    @abstractmethod
    def get_airports_df(self) -> AirportDataFrame:
        """
        Return the airport table.

        Returns:
            DataFrame validated against AirportSchema.
        """
        ...

    @abstractmethod
    def get_airlines_df(self) -> AirlineDataFrame:
        """
        Return the airline table.

        Returns:
            DataFrame validated against AirlineSchema.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this data provider.

        Returns:
            Provider identifier (e.g., "CSV files", "Mock Provider").
        """
        ...

    @property
    def is_available(self) -> bool:
        """
        Check if the data source is currently available.

        Default implementation returns True. Override for providers
        that need a health check.
        """
        return True
