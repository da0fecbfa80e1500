"""
Location query types.

An endpoint of a route search can be given as an airport code, an
airport name, a city within a country, or raw coordinates.
"""

from dataclasses import dataclass
from typing import Union

from .airport import Position


@dataclass(frozen=True)
class AirportCodeQuery:
    """Endpoint given by airport code."""

    code: str

    def describe(self) -> str:
        return f"airport code '{self.code}'"


@dataclass(frozen=True)
class AirportNameQuery:
    """Endpoint given by exact airport name."""

    name: str

    def describe(self) -> str:
        return f"airport name '{self.name}'"


@dataclass(frozen=True)
class CityQuery:
    """Endpoint given by city and country; every airport in the city matches."""

    city: str
    country: str

    def describe(self) -> str:
        return f"city '{self.city}, {self.country}'"


@dataclass(frozen=True)
class CoordinatesQuery:
    """Endpoint given by coordinates; the nearest airports match."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        # Reuse Position's range checks
        Position(self.latitude, self.longitude)

    @property
    def position(self) -> Position:
        return Position(self.latitude, self.longitude)

    def describe(self) -> str:
        return f"coordinates ({self.latitude}, {self.longitude})"


LocationQuery = Union[AirportCodeQuery, AirportNameQuery, CityQuery, CoordinatesQuery]
