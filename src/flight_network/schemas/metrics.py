"""
Network metric result types.

Scalar results are frozen dataclasses; tabular aggregates are DataFrames
validated against the Pandera schemas below.
"""

from dataclasses import dataclass
from typing import List, Tuple

import pandera as pa
from pandera.typing import DataFrame, Series

from .route import Itinerary, itinerary_airports


@dataclass(frozen=True)
class ReachabilitySummary:
    """
    Counts of destinations reachable from an airport.

    The source's own airport, city and country are never counted.

    Attributes:
        source: Airport the reachability was computed from.
        airports: Distinct reachable airports.
        cities: Distinct reachable (city, country) pairs.
        countries: Distinct reachable countries.
    """

    source: str
    airports: int
    cities: int
    countries: int


@dataclass(frozen=True)
class TrafficEntry:
    """One row of the traffic ranking (traffic = in-degree + out-degree)."""

    rank: int
    code: str
    name: str
    traffic: int


@dataclass(frozen=True)
class LongestTrip:
    """
    Network-wide longest shortest trip.

    Attributes:
        hops: Greatest BFS eccentricity over all airports.
        pairs: Every (source, furthest airport) pair at that distance.
    """

    hops: int
    pairs: Tuple[Tuple[str, str], ...]

    @property
    def stops(self) -> int:
        """Intermediate stops on such a trip (hops - 1)."""
        return max(self.hops - 1, 0)


@dataclass(frozen=True)
class ShortestDistanceTrip:
    """
    Fewest-hop itinerary covering the least physical distance.

    Attributes:
        distance: Total distance in kilometres.
        itinerary: Hops achieving that distance (first in sorted order on ties).
    """

    distance: float
    itinerary: Itinerary

    @property
    def airports(self) -> List[str]:
        """Airports visited, in order."""
        return itinerary_airports(self.itinerary)


class CityTrafficSchema(pa.DataFrameModel):
    """Flights touching each city (sum of in- and out-degree of its airports)."""

    city: Series[str] = pa.Field(nullable=False)
    country: Series[str] = pa.Field(nullable=False)
    flights: Series[int] = pa.Field(ge=0)

    class Config:
        strict = False
        coerce = True
        name = "CityTrafficSchema"
        ordered = True


class AirlineTrafficSchema(pa.DataFrameModel):
    """Flights operated by each airline."""

    airline: Series[str] = pa.Field(nullable=False)
    name: Series[str] = pa.Field(nullable=False)
    flights: Series[int] = pa.Field(ge=0)

    class Config:
        strict = False
        coerce = True
        name = "AirlineTrafficSchema"
        ordered = True


CityTrafficDataFrame = DataFrame[CityTrafficSchema]
AirlineTrafficDataFrame = DataFrame[AirlineTrafficSchema]
