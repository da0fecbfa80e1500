"""
Airport, airline and position value objects.

Pandera schemas describe the lookup tables; the frozen dataclasses are
the immutable records handed out by the airport catalog.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandera as pa
from pandera.typing import DataFrame, Series

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1, lon1, lat2, lon2):
    """
    Vectorized great-circle distance in kilometres.

    Accepts scalars or numpy arrays (broadcast against each other), so a
    single call can measure one point against every airport.

    Example:
        >>> round(float(haversine_km(0.0, 0.0, 0.0, 1.0)), 2)
        111.19
    """
    lat1, lon1, lat2, lon2 = map(np.radians, (lat1, lon1, lat2, lon2))
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = np.sin(dlat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * np.arcsin(np.sqrt(a))


@dataclass(frozen=True)
class Position:
    """Geographic position in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude must be in [-90, 90], got {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(
                f"longitude must be in [-180, 180], got {self.longitude}"
            )

    def distance_to(self, other: "Position") -> float:
        """Haversine distance to another position in kilometres."""
        return float(
            haversine_km(self.latitude, self.longitude, other.latitude, other.longitude)
        )


@dataclass(frozen=True)
class Airport:
    """Immutable airport record."""

    code: str
    name: str
    city: str
    country: str
    position: Position


@dataclass(frozen=True)
class Airline:
    """Immutable airline record."""

    code: str
    name: str
    callsign: Optional[str] = None
    country: Optional[str] = None


class AirportSchema(pa.DataFrameModel):
    """Schema for the airport lookup table."""

    code: Series[str] = pa.Field(nullable=False, unique=True)
    name: Series[str] = pa.Field(nullable=False)
    city: Series[str] = pa.Field(nullable=False)
    country: Series[str] = pa.Field(nullable=False)
    latitude: Series[float] = pa.Field(ge=-90, le=90)
    longitude: Series[float] = pa.Field(ge=-180, le=180)

    class Config:
        strict = False
        coerce = True
        name = "AirportSchema"


class AirlineSchema(pa.DataFrameModel):
    """Schema for the airline lookup table."""

    code: Series[str] = pa.Field(nullable=False, unique=True)
    name: Series[str] = pa.Field(nullable=False)
    callsign: Optional[Series[str]] = pa.Field(nullable=True)
    country: Optional[Series[str]] = pa.Field(nullable=True)

    class Config:
        strict = False
        coerce = True
        name = "AirlineSchema"


AirportDataFrame = DataFrame[AirportSchema]
AirlineDataFrame = DataFrame[AirlineSchema]
