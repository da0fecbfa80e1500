"""
Flight edge schemas using Pandera.

Defines the contract for flight edges flowing into the graph.
Schema validation happens at layer boundaries only, not per-row.
"""

import pandera as pa
from pandera.typing import DataFrame, Series


class RawFlightSchema(pa.DataFrameModel):
    """
    Flight records as read from the source data.

    One row per (source, target, airline) service. Several rows may share
    the same airport pair when more than one airline flies it.
    """

    source: Series[str] = pa.Field(
        nullable=False,
        description="Departure airport code (e.g., 'OPO', 'LIS')",
    )
    target: Series[str] = pa.Field(
        nullable=False,
        description="Arrival airport code",
    )
    airline: Series[str] = pa.Field(
        nullable=False,
        description="Operating airline code (e.g., 'TAP')",
    )

    class Config:
        # Extra columns pass through unchanged
        strict = False
        coerce = True
        name = "RawFlightSchema"
        description = "Flight records as loaded from the source files"


class FlightEdgeSchema(RawFlightSchema):
    """
    Graph-ready flight edges.

    Inherits the raw record fields and adds the physical distance of the
    hop, computed from the two airport positions.
    """

    distance: Series[float] = pa.Field(
        ge=0,
        nullable=False,
        description="Great-circle distance of the hop in kilometres",
    )

    class Config:
        strict = False
        coerce = True
        name = "FlightEdgeSchema"
        description = "Flight edges required by the graph builder"


# Type aliases for clarity in function signatures
RawFlightDataFrame = DataFrame[RawFlightSchema]
FlightEdgeDataFrame = DataFrame[FlightEdgeSchema]
