"""
Catalog adapters for airport and airline lookups.
"""

from src.flight_network.adapters.catalogs.dataframe_catalog import (
    DataFrameAirportCatalog,
)

__all__ = ["DataFrameAirportCatalog"]
