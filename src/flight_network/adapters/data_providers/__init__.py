"""
Data provider adapters for loading the network snapshot.
"""

from src.flight_network.adapters.data_providers.csv_provider import CsvDataProvider
from src.flight_network.adapters.data_providers.dataframe_provider import (
    DataFrameDataProvider,
    attach_distances,
)

__all__ = ["CsvDataProvider", "DataFrameDataProvider", "attach_distances"]
