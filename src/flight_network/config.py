"""
Configuration module for the Flight Network engine.

This module loads environment variables (and an optional .env file) and
provides centralized configuration for the data files and logging.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """
    Application configuration class.

    Every value has a default, so a missing .env file is not an error.

    Attributes:
        DATA_DIR: Directory holding the network snapshot CSV files.
        AIRPORTS_FILE: Airport table file name.
        AIRLINES_FILE: Airline table file name.
        FLIGHTS_FILE: Flight table file name.
        LOG_LEVEL: Root logging level name used by the CLI.
    """

    DATA_DIR: str = os.getenv("FLIGHT_NETWORK_DATA_DIR", "data")
    AIRPORTS_FILE: str = os.getenv("FLIGHT_NETWORK_AIRPORTS_FILE", "airports.csv")
    AIRLINES_FILE: str = os.getenv("FLIGHT_NETWORK_AIRLINES_FILE", "airlines.csv")
    FLIGHTS_FILE: str = os.getenv("FLIGHT_NETWORK_FLIGHTS_FILE", "flights.csv")
    LOG_LEVEL: str = os.getenv("FLIGHT_NETWORK_LOG_LEVEL", "INFO").upper()

    @classmethod
    def data_path(cls) -> Path:
        """DATA_DIR as a Path."""
        return Path(cls.DATA_DIR)
