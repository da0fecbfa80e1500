"""
Input validation for the graph_search module.

Provides validation functions that check inputs before graph building
and traversal, ensuring fail-fast behavior with clear error messages.
"""

from typing import Collection, Optional, Set

import numpy as np
import pandas as pd

from .exceptions import (
    AirportNotFoundError,
    MalformedEdgeError,
    MissingColumnsError,
)

# Required columns for the edges DataFrame
REQUIRED_COLUMNS: Set[str] = {
    "source",
    "target",
    "airline",
    "distance",
}


def _first_blank_row(codes: pd.Series) -> Optional[int]:
    """Return the positional index of the first null or blank code, if any."""
    blank = codes.isna().to_numpy() | (
        codes.astype(str).str.strip().to_numpy() == ""
    )
    positions = np.flatnonzero(blank)
    if len(positions) == 0:
        return None
    return int(positions[0])


def validate_edge_codes(edges_df: pd.DataFrame) -> None:
    """
    Validate that every edge has a non-empty source and target code.

    Raises:
        MalformedEdgeError: On the first null or blank code found.
    """
    for column in ("source", "target"):
        row = _first_blank_row(edges_df[column])
        if row is not None:
            raise MalformedEdgeError(f"empty {column} airport code", row=row)


def validate_edges_df(edges_df: pd.DataFrame) -> None:
    """
    Validate the edges DataFrame structure and content.

    Duplicate rows are legal: they represent parallel airline service
    on the same airport pair.

    Args:
        edges_df: DataFrame to validate.

    Raises:
        MissingColumnsError: If required columns are missing.
        MalformedEdgeError: If a source or target code is empty, or a
            distance is negative or not finite.
    """
    missing_columns = REQUIRED_COLUMNS - set(edges_df.columns)
    if missing_columns:
        raise MissingColumnsError(missing_columns)

    if edges_df.empty:
        return

    validate_edge_codes(edges_df)

    distances = edges_df["distance"].to_numpy(dtype=float)
    invalid = np.flatnonzero(~np.isfinite(distances) | (distances < 0))
    if len(invalid) > 0:
        row = int(invalid[0])
        raise MalformedEdgeError(
            f"distance must be a non-negative finite number, got {distances[row]}",
            row=row,
        )


def validate_vertex_exists(
    code: str,
    vertices: Collection[str],
    context: str = "flight graph",
) -> None:
    """
    Validate that an airport code is a vertex of the graph.

    Args:
        code: Airport code to validate.
        vertices: Vertex codes of the graph.
        context: Description for error message.

    Raises:
        AirportNotFoundError: If the code is not a vertex.
    """
    if code not in vertices:
        raise AirportNotFoundError(code, context)


def validate_search_endpoints(
    source: str,
    destination: str,
    vertices: Collection[str],
) -> None:
    """
    Validate both endpoints of a path search.

    Args:
        source: Origin airport code.
        destination: Destination airport code.
        vertices: Vertex codes of the graph.

    Raises:
        AirportNotFoundError: If either endpoint is not a vertex.
    """
    validate_vertex_exists(source, vertices, "source airports")
    validate_vertex_exists(destination, vertices, "destination airports")
