"""
Flight Graph Repository - build-once directed multigraph of the network.

Implements the in-memory flight graph with:
- Index-based per-airport edge access via AdjacencyIndex
- Numpy-vectorized index building over the source-sorted edge table
- Logical adjacency collapsing parallel airline edges into one hop
- Reverse adjacency and in-degree counts for O(1) predecessor queries
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    AbstractSet,
    Dict,
    FrozenSet,
    Iterable,
    List,
    Mapping,
    Optional,
    Set,
    Tuple,
)

import numpy as np
import pandas as pd

from src.graph_search.articulation import articulation_points
from src.graph_search.shortest_paths import Path, shortest_path_set
from src.graph_search.traversal import (
    bfs_distances,
    depth_first_reach,
    eccentricity,
    nodes_within_hops,
)
from src.graph_search.validation import (
    validate_edges_df,
    validate_search_endpoints,
    validate_vertex_exists,
)
from src.flight_network.exceptions import GraphNotInitializedError

if TYPE_CHECKING:
    from src.flight_network.ports.flight_data_provider import FlightDataProvider

logger = logging.getLogger(__name__)

EDGE_COLUMNS = ["source", "target", "airline", "distance"]


# =============================================================================
# ADJACENCY INDEX: O(1) per-airport access into the sorted edge table
# =============================================================================


@dataclass(frozen=True)
class AdjacencyIndex:
    """
    Row range of one airport's outgoing edges in the sorted edge table.

    Attributes:
        start: Start index in sorted DataFrame (inclusive).
        end: End index in sorted DataFrame (exclusive).
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate index bounds."""
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must be >= start ({self.start})")

    @property
    def size(self) -> int:
        """Number of edges in the range (the airport's out-degree)."""
        return self.end - self.start


@dataclass(frozen=True)
class Edge:
    """
    One directed flight edge.

    Attributes:
        destination: Arrival airport code.
        airline: Operating airline code.
        distance: Physical distance of the hop in kilometres.
    """

    destination: str
    airline: str
    distance: float


def build_adjacency_index(df: pd.DataFrame) -> Dict[str, AdjacencyIndex]:
    """
    Build index from pre-sorted edge table using VECTORIZED numpy operations.

    The algorithm:
    1. Get numpy array of source values
    2. Create boolean mask where the source changes (vectorized comparison)
    3. Find indices where changes occur using np.where
    4. Build AdjacencyIndex entries from boundary positions

    Args:
        df: DataFrame MUST be pre-sorted by 'source'.
            Index should be reset (0, 1, 2, ...).

    Returns:
        Dict mapping airport code to AdjacencyIndex with (start, end) range.

    Example:
        >>> df = pd.DataFrame({
        ...     'source': ['LIS', 'LIS', 'OPO', 'OPO', 'OPO'],
        ...     'target': ['OPO', 'MAD', 'LIS', 'MAD', 'LHR'],
        ...     'airline': ['TAP', 'IBE', 'TAP', 'RYR', 'TAP'],
        ...     'distance': [274.0, 503.0, 274.0, 422.0, 1366.0],
        ... })
        >>> index = build_adjacency_index(df)
        >>> index['LIS']
        AdjacencyIndex(start=0, end=2)
        >>> index['OPO']
        AdjacencyIndex(start=2, end=5)
    """
    if df.empty:
        return {}

    sources = df["source"].values
    n = len(sources)

    change_mask = np.concatenate([[True], sources[1:] != sources[:-1]])
    change_indices = np.where(change_mask)[0]

    index: Dict[str, AdjacencyIndex] = {}
    num_boundaries = len(change_indices)

    for i in range(num_boundaries):
        start = int(change_indices[i])
        end = int(change_indices[i + 1]) if i + 1 < num_boundaries else n
        index[str(sources[start])] = AdjacencyIndex(start=start, end=end)

    return index


def build_logical_adjacency(
    df: pd.DataFrame,
) -> Tuple[Dict[str, Dict[str, FrozenSet[str]]], Dict[str, Dict[str, FrozenSet[str]]]]:
    """
    Collapse parallel airline edges into one hop per ordered airport pair.

    Returns:
        Tuple of (forward, reverse) mappings:
        forward[source][target] and reverse[target][source] both hold the
        frozenset of airlines flying source -> target.
    """
    collected: Dict[Tuple[str, str], Set[str]] = {}
    for source, target, airline in zip(
        df["source"].values, df["target"].values, df["airline"].values
    ):
        collected.setdefault((str(source), str(target)), set()).add(str(airline))

    forward: Dict[str, Dict[str, FrozenSet[str]]] = {}
    reverse: Dict[str, Dict[str, FrozenSet[str]]] = {}
    for (source, target), airlines in collected.items():
        frozen = frozenset(airlines)
        forward.setdefault(source, {})[target] = frozen
        reverse.setdefault(target, {})[source] = frozen

    return forward, reverse


# =============================================================================
# FLIGHT GRAPH: immutable multigraph with traversal primitives
# =============================================================================


@dataclass
class FlightGraph:
    """
    Directed multigraph of airports and airline-tagged flights.

    Key layout: the edge table is sorted by source, so each airport's
    outgoing edges form one contiguous row range (AdjacencyIndex).

    The graph stores:
    - Single copy of the edge table (edges_df)
    - Per-airport row ranges (adjacency_index) and Edge tuples
    - Logical adjacency (one hop per ordered pair, with its airline set)
      in both directions
    - In-degree counts

    Traversal state is never stored on the graph; every primitive keeps
    its visited/distance bookkeeping local to the call.

    Attributes:
        edges_df: Edge table SORTED by source, index reset.
        adjacency_index: Dict mapping airport code to its row range.
        outgoing: Dict mapping airport code to its outgoing Edge tuple.
        forward: Logical adjacency source -> {target -> airlines}.
        reverse: Logical adjacency target -> {source -> airlines}.
        in_degrees: Incoming edge count per airport.
        vertices: All airport codes appearing in at least one edge.
    """

    edges_df: pd.DataFrame
    adjacency_index: Dict[str, AdjacencyIndex]
    outgoing: Dict[str, Tuple[Edge, ...]]
    forward: Dict[str, Dict[str, FrozenSet[str]]]
    reverse: Dict[str, Dict[str, FrozenSet[str]]]
    in_degrees: Dict[str, int]
    vertices: FrozenSet[str]

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def build(cls, edges: Iterable[Tuple[str, str, str, float]]) -> "FlightGraph":
        """
        Build a graph from (source, target, airline, distance) tuples.

        Duplicate tuples are legal and represent parallel service.

        Raises:
            MalformedEdgeError: If a source or target code is empty.
        """
        df = pd.DataFrame(list(edges), columns=EDGE_COLUMNS)
        return cls.from_dataframe(df)

    @classmethod
    def from_dataframe(cls, edges_df: pd.DataFrame) -> "FlightGraph":
        """
        Build a graph from an edge table.

        Steps:
        1. Validate structure and edge codes
        2. Sort by source for index-based access (stable, keeps row order)
        3. Build per-airport row index and Edge tuples
        4. Collapse parallel edges into logical hops (both directions)
        5. Count in-degrees

        Raises:
            MissingColumnsError: If required columns are missing.
            MalformedEdgeError: If a source or target code is empty.
        """
        start_time = time.perf_counter()

        validate_edges_df(edges_df)

        df = edges_df[EDGE_COLUMNS].copy()
        df["source"] = df["source"].astype(str).str.strip()
        df["target"] = df["target"].astype(str).str.strip()
        df["airline"] = df["airline"].astype(str).str.strip()
        df["distance"] = df["distance"].astype(float)
        df = df.sort_values("source", kind="mergesort").reset_index(drop=True)

        adjacency_index = build_adjacency_index(df)

        targets = df["target"].values
        airlines = df["airline"].values
        distances = df["distance"].values
        outgoing = {
            code: tuple(
                Edge(str(targets[i]), str(airlines[i]), float(distances[i]))
                for i in range(idx.start, idx.end)
            )
            for code, idx in adjacency_index.items()
        }

        forward, reverse = build_logical_adjacency(df)
        in_degrees = {
            str(code): int(count) for code, count in df["target"].value_counts().items()
        }
        vertices = frozenset(set(df["source"].unique()) | set(df["target"].unique()))

        graph = cls(
            edges_df=df,
            adjacency_index=adjacency_index,
            outgoing=outgoing,
            forward=forward,
            reverse=reverse,
            in_degrees=in_degrees,
            vertices=vertices,
        )

        logger.debug(
            "Flight graph built in %.3fms (%d edges, %d airports)",
            (time.perf_counter() - start_time) * 1000,
            len(df),
            len(vertices),
        )
        return graph

    # -------------------------------------------------------------------------
    # Structure queries
    # -------------------------------------------------------------------------

    @property
    def edge_count(self) -> int:
        """Number of directed edges (parallel airline edges counted apart)."""
        return len(self.edges_df)

    @property
    def airlines(self) -> FrozenSet[str]:
        """Every airline code operating at least one edge."""
        return frozenset(self.edges_df["airline"].unique())

    @property
    def airports(self) -> List[str]:
        """Sorted vertex codes."""
        return sorted(self.vertices)

    def has_vertex(self, code: str) -> bool:
        """Check if airport code is a vertex."""
        return code in self.vertices

    def has_route(self, source: str, target: str) -> bool:
        """Check if a direct flight exists."""
        return target in self.forward.get(source, {})

    def adjacency(self, code: str) -> Tuple[Edge, ...]:
        """
        Outgoing edges of an airport, one per airline service.

        Raises:
            AirportNotFoundError: If the code is not a vertex.
        """
        validate_vertex_exists(code, self.vertices)
        return self.outgoing.get(code, ())

    def edges_from(self, code: str) -> pd.DataFrame:
        """
        Zero-copy view of an airport's rows in the edge table.

        Raises:
            AirportNotFoundError: If the code is not a vertex.
        """
        validate_vertex_exists(code, self.vertices)
        idx = self.adjacency_index.get(code)
        if idx is None:
            return self.edges_df.iloc[0:0]
        return self.edges_df.iloc[idx.start : idx.end]

    def out_degree(self, code: str) -> int:
        """Number of outgoing edges."""
        validate_vertex_exists(code, self.vertices)
        idx = self.adjacency_index.get(code)
        return idx.size if idx is not None else 0

    def in_degree(self, code: str) -> int:
        """Number of incoming edges."""
        validate_vertex_exists(code, self.vertices)
        return self.in_degrees.get(code, 0)

    def neighbours(self, code: str) -> Mapping[str, FrozenSet[str]]:
        """Logical hops out of an airport: target -> operating airlines."""
        validate_vertex_exists(code, self.vertices)
        return self.forward.get(code, {})

    def airlines_between(self, source: str, target: str) -> FrozenSet[str]:
        """Airlines flying source -> target directly (empty if none)."""
        return self.forward.get(source, {}).get(target, frozenset())

    def edge_distance(self, source: str, target: str) -> Optional[float]:
        """
        Physical distance of the direct hop source -> target.

        Parallel airline edges share their endpoints, so the shortest of
        their recorded distances is returned. None when no hop exists.
        """
        if not self.has_route(source, target):
            return None
        rows = self.edges_from(source)
        return float(rows.loc[rows["target"] == target, "distance"].min())

    # -------------------------------------------------------------------------
    # Traversal primitives
    # -------------------------------------------------------------------------

    def depth_first_reach(self, source: str) -> Set[str]:
        """Airports reachable from source (source included)."""
        validate_vertex_exists(source, self.vertices, "source airports")
        return depth_first_reach(self.forward, source)

    def nodes_within_hops(self, source: str, max_hops: int) -> Set[str]:
        """Airports 1..max_hops hops away from source."""
        validate_vertex_exists(source, self.vertices, "source airports")
        return nodes_within_hops(self.forward, source, max_hops)

    def bfs_distances(self, source: str) -> Dict[str, int]:
        """Hop distance from source to every reachable airport."""
        validate_vertex_exists(source, self.vertices, "source airports")
        return bfs_distances(self.forward, source)

    def eccentricity(self, source: str) -> Tuple[int, List[str]]:
        """Greatest hop distance from source and the airports found at it."""
        validate_vertex_exists(source, self.vertices, "source airports")
        return eccentricity(self.forward, source)

    def shortest_path_set(
        self,
        source: str,
        destination: str,
        allowed_airlines: Optional[AbstractSet[str]] = None,
    ) -> List[Path]:
        """
        Every fewest-hop airport sequence from source to destination.

        Args:
            source: Origin airport code.
            destination: Destination airport code.
            allowed_airlines: Optional filter; None or empty = no restriction.

        Returns:
            Sorted list of paths (tuples of airport codes). Empty when
            source equals destination or no path exists.

        Raises:
            AirportNotFoundError: If either code is not a vertex.
        """
        validate_search_endpoints(source, destination, self.vertices)
        return shortest_path_set(
            self.forward,
            self.reverse,
            source,
            destination,
            allowed_airlines=allowed_airlines,
        )

    def articulation_points(self) -> Set[str]:
        """Airports whose removal disconnects the (undirected) network."""
        return articulation_points(self.forward)


# =============================================================================
# FLIGHT GRAPH REPOSITORY: build once from a data provider
# =============================================================================


class FlightGraphRepository:
    """
    Repository that builds the flight graph once and serves it read-only.

    The network is a fixed snapshot, so the graph is built lazily on first
    access and reused for the rest of the process.

    Usage:
        >>> provider = CsvDataProvider(data_dir)
        >>> repo = FlightGraphRepository(provider)
        >>> graph = repo.get_graph()
    """

    def __init__(self, data_provider: FlightDataProvider) -> None:
        """
        Initialize repository with a data provider.

        Args:
            data_provider: Source for flight edges.
        """
        self._provider = data_provider
        self._graph: Optional[FlightGraph] = None

    def get_graph(self) -> FlightGraph:
        """
        Get the graph, building it on first call.

        Returns:
            The built FlightGraph.

        Raises:
            GraphNotInitializedError: If the build fails.
        """
        if self._graph is not None:
            return self._graph

        try:
            self._graph = self._build_graph()
        except Exception as e:
            logger.error(f"Graph build failed: {e}")
            raise GraphNotInitializedError(
                f"Failed to initialize flight graph: {e}"
            ) from e

        logger.info(
            "Flight graph loaded from %s: %d flights, %d airports",
            self._provider.name,
            self._graph.edge_count,
            len(self._graph.vertices),
        )
        return self._graph

    def _build_graph(self) -> FlightGraph:
        """Fetch edges from the provider and build the graph."""
        flights_df = self._provider.get_flights_df()
        return FlightGraph.from_dataframe(flights_df)

    def invalidate(self) -> None:
        """Drop the built graph; the next access rebuilds it."""
        self._graph = None

    @property
    def is_initialized(self) -> bool:
        """Check if graph has been built."""
        return self._graph is not None
