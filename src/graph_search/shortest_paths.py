"""
All-shortest-paths search by hop count.

A forward BFS assigns hop distances from the source; the paths are then
rebuilt backwards from the destination, following every predecessor
``u`` with ``distance[u] + 1 == distance[v]``. Every such predecessor is
kept, not just the first one discovered, so the result is the complete
set of fewest-hop paths.

The number of shortest paths can grow exponentially on highly symmetric
networks; ``iter_shortest_paths`` yields them one at a time for callers
that want to bound memory.
"""

from typing import AbstractSet, Iterator, List, Mapping, Optional, Tuple

from .traversal import Adjacency, bfs_distances, edge_allowed

Path = Tuple[str, ...]


def iter_shortest_paths(
    adjacency: Adjacency,
    reverse_adjacency: Adjacency,
    source: str,
    destination: str,
    allowed_airlines: Optional[AbstractSet[str]] = None,
) -> Iterator[Path]:
    """
    Yield every fewest-hop path from source to destination.

    Args:
        adjacency: Logical adjacency ``source -> {target -> airlines}``.
        reverse_adjacency: Reverse mapping ``target -> {source -> airlines}``.
        source: Origin vertex.
        destination: Destination vertex.
        allowed_airlines: Optional filter; hops without an allowed
            airline are ignored in both passes.

    Yields:
        Paths as tuples of vertex codes, source first. Nothing is yielded
        when source equals destination or no path exists.
    """
    if source == destination:
        return

    distances = bfs_distances(
        adjacency,
        source,
        allowed_airlines=allowed_airlines,
        stop_at=destination,
    )
    if destination not in distances:
        return

    # Each stack entry is (vertex, path suffix from vertex to destination)
    stack: List[Tuple[str, Path]] = [(destination, (destination,))]
    empty: Mapping = {}

    while stack:
        vertex, suffix = stack.pop()
        if vertex == source:
            yield suffix
            continue

        wanted = distances[vertex] - 1
        predecessors = reverse_adjacency.get(vertex, empty)
        # Reverse-sorted push so paths pop out in ascending order
        for predecessor in sorted(predecessors, reverse=True):
            if distances.get(predecessor) != wanted:
                continue
            if not edge_allowed(predecessors[predecessor], allowed_airlines):
                continue
            stack.append((predecessor, (predecessor,) + suffix))


def shortest_path_set(
    adjacency: Adjacency,
    reverse_adjacency: Adjacency,
    source: str,
    destination: str,
    allowed_airlines: Optional[AbstractSet[str]] = None,
) -> List[Path]:
    """
    Complete, sorted list of fewest-hop paths from source to destination.

    Example:
        >>> adj = {
        ...     "A": {"B": frozenset({"X"}), "C": frozenset({"X"})},
        ...     "B": {"D": frozenset({"Y"})},
        ...     "C": {"D": frozenset({"Z"})},
        ... }
        >>> rev = {
        ...     "B": {"A": frozenset({"X"})},
        ...     "C": {"A": frozenset({"X"})},
        ...     "D": {"B": frozenset({"Y"}), "C": frozenset({"Z"})},
        ... }
        >>> shortest_path_set(adj, rev, "A", "D")
        [('A', 'B', 'D'), ('A', 'C', 'D')]
        >>> shortest_path_set(adj, rev, "A", "D", allowed_airlines={"X", "Z"})
        [('A', 'C', 'D')]
    """
    return sorted(
        iter_shortest_paths(
            adjacency,
            reverse_adjacency,
            source,
            destination,
            allowed_airlines=allowed_airlines,
        )
    )
