"""
Breadth-first and depth-first traversal primitives.

All functions operate on a logical adjacency mapping
``source -> {target -> frozenset(airline codes)}`` in which parallel
airline edges between the same ordered pair are already collapsed into
one hop. Traversal state (visited sets, distances) lives in local
mappings that are discarded when the call returns, so a single graph
can be traversed from several call sites without interference.
"""

from typing import (
    AbstractSet,
    Dict,
    FrozenSet,
    List,
    Mapping,
    Optional,
    Set,
    Tuple,
)

Adjacency = Mapping[str, Mapping[str, FrozenSet[str]]]

_NO_NEIGHBOURS: Mapping[str, FrozenSet[str]] = {}


def edge_allowed(
    airlines: AbstractSet[str],
    allowed_airlines: Optional[AbstractSet[str]],
) -> bool:
    """
    Check whether a hop may be used under an airline filter.

    An empty or absent filter means no restriction. Otherwise the hop is
    usable when at least one of its operating airlines is allowed.
    """
    if not allowed_airlines:
        return True
    return not airlines.isdisjoint(allowed_airlines)


def bfs_distances(
    adjacency: Adjacency,
    source: str,
    allowed_airlines: Optional[AbstractSet[str]] = None,
    max_hops: Optional[int] = None,
    stop_at: Optional[str] = None,
) -> Dict[str, int]:
    """
    Layered BFS computing hop distance from source.

    Each layer is expanded as a whole, so every vertex gets its minimal
    hop count the first time it is discovered.

    Args:
        adjacency: Logical adjacency mapping.
        source: Start vertex (distance 0).
        allowed_airlines: Optional airline filter applied to every hop.
        max_hops: Stop after this many layers (None = unbounded).
        stop_at: Stop once the layer containing this vertex is complete.

    Returns:
        Dict mapping each discovered vertex to its hop distance.
    """
    distances: Dict[str, int] = {source: 0}
    frontier = [source]
    depth = 0

    while frontier:
        if max_hops is not None and depth >= max_hops:
            break
        if stop_at is not None and stop_at in distances:
            break

        depth += 1
        next_frontier: List[str] = []
        for vertex in frontier:
            for target, airlines in adjacency.get(vertex, _NO_NEIGHBOURS).items():
                if target in distances:
                    continue
                if not edge_allowed(airlines, allowed_airlines):
                    continue
                distances[target] = depth
                next_frontier.append(target)

        frontier = next_frontier

    return distances


def nodes_within_hops(
    adjacency: Adjacency,
    source: str,
    max_hops: int,
) -> Set[str]:
    """
    Vertices at hop distance 1..max_hops from source.

    The source itself is never part of the result, and a vertex reached
    over several parallel airline edges counts once.

    Example:
        >>> adjacency = {"A": {"B": frozenset({"X"})}, "B": {"C": frozenset({"Y"})}}
        >>> sorted(nodes_within_hops(adjacency, "A", 1))
        ['B']
        >>> sorted(nodes_within_hops(adjacency, "A", 2))
        ['B', 'C']
    """
    if max_hops <= 0:
        return set()

    distances = bfs_distances(adjacency, source, max_hops=max_hops)
    return {vertex for vertex, hops in distances.items() if hops > 0}


def depth_first_reach(adjacency: Adjacency, source: str) -> Set[str]:
    """
    Vertices reachable from source by a depth-first walk (source included).

    Uses an explicit stack so deep networks do not hit the interpreter's
    recursion limit.
    """
    visited: Set[str] = {source}
    stack = [source]

    while stack:
        vertex = stack.pop()
        for target in adjacency.get(vertex, _NO_NEIGHBOURS):
            if target not in visited:
                visited.add(target)
                stack.append(target)

    return visited


def eccentricity(adjacency: Adjacency, source: str) -> Tuple[int, List[str]]:
    """
    Greatest hop distance from source and the vertices found at it.

    Returns:
        Tuple of (eccentricity, sorted furthest vertices). A source with
        no outgoing hops has eccentricity 0 and no furthest vertices.
    """
    distances = bfs_distances(adjacency, source)
    furthest = max(distances.values())
    if furthest == 0:
        return 0, []

    return furthest, sorted(v for v, hops in distances.items() if hops == furthest)
