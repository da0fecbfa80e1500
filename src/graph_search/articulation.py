"""
Cut vertices (articulation points) of the flight network.

The directed flight graph is read as an undirected connectivity graph:
a flight in either direction connects the pair. Tarjan's low-link
algorithm runs from every unvisited vertex so disconnected networks are
covered, and an explicit stack replaces recursion.
"""

from typing import Dict, Iterator, List, Optional, Set, Tuple

from .traversal import Adjacency


def undirected_neighbours(adjacency: Adjacency) -> Dict[str, Set[str]]:
    """
    Collapse the directed adjacency into undirected neighbour sets.

    Vertices that only appear as flight targets are included. Self loops
    are dropped since they never affect connectivity.
    """
    neighbours: Dict[str, Set[str]] = {}
    for source, targets in adjacency.items():
        neighbours.setdefault(source, set())
        for target in targets:
            neighbours.setdefault(target, set())
            if target == source:
                continue
            neighbours[source].add(target)
            neighbours[target].add(source)
    return neighbours


def articulation_points(adjacency: Adjacency) -> Set[str]:
    """
    Vertices whose removal splits their connected component.

    A non-root vertex ``u`` is a cut vertex when some depth-first child
    ``v`` has ``low[v] >= discovery[u]``; a root is a cut vertex when it
    has more than one depth-first child.

    Example:
        >>> chain = {"A": {"B": frozenset({"X"})}, "B": {"C": frozenset({"X"})}}
        >>> articulation_points(chain)
        {'B'}
    """
    neighbours = undirected_neighbours(adjacency)
    discovery: Dict[str, int] = {}
    low: Dict[str, int] = {}
    cut_vertices: Set[str] = set()
    counter = 0

    for root in sorted(neighbours):
        if root in discovery:
            continue

        discovery[root] = low[root] = counter
        counter += 1
        root_children = 0

        stack: List[Tuple[str, Optional[str], Iterator[str]]] = [
            (root, None, iter(sorted(neighbours[root])))
        ]

        while stack:
            vertex, parent, pending = stack[-1]

            descended = False
            for child in pending:
                if child == parent:
                    continue
                if child in discovery:
                    low[vertex] = min(low[vertex], discovery[child])
                    continue

                discovery[child] = low[child] = counter
                counter += 1
                if vertex == root:
                    root_children += 1
                stack.append((child, vertex, iter(sorted(neighbours[child]))))
                descended = True
                break

            if descended:
                continue

            stack.pop()
            if parent is None:
                continue

            low[parent] = min(low[parent], low[vertex])
            if parent != root and low[vertex] >= discovery[parent]:
                cut_vertices.add(parent)

        if root_children > 1:
            cut_vertices.add(root)

    return cut_vertices
