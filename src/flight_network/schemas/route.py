"""
Route result types.

Defines the output contract of the route finder: hops, itineraries and
the per-combination options produced by location-based queries.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple


@dataclass(frozen=True, order=True)
class Route:
    """
    One hop of an itinerary: an airport pair and the airlines flying it.

    Ordering and equality are lexicographic on (source, target, airlines),
    which lets itineraries that visit the same airports with the same
    per-hop carriers collapse into one.

    Attributes:
        source: Departure airport code.
        target: Arrival airport code.
        airlines: Sorted tuple of airline codes operating this hop.
    """

    source: str
    target: str
    airlines: Tuple[str, ...] = ()

    @classmethod
    def create(cls, source: str, target: str, airlines: Iterable[str]) -> "Route":
        """Factory normalising airlines to a sorted, duplicate-free tuple."""
        return cls(source=source, target=target, airlines=tuple(sorted(set(airlines))))

    def with_airlines(self, airlines: Iterable[str]) -> "Route":
        """Create the same hop annotated with a different airline set."""
        return Route.create(self.source, self.target, airlines)


Itinerary = Tuple[Route, ...]


def itinerary_airports(itinerary: Itinerary) -> List[str]:
    """Ordered list of airports visited by an itinerary."""
    if not itinerary:
        return []
    airports = [itinerary[0].source]
    for hop in itinerary:
        airports.append(hop.target)
    return airports


def itinerary_airlines(itinerary: Itinerary) -> frozenset[str]:
    """Every airline code appearing anywhere on the itinerary."""
    return frozenset(code for hop in itinerary for code in hop.airlines)


def is_chained(itinerary: Itinerary) -> bool:
    """Check that consecutive hops connect (hop[i].target == hop[i+1].source)."""
    return all(
        current.target == following.source
        for current, following in zip(itinerary, itinerary[1:])
    )


@dataclass(frozen=True)
class RouteOption:
    """
    Result of one resolved (source, destination) combination.

    Location queries can resolve each endpoint to several airports; every
    combination is searched independently and reported as one option.

    Attributes:
        source: Resolved source airport code.
        destination: Resolved destination airport code.
        itineraries: Fewest-hop itineraries found (empty if none).
        error: Failure message for this combination, if it failed.
    """

    source: str
    destination: str
    itineraries: Tuple[Itinerary, ...] = field(default=())
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True when the combination was searched without error."""
        return self.error is None

    @property
    def hop_count(self) -> Optional[int]:
        """Hop count shared by all itineraries, or None if there are none."""
        if not self.itineraries:
            return None
        return len(self.itineraries[0])
