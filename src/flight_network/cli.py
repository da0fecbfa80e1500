"""
Command-line front end for the flight network engine.

Usage:
    flight-network stats
    flight-network stats --airport OPO
    flight-network route --from-code OPO --to-city London "United Kingdom"
    flight-network route --from-coords 41.24 -8.68 --to-name "Heathrow" --airlines TP BA
    flight-network reach OPO --max-stops 1
    flight-network top 10
    flight-network essential
    flight-network longest
    flight-network distance OPO JFK
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from pandera.errors import SchemaError

from src.graph_search.exceptions import GraphSearchError
from src.flight_network.application.flight_network import FlightNetwork
from src.flight_network.config import Config
from src.flight_network.schemas.queries import (
    AirportCodeQuery,
    AirportNameQuery,
    CityQuery,
    CoordinatesQuery,
    LocationQuery,
)
from src.flight_network.schemas.route import Itinerary, RouteOption

logger = logging.getLogger(__name__)


def _add_endpoint(parser: argparse.ArgumentParser, prefix: str, label: str) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(f"--{prefix}-code", metavar="CODE", help=f"{label} airport code")
    group.add_argument(f"--{prefix}-name", metavar="NAME", help=f"{label} airport name")
    group.add_argument(
        f"--{prefix}-city",
        nargs=2,
        metavar=("CITY", "COUNTRY"),
        help=f"{label} city and country",
    )
    group.add_argument(
        f"--{prefix}-coords",
        nargs=2,
        type=float,
        metavar=("LAT", "LON"),
        help=f"{label} coordinates (nearest airport)",
    )


def _endpoint_query(args: argparse.Namespace, prefix: str) -> LocationQuery:
    code = getattr(args, f"{prefix}_code")
    name = getattr(args, f"{prefix}_name")
    city = getattr(args, f"{prefix}_city")
    coords = getattr(args, f"{prefix}_coords")

    if code is not None:
        return AirportCodeQuery(code)
    if name is not None:
        return AirportNameQuery(name)
    if city is not None:
        return CityQuery(city[0], city[1])
    return CoordinatesQuery(coords[0], coords[1])


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per query."""
    parser = argparse.ArgumentParser(
        prog="flight-network",
        description="Route queries and statistics over a flight network snapshot",
    )
    parser.add_argument(
        "--data-dir",
        default=Config.DATA_DIR,
        help="Directory with airports.csv, airlines.csv and flights.csv",
    )
    parser.add_argument("--log-level", default=Config.LOG_LEVEL, help="Logging level")

    commands = parser.add_subparsers(dest="command", required=True)

    stats = commands.add_parser("stats", help="Global or per-airport statistics")
    stats.add_argument("--airport", help="Airport code for per-airport statistics")
    stats.add_argument("--city", nargs=2, metavar=("CITY", "COUNTRY"))
    stats.add_argument("--per-city", action="store_true", help="Flights per city")
    stats.add_argument("--per-airline", action="store_true", help="Flights per airline")

    route = commands.add_parser("route", help="Fewest-hop itineraries")
    _add_endpoint(route, "from", "Source")
    _add_endpoint(route, "to", "Destination")
    route.add_argument("--airlines", nargs="+", metavar="CODE", help="Allowed airlines")
    route.add_argument(
        "--fewest-airlines",
        action="store_true",
        help="Reduce itineraries to a common carrier set",
    )

    reach = commands.add_parser("reach", help="Reachable destinations")
    reach.add_argument("airport")
    reach.add_argument("--max-stops", type=int, help="Stop budget (0 = direct only)")

    top = commands.add_parser("top", help="Airports with the most traffic")
    top.add_argument("k", type=int)

    commands.add_parser("essential", help="Airports whose removal splits the network")
    commands.add_parser("longest", help="Longest fewest-hop trip in the network")

    distance = commands.add_parser("distance", help="Smallest distance of fewest-hop trips")
    distance.add_argument("source")
    distance.add_argument("destination")

    return parser


def _format_itinerary(itinerary: Itinerary) -> str:
    return " | ".join(
        f"{hop.source} -> {hop.target} [{', '.join(hop.airlines)}]" for hop in itinerary
    )


def _print_options(options: List[RouteOption]) -> None:
    for option in options:
        print("=" * 60)
        print(f"{option.source} -> {option.destination}")
        if not option.ok:
            print(f"  error: {option.error}")
        elif not option.itineraries:
            print("  no route")
        for number, itinerary in enumerate(option.itineraries, start=1):
            print(f"  {number}. {_format_itinerary(itinerary)}")


def _run(network: FlightNetwork, args: argparse.Namespace) -> None:
    if args.command == "stats":
        if args.airport:
            print(f"Flights from {args.airport}: {network.flights_from_airport(args.airport)}")
            print(f"Airlines from {args.airport}: {network.airlines_from_airport(args.airport)}")
            print(f"Countries from {args.airport}: {network.countries_from_airport(args.airport)}")
        if args.city:
            count = network.countries_from_city(args.city[0], args.city[1])
            print(f"Countries from {args.city[0]} ({args.city[1]}): {count}")
        if args.per_city:
            print(network.flights_per_city().to_string(index=False))
        if args.per_airline:
            print(network.flights_per_airline().to_string(index=False))
        if not (args.airport or args.city or args.per_city or args.per_airline):
            print(f"Airports: {network.total_airport_count()}")
            print(f"Flights: {network.total_flight_count()}")

    elif args.command == "route":
        options = network.find_routes(
            _endpoint_query(args, "from"),
            _endpoint_query(args, "to"),
            airlines=args.airlines,
            fewest_airlines=args.fewest_airlines,
        )
        _print_options(options)

    elif args.command == "reach":
        if args.max_stops is None:
            summary = network.reachability_summary(args.airport)
        else:
            summary = network.reachability_with_stop_budget(args.airport, args.max_stops)
        print(f"Airports: {summary.airports}")
        print(f"Cities: {summary.cities}")
        print(f"Countries: {summary.countries}")

    elif args.command == "top":
        for entry in network.top_traffic_airports(args.k):
            print(f"{entry.rank}. {entry.code} ({entry.name}) -- {entry.traffic} flights")

    elif args.command == "essential":
        airports = network.essential_airports()
        print(f"{len(airports)} essential airports")
        for code in airports:
            print(code)

    elif args.command == "longest":
        trip = network.longest_shortest_trip()
        print(f"{trip.stops} stops ({trip.hops} flights)")
        for source, target in trip.pairs:
            print(f"{source} -> {target}")

    elif args.command == "distance":
        trip = network.shortest_distance_trip(args.source, args.destination)
        if trip is None:
            print("no route")
        else:
            print(_format_itinerary(trip.itinerary))
            print(f"{trip.distance:.1f} km")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point of the flight-network command."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        with FlightNetwork(data_dir=args.data_dir) as network:
            _run(network, args)
    except (GraphSearchError, SchemaError, FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
