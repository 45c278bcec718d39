"""Command line interface for departures near you."""

import argparse
import json
import logging
import math
import sys
from collections.abc import Callable
from dataclasses import asdict, dataclass
from typing import Any

import aiohttp

from no_more_trama.adapters.config import AppConfig
from no_more_trama.adapters.console import ConsoleRenderer, DepartureFormatter
from no_more_trama.adapters.scheduling import PeriodicRefresher
from no_more_trama.adapters.transport_api import (
    TransportConnectionRepository,
    TransportDepartureRepository,
    TransportHttpClient,
    TransportStationRepository,
)
from no_more_trama.application.services import (
    DepartureBoardService,
    RouteInfoService,
    StationLookupService,
)
from no_more_trama.domain.exceptions import (
    InvalidQueryError,
    NoStationSelectedError,
    RouteUnavailableError,
    TransportApiError,
)
from no_more_trama.domain.models import Coordinate, DepartureSession, RankedStation, Station

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Services:
    """Application services wired to the transport API."""

    station_lookup: StationLookupService
    departure_board: DepartureBoardService
    route_info: RouteInfoService


def build_services(http_session: aiohttp.ClientSession, config: AppConfig) -> Services:
    """Wire the application services to the transport API adapters."""
    http_client = TransportHttpClient(
        http_session,
        base_url=config.api_base_url,
        timeout_seconds=config.api_timeout_seconds,
    )
    return Services(
        station_lookup=StationLookupService(
            TransportStationRepository(http_client), min_query_length=config.min_query_length
        ),
        departure_board=DepartureBoardService(
            TransportDepartureRepository(http_client), limit=config.stationboard_limit
        ),
        route_info=RouteInfoService(TransportConnectionRepository(http_client)),
    )


def _bounded_float(name: str, low: float, high: float) -> Callable[[str], float]:
    def parse(value: str) -> float:
        try:
            number = float(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"{name} must be a number, got {value!r}") from None
        if not (math.isfinite(number) and low <= number <= high):
            raise argparse.ArgumentTypeError(f"{name} must be between {low:g} and {high:g}")
        return number

    return parse


_latitude = _bounded_float("latitude", -90.0, 90.0)
_longitude = _bounded_float("longitude", -180.0, 180.0)


def _radius(value: str) -> float:
    try:
        radius = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"radius must be a number, got {value!r}") from None
    if not (math.isfinite(radius) and radius > 0):
        raise argparse.ArgumentTypeError("radius must be a positive finite number of meters")
    return radius


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per use case."""
    parser = argparse.ArgumentParser(
        description="Upcoming public transport departures near you (transport.opendata.ch)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Stations within 500 m of a location
  no-more-trama nearby 47.3782 8.5402 --radius 500

  # Search stations by name
  no-more-trama search "Zürich HB"

  # Departures of the best matching station
  no-more-trama board "Zürich, Central"

  # Intermediate stops of the first departure
  no-more-trama route "Zürich, Central" --departure 0

  # Keep the board of the nearest station up to date
  no-more-trama watch --lat 47.3782 --lon 8.5402
        """,
    )
    parser.add_argument("--config", help="Path to TOML configuration file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    nearby_parser = subparsers.add_parser("nearby", help="List stations near a location")
    nearby_parser.add_argument("lat", type=_latitude, help="Latitude (WGS84)")
    nearby_parser.add_argument("lon", type=_longitude, help="Longitude (WGS84)")
    nearby_parser.add_argument("--radius", type=_radius, help="Search radius in meters")
    nearby_parser.add_argument("--json", action="store_true", help="Output as JSON")

    search_parser = subparsers.add_parser("search", help="Search for stations")
    search_parser.add_argument("query", help="Station name to search for")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    board_parser = subparsers.add_parser("board", help="Show departures of a station")
    board_parser.add_argument("station", help="Station name to search for")
    board_parser.add_argument("--limit", type=_positive_int, help="Number of departures")
    board_parser.add_argument("--json", action="store_true", help="Output as JSON")

    route_parser = subparsers.add_parser("route", help="Show the stops of a departure")
    route_parser.add_argument("station", help="Station name to search for")
    route_parser.add_argument(
        "--departure", type=int, default=0, help="Index of the departure on the board"
    )
    route_parser.add_argument("--lat", type=_latitude, help="Your latitude, for stop distances")
    route_parser.add_argument("--lon", type=_longitude, help="Your longitude, for stop distances")
    route_parser.add_argument("--json", action="store_true", help="Output as JSON")

    watch_parser = subparsers.add_parser("watch", help="Show a board and refresh it periodically")
    watch_parser.add_argument("--query", help="Station name to search for")
    watch_parser.add_argument("--lat", type=_latitude, help="Latitude (WGS84)")
    watch_parser.add_argument("--lon", type=_longitude, help="Longitude (WGS84)")
    watch_parser.add_argument("--radius", type=_radius, help="Search radius in meters")
    watch_parser.add_argument(
        "--pick", type=int, default=0, help="Index of the nearby station to watch"
    )

    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load configuration from environment, .env and the optional TOML file."""
    config = AppConfig()
    if args.config:
        config.config_file = args.config
    config.apply_config_file()
    if args.verbose:
        config.log_level = "DEBUG"
    return config


def _to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def _ranked_station_to_dict(station: RankedStation) -> dict[str, Any]:
    return {**asdict(station.station), "distance_meters": round(station.distance_meters, 1)}


def _has_location(args: argparse.Namespace) -> bool:
    return args.lat is not None and args.lon is not None


async def run_nearby(
    args: argparse.Namespace,
    services: Services,
    renderer: ConsoleRenderer,
    session: DepartureSession,
) -> int:
    """List ranked stations around a location."""
    stations = await services.station_lookup.find_nearby(
        session, Coordinate(latitude=args.lat, longitude=args.lon), radius_meters=args.radius
    )
    if args.json:
        print(_to_json([_ranked_station_to_dict(station) for station in stations]))
        return 0
    if not stations:
        print("No stations found nearby. Try increasing the radius.", file=sys.stderr)
        return 1
    print(renderer.render_nearby_stations(stations))
    return 0


async def run_search(
    args: argparse.Namespace,
    services: Services,
    renderer: ConsoleRenderer,
    session: DepartureSession,
) -> int:
    """List stations matching a query."""
    _ = session
    stations = await services.station_lookup.search(args.query)
    if args.json:
        print(_to_json([asdict(station) for station in stations]))
        return 0
    if not stations:
        print(f'No stations found for "{args.query}"', file=sys.stderr)
        return 1
    print(f"\nFound {len(stations)} station(s):\n")
    print(renderer.render_stations(stations))
    return 0


async def _select_by_query(
    services: Services, session: DepartureSession, query: str
) -> Station | None:
    station = await services.station_lookup.search_and_select(session, query)
    if station is None:
        print(f'No stations found for "{query}"', file=sys.stderr)
    return station


async def run_board(
    args: argparse.Namespace,
    services: Services,
    renderer: ConsoleRenderer,
    session: DepartureSession,
) -> int:
    """Show the departures of the best matching station."""
    station = await _select_by_query(services, session, args.station)
    if station is None:
        return 1

    departures = await services.departure_board.load_departures(session, limit=args.limit)

    if args.json:
        print(_to_json([asdict(departure) for departure in departures]))
        return 0
    print(renderer.render_board(station, departures, session.last_updated))
    return 0


async def run_route(
    args: argparse.Namespace,
    services: Services,
    renderer: ConsoleRenderer,
    session: DepartureSession,
) -> int:
    """Show the intermediate stops of one departure of a station."""
    if await _select_by_query(services, session, args.station) is None:
        return 1
    if _has_location(args):
        session.user_location = Coordinate(latitude=args.lat, longitude=args.lon)

    departures = await services.departure_board.load_departures(session)
    if not 0 <= args.departure < len(departures):
        print(f"Invalid departure index: {args.departure}", file=sys.stderr)
        return 1

    route = await services.route_info.route_for_departure(session, departures[args.departure])
    if args.json:
        print(_to_json(asdict(route)))
        return 0
    print(renderer.render_route(route))
    return 0


async def run_watch(
    args: argparse.Namespace,
    services: Services,
    renderer: ConsoleRenderer,
    session: DepartureSession,
    refresher: PeriodicRefresher,
) -> int:
    """Resolve a station, show its board and keep refreshing it until interrupted."""
    if args.query:
        if await _select_by_query(services, session, args.query) is None:
            return 1
    elif _has_location(args):
        stations = await services.station_lookup.find_nearby(
            session, Coordinate(latitude=args.lat, longitude=args.lon), radius_meters=args.radius
        )
        if not stations:
            print("No stations found nearby. Try increasing the radius.", file=sys.stderr)
            return 1
        services.station_lookup.select_nearby(session, args.pick)
    else:
        print("Either --query or --lat and --lon are required", file=sys.stderr)
        return 1

    async def show_board() -> None:
        await services.departure_board.refresh(session)
        if session.current_station is not None:
            print(
                renderer.render_board(
                    session.current_station, session.departures, session.last_updated
                ),
                end="\n\n",
                flush=True,
            )

    await show_board()
    handle = refresher.start(show_board)
    try:
        await handle.wait()
    finally:
        await refresher.stop()
    return 0


async def run_command(args: argparse.Namespace, config: AppConfig) -> int:
    """Run the selected subcommand and return the process exit code."""
    session = DepartureSession(search_radius_meters=config.search_radius_meters)
    renderer = ConsoleRenderer(DepartureFormatter(config))

    async with TransportHttpClient.create_session(config.log_requests) as http_session:
        services = build_services(http_session, config)
        try:
            if args.command == "nearby":
                return await run_nearby(args, services, renderer, session)
            if args.command == "search":
                return await run_search(args, services, renderer, session)
            if args.command == "board":
                return await run_board(args, services, renderer, session)
            if args.command == "route":
                return await run_route(args, services, renderer, session)
            if args.command == "watch":
                refresher = PeriodicRefresher(config.refresh_interval_seconds)
                return await run_watch(args, services, renderer, session, refresher)
        except TransportApiError as e:
            logger.debug(f"Transport API error: {e.details}")
            print(f"Error: {e.details.reason}", file=sys.stderr)
            return 1
        except (InvalidQueryError, IndexError, NoStationSelectedError, RouteUnavailableError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print(f"Unknown command: {args.command}", file=sys.stderr)
    return 1
