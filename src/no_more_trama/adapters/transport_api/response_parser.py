"""Parser for transport.opendata.ch responses."""

import logging
from datetime import UTC, datetime
from typing import Any

from no_more_trama.domain.models.connection import Connection, ConnectionSection, PassStop
from no_more_trama.domain.models.coordinate import Coordinate
from no_more_trama.domain.models.departure import Departure
from no_more_trama.domain.models.station import Station

logger = logging.getLogger(__name__)


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


class ResponseParser:
    """Parses transport API payloads into domain objects."""

    @staticmethod
    def parse_time(value: Any) -> datetime | None:
        """Parse an API timestamp such as "2024-01-15T14:30:00+0100"."""
        if not value or not isinstance(value, str):
            return None
        try:
            return datetime.strptime(value, "%Y-%m-%dT%H:%M:%S%z")
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            logger.warning(f"Could not parse time: {value}")
            return None

    @staticmethod
    def parse_coordinate(data: Any) -> Coordinate | None:
        """Parse a coordinate object; x is latitude and y is longitude."""
        if not isinstance(data, dict):
            return None
        x = data.get("x")
        y = data.get("y")
        if x is None or y is None:
            return None
        try:
            return Coordinate(latitude=float(x), longitude=float(y))
        except (TypeError, ValueError):
            return None

    @staticmethod
    def parse_station(data: Any) -> Station | None:
        """Parse a station/location object. Returns None for entries without a name."""
        if not isinstance(data, dict):
            return None
        name = data.get("name")
        if not name:
            return None
        station_id = data.get("id")
        return Station(
            id=str(station_id) if station_id is not None else "",
            name=name,
            coordinate=ResponseParser.parse_coordinate(data.get("coordinate")),
        )

    @staticmethod
    def parse_stations(payload: dict[str, Any]) -> list[Station]:
        """Parse the ``stations`` array of a /locations response, keeping API order."""
        raw_stations = payload.get("stations") or []
        stations = []
        for raw in raw_stations:
            station = ResponseParser.parse_station(raw)
            if station is None:
                logger.debug(f"Skipping unnamed location: {raw}")
                continue
            stations.append(station)
        return stations

    @staticmethod
    def parse_timestamp(value: Any) -> datetime | None:
        """Parse a Unix timestamp in seconds. Returns None for missing or non-numeric values."""
        if not value:
            return None
        try:
            return datetime.fromtimestamp(int(value), tz=UTC)
        except (TypeError, ValueError, OverflowError, OSError):
            logger.warning(f"Could not parse timestamp: {value!r}")
            return None

    @staticmethod
    def _parse_minutes(value: Any) -> int | None:
        try:
            minutes = int(value) if value else None
        except (TypeError, ValueError):
            return None
        return minutes or None

    @staticmethod
    def _parse_departure_time(stop: dict[str, Any]) -> datetime | None:
        time = ResponseParser.parse_time(stop.get("departure"))
        if time is None:
            time = ResponseParser.parse_timestamp(stop.get("departureTimestamp"))
        return time

    @staticmethod
    def parse_departure(data: Any) -> Departure | None:
        """Parse a stationboard entry. Returns None for entries without a departure time."""
        if not isinstance(data, dict):
            return None
        stop = _as_dict(data.get("stop"))
        time = ResponseParser._parse_departure_time(stop)
        if time is None:
            logger.debug(f"Skipping stationboard entry without departure time: {data.get('name')}")
            return None

        number = data.get("number")
        platform = stop.get("platform")
        delay = stop.get("delay")
        return Departure(
            time=time,
            category=data.get("category") or "",
            number=str(number) if number else None,
            destination=data.get("to") or "Unknown",
            operator=data.get("operator"),
            platform=str(platform) if platform else None,
            delay_minutes=ResponseParser._parse_minutes(delay),
        )

    @staticmethod
    def parse_stationboard(payload: dict[str, Any]) -> list[Departure]:
        """Parse the ``stationboard`` array of a /stationboard response."""
        departures = []
        for raw in payload.get("stationboard") or []:
            departure = ResponseParser.parse_departure(raw)
            if departure:
                departures.append(departure)
        return departures

    @staticmethod
    def _parse_pass_stop(data: Any) -> PassStop | None:
        if not isinstance(data, dict):
            return None
        station = ResponseParser.parse_station(data.get("station"))
        if station is None:
            return None
        return PassStop(
            station=station,
            arrival=ResponseParser.parse_time(data.get("arrival")),
            departure=ResponseParser.parse_time(data.get("departure")),
        )

    @staticmethod
    def _parse_section(data: dict[str, Any]) -> ConnectionSection:
        departure_checkpoint = _as_dict(data.get("departure"))
        arrival_checkpoint = _as_dict(data.get("arrival"))
        departure_time = ResponseParser.parse_time(
            departure_checkpoint.get("departure")
        ) or ResponseParser.parse_time(departure_checkpoint.get("arrival"))
        arrival_time = ResponseParser.parse_time(
            arrival_checkpoint.get("arrival")
        ) or ResponseParser.parse_time(arrival_checkpoint.get("departure"))

        pass_list: list[PassStop] | None = None
        journey = data.get("journey")
        if isinstance(journey, dict) and isinstance(journey.get("passList"), list):
            pass_list = [
                stop
                for stop in (ResponseParser._parse_pass_stop(raw) for raw in journey["passList"])
                if stop is not None
            ]

        return ConnectionSection(
            departure_time=departure_time, arrival_time=arrival_time, pass_list=pass_list
        )

    @staticmethod
    def parse_first_connection(payload: dict[str, Any]) -> Connection | None:
        """Parse the first connection of a /connections response, if any."""
        connections = payload.get("connections") or []
        if not connections or not isinstance(connections[0], dict):
            return None
        raw_sections = connections[0].get("sections") or []
        sections = [
            ResponseParser._parse_section(raw) for raw in raw_sections if isinstance(raw, dict)
        ]
        return Connection(sections=sections)
