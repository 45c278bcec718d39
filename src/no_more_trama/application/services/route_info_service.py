"""Use case for showing the intermediate stops of a departure."""

import logging
import math
from typing import TYPE_CHECKING

from no_more_trama.domain.exceptions import NoStationSelectedError, RouteUnavailableError
from no_more_trama.domain.geo import distance
from no_more_trama.domain.models import (
    ConnectionSection,
    Coordinate,
    Departure,
    DepartureSession,
    PassStop,
    RouteInfo,
    RouteStop,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from no_more_trama.domain.ports import ConnectionRepository


def _duration_minutes(section: ConnectionSection) -> int | None:
    if section.departure_time is None or section.arrival_time is None:
        return None
    seconds = (section.arrival_time - section.departure_time).total_seconds()
    return math.floor(seconds / 60 + 0.5)


def _route_stop(stop: PassStop, current_name: str, user_location: Coordinate | None) -> RouteStop:
    distance_meters = None
    if user_location is not None and stop.station.coordinate is not None:
        distance_meters = distance(user_location, stop.station.coordinate)
    return RouteStop(
        name=stop.station.name,
        distance_meters=distance_meters,
        is_current=stop.station.name == current_name,
    )


class RouteInfoService:
    """Service for the route of a departure, taken from one sample connection."""

    def __init__(self, connection_repository: "ConnectionRepository") -> None:
        self._connection_repository = connection_repository

    async def route_for_departure(
        self, session: DepartureSession, departure: Departure
    ) -> RouteInfo:
        """Build the stop list of a departure from the current station to its destination.

        Raises:
            NoStationSelectedError: If the session has no current station.
            RouteUnavailableError: If the sample connection has no stop information.
        """
        station = session.current_station
        if station is None:
            raise NoStationSelectedError("No station selected")

        connection = await self._connection_repository.find_connection(
            station.name, departure.destination
        )
        if connection is None or not connection.sections:
            raise RouteUnavailableError("No route information available")

        section = connection.sections[0]
        if section.pass_list is None:
            raise RouteUnavailableError("No stop information available")

        stops = [
            _route_stop(stop, station.name, session.user_location) for stop in section.pass_list
        ]
        logger.debug(f"Route {departure.line} to {departure.destination}: {len(stops)} stop(s)")
        return RouteInfo(
            title=f"{departure.line} → {departure.destination}",
            stops=stops,
            duration_minutes=_duration_minutes(section),
        )
