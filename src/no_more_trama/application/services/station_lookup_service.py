"""Use cases for resolving a location or search query to a station."""

import logging
import math
from typing import TYPE_CHECKING

from no_more_trama.domain.exceptions import InvalidQueryError
from no_more_trama.domain.models import Coordinate, DepartureSession, RankedStation, Station
from no_more_trama.domain.station_ranker import rank

logger = logging.getLogger(__name__)


if TYPE_CHECKING:
    from no_more_trama.domain.ports import StationRepository


def _is_valid_origin(origin: Coordinate) -> bool:
    return (
        math.isfinite(origin.latitude)
        and math.isfinite(origin.longitude)
        and -90.0 <= origin.latitude <= 90.0
        and -180.0 <= origin.longitude <= 180.0
    )


class StationLookupService:
    """Service for finding nearby stations and searching stations by name."""

    def __init__(self, station_repository: "StationRepository", min_query_length: int = 2) -> None:
        """Initialize with a station repository.

        Args:
            station_repository: Station lookup collaborator.
            min_query_length: Minimum number of characters of a search query.
        """
        self._station_repository = station_repository
        self._min_query_length = min_query_length

    async def find_nearby(
        self,
        session: DepartureSession,
        origin: Coordinate,
        radius_meters: float | None = None,
    ) -> list[RankedStation]:
        """Find stations within the search radius of ``origin``, nearest first.

        The origin becomes the session's user location and the result its
        nearby station list. Without ``radius_meters`` the session radius is used.

        Raises:
            InvalidQueryError: If the radius is not a positive finite number or
                the origin is not a valid WGS84 coordinate.
        """
        radius = session.search_radius_meters if radius_meters is None else radius_meters
        if not (math.isfinite(radius) and radius > 0):
            raise InvalidQueryError("Search radius must be a positive finite number of meters")
        if not _is_valid_origin(origin):
            raise InvalidQueryError("Location must be a valid latitude and longitude")

        session.search_radius_meters = radius
        session.user_location = origin

        candidates = await self._station_repository.find_stations_near(origin)
        ranked = rank(candidates, origin, session.search_radius_meters)
        logger.info(
            f"Filtered to {len(ranked)} of {len(candidates)} station(s) within "
            f"{session.search_radius_meters} meters"
        )

        session.nearby_stations = ranked
        return ranked

    async def search(self, query: str) -> list[Station]:
        """Search stations by name.

        Raises:
            InvalidQueryError: If the query is shorter than the minimum length.
        """
        query = (query or "").strip()
        if len(query) < self._min_query_length:
            raise InvalidQueryError(f"Please enter at least {self._min_query_length} characters")

        logger.info(f"Searching for station: {query}")
        return await self._station_repository.search_stations(query)

    def select_nearby(self, session: DepartureSession, index: int) -> RankedStation:
        """Make the nearby station at ``index`` the current station.

        Raises:
            IndexError: If there is no nearby station at that index.
        """
        if index < 0 or index >= len(session.nearby_stations):
            raise IndexError(f"Invalid station index: {index}")

        station = session.nearby_stations[index]
        session.current_station = station
        logger.info(f"Selected station: {station.name}")
        return station

    async def search_and_select(self, session: DepartureSession, query: str) -> Station | None:
        """Search stations and make the best match the current station.

        Returns:
            The selected station, or None if nothing matched (session unchanged).
        """
        stations = await self.search(query)
        if not stations:
            logger.info(f"No stations found for '{query}'")
            return None

        session.current_station = stations[0]
        logger.info(f"Selected station: {stations[0].name}")
        return stations[0]
