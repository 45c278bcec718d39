"""Use cases for loading the departures of the current station."""

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from no_more_trama.domain.exceptions import NoStationSelectedError
from no_more_trama.domain.models import Departure, DepartureSession

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from no_more_trama.domain.ports import DepartureRepository


class DepartureBoardService:
    """Service for the stationboard of the session's current station."""

    def __init__(self, departure_repository: "DepartureRepository", limit: int = 6) -> None:
        self._departure_repository = departure_repository
        self._limit = limit

    async def load_departures(
        self, session: DepartureSession, limit: int | None = None
    ) -> list[Departure]:
        """Fetch the stationboard of the current station into the session.

        Args:
            session: Session whose current station is used and updated.
            limit: Number of departures, defaults to the service limit.

        Raises:
            NoStationSelectedError: If the session has no current station.
            ValueError: If ``limit`` is smaller than 1.
        """
        station = session.current_station
        if station is None:
            raise NoStationSelectedError("No station selected")
        if limit is None:
            limit = self._limit
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        departures = await self._departure_repository.get_stationboard(station.name, limit=limit)
        session.departures = departures
        session.last_updated = datetime.now(UTC)
        logger.debug(f"Loaded {len(departures)} departure(s) for {station.name}")
        return departures

    async def refresh(self, session: DepartureSession) -> list[Departure] | None:
        """Reload departures if a station is selected; otherwise do nothing."""
        if session.current_station is None:
            return None
        return await self.load_departures(session)

    def clear_station(self, session: DepartureSession) -> None:
        """Forget the current station and its departures."""
        session.current_station = None
        session.departures = []
        session.last_updated = None
