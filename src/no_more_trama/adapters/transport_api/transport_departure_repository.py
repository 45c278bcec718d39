"""Departure repository adapter for the Swiss public transport API."""

import logging

from no_more_trama.adapters.transport_api.http_client import TransportHttpClient
from no_more_trama.adapters.transport_api.response_parser import ResponseParser
from no_more_trama.domain.models.departure import Departure
from no_more_trama.domain.ports.departure_repository import DepartureRepository

logger = logging.getLogger(__name__)


class TransportDepartureRepository(DepartureRepository):
    """Adapter for stationboards using transport.opendata.ch/v1/stationboard."""

    def __init__(self, http_client: TransportHttpClient) -> None:
        self._http_client = http_client

    async def get_stationboard(self, station: str, limit: int = 6) -> list[Departure]:
        """Get the next departures of a station.

        Args:
            station: Station name or id.
            limit: Maximum number of departures to return.

        Raises:
            ValueError: If ``limit`` is smaller than 1.

        Returns:
            Departures in time order as returned by the API.
        """
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        payload = await self._http_client.stationboard(station, limit)
        departures = ResponseParser.parse_stationboard(payload)
        if not departures:
            logger.debug(f"No departures returned for station {station}")
        return departures[:limit]
