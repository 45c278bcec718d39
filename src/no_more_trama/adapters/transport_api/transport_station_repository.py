"""Station repository adapter for the Swiss public transport API."""

import logging

from no_more_trama.adapters.transport_api.http_client import TransportHttpClient
from no_more_trama.adapters.transport_api.response_parser import ResponseParser
from no_more_trama.domain.models.coordinate import Coordinate
from no_more_trama.domain.models.station import Station
from no_more_trama.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)


class TransportStationRepository(StationRepository):
    """Adapter for station lookups using transport.opendata.ch/v1/locations."""

    def __init__(self, http_client: TransportHttpClient) -> None:
        self._http_client = http_client

    async def find_stations_near(self, coordinate: Coordinate) -> list[Station]:
        """Find stations around a coordinate.

        Args:
            coordinate: Location to search around.

        Returns:
            Stations in API order; coordinates may be missing.
        """
        logger.info(
            f"Searching for stations near {coordinate.latitude}, {coordinate.longitude}"
        )
        payload = await self._http_client.locations_near(coordinate.latitude, coordinate.longitude)
        stations = ResponseParser.parse_stations(payload)
        logger.info(f"Found {len(stations)} station(s) from API")
        return stations

    async def search_stations(self, query: str) -> list[Station]:
        """Find stations matching a query.

        Args:
            query: Free-text station name.

        Returns:
            Stations in API order, best match first.
        """
        payload = await self._http_client.locations_by_query(query)
        stations = ResponseParser.parse_stations(payload)
        logger.debug(f"Search for '{query}' returned {len(stations)} station(s)")
        return stations
