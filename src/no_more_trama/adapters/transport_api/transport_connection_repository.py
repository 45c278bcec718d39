"""Connection repository adapter for the Swiss public transport API."""

import logging

from no_more_trama.adapters.transport_api.http_client import TransportHttpClient
from no_more_trama.adapters.transport_api.response_parser import ResponseParser
from no_more_trama.domain.models.connection import Connection
from no_more_trama.domain.ports.connection_repository import ConnectionRepository

logger = logging.getLogger(__name__)


class TransportConnectionRepository(ConnectionRepository):
    """Adapter for sample connections using transport.opendata.ch/v1/connections."""

    def __init__(self, http_client: TransportHttpClient) -> None:
        self._http_client = http_client

    async def find_connection(self, from_station: str, to_station: str) -> Connection | None:
        """Get the next connection between two stations."""
        payload = await self._http_client.connections(from_station, to_station, limit=1)
        connection = ResponseParser.parse_first_connection(payload)
        if connection is None:
            logger.info(f"No connection found from {from_station} to {to_station}")
        return connection
