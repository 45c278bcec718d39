"""HTTP client for the Swiss public transport API.

Uses the transport.opendata.ch public API.
API Documentation: https://transport.opendata.ch/docs.html
"""

import asyncio
import logging
from typing import Any

import aiohttp

from no_more_trama.adapters.api_request_logger import request_trace_config
from no_more_trama.adapters.transport_api.constants import (
    CONNECTIONS_PATH,
    DEFAULT_BASE_URL,
    DEFAULT_HEADERS,
    LOCATION_TYPE_STATION,
    LOCATIONS_PATH,
    STATIONBOARD_PATH,
)
from no_more_trama.domain.exceptions import TransportApiError
from no_more_trama.domain.models.error_details import ErrorDetails

logger = logging.getLogger(__name__)


class TransportHttpClient:
    """HTTP client for transport.opendata.ch requests.

    Returns the decoded JSON payloads; parsing into domain models is left to
    the response parser. Failures raise TransportApiError.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize with a shared aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: Base URL of the API, without trailing slash.
            timeout_seconds: Total timeout per request.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    @staticmethod
    def create_session(log_requests: bool = False) -> aiohttp.ClientSession:
        """Create the aiohttp session the client is meant to share.

        Must be called from a running event loop. With ``log_requests`` every
        request and response is logged through aiohttp tracing.
        """
        trace_configs = [request_trace_config()] if log_requests else []
        return aiohttp.ClientSession(headers=DEFAULT_HEADERS, trace_configs=trace_configs)

    async def _log_error_response(self, response: aiohttp.ClientResponse, url: str) -> None:
        """Log error response details."""
        error_text = await response.text()
        error_body = error_text[:500] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        logger.error(
            f"Transport API returned status {response.status} for {url}: "
            f"{error_body} (Content-Type: {content_type})"
        )

    async def _get_json(self, path: str, params: dict[str, str | int | float]) -> dict[str, Any]:
        """Perform a GET request and return the JSON object of the response."""
        url = f"{self._base_url}{path}"
        try:
            async with self._session.get(
                url, params=params, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                if response.status != 200:
                    await self._log_error_response(response, url)
                    raise TransportApiError(ErrorDetails.from_status(response.status))
                data = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Error requesting {url}: {e!r}")
            raise TransportApiError(ErrorDetails(reason=f"Request failed: {e!r}")) from e

        if not isinstance(data, dict):
            logger.error(f"Unexpected response payload from {url}: {type(data).__name__}")
            raise TransportApiError(ErrorDetails(reason="Unexpected response payload"))
        return data

    async def locations_near(self, latitude: float, longitude: float) -> dict[str, Any]:
        """Fetch stations around a coordinate.

        The API takes WGS84 coordinates as x = latitude, y = longitude.
        """
        params: dict[str, str | int | float] = {
            "x": latitude,
            "y": longitude,
            "type": LOCATION_TYPE_STATION,
        }
        return await self._get_json(LOCATIONS_PATH, params)

    async def locations_by_query(self, query: str) -> dict[str, Any]:
        """Fetch stations matching a free-text query."""
        params: dict[str, str | int | float] = {"query": query, "type": LOCATION_TYPE_STATION}
        return await self._get_json(LOCATIONS_PATH, params)

    async def stationboard(self, station: str, limit: int) -> dict[str, Any]:
        """Fetch the stationboard of a station (name or id)."""
        params: dict[str, str | int | float] = {"station": station, "limit": limit}
        return await self._get_json(STATIONBOARD_PATH, params)

    async def connections(
        self, from_station: str, to_station: str, limit: int = 1
    ) -> dict[str, Any]:
        """Fetch connections between two stations."""
        params: dict[str, str | int | float] = {
            "from": from_station,
            "to": to_station,
            "limit": limit,
        }
        return await self._get_json(CONNECTIONS_PATH, params)
