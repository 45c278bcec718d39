"""Departure repository port."""

from typing import Protocol

from no_more_trama.domain.models.departure import Departure


class DepartureRepository(Protocol):
    """Port for retrieving stationboards."""

    async def get_stationboard(self, station: str, limit: int = 6) -> list[Departure]:
        """Get the next departures of a station (name or id)."""
        ...
