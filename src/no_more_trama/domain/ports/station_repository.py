"""Station repository port."""

from typing import Protocol

from no_more_trama.domain.models.coordinate import Coordinate
from no_more_trama.domain.models.station import Station


class StationRepository(Protocol):
    """Port for looking up stations."""

    async def find_stations_near(self, coordinate: Coordinate) -> list[Station]:
        """Find stations around a coordinate, in provider order."""
        ...

    async def search_stations(self, query: str) -> list[Station]:
        """Find stations matching a free-text query, best match first."""
        ...
