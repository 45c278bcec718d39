"""Connection repository port."""

from typing import Protocol

from no_more_trama.domain.models.connection import Connection


class ConnectionRepository(Protocol):
    """Port for retrieving sample connections."""

    async def find_connection(self, from_station: str, to_station: str) -> Connection | None:
        """Get the next connection between two stations, or None if there is none."""
        ...
