"""Ports (interfaces) for the ports-and-adapters architecture."""

from no_more_trama.domain.ports.connection_repository import ConnectionRepository
from no_more_trama.domain.ports.departure_repository import DepartureRepository
from no_more_trama.domain.ports.station_repository import StationRepository

__all__ = [
    "ConnectionRepository",
    "DepartureRepository",
    "StationRepository",
]
