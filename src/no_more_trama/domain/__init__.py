"""Domain layer - core business logic and models."""

from no_more_trama.domain.geo import distance
from no_more_trama.domain.models import (
    Coordinate,
    Departure,
    DepartureSession,
    RankedStation,
    Station,
)
from no_more_trama.domain.ports import (
    ConnectionRepository,
    DepartureRepository,
    StationRepository,
)
from no_more_trama.domain.station_ranker import rank

__all__ = [
    "ConnectionRepository",
    "Coordinate",
    "Departure",
    "DepartureRepository",
    "DepartureSession",
    "RankedStation",
    "Station",
    "StationRepository",
    "distance",
    "rank",
]
