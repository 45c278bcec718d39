"""Ranked station domain model."""

from dataclasses import dataclass

from no_more_trama.domain.models.coordinate import Coordinate
from no_more_trama.domain.models.station import Station


@dataclass(frozen=True)
class RankedStation:
    """A station annotated with its distance from a search origin."""

    station: Station
    distance_meters: float

    @property
    def id(self) -> str:
        return self.station.id

    @property
    def name(self) -> str:
        return self.station.name

    @property
    def coordinate(self) -> Coordinate | None:
        return self.station.coordinate
