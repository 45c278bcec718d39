"""Station domain model."""

from dataclasses import dataclass

from no_more_trama.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class Station:
    """Represents a public transport station as returned by a station lookup."""

    id: str
    name: str
    coordinate: Coordinate | None = None
