"""Connection domain models."""

from dataclasses import dataclass
from datetime import datetime

from no_more_trama.domain.models.station import Station


@dataclass(frozen=True)
class PassStop:
    """A stop a journey passes through."""

    station: Station
    arrival: datetime | None = None
    departure: datetime | None = None


@dataclass(frozen=True)
class ConnectionSection:
    """One leg of a connection.

    ``pass_list`` is None when the section has no journey (e.g. a walk).
    """

    departure_time: datetime | None
    arrival_time: datetime | None
    pass_list: list[PassStop] | None = None


@dataclass(frozen=True)
class Connection:
    """A sample connection between two stations."""

    sections: list[ConnectionSection]
