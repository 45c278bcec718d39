"""Departure session domain model."""

from dataclasses import dataclass, field
from datetime import datetime

from no_more_trama.domain.models.coordinate import Coordinate
from no_more_trama.domain.models.departure import Departure
from no_more_trama.domain.models.ranked_station import RankedStation
from no_more_trama.domain.models.station import Station

DEFAULT_SEARCH_RADIUS_METERS = 1000.0


@dataclass
class DepartureSession:
    """State of one user's interaction, owned by the caller and passed to services."""

    search_radius_meters: float = DEFAULT_SEARCH_RADIUS_METERS
    user_location: Coordinate | None = None
    current_station: Station | RankedStation | None = None
    nearby_stations: list[RankedStation] = field(default_factory=list)
    departures: list[Departure] = field(default_factory=list)
    last_updated: datetime | None = None
