"""Ranking of candidate stations by distance from an origin."""

import logging
import math
from collections.abc import Iterable

from no_more_trama.domain.geo import distance
from no_more_trama.domain.models.coordinate import Coordinate
from no_more_trama.domain.models.ranked_station import RankedStation
from no_more_trama.domain.models.station import Station

logger = logging.getLogger(__name__)


def _usable_coordinate(station: Station) -> Coordinate | None:
    """Return the station coordinate if it can be used for distance math."""
    coordinate = getattr(station, "coordinate", None)
    if coordinate is None:
        return None
    try:
        latitude = float(coordinate.latitude)
        longitude = float(coordinate.longitude)
    except (AttributeError, TypeError, ValueError):
        return None
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        return None
    if not (-90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0):
        return None
    return Coordinate(latitude=latitude, longitude=longitude)


def rank(
    stations: Iterable[Station], origin: Coordinate, radius_meters: float
) -> list[RankedStation]:
    """Rank stations within ``radius_meters`` of ``origin``, nearest first.

    Stations without a usable coordinate are dropped. Stations at equal distance
    keep their input order.

    Args:
        stations: Candidate stations, typically from a station lookup.
        origin: Search origin.
        radius_meters: Maximum distance (inclusive).

    Returns:
        A new list of ranked stations, empty if none is within the radius.
    """
    ranked: list[RankedStation] = []
    for station in stations:
        coordinate = _usable_coordinate(station)
        if coordinate is None:
            logger.debug(f"Station missing coordinates: {getattr(station, 'name', station)}")
            continue

        distance_meters = distance(origin, coordinate)
        if distance_meters > radius_meters:
            continue
        ranked.append(RankedStation(station=station, distance_meters=distance_meters))

    ranked.sort(key=lambda ranked_station: ranked_station.distance_meters)
    logger.debug(f"Ranked {len(ranked)} station(s) within {radius_meters} meters")
    return ranked
