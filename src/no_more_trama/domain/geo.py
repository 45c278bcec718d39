"""Great-circle distance between WGS84 coordinates."""

import math

from no_more_trama.domain.models.coordinate import Coordinate

EARTH_RADIUS_METERS = 6_371_000.0


def distance(origin: Coordinate, target: Coordinate) -> float:
    """Return the Haversine distance in meters between two coordinates."""
    phi1 = math.radians(origin.latitude)
    phi2 = math.radians(target.latitude)
    delta_phi = math.radians(target.latitude - origin.latitude)
    delta_lambda = math.radians(target.longitude - origin.longitude)

    a = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    # Rounding can push a just past 1 for near-antipodal points
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_METERS * c
