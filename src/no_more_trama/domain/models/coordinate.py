"""Coordinate domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 position in degrees."""

    latitude: float
    longitude: float
