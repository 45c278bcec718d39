"""Route information domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RouteStop:
    """A stop on a route as shown to the user."""

    name: str
    distance_meters: float | None
    is_current: bool


@dataclass(frozen=True)
class RouteInfo:
    """Intermediate stops of a departure, taken from a sample connection."""

    title: str
    stops: list[RouteStop]
    duration_minutes: int | None

    @property
    def stop_count(self) -> int:
        return len(self.stops)
