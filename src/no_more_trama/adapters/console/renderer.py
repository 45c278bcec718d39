"""Plain-text rendering of boards, station lists and routes."""

from datetime import datetime

from no_more_trama.adapters.console.formatters.distance_formatter import format_distance
from no_more_trama.domain.contracts.departure_formatter import DepartureFormatterProtocol
from no_more_trama.domain.models import (
    Departure,
    RankedStation,
    RouteInfo,
    Station,
)

_URGENCY_MARKERS = {"urgent": "!!", "soon": "! ", "": "  "}


class ConsoleRenderer:
    """Renders domain objects as text for the terminal."""

    def __init__(self, formatter: DepartureFormatterProtocol) -> None:
        self.formatter = formatter

    def render_station_header(self, station: Station | RankedStation) -> str:
        """Station name, followed by its distance when it is known."""
        if isinstance(station, RankedStation):
            return f"{station.name} ({format_distance(station.distance_meters)})"
        return station.name

    def render_departure(self, departure: Departure, now: datetime | None = None) -> str:
        """One board row: urgency marker, line, destination, category and minutes."""
        minutes = self.formatter.minutes_until(departure, now=now)
        marker = _URGENCY_MARKERS[self.formatter.urgency(minutes)]
        transport_type = self.formatter.transport_type(departure.category)
        platform = f" [{departure.platform}]" if departure.platform else ""
        return (
            f"{marker} {departure.line:>5}  {departure.destination:<32} "
            f"{departure.category:<4} {transport_type:<7}{platform} {minutes:>3}' min"
        )

    def render_board(
        self,
        station: Station | RankedStation,
        departures: list[Departure],
        last_updated: datetime | None = None,
        now: datetime | None = None,
    ) -> str:
        """Full departures board for a station."""
        lines = [self.render_station_header(station), ""]
        if not departures:
            lines.append("No departures found at this time.")
        else:
            lines.extend(self.render_departure(departure, now=now) for departure in departures)

        if last_updated is not None:
            updated = self.formatter.format_clock(last_updated, seconds=True)
            lines.extend(["", f"Last updated: {updated}"])
        return "\n".join(lines)

    def render_nearby_stations(self, stations: list[RankedStation]) -> str:
        """Numbered list of nearby stations for selection."""
        if not stations:
            return "No stations found"
        return "\n".join(
            f"{index:>3}. {station.name}  {format_distance(station.distance_meters)}"
            for index, station in enumerate(stations)
        )

    def render_stations(self, stations: list[Station]) -> str:
        """Search results, one station per line with its id."""
        if not stations:
            return "No stations found"
        return "\n".join(
            f"  {station.name}\n    ID: {station.id or 'Unknown'}" for station in stations
        )

    def render_route(self, route: RouteInfo) -> str:
        """Route title, summary and the stop list."""
        lines = [route.title]
        if route.duration_minutes is not None:
            lines.append(f"{route.stop_count} stops • {route.duration_minutes} min journey")
        else:
            lines.append(f"{route.stop_count} stops")
        lines.append("")
        if not route.stops:
            lines.append("No stops available")
            return "\n".join(lines)

        for index, stop in enumerate(route.stops):
            if stop.is_current:
                detail = "Your current stop"
            elif stop.distance_meters is not None:
                detail = format_distance(stop.distance_meters)
            else:
                detail = ""
            lines.append(f"  o {stop.name}" + (f"  ({detail})" if detail else ""))
            if index < len(route.stops) - 1:
                lines.append("  |")
        return "\n".join(lines)
