"""Domain models for public transport departures."""

from no_more_trama.domain.models.connection import Connection, ConnectionSection, PassStop
from no_more_trama.domain.models.coordinate import Coordinate
from no_more_trama.domain.models.departure import Departure
from no_more_trama.domain.models.departure_session import DepartureSession
from no_more_trama.domain.models.error_details import ErrorDetails
from no_more_trama.domain.models.ranked_station import RankedStation
from no_more_trama.domain.models.route_info import RouteInfo, RouteStop
from no_more_trama.domain.models.station import Station

__all__ = [
    "Connection",
    "ConnectionSection",
    "Coordinate",
    "Departure",
    "DepartureSession",
    "ErrorDetails",
    "PassStop",
    "RankedStation",
    "RouteInfo",
    "RouteStop",
    "Station",
]
