"""Application services (use cases)."""

from no_more_trama.application.services.departure_board_service import DepartureBoardService
from no_more_trama.application.services.route_info_service import RouteInfoService
from no_more_trama.application.services.station_lookup_service import StationLookupService

__all__ = ["DepartureBoardService", "RouteInfoService", "StationLookupService"]
