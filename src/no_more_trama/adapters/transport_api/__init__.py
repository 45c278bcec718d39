"""Swiss public transport API (transport.opendata.ch) adapters."""

from no_more_trama.adapters.transport_api.http_client import TransportHttpClient
from no_more_trama.adapters.transport_api.transport_connection_repository import (
    TransportConnectionRepository,
)
from no_more_trama.adapters.transport_api.transport_departure_repository import (
    TransportDepartureRepository,
)
from no_more_trama.adapters.transport_api.transport_station_repository import (
    TransportStationRepository,
)

__all__ = [
    "TransportConnectionRepository",
    "TransportDepartureRepository",
    "TransportHttpClient",
    "TransportStationRepository",
]
