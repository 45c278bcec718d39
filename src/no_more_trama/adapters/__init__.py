"""Adapters layer - external system integrations."""

from no_more_trama.adapters.config import AppConfig
from no_more_trama.adapters.transport_api import (
    TransportConnectionRepository,
    TransportDepartureRepository,
    TransportHttpClient,
    TransportStationRepository,
)

__all__ = [
    "AppConfig",
    "TransportConnectionRepository",
    "TransportDepartureRepository",
    "TransportHttpClient",
    "TransportStationRepository",
]
