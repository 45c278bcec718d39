"""Contracts (protocols) for infrastructure used by the application."""

from no_more_trama.domain.contracts.departure_formatter import DepartureFormatterProtocol
from no_more_trama.domain.contracts.refresh_scheduler import (
    RefreshHandleProtocol,
    RefreshSchedulerProtocol,
)

__all__ = ["DepartureFormatterProtocol", "RefreshHandleProtocol", "RefreshSchedulerProtocol"]
