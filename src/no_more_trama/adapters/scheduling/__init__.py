"""Scheduling adapters."""

from no_more_trama.adapters.scheduling.periodic_refresher import PeriodicRefresher, RefreshHandle

__all__ = ["PeriodicRefresher", "RefreshHandle"]
