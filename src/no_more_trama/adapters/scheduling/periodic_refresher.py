"""Periodic refresh of departures on the asyncio event loop."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from no_more_trama.domain.contracts.refresh_scheduler import (
    RefreshHandleProtocol,
    RefreshSchedulerProtocol,
)

logger = logging.getLogger(__name__)


class RefreshHandle(RefreshHandleProtocol):
    """Handle returned by PeriodicRefresher.start(); cancel() stops the refresh."""

    def __init__(self, task: asyncio.Task[None]) -> None:
        self._task = task
        self._cancel_requested = False

    def cancel(self) -> None:
        """Stop the refresh. Safe to call more than once."""
        self._cancel_requested = True
        if not self._task.done():
            self._task.cancel()

    @property
    def cancelled(self) -> bool:
        return self._cancel_requested

    async def wait(self) -> None:
        """Wait until the refresh has stopped. Does not re-raise its cancellation."""
        await asyncio.wait({self._task})


class PeriodicRefresher(RefreshSchedulerProtocol):
    """Awaits a callback every ``interval_seconds`` until cancelled."""

    def __init__(self, interval_seconds: float = 60) -> None:
        """Initialize the refresher.

        Args:
            interval_seconds: Delay before each callback invocation.
        """
        self.interval_seconds = interval_seconds
        self._handle: RefreshHandle | None = None

    def start(self, callback: Callable[[], Awaitable[None]]) -> RefreshHandle:
        """Start refreshing, cancelling any refresh this refresher already runs."""
        if self._handle is not None:
            self._handle.cancel()

        task = asyncio.create_task(self._refresh_loop(callback))
        self._handle = RefreshHandle(task)
        logger.info(f"Started auto refresh every {self.interval_seconds}s")
        return self._handle

    async def stop(self) -> None:
        """Stop the running refresh, if any."""
        if self._handle is None:
            return
        self._handle.cancel()
        await self._handle.wait()
        self._handle = None
        logger.info("Stopped auto refresh")

    async def _refresh_loop(self, callback: Callable[[], Awaitable[None]]) -> None:
        try:
            while True:
                await asyncio.sleep(self.interval_seconds)
                try:
                    await callback()
                except Exception as e:
                    # Keep refreshing; the next tick may succeed
                    logger.error(f"Auto refresh failed: {e}")
        except asyncio.CancelledError:
            logger.debug("Auto refresh cancelled")
            raise
