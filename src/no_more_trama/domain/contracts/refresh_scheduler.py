"""Protocols for periodic refresh."""

from collections.abc import Awaitable, Callable
from typing import Protocol


class RefreshHandleProtocol(Protocol):
    """Handle to a running periodic refresh."""

    def cancel(self) -> None:
        """Stop the refresh."""
        ...

    @property
    def cancelled(self) -> bool:
        """Whether the refresh has been stopped."""
        ...


class RefreshSchedulerProtocol(Protocol):
    """Protocol for scheduling a callback at a fixed interval."""

    def start(self, callback: Callable[[], Awaitable[None]]) -> RefreshHandleProtocol:
        """Start refreshing, replacing any refresh already running."""
        ...

    async def stop(self) -> None:
        """Stop the running refresh, if any."""
        ...
