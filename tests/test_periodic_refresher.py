"""Tests for PeriodicRefresher behavior."""

import asyncio

import pytest

from no_more_trama.adapters.scheduling import PeriodicRefresher


@pytest.mark.asyncio
async def test_when_started_then_callback_runs_periodically() -> None:
    """Given a short interval, when started, then the callback is invoked repeatedly."""
    calls = 0
    reached = asyncio.Event()

    async def callback() -> None:
        nonlocal calls
        calls += 1
        if calls == 3:
            reached.set()

    refresher = PeriodicRefresher(interval_seconds=0.01)
    refresher.start(callback)

    await asyncio.wait_for(reached.wait(), timeout=2)
    await refresher.stop()

    assert calls >= 3


@pytest.mark.asyncio
async def test_when_cancelled_then_callback_no_longer_runs() -> None:
    """Given a running refresh, when its handle is cancelled, then no further calls happen."""
    calls = 0

    async def callback() -> None:
        nonlocal calls
        calls += 1

    refresher = PeriodicRefresher(interval_seconds=0.01)
    handle = refresher.start(callback)
    await asyncio.sleep(0.05)

    handle.cancel()
    await handle.wait()
    calls_at_cancel = calls
    await asyncio.sleep(0.05)

    assert handle.cancelled is True
    assert calls == calls_at_cancel


@pytest.mark.asyncio
async def test_when_callback_fails_then_refresh_continues() -> None:
    """Given a callback that raises, when refreshing, then later ticks still run."""
    calls = 0
    recovered = asyncio.Event()

    async def callback() -> None:
        nonlocal calls
        calls += 1
        if calls == 1:
            raise RuntimeError("API down")
        recovered.set()

    refresher = PeriodicRefresher(interval_seconds=0.01)
    refresher.start(callback)

    await asyncio.wait_for(recovered.wait(), timeout=2)
    await refresher.stop()

    assert calls >= 2


@pytest.mark.asyncio
async def test_when_started_twice_then_previous_refresh_is_cancelled() -> None:
    """Given a running refresh, when starting again, then the first handle is cancelled."""

    async def callback() -> None:
        return None

    refresher = PeriodicRefresher(interval_seconds=10)
    first = refresher.start(callback)
    second = refresher.start(callback)
    await first.wait()

    assert first.cancelled is True
    assert second.cancelled is False

    await refresher.stop()
    assert second.cancelled is True


@pytest.mark.asyncio
async def test_when_stopping_without_start_then_noop() -> None:
    """Given a refresher never started, when stopping, then nothing happens."""
    await PeriodicRefresher(interval_seconds=1).stop()


@pytest.mark.asyncio
async def test_when_interval_not_elapsed_then_callback_not_called() -> None:
    """Given a long interval, when started, then the callback does not run immediately."""
    calls = 0

    async def callback() -> None:
        nonlocal calls
        calls += 1

    refresher = PeriodicRefresher(interval_seconds=10)
    refresher.start(callback)
    await asyncio.sleep(0.02)
    await refresher.stop()

    assert calls == 0
