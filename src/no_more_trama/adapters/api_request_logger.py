"""Request logging for the transport API session, built on aiohttp client tracing.

The hooks see the URL aiohttp actually sends, with the query string encoded,
so the log line can be pasted into a browser or curl as is.
"""

import asyncio
import logging
from collections.abc import Mapping
from types import SimpleNamespace

import aiohttp

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"
_SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Copy of ``headers`` with credential values replaced."""
    return {
        name: REDACTED if name.lower() in _SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


async def log_request_start(
    _session: aiohttp.ClientSession,
    trace_config_ctx: SimpleNamespace,
    params: aiohttp.TraceRequestStartParams,
) -> None:
    """Log method, URL and headers of an outgoing request and remember its start time."""
    trace_config_ctx.started_at = asyncio.get_running_loop().time()
    safe_headers = redact_headers(params.headers)
    headers = ", ".join(f"{name}: {value}" for name, value in safe_headers.items())
    suffix = f" [{headers}]" if headers else ""
    logger.info(f"API request: {params.method} {params.url}{suffix}")


async def log_request_end(
    _session: aiohttp.ClientSession,
    trace_config_ctx: SimpleNamespace,
    params: aiohttp.TraceRequestEndParams,
) -> None:
    """Log the response status and how long the request took."""
    started_at = getattr(trace_config_ctx, "started_at", None)
    elapsed = ""
    if started_at is not None:
        elapsed = f" in {(asyncio.get_running_loop().time() - started_at) * 1000:.0f} ms"
    status = params.response.status
    logger.info(f"API response: {status} for {params.method} {params.url}{elapsed}")


async def log_request_exception(
    _session: aiohttp.ClientSession,
    _trace_config_ctx: SimpleNamespace,
    params: aiohttp.TraceRequestExceptionParams,
) -> None:
    """Log a request that failed before a response arrived."""
    logger.info(f"API request failed: {params.method} {params.url}: {params.exception!r}")


def request_trace_config() -> aiohttp.TraceConfig:
    """Trace config logging every request of the session it is installed on."""
    trace_config = aiohttp.TraceConfig()
    trace_config.on_request_start.append(log_request_start)
    trace_config.on_request_end.append(log_request_end)
    trace_config.on_request_exception.append(log_request_exception)
    return trace_config
