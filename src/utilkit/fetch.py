"""Timeout-guarded HTTP requests.

`fetch_with_timeout` performs one outbound request with httpx and bounds its
duration. The request runs as an asyncio task that is raced against a single
timer (the timeout of `asyncio.wait`):

- response first: the timer is cleared and the raw `httpx.Response` returned;
- timer first: the request task is cancelled once and `TimedOutError` raised;
- request fails first: the timer is cleared and the original exception
  re-raised unchanged.

Cancellation is cooperative. The transport must observe `CancelledError`; if
it settles anyway after the deadline, that late response or error is ignored.

`fetch_outcome` runs the same race but returns a `RequestOutcome` value
(`Success`, `TimedOut` or `Failure`) instead of raising.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

import httpx

from utilkit.adapters.http_client import build_async_client, sanitize_url
from utilkit.config import DEFAULT_FETCH_TIMEOUT_MS
from utilkit.errors import TimedOutError

logger = logging.getLogger(__name__)


# ============================================================================
#                               Options
# ============================================================================


@dataclass(frozen=True, slots=True)
class RequestOptions:
    """Transport parameters for a single request.

    Every field is forwarded to httpx unmodified; `None` means "not set".
    Use at most one of `content`, `data` or `json` as the request body.
    """

    method: str = "GET"
    headers: Mapping[str, str] | None = None
    params: Mapping[str, Any] | None = None
    content: str | bytes | None = None
    data: Mapping[str, Any] | None = None
    json: Any = None
    follow_redirects: bool = True

    def build_request(self, client: httpx.AsyncClient, url: str) -> httpx.Request:
        """Build the `httpx.Request` these options describe."""
        return client.build_request(
            self.method,
            url,
            headers=self.headers,
            params=self.params,
            content=self.content,
            data=self.data,
            json=self.json,
        )


# ============================================================================
#                               Outcomes
# ============================================================================


@dataclass(frozen=True, slots=True)
class Success:
    """The request settled with a response before the deadline."""

    response: httpx.Response


@dataclass(frozen=True, slots=True)
class TimedOut:
    """The deadline passed before the request settled."""

    error: TimedOutError


@dataclass(frozen=True, slots=True)
class Failure:
    """The request failed for a reason other than the deadline."""

    error: Exception


RequestOutcome: TypeAlias = Success | TimedOut | Failure


# ============================================================================
#                               Race
# ============================================================================


def _discard_late_settlement(task: asyncio.Task[httpx.Response]) -> None:
    """Retrieve and drop whatever a timed-out request eventually produced."""
    if task.cancelled():
        return
    if (exc := task.exception()) is not None:
        logger.debug("Ignoring failure that settled after the deadline: %r", exc)
    else:
        logger.debug("Ignoring response that arrived after the deadline.")


async def _race(
    client: httpx.AsyncClient,
    request: httpx.Request,
    timeout_ms: float,
    follow_redirects: bool,
) -> httpx.Response:
    shown_url = sanitize_url(request.url)
    logger.debug("%s %s (timeout %s ms)", request.method, shown_url, timeout_ms)
    task = asyncio.create_task(
        client.send(request, follow_redirects=follow_redirects)
    )
    started = time.perf_counter()
    try:
        done, _ = await asyncio.wait((task,), timeout=timeout_ms / 1000)
    finally:
        # Also reached when the caller itself is cancelled mid-wait.
        if not task.done():
            task.cancel()
            task.add_done_callback(_discard_late_settlement)

    elapsed_ms = (time.perf_counter() - started) * 1000
    if task not in done:
        logger.warning(
            "%s %s aborted after %.0f ms (timeout %s ms).",
            request.method,
            shown_url,
            elapsed_ms,
            timeout_ms,
        )
        raise TimedOutError(str(request.url), timeout_ms)

    if (exc := task.exception()) is not None:
        logger.debug(
            "%s %s failed after %.0f ms: %r", request.method, shown_url, elapsed_ms, exc
        )
        raise exc

    response = task.result()
    logger.debug(
        "%s %s -> %s in %.0f ms",
        request.method,
        shown_url,
        response.status_code,
        elapsed_ms,
    )
    return response


async def fetch_with_timeout(
    url: str,
    options: RequestOptions | None = None,
    timeout_ms: float = DEFAULT_FETCH_TIMEOUT_MS,
    *,
    client: httpx.AsyncClient | None = None,
) -> httpx.Response:
    """Perform one HTTP request, failing if it takes longer than `timeout_ms`.

    Args:
        url: Target URL.
        options: Method, headers, body, etc. Defaults to a plain ``GET``.
        timeout_ms: Upper bound on the request duration, in milliseconds.
            Zero or negative values are not rejected; the request then loses
            the race immediately.
        client: Transport to use. When omitted, a client is built with
            `build_async_client` and closed before returning.

    Returns:
        The transport's response, unprocessed. Non-2xx statuses are *not*
        turned into errors.

    Raises:
        TimedOutError: If the deadline passes before the request settles.
        Exception: Any other transport failure, re-raised unchanged (e.g.
            `httpx.ConnectError`).
    """
    options = options or RequestOptions()
    if client is not None:
        request = options.build_request(client, url)
        return await _race(client, request, timeout_ms, options.follow_redirects)

    async with build_async_client() as owned:
        request = options.build_request(owned, url)
        return await _race(owned, request, timeout_ms, options.follow_redirects)


async def fetch_outcome(
    url: str,
    options: RequestOptions | None = None,
    timeout_ms: float = DEFAULT_FETCH_TIMEOUT_MS,
    *,
    client: httpx.AsyncClient | None = None,
) -> RequestOutcome:
    """Like `fetch_with_timeout`, but report the result as a value.

    Cancellation of the caller still propagates as `asyncio.CancelledError`.

    Examples:
        ```python
        match await fetch_outcome("https://example.com", timeout_ms=100):
            case Success(response):
                ...
            case TimedOut(error):
                ...
            case Failure(error):
                ...
        ```
    """
    try:
        response = await fetch_with_timeout(url, options, timeout_ms, client=client)
    except TimedOutError as e:
        return TimedOut(e)
    except Exception as e:  # pylint: disable=broad-except
        return Failure(e)
    return Success(response)
