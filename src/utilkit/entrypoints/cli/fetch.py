"""utilkit CLI: ``fetch``, one timeout-guarded HTTP request.

The response body goes to **stdout** (raw bytes, so binary payloads can be
redirected to a file); ``--include`` prepends the status line and headers.

Failure modes
- The request exceeds ``--timeout-ms`` → ``ClickException`` naming the timeout.
- Any transport error (DNS, connection refused, TLS, ...) → ``ClickException``
  with the httpx error message.
- A non-2xx status is *not* an error: the body is printed and a warning shown.
"""

from __future__ import annotations

import asyncio
import logging

import click
import httpx

from utilkit.adapters.http_client import build_async_client, sanitize_url
from utilkit.errors import TimedOutError
from utilkit.fetch import RequestOptions, fetch_with_timeout

from .helpers import warn
from .tools import get_settings

logger = logging.getLogger(__name__)


def _parse_header(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> dict[str, str]:
    headers: dict[str, str] = {}
    for item in value:
        name, sep, content = item.partition(":")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected 'Name: value', got {item!r}")
        headers[name.strip()] = content.strip()
    return headers


async def _run(
    url: str, options: RequestOptions, timeout_ms: float
) -> httpx.Response:
    async with build_async_client(get_settings()) as client:
        return await fetch_with_timeout(url, options, timeout_ms, client=client)


@click.command()
@click.argument("url")
@click.option("--request", "-X", "method", default="GET", show_default=True)
@click.option(
    "--header",
    "-H",
    "headers",
    multiple=True,
    callback=_parse_header,
    help="Extra header as 'Name: value'. Repeatable.",
)
@click.option("--data", "-d", help="Request body, sent as-is.")
@click.option(
    "--timeout-ms",
    type=float,
    help="Abort after this many milliseconds. [default: $UTILKIT_FETCH_TIMEOUT_MS or 5000]",
)
@click.option(
    "--include", "-i", is_flag=True, help="Print the status line and headers too."
)
def fetch(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    url: str,
    method: str,
    headers: dict[str, str],
    data: str | None,
    timeout_ms: float | None,
    include: bool,
) -> None:
    """Request URL and print the response body."""
    if timeout_ms is None:
        timeout_ms = get_settings().fetch_timeout_ms
    options = RequestOptions(
        method=method.upper(), headers=headers or None, content=data
    )

    try:
        response = asyncio.run(_run(url, options, timeout_ms))
    except TimedOutError as e:
        raise click.ClickException(
            f"{e} ({sanitize_url(e.url)} took longer than {e.timeout_ms:g} ms)"
        ) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise click.ClickException(f"Request to {sanitize_url(url)} failed: {e}") from e

    if include:
        click.echo(f"{response.http_version} {response.status_code} {response.reason_phrase}")
        for name, value in response.headers.items():
            click.echo(f"{name}: {value}")
        click.echo()
    click.echo(response.content, nl=False)

    if response.is_error:
        warn(f"Server answered {response.status_code} {response.reason_phrase}.")
