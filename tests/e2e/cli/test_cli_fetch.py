"""End-to-end tests for ``utilkit fetch`` against an in-process transport."""

import asyncio

import httpx

from utilkit.entrypoints.cli.main import utilkit

# pylint: disable=magic-value-comparison


def invoke(runner, *args):
    return runner.invoke(utilkit, ["--no-flight-recorder", "fetch", *args])


def test_prints_the_body(runner, serve):
    serve(lambda request: httpx.Response(200, text="hello"))
    result = invoke(runner, "https://example.test/")
    assert result.exit_code == 0
    assert result.output == "hello"


def test_include_shows_status_and_headers(runner, serve):
    serve(lambda request: httpx.Response(200, headers={"X-Demo": "1"}, text="ok"))
    result = invoke(runner, "-i", "https://example.test/")
    assert result.output.startswith("HTTP/1.1 200 OK\n")
    assert "x-demo: 1" in result.output.lower()


def test_method_headers_and_body_are_sent(runner, serve):
    seen: list[httpx.Request] = []

    def handler(request):
        seen.append(request)
        return httpx.Response(201)

    serve(handler)
    result = invoke(
        runner, "-X", "post", "-H", "X-Trace: abc", "-d", "payload", "https://example.test/items"
    )
    assert result.exit_code == 0
    (request,) = seen
    assert request.method == "POST"
    assert request.headers["X-Trace"] == "abc"
    assert request.content == b"payload"
    assert request.headers["User-Agent"].startswith("utilkit/")


def test_malformed_header_is_a_usage_error(runner, serve):
    serve(lambda request: httpx.Response(200))
    result = invoke(runner, "-H", "no-colon", "https://example.test/")
    assert result.exit_code == 2
    assert "Name: value" in result.output


def test_error_status_warns_but_succeeds(runner, serve):
    serve(lambda request: httpx.Response(404, text="missing"))
    result = invoke(runner, "https://example.test/nope")
    assert result.exit_code == 0
    assert "missing" in result.output
    assert "Server answered 404" in result.output


def test_timeout_is_reported(runner, serve):
    async def slow(request):
        await asyncio.sleep(1)
        return httpx.Response(200)

    serve(slow)
    result = invoke(runner, "--timeout-ms", "50", "https://user:pw@example.test/slow")
    assert result.exit_code == 1
    assert "wait time exceeded" in result.output
    assert "took longer than 50 ms" in result.output
    assert ":pw@" not in result.output


def test_timeout_default_comes_from_environment(runner, serve, monkeypatch):
    async def slow(request):
        await asyncio.sleep(1)
        return httpx.Response(200)

    serve(slow)
    monkeypatch.setenv("UTILKIT_FETCH_TIMEOUT_MS", "30")
    result = invoke(runner, "https://example.test/slow")
    assert result.exit_code == 1
    assert "took longer than 30 ms" in result.output


def test_transport_error_is_reported(runner, serve):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    serve(refuse)
    result = invoke(runner, "https://example.test/")
    assert result.exit_code == 1
    assert "failed: connection refused" in result.output
