"""Integration tests for `utilkit.fetch.fetch_outcome`, the non-raising variant."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from tests.helpers.transports import ScriptedTransport, client_for
from utilkit.errors import TimedOutError
from utilkit.fetch import Failure, RequestOutcome, Success, TimedOut, fetch_outcome


async def run_against(transport: ScriptedTransport, timeout_ms: float) -> RequestOutcome:
    async with client_for(transport) as client:
        outcome = await fetch_outcome("/x", timeout_ms=timeout_ms, client=client)
        if isinstance(outcome, TimedOut):
            await asyncio.wait_for(transport.cancelled.wait(), timeout=1)
    return outcome


def test_success_carries_the_response():
    outcome = asyncio.run(run_against(ScriptedTransport(status_code=202), 1000))
    assert isinstance(outcome, Success)
    assert outcome.response.status_code == 202


def test_timeout_becomes_timed_out():
    outcome = asyncio.run(run_against(ScriptedTransport(delay=0.5), 20))
    assert isinstance(outcome, TimedOut)
    assert isinstance(outcome.error, TimedOutError)


def test_other_failure_keeps_the_original_error():
    network_error = httpx.ReadError("reset by peer")
    outcome = asyncio.run(run_against(ScriptedTransport(error=network_error), 1000))
    assert isinstance(outcome, Failure)
    assert outcome.error is network_error


def test_outcomes_support_structural_matching():
    """Outcomes can be dispatched on with `match`."""
    outcome = asyncio.run(run_against(ScriptedTransport(status_code=200), 1000))
    match outcome:
        case Success(response):
            assert response.status_code == 200
        case _:
            pytest.fail(f"unexpected outcome {outcome!r}")


def test_outcomes_are_immutable():
    outcome = TimedOut(TimedOutError("https://example.test", 10))
    with pytest.raises(AttributeError):
        outcome.error = None  # type: ignore[misc]


def test_caller_cancellation_still_propagates():
    async def scenario():
        transport = ScriptedTransport(delay=5)
        async with client_for(transport) as client:
            caller = asyncio.create_task(fetch_outcome("/x", client=client))
            await asyncio.sleep(0.05)
            caller.cancel()
            with pytest.raises(asyncio.CancelledError):
                await caller

    asyncio.run(scenario())
