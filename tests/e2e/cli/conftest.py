"""Fixtures for end-to-end CLI tests.

Provides a test-only ``log-demo`` command that emits log messages at every
level, a CliRunner, a flight-recorder path under ``tmp_path``, and a hook to
point ``utilkit fetch`` at an in-process httpx transport.
"""

import logging
from collections.abc import Callable

import click
import httpx
import pytest
from click.testing import CliRunner

from utilkit.adapters import http_client
from utilkit.entrypoints.cli import fetch as fetch_cli
from utilkit.entrypoints.cli.main import utilkit

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages on project and third-party loggers."""
    logger = logging.getLogger("utilkit.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    third_party_logger = logging.getLogger("httpx")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any click-extra sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register ``log-demo`` for the duration of a test."""
    utilkit.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(utilkit, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def log_path(tmp_path, monkeypatch):
    """Keep the flight recorder (and settings) away from the real user environment."""
    path = tmp_path / "latest.log"
    monkeypatch.setenv("UTILKIT_LOG_PATH", str(path))
    for name in ("UTILKIT_LOCALE", "UTILKIT_CURRENCY", "UTILKIT_FETCH_TIMEOUT_MS"):
        monkeypatch.delenv(name, raising=False)
    return path


@pytest.fixture
def serve(monkeypatch) -> Callable[[Callable], None]:
    """Route ``utilkit fetch`` through an `httpx.MockTransport` with the given handler."""

    def install(handler: Callable) -> None:
        def build(settings=None, **kwargs):
            return http_client.build_async_client(
                settings, transport=httpx.MockTransport(handler), **kwargs
            )

        monkeypatch.setattr(fetch_cli, "build_async_client", build)

    return install
