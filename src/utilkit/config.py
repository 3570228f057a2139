"""Configuration utilities for utilkit.

Defaults are read from ``UTILKIT_*`` environment variables. There is no
configuration file; the CLI additionally exposes the same values as options.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from utilkit import __version__
from utilkit.errors import InvalidSettingError

ENV_PREFIX = "UTILKIT_"  # pragma: no mutate

DEFAULT_LOCALE = "fr_FR"
DEFAULT_CURRENCY = "EUR"
DEFAULT_FETCH_TIMEOUT_MS = 5000
DEFAULT_USER_AGENT = f"utilkit/{__version__}"


@dataclass(frozen=True, slots=True)
class Settings:
    """Application defaults resolved from the environment."""

    locale: str = DEFAULT_LOCALE
    currency: str = DEFAULT_CURRENCY
    fetch_timeout_ms: float = DEFAULT_FETCH_TIMEOUT_MS
    user_agent: str = DEFAULT_USER_AGENT


def _get(environ: Mapping[str, str], key: str) -> str | None:
    if value := environ.get(ENV_PREFIX + key, "").strip():
        return value
    return None


def _parse_timeout(raw: str) -> float:
    name = ENV_PREFIX + "FETCH_TIMEOUT_MS"
    try:
        return float(raw)
    except ValueError as e:
        raise InvalidSettingError(name, raw, "expected a number of milliseconds") from e


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build a `Settings` instance from environment variables.

    Empty or unset variables fall back to the defaults.

    Args:
        environ: Mapping to read from. Defaults to `os.environ`; override in
            tests to avoid touching the process environment.

    Returns:
        The resolved settings.

    Raises:
        InvalidSettingError: If `UTILKIT_FETCH_TIMEOUT_MS` is not a number.
    """
    environ = os.environ if environ is None else environ
    timeout = _get(environ, "FETCH_TIMEOUT_MS")
    return Settings(
        locale=_get(environ, "LOCALE") or DEFAULT_LOCALE,
        currency=_get(environ, "CURRENCY") or DEFAULT_CURRENCY,
        fetch_timeout_ms=(
            _parse_timeout(timeout) if timeout is not None else DEFAULT_FETCH_TIMEOUT_MS
        ),
        user_agent=_get(environ, "USER_AGENT") or DEFAULT_USER_AGENT,
    )
