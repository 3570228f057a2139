"""Project-wide error definitions."""

# ============================================================================
#                           General errors
# ============================================================================


class UtilkitError(Exception):
    """Base class for utilkit errors."""


class InvalidSettingError(UtilkitError):
    """Raised when an environment variable holds an unusable value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for {name}: {reason}.")
        self.name = name
        self.value = value
        self.reason = reason


# ============================================================================
#                           Fetch errors
# ============================================================================


class TimedOutError(UtilkitError, TimeoutError):
    """Raised when a request does not settle before its timeout elapses."""

    MESSAGE = "The request was aborted: wait time exceeded."

    def __init__(self, url: str, timeout_ms: float) -> None:
        super().__init__(self.MESSAGE)
        self.url = url
        self.timeout_ms = timeout_ms


# ============================================================================
#                           Formatting errors
# ============================================================================


class InvalidCurrencyError(UtilkitError, ValueError):
    """Raised when a currency code is not a three-letter ISO 4217 code."""

    def __init__(self, currency: str) -> None:
        super().__init__(f"Invalid currency code: {currency!r}.")
        self.currency = currency


class InvalidLocaleError(UtilkitError, ValueError):
    """Raised when a locale identifier cannot be resolved."""

    def __init__(self, locale: str) -> None:
        super().__init__(f"Unknown locale: {locale!r}.")
        self.locale = locale
