r"""Locale-aware currency formatting backed by Babel's CLDR data.

Examples:
    ```python
    >>> format_price(42.99, "EUR", "fr_FR")
    '42,99\xa0€'
    >>> format_price(1234.5, "USD", "en-US")
    '$1,234.50'
    ```
"""

import re
from decimal import Decimal

from babel import Locale, UnknownLocaleError
from babel.numbers import format_currency

from utilkit.config import DEFAULT_CURRENCY, DEFAULT_LOCALE
from utilkit.errors import InvalidCurrencyError, InvalidLocaleError

_CURRENCY_CODE = re.compile(r"[A-Za-z]{3}")


def _resolve_locale(locale: str) -> Locale:
    try:
        return Locale.parse(locale.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as e:
        raise InvalidLocaleError(locale) from e


def format_price(
    amount: float | int | Decimal,
    currency: str | None = None,
    locale: str | None = None,
) -> str:
    """Format a number as a price in the given currency.

    Args:
        amount: The amount to format.
        currency: ISO 4217 code, case-insensitive. Defaults to ``EUR``.
        locale: Locale identifier, either ``fr_FR`` or ``fr-FR`` style.
            Defaults to ``fr_FR``.

    Returns:
        The formatted price, using the locale's symbol placement, decimal and
        grouping separators (which may be non-breaking spaces).

    Raises:
        InvalidCurrencyError: If ``currency`` is not a three-letter code.
        InvalidLocaleError: If ``locale`` is unknown.
    """
    currency = currency or DEFAULT_CURRENCY
    if not _CURRENCY_CODE.fullmatch(currency):
        raise InvalidCurrencyError(currency)
    resolved = _resolve_locale(locale or DEFAULT_LOCALE)
    return format_currency(amount, currency.upper(), locale=resolved)
