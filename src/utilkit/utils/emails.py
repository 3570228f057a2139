"""Email address shape check.

This only checks the *shape* ``local@domain.tld``; it does not validate
against RFC 5322, resolve the domain, or check deliverability.
"""

import re

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def validate_email(email: object) -> bool:
    """Return True if ``email`` looks like an email address."""
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None
