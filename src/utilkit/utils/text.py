"""String shortening helpers."""

DEFAULT_SUFFIX = "..."


def truncate_text(text: str, max_length: int, suffix: str = DEFAULT_SUFFIX) -> str:
    """Shorten ``text`` to at most ``max_length`` characters, suffix included.

    Text that already fits is returned unchanged. When ``max_length`` is
    shorter than the suffix itself, the suffix alone is returned.

    Examples:
        ```python
        >>> truncate_text("Un très long texte", 10)
        'Un très...'
        ```
    """
    if len(text) <= max_length:
        return text
    keep = max(0, max_length - len(suffix))
    return text[:keep] + suffix
