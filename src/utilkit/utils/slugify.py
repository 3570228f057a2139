"""URL slug generation."""

import re
import unicodedata

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def generate_slug(text: str) -> str:
    """Convert ``text`` to a lowercase, hyphen-separated ASCII slug.

    Accents are stripped by decomposing to NFD and dropping combining marks.
    Any remaining character outside ``[a-z0-9]``, whitespace and ``-`` is
    removed (so apostrophes join words), whitespace runs become a single
    hyphen, and leading/trailing hyphens are stripped.

    Examples:
        ```python
        >>> generate_slug("Été à Paris")
        'ete-a-paris'
        >>> generate_slug("Voici un Titre d'Article!")
        'voici-un-titre-darticle'
        ```
    """
    decomposed = unicodedata.normalize("NFD", text.lower())
    ascii_only = "".join(c for c in decomposed if not unicodedata.combining(c))
    slug = _DISALLOWED.sub("", ascii_only)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")
