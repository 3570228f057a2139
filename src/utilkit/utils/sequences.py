"""Helpers over sequences and iterables."""

import random
from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any, TypeVar

T = TypeVar("T")

_MISSING = object()


def shuffle(items: Iterable[T], *, rng: random.Random | None = None) -> list[T]:
    """Return a shuffled copy of ``items``; the input is left untouched.

    Args:
        items: Elements to shuffle.
        rng: Random source. Defaults to the module-level ``random`` generator;
            pass a seeded ``random.Random`` for reproducible output.
    """
    shuffled = list(items)
    (rng or random).shuffle(shuffled)
    return shuffled


def _key_getter(key: str | Callable[[T], Hashable]) -> Callable[[T], Hashable]:
    if callable(key):
        return key

    def getter(item: Any) -> Hashable:
        if isinstance(item, Mapping):
            return item.get(key)
        value = getattr(item, key, _MISSING)
        return None if value is _MISSING else value

    return getter


def group_by(
    items: Iterable[T], key: str | Callable[[T], Hashable]
) -> dict[Hashable, list[T]]:
    """Group ``items`` by a key.

    Args:
        items: Elements to group.
        key: Either a callable returning the group key, or a name looked up
            as a mapping key (for mappings) or attribute (for other objects).
            Items lacking the name are grouped under ``None``.

    Returns:
        A dict from group key to the items in that group. Groups appear in the
        order their key was first seen and keep the input order of items.

    Examples:
        ```python
        >>> group_by([{"type": "A"}, {"type": "B"}, {"type": "A"}], "type")
        {'A': [{'type': 'A'}, {'type': 'A'}], 'B': [{'type': 'B'}]}
        ```
    """
    get_key = _key_getter(key)
    groups: dict[Hashable, list[T]] = {}
    for item in items:
        groups.setdefault(get_key(item), []).append(item)
    return groups
