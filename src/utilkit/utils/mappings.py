"""Emptiness check for mappings, collections and plain objects."""

from collections.abc import Sized
from typing import Any


def _slot_names(obj: Any) -> list[str]:
    names: list[str] = []
    for cls in type(obj).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in ("__dict__", "__weakref__"))
    return names


def is_empty_object(obj: Any) -> bool:
    """Return True if ``obj`` carries no own members.

    - ``None`` is empty.
    - A mapping is empty when it has no keys, and any other sized collection
      (string, list, tuple, set) when its length is zero.
    - Any other object is empty when it has no instance attributes, counting
      both ``__dict__`` entries and assigned ``__slots__``. Class attributes
      do not count.
    """
    if obj is None:
        return True
    if isinstance(obj, Sized):
        return len(obj) == 0
    if getattr(obj, "__dict__", None):
        return False
    return not any(hasattr(obj, name) for name in _slot_names(obj))
