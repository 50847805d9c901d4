"""Safe keyed access over arbitrarily shaped data.

This module provides the duck-typed accessor behind ``Maybe.prop`` and the
path splitting behind ``Maybe.path``. Lookups never raise for data that is
merely missing or not indexable: they return ``None`` instead, which the
Maybe container treats as absence.

Supported shapes:
    - **Mappings** (``dict``, ``defaultdict``, ``OrderedDict``, any
      ``collections.abc.Mapping``): membership test followed by subscription,
      so reading never inserts a default into a ``defaultdict``.
    - **Subscriptables** (``list``, ``tuple``, ``str``, numpy arrays, pandas
      objects, user classes defining ``__getitem__``): plain ``value[key]``.
    - **Plain objects** (dataclasses, pydantic models, namespaces): string keys
      are read as attributes.

Index coercion:
    A string key made only of ASCII digits that misses is retried as an
    ``int``. Path segments are always strings, so ``"0"`` has to reach the
    first element of a list the same way ``0`` does.

Example:
    >>> get_item({"a": [10, 20]}, "a")
    [10, 20]
    >>> get_item([10, 20], "1")
    20
    >>> get_item([10, 20], 5) is None
    True
"""

import typing as tp
from collections.abc import Mapping

from maybe_baby.core.types import Delimiter, Key

__all__ = [
    "get_item",
    "split_path",
    "is_index",
    "DELIMITER",
]

# Path segment separator
DELIMITER = "."

# Errors raised by __getitem__ for keys that are missing or of the wrong kind
LOOKUP_ERRORS = (KeyError, IndexError, TypeError, ValueError)


def is_index(key: Key) -> bool:
    """Return True if ``key`` is a string holding a non-negative integer."""
    return isinstance(key, str) and key.isascii() and key.isdigit()


def _get_from_mapping(value: Mapping, key: Key) -> tp.Any:
    try:
        if key in value:
            return value[key]
    except TypeError:
        # Unhashable key
        return None

    if is_index(key) and int(key) in value:
        return value[int(key)]
    return None


def _get_from_subscriptable(value: tp.Any, key: Key) -> tp.Any:
    try:
        return value[key]
    except LOOKUP_ERRORS:
        pass

    if is_index(key):
        try:
            return value[int(key)]
        except LOOKUP_ERRORS:
            return None
    return None


def get_item(value: tp.Any, key: Key) -> tp.Any:
    """Read ``key`` from ``value`` without raising for missing data.

    Args:
        value: The container to read from. ``None`` is treated as absent.
        key: A mapping key, sequence index, slice or attribute name.

    Returns:
        The value stored under ``key``, or ``None`` when ``value`` or ``key``
        is ``None``, the key is missing, the index is out of range or
        ``value`` does not support this kind of access.
    """
    if value is None or key is None:
        return None

    if isinstance(value, Mapping):
        return _get_from_mapping(value, key)

    # Look on the type so classes with __class_getitem__ are not treated as containers
    if hasattr(type(value), "__getitem__"):
        return _get_from_subscriptable(value, key)

    if isinstance(key, str):
        return getattr(value, key, None)
    return None


def split_path(path: str, delimiter: Delimiter = DELIMITER) -> tp.List[str]:
    """Split a dotted path into its ordered segments.

    Segments are returned verbatim, including empty ones, e.g.
    ``split_path("a..b")`` gives ``["a", "", "b"]``.
    """
    return path.split(delimiter)
