"""Functional primitives for maybe_baby.

This module provides the stateless, side-effect-free helpers the Maybe
container is built on, so they can also be used directly on plain data.
"""

from maybe_baby.functional.lookup import DELIMITER, get_item, is_index, split_path

__all__ = [
    "DELIMITER",
    "get_item",
    "is_index",
    "split_path",
]
