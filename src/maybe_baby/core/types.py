"""Reusable type definitions for the maybe_baby package.

This module provides type aliases and constrained types shared by the Maybe
container, the lookup helpers and the settings model.

Type Aliases:
    Thunk: A zero-argument callable evaluated lazily by ``Maybe.of``.
    Transform: A unary callable applied by ``Maybe.map`` and ``Maybe.chain``.
    Key: Anything usable as a mapping key, sequence index or attribute name.
    Delimiter: A non-empty string used to split dotted paths.
    LogLevel: A stdlib logging level name, normalised to upper case.
"""

import logging
from typing import Annotated, Any, Callable, TypeVar

import annotated_types as at
from pydantic.functional_validators import BeforeValidator

__all__ = [
    "T",
    "U",
    "Thunk",
    "Transform",
    "Key",
    "Delimiter",
    "LogLevel",
]

T = TypeVar("T")
U = TypeVar("U")

Thunk = Callable[[], T]
Transform = Callable[[T], U]

# Hashable keys, integer indices, slices or attribute names
Key = Any

# A path delimiter must contain at least one character
Delimiter = Annotated[str, at.MinLen(1)]


def validate_log_level(level: Any) -> str:
    """Validator to normalise and check a logging level name.

    Args:
        level (Any): The raw level, usually read from the environment.
    Returns:
        str: The upper-cased level name.
    Raises:
        ValueError: If the name is not a stdlib logging level.
    """
    name = str(level).strip().upper()
    if name not in logging.getLevelNamesMapping():
        raise ValueError(
            f"Unknown log level '{level}'. Expected one of "
            f"{sorted(logging.getLevelNamesMapping())}."
        )
    return name


LogLevel = Annotated[str, BeforeValidator(validate_log_level)]
