"""Core Maybe container, settings and shared types."""

from maybe_baby.core.config import Settings, settings
from maybe_baby.core.maybe import InvalidArgumentError, Maybe

__all__ = [
    "Maybe",
    "InvalidArgumentError",
    "Settings",
    "settings",
]
