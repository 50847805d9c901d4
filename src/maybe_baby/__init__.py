"""maybe_baby: a Maybe container for safe access to nested data."""

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from maybe_baby.core.maybe import InvalidArgumentError, Maybe

try:
    __version__ = _pkg_version("maybe-baby")
except PackageNotFoundError:  # pragma: no cover - only hit without package metadata
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "Maybe",
    "InvalidArgumentError",
]
