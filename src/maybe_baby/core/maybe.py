"""The Maybe container.

A ``Maybe`` wraps a single value that may be absent (``None``). It lets
callers walk deeply nested data with ``prop``, ``props`` and ``path``, and
compose transformations with ``map`` and ``chain``, without checking for
``None`` at every step. Once a step yields ``None`` every later step
short-circuits and the container stays empty.

Two construction modes are supported by ``Maybe.of``:
    - **Value**: ``Maybe.of(data)`` wraps ``data`` as-is.
    - **Thunk**: ``Maybe.of(lambda: data["a"]["b"][0])`` evaluates the
      accessor and turns any exception it raises into an empty Maybe.

Example:
    >>> person = {"name": {"first": "Ada"}, "emails": []}
    >>> Maybe.of(person).path("name.first").join()
    'Ada'
    >>> Maybe.of(person).props("emails", 0).or_else("n/a").join()
    'n/a'
    >>> Maybe.of(lambda: person["address"]["city"]).is_nothing()
    True
"""

import inspect
import typing as tp

from maybe_baby.core.types import Delimiter, Key, T, Thunk, Transform, U
from maybe_baby.functional.lookup import DELIMITER, get_item, split_path
from maybe_baby.logger.logger import logger

__all__ = [
    "Maybe",
    "InvalidArgumentError",
]


class InvalidArgumentError(TypeError):
    """Raised when ``map`` or ``chain`` receive a non-callable transform."""


class Maybe(tp.Generic[T]):
    """Immutable container for an optional value.

    The container is *nothing* when the wrapped value is ``None`` and *just*
    otherwise. Falsy values such as ``0``, ``''``, ``False`` or ``[]`` are
    present values.

    Attributes are read-only: assigning or deleting an attribute raises
    ``AttributeError``.
    """

    __slots__ = ("_value",)

    def __init__(self, value: tp.Optional[T] = None) -> None:
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: tp.Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # --- Construction ---
    @classmethod
    def of(cls, value: tp.Union[T, Thunk[T], None] = None) -> "Maybe[T]":
        """Create a Maybe from a value or from a zero-argument accessor.

        Callables (other than classes) are invoked with no arguments and the
        result is wrapped. Any ``Exception`` they raise produces an empty
        Maybe, which makes unguarded chains such as
        ``lambda: data["a"]["b"].c`` safe to evaluate.

        Args:
            value: The value to wrap, or a thunk producing it.

        Returns:
            A Maybe wrapping the value, the thunk's result, or ``None`` if the
            thunk raised.
        """
        if callable(value) and not inspect.isclass(value):
            try:
                return cls(value())
            except Exception as exc:
                logger.debug(
                    f"Accessor raised {type(exc).__name__}: {exc}; wrapping None"
                )
                return cls(None)
        return cls(value)

    @classmethod
    def just(cls, value: T) -> "Maybe[T]":
        """Wrap ``value`` verbatim, without invoking it if it is callable."""
        return cls(value)

    @classmethod
    def nothing(cls) -> "Maybe[tp.Any]":
        return cls(None)

    # --- Queries ---
    def is_nothing(self) -> bool:
        return self._value is None

    def is_just(self) -> bool:
        return not self.is_nothing()

    def join(self) -> tp.Optional[T]:
        """Return the wrapped value, ``None`` when nothing."""
        return self._value

    def or_else(self, default: tp.Any = None) -> "Maybe[tp.Any]":
        """Fall back to ``default`` when nothing; present values are kept.

        ``default`` is wrapped as-is, a callable default is not invoked.
        """
        if self.is_nothing():
            return type(self)(default)
        return self

    # --- Transformations ---
    def map(self, transform: Transform[T, U]) -> "Maybe[U]":
        """Apply ``transform`` to the wrapped value.

        Args:
            transform: Unary function of the wrapped value.

        Returns:
            A new Maybe wrapping the result, or nothing without calling
            ``transform`` when this Maybe is nothing.

        Raises:
            InvalidArgumentError: If ``transform`` is not callable.
        """
        if not callable(transform):
            raise InvalidArgumentError("transform must be a function")
        if self.is_nothing():
            return type(self).nothing()
        return type(self)(transform(self._value))

    def chain(self, transform: Transform[T, "Maybe[U]"]) -> "Maybe[U]":
        """Apply a Maybe-returning ``transform`` and flatten the result.

        Equivalent to ``self.map(transform).join()``. A plain value returned by
        ``transform`` is wrapped, so the result is always a Maybe.

        Raises:
            InvalidArgumentError: If ``transform`` is not callable.
        """
        if not callable(transform):
            raise InvalidArgumentError("chain must be a function")

        result = self.map(transform).join()
        if isinstance(result, Maybe):
            return result
        return type(self)(result)

    # --- Navigation ---
    def prop(self, key: Key = None) -> "Maybe[tp.Any]":
        """Read a single key, index or attribute from the wrapped value.

        Missing keys, out-of-range indices and values that cannot be indexed
        give nothing instead of raising.
        """
        if key is None:
            return type(self).nothing()
        return self.map(lambda value: get_item(value, key))

    def props(self, *keys: Key) -> "Maybe[tp.Any]":
        """Read a sequence of keys left to right.

        Example:
            >>> Maybe.of({"a": [{"b": 1}]}).props("a", 0, "b").join()
            1
        """
        if not keys:
            return type(self).nothing()

        current = self
        for key in keys:
            current = current.prop(key)
        return current

    def path(
        self, path: tp.Optional[str] = None, delimiter: Delimiter = DELIMITER
    ) -> "Maybe[tp.Any]":
        """Read a delimited path such as ``"a.b.0"``.

        Args:
            path: Path string; segments are used verbatim as keys.
            delimiter: Segment separator, ``"."`` unless given. An empty
                delimiter falls back to ``"."``.

        Returns:
            The Maybe found at the end of the path. ``None``, empty and
            non-string paths give nothing.
        """
        if not isinstance(path, str) or not path:
            logger.debug(f"Rejected path argument {path!r}; wrapping None")
            return type(self).nothing()

        return self.props(*split_path(path, delimiter or DELIMITER))

    # camelCase aliases
    isNothing = is_nothing
    isJust = is_just
    orElse = or_else

    # --- Python protocol ---
    def __repr__(self) -> str:
        if self.is_nothing():
            return "Nothing"
        return f"Just({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        if self._value is other._value:
            return True
        try:
            return bool(self._value == other._value)
        except ValueError:
            # Element-wise comparisons (numpy arrays) have no single truth value
            return False

    def __hash__(self) -> int:
        return hash((Maybe, self._value))
