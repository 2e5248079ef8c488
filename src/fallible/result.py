"""
Defines the ``Result`` Algebraic Data Type (ADT) and its combinators.

A ``Result`` is a sum type representing either a success (``Success``) carrying
a value or a failure (``Failure``) carrying an error. Both variants are frozen
dataclasses, so a result is immutable once built and every combinator returns
a new result (or an unwrapped value) instead of mutating its receiver.

The combinators fall into three groups:
- transformation (``map``, ``flat_map``, ``map_error``, ``flat_map_error``,
  ``bimap``, ``fanout``, ``recover``, ``recover_with``), which short-circuit on
  the first failure;
- accumulation (``apply``, ``or_``, ``and_``), which merge two failure errors
  through ``fallible.semigroup.combine``;
- exception interop (``from_throwing``, ``catching``, ``try_map``,
  ``unwrap_or_raise``), the only places where raised exceptions and stored
  failures cross over.

Lazily evaluated arguments (``fanout``, ``recover``, ``recover_with``,
``from_optional``) are zero-argument callables invoked at most once, and only
on the path that needs them.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NoReturn

from .convertible import ErrorConvertible, is_error_convertible
from .exceptions import ErrorTypeMismatchError, UnwrapFailedError
from .semigroup import combine

logger = logging.getLogger(__name__)


def _require_convertible(error_type: Any) -> type[ErrorConvertible]:
    if not is_error_convertible(error_type):
        raise TypeError(f"{error_type!r} does not implement ErrorConvertible.convert()")
    return error_type


def _not_a_result(other: Any) -> TypeError:
    return TypeError(f"Expected a fallible Result, got {type(other).__name__}")


@dataclass(frozen=True, slots=True)
class Success[V]:
    """Represents a successful outcome containing a value."""

    value: V

    def __str__(self) -> str:
        return str(self.value)

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def value_or_none(self) -> V:
        return self.value

    def error_or_none(self) -> None:
        return None

    def unwrap_or_raise(self) -> V:
        """Returns the value; a success never raises."""
        return self.value

    # --- Transformation ---

    def map[U](self, f: Callable[[V], U]) -> Success[U]:
        return Success(f(self.value))

    def flat_map[U, E](self, f: Callable[[V], Result[U, E]]) -> Result[U, E]:
        return f(self.value)

    def map_error(self, f: Callable[[Any], Any]) -> Success[V]:
        return self

    def flat_map_error(self, f: Callable[[Any], Any]) -> Success[V]:
        return self

    def bimap[U](self, on_success: Callable[[V], U], on_failure: Callable[[Any], Any]) -> Success[U]:
        return Success(on_success(self.value))

    def fanout[U, E](self, other: Callable[[], Result[U, E]]) -> Result[tuple[V, U], E]:
        """Pairs this value with the value of ``other()`` if that succeeds too."""
        return other().map(lambda right: (self.value, right))

    def recover(self, default: Callable[[], V]) -> V:
        return self.value

    def recover_with(self, default: Callable[[], Result[V, Any]]) -> Success[V]:
        return self

    def try_map[U, E: ErrorConvertible](
        self, f: Callable[[V], U], error_type: type[E]
    ) -> Result[U, E]:
        """Maps the value with a function that may raise.

        An exception raised by ``f`` is converted with ``error_type.convert``
        and returned as a failure.
        """
        converter = _require_convertible(error_type)
        try:
            return Success(f(self.value))
        except Exception as exc:
            logger.debug("try_map converting %s to %s", type(exc).__name__, converter.__name__)
            return Failure(converter.convert(exc))

    # --- Accumulation ---

    def apply[U, E](self, transform_result: Result[Callable[[V], U], E]) -> Result[U, E]:
        """Applies a wrapped function to this value."""
        match transform_result:
            case Success(fn):
                return Success(fn(self.value))
            case Failure():
                return transform_result
            case other:
                raise _not_a_result(other)

    def or_(self, alternative: Result[V, Any]) -> Success[V]:
        return self

    def and_[E](self, other: Result[V, E]) -> Result[V, E]:
        return other

    def __or__(self, alternative: Result[V, Any]) -> Success[V]:
        return self.or_(alternative)

    def __and__[E](self, other: Result[V, E]) -> Result[V, E]:
        return self.and_(other)


@dataclass(frozen=True, slots=True)
class Failure[E]:
    """Represents a failure outcome containing an error."""

    error: E

    def __str__(self) -> str:
        return str(self.error)

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def value_or_none(self) -> None:
        return None

    def error_or_none(self) -> E:
        return self.error

    def unwrap_or_raise(self) -> NoReturn:
        """Raises the stored error.

        Errors that are not exceptions are wrapped in ``UnwrapFailedError``.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapFailedError(self.error)

    # --- Transformation ---

    def map(self, f: Callable[[Any], Any]) -> Failure[E]:
        return self

    def flat_map(self, f: Callable[[Any], Any]) -> Failure[E]:
        return self

    def map_error[E2](self, f: Callable[[E], E2]) -> Failure[E2]:
        return Failure(f(self.error))

    def flat_map_error[V, E2](self, f: Callable[[E], Result[V, E2]]) -> Result[V, E2]:
        return f(self.error)

    def bimap[E2](self, on_success: Callable[[Any], Any], on_failure: Callable[[E], E2]) -> Failure[E2]:
        return Failure(on_failure(self.error))

    def fanout(self, other: Callable[[], Any]) -> Failure[E]:
        return self

    def recover[V](self, default: Callable[[], V]) -> V:
        return default()

    def recover_with[V, E2](self, default: Callable[[], Result[V, E2]]) -> Result[V, E2]:
        return default()

    def try_map(self, f: Callable[[Any], Any], error_type: type[ErrorConvertible]) -> Failure[E]:
        _require_convertible(error_type)
        return self

    # --- Accumulation ---

    def apply(self, transform_result: Result[Callable[[Any], Any], E]) -> Failure[E]:
        """Propagates the failure, merged with the transform's failure if both failed.

        The transform's error comes first: ``combine(transform_error, self.error)``.
        """
        match transform_result:
            case Success():
                return self
            case Failure(error):
                return Failure(combine(error, self.error))
            case other:
                raise _not_a_result(other)

    def or_[V](self, alternative: Result[V, E]) -> Result[V, E]:
        """Returns ``alternative`` if it succeeds, else both errors merged."""
        match alternative:
            case Success():
                return alternative
            case Failure(error):
                return Failure(combine(self.error, error))
            case other:
                raise _not_a_result(other)

    def and_(self, other: Result[Any, E]) -> Failure[E]:
        # The first failure wins; a second failure is not merged, unlike or_.
        return self

    def __or__[V](self, alternative: Result[V, E]) -> Result[V, E]:
        return self.or_(alternative)

    def __and__(self, other: Result[Any, E]) -> Failure[E]:
        return self.and_(other)


type Result[V, E] = Success[V] | Failure[E]


def success[V](value: V) -> Success[V]:
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    return Failure(error)


def from_optional[V, E](value: V | None, or_else: Callable[[], E]) -> Result[V, E]:
    """Wraps an optional value, calling ``or_else`` for the error only when it is ``None``."""
    if value is None:
        return Failure(or_else())
    return Success(value)


def _capture[E](exc: Exception, error_type: type[E]) -> E:
    if isinstance(exc, error_type):
        logger.debug("Captured %s as failure", type(exc).__name__)
        return exc
    if is_error_convertible(error_type):
        logger.debug("Converting %s to %s", type(exc).__name__, error_type.__name__)
        return error_type.convert(exc)
    logger.error("Cannot store %s as %s", type(exc).__name__, error_type.__name__)
    raise ErrorTypeMismatchError(error_type, exc) from exc


def from_throwing[V, E](f: Callable[[], V], error_type: type[E] = Exception) -> Result[V, E]:
    """Runs ``f`` and captures an exception it raises as a failure.

    The exception is stored as-is when it is an instance of ``error_type``,
    converted when ``error_type`` is ``ErrorConvertible``, and otherwise
    reported with ``ErrorTypeMismatchError`` instead of being stored under
    the wrong type.
    """
    try:
        return Success(f())
    except Exception as exc:
        return Failure(_capture(exc, error_type))


def catching[E](error_type: type[E] = Exception):
    """Decorator turning a raising function into one returning a ``Result``.

    Example:
        >>> @catching(ValueError)
        ... def parse(raw: str) -> int:
        ...     return int(raw)
        >>> parse("12")
        Success(value=12)
    """

    def decorator[**P, V](func: Callable[P, V]) -> Callable[P, Result[V, E]]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[V, E]:
            return from_throwing(lambda: func(*args, **kwargs), error_type)

        return wrapper

    return decorator


__all__ = [
    "Failure",
    "Result",
    "Success",
    "catching",
    "failure",
    "from_optional",
    "from_throwing",
    "success",
]
