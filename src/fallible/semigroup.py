"""
Semigroups: types with an associative binary ``combine`` operation.

Error-accumulating combinators (``apply``, ``or_``, ``and_``) use ``combine`` to
merge two failure errors into one. A type takes part either by implementing
the ``Semigroup`` protocol itself or by having an instance registered here,
which is how built-in types we cannot extend are covered.
"""

from collections.abc import Callable
from functools import singledispatch
from typing import Any, Protocol, Self, runtime_checkable

from .config import ACCUMULATED_ERRORS_MESSAGE
from .exceptions import NotASemigroupError


@runtime_checkable
class Semigroup(Protocol):
    """Protocol for values that can be merged associatively.

    Implementations must satisfy
    ``a.combine(b).combine(c) == a.combine(b.combine(c))``.
    """

    def combine(self, other: Self) -> Self:
        """Merge ``other`` into a new value of the same type."""
        ...


@singledispatch
def _combine_instance(left: Any, right: Any) -> Any:
    raise NotASemigroupError(left)


@_combine_instance.register
def _(left: int, right: int) -> int:
    return left + right


@_combine_instance.register
def _(left: bool, right: bool) -> bool:
    return left or right


@_combine_instance.register(str)
@_combine_instance.register(bytes)
@_combine_instance.register(list)
@_combine_instance.register(tuple)
def _(left, right):
    return left + right


@_combine_instance.register(set)
@_combine_instance.register(frozenset)
@_combine_instance.register(dict)
def _(left, right):
    return left | right


class _MergedExceptionGroup(ExceptionGroup):
    """Group built by merging ``Exception`` errors."""


class _MergedBaseExceptionGroup(BaseExceptionGroup):
    """Group built by merging errors that include a bare ``BaseException``."""


def _flatten(error: BaseException) -> list[BaseException]:
    # Only unpack groups built by a previous merge, not user-raised groups.
    if isinstance(error, _MergedExceptionGroup | _MergedBaseExceptionGroup):
        return list(error.exceptions)
    return [error]


@_combine_instance.register
def _(left: BaseException, right: BaseException) -> BaseExceptionGroup:
    errors = [*_flatten(left), *_flatten(right)]
    if all(isinstance(error, Exception) for error in errors):
        return _MergedExceptionGroup(ACCUMULATED_ERRORS_MESSAGE, errors)
    return _MergedBaseExceptionGroup(ACCUMULATED_ERRORS_MESSAGE, errors)


def combine[S](left: S, right: S) -> S:
    """Merge two values of the same semigroup, ``left`` first."""
    if isinstance(left, Semigroup):
        return left.combine(right)
    return _combine_instance(left, right)


def register_semigroup[S](cls: type[S], func: Callable[[S, S], S]) -> None:
    """Register ``func`` as the combine operation for ``cls`` and its subclasses."""
    _combine_instance.register(cls, func)


__all__ = ["Semigroup", "combine", "register_semigroup"]
