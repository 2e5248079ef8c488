"""
Error types that can be built from an arbitrary raised exception.

``try_map`` and ``from_throwing`` use this capability to normalise
heterogeneous exceptions into the single error type of a pipeline instead of
assuming the raised exception already has that type.
"""

from typing import Any, Protocol, Self, TypeGuard, runtime_checkable


@runtime_checkable
class ErrorConvertible(Protocol):
    """Protocol for error types constructible from any exception."""

    @classmethod
    def convert(cls, error: Exception) -> Self:
        """Build an instance of this error type from ``error``."""
        ...


def is_error_convertible(tp: Any) -> TypeGuard[type[ErrorConvertible]]:
    """Type guard for error types implementing ``convert``."""
    return isinstance(tp, type) and issubclass(tp, ErrorConvertible)


class ConvertibleError(Exception):
    """Exception base class with a ready-made ``convert``.

    Instances of the class are returned unchanged; any other exception is
    wrapped, keeping its message and chaining it as ``__cause__``.
    """

    @classmethod
    def convert(cls, error: Exception) -> Self:
        if isinstance(error, cls):
            return error
        converted = cls(str(error))
        converted.__cause__ = error
        return converted


__all__ = ["ConvertibleError", "ErrorConvertible", "is_error_convertible"]
