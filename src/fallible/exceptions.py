"""
Exceptions raised by fallible itself.

Combinators never raise on their own; these only surface at the boundaries
where a stored failure meets raising code, or where a capability is missing.
"""

from typing import Any


class FallibleError(Exception):
    """Base class for every error raised by the library."""


class UnwrapFailedError(FallibleError):
    """Raised when unwrapping a failure whose error is not an exception."""

    def __init__(self, error: Any):
        super().__init__(f"Called unwrap_or_raise() on a failure: {error!r}")
        self.error = error


class ErrorTypeMismatchError(FallibleError, TypeError):
    """A captured exception is neither an instance of nor convertible to the declared error type."""

    def __init__(self, expected: type, actual: BaseException):
        super().__init__(
            f"Expected {expected.__name__}, captured {type(actual).__name__}: {actual}"
        )
        self.expected = expected
        self.actual = actual


class NotASemigroupError(FallibleError, TypeError):
    """No combine operation is known for a type."""

    def __init__(self, value: Any):
        super().__init__(f"{type(value).__name__} is not a semigroup")
        self.value = value


__all__ = [
    "ErrorTypeMismatchError",
    "FallibleError",
    "NotASemigroupError",
    "UnwrapFailedError",
]
