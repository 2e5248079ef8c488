"""
Conversions between ``fallible`` results and ``returns.result`` containers.
"""

from returns import result as returns_result

from .result import Failure, Result, Success


def from_returns[V, E](container: returns_result.Result[V, E]) -> Result[V, E]:
    """Convert a ``returns`` Success/Failure into a fallible result."""
    if isinstance(container, returns_result.Success):
        return Success(container.unwrap())
    if isinstance(container, returns_result.Failure):
        return Failure(container.failure())
    raise TypeError(f"Expected a returns Result, got {type(container).__name__}")


def to_returns[V, E](result: Result[V, E]) -> returns_result.Result[V, E]:
    """Convert a fallible result into a ``returns`` Success/Failure."""
    match result:
        case Success(value):
            return returns_result.Success(value)
        case Failure(error):
            return returns_result.Failure(error)
        case other:
            raise TypeError(f"Expected a fallible Result, got {type(other).__name__}")


__all__ = ["from_returns", "to_returns"]
