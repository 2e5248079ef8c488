import pytest
from returns.result import Failure as ReturnsFailure
from returns.result import Success as ReturnsSuccess

from fallible import Failure, Success, from_returns


def test_apply_maps_with_wrapped_function() -> None:
    assert Success(3).apply(Success(lambda x: x + 1)) == Success(4)


def test_apply_propagates_either_single_failure() -> None:
    assert Success(3).apply(Failure(1)) == Failure(1)
    assert Failure(4).apply(Success(lambda x: x + 1)) == Failure(4)


def test_apply_merges_transform_error_first() -> None:
    assert Failure(4).apply(Failure(3)) == Failure(7)
    assert Failure("self").apply(Failure("transform-")) == Failure("transform-self")


def test_apply_accumulates_validation_errors() -> None:
    def validate_name(name: str):
        return Success(name) if name else Failure(["name is empty"])

    def validate_age(age: int):
        return Success(age) if age >= 0 else Failure(["age is negative"])

    make = Success(lambda name: lambda age: (name, age))

    assert validate_age(3).apply(validate_name("ada").apply(make)) == Success(("ada", 3))
    assert validate_age(-1).apply(validate_name("").apply(make)) == Failure(
        ["name is empty", "age is negative"]
    )


def test_or_prefers_first_success() -> None:
    assert Success(1).or_(Success(2)) == Success(1)
    assert Success(1).or_(Failure(9)) == Success(1)
    assert Failure(9).or_(Success(2)) == Success(2)


def test_or_merges_both_failures() -> None:
    assert Failure(2).or_(Failure(3)) == Failure(5)
    assert Failure("a").or_(Failure("b")) == Failure("ab")


def test_and_returns_right_when_left_succeeds() -> None:
    assert Success(1).and_(Success(2)) == Success(2)
    assert Success(1).and_(Failure(3)) == Failure(3)


def test_and_keeps_first_failure_without_merging() -> None:
    # Unlike or_ and apply, and_ does not merge two failures.
    assert Failure(2).and_(Failure(3)) == Failure(2)
    assert Failure(2).and_(Success(1)) == Failure(2)


def test_operators_alias_or_and_and() -> None:
    assert (Failure(2) | Failure(3)) == Failure(5)
    assert (Failure(2) & Failure(3)) == Failure(2)
    assert (Success(1) | Failure(3)) == Success(1)
    assert (Success(1) & Success(2)) == Success(2)


def test_apply_and_or_reject_foreign_containers() -> None:
    with pytest.raises(TypeError, match="Expected a fallible Result"):
        Success(1).apply(ReturnsSuccess(lambda x: x + 1))
    with pytest.raises(TypeError, match="Expected a fallible Result"):
        Failure(1).apply(ReturnsFailure(2))
    with pytest.raises(TypeError, match="Expected a fallible Result"):
        Failure(1).or_(ReturnsSuccess(2))


def test_returns_containers_work_after_conversion() -> None:
    assert Success(1).apply(from_returns(ReturnsSuccess(lambda x: x + 1))) == Success(2)
    assert Failure(1).or_(from_returns(ReturnsSuccess(2))) == Success(2)
