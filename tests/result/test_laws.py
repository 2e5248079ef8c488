from hypothesis import given
from hypothesis import strategies as st

from fallible import Failure, Success

results = st.one_of(st.integers().map(Success), st.text().map(Failure))


def f(x: int):
    return Success(x * 2) if x % 3 else Failure(f"divisible: {x}")


def g(x: int):
    return Success(x - 1) if x >= 0 else Failure("negative")


@given(st.integers())
def test_left_identity(v):
    assert Success(v).flat_map(f) == f(v)


@given(results)
def test_right_identity(r):
    assert r.flat_map(Success) == r


@given(results)
def test_flat_map_associativity(r):
    assert r.flat_map(f).flat_map(g) == r.flat_map(lambda x: f(x).flat_map(g))


@given(results)
def test_functor_identity(r):
    assert r.map(lambda x: x) == r


@given(results)
def test_functor_composition(r):
    def inc(x):
        return x + 1

    def dbl(x):
        return x * 2

    assert r.map(inc).map(dbl) == r.map(lambda x: dbl(inc(x)))


@given(st.text())
def test_failure_map_passes_error_unchanged(e):
    assert Failure(e).map(lambda x: x + 1) == Failure(e)
