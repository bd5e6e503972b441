"""Tests for the Result type and its error-shaping methods.

Validates:
- Functor laws
- Variant accessors and extraction
- merge_ok_err / map_err_by / map_err_to_str / pass_err_with
- try_fn exception capture
"""

from __future__ import annotations

from typing import Callable

import pytest

from errtraits import Err, Ok, Result, try_fn


def parse_int(s: str) -> Result[int, ValueError]:
    try:
        return Ok(int(s))
    except ValueError as e:
        return Err(e)


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """Functor law: fmap id = id"""
    result: Result[int, str] = Ok(42)
    assert result.map(lambda x: x) == result

    err_result: Result[int, str] = Err("fail")
    assert err_result.map(lambda x: x) == err_result


def test_functor_composition() -> None:
    """Functor law: fmap (f . g) = fmap f . fmap g"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2

    result: Result[int, str] = Ok(5)
    assert result.map(lambda x: f(g(x))) == result.map(g).map(f)


# ═════════════════════════════════════════════════════════════════════════════
# Operational Tests
# ═════════════════════════════════════════════════════════════════════════════


def test_ok_construction() -> None:
    result: Result[int, str] = Ok(42)

    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == 42
    assert result.ok() == 42
    assert result.err() is None


def test_err_construction() -> None:
    result: Result[int, str] = Err("failed")

    assert result.is_err()
    assert result.unwrap_err() == "failed"
    assert result.ok() is None
    assert result.err() == "failed"


def test_unwrap_wrong_variant_raises() -> None:
    with pytest.raises(RuntimeError, match="unwrap\\(\\) on Err"):
        Err("fail").unwrap()
    with pytest.raises(RuntimeError, match="unwrap_err\\(\\) on Ok"):
        Ok(1).unwrap_err()
    with pytest.raises(RuntimeError, match="config missing: fail"):
        Err("fail").expect("config missing")


def test_unwrap_or_variants() -> None:
    assert Ok(5).unwrap_or(10) == 5
    assert Err("fail").unwrap_or(10) == 10
    assert Err("fail").unwrap_or_else(len) == 4


def test_map_skips_err() -> None:
    mapped = Err("fail").map(lambda x: x * 2)
    assert mapped == Err("fail")


def test_map_err_on_both_variants() -> None:
    assert Err("fail").map_err(lambda e: f"Error: {e}") == Err("Error: fail")
    assert Ok(42).map_err(lambda e: f"Error: {e}") == Ok(42)


def test_flat_map_and_or_else() -> None:
    assert Ok("42").flat_map(parse_int) == Ok(42)
    assert Ok(5).and_then(lambda x: Err("failed")) == Err("failed")
    assert Err("fail").or_else(lambda _: Ok(42)) == Ok(42)
    assert Ok(5).or_else(lambda _: Ok(42)) == Ok(5)


def test_match() -> None:
    assert Ok(42).match(ok=lambda x: f"success: {x}", err=lambda e: f"failed: {e}") == "success: 42"
    assert Err("x").match(ok=lambda x: f"success: {x}", err=lambda e: f"failed: {e}") == "failed: x"


def test_structural_pattern_matching() -> None:
    match Ok(3):
        case Result(value):
            assert value == 3


def test_dunders() -> None:
    assert bool(Ok(0)) is True
    assert bool(Err("fail")) is False
    assert Ok(42) == Ok(42)
    assert Ok(42) != Err(42)
    assert hash(Ok(1)) == hash(Ok(1))
    assert repr(Err("x")) == "Err('x')"
    assert list(Ok(42)) == [42]
    assert list(Err("fail")) == []


# ═════════════════════════════════════════════════════════════════════════════
# Collapsing
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("value", ["foo", 0, None, [1, 2]])
def test_merge_ok_err_returns_payload_of_either_variant(value: object) -> None:
    assert Ok(value).merge_ok_err() == value
    assert Err(value).merge_ok_err() == value


# ═════════════════════════════════════════════════════════════════════════════
# Error Transforms
# ═════════════════════════════════════════════════════════════════════════════


def test_map_err_by_replaces_error() -> None:
    class MyError(Exception):
        pass

    mapped = parse_int("nope").map_err_by(MyError)

    assert mapped.is_err()
    assert isinstance(mapped.unwrap_err(), MyError)


def test_map_err_by_never_calls_producer_on_ok() -> None:
    calls = 0

    def produce() -> str:
        nonlocal calls
        calls += 1
        return "replaced"

    assert Ok(7).map_err_by(produce) == Ok(7)
    assert calls == 0

    assert Err("orig").map_err_by(produce) == Err("replaced")
    assert calls == 1


def test_map_err_to_str() -> None:
    err = ValueError("bad input")

    assert Err(err).map_err_to_str() == Err("bad input")
    assert Ok(3).map_err_to_str() == Ok(3)


def test_parse_and_collapse_to_text() -> None:
    """Both branches end up as a plain string."""
    assert parse_int("42").map_err_to_str().map(str).merge_ok_err() == "42"
    assert parse_int("foo").map_err_to_str().map(str).merge_ok_err() == (
        "invalid literal for int() with base 10: 'foo'"
    )


# ═════════════════════════════════════════════════════════════════════════════
# Observation
# ═════════════════════════════════════════════════════════════════════════════


def test_pass_err_with_calls_observer_once_on_err() -> None:
    seen: list[str] = []
    result: Result[int, str] = Err("fail")

    returned = result.pass_err_with(seen.append)

    assert returned is result
    assert seen == ["fail"]


def test_pass_err_with_skips_observer_on_ok() -> None:
    seen: list[str] = []
    result: Result[int, str] = Ok(1)

    assert result.pass_err_with(seen.append) is result
    assert seen == []


def test_inspect_sees_ok_only() -> None:
    seen: list[int] = []
    Ok(1).inspect(seen.append)
    Err(2).inspect(seen.append)
    assert seen == [1]


# ═════════════════════════════════════════════════════════════════════════════
# try_fn
# ═════════════════════════════════════════════════════════════════════════════


def test_try_fn_ok() -> None:
    assert try_fn(int, "42") == Ok(42)
    assert try_fn(int, "ff", base=16) == Ok(255)


def test_try_fn_captures_exception() -> None:
    result = try_fn(int, "foo")

    assert result.is_err()
    assert isinstance(result.unwrap_err(), ValueError)


def test_try_fn_propagates_uncaught() -> None:
    with pytest.raises(KeyError):
        try_fn({}.__getitem__, "k", catch=ValueError)


# ═════════════════════════════════════════════════════════════════════════════
# Railway-Oriented Programming Patterns
# ═════════════════════════════════════════════════════════════════════════════


def test_railway_error_path() -> None:
    def validate_positive(n: int) -> Result[int, str]:
        return Ok(n) if n > 0 else Err("must be positive")

    result = (
        Ok("-5")
        .flat_map(parse_int)
        .map_err_to_str()
        .flat_map(validate_positive)
        .map(lambda n: n * 2)  # Skipped
    )

    assert result == Err("must be positive")
