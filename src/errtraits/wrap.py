"""Combinators over arbitrary values.

Python cannot attach methods to every type, so these take the value as the
first argument. They compose with Result.map and with each other via
map_type:

    >>> map_type(5, lambda n: to_err_if(n, lambda x: x > 3, "too big"))
    Err('too big')
"""

from __future__ import annotations

from typing import Any, Callable, Literal, TypeVar

from .result import Err, Ok, Result

T = TypeVar("T")
E = TypeVar("E")
M = TypeVar("M")
N = TypeVar("N")

Variant = Literal["ok", "err"]

_WRAPPERS: dict[str, Callable[[Any], Result[Any, Any]]] = {"ok": Ok, "err": Err}


# ─── Wrapping ────────────────────────────────────────────────────────────────


def wrap_in(value: Any, variant: Variant) -> Result[Any, Any]:
    """Wrap value as the payload of the named variant ("ok" or "err")."""
    try:
        wrapper = _WRAPPERS[variant]
    except KeyError:
        raise ValueError(f"Unknown variant: {variant!r}. Use 'ok' or 'err'") from None
    return wrapper(value)


def in_ok(value: T) -> Result[T, Any]:
    """Wrap value in Ok. Reads left-to-right at the end of an expression."""
    return Ok(value)


def in_err(value: E) -> Result[Any, E]:
    """Wrap value in Err."""
    return Err(value)


# ─── Transforming ────────────────────────────────────────────────────────────


def map_type(value: M, f: Callable[[M], N]) -> N:
    """Pipe value into f.

    >>> from datetime import timedelta
    >>> map_type(5, lambda m: timedelta(minutes=m))
    datetime.timedelta(seconds=300)
    """
    return f(value)


def to_empty(value: object) -> None:
    """Discard value. Terminal step for side-effect-only pipelines."""
    return None


# ─── Conditional ─────────────────────────────────────────────────────────────


def to_none_if(value: T, predicate: Callable[[T], bool]) -> T | None:
    """None if predicate(value) holds, otherwise value.

    A value that is itself None comes back as None either way.
    """
    return None if predicate(value) else value


def to_err_if(value: T, predicate: Callable[[T], bool], err: E) -> Result[T, E]:
    """Err(err) if predicate(value) holds, otherwise Ok(value).

    err is a plain argument: whatever expression builds it has already run by
    the time the predicate is checked. Use map_err_by on the result for a
    lazily built error.

    >>> to_err_if(5, lambda n: n > 3, "too big")
    Err('too big')
    >>> to_err_if(2, lambda n: n > 3, "too big")
    Ok(2)
    """
    return Err(err) if predicate(value) else Ok(value)
