"""Result type with fluent error-shaping combinators.

Discriminated union for success/failure. Besides the usual functor/monad
operations, carries small helpers that reshape the error side without inline
lambdas:
- merge_ok_err: collapse Result[T, T] into T
- map_err_by: replace the error with a freshly produced one
- map_err_to_str: render the error as text
- pass_err_with / log_err: observe the error, return the Result untouched

Performance notes:
- Uses __slots__ for minimal memory footprint
- Direct attribute access (no method calls) in hot paths
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from .log_err import err_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
N = TypeVar("N")

_OK = True
_ERR = False


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Examples:
        >>> Ok(42).map(lambda x: x * 2).unwrap()
        84
        >>> Err(ValueError("bad")).map_err_to_str()
        Err('bad')
        >>> Err("fail").map_err_by(lambda: "replaced").merge_ok_err()
        'replaced'
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        self._value = value
        self._is_ok = is_ok

    # ─── Type Checking ───────────────────────────────────────────────

    def is_ok(self) -> bool:
        """Check if Result is Ok variant."""
        return self._is_ok

    def is_err(self) -> bool:
        """Check if Result is Err variant."""
        return not self._is_ok

    # ─── Value Extraction ──────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value. Raises RuntimeError on Err."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"unwrap() on Err: {self._value}")

    def unwrap_err(self) -> E:
        """Extract Err value. Raises RuntimeError on Ok."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"unwrap_err() on Ok: {self._value}")

    def unwrap_or(self, default: T) -> T:
        """Extract Ok value or return default."""
        return self._value if self._is_ok else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Extract Ok value or compute from error via f."""
        return self._value if self._is_ok else f(self._value)  # type: ignore[return-value,arg-type]

    def expect(self, msg: str) -> T:
        """Extract Ok value with custom error message."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"{msg}: {self._value}")

    def merge_ok_err(self: Result[T, T]) -> T:
        """Return the carried value whichever variant holds it.

        Only meaningful when Ok and Err share a type:
            >>> Ok("done").merge_ok_err()
            'done'
            >>> Err("failed").merge_ok_err()
            'failed'
        """
        return self._value  # type: ignore[return-value]

    # ─── Functor Operations ────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to Ok value. Signature: Result[T,E] → (T→U) → Result[U,E]"""
        return Result(f(self._value), _OK) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type]

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to Err value. Signature: Result[T,E] → (E→F) → Result[T,F]"""
        return Result(f(self._value), _ERR) if not self._is_ok else Result(self._value, _OK)  # type: ignore[arg-type]

    def map_err_by(self, f: Callable[[], N]) -> Result[T, N]:
        """Replace the Err value with f(), ignoring the original error.

        f takes no arguments and is only called on Err. Saves writing
        ``.map_err(lambda _: MyError())``.
        """
        return Result(f(), _ERR) if not self._is_ok else Result(self._value, _OK)  # type: ignore[arg-type]

    def map_err_to_str(self) -> Result[T, str]:
        """Render the Err value with str(). Ok passes through."""
        return Result(str(self._value), _ERR) if not self._is_ok else Result(self._value, _OK)  # type: ignore[arg-type]

    # ─── Monad Operations ──────────────────────────────────────────────

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind (>>=). Chain operations that can fail."""
        return f(self._value) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type]

    and_then = flat_map

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """On Err, apply f to recover. On Ok, pass through."""
        return f(self._value) if not self._is_ok else Result(self._value, _OK)  # type: ignore[arg-type]

    # ─── Inspection ────────────────────────────────────────────────────

    def ok(self) -> T | None:
        """Ok value, or None if Err."""
        return self._value if self._is_ok else None  # type: ignore[return-value]

    def err(self) -> E | None:
        """Err value, or None if Ok."""
        return self._value if not self._is_ok else None  # type: ignore[return-value]

    def inspect(self, f: Callable[[T], None]) -> Result[T, E]:
        """Call f with Ok value for side effects, return self."""
        if self._is_ok:
            f(self._value)  # type: ignore[arg-type]
        return self

    def pass_err_with(self, f: Callable[[E], None]) -> Result[T, E]:
        """Call f with Err value for side effects, return self unchanged.

        f runs at most once and never on Ok. Meant for instrumentation that
        must not alter control flow:
            >>> seen = []
            >>> Err("boom").pass_err_with(seen.append).is_err(), seen
            (True, ['boom'])
        """
        if not self._is_ok:
            f(self._value)  # type: ignore[arg-type]
        return self

    def log_err(self, prefix: str = "") -> Result[T, E]:
        """Log the Err value at error level as ``f"{prefix}{err}"``, return self.

        Emits through the errtraits logger; nothing is written until logging
        has been configured (see errtraits.observability.configure_logging).
        """
        return self.pass_err_with(err_logger(prefix))

    # ─── Pattern Matching ────────────────────────────────────────────────

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive pattern match. Forces handling both Ok and Err."""
        return ok(self._value) if self._is_ok else err(self._value)  # type: ignore[arg-type]

    # ─── Dunder Methods ──────────────────────────────────────────────────

    __bool__ = lambda self: self._is_ok  # noqa: E731
    __hash__ = lambda self: hash((self._is_ok, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_ok == other._is_ok and self._value == other._value if isinstance(other, Result) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Ok, nothing if Err."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Ok variant (success)."""
    return Result(value, _OK)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Err variant (failure)."""
    return Result(error, _ERR)


def try_fn(
    fn: Callable[..., T],
    *args: object,
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
    **kwargs: object,
) -> Result[T, BaseException]:
    """Call fn, returning Ok(value) or Err(exc) for exceptions matching catch.

    Exceptions outside catch propagate.

    Example:
        >>> try_fn(int, "42")
        Ok(42)
        >>> try_fn(int, "foo").map_err_to_str()
        Err("invalid literal for int() with base 10: 'foo'")
    """
    try:
        return Result(fn(*args, **kwargs), _OK)
    except catch as e:
        return Result(e, _ERR)
