"""Bridge from plain Err values to ErrorTrace with stacked context.

Optional: nothing in errtraits.result or errtraits.wrap imports this module,
and every combinator works the same before or after a Result passes through
here.

Example:
    >>> from errtraits import try_fn
    >>> from errtraits.context import with_context
    >>> r = with_context(try_fn(int, "foo"), "parse port", location="config.toml")
    >>> print(r.unwrap_err().format())
    invalid literal for int() with base 10: 'foo'
    Context trace:
      - parse port at config.toml
"""

from __future__ import annotations

import traceback
from typing import TYPE_CHECKING, TypeVar

from .types import ErrorTrace, JsonValue, trace

if TYPE_CHECKING:
    from .result import Result

T = TypeVar("T")


def to_trace(err: object, *, code: str | None = None) -> ErrorTrace:
    """Convert any error payload into an ErrorTrace.

    ErrorTrace passes through (code applied if given). Exceptions keep their
    message, with the formatted traceback as details. Anything else is
    rendered with str().
    """
    match err:
        case ErrorTrace():
            return err.with_code(code) if code else err
        case BaseException():
            details = "".join(traceback.format_exception(err)) if err.__traceback__ else None
            return trace(str(err) or type(err).__name__, code=code, details=details)
        case _:
            return trace(str(err), code=code)


def with_context(
    result: Result[T, object],
    operation: str,
    location: str = "",
    **metadata: JsonValue,
) -> Result[T, ErrorTrace]:
    """On Err, convert the error to an ErrorTrace and push a context onto it. Ok passes through."""
    return result.map_err(lambda e: to_trace(e).with_operation(operation, location, **metadata))
