"""Small combinators for Result and optional values.

Reshape, unwrap, tag and observe outcomes without inline lambdas:

    >>> from errtraits import Ok, Err, try_fn, to_err_if
    >>>
    >>> try_fn(int, "42").map_err_to_str().map(str).merge_ok_err()
    '42'
    >>> try_fn(int, "foo").map_err_to_str().map(str).merge_ok_err()
    "invalid literal for int() with base 10: 'foo'"
    >>> to_err_if(5, lambda n: n > 3, "too big")
    Err('too big')
    >>> Err("timeout").log_err("fetch: ").map_err_by(lambda: "unavailable")
    Err('unavailable')
"""

from .log_err import err_logger, log_err
from .result import Err, Ok, Result, try_fn
from .wrap import in_err, in_ok, map_type, to_empty, to_err_if, to_none_if, wrap_in

__all__ = [
    # Result type
    "Result", "Ok", "Err", "try_fn",
    # Any-value combinators
    "wrap_in", "in_ok", "in_err", "map_type", "to_empty", "to_none_if", "to_err_if",
    # Logging side-channel
    "log_err", "err_logger",
]
