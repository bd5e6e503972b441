"""Error-level logging side-channel for Results.

Logs the Err value and hands the Result back unchanged. Requires logging to
be configured by the application; until then entries are dropped.

Example:
    >>> from errtraits import try_fn, log_err
    >>> from ipaddress import ip_address
    >>> result = log_err(try_fn(ip_address, "foo"), "parse address: ")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from .observability import default_logger_name, get_logger

if TYPE_CHECKING:
    from .result import Result

T = TypeVar("T")
E = TypeVar("E")


def err_logger(prefix: str = "") -> Callable[[object], None]:
    """Observer that logs ``f"{prefix}{err}"`` at error level.

    Emits under the logger name given to configure_logging (``errtraits`` by
    default).
    """
    def emit(err: object) -> None:
        get_logger(default_logger_name()).error(f"{prefix}{err}")
    return emit


def log_err(result: Result[T, E], prefix: str = "") -> Result[T, E]:
    """Function form of Result.log_err for use in map_type pipelines."""
    return result.pass_err_with(err_logger(prefix))
