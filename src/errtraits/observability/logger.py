"""Structured logging with bound context.

Process-wide facility used by Result.log_err. Nothing is rendered until the
application calls configure_logging(); before that every entry is dropped.

Quick Start::

    from errtraits.observability import get_logger, configure_logging

    configure_logging(format="console")  # or "json", "stdlib", "none"
    log = get_logger("billing")
    log.error("charge failed", invoice=17)
    # stderr: 10:30:45.120 billing [error] charge failed invoice=17
"""

from __future__ import annotations

import logging
import sys
import time
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol, TextIO, runtime_checkable

import orjson

from ..types import JsonDict, JsonValue

if TYPE_CHECKING:
    from types import TracebackType

# Context var for scoped context (persists across async calls)
_log_context: ContextVar[JsonDict] = ContextVar("log_context", default={})


# ─────────────────────────────────────────────────────────────────────────────
# Core Logger
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class BoundLogger:
    """Structured logger with bound context. Immutable - bind() returns a new logger with merged context.

    Example::

        log = BoundLogger(context={"service": "api"})
        log.error("request failed", path="/users")
        # stderr: 10:30:45.120 [error] request failed path="/users" service="api"
    """

    context: JsonDict = field(default_factory=dict)
    name: str | None = None

    def bind(self, **kw: JsonValue) -> BoundLogger:
        """Create new logger with additional bound context."""
        return BoundLogger(context={**self.context, **kw}, name=self.name)

    def unbind(self, *keys: str) -> BoundLogger:
        """Create new logger without specified keys."""
        return BoundLogger(context={k: v for k, v in self.context.items() if k not in keys}, name=self.name)

    def _log(self, level: int, event: str, **kw: JsonValue) -> None:
        state = _state
        if state.renderer is None or level < state.level:
            return
        # Merge contexts: scoped -> bound -> call-site
        merged = {**_log_context.get(), **self.context, **kw}
        state.renderer.render(LogEntry(time.time(), _level_name(level), event, merged, self.name))

    def debug(self, event: str, **kw: JsonValue) -> None: self._log(logging.DEBUG, event, **kw)
    def info(self, event: str, **kw: JsonValue) -> None: self._log(logging.INFO, event, **kw)
    def warning(self, event: str, **kw: JsonValue) -> None: self._log(logging.WARNING, event, **kw)
    def error(self, event: str, **kw: JsonValue) -> None: self._log(logging.ERROR, event, **kw)

    def exception(self, event: str, **kw: JsonValue) -> None:
        """Log error with exception info."""
        import traceback
        self._log(logging.ERROR, event, exc_info=traceback.format_exc(), **kw)


@dataclass(slots=True)
class LogEntry:
    """Immutable log entry with all context."""

    timestamp: float
    level: str
    event: str
    context: JsonDict
    logger: str | None = None

    @property
    def ts_iso(self) -> str:
        """ISO formatted timestamp."""
        return datetime.fromtimestamp(self.timestamp, tz=UTC).isoformat()

    @property
    def ts_human(self) -> str:
        """Human-readable timestamp (HH:MM:SS.mmm)."""
        return datetime.fromtimestamp(self.timestamp, tz=UTC).strftime("%H:%M:%S.%f")[:-3]


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class LogRenderer(Protocol):
    """Protocol for log output renderers."""

    def render(self, entry: LogEntry) -> None: ...


@dataclass(slots=True)
class ConsoleRenderer:
    """Human-readable colored console output. Format: timestamp [level] event key=value ..."""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    colors: bool | None = None  # None = auto-detect
    show_timestamp: bool = True

    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = getattr(self.output, "isatty", lambda: False)()

    def render(self, entry: LogEntry) -> None:
        c = _COLORS if self.colors else _NO_COLORS
        parts = [f"{c['dim']}{entry.ts_human}{c['reset']}"] if self.show_timestamp else []
        if entry.logger:
            parts.append(f"{c['dim']}{entry.logger}{c['reset']}")
        parts += [f"{_LEVEL_COLORS.get(entry.level, c['dim']) if self.colors else ''}[{entry.level}]{c['reset']}",
                  f"{c['bold']}{entry.event}{c['reset']}"]
        parts += [f"{c['cyan']}{k}{c['reset']}={_format_value(v, c)}"
                  for k, v in sorted(entry.context.items()) if k != "exc_info"]
        print(" ".join(parts), file=self.output)
        if "exc_info" in entry.context:
            print(f"{c['red']}{entry.context['exc_info']}{c['reset']}", file=self.output)


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines output for log aggregation."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        head: JsonDict = {"timestamp": entry.ts_iso, "level": entry.level, "event": entry.event}
        if entry.logger:
            head["logger"] = entry.logger
        print(orjson.dumps({**head, **entry.context}, option=orjson.OPT_NON_STR_KEYS, default=str).decode(),
              file=self.output)


@dataclass(slots=True)
class StdlibRenderer:
    """Forward entries to the standard logging module under the entry's logger name.

    Bound context travels as ``extra={"context": {...}}`` on the LogRecord.
    """

    default_name: str = "errtraits"

    def render(self, entry: LogEntry) -> None:
        target = logging.getLogger(entry.logger or self.default_name)
        target.log(logging.getLevelName(entry.level.upper()), entry.event, extra={"context": entry.context})


@dataclass(slots=True)
class NoOpRenderer:
    """Silent renderer for testing."""

    def render(self, entry: LogEntry) -> None:
        pass


# ─────────────────────────────────────────────────────────────────────────────
# Global Configuration
# ─────────────────────────────────────────────────────────────────────────────

DEFAULT_LOGGER_NAME = "errtraits"


@dataclass(frozen=True, slots=True)
class _LoggingState:
    """Snapshot of the process-wide configuration. Replaced whole, never mutated."""

    renderer: LogRenderer | None = None
    level: int = logging.INFO
    logger_name: str = DEFAULT_LOGGER_NAME


_state = _LoggingState()


def configure_logging(
    format: str = "console",  # noqa: A002 - shadows builtin but matches stdlib
    level: str = "INFO",
    *,
    output: TextIO | None = None,
    colors: bool | None = None,
    logger_name: str = DEFAULT_LOGGER_NAME,
) -> LogRenderer:
    """Configure process-wide structured logging. Format: "console", "json", "stdlib", "none"."""
    match format:
        case "console": renderer: LogRenderer = ConsoleRenderer(output=output or sys.stderr, colors=colors)
        case "json": renderer = JsonRenderer(output=output or sys.stdout)
        case "stdlib": renderer = StdlibRenderer(default_name=logger_name)
        case "none": renderer = NoOpRenderer()
        case _: raise ValueError(f"Unknown format: {format}. Use 'console', 'json', 'stdlib', or 'none'")
    use_renderer(renderer, level, logger_name=logger_name)
    return renderer


def use_renderer(renderer: LogRenderer, level: str = "INFO", *, logger_name: str = DEFAULT_LOGGER_NAME) -> None:
    """Install a custom renderer process-wide."""
    global _state
    _state = _LoggingState(renderer, getattr(logging, level.upper(), logging.INFO), logger_name or DEFAULT_LOGGER_NAME)


def reset_logging() -> None:
    """Return to the unconfigured state where entries are dropped."""
    global _state
    _state = _LoggingState()


def is_configured() -> bool:
    return _state.renderer is not None


def default_logger_name() -> str:
    """Logger name log_err emits under, as set by the last configure call."""
    return _state.logger_name


def get_logger(name: str | None = None, **initial_context: JsonValue) -> BoundLogger:
    """Get a structured logger with optional initial context."""
    return BoundLogger(context=dict(initial_context), name=name)


class log_context:
    """Context manager for scoped logging context. Adds key-value pairs to all log entries within the scope."""

    __slots__ = ("_ctx", "_token")

    def __init__(self, **kw: JsonValue) -> None:
        self._ctx: JsonDict = dict(kw)
        self._token: object | None = None

    def __enter__(self) -> log_context:
        self._token = _log_context.set({**_log_context.get(), **self._ctx})
        return self

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None,
                 exc_tb: TracebackType | None) -> None:
        if self._token is not None:
            _log_context.reset(self._token)  # type: ignore[arg-type]


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────


_COLORS = {"reset": "\033[0m", "bold": "\033[1m", "dim": "\033[2m", "red": "\033[31m",
           "green": "\033[32m", "yellow": "\033[33m", "blue": "\033[34m", "cyan": "\033[36m", "white": "\033[37m"}
_NO_COLORS = {k: "" for k in _COLORS}
_LEVEL_COLORS = {"debug": _COLORS["dim"], "info": _COLORS["green"], "warning": _COLORS["yellow"], "error": _COLORS["red"]}


def _level_name(level: int) -> str:
    """Convert logging level int to lowercase name."""
    return logging.getLevelName(level).lower()


def _format_value(v: object, c: dict[str, str]) -> str:
    """Format a value for console output."""
    match v:
        case str(): return f'{c["yellow"]}"{v}"{c["reset"]}'
        case bool(): return f'{c["blue"]}{str(v).lower()}{c["reset"]}'
        case int() | float(): return f'{c["blue"]}{v}{c["reset"]}'
        case dict(): return f'{c["dim"]}{{{len(v)} items}}{c["reset"]}'
        case list() | tuple(): return f'{c["dim"]}[{len(v)} items]{c["reset"]}'
        case _: return f'{c["white"]}{v!r}{c["reset"]}'
