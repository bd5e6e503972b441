"""JSON aliases and error context tracking for the structured-context bridge.

Uses Pydantic models for validation/serialization.
"""

from __future__ import annotations

from typing import Annotated, Any, Union

import orjson
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_serializer

JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, list[Any], dict[str, Any]]  # Any for recursive slots
JsonDict = dict[str, Any]

_EMPTY_META: JsonDict = {}


def _metadata_key(metadata: JsonDict) -> bytes:
    """Hashable, order-independent form of metadata (values may be lists or dicts)."""
    return orjson.dumps(metadata, option=orjson.OPT_SORT_KEYS | orjson.OPT_NON_STR_KEYS, default=str)


class ErrorContext(BaseModel):
    """One annotation on an error: the operation that saw it, where, and with what."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="forbid", revalidate_instances="never")

    operation: Annotated[str, Field(min_length=1)]
    location: str = Field(default="", repr=False)
    metadata: JsonDict = Field(default_factory=dict, repr=False)

    def __str__(self) -> str:
        loc = f" at {self.location}" if self.location else ""
        meta = f" ({', '.join(f'{k}={v}' for k, v in self.metadata.items())})" if self.metadata else ""
        return f"{self.operation}{loc}{meta}"

    def __hash__(self) -> int:
        return hash((self.operation, self.location, _metadata_key(self.metadata)))


class ErrorTrace(BaseModel):
    """Error message plus the stack of contexts it passed through, innermost first."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="forbid", revalidate_instances="never")

    message: Annotated[str, Field(min_length=1)]
    contexts: tuple[ErrorContext, ...] = ()
    error_code: str | None = None
    details: str | None = Field(default=None, repr=False)  # Often verbose, hide from repr

    @field_serializer("contexts")
    def _serialize_contexts(self, v: tuple[ErrorContext, ...]) -> list[JsonDict]:
        return [ctx.model_dump() for ctx in v]

    @computed_field
    @property
    def depth(self) -> int:
        """Number of contexts in the trace."""
        return len(self.contexts)

    @computed_field
    @property
    def root_operation(self) -> str | None:
        """First operation in the trace (origin)."""
        return self.contexts[0].operation if self.contexts else None

    def __hash__(self) -> int:
        return hash((self.message, self.contexts, self.error_code))

    def with_context(self, ctx: ErrorContext) -> ErrorTrace:
        """Push context (returns new trace)."""
        return self.model_copy(update={"contexts": (*self.contexts, ctx)})

    def with_operation(self, operation: str, location: str = "", **metadata: JsonValue) -> ErrorTrace:
        """Push context built from operation info."""
        return self.with_context(context(operation, location, **metadata))

    def with_code(self, code: str) -> ErrorTrace:
        return self.model_copy(update={"error_code": code})

    def format(self, *, include_details: bool = False) -> str:
        """Format trace as human-readable string."""
        parts = [self.message]
        if self.error_code:
            parts.append(f" [{self.error_code}]")
        if self.contexts:
            parts.append("\nContext trace:\n" + "\n".join(f"  - {ctx}" for ctx in self.contexts))
        if include_details and self.details:
            parts.append(f"\nDetails:\n{self.details}")
        return "".join(parts)

    __str__ = format


# ═══════════════════════════════════════════════════════════════════════════════
# Helpers (model_construct skips validation)
# ═══════════════════════════════════════════════════════════════════════════════

_EMPTY_CONTEXTS: tuple[ErrorContext, ...] = ()


def context(operation: str, location: str = "", **metadata: JsonValue) -> ErrorContext:
    """Create ErrorContext concisely."""
    return ErrorContext.model_construct(operation=operation, location=location, metadata=metadata or _EMPTY_META)


def trace(message: str, *, code: str | None = None, details: str | None = None) -> ErrorTrace:
    """Create ErrorTrace concisely."""
    return ErrorTrace.model_construct(message=message, contexts=_EMPTY_CONTEXTS, error_code=code, details=details)

