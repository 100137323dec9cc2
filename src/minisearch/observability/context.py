"""Context propagation for trace correlation across async boundaries."""

from __future__ import annotations

from contextvars import ContextVar
from uuid import uuid4


# Per-task trace and span ids picked up by JsonFormatter
trace_context: ContextVar[dict[str, str] | None] = ContextVar("trace_context", default=None)


def get_trace_context() -> dict[str, str]:
    """Get the current trace ids, minting a fresh pair outside any span."""
    ctx = trace_context.get()
    if ctx is None:
        ctx = {"trace_id": uuid4().hex, "span_id": uuid4().hex[:16]}
        trace_context.set(ctx)
    return ctx


def set_trace_context(trace_id: str, span_id: str) -> None:
    """Bind trace and span ids to the current async context."""
    trace_context.set({"trace_id": trace_id, "span_id": span_id})
