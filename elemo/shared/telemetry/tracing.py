"""Span helpers for cached repositories and the cache coordinator.

Decorator operations are wrapped with ``traced`` and cache primitives with
``TracedOperation``; both set ERROR status and record the exception on
failure, OK otherwise, and end the span on every exit path.
"""

import inspect
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

_TRACER_NAME = "elemo.persistence"

# Argument names recorded on spans as ``arg.<name>``. Anything else (patches,
# entities, emails, passwords) is never recorded.
_SAFE_SPAN_ATTR_KEYS = frozenset({
    "id", "offset", "limit", "key", "kind", "completed",
    "belongs_to", "created_by", "owner", "owner_id", "user_id", "org_id",
    "namespace_id", "project_id", "issue_id", "role_id", "member_id",
    "label_id", "subject", "target", "source",
})


def _tracer() -> trace.Tracer:
    return trace.get_tracer(_TRACER_NAME)


@contextmanager
def _span_outcome(span: trace.Span) -> Iterator[None]:
    """Mark span OK, or ERROR with the exception recorded, then re-raise."""
    try:
        yield
    except Exception as e:
        span.set_status(Status(StatusCode.ERROR, str(e)))
        span.record_exception(e)
        raise
    span.set_status(Status(StatusCode.OK))


def _record_args(
    span: trace.Span, attributes: dict | None, kwargs: dict[str, Any]
) -> None:
    for key, value in (attributes or {}).items():
        span.set_attribute(key, value)
    for key, value in kwargs.items():
        if key.lower() in _SAFE_SPAN_ATTR_KEYS:
            span.set_attribute(f"arg.{key}", str(value))


def traced(
    operation_name: str | None = None,
    attributes: dict | None = None,
) -> Callable:
    """Run the decorated function (sync or async) inside a span.

    Args:
        operation_name: Span name; defaults to ``module.qualname``.
        attributes: Static attributes set on every span.
    """

    def decorator(func: Callable) -> Callable:
        span_name = operation_name or f"{func.__module__}.{func.__qualname__}"

        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with _tracer().start_as_current_span(span_name) as span:
                    _record_args(span, attributes, kwargs)
                    with _span_outcome(span):
                        return await func(*args, **kwargs)

            return async_wrapper

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with _tracer().start_as_current_span(span_name) as span:
                _record_args(span, attributes, kwargs)
                with _span_outcome(span):
                    return func(*args, **kwargs)

        return sync_wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Set attributes on the current span if it is recording."""
    span = trace.get_current_span()
    if span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)


def get_trace_id() -> str | None:
    """Return the current trace id as 32 hex chars, or None outside a span."""
    ctx = trace.get_current_span().get_span_context()
    if ctx.is_valid:
        return format(ctx.trace_id, "032x")
    return None


class TracedOperation:
    """Span as a (sync or async) context manager.

    The span is current inside the block, so instrumented Redis commands
    issued there become its children.
    """

    def __init__(self, operation_name: str, attributes: dict | None = None) -> None:
        self.operation_name = operation_name
        self.attributes = attributes or {}
        self.span: trace.Span | None = None
        self._scope: Any = None
        self._outcome: Any = None

    def __enter__(self) -> "TracedOperation":
        self._scope = _tracer().start_as_current_span(self.operation_name)
        self.span = self._scope.__enter__()
        for key, value in self.attributes.items():
            self.span.set_attribute(key, value)
        self._outcome = _span_outcome(self.span)
        self._outcome.__enter__()
        return self

    def __exit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        try:
            self._outcome.__exit__(exc_type, exc_val, exc_tb)
        finally:
            self._scope.__exit__(exc_type, exc_val, exc_tb)

    async def __aenter__(self) -> "TracedOperation":
        return self.__enter__()

    async def __aexit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        self.__exit__(exc_type, exc_val, exc_tb)
