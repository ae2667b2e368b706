"""Per-request structured fields for armor_api log lines.

Envelope construction binds fields such as the error code, severity and
redaction counts here so the formatters in ``config`` can attach them to
every record emitted inside the block. Storage is a ``ContextVar``, so
concurrent requests on threads or tasks never see each other's fields.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Mapping

_LOG_CONTEXT: ContextVar[dict[str, str]] = ContextVar("armor_log_context", default={})


def get_context() -> dict[str, str]:
    """Return a copy of the fields bound for the current request."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Add fields to the current context, stringified; ``None`` is skipped."""
    if not values:
        return
    current = _LOG_CONTEXT.get().copy()
    current.update({str(key): str(value) for key, value in values.items() if value is not None})
    _LOG_CONTEXT.set(current)


def clear_context(*keys: str) -> None:
    """Remove the named fields, or every field when none are named."""
    if not keys:
        _LOG_CONTEXT.set({})
        return
    current = _LOG_CONTEXT.get().copy()
    for key in keys:
        current.pop(key, None)
    _LOG_CONTEXT.set(current)


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind ``values`` for the duration of a block, then restore."""
    token = _LOG_CONTEXT.set(_LOG_CONTEXT.get().copy())
    try:
        bind_context(**dict(values))
        yield
    finally:
        _LOG_CONTEXT.reset(token)
