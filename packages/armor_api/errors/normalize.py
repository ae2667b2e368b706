"""Exception normalization utilities for error entries."""

from __future__ import annotations

from . import codes
from .factories import private_error, public_error
from .types import ErrorEntry, Severity


def exception_to_entry(
    exc: Exception,
    *,
    code: int | None = None,
    public: bool = False,
) -> ErrorEntry:
    """Normalize a Python exception into an ``ErrorEntry``.

    The entry carries ``str(exc)`` as its message, falling back to the
    exception type name. Without an explicit ``code`` the code and severity
    are picked from the exception type.
    """
    message = str(exc) or type(exc).__name__
    default_code, severity = _classify(exc)
    factory = public_error if public else private_error
    return factory(default_code if code is None else code, message, severity=severity)


def _classify(exc: Exception) -> tuple[int, Severity]:
    """Map an exception type onto a default code and severity."""
    if isinstance(exc, ValueError):
        return codes.INVALID_ARGUMENT, Severity.WARN

    if isinstance(exc, KeyError):
        return codes.NOT_FOUND, Severity.WARN

    if isinstance(exc, PermissionError):
        return codes.PERMISSION_DENIED, Severity.WARN

    if isinstance(exc, TimeoutError):
        return codes.DEPENDENCY_TIMEOUT, Severity.ERROR

    if isinstance(exc, ConnectionError):
        return codes.DEPENDENCY_UNAVAILABLE, Severity.ERROR

    return codes.UNEXPECTED_EXCEPTION, Severity.FATAL
