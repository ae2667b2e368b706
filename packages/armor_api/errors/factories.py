"""Factory helpers for creating consistent error entries."""

from __future__ import annotations

from typing import Mapping

from .codes import KV_ERROR_CODE, KV_SEPARATOR
from .types import ErrorEntry, Severity


def public_error(
    code: int,
    message: str,
    *,
    severity: Severity = Severity.ERROR,
) -> ErrorEntry:
    """Create an entry whose message is always exposed to callers."""
    return ErrorEntry(code=code, message=message, public=True, severity=severity)


def private_error(
    code: int,
    message: str,
    *,
    severity: Severity = Severity.ERROR,
) -> ErrorEntry:
    """Create an entry whose message is only exposed in debug mode."""
    return ErrorEntry(code=code, message=message, public=False, severity=severity)


def key_value_error(
    key: str,
    value: str,
    *,
    public: bool = False,
    severity: Severity = Severity.INFO,
) -> ErrorEntry:
    """Encode one key/value pair as a reserved-code error entry.

    Raises ``ValueError`` for keys containing the separator, since the
    decoder splits on its first occurrence. An empty key is valid and decodes
    back to ``""``.
    """
    if KV_SEPARATOR in key:
        raise ValueError(f"key-value key must not contain {KV_SEPARATOR!r}: {key!r}")
    return ErrorEntry(
        code=KV_ERROR_CODE,
        message=f"{key}{KV_SEPARATOR}{value}",
        public=public,
        severity=severity,
    )


def key_value_errors(
    values: Mapping[str, str],
    *,
    public: bool = False,
    severity: Severity = Severity.INFO,
) -> list[ErrorEntry]:
    """Encode a mapping as key-value entries in mapping order."""
    return [
        key_value_error(key, value, public=public, severity=severity)
        for key, value in values.items()
    ]
