"""Canonical error entry types for API responses.

An ``ErrorEntry`` is one reported problem attached to a response envelope.
Only ``code`` and ``message`` ever reach the wire; ``public`` and ``severity``
are server-side attributes consumed by the visibility filter and by logging.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer

from .codes import KV_ERROR_CODE


class Severity(IntEnum):
    """Ordered severity levels carried by error entries."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    PANIC = 5

    @property
    def log_level(self) -> int:
        """Return the stdlib ``logging`` level for this severity."""
        return _LOG_LEVELS[self]


_LOG_LEVELS = {
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.FATAL: logging.CRITICAL,
    Severity.PANIC: logging.CRITICAL,
}


class ErrorEntry(BaseModel):
    """Structured error object carried in response envelopes."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: int = Field(alias="Code", ge=0)
    message: str = Field(default="", alias="Message")
    public: bool = Field(default=False, exclude=True)
    severity: Severity = Field(default=Severity.ERROR, exclude=True)

    @field_validator("message", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        """Treat an absent message as the empty string."""
        return "" if value is None else value

    @model_serializer(mode="wrap")
    def _omit_empty_message(self, handler: Any) -> dict[str, Any]:
        """Drop ``Message`` from serialized output when it is empty."""
        data = handler(self)
        if not self.message:
            data.pop("Message", None)
            data.pop("message", None)
        return data

    @property
    def has_message(self) -> bool:
        """Return ``True`` when a non-empty message is present."""
        return self.message != ""

    @property
    def is_key_value(self) -> bool:
        """Return ``True`` when the entry uses the reserved key-value code."""
        return self.code == KV_ERROR_CODE

    def redacted(self) -> "ErrorEntry":
        """Return a copy keeping only ``code`` and ``severity``."""
        return ErrorEntry(code=self.code, severity=self.severity)
