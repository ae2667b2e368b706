"""Typed exceptions raised by envelope construction and key-value decoding."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    """Stable machine-readable names for armor_api failures."""

    CONFIG_UNAVAILABLE = "config_unavailable"
    EMPTY_RESPONSE = "empty_response"
    EMPTY_ERROR_LIST = "empty_error_list"
    EMPTY_KEY_VALUES = "empty_key_values"
    EMPTY_ENTRY = "empty_entry"
    MALFORMED_ENTRY = "malformed_entry"


@dataclass(frozen=True)
class ArmorApiError(Exception):
    """Base error type for armor_api failures."""

    kind: ClassVar[ErrorKind]

    message: str

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message


@dataclass(frozen=True)
class ConfigUnavailableError(ArmorApiError):
    """Debug level could not be resolved while building a response."""

    kind: ClassVar[ErrorKind] = ErrorKind.CONFIG_UNAVAILABLE


@dataclass(frozen=True)
class KeyValueDecodeError(ArmorApiError):
    """Base error for key-value decoding failures."""


@dataclass(frozen=True)
class EmptyResponseError(KeyValueDecodeError):
    """No response envelope was given to decode."""

    kind: ClassVar[ErrorKind] = ErrorKind.EMPTY_RESPONSE


@dataclass(frozen=True)
class EmptyErrorListError(KeyValueDecodeError):
    """Response envelope carries no error entries."""

    kind: ClassVar[ErrorKind] = ErrorKind.EMPTY_ERROR_LIST


@dataclass(frozen=True)
class EmptyKeyValuesError(KeyValueDecodeError):
    """Response envelope carries no key-value entries."""

    kind: ClassVar[ErrorKind] = ErrorKind.EMPTY_KEY_VALUES


@dataclass(frozen=True)
class EmptyEntryError(KeyValueDecodeError):
    """A key-value entry has no message, typically a redaction sentinel."""

    kind: ClassVar[ErrorKind] = ErrorKind.EMPTY_ENTRY

    index: int = -1


@dataclass(frozen=True)
class MalformedEntryError(KeyValueDecodeError):
    """A key-value entry message lacks the key/value separator."""

    kind: ClassVar[ErrorKind] = ErrorKind.MALFORMED_ENTRY

    index: int = -1
    entry_message: str = ""
