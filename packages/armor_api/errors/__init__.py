"""Public error API for armor_api responses."""

from . import codes
from .codes import KV_ERROR_CODE, KV_SEPARATOR
from .exceptions import (
    ArmorApiError,
    ConfigUnavailableError,
    EmptyEntryError,
    EmptyErrorListError,
    EmptyKeyValuesError,
    EmptyResponseError,
    ErrorKind,
    KeyValueDecodeError,
    MalformedEntryError,
)
from .factories import key_value_error, key_value_errors, private_error, public_error
from .normalize import exception_to_entry
from .types import ErrorEntry, Severity

__all__ = [
    "ArmorApiError",
    "ConfigUnavailableError",
    "EmptyEntryError",
    "EmptyErrorListError",
    "EmptyKeyValuesError",
    "EmptyResponseError",
    "ErrorEntry",
    "ErrorKind",
    "KV_ERROR_CODE",
    "KV_SEPARATOR",
    "KeyValueDecodeError",
    "MalformedEntryError",
    "Severity",
    "codes",
    "exception_to_entry",
    "key_value_error",
    "key_value_errors",
    "private_error",
    "public_error",
]
