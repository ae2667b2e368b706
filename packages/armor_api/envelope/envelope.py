"""Response and request envelope models and their wire form.

Wire field names follow the established JSON contract: ``Success``,
``Errors``, ``Payload`` and ``Time`` for responses, ``Payload`` and ``Time``
for requests. Empty ``Errors`` and unset ``Payload`` are omitted.
"""

from __future__ import annotations

from typing import Any, Generic, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer

from packages.armor_api.errors import ErrorEntry

from .kv import decode_key_values


T = TypeVar("T")


class _WireModel(BaseModel):
    """Shared wire helpers for envelope models."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-compatible wire mapping."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        """Return the serialized wire form."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_wire(cls, data: Mapping[str, Any]):
        """Parse a wire mapping back into a model."""
        return cls.model_validate(dict(data))

    @classmethod
    def from_json(cls, raw: str | bytes):
        """Parse serialized wire data back into a model."""
        return cls.model_validate_json(raw)


class ResponseEnvelope(_WireModel, Generic[T]):
    """Uniform wrapper around every API response."""

    success: bool = Field(alias="Success")
    errors: tuple[ErrorEntry, ...] = Field(default=(), alias="Errors")
    payload: T | None = Field(default=None, alias="Payload")
    time: int = Field(alias="Time", ge=0)

    @field_validator("errors", mode="before")
    @classmethod
    def _null_errors_as_empty(cls, value: object) -> object:
        """Accept an explicit ``null`` error list."""
        return () if value is None else value

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler: Any) -> dict[str, Any]:
        """Drop empty ``Errors`` and unset ``Payload`` from output."""
        data = handler(self)
        if not self.errors:
            data.pop("Errors", None)
            data.pop("errors", None)
        if self.payload is None:
            data.pop("Payload", None)
            data.pop("payload", None)
        return data

    @property
    def ok(self) -> bool:
        """Return ``True`` when successful and no errors are present."""
        return self.success and len(self.errors) == 0

    @property
    def has_errors(self) -> bool:
        """Return ``True`` when at least one error entry is present."""
        return len(self.errors) > 0

    @property
    def has_payload(self) -> bool:
        """Return ``True`` when payload is present."""
        return self.payload is not None

    def key_values(self) -> dict[str, str]:
        """Decode key-value entries; see ``decode_key_values``."""
        return decode_key_values(self)


class RequestEnvelope(_WireModel, Generic[T]):
    """Uniform wrapper around an outbound API request."""

    payload: T | None = Field(default=None, alias="Payload")
    time: int = Field(alias="Time", ge=0)

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler: Any) -> dict[str, Any]:
        """Drop unset ``Payload`` from output."""
        data = handler(self)
        if self.payload is None:
            data.pop("Payload", None)
            data.pop("payload", None)
        return data

    @property
    def has_payload(self) -> bool:
        """Return ``True`` when payload is present."""
        return self.payload is not None
