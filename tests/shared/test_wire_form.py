"""Tests for the JSON wire form of envelopes and error entries."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from packages.armor_api.envelope import RequestEnvelope, ResponseEnvelope
from packages.armor_api.errors import ErrorEntry, Severity, private_error, public_error


def test_error_entry_wire_form_hides_public_and_severity() -> None:
    """Only Code and Message should be serialized."""
    entry = public_error(5, "nope", severity=Severity.PANIC)

    assert entry.model_dump(mode="json", by_alias=True) == {"Code": 5, "Message": "nope"}


def test_error_entry_wire_form_omits_empty_message() -> None:
    """An empty message should not appear on the wire."""
    assert ErrorEntry(code=5).model_dump(mode="json", by_alias=True) == {"Code": 5}


def test_response_wire_form_omits_empty_errors_and_payload() -> None:
    """Errors and Payload are optional on the wire, Success and Time are not."""
    envelope = ResponseEnvelope[None](success=True, time=10)

    assert envelope.to_wire() == {"Success": True, "Time": 10}
    assert json.loads(envelope.to_json()) == {"Success": True, "Time": 10}


def test_response_wire_form_includes_errors_and_payload_in_order() -> None:
    """Populated errors and payload are serialized in insertion order."""
    envelope = ResponseEnvelope[dict](
        success=False,
        errors=(public_error(1, "first"), ErrorEntry(code=2)),
        payload={"k": [1, 2]},
        time=10,
    )

    assert envelope.to_wire() == {
        "Success": False,
        "Errors": [{"Code": 1, "Message": "first"}, {"Code": 2}],
        "Payload": {"k": [1, 2]},
        "Time": 10,
    }


def test_response_from_json_parses_wire_data_as_private_entries() -> None:
    """Parsed entries carry no visibility or severity information."""
    raw = '{"Success":false,"Errors":[{"Code":1,"Message":"x"},{"Code":2}],"Time":10}'

    envelope = ResponseEnvelope.from_json(raw)

    assert envelope.success is False
    assert envelope.errors == (private_error(1, "x"), ErrorEntry(code=2))
    assert envelope.payload is None
    assert envelope.time == 10


def test_response_from_wire_accepts_missing_or_null_errors() -> None:
    """Omitted and null error lists both mean no errors."""
    assert ResponseEnvelope.from_wire({"Success": True, "Time": 1}).errors == ()
    assert ResponseEnvelope.from_wire({"Success": True, "Errors": None, "Time": 1}).errors == ()


def test_response_from_wire_rejects_missing_success() -> None:
    """Success is a required wire field."""
    with pytest.raises(ValidationError):
        ResponseEnvelope.from_wire({"Time": 1})


def test_response_survives_wire_round_trip() -> None:
    """Serializing then parsing should preserve wire-visible fields."""
    envelope = ResponseEnvelope[dict](
        success=True,
        errors=(private_error(3, "kept"),),
        payload={"a": "b"},
        time=99,
    )

    parsed = ResponseEnvelope[dict].from_json(envelope.to_json())

    assert parsed.to_wire() == envelope.to_wire()


def test_request_wire_form() -> None:
    """Requests mirror Payload and Time only."""
    assert RequestEnvelope[None](time=3).to_wire() == {"Time": 3}
    parsed = RequestEnvelope.from_wire({"Payload": [1], "Time": 3})
    assert parsed.payload == [1]
    assert parsed.has_payload is True
