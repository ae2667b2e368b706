"""Tests for structured logging configuration and context helpers."""

from __future__ import annotations

import json
import logging
from typing import Iterator

import pytest

from packages.armor_api.config import LoggingSettings
from packages.armor_api.logging import (
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_settings,
    get_context,
    get_logger,
    log_context,
)
from packages.armor_api.logging.config import JsonFormatter, PlainFormatter


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Drop handlers installed by the test and clear context."""
    root = logging.getLogger()
    level = root.level
    clear_context()
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, (JsonFormatter, PlainFormatter)):
            root.removeHandler(handler)
    root.setLevel(level)
    clear_context()


def test_bind_and_clear_context() -> None:
    """bind_context should stringify values and skip ``None``."""
    bind_context(request_id=12, skipped=None)

    assert get_context() == {"request_id": "12"}

    clear_context("request_id")
    assert get_context() == {}


def test_log_context_is_scoped_to_block() -> None:
    """log_context should restore prior context on exit."""
    bind_context(service="armor")

    with log_context({"error_code": 7}):
        assert get_context() == {"service": "armor", "error_code": "7"}

    assert get_context() == {"service": "armor"}


def test_configure_logging_emits_json_with_context(capsys: pytest.CaptureFixture[str]) -> None:
    """JSON output should include core fields and bound context."""
    configure_logging(level="DEBUG", json_output=True, service="armor", environment="test")

    with log_context({"error_code": 7}):
        get_logger("armor.test").warning("redacted %s", "entry")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "armor.test"
    assert payload["message"] == "redacted entry"
    assert payload["service"] == "armor"
    assert payload["environment"] == "test"
    assert payload["error_code"] == "7"


def test_configure_logging_replaces_existing_handlers() -> None:
    """Repeated configuration should leave a single stdout handler."""
    configure_logging(json_output=False)
    configure_logging(json_output=False)

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, PlainFormatter)


def test_configure_logging_from_settings_applies_level_and_format() -> None:
    """LoggingSettings should drive level and formatter selection."""
    configure_logging_from_settings(LoggingSettings(level="ERROR", json_output=True))

    root = logging.getLogger()
    assert root.level == logging.ERROR
    assert isinstance(root.handlers[0].formatter, JsonFormatter)
    assert get_context()["service"] == "armor"


def test_plain_formatter_appends_sorted_context() -> None:
    """Plain output should end with ``key=value`` pairs."""
    record = logging.LogRecord("armor", logging.INFO, __file__, 1, "hello", None, None)
    record.context = {"b": "2", "a": "1"}

    assert PlainFormatter().format(record).endswith("hello a=1 b=2")


def test_json_formatter_uses_record_time_and_bound_fields() -> None:
    """JSON lines should be stamped with the record's creation time."""
    record = logging.LogRecord("armor", logging.ERROR, __file__, 1, "redacted", None, None)
    record.created = 1_767_268_800.0
    record.context = {"error_code": "7"}

    payload = json.loads(JsonFormatter().format(record))

    assert payload["timestamp"] == "2026-01-01T12:00:00+00:00"
    assert payload["error_code"] == "7"
    assert payload["level"] == "ERROR"
