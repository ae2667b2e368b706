"""Constructors for response and request envelopes."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Iterable, TypeVar

from packages.armor_api.config import DebugLevelSource
from packages.armor_api.errors import ConfigUnavailableError, ErrorEntry
from packages.armor_api.logging import fields, get_logger, log_context

from .contracts import ResponseErrorer
from .envelope import RequestEnvelope, ResponseEnvelope
from .visibility import filter_report


T = TypeVar("T")

logger = get_logger(__name__)


def new_response(
    *,
    config: DebugLevelSource | None,
    success: bool,
    payload: T | None = None,
    errorer: ResponseErrorer | None = None,
    errors: Iterable[ErrorEntry] = (),
    now: datetime | None = None,
) -> ResponseEnvelope[T]:
    """Build a response envelope with visibility-filtered errors.

    Explicit ``errors`` come first, followed by ``errorer``'s standing
    errors. Raises ``ConfigUnavailableError`` when the debug level cannot be
    resolved from ``config``.
    """
    debug_level = _resolve_debug_level(config)

    combined = list(errors)
    if errorer is not None:
        combined.extend(errorer.response_errors())

    report = filter_report(combined, debug_level=debug_level)
    if not report.debug_mode:
        _log_redacted(combined)

    with log_context(
        {
            fields.EVENT: fields.RESPONSE_BUILT_EVENT,
            fields.SUCCESS: success,
            fields.DEBUG_LEVEL: debug_level,
            fields.ERRORS_IN: len(combined),
            fields.ERRORS_OUT: len(report.errors),
            fields.REDACTED: report.redacted,
            fields.KV_SUPPRESSED: report.kv_suppressed,
        }
    ):
        logger.debug("response envelope built")

    return ResponseEnvelope(
        success=success,
        errors=report.errors,
        payload=payload,
        time=_epoch_seconds(now),
    )


def new_request(payload: T | None = None, *, now: datetime | None = None) -> RequestEnvelope[T]:
    """Build a request envelope stamped with the current time."""
    return RequestEnvelope(payload=payload, time=_epoch_seconds(now))


def _resolve_debug_level(config: DebugLevelSource | None) -> int:
    """Read the debug level, mapping every failure to ``ConfigUnavailableError``."""
    if config is None:
        raise ConfigUnavailableError(message="debug level configuration is unavailable")

    lookup = getattr(config, "server_debugging_level", None)
    if not callable(lookup):
        raise ConfigUnavailableError(
            message=f"{type(config).__name__} does not provide server_debugging_level"
        )

    try:
        level = lookup()
    except Exception as exc:
        raise ConfigUnavailableError(
            message=f"debug level lookup failed: {exc}"
        ) from exc

    if isinstance(level, bool) or not isinstance(level, int) or level < 0:
        raise ConfigUnavailableError(message=f"invalid debug level: {level!r}")
    return level


def _log_redacted(entries: Iterable[ErrorEntry]) -> None:
    """Log private messages that production mode strips from the response."""
    for entry in entries:
        if entry.public or not entry.has_message:
            continue
        with log_context(
            {
                fields.EVENT: fields.ERROR_REDACTED_EVENT,
                fields.ERROR_CODE: entry.code,
                fields.SEVERITY: entry.severity.name,
            }
        ):
            logger.log(entry.severity.log_level, "redacted response error: %s", entry.message)


def _epoch_seconds(now: datetime | None) -> int:
    """Return whole seconds since the epoch for ``now`` or the current time."""
    moment = datetime.now(UTC) if now is None else now
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return int(moment.timestamp())
