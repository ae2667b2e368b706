"""Canonical logging field names for structured log records."""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EVENT = "event"

# Response envelope fields.
SUCCESS = "success"
DEBUG_LEVEL = "debug_level"
ERROR_CODE = "error_code"
SEVERITY = "severity"
ERRORS_IN = "errors_in"
ERRORS_OUT = "errors_out"
REDACTED = "redacted"
KV_SUPPRESSED = "kv_suppressed"

# Event names.
RESPONSE_BUILT_EVENT = "response_built"
ERROR_REDACTED_EVENT = "error_redacted"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
