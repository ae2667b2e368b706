"""Public logging API for armor_api.

Wraps Python's ``logging`` module with stdout defaults and structured
context propagation.
"""

from .config import configure_logging, configure_logging_from_settings, get_logger
from .context import bind_context, clear_context, get_context, log_context

__all__ = [
    "bind_context",
    "clear_context",
    "configure_logging",
    "configure_logging_from_settings",
    "get_context",
    "get_logger",
    "log_context",
]
