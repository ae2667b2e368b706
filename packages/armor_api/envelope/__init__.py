"""Public envelope API for armor_api responses."""

from .builders import new_request, new_response
from .contracts import ErrorCollector, ResponseErrorer
from .envelope import RequestEnvelope, ResponseEnvelope
from .kv import decode_key_values
from .visibility import FilterReport, filter_errors, filter_report, kv_sentinel

__all__ = [
    "ErrorCollector",
    "FilterReport",
    "RequestEnvelope",
    "ResponseEnvelope",
    "ResponseErrorer",
    "decode_key_values",
    "filter_errors",
    "filter_report",
    "kv_sentinel",
    "new_request",
    "new_response",
]
