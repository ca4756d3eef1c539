"""Core value types."""

from httpdiff.core.models import (
    RequestModel,
    ResponseModel,
    dump_requests,
    first_header_value,
    load_recorded_requests,
    normalize_headers,
)

__all__ = [
    "RequestModel",
    "ResponseModel",
    "dump_requests",
    "first_header_value",
    "load_recorded_requests",
    "normalize_headers",
]
