"""HTTP helpers: build, send and read requests and responses.

Every helper raises a SetupError subclass on failure.
"""

from httpdiff.http.client import (
    must_new_request,
    must_read_all,
    must_send_request,
    request_to_model,
    response_to_model,
)

__all__ = [
    "must_new_request",
    "must_send_request",
    "must_read_all",
    "request_to_model",
    "response_to_model",
]
