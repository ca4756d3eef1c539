"""httpdiff - test assertions for strings, errors and HTTP traffic.

Compare what your code produced with what you expected and get a
readable description of the first place they differ.

Quick Start:
    from httpdiff import RequestModel, compare_requests, RequestRecorder

    recorder = RequestRecorder()
    client = httpx.Client(transport=recorder.transport())
    # ... run the code under test with `client` ...

    want = RequestModel(method="POST", url="http://api.local/users", body="{}")
    diff = recorder.compare_last(want)
    assert diff == "", diff

Every compare/check function returns "" on a match. Setup failures
(unbuildable requests, unreachable servers, unreadable bodies) raise a
SetupError instead.
"""

from __future__ import annotations

__version__ = "0.1.0"

from httpdiff.comparison import (
    check_error_message,
    compare_requests,
    compare_responses,
    compare_strings,
)
from httpdiff.config import DiffConfig, load_config
from httpdiff.core import (
    RequestModel,
    ResponseModel,
    load_recorded_requests,
)
from httpdiff.errors import (
    BodyReadError,
    ConfigValidationError,
    HTTPDiffError,
    RequestBuildError,
    RequestSendError,
    SetupError,
)
from httpdiff.http import (
    must_new_request,
    must_read_all,
    must_send_request,
    request_to_model,
    response_to_model,
)
from httpdiff.mocking import MockedResponse, RequestRecorder
from httpdiff.tools import (
    DiffAssertionError,
    assert_error_message,
    assert_no_diff,
    assert_request_matches,
    assert_response_matches,
    assert_strings_equal,
)

__all__ = [
    "__version__",
    # Comparison
    "compare_strings",
    "check_error_message",
    "compare_requests",
    "compare_responses",
    # Models
    "RequestModel",
    "ResponseModel",
    "load_recorded_requests",
    # HTTP helpers
    "must_new_request",
    "must_send_request",
    "must_read_all",
    "request_to_model",
    "response_to_model",
    # Mocking
    "MockedResponse",
    "RequestRecorder",
    # Assertions
    "DiffAssertionError",
    "assert_no_diff",
    "assert_strings_equal",
    "assert_error_message",
    "assert_request_matches",
    "assert_response_matches",
    # Config
    "DiffConfig",
    "load_config",
    # Errors
    "HTTPDiffError",
    "SetupError",
    "RequestBuildError",
    "RequestSendError",
    "BodyReadError",
    "ConfigValidationError",
]
