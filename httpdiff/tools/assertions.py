"""Assertion helpers built on the diff functions.

Production test code usually only cares whether a diff is empty. These
helpers raise DiffAssertionError carrying the diff when it is not.

Example:
    >>> from httpdiff.tools import assert_response_matches
    >>>
    >>> response = must_send_request(must_new_request("GET", "http://api.local/health"))
    >>> assert_response_matches(response, ResponseModel(status_code=200, body="ok"))
"""

from __future__ import annotations

import httpx

from httpdiff.comparison import (
    check_error_message,
    compare_requests,
    compare_responses,
    compare_strings,
)
from httpdiff.core.models import RequestModel, ResponseModel
from httpdiff.errors import ErrorCode, HTTPDiffError


class DiffAssertionError(HTTPDiffError, AssertionError):
    """Raised when a diff is not empty.

    Attributes:
        diff: The diff text that triggered the failure.
    """

    error_code = ErrorCode.DIFF_FOUND
    default_message = "Values do not match"

    def __init__(self, diff: str, message: str | None = None) -> None:
        self.diff = diff
        text = f"{message}\n{diff}" if message else diff
        super().__init__(text)

    def __str__(self) -> str:
        return self.message


def assert_no_diff(diff: str, message: str | None = None) -> None:
    """Assert that a diff string is empty.

    Args:
        diff: Result of one of the compare/check functions.
        message: Optional line to print above the diff.

    Raises:
        DiffAssertionError: If ``diff`` is not empty.
    """
    if diff:
        raise DiffAssertionError(diff, message)


def assert_strings_equal(got: str | bytes, want: str | bytes, message: str | None = None) -> None:
    assert_no_diff(compare_strings(got, want), message)


def assert_error_message(
    err: BaseException | None,
    want_prefix: str,
    message: str | None = None,
) -> None:
    """Assert ``err`` starts with ``want_prefix`` (or is None when the prefix is "")."""
    assert_no_diff(check_error_message(err, want_prefix), message)


def assert_request_matches(
    got: RequestModel | httpx.Request,
    want: RequestModel,
    message: str | None = None,
) -> None:
    assert_no_diff(compare_requests(got, want), message)


def assert_response_matches(
    got: ResponseModel | httpx.Response,
    want: ResponseModel,
    message: str | None = None,
) -> None:
    assert_no_diff(compare_responses(got, want), message)
