"""Assertion helpers for test code."""

from httpdiff.tools.assertions import (
    DiffAssertionError,
    assert_error_message,
    assert_no_diff,
    assert_request_matches,
    assert_response_matches,
    assert_strings_equal,
)

__all__ = [
    "DiffAssertionError",
    "assert_no_diff",
    "assert_strings_equal",
    "assert_error_message",
    "assert_request_matches",
    "assert_response_matches",
]
