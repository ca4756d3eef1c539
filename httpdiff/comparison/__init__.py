"""Comparison engine.

Every function here returns a diff string: "" when the values match,
otherwise a human-readable description of the mismatch.

Functions:
    compare_strings: first point of divergence between two strings
    check_error_message: error message prefix check
    compare_requests: request against an expected RequestModel
    compare_responses: response against an expected ResponseModel
"""

from httpdiff.comparison.errors import check_error_message
from httpdiff.comparison.http import (
    REQUEST_MISMATCH,
    RESPONSE_MISMATCH,
    compare_requests,
    compare_responses,
)
from httpdiff.comparison.strings import compare_strings

__all__ = [
    "compare_strings",
    "check_error_message",
    "compare_requests",
    "compare_responses",
    "REQUEST_MISMATCH",
    "RESPONSE_MISMATCH",
]
