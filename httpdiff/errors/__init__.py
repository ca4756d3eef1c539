"""httpdiff error handling.

Setup failures are raised; assertion mismatches are returned as diff strings.
"""

from httpdiff.errors.base import (
    BodyReadError,
    ConfigValidationError,
    ErrorCode,
    ErrorContext,
    HTTPDiffError,
    RequestBuildError,
    RequestSendError,
    SetupError,
    ValidationError,
)

__all__ = [
    # Base exceptions
    "HTTPDiffError",
    "ErrorCode",
    "ErrorContext",
    # Setup errors
    "SetupError",
    "RequestBuildError",
    "RequestSendError",
    "BodyReadError",
    # Validation errors
    "ValidationError",
    "ConfigValidationError",
]
